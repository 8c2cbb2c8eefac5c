from pydantic import BaseModel, Field


class PlayerCreate(BaseModel):
    name: str = Field(min_length=1, max_length=50)


class CurrencySet(BaseModel):
    """Schema for setting player currency to specific amounts."""

    gold: int = Field(ge=0, description="New gold amount (must be non-negative)")
    tokens: int = Field(ge=0, description="New token amount (must be non-negative)")
    reason: str = Field(min_length=1, max_length=255, description="Reason for setting currency")


class SigninRewards(BaseModel):
    gold: int
    tokens: int
    new_gold: int
    new_tokens: int
