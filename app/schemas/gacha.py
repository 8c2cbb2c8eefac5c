from pydantic import BaseModel

from app.core.enums import Country


class GachaDrawResult(BaseModel):
    """Result of a single gacha draw."""

    general_id: int
    general_name: str
    stars: int
    country: Country
    was_pity: bool
    was_duplicate: bool
    """True when the draw was converted into shards instead of a new general"""
    owned_general_id: int | None = None
    shard_count: int | None = None


class GachaDrawResponse(BaseModel):
    """Response containing all draw results."""

    draws: list[GachaDrawResult]
    remaining_tokens: int
    current_pity: int


class GachaPityResponse(BaseModel):
    """Response for checking pity count."""

    current_pity: int
    max_pity: int = 60
