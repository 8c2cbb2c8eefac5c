import sqlmodel

from ._base import BaseModel


class Campaign(BaseModel, table=True):
    __tablename__: str = "campaigns"

    id: int = sqlmodel.Field(primary_key=True, index=True, default=None)
    name: str = sqlmodel.Field(max_length=50, unique=True)
    required_power: int = sqlmodel.Field(ge=0)
    gold_reward: int = sqlmodel.Field(ge=0)
    exp_reward: int = sqlmodel.Field(ge=0)
