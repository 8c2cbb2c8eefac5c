import datetime

import sqlmodel

from ._base import BaseModel


class Player(BaseModel, table=True):
    __tablename__: str = "players"

    id: int = sqlmodel.Field(primary_key=True, index=True, default=None)
    name: str = sqlmodel.Field(max_length=50, unique=True, index=True)
    gold: int = sqlmodel.Field(default=0, ge=0)
    tokens: int = sqlmodel.Field(default=0, ge=0)
    """Gacha currency, one per draw"""
    pity_counter: int = sqlmodel.Field(default=0, ge=0)
    """Draws since the last 5-star general"""
    last_signin: datetime.date | None = sqlmodel.Field(default=None, nullable=True)
