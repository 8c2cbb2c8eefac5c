import sqlmodel

from ._base import BaseModel


class GachaPull(BaseModel, table=True):
    """Log each individual gacha draw made by a player."""

    __tablename__: str = "gacha_pulls"

    id: int = sqlmodel.Field(primary_key=True, index=True, default=None)
    player_id: int = sqlmodel.Field(foreign_key="players.id", index=True)
    general_id: int = sqlmodel.Field(foreign_key="generals.id", index=True)
    stars: int
    was_pity: bool = sqlmodel.Field(default=False)
    """Whether the 5-star came from reaching the pity threshold"""
    was_duplicate: bool = sqlmodel.Field(default=False)
    """Whether the draw was converted into shards"""
