import sqlmodel

from ._base import BaseModel


class OwnedGeneral(BaseModel, table=True):
    __tablename__: str = "owned_generals"

    id: int = sqlmodel.Field(primary_key=True, index=True, default=None)
    player_id: int = sqlmodel.Field(foreign_key="players.id", index=True)
    general_id: int = sqlmodel.Field(foreign_key="generals.id", index=True)
    level: int = sqlmodel.Field(default=1, ge=1)
    exp: int = sqlmodel.Field(default=0, ge=0)
    """Always below level * 100 after a battle settles"""
    is_in_team: bool = False
    evolution: int = sqlmodel.Field(default=0, ge=0)
