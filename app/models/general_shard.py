import sqlmodel

from ._base import BaseModel


class GeneralShard(BaseModel, table=True):
    """Duplicate draws of a general, spent 10 at a time to evolve it."""

    __tablename__: str = "general_shards"
    __table_args__ = (
        sqlmodel.UniqueConstraint("player_id", "general_id", name="uq_shard_player_general"),
    )

    id: int = sqlmodel.Field(primary_key=True, index=True, default=None)
    player_id: int = sqlmodel.Field(foreign_key="players.id", index=True)
    general_id: int = sqlmodel.Field(foreign_key="generals.id", index=True)
    count: int = sqlmodel.Field(default=0, ge=0)
