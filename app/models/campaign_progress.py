import sqlmodel

from ._base import BaseModel


class CampaignProgress(BaseModel, table=True):
    __tablename__: str = "campaign_progress"
    __table_args__ = (
        sqlmodel.UniqueConstraint("player_id", "campaign_id", name="uq_progress_player_campaign"),
    )

    id: int = sqlmodel.Field(primary_key=True, index=True, default=None)
    player_id: int = sqlmodel.Field(foreign_key="players.id", index=True)
    campaign_id: int = sqlmodel.Field(foreign_key="campaigns.id", index=True)
    stars: int = sqlmodel.Field(default=0, ge=0, le=3)
    """0 = unattempted, 3 = cleared"""
