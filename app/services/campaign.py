from typing import Annotated

from fastapi import Depends
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.db import get_db
from app.schemas.campaign import CampaignView
from app.services.roster import RosterStore


class CampaignService:
    def __init__(self, db: Annotated[AsyncSession, Depends(get_db)]) -> None:
        self.db = db
        self.roster = RosterStore(db)

    async def get_campaigns(self, player_id: int) -> list[CampaignView]:
        """Every campaign with the player's rating on it."""
        await self.roster.read_player(player_id)
        progress = await self.roster.read_campaign_progress(player_id)
        return [
            CampaignView(
                id=campaign.id,
                name=campaign.name,
                required_power=campaign.required_power,
                gold_reward=campaign.gold_reward,
                exp_reward=campaign.exp_reward,
                passed=campaign.id in progress,
                stars=progress.get(campaign.id, 0),
            )
            for campaign in await self.roster.read_campaigns()
        ]
