from typing import Annotated

from fastapi import APIRouter, Depends

from app.schemas.battle import BattleResponse
from app.schemas.campaign import CampaignView
from app.schemas.common import APIResponse
from app.services.battle import BattleService
from app.services.campaign import CampaignService

router = APIRouter(prefix="/campaigns", tags=["campaigns"])


@router.get("/{player_id}")
async def get_campaigns(
    player_id: int, service: Annotated[CampaignService, Depends()]
) -> APIResponse[list[CampaignView]]:
    campaigns = await service.get_campaigns(player_id)
    return APIResponse(data=campaigns)


@router.post("/{player_id}/{campaign_id}/battle")
async def battle(
    player_id: int, campaign_id: int, service: Annotated[BattleService, Depends()]
) -> APIResponse[BattleResponse]:
    result = await service.resolve_battle(player_id, campaign_id)
    return APIResponse(data=result, message="勝利" if result.win else "戰敗")
