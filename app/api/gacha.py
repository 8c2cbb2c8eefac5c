from typing import Annotated

from fastapi import APIRouter, Depends

from app.schemas.common import APIResponse
from app.schemas.gacha import GachaDrawResponse, GachaPityResponse
from app.services.gacha import GachaService

router = APIRouter(prefix="/gacha", tags=["gacha"])


@router.post("/{player_id}/single")
async def draw_single(
    player_id: int, service: Annotated[GachaService, Depends()]
) -> APIResponse[GachaDrawResponse]:
    result = await service.draw_single(player_id)
    return APIResponse(data=result)


@router.post("/{player_id}/ten")
async def draw_ten(
    player_id: int, service: Annotated[GachaService, Depends()]
) -> APIResponse[GachaDrawResponse]:
    result = await service.draw_ten(player_id)
    return APIResponse(data=result)


@router.get("/{player_id}/pity")
async def get_pity(
    player_id: int, service: Annotated[GachaService, Depends()]
) -> APIResponse[GachaPityResponse]:
    pity = await service.get_pity(player_id)
    return APIResponse(data=pity)
