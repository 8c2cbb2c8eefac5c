from typing import Annotated

from fastapi import APIRouter, Depends

from app.schemas.common import APIResponse
from app.schemas.roster import Collection, InventoryItem, OwnedGeneralView
from app.services.equipment import EquipmentService
from app.services.general import GeneralService

router = APIRouter(prefix="/roster", tags=["roster"])


@router.get("/{player_id}/generals")
async def get_generals(
    player_id: int, service: Annotated[GeneralService, Depends()]
) -> APIResponse[list[OwnedGeneralView]]:
    generals = await service.get_player_generals(player_id)
    return APIResponse(data=generals)


@router.get("/{player_id}/equipments")
async def get_equipments(
    player_id: int, service: Annotated[EquipmentService, Depends()]
) -> APIResponse[list[InventoryItem]]:
    items = await service.get_inventory(player_id)
    return APIResponse(data=items)


@router.get("/{player_id}/collection")
async def get_collection(
    player_id: int, service: Annotated[GeneralService, Depends()]
) -> APIResponse[Collection]:
    collection = await service.get_collection(player_id)
    return APIResponse(data=collection)
