from typing import Annotated

from fastapi import APIRouter, Depends

from app.core.errors import PreconditionError
from app.schemas.common import APIResponse
from app.schemas.general import EquipRequest
from app.schemas.roster import EquipmentSnapshot
from app.services.equipment import EquipmentService

router = APIRouter(prefix="/equip", tags=["equipment"])


@router.post("/{player_id}/equip")
async def equip(
    player_id: int, request: EquipRequest, service: Annotated[EquipmentService, Depends()]
) -> APIResponse[list[EquipmentSnapshot]]:
    if request.owned_equipment_id is None:
        raise PreconditionError("請選擇裝備")
    equipped = await service.equip(player_id, request.owned_general_id, request.owned_equipment_id)
    return APIResponse(data=equipped)


@router.post("/{player_id}/auto")
async def auto_equip(
    player_id: int, request: EquipRequest, service: Annotated[EquipmentService, Depends()]
) -> APIResponse[list[EquipmentSnapshot]]:
    equipped = await service.auto_equip(player_id, request.owned_general_id)
    return APIResponse(data=equipped)


@router.post("/{player_id}/unequip")
async def unequip(
    player_id: int, request: EquipRequest, service: Annotated[EquipmentService, Depends()]
) -> APIResponse[None]:
    count = await service.unequip(player_id, request.owned_general_id)
    return APIResponse(message=f"Unequipped {count} items")
