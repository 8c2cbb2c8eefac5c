from typing import Annotated

from fastapi import APIRouter, Depends

from app.schemas.common import APIResponse
from app.schemas.general import EvolveRequest, EvolveResponse
from app.services.general import GeneralService

router = APIRouter(prefix="/generals", tags=["generals"])


@router.post("/{player_id}/evolve")
async def evolve(
    player_id: int, request: EvolveRequest, service: Annotated[GeneralService, Depends()]
) -> APIResponse[EvolveResponse]:
    result = await service.evolve(player_id, request.owned_general_id)
    return APIResponse(data=result, message=f"Evolved to tier {result.evolution}")
