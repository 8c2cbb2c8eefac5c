from typing import Annotated

from fastapi import APIRouter, Depends

from app.schemas.common import APIResponse
from app.schemas.team import (
    AutoTeamResponse,
    BondEvaluation,
    TeamChangeRequest,
    TeamChangeResponse,
    TeamPowerResponse,
)
from app.services.team import TeamService

router = APIRouter(prefix="/team", tags=["team"])


@router.post("/{player_id}/add")
async def add_to_team(
    player_id: int, request: TeamChangeRequest, service: Annotated[TeamService, Depends()]
) -> APIResponse[TeamChangeResponse]:
    result = await service.add_to_team(player_id, request.owned_general_id)
    return APIResponse(data=result)


@router.post("/{player_id}/remove")
async def remove_from_team(
    player_id: int, request: TeamChangeRequest, service: Annotated[TeamService, Depends()]
) -> APIResponse[TeamChangeResponse]:
    result = await service.remove_from_team(player_id, request.owned_general_id)
    return APIResponse(data=result)


@router.post("/{player_id}/auto")
async def auto_team(
    player_id: int, service: Annotated[TeamService, Depends()]
) -> APIResponse[AutoTeamResponse]:
    result = await service.auto_team(player_id)
    return APIResponse(data=result)


@router.get("/{player_id}/power")
async def get_team_power(
    player_id: int, service: Annotated[TeamService, Depends()]
) -> APIResponse[TeamPowerResponse]:
    result = await service.compute_team_power(player_id)
    return APIResponse(data=result)


@router.get("/{player_id}/bonds")
async def get_team_bonds(
    player_id: int, service: Annotated[TeamService, Depends()]
) -> APIResponse[BondEvaluation]:
    result = await service.evaluate_bonds(player_id)
    return APIResponse(data=result)
