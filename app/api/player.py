from typing import Annotated

from fastapi import APIRouter, Depends

from app.models.player import Player
from app.schemas.common import APIResponse
from app.schemas.player import CurrencySet, PlayerCreate, SigninRewards
from app.services.general import GeneralService
from app.services.player import PlayerService

router = APIRouter(prefix="/players", tags=["players"])


@router.post("/")
async def register_player(
    player: PlayerCreate, service: Annotated[PlayerService, Depends()]
) -> APIResponse[Player]:
    created_player = await service.register(player.name)
    return APIResponse(data=created_player, message="Player registered successfully")


@router.get("/{player_id}")
async def get_player(
    player_id: int, service: Annotated[PlayerService, Depends()]
) -> APIResponse[Player]:
    player = await service.get_player(player_id)
    return APIResponse(data=player)


@router.post("/{player_id}/signin")
async def daily_signin(
    player_id: int, service: Annotated[PlayerService, Depends()]
) -> APIResponse[SigninRewards]:
    rewards = await service.daily_signin(player_id)
    return APIResponse(data=rewards)


@router.post("/{player_id}/currency")
async def set_currency(
    player_id: int, currency_set: CurrencySet, service: Annotated[PlayerService, Depends()]
) -> APIResponse[Player]:
    """Set a player's gold and tokens to specific amounts (admin)."""
    player = await service.set_currency(
        player_id, currency_set.gold, currency_set.tokens, currency_set.reason
    )
    return APIResponse(
        data=player, message=f"Set currency to {currency_set.gold} gold, {currency_set.tokens} tokens"
    )


@router.delete("/{player_id}/generals/{owned_general_id}")
async def remove_general(
    player_id: int, owned_general_id: int, service: Annotated[GeneralService, Depends()]
) -> APIResponse[None]:
    """Remove an owned general (admin)."""
    await service.remove_general(player_id, owned_general_id)
    return APIResponse(message="General removed successfully")


@router.delete("/{player_id}/equipments/{owned_equipment_id}")
async def remove_equipment(
    player_id: int, owned_equipment_id: int, service: Annotated[GeneralService, Depends()]
) -> APIResponse[None]:
    """Remove an owned item (admin)."""
    await service.remove_equipment(player_id, owned_equipment_id)
    return APIResponse(message="Equipment removed successfully")
