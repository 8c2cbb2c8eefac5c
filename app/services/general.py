from typing import Annotated

from fastapi import Depends
from loguru import logger
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.db import get_db
from app.core.enums import EventType
from app.core.errors import PreconditionError
from app.core.locks import player_transaction
from app.game.draw import SHARDS_PER_DUPLICATE
from app.game.power import power
from app.schemas.general import EvolveResponse
from app.schemas.roster import Collection, OwnedGeneralView
from app.services.roster import RosterStore

SHARDS_PER_EVOLUTION = SHARDS_PER_DUPLICATE


class GeneralService:
    def __init__(self, db: Annotated[AsyncSession, Depends(get_db)]) -> None:
        self.db = db
        self.roster = RosterStore(db)

    async def get_player_generals(self, player_id: int) -> list[OwnedGeneralView]:
        """All owned generals with their items, shard balance and power."""
        await self.roster.read_player(player_id)
        return [
            OwnedGeneralView(**general.model_dump(), power=power(general))
            for general in await self.roster.read_roster(player_id)
        ]

    async def get_collection(self, player_id: int) -> Collection:
        await self.roster.read_player(player_id)
        generals = await self.roster.read_roster(player_id)
        items = await self.roster.read_inventory(player_id)
        return Collection(
            general_ids=sorted({general.general_id for general in generals}),
            equipment_ids=sorted({equipment.id for _, equipment, _ in items}),
        )

    async def evolve(self, player_id: int, owned_general_id: int) -> EvolveResponse:
        """Spend 10 shards of a general's catalog entry to raise its evolution tier.

        Raises:
            NotFoundError: If the player does not own that general.
            PreconditionError: If fewer than 10 shards are available.
        """
        async with player_transaction(self.db, player_id):
            target = await self.roster.read_owned_general(player_id, owned_general_id)
            shards = await self.roster.read_shard(player_id, target.general_id)
            if shards < SHARDS_PER_EVOLUTION:
                logger.warning(
                    f"Player {player_id} cannot evolve {owned_general_id}: {shards} shards"
                )
                raise PreconditionError(f"碎片不足 (需要 {SHARDS_PER_EVOLUTION})")

            remaining = await self.roster.increment_shard(
                player_id, target.general_id, -SHARDS_PER_EVOLUTION
            )
            evolution = target.evolution + 1
            await self.roster.update_general_evolution(target.id, evolution)
            self.roster.log_event(
                player_id,
                EventType.EVOLVE,
                {"owned_general_id": target.id, "evolution": evolution, "shards_left": remaining},
            )

        logger.info(f"Player {player_id} evolved general {owned_general_id} to tier {evolution}")
        return EvolveResponse(
            owned_general_id=owned_general_id, evolution=evolution, remaining_shards=remaining
        )

    async def remove_general(self, player_id: int, owned_general_id: int) -> None:
        """Delete an owned general (admin). Its items go back to the bag."""
        async with player_transaction(self.db, player_id):
            owned = await self.roster.remove_owned_general(player_id, owned_general_id)
            self.roster.log_event(
                player_id,
                EventType.ADMIN_REMOVE_GENERAL,
                {"owned_general_id": owned_general_id, "general_id": owned.general_id},
            )
        logger.info(f"Removed general {owned_general_id} from player {player_id}")

    async def remove_equipment(self, player_id: int, owned_equipment_id: int) -> None:
        """Delete an owned item (admin)."""
        async with player_transaction(self.db, player_id):
            equipment = await self.roster.remove_owned_equipment(player_id, owned_equipment_id)
            self.roster.log_event(
                player_id,
                EventType.ADMIN_REMOVE_EQUIPMENT,
                {"owned_equipment_id": owned_equipment_id, "equipment_id": equipment.id},
            )
        logger.info(f"Removed equipment {owned_equipment_id} from player {player_id}")
