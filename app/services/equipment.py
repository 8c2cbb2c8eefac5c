from typing import Annotated

from fastapi import Depends
from loguru import logger
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.db import get_db
from app.core.enums import EquipmentType
from app.core.locks import player_transaction
from app.schemas.roster import EquipmentSnapshot, InventoryItem
from app.services.roster import RosterStore, to_equipment_snapshot


class EquipmentService:
    """Attaches owned items to owned generals, one item per slot type."""

    def __init__(self, db: Annotated[AsyncSession, Depends(get_db)]) -> None:
        self.db = db
        self.roster = RosterStore(db)

    async def get_inventory(self, player_id: int) -> list[InventoryItem]:
        await self.roster.read_player(player_id)
        return [
            InventoryItem(
                **to_equipment_snapshot(owned, equipment).model_dump(), equipped_by=holder_name
            )
            for owned, equipment, holder_name in await self.roster.read_inventory(player_id)
        ]

    async def equip(
        self, player_id: int, owned_general_id: int, owned_equipment_id: int
    ) -> list[EquipmentSnapshot]:
        """Attach an item, bumping whatever the general held in that slot back to the bag.

        An item held by another general is moved over.
        """
        async with player_transaction(self.db, player_id):
            general = await self.roster.read_owned_general(player_id, owned_general_id)
            item, equipment = await self.roster.read_owned_equipment(player_id, owned_equipment_id)

            for held, held_equipment in await self.roster.read_equipped(general.id):
                if held.id != item.id and held_equipment.type == equipment.type:
                    await self.roster.attach_equipment(held, None)

            await self.roster.attach_equipment(item, general.id)
            equipped = await self.roster.read_equipped(general.id)

        logger.info(f"Player {player_id} equipped {equipment} on general {owned_general_id}")
        return [to_equipment_snapshot(owned, eq) for owned, eq in equipped]

    async def auto_equip(self, player_id: int, owned_general_id: int) -> list[EquipmentSnapshot]:
        """Give a general the best free item of every slot type.

        Items are ranked by stat bonus, then stars.
        """
        async with player_transaction(self.db, player_id):
            general = await self.roster.read_owned_general(player_id, owned_general_id)
            await self.roster.unequip_all(general.id)

            for slot in EquipmentType:
                best = await self.roster.best_unequipped(player_id, slot)
                if best is not None:
                    await self.roster.attach_equipment(best, general.id)

            equipped = await self.roster.read_equipped(general.id)

        logger.info(
            f"Player {player_id} auto-equipped general {owned_general_id} with {len(equipped)} items"
        )
        return [to_equipment_snapshot(owned, eq) for owned, eq in equipped]

    async def unequip(self, player_id: int, owned_general_id: int) -> int:
        """Return every item of a general to the bag. Returns how many were removed."""
        async with player_transaction(self.db, player_id):
            general = await self.roster.read_owned_general(player_id, owned_general_id)
            count = await self.roster.unequip_all(general.id)

        logger.info(f"Player {player_id} unequipped {count} items from general {owned_general_id}")
        return count
