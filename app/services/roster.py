import random
from collections.abc import Sequence
from typing import Annotated, Any

from fastapi import Depends
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.db import get_db
from app.core.enums import EquipmentType, EventType
from app.core.errors import NotFoundError
from app.models.campaign import Campaign
from app.models.campaign_progress import CampaignProgress
from app.models.equipment import Equipment
from app.models.event_log import EventLog
from app.models.general import General
from app.models.general_shard import GeneralShard
from app.models.owned_equipment import OwnedEquipment
from app.models.owned_general import OwnedGeneral
from app.models.player import Player
from app.schemas.roster import EquipmentSnapshot, GeneralSnapshot

MAX_CAMPAIGN_STARS = 3


class RosterStore:
    """Reads and writes a player's persisted game state.

    Nothing here commits: callers group the calls of one logical operation and
    commit them together, so a failure half way leaves the roster untouched.
    """

    def __init__(self, db: Annotated[AsyncSession, Depends(get_db)]) -> None:
        self.db = db

    # Player

    async def read_player(self, player_id: int) -> Player:
        result = await self.db.exec(select(Player).where(Player.id == player_id))
        player = result.first()
        if player is None:
            raise NotFoundError("玩家", player_id)
        return player

    async def read_player_currency(self, player_id: int) -> tuple[int, int]:
        player = await self.read_player(player_id)
        return player.gold, player.tokens

    async def write_player_currency(self, player_id: int, gold: int, tokens: int) -> Player:
        player = await self.read_player(player_id)
        player.gold = gold
        player.tokens = tokens
        self.db.add(player)
        await self.db.flush()
        return player

    async def read_pity_counter(self, player_id: int) -> int:
        player = await self.read_player(player_id)
        return player.pity_counter

    async def write_pity_counter(self, player_id: int, value: int) -> None:
        player = await self.read_player(player_id)
        player.pity_counter = value
        self.db.add(player)
        await self.db.flush()

    # Generals

    async def _snapshots(self, player_id: int, *, team_only: bool) -> list[GeneralSnapshot]:
        stmt = (
            select(OwnedGeneral, General, GeneralShard.count)
            .join(General, col(OwnedGeneral.general_id) == General.id)
            .outerjoin(
                GeneralShard,
                (col(GeneralShard.player_id) == OwnedGeneral.player_id)
                & (col(GeneralShard.general_id) == OwnedGeneral.general_id),
            )
            .where(OwnedGeneral.player_id == player_id)
            .order_by(col(OwnedGeneral.id))
        )
        if team_only:
            stmt = stmt.where(OwnedGeneral.is_in_team == True)  # noqa: E712
        rows = (await self.db.exec(stmt)).all()

        equipped = await self._equipped_items([owned.id for owned, _, _ in rows])
        return [
            GeneralSnapshot(
                owned_id=owned.id,
                general_id=general.id,
                name=general.name,
                country=general.country,
                stars=general.stars,
                strength=general.strength,
                intellect=general.intellect,
                leadership=general.leadership,
                luck=general.luck,
                level=owned.level,
                exp=owned.exp,
                evolution=owned.evolution,
                is_in_team=owned.is_in_team,
                skill_name=general.skill_name,
                skill_desc=general.skill_desc,
                shard_count=shard_count or 0,
                equipments=equipped.get(owned.id, []),
            )
            for owned, general, shard_count in rows
        ]

    async def _equipped_items(
        self, owned_general_ids: Sequence[int]
    ) -> dict[int, list[EquipmentSnapshot]]:
        if not owned_general_ids:
            return {}
        result = await self.db.exec(
            select(OwnedEquipment, Equipment)
            .join(Equipment, col(OwnedEquipment.equipment_id) == Equipment.id)
            .where(col(OwnedEquipment.owned_general_id).in_(owned_general_ids))
            .order_by(col(OwnedEquipment.id))
        )
        equipped: dict[int, list[EquipmentSnapshot]] = {}
        for owned, equipment in result.all():
            assert owned.owned_general_id is not None
            equipped.setdefault(owned.owned_general_id, []).append(
                to_equipment_snapshot(owned, equipment)
            )
        return equipped

    async def read_roster(self, player_id: int) -> list[GeneralSnapshot]:
        return await self._snapshots(player_id, team_only=False)

    async def read_team(self, player_id: int) -> list[GeneralSnapshot]:
        return await self._snapshots(player_id, team_only=True)

    async def read_owned_general(self, player_id: int, owned_general_id: int) -> OwnedGeneral:
        result = await self.db.exec(
            select(OwnedGeneral).where(
                OwnedGeneral.id == owned_general_id, OwnedGeneral.player_id == player_id
            )
        )
        owned = result.first()
        if owned is None:
            raise NotFoundError("武將", owned_general_id)
        return owned

    async def find_owned_general(self, player_id: int, general_id: int) -> OwnedGeneral | None:
        """First owned instance of a catalog general, if the player has one."""
        result = await self.db.exec(
            select(OwnedGeneral)
            .where(OwnedGeneral.player_id == player_id, OwnedGeneral.general_id == general_id)
            .order_by(col(OwnedGeneral.id))
        )
        return result.first()

    async def create_owned_general(self, player_id: int, general_id: int) -> OwnedGeneral:
        owned = OwnedGeneral(player_id=player_id, general_id=general_id, level=1, evolution=0)
        self.db.add(owned)
        await self.db.flush()
        return owned

    async def update_general_progress(self, owned_general_id: int, level: int, exp: int) -> None:
        owned = await self._get_owned_general(owned_general_id)
        owned.level = level
        owned.exp = exp
        self.db.add(owned)
        await self.db.flush()

    async def update_general_evolution(self, owned_general_id: int, tier: int) -> None:
        owned = await self._get_owned_general(owned_general_id)
        owned.evolution = tier
        self.db.add(owned)
        await self.db.flush()

    async def set_team_flag(self, owned_general_id: int, *, in_team: bool) -> None:
        owned = await self._get_owned_general(owned_general_id)
        owned.is_in_team = in_team
        self.db.add(owned)
        await self.db.flush()

    async def remove_owned_general(self, player_id: int, owned_general_id: int) -> OwnedGeneral:
        """Delete an owned general, returning its items to the bag first."""
        owned = await self.read_owned_general(player_id, owned_general_id)
        await self.unequip_all(owned.id)
        await self.db.flush()
        await self.db.delete(owned)
        await self.db.flush()
        return owned

    async def _get_owned_general(self, owned_general_id: int) -> OwnedGeneral:
        owned = await self.db.get(OwnedGeneral, owned_general_id)
        if owned is None:
            raise NotFoundError("武將", owned_general_id)
        return owned

    # Shards

    async def _shard_row(self, player_id: int, general_id: int) -> GeneralShard | None:
        result = await self.db.exec(
            select(GeneralShard).where(
                GeneralShard.player_id == player_id, GeneralShard.general_id == general_id
            )
        )
        return result.first()

    async def read_shard(self, player_id: int, general_id: int) -> int:
        shard = await self._shard_row(player_id, general_id)
        return shard.count if shard else 0

    async def increment_shard(self, player_id: int, general_id: int, delta: int) -> int:
        """Add ``delta`` (may be negative) to a shard balance and return the new count."""
        shard = await self._shard_row(player_id, general_id)
        if shard is None:
            shard = GeneralShard(player_id=player_id, general_id=general_id, count=0)
        shard.count += delta
        self.db.add(shard)
        await self.db.flush()
        return shard.count

    # Equipment

    async def create_owned_equipment(self, player_id: int, equipment_id: int) -> OwnedEquipment:
        owned = OwnedEquipment(player_id=player_id, equipment_id=equipment_id)
        self.db.add(owned)
        await self.db.flush()
        return owned

    async def read_owned_equipment(
        self, player_id: int, owned_equipment_id: int
    ) -> tuple[OwnedEquipment, Equipment]:
        result = await self.db.exec(
            select(OwnedEquipment, Equipment)
            .join(Equipment, col(OwnedEquipment.equipment_id) == Equipment.id)
            .where(OwnedEquipment.id == owned_equipment_id, OwnedEquipment.player_id == player_id)
        )
        row = result.first()
        if row is None:
            raise NotFoundError("裝備", owned_equipment_id)
        return row

    async def read_inventory(
        self, player_id: int
    ) -> Sequence[tuple[OwnedEquipment, Equipment, str | None]]:
        """All owned items with the name of the general holding each one."""
        result = await self.db.exec(
            select(OwnedEquipment, Equipment, General.name)
            .join(Equipment, col(OwnedEquipment.equipment_id) == Equipment.id)
            .outerjoin(OwnedGeneral, col(OwnedEquipment.owned_general_id) == OwnedGeneral.id)
            .outerjoin(General, col(OwnedGeneral.general_id) == General.id)
            .where(OwnedEquipment.player_id == player_id)
            .order_by(col(Equipment.stars).desc(), col(Equipment.stat_bonus).desc())
        )
        return result.all()

    async def read_equipped(
        self, owned_general_id: int
    ) -> Sequence[tuple[OwnedEquipment, Equipment]]:
        result = await self.db.exec(
            select(OwnedEquipment, Equipment)
            .join(Equipment, col(OwnedEquipment.equipment_id) == Equipment.id)
            .where(OwnedEquipment.owned_general_id == owned_general_id)
        )
        return result.all()

    async def best_unequipped(
        self, player_id: int, slot: EquipmentType
    ) -> OwnedEquipment | None:
        result = await self.db.exec(
            select(OwnedEquipment)
            .join(Equipment, col(OwnedEquipment.equipment_id) == Equipment.id)
            .where(
                OwnedEquipment.player_id == player_id,
                OwnedEquipment.owned_general_id == None,  # noqa: E711
                Equipment.type == slot,
            )
            .order_by(
                col(Equipment.stat_bonus).desc(),
                col(Equipment.stars).desc(),
                col(OwnedEquipment.id),
            )
        )
        return result.first()

    async def attach_equipment(self, owned: OwnedEquipment, owned_general_id: int | None) -> None:
        owned.owned_general_id = owned_general_id
        self.db.add(owned)
        await self.db.flush()

    async def unequip_all(self, owned_general_id: int) -> int:
        count = 0
        for owned, _ in await self.read_equipped(owned_general_id):
            await self.attach_equipment(owned, None)
            count += 1
        return count

    async def remove_owned_equipment(self, player_id: int, owned_equipment_id: int) -> Equipment:
        owned, equipment = await self.read_owned_equipment(player_id, owned_equipment_id)
        await self.db.delete(owned)
        await self.db.flush()
        return equipment

    # Campaigns

    async def read_campaign(self, campaign_id: int) -> Campaign:
        campaign = await self.db.get(Campaign, campaign_id)
        if campaign is None:
            raise NotFoundError("關卡", campaign_id)
        return campaign

    async def read_campaigns(self) -> Sequence[Campaign]:
        result = await self.db.exec(select(Campaign).order_by(col(Campaign.id)))
        return result.all()

    async def read_campaign_progress(self, player_id: int) -> dict[int, int]:
        result = await self.db.exec(
            select(CampaignProgress).where(CampaignProgress.player_id == player_id)
        )
        return {progress.campaign_id: progress.stars for progress in result.all()}

    async def upsert_campaign_progress(self, player_id: int, campaign_id: int, stars: int) -> int:
        """Record a rating, never lowering a better one nor exceeding the cap."""
        result = await self.db.exec(
            select(CampaignProgress).where(
                CampaignProgress.player_id == player_id, CampaignProgress.campaign_id == campaign_id
            )
        )
        progress = result.first()
        if progress is None:
            progress = CampaignProgress(player_id=player_id, campaign_id=campaign_id, stars=0)
        progress.stars = min(max(progress.stars, stars), MAX_CAMPAIGN_STARS)
        self.db.add(progress)
        await self.db.flush()
        return progress.stars

    # Catalog

    async def read_general(self, general_id: int) -> General:
        general = await self.db.get(General, general_id)
        if general is None:
            raise NotFoundError("武將", general_id)
        return general

    async def sample_catalog_by_tier(self, tier: int, rng: random.Random) -> General:
        result = await self.db.exec(
            select(General).where(General.stars == tier).order_by(col(General.id))
        )
        pool = result.all()
        if not pool:
            raise NotFoundError(f"{tier} 星武將")
        return rng.choice(pool)

    async def sample_catalog_equipment(
        self, max_stars: int, rng: random.Random
    ) -> Equipment | None:
        result = await self.db.exec(
            select(Equipment).where(Equipment.stars <= max_stars).order_by(col(Equipment.id))
        )
        pool = result.all()
        return rng.choice(pool) if pool else None

    # Events

    def log_event(self, player_id: int, event_type: EventType, context: dict[str, Any]) -> None:
        self.db.add(EventLog(player_id=player_id, event_type=event_type, context=context))


def to_equipment_snapshot(owned: OwnedEquipment, equipment: Equipment) -> EquipmentSnapshot:
    return EquipmentSnapshot(
        owned_id=owned.id,
        equipment_id=equipment.id,
        name=equipment.name,
        type=equipment.type,
        stat_bonus=equipment.stat_bonus,
        stars=equipment.stars,
        owned_general_id=owned.owned_general_id,
    )
