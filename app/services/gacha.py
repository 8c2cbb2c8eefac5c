import random
from typing import Annotated

from fastapi import Depends
from loguru import logger
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.db import get_db
from app.core.enums import EventType, StarTier
from app.core.errors import InsufficientResourceError
from app.core.locks import player_transaction
from app.core.rng import get_rng
from app.game.draw import PITY_THRESHOLD, SHARDS_PER_DUPLICATE, roll_tier
from app.models.gacha_pull import GachaPull
from app.schemas.gacha import GachaDrawResponse, GachaDrawResult, GachaPityResponse
from app.services.roster import RosterStore

SINGLE_DRAW_COST = 1
TEN_DRAW_COST = 10


class GachaService:
    def __init__(
        self,
        db: Annotated[AsyncSession, Depends(get_db)],
        rng: Annotated[random.Random, Depends(get_rng)],
    ) -> None:
        self.db = db
        self.rng = rng
        self.roster = RosterStore(db)

    async def get_pity(self, player_id: int) -> GachaPityResponse:
        """Get the current pity count of a player."""
        pity = await self.roster.read_pity_counter(player_id)
        return GachaPityResponse(current_pity=pity, max_pity=PITY_THRESHOLD)

    async def draw_one(self, player_id: int, pity_counter: int) -> tuple[GachaDrawResult, int]:
        """Perform a single draw without charging for it.

        Returns:
            Tuple of (draw result, pity counter after the draw)
        """
        tier, new_pity, was_pity = roll_tier(self.rng, pity_counter)
        general = await self.roster.sample_catalog_by_tier(tier, self.rng)

        owned = await self.roster.find_owned_general(player_id, general.id)
        owned_general_id: int | None = None
        shard_count: int | None = None
        if owned is not None:
            shard_count = await self.roster.increment_shard(
                player_id, general.id, SHARDS_PER_DUPLICATE
            )
        else:
            owned_general_id = (await self.roster.create_owned_general(player_id, general.id)).id

        was_duplicate = owned is not None
        self.db.add(
            GachaPull(
                player_id=player_id,
                general_id=general.id,
                stars=tier,
                was_pity=was_pity,
                was_duplicate=was_duplicate,
            )
        )
        if tier == StarTier.FIVE:
            logger.info(
                f"Player {player_id} drew 5-star {general} (pity={was_pity}, at {pity_counter})"
            )

        result = GachaDrawResult(
            general_id=general.id,
            general_name=general.name,
            stars=tier,
            country=general.country,
            was_pity=was_pity,
            was_duplicate=was_duplicate,
            owned_general_id=owned_general_id,
            shard_count=shard_count,
        )
        return result, new_pity

    async def _draw(self, player_id: int, count: int, cost: int) -> GachaDrawResponse:
        async with player_transaction(self.db, player_id):
            gold, tokens = await self.roster.read_player_currency(player_id)
            if tokens < cost:
                logger.warning(f"Player {player_id} cannot afford {count} draws ({tokens} tokens)")
                raise InsufficientResourceError("代幣", owned=tokens, required=cost)

            # Charged up front, the whole batch commits or none of it does
            await self.roster.write_player_currency(player_id, gold, tokens - cost)

            pity = await self.roster.read_pity_counter(player_id)
            draws: list[GachaDrawResult] = []
            for _ in range(count):
                result, pity = await self.draw_one(player_id, pity)
                draws.append(result)

            await self.roster.write_pity_counter(player_id, pity)
            self.roster.log_event(
                player_id,
                EventType.GACHA_PULL,
                {
                    "count": count,
                    "cost": cost,
                    "general_ids": [draw.general_id for draw in draws],
                    "pity": pity,
                },
            )

        logger.info(
            f"Player {player_id} drew {count}: "
            f"{', '.join(f'{d.general_name}({d.stars}★)' for d in draws)}"
        )
        return GachaDrawResponse(draws=draws, remaining_tokens=tokens - cost, current_pity=pity)

    async def draw_single(self, player_id: int) -> GachaDrawResponse:
        return await self._draw(player_id, 1, SINGLE_DRAW_COST)

    async def draw_ten(self, player_id: int) -> GachaDrawResponse:
        """Ten sequential draws, each one carrying the pity counter to the next."""
        return await self._draw(player_id, 10, TEN_DRAW_COST)
