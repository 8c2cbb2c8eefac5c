from typing import Annotated

from fastapi import Depends
from loguru import logger
from sqlalchemy.exc import IntegrityError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.config import settings
from app.core.db import get_db
from app.core.enums import EventType
from app.core.errors import PreconditionError
from app.core.locks import player_transaction
from app.models.equipment import Equipment
from app.models.general import General
from app.models.player import Player
from app.schemas.player import SigninRewards
from app.services.roster import RosterStore
from app.utils.misc import get_utc8_today


class PlayerService:
    def __init__(self, db: Annotated[AsyncSession, Depends(get_db)]) -> None:
        self.db = db
        self.roster = RosterStore(db)

    async def get_player(self, player_id: int) -> Player:
        return await self.roster.read_player(player_id)

    async def register(self, name: str) -> Player:
        """Create a player with the starting purse, general and item."""
        existing = await self.db.exec(select(Player).where(Player.name == name))
        if existing.first() is not None:
            raise PreconditionError("玩家名稱已被使用")

        player = Player(
            name=name, gold=settings.new_player_gold, tokens=settings.new_player_tokens
        )
        self.db.add(player)
        try:
            await self.db.flush()
        except IntegrityError:
            # Lost a race with a concurrent registration of the same name
            await self.db.rollback()
            raise PreconditionError("玩家名稱已被使用") from None

        general = (
            await self.db.exec(select(General).where(General.name == settings.starter_general_name))
        ).first()
        if general is not None:
            await self.roster.create_owned_general(player.id, general.id)
        else:
            logger.warning(f"Starter general {settings.starter_general_name} is not in the catalog")

        equipment = (
            await self.db.exec(
                select(Equipment).where(Equipment.name == settings.starter_equipment_name)
            )
        ).first()
        if equipment is not None:
            await self.roster.create_owned_equipment(player.id, equipment.id)
        else:
            logger.warning(
                f"Starter equipment {settings.starter_equipment_name} is not in the catalog"
            )

        self.roster.log_event(player.id, EventType.PLAYER_REGISTER, {"name": name})
        await self.db.commit()
        await self.db.refresh(player)

        logger.info(f"Registered player {name} (#{player.id})")
        return player

    async def daily_signin(self, player_id: int) -> SigninRewards:
        """Grant the daily gold and tokens, once per UTC+8 day."""
        today = get_utc8_today()
        async with player_transaction(self.db, player_id):
            player = await self.roster.read_player(player_id)
            if player.last_signin == today:
                raise PreconditionError("今天已經簽到過了")

            player.last_signin = today
            player = await self.roster.write_player_currency(
                player_id,
                player.gold + settings.daily_signin_gold,
                player.tokens + settings.daily_signin_tokens,
            )
            self.roster.log_event(
                player_id,
                EventType.DAILY_SIGNIN,
                {"gold": settings.daily_signin_gold, "tokens": settings.daily_signin_tokens},
            )

        logger.info(f"Player {player_id} signed in for {today}")
        return SigninRewards(
            gold=settings.daily_signin_gold,
            tokens=settings.daily_signin_tokens,
            new_gold=player.gold,
            new_tokens=player.tokens,
        )

    async def set_currency(self, player_id: int, gold: int, tokens: int, reason: str) -> Player:
        """Set a player's gold and tokens to specific amounts (admin) and log the event."""
        async with player_transaction(self.db, player_id):
            old_gold, old_tokens = await self.roster.read_player_currency(player_id)
            player = await self.roster.write_player_currency(player_id, gold, tokens)
            self.roster.log_event(
                player_id,
                EventType.ADMIN_SET_CURRENCY,
                {
                    "gold": gold,
                    "tokens": tokens,
                    "reason": f"Set from {old_gold}/{old_tokens} to {gold}/{tokens}: {reason}",
                },
            )

        logger.info(f"Set currency of player {player_id} to {gold} gold, {tokens} tokens")
        return player
