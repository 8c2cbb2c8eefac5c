import random
from typing import Annotated

from fastapi import Depends
from loguru import logger
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.db import get_db
from app.core.enums import EventType
from app.core.errors import PreconditionError
from app.core.locks import player_transaction
from app.core.rng import get_rng
from app.game.battle import compute_battle, gain_experience
from app.models.campaign import Campaign
from app.schemas.battle import BattleResponse, BattleRewards, DroppedEquipment, LevelUp
from app.schemas.roster import GeneralSnapshot
from app.services.roster import MAX_CAMPAIGN_STARS, RosterStore

DROP_CHANCE = 0.2
DROP_MAX_STARS = 3


class BattleService:
    """Resolves campaign battles from the player's current team."""

    def __init__(
        self,
        db: Annotated[AsyncSession, Depends(get_db)],
        rng: Annotated[random.Random, Depends(get_rng)],
    ) -> None:
        self.db = db
        self.rng = rng
        self.roster = RosterStore(db)

    async def resolve_battle(self, player_id: int, campaign_id: int) -> BattleResponse:
        """Fight a campaign with the player's team.

        A win pays the campaign's gold, gives every member its experience, may
        drop a low-tier item and marks the campaign cleared. A loss changes
        nothing.

        Raises:
            NotFoundError: If the player or campaign does not exist.
            PreconditionError: If the player has no team.
        """
        async with player_transaction(self.db, player_id):
            await self.roster.read_player(player_id)
            campaign = await self.roster.read_campaign(campaign_id)
            team = await self.roster.read_team(player_id)
            if not team:
                raise PreconditionError("請先編組隊伍")

            outcome = compute_battle(team, campaign.required_power, self.rng)
            response = BattleResponse(
                campaign_id=campaign.id,
                win=outcome.win,
                win_path=outcome.win_path,
                raw_power=outcome.raw_power,
                multiplier=outcome.bonds.multiplier,
                final_power=outcome.final_power,
                required_power=campaign.required_power,
                active_bonds=outcome.bonds.active_bonds,
                battle_log=outcome.log,
            )

            if outcome.win:
                await self._grant_rewards(player_id, campaign, team, response)

        logger.info(
            f"Player {player_id} {'won' if response.win else 'lost'} campaign {campaign.name} "
            f"({response.final_power}/{campaign.required_power}, path={response.win_path})"
        )
        return response

    async def _grant_rewards(
        self,
        player_id: int,
        campaign: Campaign,
        team: list[GeneralSnapshot],
        response: BattleResponse,
    ) -> None:
        gold, tokens = await self.roster.read_player_currency(player_id)
        await self.roster.write_player_currency(player_id, gold + campaign.gold_reward, tokens)
        response.rewards = BattleRewards(gold=campaign.gold_reward, exp=campaign.exp_reward)

        for member in team:
            level, exp = gain_experience(member.level, member.exp, campaign.exp_reward)
            await self.roster.update_general_progress(member.owned_id, level, exp)
            if level > member.level:
                response.level_ups.append(
                    LevelUp(
                        owned_general_id=member.owned_id,
                        name=member.name,
                        from_level=member.level,
                        to_level=level,
                    )
                )

        if self.rng.random() < DROP_CHANCE:
            equipment = await self.roster.sample_catalog_equipment(DROP_MAX_STARS, self.rng)
            if equipment is not None:
                owned = await self.roster.create_owned_equipment(player_id, equipment.id)
                response.dropped_equipment = DroppedEquipment(
                    owned_id=owned.id,
                    equipment_id=equipment.id,
                    name=equipment.name,
                    stars=equipment.stars,
                )

        await self.roster.upsert_campaign_progress(player_id, campaign.id, MAX_CAMPAIGN_STARS)
        self.roster.log_event(
            player_id,
            EventType.BATTLE_WIN,
            {
                "campaign_id": campaign.id,
                "final_power": response.final_power,
                "win_path": response.win_path,
                "level_ups": len(response.level_ups),
                "dropped_equipment_id": (
                    response.dropped_equipment.equipment_id if response.dropped_equipment else None
                ),
            },
        )
