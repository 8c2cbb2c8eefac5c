import math
from typing import Annotated

from fastapi import Depends
from loguru import logger
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.db import get_db
from app.core.enums import TeamAction
from app.core.errors import PreconditionError
from app.core.locks import player_transaction
from app.game import bonds
from app.game.power import base_power, power
from app.schemas.team import (
    AutoTeamResponse,
    BondEvaluation,
    TeamChangeResponse,
    TeamPowerResponse,
)
from app.services.roster import RosterStore

MAX_TEAM_SIZE = 5


class TeamService:
    def __init__(self, db: Annotated[AsyncSession, Depends(get_db)]) -> None:
        self.db = db
        self.roster = RosterStore(db)

    async def add_to_team(self, player_id: int, owned_general_id: int) -> TeamChangeResponse:
        """Put an owned general on the team.

        Raises:
            NotFoundError: If the player does not own that general.
            PreconditionError: If the team is full or already fields the same general.
        """
        async with player_transaction(self.db, player_id):
            team = await self.roster.read_team(player_id)
            if len(team) >= MAX_TEAM_SIZE:
                raise PreconditionError(f"隊伍已滿 (最多 {MAX_TEAM_SIZE} 人)")

            target = await self.roster.read_owned_general(player_id, owned_general_id)
            if any(member.owned_id == target.id for member in team):
                raise PreconditionError("此武將已在隊伍中")
            if any(member.general_id == target.general_id for member in team):
                raise PreconditionError("隊伍中不能有重複的武將")

            await self.roster.set_team_flag(target.id, in_team=True)

        logger.info(f"Player {player_id} added general {owned_general_id} to team")
        return TeamChangeResponse(
            action=TeamAction.ADD, owned_general_id=owned_general_id, team_size=len(team) + 1
        )

    async def remove_from_team(self, player_id: int, owned_general_id: int) -> TeamChangeResponse:
        async with player_transaction(self.db, player_id):
            target = await self.roster.read_owned_general(player_id, owned_general_id)
            await self.roster.set_team_flag(target.id, in_team=False)
            team = await self.roster.read_team(player_id)

        logger.info(f"Player {player_id} removed general {owned_general_id} from team")
        return TeamChangeResponse(
            action=TeamAction.REMOVE, owned_general_id=owned_general_id, team_size=len(team)
        )

    async def auto_team(self, player_id: int) -> AutoTeamResponse:
        """Field the strongest distinct generals by stats, level and evolution."""
        async with player_transaction(self.db, player_id):
            await self.roster.read_player(player_id)
            roster = await self.roster.read_roster(player_id)
            for member in roster:
                if member.is_in_team:
                    await self.roster.set_team_flag(member.owned_id, in_team=False)

            picked: list[int] = []
            seen_generals: set[int] = set()
            for member in sorted(roster, key=base_power, reverse=True):
                if len(picked) >= MAX_TEAM_SIZE:
                    break
                if member.general_id in seen_generals:
                    continue
                picked.append(member.owned_id)
                seen_generals.add(member.general_id)

            for owned_id in picked:
                await self.roster.set_team_flag(owned_id, in_team=True)

        logger.info(f"Player {player_id} auto-formed a team of {len(picked)}")
        return AutoTeamResponse(team_size=len(picked), owned_general_ids=picked)

    async def evaluate_bonds(self, player_id: int) -> BondEvaluation:
        await self.roster.read_player(player_id)
        team = await self.roster.read_team(player_id)
        return bonds.evaluate(team)

    async def compute_team_power(self, player_id: int) -> TeamPowerResponse:
        """Team power with bonds applied, as shown before a battle (no skill procs)."""
        await self.roster.read_player(player_id)
        team = await self.roster.read_team(player_id)
        raw_power = sum(power(member) for member in team)
        evaluation = bonds.evaluate(team)
        return TeamPowerResponse(
            members=len(team),
            raw_power=raw_power,
            multiplier=evaluation.multiplier,
            final_power=math.floor(raw_power * evaluation.multiplier),
            active_bonds=evaluation.active_bonds,
        )
