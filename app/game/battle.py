import math
import random
from collections.abc import Sequence
from dataclasses import dataclass, field

from app.game import bonds
from app.game.power import power
from app.schemas.battle import WinPath
from app.schemas.roster import GeneralSnapshot
from app.schemas.team import BondEvaluation

PROC_BASE_CHANCE = 0.2
PROC_LUCK_DIVISOR = 500
PROC_BOOST = 0.4
ESCAPE_CHANCE = 0.2
EXP_PER_LEVEL = 100
DEFAULT_SKILL_NAME = "奋力一击"


@dataclass
class BattleComputation:
    raw_power: int
    bonds: BondEvaluation
    final_power: int
    win: bool
    win_path: WinPath | None
    log: list[str] = field(default_factory=list)


def proc_chance(luck: int) -> float:
    return PROC_BASE_CHANCE + luck / PROC_LUCK_DIVISOR


def roll_member_power(
    general: GeneralSnapshot, rng: random.Random, log: list[str]
) -> int:
    """Power of one member, boosted by 40% when their skill procs."""
    general_power = power(general)
    if rng.random() < proc_chance(general.luck):
        general_power += math.floor(general_power * PROC_BOOST)
        skill_name = general.skill_name or DEFAULT_SKILL_NAME
        log.append(f"{general.name} 发动了 【{skill_name}】! 战力激增!")
    return general_power


def decide_outcome(
    final_power: int, required_power: int, rng: random.Random
) -> tuple[bool, WinPath | None]:
    """Power decides first; the escape roll can only turn a loss into a win."""
    if final_power >= required_power:
        return True, WinPath.POWER
    if rng.random() > 1 - ESCAPE_CHANCE:
        return True, WinPath.FORTUNE
    return False, None


def compute_battle(
    team: Sequence[GeneralSnapshot], required_power: int, rng: random.Random
) -> BattleComputation:
    log: list[str] = []
    raw_power = sum(roll_member_power(member, rng, log) for member in team)

    evaluation = bonds.evaluate(team)
    final_power = math.floor(raw_power * evaluation.multiplier)

    win, win_path = decide_outcome(final_power, required_power, rng)
    return BattleComputation(
        raw_power=raw_power,
        bonds=evaluation,
        final_power=final_power,
        win=win,
        win_path=win_path,
        log=log,
    )


def exp_to_next_level(level: int) -> int:
    return level * EXP_PER_LEVEL


def gain_experience(level: int, exp: int, gained: int) -> tuple[int, int]:
    """Add experience and roll over as many levels as it pays for.

    Returns the new ``(level, exp)``; the threshold grows with each level.
    """
    exp += gained
    while exp >= exp_to_next_level(level):
        exp -= exp_to_next_level(level)
        level += 1
    return level, exp
