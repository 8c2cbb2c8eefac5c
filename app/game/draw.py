import random
from typing import NamedTuple

from app.core.enums import StarTier

PITY_THRESHOLD = 60
TOP_TIER_RATE = 2
"""Percent chance of a 5-star draw"""
HIGH_TIER_CUTOFF = 12
"""Rolls below this (and not 5-star) give a 4-star"""
SHARDS_PER_DUPLICATE = 10


class TierRoll(NamedTuple):
    tier: StarTier
    pity_counter: int
    was_pity: bool
    """5-star forced by the pity threshold rather than by the roll"""


def roll_tier(rng: random.Random, pity_counter: int) -> TierRoll:
    """Pick the star tier of one draw and advance the pity counter.

    The counter is bumped first, so a draw made at 59 always lands a 5-star.
    """
    roll = rng.random() * 100
    pity_counter += 1

    if pity_counter >= PITY_THRESHOLD or roll < TOP_TIER_RATE:
        return TierRoll(StarTier.FIVE, 0, roll >= TOP_TIER_RATE)
    if roll < HIGH_TIER_CUTOFF:
        return TierRoll(StarTier.FOUR, pity_counter, False)
    return TierRoll(StarTier.THREE, pity_counter, False)
