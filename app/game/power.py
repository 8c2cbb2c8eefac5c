import math

from app.schemas.roster import GeneralSnapshot

EVOLUTION_STEP = 0.1


def evolution_factor(evolution: int) -> float:
    return 1 + EVOLUTION_STEP * evolution


def base_power(general: GeneralSnapshot) -> float:
    """Power from stats, level and evolution only, ignoring equipment."""
    stats = general.strength + general.intellect + general.leadership
    return stats * general.level * evolution_factor(general.evolution)


def equipment_power(general: GeneralSnapshot) -> int:
    return sum(item.stat_bonus for item in general.equipments)


def power(general: GeneralSnapshot) -> int:
    """Combat power of one owned general.

    ``floor((str + int + ldr) * level * (1 + 0.1 * evolution) + sum(stat_bonus))``
    """
    return math.floor(base_power(general) + equipment_power(general))
