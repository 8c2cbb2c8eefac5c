from enum import IntEnum, StrEnum


class Country(StrEnum):
    WEI = "魏"
    SHU = "蜀"
    WU = "吴"
    QUN = "群"


class StarTier(IntEnum):
    ONE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5


class EquipmentType(StrEnum):
    WEAPON = "weapon"
    ARMOR = "armor"
    TREASURE = "treasure"


class TeamAction(StrEnum):
    ADD = "add"
    REMOVE = "remove"


class EventType(StrEnum):
    PLAYER_REGISTER = "player_register"
    DAILY_SIGNIN = "daily_signin"
    GACHA_PULL = "gacha_pull"
    BATTLE_WIN = "battle_win"
    EVOLVE = "evolve"
    ADMIN_SET_CURRENCY = "admin_set_currency"
    ADMIN_REMOVE_GENERAL = "admin_remove_general"
    ADMIN_REMOVE_EQUIPMENT = "admin_remove_equipment"
