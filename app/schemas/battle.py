from enum import StrEnum

from pydantic import BaseModel, Field

from app.schemas.team import ActiveBond


class WinPath(StrEnum):
    POWER = "power"
    FORTUNE = "fortune"
    """Underpowered team saved by the escape roll"""


class BattleRewards(BaseModel):
    gold: int
    exp: int


class LevelUp(BaseModel):
    owned_general_id: int
    name: str
    from_level: int
    to_level: int


class DroppedEquipment(BaseModel):
    owned_id: int
    equipment_id: int
    name: str
    stars: int


class BattleResponse(BaseModel):
    campaign_id: int
    win: bool
    win_path: WinPath | None = None
    raw_power: int
    multiplier: float
    final_power: int
    required_power: int
    active_bonds: list[ActiveBond] = Field(default_factory=list)
    battle_log: list[str] = Field(default_factory=list)
    rewards: BattleRewards | None = None
    level_ups: list[LevelUp] = Field(default_factory=list)
    dropped_equipment: DroppedEquipment | None = None
