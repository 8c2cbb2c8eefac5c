from pydantic import BaseModel, Field

from app.core.enums import Country, EquipmentType


class EquipmentSnapshot(BaseModel):
    """An owned equipment instance joined with its catalog entry."""

    owned_id: int
    equipment_id: int
    name: str
    type: EquipmentType
    stat_bonus: int
    stars: int
    owned_general_id: int | None = None


class GeneralSnapshot(BaseModel):
    """An owned general joined with its catalog entry and equipped items.

    This is the unit every game formula works on.
    """

    owned_id: int
    general_id: int
    name: str
    country: Country
    stars: int
    strength: int
    intellect: int
    leadership: int
    luck: int
    level: int = 1
    exp: int = 0
    evolution: int = 0
    is_in_team: bool = False
    skill_name: str | None = None
    skill_desc: str | None = None
    shard_count: int = 0
    equipments: list[EquipmentSnapshot] = Field(default_factory=list)


class OwnedGeneralView(GeneralSnapshot):
    power: int


class InventoryItem(EquipmentSnapshot):
    equipped_by: str | None = None
    """Name of the general holding the item"""


class Collection(BaseModel):
    general_ids: list[int]
    equipment_ids: list[int]
