from pydantic import BaseModel

from app.models.equipment import Equipment
from app.models.general import General


class Gallery(BaseModel):
    generals: list[General]
    equipments: list[Equipment]


class BondInfo(BaseModel):
    name: str
    description: str
    members: list[str]
    country: str | None = None
    bonuses: dict[int, float]
    """Required member count -> multiplier bonus"""
