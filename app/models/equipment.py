import sqlmodel

from app.core.enums import EquipmentType

from ._base import BaseModel


class Equipment(BaseModel, table=True):
    __tablename__: str = "equipments"

    id: int = sqlmodel.Field(primary_key=True, index=True, default=None)
    name: str = sqlmodel.Field(max_length=20, unique=True, index=True)
    type: EquipmentType
    stat_bonus: int = sqlmodel.Field(ge=0)
    stars: int = sqlmodel.Field(ge=1, le=5, index=True)

    def __str__(self) -> str:
        return f"{self.name} (#{self.id})"
