import sqlmodel

from ._base import BaseModel


class OwnedEquipment(BaseModel, table=True):
    __tablename__: str = "owned_equipments"

    id: int = sqlmodel.Field(primary_key=True, index=True, default=None)
    player_id: int = sqlmodel.Field(foreign_key="players.id", index=True)
    equipment_id: int = sqlmodel.Field(foreign_key="equipments.id", index=True)
    owned_general_id: int | None = sqlmodel.Field(
        foreign_key="owned_generals.id", index=True, nullable=True, default=None
    )
    """Holder of this item, None while it sits in the bag"""
    level: int = sqlmodel.Field(default=1, ge=1)
