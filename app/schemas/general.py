from pydantic import BaseModel, Field


class EvolveRequest(BaseModel):
    owned_general_id: int


class EvolveResponse(BaseModel):
    owned_general_id: int
    evolution: int
    remaining_shards: int


class EquipRequest(BaseModel):
    owned_general_id: int
    owned_equipment_id: int | None = Field(
        default=None, description="Item to attach, only used by the manual equip endpoint"
    )
