import sqlmodel

from app.core.enums import Country

from ._base import BaseModel


class General(BaseModel, table=True):
    """Catalog entry, read-only once seeded."""

    __tablename__: str = "generals"

    id: int = sqlmodel.Field(primary_key=True, index=True, default=None)
    name: str = sqlmodel.Field(max_length=20, unique=True, index=True)
    stars: int = sqlmodel.Field(ge=1, le=5, index=True)
    strength: int = sqlmodel.Field(ge=0)
    intellect: int = sqlmodel.Field(ge=0)
    leadership: int = sqlmodel.Field(ge=0)
    luck: int = sqlmodel.Field(ge=0)
    country: Country
    description: str = ""
    skill_name: str | None = sqlmodel.Field(default=None, nullable=True)
    skill_desc: str | None = sqlmodel.Field(default=None, nullable=True)

    def __str__(self) -> str:
        return f"{self.name} (#{self.id})"
