from typing import Annotated

from fastapi import Depends
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.db import get_db
from app.game.bonds import BONDS, FACTION_BONDS, Bond, bonds_of
from app.models.equipment import Equipment
from app.models.general import General
from app.schemas.catalog import BondInfo, Gallery
from app.services.roster import RosterStore


def to_bond_info(bond: Bond) -> BondInfo:
    return BondInfo(
        name=bond.name,
        description=bond.description,
        members=list(bond.members),
        country=bond.country,
        bonuses={tier.required: tier.bonus for tier in bond.tiers},
    )


class CatalogService:
    def __init__(self, db: Annotated[AsyncSession, Depends(get_db)]) -> None:
        self.db = db
        self.roster = RosterStore(db)

    async def get_gallery(self) -> Gallery:
        generals = await self.db.exec(
            select(General).order_by(
                col(General.stars).desc(), col(General.country), col(General.id)
            )
        )
        equipments = await self.db.exec(
            select(Equipment).order_by(
                col(Equipment.stars).desc(), col(Equipment.type), col(Equipment.id)
            )
        )
        return Gallery(generals=list(generals.all()), equipments=list(equipments.all()))

    @staticmethod
    def get_bonds() -> list[BondInfo]:
        return [to_bond_info(bond) for bond in (*BONDS, *FACTION_BONDS)]

    async def get_general_bonds(self, general_id: int) -> list[BondInfo]:
        """Bonds a catalog general can take part in."""
        general = await self.roster.read_general(general_id)
        return [to_bond_info(bond) for bond in bonds_of(general.name, general.country)]
