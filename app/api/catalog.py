from typing import Annotated

from fastapi import APIRouter, Depends

from app.schemas.catalog import BondInfo, Gallery
from app.schemas.common import APIResponse
from app.services.catalog import CatalogService

router = APIRouter(prefix="/catalog", tags=["catalog"])


@router.get("/")
async def get_gallery(service: Annotated[CatalogService, Depends()]) -> APIResponse[Gallery]:
    gallery = await service.get_gallery()
    return APIResponse(data=gallery)


@router.get("/bonds")
async def get_bonds() -> APIResponse[list[BondInfo]]:
    return APIResponse(data=CatalogService.get_bonds())


@router.get("/generals/{general_id}/bonds")
async def get_general_bonds(
    general_id: int, service: Annotated[CatalogService, Depends()]
) -> APIResponse[list[BondInfo]]:
    bonds = await service.get_general_bonds(general_id)
    return APIResponse(data=bonds)
