"""
Selerara Dashboard API — Menu Routes
======================================

What:  The three menu views.
    - GET /menu              categories with their dishes nested (menu page)
    - GET /menu-items        dishes as stored, one flat list (admin tables)
    - GET /menu-categories   categories only (navigation tabs)

Why exclude_unset on /menu:
    A dish only carries a "badge" key when it has a badge. Grouping leaves
    the field unset otherwise, and exclude_unset keeps it out of the JSON
    instead of emitting "badge": null.
"""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from selerara_api.database import get_db_session
from selerara_api.schemas.catalog import MenuCategory, MenuItemRecord, MenuResponse
from selerara_api.schemas.common import ErrorResponse
from selerara_api.services.catalog_service import catalog_service

router = APIRouter(tags=["menu"])

_ERRORS = {500: {"description": "Database error", "model": ErrorResponse}}


@router.get(
    "/menu",
    response_model=MenuResponse,
    response_model_exclude_unset=True,
    responses=_ERRORS,
    summary="Get the menu grouped by category",
)
async def get_menu(db: AsyncSession = Depends(get_db_session)) -> MenuResponse:
    return await catalog_service.list_menu(db)


@router.get(
    "/menu-items",
    response_model=List[MenuItemRecord],
    responses=_ERRORS,
    summary="Get all menu items",
)
async def list_menu_items(db: AsyncSession = Depends(get_db_session)) -> List[MenuItemRecord]:
    return await catalog_service.list_menu_items(db)


@router.get(
    "/menu-categories",
    response_model=List[MenuCategory],
    responses=_ERRORS,
    summary="Get all menu categories",
)
async def list_menu_categories(
    db: AsyncSession = Depends(get_db_session),
) -> List[MenuCategory]:
    return await catalog_service.list_menu_categories(db)
