"""Selerara Dashboard API — Image Routes (GET /images, the gallery)."""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from selerara_api.database import get_db_session
from selerara_api.schemas.catalog import Image
from selerara_api.schemas.common import ErrorResponse
from selerara_api.services.catalog_service import catalog_service

router = APIRouter(tags=["images"])


@router.get(
    "/images",
    response_model=List[Image],
    responses={500: {"description": "Database error", "model": ErrorResponse}},
    summary="Get all images",
)
async def list_images(db: AsyncSession = Depends(get_db_session)) -> List[Image]:
    return await catalog_service.list_images(db)
