"""Selerara Dashboard API — Review Routes (GET /reviews, landing page testimonials)."""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from selerara_api.database import get_db_session
from selerara_api.schemas.catalog import Review
from selerara_api.schemas.common import ErrorResponse
from selerara_api.services.catalog_service import catalog_service

router = APIRouter(tags=["reviews"])


@router.get(
    "/reviews",
    response_model=List[Review],
    responses={500: {"description": "Database error", "model": ErrorResponse}},
    summary="Get all reviews",
)
async def list_reviews(db: AsyncSession = Depends(get_db_session)) -> List[Review]:
    return await catalog_service.list_reviews(db)
