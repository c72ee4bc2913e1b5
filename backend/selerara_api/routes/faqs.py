"""
Selerara Dashboard API — FAQ Routes
=====================================

What:  GET /faqs, questions grouped under their category.

Example response:
    {
        "categories": [
            {"name": "Reservasi", "items": [{"title": "...", "text": "..."}]},
            {"name": "Pembayaran", "items": [...]}
        ]
    }
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from selerara_api.database import get_db_session
from selerara_api.schemas.catalog import FaqListResponse
from selerara_api.schemas.common import ErrorResponse
from selerara_api.services.catalog_service import catalog_service

router = APIRouter(tags=["faqs"])


@router.get(
    "/faqs",
    response_model=FaqListResponse,
    responses={500: {"description": "Database error", "model": ErrorResponse}},
    summary="Get all FAQs with categories",
)
async def list_faqs(db: AsyncSession = Depends(get_db_session)) -> FaqListResponse:
    return await catalog_service.list_faqs(db)
