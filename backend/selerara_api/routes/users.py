"""
Selerara Dashboard API — User Routes
======================================

What:  GET /users, the dashboard's user list.
Why only three columns: The user table also holds password hashes and
       session data; the query selects id, email and username only.
"""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from selerara_api.database import get_db_session
from selerara_api.schemas.catalog import User
from selerara_api.schemas.common import ErrorResponse
from selerara_api.services.catalog_service import catalog_service

router = APIRouter(tags=["users"])


@router.get(
    "/users",
    response_model=List[User],
    responses={500: {"description": "Database error", "model": ErrorResponse}},
    summary="Get all users",
)
async def list_users(db: AsyncSession = Depends(get_db_session)) -> List[User]:
    return await catalog_service.list_users(db)
