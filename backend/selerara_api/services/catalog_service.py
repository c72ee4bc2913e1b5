"""
Selerara Dashboard API — Catalog Service (Read Queries)
========================================================

What:  Runs the dashboard's fixed, parameterless SELECT statements and returns
       typed records.
Why:   Keeps SQL out of the route handlers and gives every query the same
       error translation.
How:   Each method executes one statement on the injected session, then either
       validates the rows into flat records or hands them to services/grouping.
Who:   Called by the route handlers in routes/.

Error Handling Strategy:
    `_fetch_all` is the only place that talks to the database. Any exception
    raised while executing the statement is wrapped in DatabaseError with the
    driver's message; the global handler in main.py turns it into a 500.
    Callers never catch.
"""

import logging
from typing import Any, Dict, List

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from selerara_api.exceptions import DatabaseError
from selerara_api.schemas.catalog import (
    FaqListResponse,
    Image,
    MenuCategory,
    MenuItemRecord,
    MenuResponse,
    Review,
    User,
)
from selerara_api.services.grouping import group_faq_rows, group_menu_rows

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Fixed Statements
# ══════════════════════════════════════════════════════════════════════════

USERS_SQL = "SELECT id, email, username FROM user"

IMAGES_SQL = "SELECT * FROM image"

FAQS_SQL = """
    SELECT
        f.id, f.title, f.text, f.category_id, c.name AS category_name
    FROM
        faq f
    JOIN
        category_faq c ON f.category_id = c.id
"""

# LEFT JOIN keeps categories that have no dishes yet (m.id is NULL for them).
# ORDER BY makes the grouped output deterministic: categories by id, dishes by id.
MENU_SQL = """
    SELECT
        c.id AS category_id,
        c.name AS category_name,
        c.slug AS category_slug,
        c.description AS category_description,
        m.id,
        m.title,
        m.image_url AS image,
        m.price,
        m.text AS item_description,
        m.badge,
        m.rating,
        m.currency
    FROM menu_category c
    LEFT JOIN menu_item m ON c.id = m.category_id
    ORDER BY c.id, m.id
"""

MENU_ITEMS_SQL = "SELECT * FROM menu_item"

REVIEWS_SQL = "SELECT * FROM review"

MENU_CATEGORIES_SQL = "SELECT * FROM menu_category"


class CatalogService:
    """
    Read-only access to the dashboard tables.

    Stateless: the session is passed to every call, so one instance serves
    all concurrent requests.
    """

    async def _fetch_all(self, db: AsyncSession, sql: str, name: str) -> List[Dict[str, Any]]:
        """
        Executes one statement and returns its rows as plain dicts, in the
        order the database produced them.

        Raises:
            DatabaseError: the statement could not be executed
        """
        try:
            result = await db.execute(text(sql))
            rows = [dict(row) for row in result.mappings().all()]
        except Exception as e:
            logger.error("Query '%s' failed: %s", name, str(e))
            raise DatabaseError.from_exception(e, query=name)
        logger.debug("Query '%s' returned %d rows", name, len(rows))
        return rows

    async def list_users(self, db: AsyncSession) -> List[User]:
        rows = await self._fetch_all(db, USERS_SQL, "users")
        return [User.model_validate(row) for row in rows]

    async def list_images(self, db: AsyncSession) -> List[Image]:
        rows = await self._fetch_all(db, IMAGES_SQL, "images")
        return [Image.model_validate(row) for row in rows]

    async def list_faqs(self, db: AsyncSession) -> FaqListResponse:
        """FAQs joined with their category, grouped by category name."""
        rows = await self._fetch_all(db, FAQS_SQL, "faqs")
        response = group_faq_rows(rows)
        logger.debug(
            "Grouped %d FAQs into %d categories", len(rows), len(response.categories)
        )
        return response

    async def list_menu(self, db: AsyncSession) -> MenuResponse:
        """Every menu category with its dishes, empty categories included."""
        rows = await self._fetch_all(db, MENU_SQL, "menu")
        return group_menu_rows(rows)

    async def list_menu_items(self, db: AsyncSession) -> List[MenuItemRecord]:
        rows = await self._fetch_all(db, MENU_ITEMS_SQL, "menu_items")
        return [MenuItemRecord.model_validate(row) for row in rows]

    async def list_reviews(self, db: AsyncSession) -> List[Review]:
        rows = await self._fetch_all(db, REVIEWS_SQL, "reviews")
        return [Review.model_validate(row) for row in rows]

    async def list_menu_categories(self, db: AsyncSession) -> List[MenuCategory]:
        rows = await self._fetch_all(db, MENU_CATEGORIES_SQL, "menu_categories")
        return [MenuCategory.model_validate(row) for row in rows]


# ── Singleton Instance ────────────────────────────────────────────────────
catalog_service = CatalogService()
