"""
Selerara Dashboard API — Catalog Record Schemas
=================================================

What:  Pydantic models for every entity the dashboard reads: users, images,
       reviews, menu categories/items and FAQs.
Why:   The database driver hands back schema-less mappings. Declaring each
       record here fixes which columns are exposed (SELECT * rows are filtered
       to these fields on serialization) and feeds the OpenAPI document.
Who:   Built by services/catalog_service.py and services/grouping.py;
       declared as response_model by the route handlers.

Two families:
    Flat records (User, Image, Review, MenuCategory, MenuItemRecord) mirror a
    table row one-to-one.
    Grouped records (FaqListResponse, MenuResponse) are the nested trees built
    from joined rows by services/grouping.py.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Flat Records: one per table row
# ══════════════════════════════════════════════════════════════════════════


class User(BaseModel):
    """Public view of a dashboard user. Password hashes never leave the query."""
    id: int
    email: Optional[str] = None
    username: Optional[str] = None


class Image(BaseModel):
    """Gallery image uploaded by a user."""
    id: int
    image_url: Optional[str] = None
    orientation: Optional[str] = Field(default=None, description="portrait or landscape")
    user_id: Optional[int] = None
    created_at: Optional[datetime] = None


class Review(BaseModel):
    """Customer testimonial shown on the landing page."""
    id: int
    title: Optional[str] = None
    name: Optional[str] = None
    rating: Optional[int] = Field(default=None, description="1-5 stars")
    image: Optional[str] = None
    text: Optional[str] = None


class MenuCategory(BaseModel):
    id: int
    name: Optional[str] = None
    slug: Optional[str] = None
    description: Optional[str] = None


class MenuItemRecord(BaseModel):
    """
    What:  A menu_item row as stored (flat listing at /menu-items).
    Why separate from MenuItem: The grouped menu renames and defaults fields
           for display; this one is the raw table view.
    """
    id: int
    category_id: Optional[int] = None
    title: Optional[str] = None
    image_url: Optional[str] = None
    price: Optional[str] = None
    text: Optional[str] = None
    badge: Optional[str] = None
    rating: Optional[float] = None
    currency: Optional[str] = None

    model_config = {"coerce_numbers_to_str": True}


# ══════════════════════════════════════════════════════════════════════════
# Grouped Records: FAQs
# ══════════════════════════════════════════════════════════════════════════


class FaqItem(BaseModel):
    title: Optional[str] = None
    text: Optional[str] = None


class FaqCategory(BaseModel):
    name: Optional[str] = None
    items: List[FaqItem] = Field(default_factory=list)


class FaqListResponse(BaseModel):
    """
    What:  FAQs grouped under their category.
    Order: Categories in the order they first appear in the query result;
           questions in row order within a category.
    """
    categories: List[FaqCategory] = Field(default_factory=list)


# ══════════════════════════════════════════════════════════════════════════
# Grouped Records: Menu
# ══════════════════════════════════════════════════════════════════════════


class MenuItem(BaseModel):
    """
    What:  A dish as the menu page renders it.

    Fields that are never null in the output (defaults applied while grouping):
        - image:    falls back to the placeholder picture
        - currency: falls back to "$"
        - rating:   falls back to 5

    badge is only set when the dish has one ("Best Seller", "Pedas & Gurih").
    The /menu route serializes with exclude_unset, so dishes without a badge
    carry no "badge" key at all.
    """
    image: str
    title: Optional[str] = None
    price: str
    currency: str
    rating: float
    text: Optional[str] = None
    badge: Optional[str] = None


class MenuCategoryGroup(BaseModel):
    name: Optional[str] = None
    slug: Optional[str] = None
    description: Optional[str] = None
    items: List[MenuItem] = Field(default_factory=list)


class MenuResponse(BaseModel):
    """
    What:  Every menu category with its dishes.
    Invariant: A category without dishes is still listed, with items == [].
    """
    categories: List[MenuCategoryGroup] = Field(default_factory=list)
