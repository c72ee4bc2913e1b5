"""
Selerara Dashboard API — Row Grouping & Shaping
=================================================

What:  Turns flat, denormalized query rows (one row per leaf item, parent
       columns repeated on every row) into nested category → items trees.
Why:   The FAQ and menu endpoints join a category table with its items; the
       front-end wants one entry per category with its items nested inside.
How:   A single stable group-by (`group_rows`) parameterised with the group
       key and the group/item builders. FAQ and menu each plug in their own.
Who:   Called by CatalogService after the query returns.

Contract:
    - Groups appear in first-occurrence order of their key in the input
      (the menu query orders by category id, then item id, so this equals a
      sorted group-by there).
    - Items keep input row order within their group.
    - A row that carries a group but no item (LEFT JOIN with no match) creates
      the group with an empty item list.
    - Functions here are pure: no I/O, no shared state, no validation of
      malformed rows.
"""

from typing import Any, Callable, Dict, Hashable, Iterable, List, Mapping, Optional, Tuple

from selerara_api.schemas.catalog import (
    FaqCategory,
    FaqItem,
    FaqListResponse,
    MenuCategoryGroup,
    MenuItem,
    MenuResponse,
)

Row = Mapping[str, Any]

# ── Display Defaults ──────────────────────────────────────────────────────
DEFAULT_MENU_IMAGE = "/img/menu/default.jpg"
DEFAULT_CURRENCY = "$"
DEFAULT_RATING = 5

# Badges are stored HTML-escaped by the admin panel (and, for older rows,
# JSON-escaped). Order matters: &amp; goes after the others so that
# "&amp;lt;" decodes once to "&lt;" and not all the way to "<".
_HTML_REPLACEMENTS: Tuple[Tuple[str, str], ...] = (
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&#039;", "'"),
    ("&quot;", '"'),
    ("&amp;", "&"),
    ("\\u003C", "<"),
    ("\\u003E", ">"),
)


def decode_html(value: Optional[str]) -> Optional[str]:
    """
    Decodes the entities the admin panel writes back to literal characters.

    Plain text comes back unchanged; None passes through as None.

    >>> decode_html("Pedas &amp; Gurih")
    'Pedas & Gurih'
    """
    if value is None:
        return None
    for entity, char in _HTML_REPLACEMENTS:
        value = value.replace(entity, char)
    return value


def _missing(value: Any) -> bool:
    return value is None or value == ""


def group_rows(
    rows: Iterable[Row],
    key: Callable[[Row], Hashable],
    make_group: Callable[[Row], Dict[str, Any]],
    make_item: Callable[[Row], Any],
    has_item: Callable[[Row], bool] = lambda row: True,
) -> List[Dict[str, Any]]:
    """
    Stable group-by over denormalized rows.

    Args:
        rows:       Query rows in the order the database returned them
        key:        Extracts the group identity from a row
        make_group: Builds the group's own fields from its first row
        make_item:  Builds one item from a row
        has_item:   False for rows that only carry a group (null item id)

    Returns:
        One dict per group, in first-occurrence order, each with its group
        fields plus an "items" list.
    """
    # dict preserves insertion order, which gives first-occurrence ordering
    groups: Dict[Hashable, Dict[str, Any]] = {}
    for row in rows:
        group_key = key(row)
        group = groups.get(group_key)
        if group is None:
            group = make_group(row)
            group["items"] = []
            groups[group_key] = group
        if has_item(row):
            group["items"].append(make_item(row))
    return list(groups.values())


# ══════════════════════════════════════════════════════════════════════════
# FAQ
# ══════════════════════════════════════════════════════════════════════════


def group_faq_rows(rows: Iterable[Row]) -> FaqListResponse:
    """
    Groups FAQ rows ({id, title, text, category_id, category_name}) under
    their category name. Every FAQ row holds a question, so no group is empty.
    """
    groups = group_rows(
        rows,
        key=lambda row: row["category_name"],
        make_group=lambda row: {"name": row["category_name"]},
        make_item=lambda row: FaqItem(title=row["title"], text=row["text"]),
    )
    return FaqListResponse(categories=[FaqCategory(**group) for group in groups])


# ══════════════════════════════════════════════════════════════════════════
# Menu
# ══════════════════════════════════════════════════════════════════════════


def build_menu_item(row: Row) -> MenuItem:
    """
    Builds one dish from a joined menu row, applying display defaults.

    Empty strings count as missing for image and currency; a rating of 0 is
    a real rating and is kept.
    """
    fields: Dict[str, Any] = {
        "image": DEFAULT_MENU_IMAGE if _missing(row.get("image")) else row["image"],
        "title": row.get("title"),
        "price": "" if row.get("price") is None else str(row["price"]),
        "currency": DEFAULT_CURRENCY if _missing(row.get("currency")) else row["currency"],
        "rating": DEFAULT_RATING if row.get("rating") is None else row["rating"],
        "text": row.get("item_description"),
    }
    badge = row.get("badge")
    if badge:
        fields["badge"] = decode_html(badge)
    return MenuItem(**fields)


def group_menu_rows(rows: Iterable[Row]) -> MenuResponse:
    """
    Groups menu_category LEFT JOIN menu_item rows by category id.

    Grouping uses the id, not the name, so two categories that share a
    display name stay separate.
    """
    groups = group_rows(
        rows,
        key=lambda row: row["category_id"],
        make_group=lambda row: {
            "name": row.get("category_name"),
            "slug": row.get("category_slug"),
            "description": row.get("category_description"),
        },
        make_item=build_menu_item,
        has_item=lambda row: row.get("id") is not None,
    )
    return MenuResponse(categories=[MenuCategoryGroup(**group) for group in groups])
