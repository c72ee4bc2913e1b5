"""
Selerara Dashboard API — Row Grouping Unit Tests
==================================================

What:  Tests for the pure row → nested tree shaping used by /faqs and /menu.
How:   Plain dict rows in, response models out. No database, no HTTP.

What we test:
    ✅ Group order follows first occurrence; item order follows row order
    ✅ Categories without dishes are kept with an empty item list
    ✅ Display defaults for image, currency and rating
    ✅ Badge omitted when absent, HTML-decoded when present
    ✅ Entity decoding order and pass-through cases
"""

from decimal import Decimal

import pytest

from selerara_api.services.grouping import (
    DEFAULT_CURRENCY,
    DEFAULT_MENU_IMAGE,
    DEFAULT_RATING,
    build_menu_item,
    decode_html,
    group_faq_rows,
    group_menu_rows,
    group_rows,
)


class TestDecodeHtml:
    """Tests for badge entity decoding."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("Pedas &amp; Gurih", "Pedas & Gurih"),
            ("&lt;b&gt;Baru&lt;/b&gt;", "<b>Baru</b>"),
            ("Chef&#039;s Pick", "Chef's Pick"),
            ("&quot;Favorit&quot;", '"Favorit"'),
            ("\\u003Cnew\\u003E", "<new>"),
        ],
    )
    def test_decodes_known_entities(self, raw, expected):
        assert decode_html(raw) == expected

    def test_plain_text_unchanged(self):
        assert decode_html("Best Seller") == "Best Seller"

    def test_none_passes_through(self):
        assert decode_html(None) is None

    def test_ampersand_decoded_once(self):
        """&amp;lt; is an escaped '&lt;', not a double-escaped '<'."""
        assert decode_html("&amp;lt;") == "&lt;"


class TestGroupRows:
    """Tests for the generic stable group-by."""

    def test_first_occurrence_order(self):
        rows = [{"k": "b", "v": 1}, {"k": "a", "v": 2}, {"k": "b", "v": 3}]
        groups = group_rows(
            rows,
            key=lambda r: r["k"],
            make_group=lambda r: {"k": r["k"]},
            make_item=lambda r: r["v"],
        )
        assert [g["k"] for g in groups] == ["b", "a"]
        assert groups[0]["items"] == [1, 3]
        assert groups[1]["items"] == [2]

    def test_rows_without_item_only_create_group(self):
        rows = [{"k": 1, "v": None}]
        groups = group_rows(
            rows,
            key=lambda r: r["k"],
            make_group=lambda r: {"k": r["k"]},
            make_item=lambda r: r["v"],
            has_item=lambda r: r["v"] is not None,
        )
        assert groups == [{"k": 1, "items": []}]

    def test_empty_input(self):
        assert group_rows([], key=id, make_group=dict, make_item=id) == []


class TestGroupFaqRows:
    """Tests for FAQ grouping."""

    def test_groups_by_category_name(self, faq_rows):
        result = group_faq_rows(faq_rows)

        assert [c.name for c in result.categories] == ["Reservasi", "Pembayaran"]
        reservasi = result.categories[0]
        assert [i.title for i in reservasi.items] == [
            "Apakah bisa reservasi?",
            "Minimal orang?",
        ]
        assert reservasi.items[0].text == "Bisa, via WhatsApp."

    def test_output_shape(self, faq_rows):
        data = group_faq_rows(faq_rows[:1]).model_dump()
        assert data == {
            "categories": [
                {
                    "name": "Reservasi",
                    "items": [{"title": "Apakah bisa reservasi?", "text": "Bisa, via WhatsApp."}],
                }
            ]
        }

    def test_no_rows_gives_no_categories(self):
        assert group_faq_rows([]).categories == []


class TestGroupMenuRows:
    """Tests for menu grouping."""

    def test_category_order_and_item_counts(self, menu_rows):
        result = group_menu_rows(menu_rows)

        assert [c.slug for c in result.categories] == ["makanan-utama", "minuman", "camilan"]
        assert [len(c.items) for c in result.categories] == [2, 0, 1]

    def test_category_without_items_is_empty_list(self, menu_rows):
        minuman = group_menu_rows(menu_rows).categories[1]
        assert minuman.name == "Minuman"
        assert minuman.items == []
        assert minuman.description is None

    def test_item_fields(self, menu_rows):
        item = group_menu_rows(menu_rows).categories[0].items[0]

        assert item.title == "Nasi Timbel"
        assert item.image == "/img/menu/nasi-timbel.jpg"
        assert item.price == "35000.00"
        assert item.currency == "Rp"
        assert item.rating == 4.8
        assert item.text == "Nasi bungkus daun pisang"
        assert item.badge == "Best Seller"

    def test_defaults_for_null_columns(self, menu_rows):
        gehu = group_menu_rows(menu_rows).categories[2].items[0]

        assert gehu.image == DEFAULT_MENU_IMAGE
        assert gehu.currency == DEFAULT_CURRENCY
        assert gehu.rating == DEFAULT_RATING
        assert gehu.price == "5000"

    def test_badge_absent_means_no_key(self, menu_rows):
        gehu = group_menu_rows(menu_rows).categories[2].items[0]
        assert "badge" not in gehu.model_dump(exclude_unset=True)

    def test_badge_is_decoded(self, menu_rows):
        gurame = group_menu_rows(menu_rows).categories[0].items[1]
        assert gurame.badge == "Pedas & Gurih"

    def test_same_name_different_id_stay_separate(self):
        rows = [
            {"category_id": 1, "category_name": "Promo", "category_slug": "promo-a",
             "category_description": None, "id": None},
            {"category_id": 2, "category_name": "Promo", "category_slug": "promo-b",
             "category_description": None, "id": None},
        ]
        result = group_menu_rows(rows)
        assert [c.slug for c in result.categories] == ["promo-a", "promo-b"]

    def test_worked_example(self):
        rows = [
            {"category_id": 1, "category_name": "A", "category_slug": "a",
             "category_description": None, "id": 1, "title": "Pizza", "price": "10",
             "image": None, "item_description": None, "badge": None,
             "rating": None, "currency": None},
            {"category_id": 2, "category_name": "B", "category_slug": "b",
             "category_description": None, "id": None},
        ]
        result = group_menu_rows(rows)

        assert [c.name for c in result.categories] == ["A", "B"]
        assert [i.title for i in result.categories[0].items] == ["Pizza"]
        assert result.categories[1].items == []


class TestBuildMenuItem:
    """Tests for per-dish defaulting rules."""

    def test_empty_strings_count_as_missing(self):
        item = build_menu_item({"id": 1, "price": "1", "image": "", "currency": ""})
        assert item.image == DEFAULT_MENU_IMAGE
        assert item.currency == DEFAULT_CURRENCY

    def test_zero_rating_is_kept(self):
        item = build_menu_item({"id": 1, "price": "1", "rating": 0})
        assert item.rating == 0

    def test_non_null_values_pass_through(self):
        item = build_menu_item(
            {"id": 1, "price": Decimal("12.50"), "image": "/x.jpg",
             "currency": "€", "rating": 3}
        )
        assert (item.image, item.currency, item.rating, item.price) == ("/x.jpg", "€", 3, "12.50")

    def test_empty_badge_is_omitted(self):
        item = build_menu_item({"id": 1, "price": "1", "badge": ""})
        assert "badge" not in item.model_dump(exclude_unset=True)
