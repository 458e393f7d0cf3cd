# tests/test_catalog.py
from dataclasses import replace

import pytest

from minishop.core import aggregate_categories, build_catalog, enrich, product_id
from minishop.database import CLASSIC, WEARABLES, RawProduct
from minishop.errors import CatalogConfigError
from minishop.models import Product


def _p(name, category, subcategory, price=100):
    return Product(
        id=product_id(name), name=name, price=price, category=category,
        subcategory=subcategory, image_url="https://example.com/x.png", description="d",
    )


def test_enrich_uses_lookup_tables():
    p = enrich(RawProduct("Camera", 35000), CLASSIC)
    assert p.id == "prod_camera"
    assert p.category == "Electronics"
    assert p.subcategory == "Photography"
    assert p.image_url.startswith("https://images.unsplash.com/")
    assert p.description.startswith("High-resolution camera")


def test_enrich_defaults_for_unmapped_name():
    raw = RawProduct("Mystery  Box", 999)
    p = enrich(raw, CLASSIC)
    assert p.id == "prod_mystery_box"
    assert p.category == "Uncategorized"
    assert p.subcategory == "General"
    assert p.image_url == CLASSIC.placeholder_image_url
    assert p.description == "A high-quality Mystery  Box"
    # raw record untouched
    assert raw == RawProduct("Mystery  Box", 999)


@pytest.mark.parametrize("tables", [CLASSIC, WEARABLES])
def test_catalog_fully_enriched_with_unique_ids(tables):
    products = build_catalog(tables)
    assert len(products) == len(tables.products)
    for p in products:
        for value in (p.category, p.subcategory, p.image_url, p.description):
            assert isinstance(value, str) and value
    ids = [p.id for p in products]
    assert len(set(ids)) == len(ids)
    assert build_catalog(tables) == products


def test_duplicate_ids_are_a_config_error():
    tables = replace(CLASSIC, products=(RawProduct("Smart Watch", 1), RawProduct("smart   watch", 2)))
    with pytest.raises(CatalogConfigError):
        build_catalog(tables)


def test_aggregate_classic_catalog():
    products = build_catalog(CLASSIC)
    cats = aggregate_categories(products, CLASSIC.category_defs, CLASSIC.subcategory_defs)

    assert [c.name for c in cats] == ["Electronics", "Fashion"]
    electronics, fashion = cats
    assert electronics.id == "electronics"
    assert electronics.description == "Gadgets and electronic devices"
    assert electronics.product_count == 5
    assert [(s.name, s.product_count) for s in electronics.subcategories] == [
        ("Computers", 2), ("Mobile", 1), ("Audio", 1), ("Photography", 1),
    ]
    assert [s.name for s in fashion.subcategories] == ["Footwear", "Watches", "Bags", "Accessories"]
    assert all(c.available for c in cats)

    for c in cats:
        assert c.product_count == sum(1 for p in products if p.category == c.name)
        assert sum(s.product_count for s in c.subcategories) == c.product_count


def test_aggregate_default_description_for_undefined_category():
    cats = aggregate_categories([_p("Kettle", "Kitchen", "Appliances")], CLASSIC.category_defs, {})
    assert cats[0].description == "Kitchen products"
    assert cats[0].subcategories[0].id == "appliances"


def test_same_subcategory_under_two_categories_is_not_merged():
    products = [
        _p("Ring", "Fashion", "Accessories"),
        _p("Charger", "Electronics", "Accessories"),
        _p("Cable", "Electronics", "Accessories"),
    ]
    cats = aggregate_categories(products, CLASSIC.category_defs, CLASSIC.subcategory_defs)
    by_name = {c.name: c for c in cats}
    assert [c.name for c in cats] == ["Fashion", "Electronics"]
    assert by_name["Fashion"].subcategories[0].product_count == 1
    assert by_name["Electronics"].subcategories[0].product_count == 2


def test_subcategory_names_differing_in_case_are_merged():
    products = [
        _p("Speaker", "Electronics", "Audio"),
        _p("Earbuds", "Electronics", "audio"),
    ]
    (electronics,) = aggregate_categories(products, {}, {})
    assert len(electronics.subcategories) == 1
    audio = electronics.subcategories[0]
    assert (audio.id, audio.name, audio.product_count) == ("audio", "Audio", 2)


def test_include_empty_lists_unused_definitions():
    products = build_catalog(CLASSIC)
    cats = aggregate_categories(
        products, CLASSIC.category_defs, CLASSIC.subcategory_defs, include_empty=True
    )
    electronics = cats[0]
    wearables = electronics.subcategories[-1]
    assert wearables.name == "Wearables"
    assert wearables.product_count == 0
    assert wearables.available is False

    only_fashion = [p for p in products if p.category == "Fashion"]
    cats = aggregate_categories(
        only_fashion, CLASSIC.category_defs, CLASSIC.subcategory_defs, include_empty=True
    )
    assert [(c.name, c.available) for c in cats] == [("Fashion", True), ("Electronics", False)]
    assert [s.name for s in cats[1].subcategories] == [
        "Computers", "Mobile", "Audio", "Photography", "Wearables",
    ]
