# tests/test_filters.py
from minishop.core import build_catalog, product_id
from minishop.database import CLASSIC
from minishop.filters import parse_bound, query_products
from minishop.models import Product, Query, SortKey

CATALOG = build_catalog(CLASSIC)


def _p(name, price, category="Electronics", subcategory="Computers"):
    return Product(
        id=product_id(name), name=name, price=price, category=category,
        subcategory=subcategory, image_url="https://example.com/x.png", description="d",
    )


def names(products):
    return [p.name for p in products]


def test_empty_query_returns_everything_in_order():
    assert query_products(CATALOG, Query()) == list(CATALOG)


def test_short_terms_only_match_exactly():
    assert query_products(CATALOG, Query(search_term="ca")) == []
    assert names(query_products(CATALOG, Query(search_term="cam"))) == ["Camera"]
    assert names(query_products([_p("TV", 100)], Query(search_term="tv"))) == ["TV"]


def test_search_is_case_insensitive_and_trimmed():
    assert names(query_products(CATALOG, Query(search_term="LAPTOP"))) == ["Laptop"]
    assert names(query_products(CATALOG, Query(search_term="  cam  "))) == ["Camera"]
    assert query_products(CATALOG, Query(search_term="   ")) == list(CATALOG)


def test_category_and_subcategory_match_case_insensitively():
    q = Query(category="fashion")
    assert names(query_products(CATALOG, q)) == ["Shoes", "Watch", "Backpack", "Sunglasses"]
    q = Query(category="electronics", subcategory="COMPUTERS")
    assert names(query_products(CATALOG, q)) == ["Laptop", "Tablet"]
    q = Query(category="fashion", subcategory="computers")
    assert query_products(CATALOG, q) == []


def test_price_band():
    products = [_p("A", 2500), _p("B", 8000), _p("C", 500)]
    assert names(query_products(products, Query(price_range=(1000, 5000)))) == ["A"]
    assert names(query_products(products, Query(price_range=(None, 2500)))) == ["A", "C"]
    assert names(query_products(products, Query(price_range=("2500", None)))) == ["A", "B"]


def test_unparseable_bounds_are_ignored():
    products = [_p("A", 2500), _p("B", 8000), _p("C", 500)]
    assert names(query_products(products, Query(price_range=("abc", "3000")))) == ["A", "C"]
    assert names(query_products(products, Query(price_range=("x", "y")))) == ["A", "B", "C"]
    assert parse_bound("nan") is None
    assert parse_bound(" 12.5 ") == 12.5
    assert parse_bound("") is None


def test_price_sorts_are_stable():
    products = [_p("A", 300), _p("B", 100), _p("C", 300), _p("D", 100)]
    assert names(query_products(products, Query(sort_key=SortKey.PRICE_ASC))) == ["B", "D", "A", "C"]
    assert names(query_products(products, Query(sort_key=SortKey.PRICE_DESC))) == ["A", "C", "B", "D"]


def test_name_sorts():
    products = [_p("banana", 1), _p("Apple", 2), _p("cherry", 3)]
    assert names(query_products(products, Query(sort_key="name-asc"))) == ["Apple", "banana", "cherry"]
    assert names(query_products(products, Query(sort_key="name-desc"))) == ["cherry", "banana", "Apple"]

    ties = [_p("Pen", 1), _p("pen", 2)]
    assert [p.price for p in query_products(ties, Query(sort_key="name-asc"))] == [1, 2]
    assert [p.price for p in query_products(ties, Query(sort_key="name-desc"))] == [1, 2]

    accented = [_p("Zebra", 1), _p("Éclair", 2), _p("apple", 3)]
    assert names(query_products(accented, Query(sort_key="name-asc"))) == ["apple", "Éclair", "Zebra"]
    assert names(query_products(accented, Query(sort_key="name-desc"))) == ["Zebra", "Éclair", "apple"]


def test_featured_keeps_filtered_order():
    q = Query(search_term="one", sort_key=SortKey.FEATURED)
    assert names(query_products(CATALOG, q)) == ["Phone", "Headphones"]


def test_query_is_pure():
    source = list(CATALOG)
    q = Query(category="electronics", price_range=(10000, None), sort_key="price-desc")
    first = query_products(source, q)
    assert query_products(source, q) == first
    assert source == list(CATALOG)
    assert names(first) == ["Laptop", "Camera", "Tablet", "Phone"]
