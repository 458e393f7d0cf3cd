# minishop/filters.py
import math
import unicodedata
from typing import Any, Callable, Iterable, List, Optional, Tuple

from .models import ALL, Product, Query, SortKey

# Search terms shorter than this only match a product name exactly.
MIN_SUBSTRING_TERM = 3


def parse_bound(value: Any) -> Optional[float]:
    """Lenient price bound: None for missing, blank, or unparseable input."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        bound = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(bound):
        return None
    return bound


def _matches_search(product: Product, term: str) -> bool:
    term = term.strip().lower()
    if not term:
        return True
    name = product.name.lower()
    if name == term:
        return True
    return len(term) >= MIN_SUBSTRING_TERM and term in name


def _matches_choice(value: str, choice: str) -> bool:
    return choice == ALL or value.lower() == choice.lower()


def price_predicate(price_range) -> Callable[[Product], bool]:
    if price_range is None:
        return lambda p: True
    low, high = (parse_bound(b) for b in price_range)
    return lambda p: (low is None or p.price >= low) and (high is None or p.price <= high)


def _name_key(p: Product) -> Tuple[str, str]:
    # accents fold onto their base letter, so "Éclair" sorts with the e's
    folded = unicodedata.normalize("NFKD", p.name)
    base = "".join(ch for ch in folded if not unicodedata.combining(ch))
    return base.casefold(), p.name.casefold()


_SORTS = {
    SortKey.PRICE_ASC: (lambda p: p.price, False),
    SortKey.PRICE_DESC: (lambda p: p.price, True),
    SortKey.NAME_ASC: (_name_key, False),
    SortKey.NAME_DESC: (_name_key, True),
}


def query_products(products: Iterable[Product], query: Query) -> List[Product]:
    """Return the products matching every predicate of ``query``, sorted.

    The input is left untouched. Sorting is stable in both directions:
    ``sorted(reverse=True)`` keeps equal keys in their input order.
    """
    in_band = price_predicate(query.price_range)
    out = [
        p for p in products
        if _matches_search(p, query.search_term)
        and _matches_choice(p.category, query.category)
        and _matches_choice(p.subcategory, query.subcategory)
        and in_band(p)
    ]
    if query.sort_key in _SORTS:
        key, reverse = _SORTS[query.sort_key]
        out = sorted(out, key=key, reverse=reverse)
    return out
