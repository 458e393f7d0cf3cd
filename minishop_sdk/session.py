# minishop_sdk/session.py
import logging
from typing import Any, Dict, List, Optional, Tuple

import httpx
import requests

from minishop.filters import query_products
from minishop.models import ALL, Category, Product, Query, SortKey

from .cart import LocalCart
from .client import ShopClient

logger = logging.getLogger(__name__)


class BrowseSession:
    """What the storefront is showing: fetched catalog plus the active query.

    ``visible()`` is recomputed from (products, query) only when either
    changes.
    """

    def __init__(self) -> None:
        self.products: Tuple[Product, ...] = ()
        self.categories: List[Category] = []
        self.query = Query()
        self._cache: Optional[Tuple[Tuple[Tuple[Product, ...], Query], List[Product]]] = None

    # ---------------------------
    # Data loading
    # ---------------------------
    def refresh(self, client: ShopClient) -> Optional[str]:
        """Fetch products and categories. Returns an error message on failure.

        On failure the previously loaded state is kept as is.
        """
        try:
            products = client.list_products()
            categories = client.list_categories()
        except (requests.RequestException, httpx.HTTPError) as e:
            logger.error("failed to load catalog: %s", e)
            return "Failed to load data"
        self.products = tuple(products)
        self.categories = categories
        return None

    # ---------------------------
    # Query edits
    # ---------------------------
    def _update(self, **changes: Any) -> None:
        self.query = self.query.model_copy(update=changes)

    def set_search(self, term: str) -> None:
        self._update(search_term=term)

    def set_sort(self, key: str) -> None:
        self._update(sort_key=SortKey(key))

    def set_price_band(self, low: Any = None, high: Any = None) -> None:
        if low in (None, "") and high in (None, ""):
            self._update(price_range=None)
        else:
            self._update(price_range=(low, high))

    def select(self, value: str) -> None:
        """Apply a category picker value: "all", a category id, or a subcategory id.

        Picking a subcategory also narrows to its parent category.
        """
        if value == ALL:
            self._update(category=ALL, subcategory=ALL)
            return
        for category in self.categories:
            for sub in category.subcategories:
                if sub.id == value:
                    self._update(category=category.id, subcategory=sub.id)
                    return
        self._update(category=value, subcategory=ALL)

    def clear_filters(self) -> None:
        self._update(search_term="", category=ALL, subcategory=ALL, price_range=None)

    # ---------------------------
    # Derived view
    # ---------------------------
    def visible(self) -> List[Product]:
        key = (self.products, self.query)
        if self._cache is None or self._cache[0] != key:
            self._cache = (key, query_products(self.products, self.query))
        return list(self._cache[1])

    def _category_name(self, category_id: str) -> str:
        for c in self.categories:
            if c.id == category_id.lower():
                return c.name
        return category_id

    def _subcategory_name(self, sub_id: str) -> str:
        for c in self.categories:
            for s in c.subcategories:
                if s.id == sub_id.lower():
                    return s.name
        return sub_id

    def summary(self) -> str:
        q = self.query
        count = len(self.visible())
        places = []
        if q.category != ALL:
            places.append(self._category_name(q.category))
        if q.subcategory != ALL:
            places.append(self._subcategory_name(q.subcategory))
        term = q.search_term.strip()
        if not term and not places:
            return f"Showing all {count} products"
        text = f"Showing {count} products"
        if term:
            text += f' for "{term}"'
        if places:
            text += " in " + " → ".join(places)
        return text

    def category_choices(self) -> Dict[str, str]:
        """Picker values mapped to their labels, in display order."""
        choices = {ALL: f"All Categories ({len(self.products)})"}
        for c in self.categories:
            choices[c.id] = f"{c.name} ({c.product_count})" + ("" if c.available else " - Not Available")
            for s in c.subcategories:
                choices[s.id] = f"  {s.name} ({s.product_count})" + ("" if s.available else " - Not Available")
        return choices


def checkout_cart(client: ShopClient, cart: LocalCart) -> Tuple[bool, str]:
    """Submit the cart. Clears it only when the server acknowledges the order."""
    if not cart.lines:
        return False, "Cart is empty"
    try:
        receipt = client.checkout(cart.lines)
    except (requests.RequestException, httpx.HTTPError) as e:
        logger.error("checkout failed: %s", e)
        return False, "Checkout failed"
    cart.clear()
    message = receipt.get("message") or "Order placed"
    order_id = receipt.get("orderId")
    return True, f"{message} ({order_id})" if order_id else message
