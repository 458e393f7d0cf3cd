# minishop_sdk/client.py
from typing import Any, Dict, List, Optional, Sequence

import httpx
import requests

from minishop.models import CartLine, Category, Product


class ShopClient:
    """Thin HTTP client for the minishop API.

    ``session`` defaults to a ``requests.Session``; anything with the same
    ``get``/``post`` shape (e.g. FastAPI's TestClient) works too.
    """

    def __init__(self, base_url: str = "http://localhost:5000", session: Any = None, timeout: int = 10):
        self.base_url = base_url.rstrip("/")
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout

    def _url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    # Catalog
    def list_products(
        self,
        search: Optional[str] = None,
        category: Optional[str] = None,
        subcategory: Optional[str] = None,
        min_price: Optional[Any] = None,
        max_price: Optional[Any] = None,
        sort: Optional[str] = None,
    ) -> List[Product]:
        params: Dict[str, Any] = {}
        for key, value in (
            ("search", search),
            ("category", category),
            ("subcategory", subcategory),
            ("min_price", min_price),
            ("max_price", max_price),
            ("sort", sort),
        ):
            if value is not None:
                params[key] = value
        r = self.session.get(self._url("/api/products"), params=params, timeout=self.timeout)
        r.raise_for_status()
        return [Product.model_validate(p) for p in r.json()]

    def get_product(self, product_id: str) -> Product:
        r = self.session.get(self._url(f"/api/products/{product_id}"), timeout=self.timeout)
        r.raise_for_status()
        return Product.model_validate(r.json())

    def list_categories(self, include_empty: bool = False) -> List[Category]:
        params = {"include_empty": "true"} if include_empty else {}
        r = self.session.get(self._url("/api/categories"), params=params, timeout=self.timeout)
        r.raise_for_status()
        return [Category.model_validate(c) for c in r.json()]

    # Checkout
    def checkout(self, lines: Sequence[CartLine]) -> Dict[str, Any]:
        payload = {"cart": [line.model_dump(by_alias=True) for line in lines]}
        r = self.session.post(self._url("/api/checkout"), json=payload, timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    # Async catalog fetch (example)
    async def list_products_async(self) -> List[Product]:
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            r = await client.get(self._url("/api/products"))
            r.raise_for_status()
            return [Product.model_validate(p) for p in r.json()]
