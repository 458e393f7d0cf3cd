# minishop/models.py
from enum import Enum
from typing import Any, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _Wire(BaseModel):
    # snake_case in Python, camelCase on the wire
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class Product(_Wire):
    id: str
    name: str
    price: int = Field(..., gt=0)
    category: str
    subcategory: str
    image_url: str
    description: str


class Subcategory(_Wire):
    id: str
    name: str
    product_count: int = 0
    available: bool = False


class Category(_Wire):
    id: str
    name: str
    description: str
    product_count: int = 0
    available: bool = False
    subcategories: List[Subcategory] = Field(default_factory=list)


class CartLine(Product):
    """A product snapshot plus the quantity held in the cart."""

    quantity: int = Field(1, ge=1)

    @property
    def line_total(self) -> int:
        return self.price * self.quantity


class CheckoutReceipt(_Wire):
    success: bool = True
    message: str
    order_id: str


class SortKey(str, Enum):
    FEATURED = "featured"
    PRICE_ASC = "price-asc"
    PRICE_DESC = "price-desc"
    NAME_ASC = "name-asc"
    NAME_DESC = "name-desc"


ALL = "all"


class Query(_Wire):
    """One search/filter/sort request over the catalog.

    ``price_range`` keeps the raw bounds as given (numbers, numeric strings,
    or junk); they are parsed when the query runs.
    """

    search_term: str = ""
    category: str = ALL
    subcategory: str = ALL
    price_range: Optional[Tuple[Any, Any]] = None
    sort_key: SortKey = SortKey.FEATURED
