# minishop/core.py
import re
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from .database import CatalogTables, CategoryDef, RawProduct, SubcategoryDef
from .errors import CatalogConfigError
from .models import Category, Product, Subcategory

_WHITESPACE = re.compile(r"\s+")

DEFAULT_CATEGORY = "Uncategorized"
DEFAULT_SUBCATEGORY = "General"


# ---------------------------
# Enrichment
# ---------------------------
def product_id(name: str) -> str:
    return "prod_" + _WHITESPACE.sub("_", name.lower())


def enrich(raw: RawProduct, tables: CatalogTables) -> Product:
    name = raw.name
    return Product(
        id=product_id(name),
        name=name,
        price=raw.price,
        category=tables.categories.get(name, DEFAULT_CATEGORY),
        subcategory=tables.subcategories.get(name, DEFAULT_SUBCATEGORY),
        image_url=tables.images.get(name, tables.placeholder_image_url),
        description=tables.descriptions.get(name, f"A high-quality {name}"),
    )


def build_catalog(tables: CatalogTables) -> Tuple[Product, ...]:
    """Enrich every raw product of ``tables``, keeping their order.

    Raises CatalogConfigError when two names collapse to the same id.
    """
    products: List[Product] = []
    seen: Dict[str, str] = {}
    for raw in tables.products:
        product = enrich(raw, tables)
        if product.id in seen:
            raise CatalogConfigError(
                f"duplicate product id {product.id!r} ({seen[product.id]!r} and {raw.name!r})"
            )
        seen[product.id] = raw.name
        products.append(product)
    return tuple(products)


# ---------------------------
# Aggregation
# ---------------------------
class _CategoryDraft:
    def __init__(self, name: str, description: str) -> None:
        self.name = name
        self.description = description
        self.count = 0
        # lowercased subcategory name -> [display name, count], insertion ordered
        self.subcategories: Dict[str, List] = {}

    def subcategory(self, name: str) -> List:
        # first spelling seen wins the display name
        return self.subcategories.setdefault(name.lower(), [name, 0])

    def freeze(self) -> Category:
        return Category(
            id=self.name.lower(),
            name=self.name,
            description=self.description,
            product_count=self.count,
            available=self.count > 0,
            subcategories=[
                Subcategory(id=key, name=name, product_count=n, available=n > 0)
                for key, (name, n) in self.subcategories.items()
            ],
        )


def aggregate_categories(
    products: Iterable[Product],
    category_defs: Mapping[str, CategoryDef],
    subcategory_defs: Mapping[str, SubcategoryDef],
    include_empty: bool = False,
) -> List[Category]:
    """Build the category -> subcategory tree with live product counts.

    Categories and their subcategories come out in first-encountered order.
    A subcategory is counted under the category its product belongs to, so
    the same subcategory name under two categories gives two entries.

    With ``include_empty`` the defined categories and subcategories that no
    product uses are appended with a zero count.
    """
    drafts: Dict[str, _CategoryDraft] = {}

    def draft_for(name: str) -> _CategoryDraft:
        if name not in drafts:
            definition: Optional[CategoryDef] = category_defs.get(name)
            description = definition.description if definition else f"{name} products"
            drafts[name] = _CategoryDraft(name, description)
        return drafts[name]

    for product in products:
        draft = draft_for(product.category)
        draft.count += 1
        draft.subcategory(product.subcategory)[1] += 1

    if include_empty:
        for name in category_defs:
            draft_for(name)
        for sub in subcategory_defs.values():
            parent = drafts.get(sub.parent)
            if parent is not None:
                parent.subcategory(sub.name)

    return [d.freeze() for d in drafts.values()]
