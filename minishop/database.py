from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Mapping, Tuple

# Static catalog data. Nothing here is mutated after import; every table is
# wrapped in a read-only mapping and handed to the catalog builders.

PLACEHOLDER_IMAGE_URL = "https://via.placeholder.com/300"


def _frozen(mapping: Dict) -> Mapping:
    return MappingProxyType(dict(mapping))


@dataclass(frozen=True)
class CategoryDef:
    name: str
    description: str


@dataclass(frozen=True)
class SubcategoryDef:
    name: str
    parent: str


@dataclass(frozen=True)
class RawProduct:
    name: str
    price: int


@dataclass(frozen=True)
class CatalogTables:
    """Name-keyed lookup tables plus the raw product list for one catalog."""

    name: str
    products: Tuple[RawProduct, ...]
    categories: Mapping[str, str]
    subcategories: Mapping[str, str]
    images: Mapping[str, str]
    descriptions: Mapping[str, str]
    category_defs: Mapping[str, CategoryDef]
    subcategory_defs: Mapping[str, SubcategoryDef]
    placeholder_image_url: str = field(default=PLACEHOLDER_IMAGE_URL)


_CATEGORY_DEFS = _frozen({
    "Electronics": CategoryDef("Electronics", "Gadgets and electronic devices"),
    "Fashion": CategoryDef("Fashion", "Clothing and accessories"),
})


# ---------------------------
# classic: the storefront's default catalog
# ---------------------------
CLASSIC = CatalogTables(
    name="classic",
    products=(
        RawProduct("Laptop", 60000),
        RawProduct("Phone", 20000),
        RawProduct("Headphones", 8000),
        RawProduct("Shoes", 2500),
        RawProduct("Watch", 4000),
        RawProduct("Backpack", 500),
        RawProduct("Sunglasses", 2000),
        RawProduct("Camera", 35000),
        RawProduct("Tablet", 25000),
    ),
    categories=_frozen({
        "Laptop": "Electronics",
        "Phone": "Electronics",
        "Headphones": "Electronics",
        "Tablet": "Electronics",
        "Camera": "Electronics",
        "Watch": "Fashion",
        "Shoes": "Fashion",
        "Sunglasses": "Fashion",
        "Backpack": "Fashion",
    }),
    subcategories=_frozen({
        "Laptop": "Computers",
        "Phone": "Mobile",
        "Headphones": "Audio",
        "Tablet": "Computers",
        "Camera": "Photography",
        "Watch": "Watches",
        "Shoes": "Footwear",
        "Sunglasses": "Accessories",
        "Backpack": "Bags",
    }),
    images=_frozen({
        "Laptop": "https://images.unsplash.com/photo-1496181133206-80ce9b88a853?w=600&h=600&fit=crop&q=80",
        "Phone": "https://images.unsplash.com/photo-1511707171634-5f897ff02aa9?w=600&h=600&fit=crop&q=80",
        "Headphones": "https://images.unsplash.com/photo-1505740420928-5e560c06d30e?w=600&h=600&fit=crop&q=80",
        "Shoes": "https://images.unsplash.com/photo-1542291026-7eec264c27ff?w=600&h=600&fit=crop&q=80",
        "Watch": "https://images.unsplash.com/photo-1523275335684-37898b6baf30?w=600&h=600&fit=crop&q=80",
        "Camera": "https://images.unsplash.com/photo-1502920917128-1aa500764cbd?w=600&h=600&fit=crop&q=80",
        "Tablet": "https://images.unsplash.com/photo-1542751110-97427bbecf20?w=600&h=600&fit=crop&q=80",
        "Backpack": "https://images.unsplash.com/photo-1553062407-98eeb64c6a62?w=600&h=600&fit=crop&q=80",
        "Sunglasses": "https://images.unsplash.com/photo-1577803645773-f96470509666?w=600&h=600&fit=crop&q=80",
    }),
    descriptions=_frozen({
        "Laptop": "Powerful laptop with high-performance processor and long battery life. Perfect for work and entertainment on the go.",
        "Phone": "Latest smartphone with advanced camera system, stunning display, and all-day battery life. Stay connected in style.",
        "Headphones": "Premium noise-cancelling headphones with crystal clear sound quality and comfortable over-ear design.",
        "Shoes": "Comfortable and stylish shoes designed for all-day wear. Perfect for both casual outings and active lifestyles.",
        "Watch": "Elegant timepiece with modern design, water resistance, and multiple smart features to keep you on schedule.",
        "Backpack": "Durable backpack with multiple compartments, padded laptop sleeve, and ergonomic design for maximum comfort.",
        "Sunglasses": "UV-protected sunglasses with polarized lenses to reduce glare and protect your eyes in style.",
        "Camera": "High-resolution camera with advanced features for professional photography and videography.",
        "Tablet": "Portable tablet with high-definition display, powerful performance, and all-day battery life.",
    }),
    category_defs=_CATEGORY_DEFS,
    subcategory_defs=_frozen({
        "Computers": SubcategoryDef("Computers", "Electronics"),
        "Mobile": SubcategoryDef("Mobile", "Electronics"),
        "Audio": SubcategoryDef("Audio", "Electronics"),
        "Photography": SubcategoryDef("Photography", "Electronics"),
        "Wearables": SubcategoryDef("Wearables", "Electronics"),
        "Watches": SubcategoryDef("Watches", "Fashion"),
        "Footwear": SubcategoryDef("Footwear", "Fashion"),
        "Accessories": SubcategoryDef("Accessories", "Fashion"),
        "Bags": SubcategoryDef("Bags", "Fashion"),
    }),
)


# ---------------------------
# wearables: smart watches filed under Electronics
# ---------------------------
WEARABLES = CatalogTables(
    name="wearables",
    products=(
        RawProduct("Laptop", 60000),
        RawProduct("Phone", 20000),
        RawProduct("Headphones", 3000),
        RawProduct("Shoes", 2500),
        RawProduct("Smart Watch", 4000),
        RawProduct("Backpack", 1500),
        RawProduct("Sunglasses", 1200),
        RawProduct("Camera", 35000),
        RawProduct("Tablet", 25000),
        RawProduct("Smartwatch", 8000),
    ),
    categories=_frozen({
        "Laptop": "Electronics",
        "Phone": "Electronics",
        "Headphones": "Electronics",
        "Tablet": "Electronics",
        "Camera": "Electronics",
        "Smart Watch": "Electronics",
        "Smartwatch": "Electronics",
        "Shoes": "Fashion",
        "Sunglasses": "Fashion",
        "Backpack": "Fashion",
    }),
    subcategories=_frozen({
        "Laptop": "Computers",
        "Phone": "Mobile",
        "Headphones": "Audio",
        "Tablet": "Computers",
        "Camera": "Photography",
        "Smart Watch": "Wearables",
        "Smartwatch": "Wearables",
        "Shoes": "Footwear",
        "Sunglasses": "Accessories",
        "Backpack": "Bags",
    }),
    images=_frozen({
        "Laptop": "https://images.unsplash.com/photo-1496181133206-80ce9b88a853?w=400&h=400&fit=crop",
        "Phone": "https://images.unsplash.com/photo-1511707171634-5f897ff02aa9?w=400&h=400&fit=crop",
        "Headphones": "https://images.unsplash.com/photo-1505740420928-5e560c06d30e?w=400&h=400&fit=crop",
        "Shoes": "https://images.unsplash.com/photo-1549298916-b41d501d3772?w=400&h=400&fit=crop",
        "Smart Watch": "https://images.unsplash.com/photo-1523275335684-37898b6baf30?w=400&h=400&fit=crop",
        "Backpack": "https://images.unsplash.com/photo-1553062407-98eeb64c6a62?w=400&h=400&fit=crop",
        "Sunglasses": "https://images.unsplash.com/photo-1572635196237-14b3f281503f?w=400&h=400&fit=crop",
        "Camera": "https://images.unsplash.com/photo-1502920917128-1aa500764cbd?w=400&h=400&fit=crop",
        "Tablet": "https://images.unsplash.com/photo-1542751110-97427bbecf20?w=400&h=400&fit=crop",
        "Smartwatch": "https://images.unsplash.com/photo-1522312346375-d1a52e2b99b3?w=400&h=400&fit=crop",
    }),
    descriptions=_frozen({
        "Laptop": "High-performance laptop perfect for work and entertainment. Features a stunning display, powerful processor, and long-lasting battery life for all-day productivity.",
        "Phone": "Latest smartphone with advanced camera system, fast processor, and all-day battery. Perfect for capturing memories and staying connected.",
        "Headphones": "Premium wireless headphones with noise cancellation and superior sound quality. Enjoy your music without distractions.",
        "Tablet": "Versatile tablet for work and play. Features a large, vibrant display and all-day battery life for productivity on the go.",
        "Camera": "Professional DSLR camera for photography enthusiasts. Capture stunning images with manual controls and interchangeable lenses.",
        "Smart Watch": "Advanced smartwatch with health monitoring, GPS tracking, and smartphone connectivity. Stay fit and connected.",
        "Smartwatch": "Feature-rich smartwatch with heart rate monitoring, activity tracking, and notification alerts. Your fitness companion.",
        "Shoes": "Comfortable athletic shoes designed for running and daily activities. Lightweight with superior cushioning and support.",
        "Sunglasses": "Stylish sunglasses with UV protection and polarized lenses. Perfect for outdoor activities and driving.",
        "Backpack": "Durable backpack with multiple compartments and ergonomic design. Perfect for daily commute and travel.",
    }),
    category_defs=_CATEGORY_DEFS,
    subcategory_defs=_frozen({
        "Computers": SubcategoryDef("Computers", "Electronics"),
        "Mobile": SubcategoryDef("Mobile", "Electronics"),
        "Audio": SubcategoryDef("Audio", "Electronics"),
        "Photography": SubcategoryDef("Photography", "Electronics"),
        "Wearables": SubcategoryDef("Wearables", "Electronics"),
        "Footwear": SubcategoryDef("Footwear", "Fashion"),
        "Accessories": SubcategoryDef("Accessories", "Fashion"),
        "Bags": SubcategoryDef("Bags", "Fashion"),
    }),
)


CATALOGS: Mapping[str, CatalogTables] = _frozen({
    CLASSIC.name: CLASSIC,
    WEARABLES.name: WEARABLES,
})
