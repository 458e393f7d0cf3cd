# minishop/main.py
import logging
from contextlib import asynccontextmanager
from typing import List, Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware

from .config import CORS_HEADERS, CORS_METHODS, Settings
from .core import aggregate_categories, build_catalog
from .database import CATALOGS, CatalogTables
from .errors import CartValidationError, CatalogConfigError
from .filters import query_products
from .images import validate_image_urls
from .models import ALL, Category, CheckoutReceipt, Product, Query, SortKey
from .orders import checkout

logger = logging.getLogger(__name__)


def _tables_for(settings: Settings) -> CatalogTables:
    try:
        return CATALOGS[settings.catalog]
    except KeyError:
        raise CatalogConfigError(
            f"unknown catalog {settings.catalog!r}; expected one of {sorted(CATALOGS)}"
        ) from None


def create_app(settings: Optional[Settings] = None, tables: Optional[CatalogTables] = None) -> FastAPI:
    settings = settings or Settings()
    tables = tables or _tables_for(settings)
    # fail fast: a broken catalog never gets served
    products = build_catalog(tables)
    logger.info("catalog %r ready with %d products", tables.name, len(products))

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if settings.check_images:
            app.state.products = await validate_image_urls(
                app.state.products, timeout=settings.check_timeout
            )
            logger.info("image urls validated")
        yield

    app = FastAPI(title="minishop", version="0.1.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.tables = tables
    app.state.products = products

    allow_all = "*" in settings.allowed_origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if allow_all else list(settings.allowed_origins),
        allow_methods=CORS_METHODS,
        allow_headers=CORS_HEADERS,
    )

    @app.get("/health")
    async def health() -> dict:
        return {"status": "ok"}

    # ---------------------------
    # Catalog endpoints
    # ---------------------------
    @app.get("/api/products", response_model=List[Product])
    async def list_products(
        request: Request,
        search: str = "",
        category: str = ALL,
        subcategory: str = ALL,
        min_price: Optional[str] = None,
        max_price: Optional[str] = None,
        sort: SortKey = SortKey.FEATURED,
    ):
        try:
            price_range = None
            if min_price is not None or max_price is not None:
                price_range = (min_price, max_price)
            q = Query(
                search_term=search,
                category=category,
                subcategory=subcategory,
                price_range=price_range,
                sort_key=sort,
            )
            return query_products(request.app.state.products, q)
        except Exception:
            logger.exception("error fetching products")
            raise HTTPException(status_code=500, detail="Failed to fetch products")

    @app.get("/api/products/{product_id}", response_model=Product)
    async def get_product(product_id: str, request: Request):
        for p in request.app.state.products:
            if p.id == product_id:
                return p
        raise HTTPException(status_code=404, detail="product not found")

    @app.get("/api/categories", response_model=List[Category])
    async def list_categories(request: Request, include_empty: bool = False):
        state = request.app.state
        try:
            return aggregate_categories(
                state.products,
                state.tables.category_defs,
                state.tables.subcategory_defs,
                include_empty=include_empty,
            )
        except Exception:
            logger.exception("error fetching categories")
            raise HTTPException(status_code=500, detail="Failed to fetch categories")

    # ---------------------------
    # Checkout
    # ---------------------------
    @app.post("/api/checkout", response_model=CheckoutReceipt)
    async def submit_checkout(request: Request):
        try:
            payload = await request.json()
        except ValueError:
            raise HTTPException(status_code=400, detail="Invalid cart data")
        if not isinstance(payload, dict):
            raise HTTPException(status_code=400, detail="Invalid cart data")
        try:
            return checkout(payload.get("cart"))
        except CartValidationError as e:
            logger.info("rejected checkout: %s", e)
            raise HTTPException(status_code=400, detail="Invalid cart data")

    return app


app = create_app(Settings.from_env())
