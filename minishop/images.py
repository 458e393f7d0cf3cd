# minishop/images.py
import asyncio
import logging
from typing import Optional, Sequence, Tuple

import httpx

from .models import Product

logger = logging.getLogger(__name__)


def fallback_image_url(index: int) -> str:
    return f"https://picsum.photos/400/400?random={index + 200}"


async def check_image_url(client: httpx.AsyncClient, url: str, timeout: float) -> bool:
    """HEAD the url; 2xx/3xx is alive, anything else (errors, timeouts) is not."""
    try:
        r = await client.head(url, timeout=timeout)
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        logger.debug("image check failed for %s: %s", url, e)
        return False
    return 200 <= r.status_code < 400


async def validate_image_urls(
    products: Sequence[Product],
    timeout: float = 5.0,
    client: Optional[httpx.AsyncClient] = None,
) -> Tuple[Product, ...]:
    """Check every product image concurrently and swap dead ones for a fallback."""
    owns_client = client is None
    if owns_client:
        client = httpx.AsyncClient(follow_redirects=False)
    try:
        results = await asyncio.gather(
            *(check_image_url(client, p.image_url, timeout) for p in products)
        )
    finally:
        if owns_client:
            await client.aclose()

    out = []
    for index, (product, ok) in enumerate(zip(products, results)):
        if not ok:
            replacement = fallback_image_url(index)
            logger.warning("image for %s unreachable, using %s", product.name, replacement)
            product = product.model_copy(update={"image_url": replacement})
        out.append(product)
    return tuple(out)
