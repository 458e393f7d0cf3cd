# minishop/orders.py
import logging
import time
from typing import Any

from .errors import CartValidationError
from .models import CheckoutReceipt

logger = logging.getLogger(__name__)

ORDER_PLACED = "Order placed successfully!"


def _new_order_id() -> str:
    # time based; not unique across processes
    return f"ORD-{int(time.time() * 1000)}"


def checkout(cart: Any) -> CheckoutReceipt:
    """Acknowledge a submitted cart. No stock, payment, or persistence."""
    if cart is None:
        raise CartValidationError("cart is required")
    if not isinstance(cart, list):
        raise CartValidationError("cart must be a list of line items")

    items = 0
    for line in cart:
        if isinstance(line, dict):
            qty = line.get("quantity")
            items += qty if isinstance(qty, int) and not isinstance(qty, bool) else 1
        else:
            items += 1

    order_id = _new_order_id()
    logger.info("new order %s received: %d line(s), %d item(s)", order_id, len(cart), items)
    return CheckoutReceipt(success=True, message=ORDER_PLACED, order_id=order_id)
