"""Client side of minishop: HTTP client, local cart, and browsing state."""

from .cart import LocalCart
from .client import ShopClient
from .session import BrowseSession, checkout_cart

__all__ = ["BrowseSession", "LocalCart", "ShopClient", "checkout_cart"]
