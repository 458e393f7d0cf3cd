"""minishop: a small storefront API over a static product catalog."""

__version__ = "0.1.0"
