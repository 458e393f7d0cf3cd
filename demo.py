#!/usr/bin/env python
from pathlib import Path
import tempfile

from rich import print

from minishop.config import ClientSettings
from minishop_sdk import BrowseSession, LocalCart, ShopClient, checkout_cart


def main():
    settings = ClientSettings.from_env()
    c = ShopClient(base_url=settings.api_base)
    session = BrowseSession()

    # -----------------------------
    # Load catalog
    # -----------------------------
    print("Loading catalog...")
    error = session.refresh(c)
    if error:
        print(f"[red]{error}[/red]")
        return
    print(session.summary())
    print(session.category_choices())

    # -----------------------------
    # Browse
    # -----------------------------
    print("\nElectronics between 10000 and 40000, cheapest first...")
    session.select("electronics")
    session.set_price_band(10000, 40000)
    session.set_sort("price-asc")
    for p in session.visible():
        print(f"  {p.name}: {p.price}")
    print(session.summary())

    print("\nSearching 'cam'...")
    session.clear_filters()
    session.set_search("cam")
    print([p.name for p in session.visible()])

    # -----------------------------
    # Cart + checkout
    # -----------------------------
    cart = LocalCart(Path(tempfile.mkdtemp()) / "cart.json")
    for p in session.visible():
        cart.add(p)
        cart.add(p)
    print(f"\nCart: {cart.items_count} item(s), total {cart.total}")
    print(checkout_cart(c, cart))
    print(f"Cart after checkout: {cart.items_count} item(s)")


if __name__ == "__main__":
    main()
