# cli.py: interactive terminal storefront
import sys
from datetime import datetime
from typing import List, Optional

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.prompt import IntPrompt, Confirm, Prompt
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.text import Text
from rich import box

from prompt_toolkit import prompt
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.styles import Style as PromptStyle

from minishop.config import ClientSettings
from minishop.log import configure_logging
from minishop.models import CartLine, Product, SortKey
from minishop_sdk import BrowseSession, LocalCart, ShopClient, checkout_cart

console = Console()

custom_style = PromptStyle.from_dict({
    'completion-menu.completion': 'bg:#008888 #ffffff',
    'completion-menu.completion.current': 'bg:#00aaaa #000000',
    'scrollbar.background': 'bg:#88aaaa',
    'scrollbar.button': 'bg:#222222',
})


def money(value: int) -> str:
    return f"₹{value:,}"


# ---------------------------
# Display helpers
# ---------------------------
def show_products(products: List[Product], title: str = "📦 Products Catalog"):
    if not products:
        console.print("[italic yellow]No products match your filters[/italic yellow]")
        return

    table = Table(
        title=title,
        box=box.ROUNDED,
        header_style="bold cyan",
        title_style="bold magenta",
        show_lines=True
    )
    table.add_column("ID", style="dim", width=18)
    table.add_column("Name", style="bold", width=16)
    table.add_column("Price", justify="right", width=10)
    table.add_column("Category", width=14)
    table.add_column("Type", width=14)

    for p in products:
        table.add_row(p.id, p.name, money(p.price), p.category, p.subcategory)
    console.print(table)


def show_product(p: Product):
    body = Text()
    body.append(f"{p.description}\n\n")
    body.append("Price: ", style="bold")
    body.append(f"{money(p.price)}\n", style="green")
    body.append(f"Category: {p.category} → {p.subcategory}\n")
    body.append(f"Image: {p.image_url}", style="dim")
    console.print(Panel(body, title=f"ℹ️ {p.name}", border_style="cyan"))


def show_cart(cart: LocalCart):
    title = Text()
    title.append("🛒 Your Cart ", style="bold")
    title.append(f"({cart.items_count})", style="bold cyan")
    title.append(f" - Subtotal: {money(cart.total)}", style="bold green")

    lines: List[CartLine] = cart.lines
    if not lines:
        console.print(Panel("Your cart is empty 🛍️\nAdd products to see them here.", title=title, style="blue"))
        return

    table = Table(box=box.ROUNDED, header_style="bold blue", show_lines=True)
    table.add_column("Product", style="bold", width=24)
    table.add_column("Qty", justify="right", width=6)
    table.add_column("Price", justify="right", width=10)
    table.add_column("Subtotal", justify="right", width=12)
    for line in lines:
        table.add_row(line.name, str(line.quantity), money(line.price), money(line.line_total))

    console.print(Panel(table, title=title, border_style="blue"))


def show_categories(session: BrowseSession):
    table = Table(title="🏷️ Categories", box=box.ROUNDED, header_style="bold yellow")
    table.add_column("Value", style="dim", width=14)
    table.add_column("Category", width=36)
    for value, label in session.category_choices().items():
        table.add_row(value, label)
    console.print(table)


def show_status(message: str, is_success: bool = True):
    style = "green" if is_success else "red"
    return Panel.fit(f"[{style}]{message}[/{style}]", title="Status")


# ---------------------------
# API wrapper with a spinner
# ---------------------------
def with_spinner(fn, *args, **kwargs):
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        transient=True,
    ) as progress:
        progress.add_task(description="Processing...", total=None)
        return fn(*args, **kwargs)


# ---------------------------
# Input helpers with autocomplete
# ---------------------------
def prompt_with_autocomplete(message: str, completer=None, default: str = ""):
    return prompt(f"{message} ", completer=completer, style=custom_style, default=default)


def product_completer(session: BrowseSession):
    names = [p.name for p in session.products] + [p.id for p in session.products]
    return WordCompleter(names, ignore_case=True)


def pick_product(session: BrowseSession) -> Optional[Product]:
    raw = prompt_with_autocomplete("Product name or ID", completer=product_completer(session)).strip()
    for p in session.products:
        if raw in (p.id, p.name) or raw.lower() == p.name.lower():
            return p
    console.print(f"[red]No product called '{raw}'[/red]")
    return None


def create_header():
    header = Table(show_header=False, box=box.ROUNDED)
    header.add_column("left", width=30)
    header.add_column("center", width=40)
    header.add_column("right", width=30)

    now = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    header.add_row(
        "🛍️ Mini Shop",
        "[bold blue]Storefront[/bold blue]",
        f"[dim]{now}[/dim]"
    )
    return Panel(header, style="bold blue")


# ---------------------------
# Main menu
# ---------------------------
OPTIONS = [
    ("1", "📦 Browse products", "8", "🛒 Add to cart"),
    ("2", "🔍 Search", "9", "👀 View cart"),
    ("3", "🏷️ Pick category", "10", "✏️ Change quantity"),
    ("4", "💰 Price band", "11", "➖ Remove from cart"),
    ("5", "↕️ Sort", "12", "🧹 Clear cart"),
    ("6", "🧽 Clear filters", "13", "✅ Checkout"),
    ("7", "ℹ️ Product details", "r", "🔄 Reload catalog"),
    ("", "", "q", "👋 Quit"),
]


def menu(client: ShopClient, cart: LocalCart):
    session = BrowseSession()
    console.clear()
    console.print(create_header())

    error = with_spinner(session.refresh, client)
    status_message = error or f"Loaded {len(session.products)} products"
    is_ok = error is None

    while True:
        console.print(show_status(status_message, is_ok))
        is_ok = True

        menu_table = Table.grid(padding=(0, 2))
        menu_table.add_column("Key", style="bold cyan", width=4)
        menu_table.add_column("Option", width=30)
        menu_table.add_column("Key", style="bold cyan", width=4)
        menu_table.add_column("Option", width=30)
        for row in OPTIONS:
            menu_table.add_row(*row)
        console.print(Panel(menu_table, title=f"📋 Menu · cart {cart.items_count}", border_style="yellow"))

        choice = prompt_with_autocomplete(
            "\nChoose an option",
            completer=WordCompleter([str(i) for i in range(1, 14)] + ["r", "q", "quit", "exit"])
        ).strip()

        if choice == "1":
            show_products(session.visible())
            status_message = session.summary()

        elif choice == "2":
            term = prompt_with_autocomplete("Search products", completer=product_completer(session))
            session.set_search(term)
            show_products(session.visible())
            status_message = session.summary()

        elif choice == "3":
            show_categories(session)
            choices = session.category_choices()
            value = prompt_with_autocomplete(
                "Category", completer=WordCompleter(list(choices), ignore_case=True), default="all"
            ).strip().lower()
            if value not in choices:
                status_message, is_ok = f"Unknown category '{value}'", False
            else:
                session.select(value)
                show_products(session.visible())
                status_message = session.summary()

        elif choice == "4":
            low = Prompt.ask("Min price (blank for none)", default="")
            high = Prompt.ask("Max price (blank for none)", default="")
            session.set_price_band(low, high)
            show_products(session.visible())
            status_message = session.summary()

        elif choice == "5":
            keys = [k.value for k in SortKey]
            key = prompt_with_autocomplete(
                "Sort by", completer=WordCompleter(keys), default=session.query.sort_key.value
            ).strip()
            if key in keys:
                session.set_sort(key)
                show_products(session.visible())
                status_message = f"Sorted by {key}"
            else:
                status_message, is_ok = f"Unknown sort '{key}'", False

        elif choice == "6":
            session.clear_filters()
            status_message = session.summary()

        elif choice == "7":
            p = pick_product(session)
            if p:
                show_product(p)

        elif choice == "8":
            p = pick_product(session)
            if p:
                cart.add(p)
                status_message = f"{p.name} added to cart"

        elif choice == "9":
            show_cart(cart)

        elif choice == "10":
            p = pick_product(session)
            if p:
                qty = IntPrompt.ask("New quantity (0 removes)", default=1)
                cart.update_quantity(p.id, qty)
                show_cart(cart)

        elif choice == "11":
            p = pick_product(session)
            if p:
                cart.remove(p.id)
                status_message = "Item removed from cart"

        elif choice == "12":
            if Confirm.ask("Empty the cart?"):
                cart.clear()
                status_message = "Cart cleared"

        elif choice == "13":
            show_cart(cart)
            ok, status_message = with_spinner(checkout_cart, client, cart)
            is_ok = ok

        elif choice == "r":
            error = with_spinner(session.refresh, client)
            status_message = error or f"Loaded {len(session.products)} products"
            is_ok = error is None

        elif choice.lower() in ("q", "quit", "exit"):
            console.print(Panel.fit("[bold green]Thanks for shopping! 👋[/bold green]", title="Goodbye"))
            return

        console.print()
        console.rule(style="dim")


def main():
    settings = ClientSettings.from_env()
    configure_logging("WARNING")
    client = ShopClient(base_url=settings.api_base, timeout=settings.timeout)
    cart = LocalCart(settings.cart_path)
    try:
        menu(client, cart)
    except KeyboardInterrupt:
        console.print("\n\n[bold red]Interrupted by user[/bold red]")
        sys.exit(1)


if __name__ == "__main__":
    main()
