# tests/test_cart.py
import json

from minishop.core import build_catalog
from minishop.database import CLASSIC
from minishop_sdk.cart import LocalCart

LAPTOP, PHONE = build_catalog(CLASSIC)[:2]


def test_add_increments_and_persists(tmp_path):
    path = tmp_path / "cart.json"
    cart = LocalCart(path)
    cart.add(LAPTOP)
    cart.add(PHONE)
    cart.add(LAPTOP)

    assert [(l.id, l.quantity) for l in cart.lines] == [("prod_laptop", 2), ("prod_phone", 1)]
    assert cart.items_count == 3
    assert cart.total == 2 * 60000 + 20000

    stored = json.loads(path.read_text(encoding="utf-8"))
    assert stored["cart"][0]["imageUrl"] == LAPTOP.image_url
    assert stored["cart"][0]["quantity"] == 2

    reloaded = LocalCart(path)
    assert reloaded.lines == cart.lines


def test_update_quantity_and_remove(tmp_path):
    cart = LocalCart(tmp_path / "cart.json")
    cart.add(LAPTOP)
    cart.add(PHONE)

    cart.update_quantity("prod_phone", 5)
    assert cart.lines[1].quantity == 5
    cart.update_quantity("prod_phone", 0)
    assert [l.id for l in cart.lines] == ["prod_laptop"]
    cart.update_quantity("prod_missing", 3)
    cart.remove("prod_laptop")
    assert cart.lines == []
    assert LocalCart(tmp_path / "cart.json").lines == []


def test_clear(tmp_path):
    cart = LocalCart(tmp_path / "nested" / "cart.json")
    cart.add(LAPTOP)
    cart.clear()
    assert cart.items_count == 0
    assert LocalCart(tmp_path / "nested" / "cart.json").lines == []


def test_corrupt_store_starts_empty(tmp_path):
    path = tmp_path / "cart.json"
    path.write_text("{not json", encoding="utf-8")
    assert LocalCart(path).lines == []

    path.write_text(json.dumps({"cart": [{"id": "x"}]}), encoding="utf-8")
    assert LocalCart(path).lines == []

    path.write_text(json.dumps(["wrong", "shape"]), encoding="utf-8")
    assert LocalCart(path).lines == []
