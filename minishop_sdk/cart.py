# minishop_sdk/cart.py
import json
import logging
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from minishop.models import CartLine, Product

logger = logging.getLogger(__name__)

# key the cart lives under inside the store file
CART_KEY = "cart"


class LocalCart:
    """Client-held cart mirrored into a JSON file after every change.

    The file is a plain key/value store; whoever writes last wins.
    """

    def __init__(self, path: Path):
        self.path = Path(path)
        self._lines: List[CartLine] = self._load()

    def _load(self) -> List[CartLine]:
        if not self.path.exists():
            return []
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
            return [CartLine.model_validate(item) for item in data.get(CART_KEY, [])]
        except (OSError, ValueError, AttributeError, TypeError, ValidationError) as e:
            logger.error("failed to read cart from %s: %s", self.path, e)
            return []

    def _save(self) -> None:
        payload = {CART_KEY: [line.model_dump(by_alias=True) for line in self._lines]}
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        except OSError as e:
            logger.error("failed to save cart to %s: %s", self.path, e)

    def _find(self, product_id: str) -> Optional[int]:
        for i, line in enumerate(self._lines):
            if line.id == product_id:
                return i
        return None

    @property
    def lines(self) -> List[CartLine]:
        return list(self._lines)

    @property
    def items_count(self) -> int:
        return sum(line.quantity for line in self._lines)

    @property
    def total(self) -> int:
        return sum(line.line_total for line in self._lines)

    def add(self, product: Product) -> CartLine:
        i = self._find(product.id)
        if i is None:
            line = CartLine(**product.model_dump(exclude={"quantity"}), quantity=1)
            self._lines.append(line)
        else:
            line = self._lines[i].model_copy(update={"quantity": self._lines[i].quantity + 1})
            self._lines[i] = line
        self._save()
        return line

    def update_quantity(self, product_id: str, quantity: int) -> None:
        i = self._find(product_id)
        if i is None:
            return
        if quantity < 1:
            del self._lines[i]
        else:
            self._lines[i] = self._lines[i].model_copy(update={"quantity": quantity})
        self._save()

    def remove(self, product_id: str) -> None:
        i = self._find(product_id)
        if i is not None:
            del self._lines[i]
            self._save()

    def clear(self) -> None:
        self._lines = []
        self._save()
