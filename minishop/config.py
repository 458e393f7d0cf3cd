# minishop/config.py
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Tuple

from dotenv import load_dotenv

DEFAULT_ORIGINS = ("http://localhost:3000",)
CORS_METHODS = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
CORS_HEADERS = ["Content-Type", "Authorization"]


def _flag(raw: str) -> bool:
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _origins(raw: str) -> Tuple[str, ...]:
    parts = tuple(o.strip() for o in raw.split(",") if o.strip())
    return parts or DEFAULT_ORIGINS


@dataclass(frozen=True)
class Settings:
    host: str = "0.0.0.0"
    port: int = 5000
    allowed_origins: Tuple[str, ...] = field(default=DEFAULT_ORIGINS)
    catalog: str = "classic"
    check_images: bool = False
    check_timeout: float = 5.0
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        load_dotenv()
        return cls(
            host=os.getenv("MINISHOP_HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "5000")),
            allowed_origins=_origins(os.getenv("MINISHOP_ALLOWED_ORIGINS", "")),
            catalog=os.getenv("MINISHOP_CATALOG", "classic").strip().lower(),
            check_images=_flag(os.getenv("MINISHOP_CHECK_IMAGES", "0")),
            check_timeout=float(os.getenv("MINISHOP_CHECK_TIMEOUT", "5")),
            log_level=os.getenv("MINISHOP_LOG_LEVEL", "INFO").upper(),
        )


@dataclass(frozen=True)
class ClientSettings:
    api_base: str = "http://localhost:5000"
    cart_path: Path = field(default_factory=lambda: Path.home() / ".minishop" / "cart.json")
    timeout: int = 10

    @classmethod
    def from_env(cls) -> "ClientSettings":
        load_dotenv()
        default = cls()
        cart_path = os.getenv("MINISHOP_CART_PATH")
        return cls(
            api_base=os.getenv("MINISHOP_API_BASE", default.api_base),
            cart_path=Path(cart_path).expanduser() if cart_path else default.cart_path,
            timeout=int(os.getenv("MINISHOP_TIMEOUT", str(default.timeout))),
        )
