# bookstore/settings.py
import os
from typing import Optional

# Basic settings helper to read environment configuration.


def _as_bool(val: Optional[str], default: bool = False) -> bool:
    if val is None:
        return default
    return val.lower() in ("1", "true", "yes", "on")


def _as_int(val: Optional[str], default: int) -> int:
    if val is None or not val.strip():
        return default
    return int(val)


def _as_float(val: Optional[str], default: float) -> float:
    if val is None or not val.strip():
        return default
    return float(val)


class Settings:
    def __init__(self) -> None:
        # None means the seed shipped in bookstore/data/books.json
        self.SEED_FILE: Optional[str] = os.getenv("BOOKSTORE_SEED_FILE") or None
        # Registration errors historically answer 404; strict mode uses 400/409.
        self.STRICT_STATUS_CODES: bool = _as_bool(os.getenv("BOOKSTORE_STRICT_STATUS_CODES"), False)
        self.BASE_URL: str = os.getenv("BOOKSTORE_BASE_URL", "http://localhost:5000")
        self.CLIENT_TIMEOUT: float = _as_float(os.getenv("BOOKSTORE_CLIENT_TIMEOUT"), 10.0)
        self.HOST: str = os.getenv("BOOKSTORE_HOST", "0.0.0.0")
        self.PORT: int = _as_int(os.getenv("BOOKSTORE_PORT"), 5000)
        self.LOG_LEVEL: str = os.getenv("BOOKSTORE_LOG_LEVEL", "INFO").upper()


settings = Settings()
