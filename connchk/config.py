import os
from dotenv import load_dotenv

load_dotenv()


def _optional_float(name: str) -> float | None:
    raw = os.getenv(name, "").strip()
    return float(raw) if raw else None


def _optional_int(name: str) -> int | None:
    raw = os.getenv(name, "").strip()
    return int(raw) if raw else None


class Settings:
    CONNCHK_CONFIG: str | None = os.getenv("CONNCHK_CONFIG") or None
    # None keeps the runtime's own connect/read behavior
    CONNCHK_TIMEOUT_SECONDS: float | None = _optional_float("CONNCHK_TIMEOUT_SECONDS")
    CONNCHK_MAX_WORKERS: int | None = _optional_int("CONNCHK_MAX_WORKERS")
    CONNCHK_LOG_LEVEL: str = os.getenv("CONNCHK_LOG_LEVEL", "WARNING").upper()


settings = Settings()
