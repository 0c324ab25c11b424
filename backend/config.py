"""Environment-driven settings for the API server."""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_STATIC_DIR = Path(__file__).resolve().parent / "public"


def read_env(name: str, default: str | None = None) -> str | None:
    """Return an env var, treating an empty value as unset."""
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    return value.strip()


def _read_port() -> int:
    raw = read_env("PORT", "3000")
    try:
        return int(raw)
    except ValueError:
        raise RuntimeError(f"PORT must be an integer, got {raw!r}") from None


def _read_cors_origins() -> list[str]:
    raw = read_env("CORS_ORIGINS")
    if not raw:
        return ["*"]
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


@dataclass(frozen=True)
class Settings:
    host: str
    port: int
    log_level: str
    cors_origins: list[str]
    static_dir: Path

    @property
    def index_file(self) -> Path:
        return self.static_dir / "index.html"


def get_settings() -> Settings:
    """Resolve settings from the current environment.

    Read on every call so tests can monkeypatch variables without
    reloading modules.
    """
    return Settings(
        host=read_env("HOST", "0.0.0.0"),
        port=_read_port(),
        log_level=(read_env("LOG_LEVEL", "INFO") or "INFO").upper(),
        cors_origins=_read_cors_origins(),
        static_dir=Path(read_env("STATIC_DIR", str(DEFAULT_STATIC_DIR))).resolve(),
    )
