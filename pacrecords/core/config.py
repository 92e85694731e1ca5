from __future__ import annotations

import getpass
import os
from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_CORS_ORIGINS = ("http://localhost:3000", "http://127.0.0.1:3000")

PRODUCTION = "Production"
DEVELOPMENT = "Development"


def _detect_server() -> str:
    """Production unless running under the development account."""

    try:
        user = getpass.getuser()
    except (KeyError, OSError):  # pragma: no cover - no passwd entry
        return PRODUCTION
    return DEVELOPMENT if user == "pacdev" else PRODUCTION


def _parse_origins(raw: str) -> tuple[str, ...]:
    origins = tuple(origin.strip() for origin in raw.split(",") if origin.strip())
    return origins or DEFAULT_CORS_ORIGINS


@dataclass(frozen=True, slots=True)
class Settings:
    http_timeout: float = 30.0
    prod_domain: str = "data.pacificmasters.org"
    dev_domain: str = "pacmdev.org"
    records_file: Path | None = None
    server: str = PRODUCTION
    log_level: str = "WARNING"
    cors_origins: tuple[str, ...] = field(default=DEFAULT_CORS_ORIGINS)


def load_settings() -> Settings:
    """Read settings from the process environment."""

    defaults = Settings()
    records_file = os.getenv("PACRECORDS_RECORDS_FILE")
    return Settings(
        http_timeout=float(os.getenv("PACRECORDS_HTTP_TIMEOUT") or defaults.http_timeout),
        prod_domain=os.getenv("PACRECORDS_PROD_DOMAIN") or defaults.prod_domain,
        dev_domain=os.getenv("PACRECORDS_DEV_DOMAIN") or defaults.dev_domain,
        records_file=Path(records_file).expanduser() if records_file else None,
        server=os.getenv("PACRECORDS_SERVER") or _detect_server(),
        log_level=(os.getenv("PACRECORDS_LOG_LEVEL") or defaults.log_level).upper(),
        cors_origins=_parse_origins(os.getenv("API_CORS_ORIGINS", "")),
    )
