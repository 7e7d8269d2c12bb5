"""Runtime settings read from the environment; loads .env locally via python-dotenv."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

# Load .env only when present (e.g. local dev); does not override existing env
load_dotenv()

DEFAULT_CORS_ORIGIN_REGEX = r"^(https?://(localhost|127\.0\.0\.1)(:\d+)?|tauri://localhost)$"


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    debug: bool = False
    destinations_file: str | None = None
    cors_origin_regex: str = DEFAULT_CORS_ORIGIN_REGEX


def load_settings() -> Settings:
    """Read settings from PACKER_* environment variables."""
    return Settings(
        log_level=os.getenv("PACKER_LOG_LEVEL", "INFO").strip().upper() or "INFO",
        debug=os.getenv("PACKER_DEBUG", "0") == "1",
        destinations_file=os.getenv("PACKER_DESTINATIONS_FILE") or None,
        cors_origin_regex=os.getenv("PACKER_CORS_ORIGIN_REGEX", DEFAULT_CORS_ORIGIN_REGEX),
    )


settings = load_settings()


def configure_logging(config: Settings = settings) -> None:
    """Logging setup for the CLI and API entry points."""
    level = logging.DEBUG if config.debug else getattr(logging, config.log_level, logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # basicConfig is a no-op once a server has set up root handlers
    logging.getLogger("parcel_packer").setLevel(level)
