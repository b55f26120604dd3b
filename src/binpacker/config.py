"""Runtime settings; loads .env locally via python-dotenv."""

from __future__ import annotations

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field

# Load .env only when present (e.g. local dev); does not override existing env
load_dotenv()


class Settings(BaseModel):
    log_level: str = Field(default="INFO", description="Root log level for the CLI and API")
    default_strategy: str = Field(default="ffd", description="Strategy used when a request names none")
    max_items: int = Field(default=100_000, gt=0, description="Upper bound on items per request")


def load_settings() -> Settings:
    """Read settings from the environment at call time."""
    return Settings(
        log_level=os.getenv("BINPACKER_LOG_LEVEL", "INFO").upper(),
        default_strategy=os.getenv("BINPACKER_DEFAULT_STRATEGY", "ffd"),
        max_items=int(os.getenv("BINPACKER_MAX_ITEMS", "100000")),
    )
