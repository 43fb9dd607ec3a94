"""
config.py — environment-driven settings.

Values come from the process environment, optionally seeded from a .env file
at the project root (python-dotenv). Read once at import.
"""

from __future__ import annotations

import logging
import os
from typing import List, Optional

from dotenv import load_dotenv

load_dotenv()

LOG_LEVEL = os.getenv("TAROT_LOG_LEVEL", "INFO").upper()
# Empty / unset means a fresh random draw for every reading.
DEFAULT_SEED: Optional[str] = os.getenv("TAROT_SEED") or None
CORS_ORIGINS: List[str] = [
    o.strip() for o in os.getenv("TAROT_CORS_ORIGINS", "*").split(",") if o.strip()
]

_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """Install a root handler once; later calls only adjust the level."""
    logging.basicConfig(format=_LOG_FORMAT)
    logging.getLogger().setLevel((level or LOG_LEVEL).upper())
