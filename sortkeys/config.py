from __future__ import annotations

import logging
import os

from .alphabet import DEFAULT_SYMBOLS

SORTKEYS_ALPHABET = os.getenv("SORTKEYS_ALPHABET", DEFAULT_SYMBOLS)
SORTKEYS_MAX_SPREAD = int(os.getenv("SORTKEYS_MAX_SPREAD", "1000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

VERSION = "1.0.0"


def configure_logging(level: str = LOG_LEVEL) -> None:
    numeric = getattr(logging, level, logging.INFO)
    logging.basicConfig(
        level=numeric,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger("sortkeys").setLevel(numeric)
