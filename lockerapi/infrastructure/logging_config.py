from __future__ import annotations

import logging


def configure_logging(level: str = "INFO") -> None:
    """Process-wide logging defaults. Uvicorn's own config may add handlers on top of this."""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )
