"""
Environment configuration shared by the HTTP app and the CLI.
"""

import logging
import os


NUMGUESS_ENV = os.getenv("NUMGUESS_ENV", "development")
NUMGUESS_LOG_LEVEL = os.getenv("NUMGUESS_LOG_LEVEL", "INFO").upper()
NUMGUESS_HOST = os.getenv("NUMGUESS_HOST", "127.0.0.1")
NUMGUESS_PORT = int(os.getenv("NUMGUESS_PORT", "8000"))
ALLOWED_ORIGINS = os.getenv("ALLOWED_ORIGINS", "*").split(",")

# Set to make server-side target generation reproducible
_seed = os.getenv("NUMGUESS_SEED")
NUMGUESS_SEED = int(_seed) if _seed else None


def configure_logging(level: str | None = None):
    """Configure the root logger once for the running process."""
    logging.basicConfig(
        level=getattr(logging, (level or NUMGUESS_LOG_LEVEL).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
