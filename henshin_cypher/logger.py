"""Package logger with Rich console output on stderr."""

import logging

from rich.console import Console
from rich.logging import RichHandler

from .config import LOGGING_LEVEL

LOGGER = logging.getLogger("henshin_cypher")
LOGGER.setLevel(getattr(logging, LOGGING_LEVEL, logging.WARNING))
LOGGER.addHandler(RichHandler(console=Console(stderr=True)))
