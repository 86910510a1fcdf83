"""
Console logging setup.

Modules log through the standard `logging` library with a module-level
logger; the command line installs a `rich` handler on the root logger.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(verbose: bool = False, console: Console | None = None) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    handler = RichHandler(console=console or Console(stderr=True), show_path=False, markup=False)
    logging.basicConfig(level=level, format="%(message)s", datefmt="[%X]", handlers=[handler], force=True)
