"""Logging setup shared by the web and terminal front ends."""

import logging

from rich.logging import RichHandler

_configured = False


def configure_logging(level: str = "INFO") -> None:
    """Install a rich console handler on the root logger (once per process)."""
    global _configured
    if _configured:
        logging.getLogger().setLevel(level)
        return

    logging.basicConfig(
        level=level,
        format="%(name)s - %(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )
    # psycopg is chatty at INFO about connection state
    logging.getLogger("psycopg").setLevel(logging.WARNING)
    _configured = True
