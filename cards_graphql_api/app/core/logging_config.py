"""
Logging configuration for the GraphQL server.

``setup_logging`` attaches a console handler (and a file handler when
``LOG_FILE`` is set) to the root logger, exactly once per process.
Uvicorn's own access log is turned down to warnings because
``RequestLoggingMiddleware`` already logs one line per request.

Operator messages such as the startup line go to the ``CONSOLE_LOGGER``
logger, which prints the bare message without timestamp or level.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
CONSOLE_LOGGER = "cards_graphql_api.console"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger unless it already has handlers.

    Parameters
    ----------
    level : str
        Logging level name, case insensitive.  Unknown names fall
        back to ``INFO``.
    logfile : Optional[str]
        Optional path of a log file; missing parent directories are
        created.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    handlers = [logging.StreamHandler()]
    if logfile:
        log_path = Path(logfile).resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)

    console = logging.getLogger(CONSOLE_LOGGER)
    console.setLevel(logging.INFO)
    console.propagate = False
    plain_handler = logging.StreamHandler()
    plain_handler.setFormatter(logging.Formatter(fmt="%(message)s"))
    console.addHandler(plain_handler)
    for handler in handlers[1:]:
        console.addHandler(handler)

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
