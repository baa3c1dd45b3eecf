"""
Logging setup for command line use of the client.

Library modules only create ``logging.getLogger(__name__)`` loggers and
never configure handlers.  Entry points call :func:`setup_logging`
once; repeated calls are ignored so embedding applications that already
configured the root logger keep their own handlers.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None, *, verbose: bool = False) -> None:
    """Attach console (and optional file) handlers to the root logger.

    Parameters
    ----------
    level : str
        Level name such as ``"DEBUG"`` or ``"warning"``; unknown names
        fall back to ``INFO``.
    logfile : Optional[str]
        Also write records to this file, creating parent directories.
    verbose : bool
        Force ``DEBUG`` regardless of ``level``.  Request URLs are
        logged at this level.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    numeric_level = logging.DEBUG if verbose else getattr(logging, level.upper(), logging.INFO)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO
    root.setLevel(numeric_level)

    handlers = [logging.StreamHandler()]
    if logfile:
        log_path = Path(logfile).expanduser()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)

    # Connection pool chatter drowns out the client's own debug output.
    if not verbose:
        logging.getLogger("urllib3").setLevel(logging.WARNING)
