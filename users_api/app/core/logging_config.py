"""
Logging configuration for the Users API.

``setup_logging`` attaches a console handler (and, when ``LOG_FILE`` is
set, a file handler) to the root logger.  Every module logs through
``logging.getLogger(__name__)`` so records carry the module path, e.g.
``users_api.app.services.user_service``.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Set the root level and, on first use, install the handlers.

    ``level`` is a level name such as ``"debug"``; unrecognised names
    mean ``INFO``.  ``logfile``, when given, also receives every record.
    """
    root = logging.getLogger()
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    root.setLevel(numeric_level)
    if root.handlers:
        # Handlers were installed already (uvicorn, pytest or an earlier
        # create_app call); only the level is updated.
        return

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
