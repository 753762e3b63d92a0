# linktext/logger.py
"""
Logger setup shared by the linktext modules.

Env knobs (optional):
- LINKTEXT_LOG_LEVEL: DEBUG / INFO / WARNING (default) / ERROR
- LINKTEXT_LOG_FILE: also append records to this file
"""

import logging
import os

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"


def _level_from_env() -> int:
    name = (os.getenv("LINKTEXT_LOG_LEVEL") or "WARNING").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING


def get_logger(name: str = "linktext") -> logging.Logger:
    # Configure once; handlers live on the package root logger.
    root = logging.getLogger("linktext")
    if not root.handlers:
        root.setLevel(_level_from_env())
        _sh = logging.StreamHandler()
        _sh.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(_sh)
        log_file = os.getenv("LINKTEXT_LOG_FILE")
        if log_file:
            try:
                _fh = logging.FileHandler(log_file, encoding="utf-8")
                _fh.setFormatter(logging.Formatter(LOG_FORMAT))
                root.addHandler(_fh)
            except OSError as e:
                root.warning("Cannot open log file %s: %s", log_file, e)
    return logging.getLogger(name)
