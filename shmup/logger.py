"""
Logging Setup
==============
The game owns the terminal, so log records go to a file.
"""

import logging

LOG_FORMAT = '[%(asctime)s][%(levelname)s] %(name)s: %(message)s'


def setup_logging(path: str = 'shmup.log', level: int = logging.INFO) -> logging.Handler:
    """Attach a file handler to the package logger and return it."""
    handler = logging.FileHandler(path, encoding='utf-8')
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root = logging.getLogger('shmup')
    root.setLevel(level)
    root.addHandler(handler)
    return handler
