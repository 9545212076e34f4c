import logging
import sys

from projecthub.config.settings import settings

_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def _configure_root():
    root = logging.getLogger("projecthub")
    if root.handlers:
        return root
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(_FORMAT))
    root.addHandler(handler)
    root.setLevel(settings.LOG_LEVEL.upper())
    root.propagate = False
    return root


def get_logger(name: str) -> logging.Logger:
    """
    Returns a logger under the application namespace.
    """
    _configure_root()
    if not name.startswith("projecthub"):
        name = f"projecthub.{name}"
    return logging.getLogger(name)
