"""Process wide logging setup."""
from __future__ import annotations

import logging
from typing import Union

_LOGGING_INITIALIZED = False


def init_logging(level: Union[int, str] = logging.INFO) -> None:
    """Attach a console handler to the ``sketchslider`` logger once."""
    global _LOGGING_INITIALIZED
    if _LOGGING_INITIALIZED:
        return

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)

    root = logging.getLogger("sketchslider")
    root.setLevel(level)
    root.addHandler(handler)
    _LOGGING_INITIALIZED = True


__all__ = ["init_logging"]
