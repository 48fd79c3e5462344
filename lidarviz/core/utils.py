from __future__ import annotations
import math
import logging

def get_logger(name: str = "lidarviz") -> logging.Logger:
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        fmt = logging.Formatter("[%(levelname)s] %(message)s")
        handler.setFormatter(fmt)
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
    return logger

def round_half_away(value: float) -> int:
    """Round like C's ``round``: halves go away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))
