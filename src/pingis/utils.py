import logging
import random
from typing import List, MutableSequence, TypeVar

T = TypeVar("T")


def setup_logger(name: str) -> logging.Logger:
    """Return the module logger. Output is left to the application."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        logger.addHandler(logging.NullHandler())
    return logger


def shuffle(items: MutableSequence[T], rng: random.Random) -> MutableSequence[T]:
    """Fisher-Yates shuffle in place: for i from the last index down to 1,
    swap item i with a uniformly chosen item at index <= i."""
    for i in range(len(items) - 1, 0, -1):
        j = rng.randrange(i + 1)
        items[i], items[j] = items[j], items[i]
    return items


def pair_consecutively(items: List[T]) -> List[tuple[T, T]]:
    return [(items[i], items[i + 1]) for i in range(0, len(items) - 1, 2)]
