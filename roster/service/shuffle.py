import random
import time
from typing import Sequence, TypeVar

T = TypeVar("T")


def make_random(seed: int | None = None) -> random.Random:
    return random.Random(time.time_ns() if seed is None else seed)


def shuffle(items: Sequence[T], rng: random.Random) -> list[T]:
    """Return a Fisher-Yates shuffled copy of ``items``, the input is left untouched."""
    shuffled = list(items)
    for i in range(len(shuffled)):
        j = rng.randint(0, i)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled
