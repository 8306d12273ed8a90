"""Random selection helpers."""

import random
from typing import Optional, Sequence, TypeVar

T = TypeVar("T")


def rand_elem(items: Sequence[T]) -> Optional[T]:
    """Return a random element of ``items``, or ``None`` if it is empty."""
    if not items:
        return None
    return random.choice(items)