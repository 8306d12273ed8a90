"""Helpers for signed amounts and for working with sequences of elements."""

import re
from typing import Hashable, Sequence, TypeVar

T = TypeVar("T")
H = TypeVar("H", bound=Hashable)
N = TypeVar("N", int, float)

_UINT64_MAX = 2**64 - 1
_DECIMAL_DIGITS = re.compile(r"[0-9]+")


def negative(money: N) -> N:
    """Return ``money`` as a non-positive value."""
    return -money if money > 0 else money


def positive(money: N) -> N:
    """Return ``money`` as a non-negative value."""
    return -money if money < 0 else money


def in_elems(elem: T, elems: Sequence[T]) -> bool:
    """Return whether ``elem`` occurs in ``elems``."""
    return elem in elems


def uniq_elems(elems: Sequence[H]) -> list[H]:
    """Return ``elems`` without duplicates, keeping first occurrences in order."""
    return list(dict.fromkeys(elems))


def remove_elems(elems: Sequence[T], elem: T) -> list[T]:
    """Return ``elems`` with every occurrence of ``elem`` removed."""
    return [value for value in elems if value != elem]


def paging_elems(elems: Sequence[T], page: int, size: int) -> list[T]:
    """Return page ``page`` (1-based) of ``elems`` split into pages of ``size``.

    A page number below 1 is treated as the first page.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    page = max(page, 1)
    start = min((page - 1) * size, len(elems))
    return list(elems[start : start + size])


def sharding_elems(elems: Sequence[T], batch_size: int) -> list[list[T]]:
    """Split ``elems`` into consecutive batches of ``batch_size``.

    A non-positive batch size puts everything in a single batch.
    """
    if not elems:
        return []
    if batch_size <= 0:
        batch_size = len(elems)
    return [list(elems[start : start + batch_size]) for start in range(0, len(elems), batch_size)]


def join_elems(elems: Sequence[object], sep: str) -> str:
    """Join the string forms of ``elems`` with ``sep``."""
    return sep.join(str(value) for value in elems)


def force_string_to_uint64(str_num: str) -> int:
    """Parse a decimal unsigned 64-bit integer, returning 0 if that fails."""
    if not _DECIMAL_DIGITS.fullmatch(str_num):
        return 0
    value = int(str_num)
    return value if value <= _UINT64_MAX else 0