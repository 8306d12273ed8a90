"""String, JSON, duration and streaming helpers."""

import dataclasses
import json
import random
import re
import string
import time
from datetime import timedelta
from typing import Any, Callable, Iterable, Iterator, Mapping, Optional, Union

_LETTERS = string.ascii_lowercase + string.digits
_DIGITS = re.compile(r"[0-9]+")
_UINT64_MAX = 2**64 - 1

_FNV64_OFFSET = 0xCBF29CE484222325
_FNV64_PRIME = 0x100000001B3
_MASK64 = 2**64 - 1

_DURATION_SEGMENT = re.compile(r"([0-9]*)(?:\.([0-9]*))?([^0-9.]*)")
_UNIT_NANOS = {
    "ns": 1,
    "us": 1_000,
    "\u00b5s": 1_000,
    "\u03bcs": 1_000,
    "ms": 1_000_000,
    "s": 1_000_000_000,
    "m": 60 * 1_000_000_000,
    "h": 3600 * 1_000_000_000,
}

Interval = Union[float, timedelta]


class BoomError(RuntimeError):
    """Raised when code reaches a place it should never reach."""


def boom(remark: str) -> None:
    """Raise :class:`BoomError` carrying ``remark``."""
    raise BoomError(f"[Boom] - [{remark}]  Met a Boom!!")


def _json_default(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def to_json_string(value: Any, pretty: bool = False) -> str:
    """Render ``value`` as JSON for debugging; dataclasses become objects.

    ``None`` renders as ``<nil>`` and values that cannot be encoded give
    an ``[error] ...`` message instead of raising.
    """
    if value is None:
        return "<nil>"
    try:
        if pretty:
            return json.dumps(
                value, indent=2, ensure_ascii=False, allow_nan=False, default=_json_default
            )
        return json.dumps(
            value,
            separators=(",", ":"),
            ensure_ascii=False,
            allow_nan=False,
            default=_json_default,
        )
    except (TypeError, ValueError) as err:
        return f"[error] can not marshal: {err}"


def process_strings(
    strs: Iterable[str],
    skip: Optional[Callable[[str], bool]] = None,
    fn: Optional[Callable[[str], str]] = None,
) -> list[str]:
    """Drop the strings ``skip`` accepts and map the rest through ``fn``."""
    return [
        fn(item) if fn is not None else item
        for item in strs
        if skip is None or not skip(item)
    ]


def parse_str_id_to_uint(str_uid: str, default: int) -> int:
    """Parse a decimal unsigned 64-bit id, returning ``default`` if that fails."""
    if not _DIGITS.fullmatch(str_uid):
        return default
    value = int(str_uid)
    return value if value <= _UINT64_MAX else default


def _parse_duration_nanos(text: str) -> int:
    rest = text
    negative = False
    if rest[:1] in ("-", "+"):
        negative = rest[0] == "-"
        rest = rest[1:]
    if rest == "0":
        return 0
    if not rest:
        raise ValueError(f"time: invalid duration {text!r}")

    total = 0
    pos = 0
    while pos < len(rest):
        match = _DURATION_SEGMENT.match(rest, pos)
        whole, frac, unit = match.group(1), match.group(2), match.group(3)
        if not whole and not frac:
            raise ValueError(f"time: invalid duration {text!r}")
        if not unit:
            raise ValueError(f"time: missing unit in duration {text!r}")
        if unit not in _UNIT_NANOS:
            raise ValueError(f"time: unknown unit {unit!r} in duration {text!r}")
        scale = _UNIT_NANOS[unit]
        total += int(whole or "0") * scale
        if frac:
            total += int(frac) * scale // 10 ** len(frac)
        if total > 2**63:
            raise ValueError(f"time: invalid duration {text!r}")
        pos = match.end()

    if not negative and total > 2**63 - 1:
        raise ValueError(f"time: invalid duration {text!r}")
    return -total if negative else total


def must_parse_str_to_time_duration(text: str) -> timedelta:
    """Parse a duration such as ``"1h30m"`` or ``"-1.5s"``.

    Units are ns, us (or µs), ms, s, m and h; precision below a
    microsecond is dropped. Raises ``ValueError`` on malformed input.
    """
    nanos = _parse_duration_nanos(text)
    micros = abs(nanos) // 1000
    return timedelta(microseconds=-micros if nanos < 0 else micros)


def get_map_key_value(mapping: Optional[Mapping[str, Any]], key: str, default: Any) -> Any:
    """Return ``mapping[key]``, or ``default`` if the mapping is None or lacks the key."""
    if mapping is None:
        return default
    return mapping.get(key, default)


def gen_random_length_str(length: int) -> str:
    """Return ``length`` random lower-case letters and digits."""
    if length < 0:
        raise ValueError("length must not be negative")
    return "".join(random.choices(_LETTERS, k=length))


def _seconds(interval: Interval) -> float:
    if isinstance(interval, timedelta):
        return interval.total_seconds()
    return float(interval)


def gen_stream_str(raw: str, interval: Interval = 0) -> Iterator[str]:
    """Yield the characters of ``raw`` one by one, pausing ``interval`` after each."""
    pause = _seconds(interval)
    for char in raw:
        yield char
        if pause > 0:
            time.sleep(pause)


def gen_stream_from_read_file(filename: str, interval: Interval = 0) -> Iterator[str]:
    """Yield the characters of a UTF-8 file one by one, pausing after each.

    Invalid bytes come out as U+FFFD. Raises ``OSError`` if the file
    cannot be opened.
    """
    pause = _seconds(interval)
    with open(filename, encoding="utf-8", errors="replace", newline="") as handle:
        while chunk := handle.read(4096):
            for char in chunk:
                yield char
                if pause > 0:
                    time.sleep(pause)


def hash_string_to_uint64(text: str, n: int) -> int:
    """Return the FNV-1a 64-bit hash of ``text`` kept to its low ``n`` bits."""
    if n <= 0 or n > 64:
        raise ValueError("n must be between 1 and 64")
    value = _FNV64_OFFSET
    for byte in text.encode("utf-8"):
        value = ((value ^ byte) * _FNV64_PRIME) & _MASK64
    return value & ((1 << n) - 1)


def truncate_string(text: str, n: int) -> str:
    """Return the first ``n`` characters of ``text`` followed by ``...`` if it was longer."""
    if n <= 0:
        return ""
    if len(text) <= n:
        return text
    return text[:n] + "..."