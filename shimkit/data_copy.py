"""Deep copies made by serialising and deserialising a value."""

import json
import pickle
from typing import Any, TypeVar

T = TypeVar("T")


def deep_copy_by_json(src: Any) -> Any:
    """Return a deep copy of ``src`` made through a JSON round trip.

    Only what JSON can carry survives: tuples come back as lists and
    non-string mapping keys come back as strings. Values JSON cannot
    encode raise ``TypeError``.
    """
    return json.loads(json.dumps(src))


def deep_copy_by_pickle(src: T) -> T:
    """Return a deep copy of ``src`` made through a pickle round trip."""
    return pickle.loads(pickle.dumps(src))