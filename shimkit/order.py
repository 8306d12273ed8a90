"""Serial numbers for business documents."""

import random
import string
import time
from enum import Enum
from typing import Union

_CHARSET = string.ascii_uppercase + string.digits


class SNPrefixHead(str, Enum):
    """Prefixes that mark the kind of document a serial number belongs to."""

    ORDER = "OD"
    PAYMENT = "PY"
    DELIVERY_NOTE = "DN"
    LOGISTICS_ORDER = "LO"
    ACCEPTANCE = "AC"
    REFUND = "RF"

    def __str__(self) -> str:
        return self.value


def _random_suffix(length: int) -> str:
    if length < 0:
        raise ValueError("length must not be negative")
    return "".join(random.choices(_CHARSET, k=length))


def generate_sn(prefix: Union[SNPrefixHead, str], length: int) -> str:
    """Return ``prefix``, the current Unix time and ``length`` random characters.

    The random part uses upper-case letters and digits.
    """
    head = prefix.value if isinstance(prefix, SNPrefixHead) else str(prefix)
    return f"{head}{int(time.time())}{_random_suffix(length)}"