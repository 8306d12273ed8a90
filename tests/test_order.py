import re
import time

import pytest

from shimkit.order import SNPrefixHead, generate_sn


def test_enum_prefix_and_layout():
    before = int(time.time())
    sn = generate_sn(SNPrefixHead.ORDER, 8)
    after = int(time.time())
    assert re.fullmatch(r"OD[0-9]+[A-Z0-9]{8}", sn)
    timestamp = int(sn[2:-8])
    assert before <= timestamp <= after


def test_plain_string_prefix_repeated():
    for _ in range(10):
        sn = generate_sn("AC_", 5)
        assert sn.startswith("AC_")
        assert re.fullmatch(r"AC_[0-9]+[A-Z0-9]{5}", sn)


def test_zero_length_has_only_timestamp():
    before = int(time.time())
    sn = generate_sn(SNPrefixHead.REFUND, 0)
    after = int(time.time())
    assert sn.startswith("RF")
    assert before <= int(sn[2:]) <= after


@pytest.mark.parametrize(
    "member, value",
    [
        (SNPrefixHead.ORDER, "OD"),
        (SNPrefixHead.PAYMENT, "PY"),
        (SNPrefixHead.DELIVERY_NOTE, "DN"),
        (SNPrefixHead.LOGISTICS_ORDER, "LO"),
        (SNPrefixHead.ACCEPTANCE, "AC"),
        (SNPrefixHead.REFUND, "RF"),
    ],
)
def test_prefixes_used_in_sn(member, value):
    assert generate_sn(member, 3).startswith(value)


def test_negative_length_rejected():
    with pytest.raises(ValueError):
        generate_sn(SNPrefixHead.ORDER, -1)