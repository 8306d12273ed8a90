"""Hashing helpers."""

import hashlib


def compute_md5_hash(text: str) -> str:
    """Return the MD5 digest of ``text`` (UTF-8 encoded) as lower-case hex."""
    return hashlib.md5(text.encode("utf-8")).hexdigest()