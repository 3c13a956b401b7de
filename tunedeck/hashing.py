"""SHA-256 identifiers for playlist entries."""

from __future__ import annotations

import hashlib


def generate(value: str | int) -> str:
    """Return the lower-case hexadecimal SHA-256 digest of ``value``.

    Integers are hashed through their decimal text, so ``generate(7)``
    equals ``generate("7")``.
    """
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise TypeError(f"cannot hash value of type {type(value).__name__}")
    text = value if isinstance(value, str) else str(value)
    return hashlib.sha256(text.encode("utf-8")).hexdigest()