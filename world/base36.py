"""Signed base-36 integer codec used by on-disk level names."""
from __future__ import annotations

ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"

_DIGITS = {ch: value for value, ch in enumerate(ALPHABET)}


def encode(number: int) -> str:
    """Return ``number`` in base 36, ``-`` prefixed when negative."""
    number = int(number)
    if number == 0:
        return "0"

    sign = ""
    if number < 0:
        sign = "-"
        number = -number

    digits = []
    while number:
        number, digit = divmod(number, 36)
        digits.append(ALPHABET[digit])
    return sign + "".join(reversed(digits))


def decode(text: str) -> int:
    """Inverse of :func:`encode`. Only lowercase canonical digits are accepted."""
    if not isinstance(text, str) or not text:
        raise ValueError("base36 value must be a non-empty string")

    body = text[1:] if text[0] == "-" else text
    if not body:
        raise ValueError(f"'{text}' is not a base36 number")

    value = 0
    for ch in body:
        digit = _DIGITS.get(ch)
        if digit is None:
            raise ValueError(f"'{text}' is not a base36 number")
        value = value * 36 + digit
    return -value if text[0] == "-" else value
