"""Positional notation in any base between 2 and 36.

Digits are `0-9` then `a-z`, case-insensitive.
"""

from typing import Union

from shamirsolve.errors import InvalidBaseError, InvalidDigitError

ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"
MIN_BASE = 2
MAX_BASE = len(ALPHABET)

_VALUES = {char: value for value, char in enumerate(ALPHABET)}
_VALUES.update((char.upper(), value) for char, value in list(_VALUES.items()))


def _check_base(base: int) -> None:
    # bool is an int subclass, True is not a base
    if isinstance(base, bool) or not isinstance(base, int):
        raise InvalidBaseError(base)
    if not MIN_BASE <= base <= MAX_BASE:
        raise InvalidBaseError(base)


def parse_base(raw: Union[int, str]) -> int:
    """Bases come either as ints or as decimal strings ("16")."""
    if isinstance(raw, str):
        try:
            raw = int(raw.strip(), base=10)
        except ValueError:
            raise InvalidBaseError(raw) from None
    _check_base(raw)
    return raw


def decode(digits: str, base: int) -> int:
    _check_base(base)
    if not digits:
        raise InvalidDigitError(digits, base)
    result = 0
    for char in digits:
        value = _VALUES.get(char, -1)
        if value < 0 or value >= base:
            raise InvalidDigitError(char, base)
        result = result * base + value
    return result


def encode(value: int, base: int) -> str:
    _check_base(base)
    if value < 0:
        raise ValueError("Only non negative values can be encoded.")
    digits = []
    while True:
        value, remainder = divmod(value, base)
        digits.append(ALPHABET[remainder])
        if not value:
            break
    return "".join(reversed(digits))
