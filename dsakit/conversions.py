"""String/integer conversions, substring search and byte-order swapping."""

from __future__ import annotations

_MAX_FORMAT_BASE = 32


def _digit_value(char: str, base: int) -> int:
    if "0" <= char <= "9":
        value = ord(char) - ord("0")
    elif base == 16 and "a" <= char.lower() <= "f":
        value = ord(char.lower()) - ord("a") + 10
    else:
        raise ValueError(f"invalid digit {char!r} for base {base}")
    if value >= base:
        raise ValueError(f"invalid digit {char!r} for base {base}")
    return value


def parse_int(text: str, base: int) -> int:
    """Parse ``text`` as a signed integer in ``base``.

    A leading ``-`` negates the result. Letters are accepted as digits only
    in base 16, in either case. An empty string parses as ``0``.
    """
    if base < 2:
        raise ValueError(f"unsupported base {base}")
    if not text:
        return 0
    negative = text.startswith("-")
    digits = text[1:] if negative else text
    result = 0
    for char in digits:
        result = result * base + _digit_value(char, base)
    return -result if negative else result


def format_int(value: int, base: int) -> str:
    """Render ``value`` in ``base`` (2 to 32) using upper-case letters.

    Only base 10 shows a minus sign; in other bases the magnitude is shown.
    """
    if not 2 <= base <= _MAX_FORMAT_BASE:
        raise ValueError(f"base must be between 2 and {_MAX_FORMAT_BASE}, got {base}")
    n = abs(value)
    digits: list[str] = []
    while n:
        n, r = divmod(n, base)
        digits.append(chr(ord("A") + r - 10) if r >= 10 else chr(ord("0") + r))
    if not digits:
        digits.append("0")
    if value < 0 and base == 10:
        digits.append("-")
    return "".join(reversed(digits))


def find_substring(haystack: str, needle: str) -> str | None:
    """Return the tail of ``haystack`` starting at the first ``needle``.

    Returns ``None`` when ``needle`` does not occur or is empty.
    """
    if not needle:
        return None
    index = haystack.find(needle)
    if index < 0:
        return None
    return haystack[index:]


def swap_endianness(value: int) -> int:
    """Reverse the byte order of a 32-bit unsigned integer."""
    if not 0 <= value <= 0xFFFFFFFF:
        raise ValueError(f"value {value} does not fit in 32 unsigned bits")
    return int.from_bytes(value.to_bytes(4, "little"), "big")