"""Integer to text conversion in an arbitrary radix."""

from __future__ import annotations

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
_WORD_MASK = 0xFFFFFFFF


def format_int(value: int, radix: int = 10) -> str:
    """Render ``value`` in ``radix`` (2 to 36) with lowercase digits.

    Only base ten shows a minus sign; in any other base a negative value is
    shown as its 32-bit two's complement.
    """
    if radix > 36 or radix <= 1:
        raise ValueError(f"radix must be between 2 and 36, got {radix}")
    negative = radix == 10 and value < 0
    number = -value if negative else value & _WORD_MASK
    digits = []
    while True:
        number, remainder = divmod(number, radix)
        digits.append(_DIGITS[remainder])
        if not number:
            break
    text = "".join(reversed(digits))
    return "-" + text if negative else text