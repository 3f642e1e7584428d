"""ASCII character classification, case mapping and integer/text conversion."""

from __future__ import annotations

_WHITESPACE = " \n\t\v\f\r"


def _code(c: int | str) -> int:
    """Return the integer code of *c*, a one-character string or an int."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an int, got {type(c).__name__}")
    return c


def _is_upper_code(code: int) -> bool:
    return 65 <= code <= 90


def _is_lower_code(code: int) -> bool:
    return 97 <= code <= 122


def is_alpha(c: int | str) -> bool:
    """True for the ASCII letters A-Z and a-z."""
    code = _code(c)
    return _is_upper_code(code) or _is_lower_code(code)


def is_digit(c: int | str) -> bool:
    """True for the ASCII digits 0-9."""
    return 48 <= _code(c) <= 57


def is_alnum(c: int | str) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: int | str) -> bool:
    """True for printable ASCII, space through tilde."""
    return 32 <= _code(c) <= 126


def to_upper(c: int | str) -> int | str:
    """Map an ASCII lower-case letter to upper case; anything else is unchanged.

    The result has the same kind (int or str) as the argument.
    """
    code = _code(c)
    if _is_lower_code(code):
        code -= 32
    return chr(code) if isinstance(c, str) else code


def to_lower(c: int | str) -> int | str:
    """Map an ASCII upper-case letter to lower case; anything else is unchanged.

    The result has the same kind (int or str) as the argument.
    """
    code = _code(c)
    if _is_upper_code(code):
        code += 32
    return chr(code) if isinstance(c, str) else code


def atoi(text: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace is skipped, one optional sign is taken, then digits
    are read until the first non-digit. Text with no digits gives 0.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] == "-":
        sign = -1
        rest = rest[1:]
    elif rest[:1] == "+":
        rest = rest[1:]
    value = 0
    for ch in rest:
        if not is_digit(ch):
            break
        value = value * 10 + (ord(ch) - 48)
    return sign * value


def itoa(number: int) -> str:
    """Render an integer in decimal, with a leading minus when negative."""
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError(f"expected an int, got {type(number).__name__}")
    if number == 0:
        return "0"
    negative = number < 0
    magnitude = -number if negative else number
    digits = []
    while magnitude > 0:
        magnitude, rem = divmod(magnitude, 10)
        digits.append(chr(48 + rem))
    if negative:
        digits.append("-")
    return "".join(reversed(digits))