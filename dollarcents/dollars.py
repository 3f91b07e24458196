# A dollar value backed by a single signed 64-bit count of cents.
from enum import Enum
from functools import total_ordering
from typing import Optional


INT64_MAX = 2**63 - 1
INT64_MIN = -(2**63)

CENTS_PER_DOLLAR = 100


def wrap_int64(value: int) -> int:
    """Wraps an arbitrary int into the signed 64-bit range (two's complement)."""
    return (value - INT64_MIN) % 2**64 + INT64_MIN


def _checked(value: int) -> Optional[int]:
    if INT64_MIN <= value <= INT64_MAX:
        return value
    return None


def _to_digit(c: str) -> Optional[int]:
    if "0" <= c <= "9":
        return ord(c) - ord("0")
    return None


class _ParseErrorKind(Enum):
    INVALID_DIGIT = "invalid digit '{char}'"
    OVERFLOW = "value overflows"
    BAD_CENTS_LENGTH = "cents must be two digits long"
    EXTRA_DECIMAL_POINT = "too many decimal points"
    NON_ASCII = "non-ASCII strings are not allowed"


class ParseError(ValueError):
    """Failure to parse a Dollars value from a string.

    The specific failure mode is intentionally not exposed; only the message
    is meant for callers.
    """

    def __init__(self, kind: _ParseErrorKind, char: Optional[str] = None):
        self._kind = kind
        self._char = char
        super().__init__(
            f"failed to parse dollars: {kind.value.format(char=char)}")

    def __reduce__(self):
        return (ParseError, (self._kind, self._char))


@total_ordering
class Dollars:
    """An exact dollar amount, stored as a signed integer count of cents.

    Addition, subtraction and negation wrap on 64-bit overflow. Parsing is
    the only overflow-checked path.
    """

    __slots__ = ("_cent_value",)

    def __init__(self, cent_value: int = 0):
        if not isinstance(cent_value, int) or isinstance(cent_value, bool):
            raise TypeError(
                f"cent_value must be an int, but provided value is: {cent_value!r}")
        if not INT64_MIN <= cent_value <= INT64_MAX:
            raise ValueError(
                f"cent_value must fit in a signed 64-bit integer, but provided value is: {cent_value}")
        object.__setattr__(self, "_cent_value", cent_value)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def dollars(self) -> int:
        """The whole-dollar magnitude, ignoring sign."""
        # Truncating division, then abs; equal to abs(v) // 100.
        return abs(self._cent_value) // CENTS_PER_DOLLAR

    def cents(self) -> int:
        """The cents magnitude (0-99), ignoring sign."""
        return abs(self._cent_value) % CENTS_PER_DOLLAR

    def in_cents(self) -> int:
        """The signed value in cents.

        Note the difference between this and cents().
        """
        return self._cent_value

    def is_positive(self) -> bool:
        return self._cent_value > 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Dollars):
            return NotImplemented
        return self._cent_value == other._cent_value

    def __lt__(self, other: "Dollars") -> bool:
        if not isinstance(other, Dollars):
            return NotImplemented
        return self._cent_value < other._cent_value

    def __hash__(self) -> int:
        return hash(self._cent_value)

    def __neg__(self) -> "Dollars":
        return Dollars(wrap_int64(-self._cent_value))

    def __add__(self, other: "Dollars") -> "Dollars":
        if not isinstance(other, Dollars):
            return NotImplemented
        return Dollars(wrap_int64(self._cent_value + other._cent_value))

    def __sub__(self, other: "Dollars") -> "Dollars":
        if not isinstance(other, Dollars):
            return NotImplemented
        return Dollars(wrap_int64(self._cent_value - other._cent_value))

    def __str__(self) -> str:
        return (
            f"{'-' if self._cent_value < 0 else ''}$"
            f"{self.dollars()}.{self.cents():02}"
        )

    def __repr__(self) -> str:
        return str(self)

    def __format__(self, format_spec: str) -> str:
        # Render first so width/fill/alignment apply to the whole string.
        return format(str(self), format_spec)

    def __reduce__(self):
        return (Dollars, (self._cent_value,))

    @classmethod
    def parse(cls, amount: str) -> "Dollars":
        """Parses strings like "$12.34", "-$0.01", "+5" or "12".

        An optional sign, then an optional '$', then the dollar digits. If
        cents are given they must be exactly two digits. This is somewhat
        permissive: a trailing '.' ("12.") and the empty string are accepted,
        and anything after the two cents digits is ignored.

        Raises:
            ParseError: if the string is not a valid amount.
        """
        if not amount.isascii():
            raise ParseError(_ParseErrorKind.NON_ASCII)

        pos = 0
        sign = 1
        if amount[:1] == "-":
            sign = -1
            pos += 1
        elif amount[:1] == "+":
            pos += 1
        if amount[pos:pos + 1] == "$":
            pos += 1

        # Consume the dollar digits, along with the '.' ending them (if any).
        dollars = 0
        while pos < len(amount):
            c = amount[pos]
            pos += 1
            if c == ".":
                break
            digit = _to_digit(c)
            if digit is None:
                raise ParseError(_ParseErrorKind.INVALID_DIGIT, c)
            dollars = _checked(dollars * 10 + digit)
            if dollars is None:
                raise ParseError(_ParseErrorKind.OVERFLOW)

        c1 = amount[pos] if pos < len(amount) else None
        c2 = amount[pos + 1] if pos + 1 < len(amount) else None
        if c1 == "." or c2 == ".":
            raise ParseError(_ParseErrorKind.EXTRA_DECIMAL_POINT)
        if c1 is not None and c2 is None:
            raise ParseError(_ParseErrorKind.BAD_CENTS_LENGTH)
        if c1 is None:
            cents = 0
        else:
            d1 = _to_digit(c1)
            if d1 is None:
                raise ParseError(_ParseErrorKind.INVALID_DIGIT, c1)
            d2 = _to_digit(c2)
            if d2 is None:
                # Reported against the first cents character.
                raise ParseError(_ParseErrorKind.INVALID_DIGIT, c1)
            cents = d1 * 10 + d2

        total = _checked(dollars * CENTS_PER_DOLLAR)
        if total is not None:
            total = _checked(total + cents)
        if total is not None:
            total = _checked(total * sign)
        if total is None:
            raise ParseError(_ParseErrorKind.OVERFLOW)
        return cls(total)
