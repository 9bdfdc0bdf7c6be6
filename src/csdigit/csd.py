"""
Canonical Signed Digit (CSD) codec.

Converts numbers to and from their CSD string form: a base-2 positional
representation over the symbols {0, +, -} in which no two nonzero digits
are adjacent.

String format:
    '+' is +1, '-' is -1, '0' is 0, most significant digit first.
    At most one '.' separates integral from fractional digits.
    Sign is carried by the digits alone, there is no sign marker.

Example:
    28.5 = 11100.1 (binary)
         = +00-00.+ (CSD) = 2^5 - 2^2 + 2^-1

Decoding reports bad input through an explicit result (Ok / Err) via
parse_csd(); decode() is the raising convenience on top of it.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, Generic, List, Optional, TypeVar, Union

T = TypeVar("T")

# Residual magnitude below which the bounded encoder stops emitting digits.
EPS_RESIDUAL = 1e-100

# Leading digit weight 2^1023 is the largest a float can hold.
MAX_INTEGRAL_POSITIONS = 1024

_DIGIT_VALUES: Dict[str, int] = {"0": 0, "+": 1, "-": -1}
_SEPARATOR = "."


class CSDError(Exception):
    """Base class for codec errors."""
    pass


class InvalidFormat(CSDError, ValueError):
    """Raised (or carried by Err) when a CSD string has a bad character."""

    def __init__(self, text: str, position: int, character: str):
        self.text = text
        self.position = position
        self.character = character
        super().__init__(
            f"invalid CSD character {character!r} at position {position} in {text!r}"
        )


class InvalidArgument(CSDError, ValueError):
    """Raised when an encoder is called with an unusable argument."""
    pass


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful decode."""

    value: T

    @property
    def is_ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err:
    """Failed decode, carrying the InvalidFormat describing the failure."""

    error: InvalidFormat

    @property
    def is_ok(self) -> bool:
        return False

    def unwrap(self):
        raise self.error


DecodeResult = Union[Ok[T], Err]


# =============================================================================
# HELPERS
# =============================================================================


def highest_power_of_two_in(x: int) -> int:
    """
    Return the highest power of two less than or equal to x (0 for x == 0).

    Smears the top set bit into every lower position, then keeps only the
    top bit:

        x = 42          101010
        x |= x >> 1     111111
        ...
        x ^ (x >> 1)    100000 = 32
    """
    if x < 0:
        raise InvalidArgument(f"x must be non-negative, got {x}")
    shift = 1
    while shift < x.bit_length():
        x |= x >> shift
        shift <<= 1
    return x ^ (x >> 1)


def _validate_finite(value: float) -> None:
    if not math.isfinite(value):
        raise InvalidArgument(f"value must be finite, got {value}")


def _validate_non_negative(value: int, name: str) -> None:
    if value < 0:
        raise InvalidArgument(f"{name} must be non-negative, got {value}")


def _integral_positions(absnum: float) -> int:
    """
    Number of integral digit positions needed for a magnitude.

    Magnitudes in (2/3, 1) need the units digit too: 0.9 is "+.00-",
    since starting at the first fractional place would give "0.+++".
    """
    # ceil(log2(1.5 * absnum)) from absnum = m * 2^e, computed on the
    # 53-bit integer mantissa so neither rounding nor overflow can occur.
    mantissa, exponent = math.frexp(absnum)
    if 3 * int(math.ldexp(mantissa, 53)) > 1 << 54:
        exponent += 1
    if exponent > MAX_INTEGRAL_POSITIONS:
        raise InvalidArgument(
            f"value {absnum} needs a digit of weight 2^{exponent - 1}, beyond float range"
        )
    return max(exponent, 0)


# =============================================================================
# ENCODER
# =============================================================================


def encode(value: float, places: int) -> str:
    """
    Convert a real number to CSD with a fixed number of fractional places.

    Args:
        value: Finite number to convert
        places: Number of fractional digits (>= 0)

    Returns:
        CSD string. Zero is "0"; magnitudes up to 2/3 start with "0.".
        No separator is emitted when places == 0.

    Raises:
        InvalidArgument: If places is negative, or value is not finite or
            exceeds (2/3) * 2^1024

    Examples:
        >>> encode(28.5, 2)
        '+00-00.+0'
        >>> encode(-0.5, 2)
        '0.-0'
    """
    _validate_non_negative(places, "places")
    _validate_finite(value)
    if value == 0:
        return "0"

    absnum = abs(value)
    rem = _integral_positions(absnum)
    csd: List[str] = [] if rem > 0 else ["0"]

    # 1.5x threshold: a committed nonzero digit always leaves the next
    # position's residual inside the zero band.
    while rem > -places:
        if rem == 0:
            csd.append(_SEPARATOR)
        rem -= 1
        p2n = math.ldexp(1.0, rem)
        det = 1.5 * value
        if det > p2n:
            csd.append("+")
            value -= p2n
        elif det < -p2n:
            csd.append("-")
            value += p2n
        else:
            csd.append("0")

    return "".join(csd)


def encode_integer(value: int) -> str:
    """
    Convert an integer to CSD using exact integer arithmetic.

    Examples:
        >>> encode_integer(28)
        '+00-00'
    """
    return _encode_integer(value, None)


def encode_nnz(value: float, max_nonzero: int) -> str:
    """
    Convert a real number to CSD using at most max_nonzero nonzero digits.

    Digits are produced until the value is fully represented or the
    budget is spent. Once the budget reaches zero the remainder is
    dropped, so the result is an approximation of value.

    Args:
        value: Finite number to convert
        max_nonzero: Maximum count of '+'/'-' digits (>= 0)

    Raises:
        InvalidArgument: If max_nonzero is negative, or value is not finite or
            exceeds (2/3) * 2^1024

    Examples:
        >>> encode_nnz(28.5, 4)
        '+00-00.+'
        >>> encode_nnz(28.5, 2)
        '+00-00'
    """
    _validate_non_negative(max_nonzero, "max_nonzero")
    _validate_finite(value)

    absnum = abs(value)
    rem = _integral_positions(absnum)
    csd: List[str] = [] if rem > 0 else ["0"]
    nnz = max_nonzero
    if nnz == 0:
        value = 0.0

    while rem > 0 or (nnz > 0 and abs(value) > EPS_RESIDUAL):
        if rem == 0:
            csd.append(_SEPARATOR)
        rem -= 1
        p2n = math.ldexp(1.0, rem)
        det = 1.5 * value
        if det > p2n:
            csd.append("+")
            value -= p2n
            nnz -= 1
        elif det < -p2n:
            csd.append("-")
            value += p2n
            nnz -= 1
        else:
            csd.append("0")
        if nnz == 0:
            value = 0.0

    return "".join(csd)


def encode_nnz_integer(value: int, max_nonzero: int) -> str:
    """
    Integer counterpart of encode_nnz().

    Examples:
        >>> encode_nnz_integer(158, 2)
        '+0+00000'
    """
    _validate_non_negative(max_nonzero, "max_nonzero")
    return _encode_integer(value, max_nonzero)


def _encode_integer(value: int, max_nonzero: Optional[int]) -> str:
    if value == 0:
        return "0"

    # p2n is twice the weight of the digit being decided, so the 1.5x
    # threshold becomes the exact comparison 3 * value against p2n.
    p2n = highest_power_of_two_in(abs(value) * 3 // 2) * 2
    nnz = max_nonzero
    if nnz == 0:
        value = 0
    csd: List[str] = []

    while p2n > 1:
        p2n_half = p2n >> 1
        det = 3 * value
        if det > p2n:
            csd.append("+")
            value -= p2n_half
            if nnz is not None:
                nnz -= 1
        elif det < -p2n:
            csd.append("-")
            value += p2n_half
            if nnz is not None:
                nnz -= 1
        else:
            csd.append("0")
        p2n = p2n_half
        if nnz == 0:
            value = 0

    return "".join(csd)


# =============================================================================
# DECODER
# =============================================================================


def _find_invalid(csd: str) -> Optional[InvalidFormat]:
    """Return an InvalidFormat for the first bad character, if any."""
    seen_separator = False
    for position, char in enumerate(csd):
        if char in _DIGIT_VALUES:
            continue
        if char == _SEPARATOR and not seen_separator:
            seen_separator = True
            continue
        return InvalidFormat(csd, position, char)
    return None


def parse_csd(csd: str) -> DecodeResult[float]:
    """
    Decode a CSD string to a float, returning Ok(value) or Err(InvalidFormat).

    The integral part is accumulated with acc = 2 * acc + digit; each
    fractional digit adds its weight, starting at 0.5 and halving.
    Adjacent nonzero digits are accepted and simply summed.
    """
    error = _find_invalid(csd)
    if error is not None:
        return Err(error)

    integral, _, fractional = csd.partition(_SEPARATOR)
    num = 0.0
    for digit in integral:
        num = 2.0 * num + _DIGIT_VALUES[digit]

    scale = 0.5
    for digit in fractional:
        num += scale * _DIGIT_VALUES[digit]
        scale /= 2.0

    return Ok(num)


def parse_csd_integer(csd: str) -> DecodeResult[int]:
    """
    Decode the integral part of a CSD string, returning Ok(int) or Err.

    Fractional digits are validated but do not contribute to the value.
    """
    error = _find_invalid(csd)
    if error is not None:
        return Err(error)

    integral, _, _ = csd.partition(_SEPARATOR)
    num = 0
    for digit in integral:
        num = 2 * num + _DIGIT_VALUES[digit]
    return Ok(num)


def decode(csd: str) -> float:
    """
    Convert a CSD string to a float.

    Raises:
        InvalidFormat: If csd contains a character outside {0, +, -, .}
            or more than one '.'

    Examples:
        >>> decode("+00-00.+")
        28.5
        >>> decode("0.-")
        -0.5
    """
    return parse_csd(csd).unwrap()


def decode_integer(csd: str) -> int:
    """
    Convert a CSD string to an int, ignoring any fractional digits.

    Examples:
        >>> decode_integer("+00-00")
        28
    """
    return parse_csd_integer(csd).unwrap()


def nonzero_count(csd: str) -> int:
    """Count the '+' and '-' digits of a CSD string."""
    return sum(1 for char in csd if char in "+-")


def is_canonical(csd: str) -> bool:
    """True if no two adjacent digits (ignoring '.') are both nonzero."""
    digits = csd.replace(_SEPARATOR, "")
    return all(
        not (a in "+-" and b in "+-") for a, b in zip(digits, digits[1:])
    )


__all__ = [
    "CSDError",
    "InvalidFormat",
    "InvalidArgument",
    "Ok",
    "Err",
    "DecodeResult",
    "highest_power_of_two_in",
    "encode",
    "encode_integer",
    "encode_nnz",
    "encode_nnz_integer",
    "parse_csd",
    "parse_csd_integer",
    "decode",
    "decode_integer",
    "nonzero_count",
    "is_canonical",
]
