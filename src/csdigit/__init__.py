"""
Canonical Signed Digit (CSD) Package

Converts numbers to and from CSD strings, the base-2 signed-digit form
with no two adjacent nonzero digits, and finds repeated digit patterns
that shift-and-add hardware can share.

ARCHITECTURAL GUARANTEE:
------------------------
The codec (csdigit.csd) and the repeat finder (csdigit.lcsre) are pure
functions with ZERO knowledge of:
    - Verilog or any other target language
    - Files, logging or command-line handling

All of that happens in the outer layers (model, analyzer, backends, cli),
which consume the codec unchanged.
"""

__version__ = "1.0.0"

from .csd import (
    CSDError,
    Err,
    InvalidArgument,
    InvalidFormat,
    Ok,
    decode,
    decode_integer,
    encode,
    encode_integer,
    encode_nnz,
    encode_nnz_integer,
    highest_power_of_two_in,
    parse_csd,
    parse_csd_integer,
)
from .lcsre import longest_repeated_substring

__all__ = [
    "__version__",
    "CSDError",
    "Err",
    "InvalidArgument",
    "InvalidFormat",
    "Ok",
    "decode",
    "decode_integer",
    "encode",
    "encode_integer",
    "encode_nnz",
    "encode_nnz_integer",
    "highest_power_of_two_in",
    "parse_csd",
    "parse_csd_integer",
    "longest_repeated_substring",
]
