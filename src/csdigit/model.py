"""
Coefficient Model Objects

Defines the data structures handed between the codec, the analyzer and
the hardware backends:
    - Coefficient (a named constant and its CSD form)
    - CoefficientSet (root container, e.g. the taps of a FIR filter)

ARCHITECTURAL RULE:
    These objects:
        - Know nothing about Verilog or any target language
        - Are fully serializable
        - Represent structure; encoding is delegated to csdigit.csd
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .csd import (
    decode,
    encode,
    encode_integer,
    encode_nnz,
    nonzero_count,
)

logger = logging.getLogger(__name__)

# Fractional places used when a set specifies neither places nor max_nonzero
DEFAULT_PLACES = 4


@dataclass
class Coefficient:
    """
    A single named constant.

    Properties:
        name: Identifier (e.g., "h0")
        value: The exact value the hardware should multiply by
        csd: CSD encoding of value, or None until encoded

    The CSD form may approximate value (fixed places or a nonzero budget);
    decoded gives the value actually realized.
    """

    name: str
    value: float
    csd: Optional[str] = None

    @property
    def nonzero_count(self) -> int:
        """Number of '+'/'-' digits, 0 if not yet encoded."""
        if self.csd is None:
            return 0
        return nonzero_count(self.csd)

    @property
    def decoded(self) -> Optional[float]:
        """Value represented by csd, or None if not yet encoded."""
        if self.csd is None:
            return None
        return decode(self.csd)


@dataclass
class CoefficientSet:
    """
    Root container for a group of constants sharing one encoding policy.

    Properties:
        name:
            Set identifier (e.g., "lowpass_fir")

        coefficients:
            Constants, in order

        places:
            Fractional places for encode(), if fixed-precision encoding is wanted

        max_nonzero:
            Nonzero digit budget for encode_nnz(); takes precedence over places

        metadata:
            Arbitrary key-value pairs
            Example: {"source": "remez", "sample_rate": "48000"}
    """

    name: str
    coefficients: List[Coefficient] = field(default_factory=list)
    places: Optional[int] = None
    max_nonzero: Optional[int] = None
    metadata: Dict[str, str] = field(default_factory=dict)

    def get_coefficient(self, name: str) -> Optional[Coefficient]:
        """
        Retrieve a coefficient by name.

        Args:
            name: Coefficient identifier

        Returns:
            Coefficient object or None if not found
        """
        for coefficient in self.coefficients:
            if coefficient.name == name:
                return coefficient
        return None

    def encode_value(self, value: float) -> str:
        """Encode one value under this set's policy."""
        if self.max_nonzero is not None:
            return encode_nnz(value, self.max_nonzero)
        if self.places is not None:
            return encode(value, self.places)
        if float(value).is_integer():
            return encode_integer(int(value))
        return encode(value, DEFAULT_PLACES)

    def encode_all(self) -> None:
        """Fill in the CSD form of every coefficient, replacing any existing one."""
        for coefficient in self.coefficients:
            coefficient.csd = self.encode_value(coefficient.value)
            logger.debug("%s: %s = %r -> %s", self.name, coefficient.name,
                         coefficient.value, coefficient.csd)
