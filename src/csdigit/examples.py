"""
Example coefficient sets for demos and tests.

Builds the taps of a small symmetric low-pass FIR filter, the typical
consumer of CSD constants: every tap becomes a shift-and-add multiplier,
and symmetric taps share identical digit patterns.
"""
from typing import Optional

from csdigit.model import Coefficient, CoefficientSet

# 7-tap windowed-sinc low-pass, cutoff 0.25 * fs
LOWPASS_TAPS = [
    -0.0106,
    0.0,
    0.2606,
    0.5,
    0.2606,
    0.0,
    -0.0106,
]


def build_example_fir(places: Optional[int] = 8,
                      max_nonzero: Optional[int] = None) -> CoefficientSet:
    coefficient_set = CoefficientSet(
        name="lowpass_fir",
        places=places,
        max_nonzero=max_nonzero,
        metadata={"design": "windowed-sinc", "cutoff": "0.25"},
    )
    coefficient_set.coefficients = [
        Coefficient(name=f"h{i}", value=value) for i, value in enumerate(LOWPASS_TAPS)
    ]
    return coefficient_set


def build_example_integer_constants() -> CoefficientSet:
    """Integer constants, encoded exactly (no places, no budget)."""
    coefficient_set = CoefficientSet(name="integer_constants")
    coefficient_set.coefficients = [
        Coefficient(name="c28", value=28),
        Coefficient(name="c114", value=114),
        Coefficient(name="c158", value=158),
    ]
    return coefficient_set
