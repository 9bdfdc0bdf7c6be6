"""
Coefficient Analyzer — Cost and reuse diagnostics for CSD coefficient sets.

This module provides lightweight analysis of CoefficientSet objects:
    - Nonzero digit inventory and adder cost
    - Approximation error of each encoding
    - Repeated digit patterns (candidates for shared partial sums)
    - Warning flags for implementation risk

IMPORTANT: It does NOT modify the coefficient set.
Coefficients without a CSD form are encoded on a copy.
It only produces read-only reports.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Dict, List

from csdigit.csd import is_canonical
from csdigit.lcsre import longest_repeated_substring
from csdigit.model import Coefficient, CoefficientSet

logger = logging.getLogger(__name__)

# Separators for joining digit strings; any substring containing one occurs
# only once, so matches never span two coefficients.
_PRIVATE_USE_BASE = 0xE000


def _digits(csd: str) -> str:
    return csd.replace(".", "")


@dataclass
class CoefficientReport:
    """Analysis report for a coefficient set."""

    set_name: str
    total_coefficients: int = 0

    # Cost
    total_nonzero_digits: int = 0
    adder_count: int = 0  # adders/subtractors for all multipliers, no sharing
    max_nonzero_digits: int = 0
    avg_nonzero_digits: float = 0.0
    nonzero_digits: Dict[str, int] = field(default_factory=dict)

    # Accuracy
    errors: Dict[str, float] = field(default_factory=dict)
    max_error: float = 0.0

    # Reuse
    repeated_patterns: Dict[str, str] = field(default_factory=dict)
    shared_pattern: str = ""

    warnings: List[str] = field(default_factory=list)

    def add_warning(self, msg: str) -> None:
        """Add a warning to the report."""
        if msg not in self.warnings:
            self.warnings.append(msg)


def analyze_coefficients(coefficient_set: CoefficientSet) -> CoefficientReport:
    """
    Analyze the CSD encodings of a coefficient set.

    Checks for:
    - Nonzero digits per coefficient and the resulting adder count
    - Encoding error |decode(csd) - value|
    - Longest repeated digit pattern within each coefficient and across the set
    - Non-canonical encodings, excessive error, coefficients truncated to zero

    Returns a CoefficientReport with metrics and warnings.
    """
    report = CoefficientReport(set_name=coefficient_set.name)
    report.total_coefficients = len(coefficient_set.coefficients)

    coefficients: List[Coefficient] = []
    for coefficient in coefficient_set.coefficients:
        if coefficient.csd is None:
            coefficient = replace(coefficient, csd=coefficient_set.encode_value(coefficient.value))
        coefficients.append(coefficient)

    # =========================================================================
    # 1. COST
    # =========================================================================

    for coefficient in coefficients:
        nnz = coefficient.nonzero_count
        report.nonzero_digits[coefficient.name] = nnz
        report.total_nonzero_digits += nnz
        report.adder_count += max(nnz - 1, 0)

    if coefficients:
        report.max_nonzero_digits = max(report.nonzero_digits.values())
        report.avg_nonzero_digits = report.total_nonzero_digits / len(coefficients)

    # =========================================================================
    # 2. ACCURACY
    # =========================================================================

    for coefficient in coefficients:
        error = abs(coefficient.decoded - coefficient.value)
        report.errors[coefficient.name] = error
        report.max_error = max(report.max_error, error)

    # =========================================================================
    # 3. PATTERN REUSE
    # =========================================================================

    for coefficient in coefficients:
        pattern = longest_repeated_substring(_digits(coefficient.csd))
        if pattern:
            report.repeated_patterns[coefficient.name] = pattern

    joined = "".join(
        _digits(c.csd) + chr(_PRIVATE_USE_BASE + k) for k, c in enumerate(coefficients)
    )
    report.shared_pattern = longest_repeated_substring(joined)

    # =========================================================================
    # 4. WARNING FLAGS
    # =========================================================================

    non_canonical = [c.name for c in coefficients if not is_canonical(c.csd)]
    if non_canonical:
        report.add_warning(f"Non-canonical encodings: {', '.join(non_canonical)}")

    if coefficient_set.places is not None and coefficient_set.max_nonzero is None:
        bound = 2.0 ** -coefficient_set.places
        inexact = [name for name, error in report.errors.items() if error > bound]
        if inexact:
            report.add_warning(
                f"Error above 2^-{coefficient_set.places}: {', '.join(inexact)}"
            )

    zeroed = [c.name for c in coefficients if c.value != 0 and c.decoded == 0]
    if zeroed:
        report.add_warning(f"Coefficients truncated to zero: {', '.join(zeroed)}")

    logger.info(
        "Analyzed %s: %d coefficients, %d adders, max error %g",
        report.set_name, report.total_coefficients, report.adder_count, report.max_error,
    )
    return report


def report_to_dict(report: CoefficientReport) -> Dict[str, object]:
    """Plain-dict form of a report, for YAML/JSON output."""
    return {
        "set_name": report.set_name,
        "total_coefficients": report.total_coefficients,
        "total_nonzero_digits": report.total_nonzero_digits,
        "adder_count": report.adder_count,
        "max_nonzero_digits": report.max_nonzero_digits,
        "avg_nonzero_digits": report.avg_nonzero_digits,
        "nonzero_digits": dict(report.nonzero_digits),
        "errors": dict(report.errors),
        "max_error": report.max_error,
        "repeated_patterns": dict(report.repeated_patterns),
        "shared_pattern": report.shared_pattern,
        "warnings": list(report.warnings),
    }
