"""
Demo: Run analyzer on the example FIR taps and output the report.
"""

from csdigit.examples import build_example_fir
from csdigit.analyzer import analyze_coefficients
from csdigit.serialization import coefficient_set_to_yaml


def print_report(report):
    """Pretty-print a CoefficientReport."""
    print()
    print("=" * 70)
    print(f"COEFFICIENT ANALYSIS REPORT: {report.set_name}")
    print("=" * 70)
    print()

    print("COST")
    print(f"  Coefficients:          {report.total_coefficients}")
    print(f"  Nonzero Digits:        {report.total_nonzero_digits}")
    print(f"  Adders/Subtractors:    {report.adder_count}")
    print(f"  Max Nonzero Digits:    {report.max_nonzero_digits}")
    print(f"  Avg Nonzero Digits:    {report.avg_nonzero_digits:.2f}")
    print()

    print("ACCURACY")
    for name, error in report.errors.items():
        print(f"  {name}: {error:.3g}")
    print(f"  Max Error:             {report.max_error:.3g}")
    print()

    print("PATTERN REUSE")
    for name, pattern in report.repeated_patterns.items():
        print(f"  {name}: {pattern}")
    print(f"  Shared Pattern:        {report.shared_pattern or 'None'}")
    print()

    if report.warnings:
        print("WARNINGS")
        for i, warning in enumerate(report.warnings, 1):
            print(f"  {i}. {warning}")
    else:
        print("NO WARNINGS")
    print()


if __name__ == "__main__":
    coefficient_set = build_example_fir(places=8)
    coefficient_set.encode_all()

    report = analyze_coefficients(coefficient_set)
    print_report(report)

    # Also save to YAML for inspection
    yaml_str = coefficient_set_to_yaml(coefficient_set)
    with open("example_fir_output.yaml", "w") as f:
        f.write(yaml_str)
    print("Coefficient set exported to example_fir_output.yaml")
