#!/usr/bin/env python3
"""
Demo: Generate Verilog constant multipliers for integer constants.

Encodes each constant exactly and bounded to two nonzero digits.
"""

from csdigit.csd import encode_integer, encode_nnz_integer, decode_integer
from csdigit.examples import build_example_integer_constants
from csdigit.backends import generate_csd_multiplier, save_verilog_file


def main():
    constants = build_example_integer_constants()

    print("=" * 80)
    print("VERILOG GENERATOR DEMO")
    print("=" * 80)

    for coefficient in constants.coefficients:
        value = int(coefficient.value)
        variants = [
            ("exact", encode_integer(value)),
            ("nnz2", encode_nnz_integer(value, 2)),
        ]
        for label, csd in variants:
            print(f"\n{coefficient.name} ({label}): {csd} = {decode_integer(csd)}")
            print("-" * 80)
            print(generate_csd_multiplier(csd, 8, module_name=f"mul_{coefficient.name}_{label}"))

            filename = f"mul_{coefficient.name}_{label}.v"
            save_verilog_file(csd, filename, 8, module_name=f"mul_{coefficient.name}_{label}")
            print(f"Saved to: {filename}")

    print("\n" + "=" * 80)


if __name__ == "__main__":
    main()
