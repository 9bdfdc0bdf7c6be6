"""
Command-line front end for the CSD codec.

Each requested conversion prints one line on stdout:

    csdigit -c 28.5 -p 2          ->  +00-00.+0
    csdigit -f 28.5 -z 2          ->  +00-00
    csdigit -i 28                 ->  +00-00
    csdigit --to-decimal=-00+0    ->  -14.0
    csdigit -r banana             ->  an
    csdigit --verilog +00-00+0 --width 8
    csdigit --analyze taps.yaml

CSD strings that begin with '-' must be attached with '=' so argparse
does not read them as options.
"""

import argparse
import logging
import sys
from typing import List, Optional

import yaml

from csdigit import __version__
from csdigit.analyzer import analyze_coefficients, report_to_dict
from csdigit.backends import generate_csd_multiplier
from csdigit.csd import (
    CSDError,
    decode,
    encode,
    encode_integer,
    encode_nnz,
)
from csdigit.lcsre import longest_repeated_substring
from csdigit.serialization import load_coefficient_set

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="csdigit", description="Canonical Signed Digit (CSD) conversion"
    )
    parser.add_argument("-v", "--version", action="store_true",
                        help="Print the current version number")
    parser.add_argument("-c", "--to-csd", type=float, metavar="VALUE",
                        help="Convert to CSD with --places fractional digits")
    parser.add_argument("-f", "--to-csdnnz", type=float, metavar="VALUE",
                        help="Convert to CSD with at most --nnz nonzero digits")
    parser.add_argument("-i", "--to-csd-int", type=int, metavar="VALUE",
                        help="Convert an integer to CSD")
    parser.add_argument("-d", "--to-decimal", metavar="CSD",
                        help="Convert a CSD string to decimal")
    parser.add_argument("-p", "--places", type=int, default=4,
                        help="Number of places (default: 4)")
    parser.add_argument("-z", "--nnz", type=int, default=3,
                        help="Number of non-zeros (default: 3)")
    parser.add_argument("-r", "--repeat", metavar="TEXT",
                        help="Print the longest repeated non-overlapping substring")
    parser.add_argument("--verilog", metavar="CSD",
                        help="Print a Verilog multiplier for an integer CSD constant")
    parser.add_argument("--width", type=int, default=8,
                        help="Input bit width for --verilog (default: 8)")
    parser.add_argument("--module-name", default="csd_multiplier",
                        help="Module name for --verilog")
    parser.add_argument("--analyze", metavar="FILE",
                        help="Analyze a YAML/JSON coefficient set and print the report")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging level (default: WARNING)")
    return parser


def _run(args: argparse.Namespace) -> None:
    if args.to_csd is not None:
        print(encode(args.to_csd, args.places))

    if args.to_csdnnz is not None:
        print(encode_nnz(args.to_csdnnz, args.nnz))

    if args.to_csd_int is not None:
        print(encode_integer(args.to_csd_int))

    if args.to_decimal is not None:
        print(decode(args.to_decimal))

    if args.repeat is not None:
        print(longest_repeated_substring(args.repeat))

    if args.verilog is not None:
        print(generate_csd_multiplier(args.verilog, args.width,
                                      module_name=args.module_name))

    if args.analyze is not None:
        coefficient_set = load_coefficient_set(args.analyze)
        report = analyze_coefficients(coefficient_set)
        print(yaml.safe_dump(report_to_dict(report), sort_keys=False), end="")


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level,
                        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")

    if args.version:
        print(f"csdigit, version {__version__}")
        return EXIT_OK

    requested = [args.to_csd, args.to_csdnnz, args.to_csd_int, args.to_decimal,
                 args.repeat, args.verilog, args.analyze]
    if all(option is None for option in requested):
        parser.print_help()
        return EXIT_OK

    try:
        _run(args)
    except (CSDError, ValueError, OSError, yaml.YAMLError) as e:
        logger.error("%s", e)
        print(f"csdigit: error: {e}", file=sys.stderr)
        return EXIT_ERROR

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
