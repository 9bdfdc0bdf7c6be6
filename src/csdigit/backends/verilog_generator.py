"""
Verilog generator for CSD constant multipliers.

Converts an integer CSD string into a shift-and-add Verilog module:
every nonzero digit becomes one shifted copy of the input, and the
result is their signed sum. A CSD string with k nonzero digits costs
k - 1 adders/subtractors.
"""

import logging
from typing import List, Tuple

logger = logging.getLogger(__name__)


def _parse_terms(csd: str) -> List[Tuple[int, str]]:
    """Return (power, sign) for each nonzero digit, most significant first."""
    highest = len(csd) - 1
    terms = []
    for i, digit in enumerate(csd):
        if digit == "+":
            terms.append((highest - i, "+"))
        elif digit == "-":
            terms.append((highest - i, "-"))
        elif digit != "0":
            raise ValueError(
                f"CSD string can only contain '+', '-', or '0', got {digit!r} at position {i}"
            )
    return terms


def generate_csd_multiplier(csd: str, input_width: int,
                            module_name: str = "csd_multiplier") -> str:
    """
    Generate a Verilog module multiplying a signed input by a CSD constant.

    Args:
        csd: Integer CSD string (e.g., "+00-00+0" for 114); no '.' allowed
        input_width: Bit width N of the signed input x
        module_name: Name of the generated module

    Returns:
        Verilog source. The output is N + M bits wide, where M = len(csd) - 1
        is the highest power in the constant.

    Raises:
        ValueError: If csd is empty, has a non-digit character, or
            input_width is not positive
    """
    if not csd:
        raise ValueError("CSD string must not be empty")
    if input_width <= 0:
        raise ValueError(f"input_width must be positive, got {input_width}")

    terms = _parse_terms(csd)
    highest = len(csd) - 1
    out_msb = input_width + highest - 1

    lines = [
        "",
        f"module {module_name} (",
        f"    input signed [{input_width - 1}:0] x,      // Input value",
        f"    output signed [{out_msb}:0] result // Result of multiplication",
        ");",
    ]

    if terms:
        lines.append("")
        lines.append("    // Create shifted versions of input")
        for power in sorted({power for power, _ in terms}, reverse=True):
            lines.append(f"    wire signed [{out_msb}:0] x_shift{power} = x <<< {power};")

    lines.append("")
    lines.append("    // CSD implementation")
    if not terms:
        lines.append("    assign result = 0;")
    else:
        first_power, first_sign = terms[0]
        expr = f"x_shift{first_power}" if first_sign == "+" else f"-x_shift{first_power}"
        for power, sign in terms[1:]:
            expr += f" {sign} x_shift{power}"
        lines.append(f"    assign result = {expr};")

    lines.append("endmodule")
    lines.append("")

    logger.debug("Generated %s for %s (%d terms)", module_name, csd, len(terms))
    return "\n".join(lines)


def save_verilog_file(csd: str, filename: str, input_width: int,
                      module_name: str = "csd_multiplier") -> None:
    """
    Generate a multiplier module and save it to file.

    Args:
        csd: Integer CSD string
        filename: Output file path (.v extension recommended)
        input_width: Bit width of the signed input
        module_name: Name of the generated module
    """
    verilog = generate_csd_multiplier(csd, input_width, module_name=module_name)
    with open(filename, 'w') as f:
        f.write(verilog)


__all__ = ["generate_csd_multiplier", "save_verilog_file"]
