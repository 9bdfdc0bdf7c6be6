"""Backends for hardware output generation (Verilog)."""

from .verilog_generator import generate_csd_multiplier, save_verilog_file

__all__ = ["generate_csd_multiplier", "save_verilog_file"]
