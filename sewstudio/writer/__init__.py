"""writer — construction instructions and print guides."""

from sewstudio.writer.instructions import generate_instructions, step_keys_for
from sewstudio.writer.print_guide import generate_print_guide

__all__ = ["generate_instructions", "generate_print_guide", "step_keys_for"]
