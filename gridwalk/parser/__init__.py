from .parser import parse_instruction, parse_instructions

__all__ = ["parse_instruction", "parse_instructions"]
