from .instruction import Instruction, InvalidInstruction

__all__ = ["Instruction", "InvalidInstruction"]
