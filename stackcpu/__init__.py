"""stackcpu - A minimal stack-based bytecode interpreter."""

from .cpu import Cpu, run_program
from .exceptions import (
    ConfigError,
    CpuError,
    DivisionByZero,
    IntegerOverflow,
    ProgramExhausted,
    StackUnderflow,
    TypeMismatch,
    UnimplementedInstruction,
)
from .instructions import Instruction, Opcode, push
from .values import UNDEFINED, Character, Float, Integer, Undefined, Value

__version__ = "1.0.0"
__all__ = [
    "Cpu", "run_program",
    "Instruction", "Opcode", "push",
    "Value", "Integer", "Float", "Character", "Undefined", "UNDEFINED",
    "CpuError", "ProgramExhausted", "StackUnderflow", "TypeMismatch",
    "DivisionByZero", "IntegerOverflow", "UnimplementedInstruction", "ConfigError",
]
