"""The instruction set of the stackcpu virtual processor."""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from .values import Value


class Opcode(Enum):
    # Arithmetic: pop two values, result goes to the accumulator
    ADD = auto()
    SUB = auto()
    MUL = auto()
    DIV = auto()
    MOD = auto()
    MAX = auto()
    MIN = auto()

    # Stack
    PUSH = auto()  # operand: Value
    POP = auto()

    # Diagnostics
    PRINT_ACCUMULATOR = auto()

    # End of program
    EOP = auto()


ARITHMETIC_OPCODES = frozenset({
    Opcode.ADD, Opcode.SUB, Opcode.MUL, Opcode.DIV,
    Opcode.MOD, Opcode.MAX, Opcode.MIN,
})

_DISPLAY_NAMES = {
    Opcode.PRINT_ACCUMULATOR: "PrintAccumulator",
    Opcode.EOP: "EOP",
}


@dataclass(frozen=True, repr=False)
class Instruction:
    """A decoded instruction: an opcode plus the operand PUSH carries."""
    opcode: Opcode
    operand: Optional[Value] = None

    def __post_init__(self):
        if self.opcode is Opcode.PUSH:
            if not isinstance(self.operand, Value):
                raise ValueError(f"PUSH needs a Value operand, got {self.operand!r}")
        elif self.operand is not None:
            raise ValueError(f"{self.opcode.name} takes no operand")

    def __repr__(self) -> str:
        name = _DISPLAY_NAMES.get(self.opcode, self.opcode.name.capitalize())
        if self.operand is not None:
            return f"{name}({self.operand!r})"
        return name


def push(value: Value) -> Instruction:
    """Build a PUSH instruction for the given value."""
    return Instruction(Opcode.PUSH, value)


ADD = Instruction(Opcode.ADD)
SUB = Instruction(Opcode.SUB)
MUL = Instruction(Opcode.MUL)
DIV = Instruction(Opcode.DIV)
MOD = Instruction(Opcode.MOD)
MAX = Instruction(Opcode.MAX)
MIN = Instruction(Opcode.MIN)
POP = Instruction(Opcode.POP)
PRINT_ACCUMULATOR = Instruction(Opcode.PRINT_ACCUMULATOR)
EOP = Instruction(Opcode.EOP)
