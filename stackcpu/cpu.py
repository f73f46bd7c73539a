"""A stack-based virtual processor executing pre-decoded instructions."""

import io
import logging
import math
import operator
import sys
from collections import deque
from typing import Any, Callable, Deque, Dict, Iterable, List, Optional, TextIO, Tuple

from .config import read_config
from .exceptions import (
    CpuError,
    DivisionByZero,
    IntegerOverflow,
    ProgramExhausted,
    StackUnderflow,
    TypeMismatch,
    UnimplementedInstruction,
)
from .instructions import ARITHMETIC_OPCODES, Instruction, Opcode
from .values import INT64_MAX, INT64_MIN, UNDEFINED, Float, Integer, Value

log = logging.getLogger(__name__)

Stack = Deque[Value]


def _truncating_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def _truncating_mod(a: int, b: int) -> int:
    """Remainder carrying the sign of the dividend."""
    return a - b * _truncating_div(a, b)


def _float_mod(a: float, b: float) -> float:
    """IEEE remainder: an infinite dividend gives NaN."""
    if math.isinf(a):
        return math.nan
    return math.fmod(a, b)


def _float_max(a: float, b: float) -> float:
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return max(a, b)


def _float_min(a: float, b: float) -> float:
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return min(a, b)


INTEGER_OPERATIONS: Dict[Opcode, Callable[[int, int], int]] = {
    Opcode.ADD: operator.add,
    Opcode.SUB: operator.sub,
    Opcode.MUL: operator.mul,
    Opcode.DIV: _truncating_div,
    Opcode.MOD: _truncating_mod,
    Opcode.MAX: max,
    Opcode.MIN: min,
}

FLOAT_OPERATIONS: Dict[Opcode, Callable[[float, float], float]] = {
    Opcode.ADD: operator.add,
    Opcode.SUB: operator.sub,
    Opcode.MUL: operator.mul,
    Opcode.DIV: operator.truediv,
    Opcode.MOD: _float_mod,
    Opcode.MAX: _float_max,
    Opcode.MIN: _float_min,
}

DIVIDING_OPCODES = frozenset({Opcode.DIV, Opcode.MOD})


class Cpu:
    """The virtual processor: program store, operand stack, pc and accumulator."""

    def __init__(self, program: Iterable[Instruction], stack_hint: Optional[int] = None,
                 out: Optional[TextIO] = None):
        if stack_hint is None:
            stack_hint = read_config()["STACK_HINT"]
        if stack_hint < 0:
            raise ValueError(f"stack_hint must not be negative, got {stack_hint}")

        self._program: Tuple[Any, ...] = tuple(program)
        self.stack_hint = stack_hint
        self.out = out
        self._stack: Stack = deque()
        self._pc = 0
        self._accumulator: Value = UNDEFINED
        self._hint_exceeded = False

    def __repr__(self) -> str:
        return (f"Cpu(pc={self._pc}, accumulator={self._accumulator!r}, "
                f"stack_depth={len(self._stack)}, program_size={len(self._program)})")

    # Inspection
    @property
    def program(self) -> Tuple[Any, ...]:
        return self._program

    @property
    def pc(self) -> int:
        return self._pc

    @property
    def accumulator(self) -> Value:
        return self._accumulator

    @property
    def stack(self) -> Tuple[Value, ...]:
        """Snapshot of the operand stack, bottom first."""
        return tuple(self._stack)

    # Stack manipulation
    def push(self, value: Value) -> None:
        """Push a value onto the stack."""
        self._stack.append(value)
        if not self._hint_exceeded and len(self._stack) > self.stack_hint:
            self._hint_exceeded = True
            log.debug("Stack grew past the working-set hint of %d values", self.stack_hint)

    def pop(self) -> Value:
        """Pop the value at the top of the stack."""
        if not self._stack:
            raise StackUnderflow(1, 0, pc=self._pc - 1)
        return self._stack.pop()

    def pop_pair(self) -> Tuple[Value, Value]:
        """Pop two values and return them as (left, right); the top of the stack is right."""
        if len(self._stack) < 2:
            raise StackUnderflow(2, len(self._stack), pc=self._pc - 1)
        right = self._stack.pop()
        left = self._stack.pop()
        return left, right

    # Execution
    def execute(self) -> None:
        """Run the program from the start until EOP, raising CpuError on failure."""
        self._stack.clear()
        self._pc = 0
        self._accumulator = UNDEFINED
        self._hint_exceeded = False

        try:
            while True:
                instruction = self.fetch()

                if log.isEnabledFor(logging.DEBUG):
                    log.debug("%d: %r", self._pc - 1, instruction)

                if self.dispatch(instruction) == "halt":
                    break
        except CpuError as e:
            log.warning("Run aborted (%s): %s", type(e).__name__, e)
            raise

        log.debug("Run finished after %d instruction(s)", self._pc)

    def fetch(self) -> Any:
        """Return the instruction at pc and advance pc."""
        if self._pc >= len(self._program):
            raise ProgramExhausted("unexpected end of program", pc=self._pc)
        instruction = self._program[self._pc]
        self._pc += 1
        return instruction

    def dispatch(self, instruction: Any) -> Optional[str]:
        """Dispatch an instruction to its handler."""
        if not isinstance(instruction, Instruction):
            raise UnimplementedInstruction(instruction, pc=self._pc - 1)
        opcode = instruction.opcode

        if opcode in ARITHMETIC_OPCODES:
            self.binary_operator(instruction)
            return None

        handler = getattr(self, f"op_{opcode.name}", None)
        if handler is None:
            raise UnimplementedInstruction(instruction, pc=self._pc - 1)
        return handler(instruction)

    def binary_operator(self, instruction: Instruction) -> None:
        """Handle the arithmetic instructions, storing the result in the accumulator."""
        opcode = instruction.opcode
        a, b = self.pop_pair()

        if type(a) is Integer and type(b) is Integer:
            operations, result_type = INTEGER_OPERATIONS, Integer
        elif type(a) is Float and type(b) is Float:
            operations, result_type = FLOAT_OPERATIONS, Float
        else:
            raise TypeMismatch(opcode, a, b, pc=self._pc - 1)

        operation = operations.get(opcode)
        if operation is None:
            raise UnimplementedInstruction(instruction, pc=self._pc - 1)

        if opcode in DIVIDING_OPCODES and b.value == 0:
            raise DivisionByZero(
                f"{opcode.name} of {a!r} by zero", pc=self._pc - 1
            )

        result = operation(a.value, b.value)
        if result_type is Integer and not INT64_MIN <= result <= INT64_MAX:
            raise IntegerOverflow(
                f"{opcode.name} of {a!r} and {b!r} overflows 64 bits", pc=self._pc - 1
            )
        self._accumulator = result_type(result)

    def op_PUSH(self, instruction: Instruction) -> None:
        self.push(instruction.operand)

    def op_POP(self, instruction: Instruction) -> None:
        self.pop()

    def op_PRINT_ACCUMULATOR(self, instruction: Instruction) -> None:
        """Write the accumulator to the diagnostic stream."""
        out = self.out if self.out is not None else sys.stdout
        print(f"Accumulator: {self._accumulator!r}", file=out)

    def op_EOP(self, instruction: Instruction) -> str:
        return "halt"


def run_program(program: Iterable[Instruction], stack_hint: Optional[int] = None) -> List[str]:
    """Run a program and return the diagnostic lines it printed."""
    out = io.StringIO()
    Cpu(program, stack_hint=stack_hint, out=out).execute()
    return out.getvalue().splitlines()
