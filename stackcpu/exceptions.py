"""Custom exceptions for the stackcpu virtual processor."""

from typing import Any, Optional


class CpuError(Exception):
    """Base exception for errors that abort a run."""

    def __init__(self, message: str, *, pc: Optional[int] = None):
        self.pc = pc
        prefix = ""
        if pc is not None:
            prefix = f"pc {pc}: "
        super().__init__(prefix + message)


class ProgramExhausted(CpuError):
    """Raised when the program ends without an EOP instruction."""
    pass


class StackUnderflow(CpuError):
    """Raised when an instruction needs more values than the stack holds."""

    def __init__(self, required: int, available: int, *, pc: Optional[int] = None):
        self.required = required
        self.available = available
        super().__init__(
            f"stack underflow: needed {required} value(s), found {available}", pc=pc
        )


class TypeMismatch(CpuError):
    """Raised when an arithmetic instruction gets operands it cannot combine."""

    def __init__(self, opcode: Any, left: Any, right: Any, *, pc: Optional[int] = None):
        self.opcode = opcode
        self.left = left
        self.right = right
        super().__init__(
            f"the elements {left!r} and {right!r} are not valid operands for {opcode.name}",
            pc=pc,
        )


class DivisionByZero(CpuError):
    """Raised by DIV and MOD when the divisor is zero."""
    pass


class IntegerOverflow(CpuError):
    """Raised when an integer result does not fit in 64 bits."""
    pass


class UnimplementedInstruction(CpuError):
    """Raised when an instruction has no execution behaviour."""

    def __init__(self, instruction: Any, *, pc: Optional[int] = None):
        self.instruction = instruction
        super().__init__(f"unexpected instruction: {instruction!r}", pc=pc)


class ConfigError(Exception):
    """Raised when the configuration cannot be read."""
    pass
