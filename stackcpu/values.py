"""Values stored on the operand stack and in the accumulator."""

from dataclasses import dataclass

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


class Value:
    """Base class of the value variants."""

    __slots__ = ()


@dataclass(frozen=True, repr=False)
class Integer(Value):
    """A signed 64-bit integer."""
    value: int

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"Integer needs an int, got {type(self.value).__name__}")
        if not INT64_MIN <= self.value <= INT64_MAX:
            raise ValueError(f"Integer out of 64-bit range: {self.value}")

    def __repr__(self) -> str:
        return f"Integer({self.value})"


@dataclass(frozen=True, repr=False)
class Float(Value):
    """A 64-bit floating point number."""
    value: float

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, (int, float)):
            raise TypeError(f"Float needs a float, got {type(self.value).__name__}")
        # frozen dataclass: normalise ints through object.__setattr__
        object.__setattr__(self, "value", float(self.value))

    def __repr__(self) -> str:
        return f"Float({self.value!r})"


@dataclass(frozen=True, repr=False)
class Character(Value):
    """A single character."""
    value: str

    def __post_init__(self):
        if not isinstance(self.value, str) or len(self.value) != 1:
            raise ValueError(f"Character needs exactly one character, got {self.value!r}")

    def __repr__(self) -> str:
        return f"Character({self.value!r})"


@dataclass(frozen=True, repr=False)
class Undefined(Value):
    """Marker for a register that has not been written yet."""

    def __repr__(self) -> str:
        return "Undefined"


UNDEFINED = Undefined()
