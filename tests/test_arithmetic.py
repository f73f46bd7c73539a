"""Tests for the arithmetic instructions.

Operands are pushed as push(a), push(b): the top of the stack is the right
operand, so every program below computes op(a, b).
"""

import math

import pytest

from stackcpu import (
    UNDEFINED,
    Character,
    DivisionByZero,
    Float,
    Integer,
    IntegerOverflow,
    TypeMismatch,
    push,
)
from stackcpu.instructions import ADD, DIV, EOP, MAX, MIN, MOD, MUL, SUB
from stackcpu.values import INT64_MAX, INT64_MIN

ARITHMETIC = [ADD, SUB, MUL, DIV, MOD, MAX, MIN]


def binary(op, a, b):
    return [push(a), push(b), op, EOP]


@pytest.mark.parametrize("x, y", [
    (0, 0), (10, 1), (-5, 3), (123456789, -987654321), (INT64_MAX, 0), (INT64_MIN, 1),
])
def test_integer_add(run, x, y):
    cpu, _ = run([push(Integer(x)), push(Integer(y)), ADD, EOP])
    assert cpu.accumulator == Integer(x + y)
    assert cpu.stack == ()


@pytest.mark.parametrize("x, y", [
    (0.0, 0.0), (0.1, 0.2), (-1.5, 2.25), (1e300, 1e300), (-3.75, -0.125),
])
def test_float_add(run, x, y):
    cpu, _ = run([push(Float(x)), push(Float(y)), ADD, EOP])
    assert isinstance(cpu.accumulator, Float)
    assert cpu.accumulator.value == pytest.approx(x + y)
    assert cpu.stack == ()


@pytest.mark.parametrize("op, a, b, expected", [
    (SUB, 10, 3, 7),
    (SUB, 3, 10, -7),
    (MUL, -4, 6, -24),
    (DIV, 7, 2, 3),
    (DIV, -7, 2, -3),
    (DIV, 7, -2, -3),
    (DIV, -7, -2, 3),
    (MOD, 7, 3, 1),
    (MOD, -7, 2, -1),
    (MOD, 7, -2, 1),
    (MOD, -6, 3, 0),
    (MAX, -1, 4, 4),
    (MIN, -1, 4, -1),
    (MOD, INT64_MIN, -1, 0),
])
def test_integer_operators(run, op, a, b, expected):
    cpu, _ = run(binary(op, Integer(a), Integer(b)))
    assert cpu.accumulator == Integer(expected)


@pytest.mark.parametrize("op, a, b, expected", [
    (SUB, 1.5, 0.25, 1.25),
    (MUL, -2.0, 0.5, -1.0),
    (DIV, 1.0, 4.0, 0.25),
    (DIV, -7.0, 2.0, -3.5),
    (MOD, 7.5, 2.0, 1.5),
    (MOD, -7.5, 2.0, -1.5),
    (MAX, 1.0, -2.0, 1.0),
    (MIN, 1.0, -2.0, -2.0),
    (MAX, math.nan, 3.0, 3.0),
    (MIN, 3.0, math.nan, 3.0),
    (MOD, 2.0, math.inf, 2.0),
    (MOD, -2.0, -math.inf, -2.0),
])
def test_float_operators(run, op, a, b, expected):
    cpu, _ = run(binary(op, Float(a), Float(b)))
    assert cpu.accumulator.value == pytest.approx(expected)


def test_float_division_overflow_gives_infinity(run):
    cpu, _ = run(binary(DIV, Float(-1e308), Float(1e-10)))
    assert cpu.accumulator == Float(-math.inf)


@pytest.mark.parametrize("op", ARITHMETIC)
@pytest.mark.parametrize("a, b", [
    (Integer(1), Float(1.0)),
    (Float(1.0), Integer(1)),
    (Integer(1), Character("1")),
    (Character("a"), Character("b")),
    (UNDEFINED, Integer(0)),
    (Float(0.0), UNDEFINED),
])
def test_mismatched_operands(run, op, a, b):
    with pytest.raises(TypeMismatch):
        run(binary(op, a, b))


@pytest.mark.parametrize("op", [DIV, MOD])
@pytest.mark.parametrize("a, zero", [
    (Integer(5), Integer(0)),
    (Integer(0), Integer(0)),
    (Integer(INT64_MIN), Integer(0)),
    (Float(5.0), Float(0.0)),
    (Float(-5.0), Float(-0.0)),
    (Float(math.inf), Float(0.0)),
])
def test_division_by_zero(run, op, a, zero):
    with pytest.raises(DivisionByZero):
        run(binary(op, a, zero))


def test_zero_dividend_is_fine(run):
    cpu, _ = run(binary(DIV, Integer(0), Integer(5)))
    assert cpu.accumulator == Integer(0)


@pytest.mark.parametrize("op, a, b", [
    (ADD, INT64_MAX, 1),
    (SUB, INT64_MIN, 1),
    (MUL, INT64_MAX, 2),
    (DIV, INT64_MIN, -1),
])
def test_integer_overflow(run, op, a, b):
    with pytest.raises(IntegerOverflow):
        run(binary(op, Integer(a), Integer(b)))


@pytest.mark.parametrize("op, a, b", [
    (MOD, math.inf, 2.0),
    (MOD, -math.inf, 2.0),
    (MOD, math.inf, math.inf),
    (MAX, math.nan, math.nan),
    (MIN, math.nan, math.nan),
])
def test_float_operators_giving_nan(run, op, a, b):
    cpu, _ = run(binary(op, Float(a), Float(b)))
    assert isinstance(cpu.accumulator, Float)
    assert math.isnan(cpu.accumulator.value)


def test_left_operand_is_below_the_top(run):
    cpu, _ = run([push(Integer(10)), push(Integer(3)), SUB, EOP])
    assert cpu.accumulator == Integer(7)
