#!/usr/bin/env python3
"""Simple examples demonstrating stackcpu usage."""

import os
import sys

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from stackcpu import Cpu, CpuError, Float, Integer, push
from stackcpu.config import read_config
from stackcpu.instructions import ADD, DIV, EOP, MAX, MOD, MUL, POP, PRINT_ACCUMULATOR, SUB
from stackcpu.log import setup_logger


def example_basic():
    """Integer addition."""
    print("\n=== Basic Example ===")

    program = [
        push(Integer(10)),
        push(Integer(1)),
        ADD,
        PRINT_ACCUMULATOR,
        EOP,
    ]
    print("Program:", program)
    Cpu(program).execute()


def example_integer_arithmetic():
    """Each integer operator; the top of the stack is the right operand."""
    print("\n=== Integer Arithmetic Example ===")

    for op in (SUB, MUL, DIV, MOD, MAX):
        program = [push(Integer(-7)), push(Integer(3)), op, PRINT_ACCUMULATOR, EOP]
        print(f"{op!r}(-7, 3):", end=" ")
        Cpu(program).execute()


def example_float():
    """Float arithmetic."""
    print("\n=== Float Example ===")

    program = [
        push(Float(0.5)),
        push(Float(2.25)),
        MUL,
        PRINT_ACCUMULATOR,
        EOP,
    ]
    Cpu(program).execute()


def example_failures():
    """Every failure kind is reported as its own exception."""
    print("\n=== Failure Example ===")

    programs = {
        "division by zero": [push(Integer(5)), push(Integer(0)), DIV, EOP],
        "type mismatch": [push(Integer(1)), push(Float(1.0)), ADD, EOP],
        "stack underflow": [POP, EOP],
        "missing EOP": [push(Integer(1))],
    }
    for title, program in programs.items():
        try:
            Cpu(program).execute()
        except CpuError as e:
            print(f"{title}: {type(e).__name__}: {e}")


def main():
    """Run all examples."""
    config = read_config(os.getenv("STACKCPU_CONFIG"))
    setup_logger(config["LOG_FILE"], level=config["LOG_LEVEL"])

    print("=" * 60)
    print("stackcpu Examples - A stack-based virtual processor")
    print("=" * 60)

    example_basic()
    example_integer_arithmetic()
    example_float()
    example_failures()

    print("\n" + "=" * 60)
    print("All examples completed successfully!")
    print("=" * 60)


if __name__ == "__main__":
    main()
