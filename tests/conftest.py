"""Pytest configuration and shared fixtures."""

import io
import logging

import pytest
import structlog

from stackcpu.config import DEFAULT_CONFIG, ENV_PREFIX
from stackcpu.cpu import Cpu


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep STACKCPU_* variables from the developer's shell out of the tests."""
    for key in DEFAULT_CONFIG:
        monkeypatch.delenv(ENV_PREFIX + key, raising=False)


@pytest.fixture(autouse=True)
def reset_stackcpu_logger():
    """Undo setup_logger() calls made by a test."""
    logger = logging.getLogger("stackcpu")
    yield
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    structlog.reset_defaults()


@pytest.fixture
def run():
    """Execute a program and return the finished Cpu and its diagnostic output."""
    def _run(program, stack_hint=16):
        out = io.StringIO()
        cpu = Cpu(program, stack_hint=stack_hint, out=out)
        cpu.execute()
        return cpu, out.getvalue()
    return _run
