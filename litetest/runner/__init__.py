"""Runner module - Test orchestration."""

from .driver import MISUSE_MESSAGE, RunState, TestDriver
from .executor import TestExecutor

__all__ = [
    "MISUSE_MESSAGE",
    "RunState",
    "TestDriver",
    "TestExecutor",
]
