#
# src/testbridge/runner/__init__.py
#
"""
Test execution sub-package for testbridge.
"""
from .factory import get_test_runner
from .protocols import TestRunner, TestRunResult
from .subprocess_runner import SubprocessTestRunner

__all__ = [
    "SubprocessTestRunner",
    "TestRunResult",
    "TestRunner",
    "get_test_runner",
]

# 🔼⚙️
