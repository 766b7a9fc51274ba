#
# src/testbridge/telemetry/__init__.py
#
"""
Logging setup for testbridge.
"""
from .logger import StructLogger, setup_logging

__all__ = ["StructLogger", "setup_logging"]

# 🔼⚙️
