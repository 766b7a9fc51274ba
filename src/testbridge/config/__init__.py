#
# config/__init__.py
#
"""
Configuration handling sub-package for testbridge.

Exports the loading functions and core configuration models.
"""

from .loader import apply_overrides, config_from_mapping, load_config
from .models import (
    BridgeConfig,
    CommandConfig,
    GlobalConfig,
)

__all__ = [
    "BridgeConfig",
    "CommandConfig",
    "GlobalConfig",
    "apply_overrides",
    "config_from_mapping",
    "load_config",
]

# 🔼⚙️
