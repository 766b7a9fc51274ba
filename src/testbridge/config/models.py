#
# config/models.py
#
"""
Attrs-based data models for testbridge configuration.
"""

import logging
from pathlib import Path
from typing import Any

from attrs import define, field
from attrs.validators import instance_of

DEFAULT_RSPEC_COMMAND = "bundle exec rspec"
DEFAULT_CARGO_COMMAND = "cargo test"


# --- Validators ---
def _validate_log_level(inst: Any, attr: Any, value: str) -> None:
    """Validator for standard logging level names."""
    valid = logging._nameToLevel.keys()
    if not isinstance(value, str) or value.upper() not in valid:
        raise ValueError(f"Invalid log_level '{value}'. Must be one of {list(valid)}.")


@define(frozen=True, slots=True)
class CommandConfig:
    """Base commands every compiled command starts with, one per framework."""
    rspec_base: str = field(default=DEFAULT_RSPEC_COMMAND, validator=instance_of(str))
    cargo_base: str = field(default=DEFAULT_CARGO_COMMAND, validator=instance_of(str))


@define(frozen=True, slots=True)
class GlobalConfig:
    """Global default settings for testbridge."""
    log_level: str = field(default="INFO", validator=_validate_log_level)


@define(frozen=True, slots=True)
class BridgeConfig:
    """Root configuration object for the testbridge application."""
    commands: CommandConfig = field(factory=CommandConfig)
    global_config: GlobalConfig = field(factory=GlobalConfig, metadata={"toml_name": "global"})
    working_dir: Path = field(factory=Path.cwd, converter=Path)


# 🔼⚙️
