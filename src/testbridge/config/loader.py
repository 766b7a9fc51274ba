#
# config/loader.py
#
"""
Loads testbridge configuration from a TOML file and applies overrides.
"""

import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import attrs
import structlog

from testbridge.config.models import (
    BridgeConfig,
    CommandConfig,
    GlobalConfig,
)
from testbridge.exceptions import ConfigurationError
from testbridge.telemetry import StructLogger

log: StructLogger = structlog.get_logger("config.loader")

_SECTION_MODELS: dict[str, type] = {
    "commands": CommandConfig,
    "global": GlobalConfig,
}


def _build_section(name: str, model: type, data: Any) -> Any:
    if not isinstance(data, Mapping):
        raise ConfigurationError(f"Section [{name}] must be a table, got {type(data).__name__}")
    known = {a.name for a in attrs.fields(model)}
    unknown = set(data) - known
    if unknown:
        raise ConfigurationError(
            f"Unknown key(s) in [{name}]: {sorted(unknown)}. Expected one of {sorted(known)}."
        )
    try:
        return model(**data)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid value in [{name}]: {e}") from e


def config_from_mapping(data: Mapping[str, Any], base_dir: Path | None = None) -> BridgeConfig:
    """
    Build a BridgeConfig from already-parsed TOML data.

    A relative ``working_dir`` is resolved against ``base_dir`` (the directory
    holding the config file) when given.
    """
    unknown = set(data) - {*_SECTION_MODELS, "working_dir"}
    if unknown:
        raise ConfigurationError(f"Unknown top-level key(s): {sorted(unknown)}")

    sections = {
        name: _build_section(name, model, data.get(name, {}))
        for name, model in _SECTION_MODELS.items()
    }

    working_dir = Path(data.get("working_dir", "."))
    if not working_dir.is_absolute() and base_dir is not None:
        working_dir = base_dir / working_dir

    return BridgeConfig(
        commands=sections["commands"],
        global_config=sections["global"],
        working_dir=working_dir.resolve(),
    )


def load_config(config_path: Path | None) -> BridgeConfig:
    """
    Load configuration from ``config_path``, or defaults when it is None.

    Raises:
        ConfigurationError: If the file cannot be read, is not valid TOML, or
            contains invalid values.
    """
    if config_path is None:
        log.debug("No config file given, using defaults")
        return BridgeConfig()

    config_log = log.bind(config_path=str(config_path))
    config_log.debug("Loading configuration file")
    try:
        with config_path.open("rb") as fh:
            data = tomllib.load(fh)
    except OSError as e:
        raise ConfigurationError(f"Cannot read config file '{config_path}': {e}") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(f"Invalid TOML in '{config_path}': {e}") from e

    config = config_from_mapping(data, base_dir=config_path.parent)
    config_log.info(
        "Configuration loaded",
        rspec_base=config.commands.rspec_base,
        cargo_base=config.commands.cargo_base,
        working_dir=str(config.working_dir),
    )
    return config


def apply_overrides(
    config: BridgeConfig,
    rspec_base: str | None = None,
    cargo_base: str | None = None,
    working_dir: Path | None = None,
) -> BridgeConfig:
    """Return a copy of ``config`` with any non-None override applied."""
    command_changes = {
        key: value
        for key, value in (("rspec_base", rspec_base), ("cargo_base", cargo_base))
        if value is not None
    }
    commands = attrs.evolve(config.commands, **command_changes)

    changes: dict[str, Any] = {"commands": commands}
    if working_dir is not None:
        changes["working_dir"] = working_dir
    return attrs.evolve(config, **changes)


# 🔼⚙️
