#
# tests/unit/test_config.py
#
"""
Tests for loading configuration files and applying overrides.
"""

from pathlib import Path

import pytest

from testbridge.config import (
    BridgeConfig,
    CommandConfig,
    apply_overrides,
    config_from_mapping,
    load_config,
)
from testbridge.exceptions import ConfigurationError


class TestLoadConfig:
    """load_config reads TOML into attrs models."""

    def test_defaults_without_file(self) -> None:
        config = load_config(None)
        assert config.commands == CommandConfig(rspec_base="bundle exec rspec", cargo_base="cargo test")
        assert config.global_config.log_level == "INFO"
        assert config.working_dir == Path.cwd()

    def test_reads_all_sections(self, tmp_path: Path) -> None:
        (tmp_path / "project").mkdir()
        config_file = tmp_path / "testbridge.toml"
        config_file.write_text(
            """
            working_dir = "project"

            [commands]
            rspec_base = "docker compose exec -T test bundle exec rspec --format p"
            cargo_base = "cargo nextest run"

            [global]
            log_level = "debug"
            """
        )

        config = load_config(config_file)

        assert config.commands.rspec_base.endswith("rspec --format p")
        assert config.commands.cargo_base == "cargo nextest run"
        assert config.global_config.log_level == "debug"
        assert config.working_dir == (tmp_path / "project").resolve()

    def test_partial_file_keeps_defaults(self, tmp_path: Path) -> None:
        config_file = tmp_path / "testbridge.toml"
        config_file.write_text('[commands]\nrspec_base = "rspec"\n')

        config = load_config(config_file)

        assert config.commands.rspec_base == "rspec"
        assert config.commands.cargo_base == "cargo test"
        assert config.working_dir == tmp_path.resolve()

    def test_invalid_toml(self, tmp_path: Path) -> None:
        config_file = tmp_path / "bad.toml"
        config_file.write_text('[commands\nrspec_base = "x')
        with pytest.raises(ConfigurationError, match="Invalid TOML"):
            load_config(config_file)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigurationError, match="Cannot read config file"):
            load_config(tmp_path / "absent.toml")


class TestConfigFromMapping:
    """Validation of parsed configuration data."""

    def test_unknown_section(self) -> None:
        with pytest.raises(ConfigurationError, match="Unknown top-level key"):
            config_from_mapping({"server": {"port": 1}})

    def test_unknown_key(self) -> None:
        with pytest.raises(ConfigurationError, match=r"Unknown key\(s\) in \[commands\]"):
            config_from_mapping({"commands": {"pytest_base": "pytest"}})

    def test_section_must_be_table(self) -> None:
        with pytest.raises(ConfigurationError, match="must be a table"):
            config_from_mapping({"commands": "cargo test"})

    def test_non_string_command(self) -> None:
        with pytest.raises(ConfigurationError, match=r"Invalid value in \[commands\]"):
            config_from_mapping({"commands": {"cargo_base": 5}})

    @pytest.mark.parametrize("level", ["LOUD", 10])
    def test_invalid_log_level(self, level) -> None:
        with pytest.raises(ConfigurationError, match=r"Invalid value in \[global\]"):
            config_from_mapping({"global": {"log_level": level}})

    def test_blank_base_command_is_accepted(self) -> None:
        config = config_from_mapping({"commands": {"rspec_base": " "}})
        assert config.commands.rspec_base == " "


class TestApplyOverrides:
    """CLI and environment values replace file values."""

    def test_overrides_replace_values(self, tmp_path: Path) -> None:
        config = apply_overrides(
            BridgeConfig(), rspec_base="rspec", cargo_base="cargo t", working_dir=tmp_path
        )
        assert config.commands == CommandConfig(rspec_base="rspec", cargo_base="cargo t")
        assert config.working_dir == tmp_path

    def test_none_keeps_existing(self) -> None:
        base = BridgeConfig(commands=CommandConfig(rspec_base="rspec"))
        assert apply_overrides(base) == base
