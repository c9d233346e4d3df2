#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Tests for configuration models and loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from babylog.config import (
    BabylogConfig,
    ConfigurationError,
    EndpointConfig,
    GlobalConfig,
    TimingConfig,
    load_config,
)


class TestConfigModels:
    """Test defaults and validation of the config models."""

    def test_defaults(self) -> None:
        """Test the default windows and endpoint."""
        config = BabylogConfig()
        assert config.timing.inline_debounce_ms == 200
        assert config.timing.suggestion_debounce_ms == 500
        assert config.endpoint.base_url == "http://localhost:3000"
        assert config.endpoint.command_route == "/baby"
        assert config.endpoint.timeout_seconds == 10.0
        assert config.global_config.log_level == "INFO"
        assert config.global_config.show_date is False

    def test_negative_window_rejected(self) -> None:
        """Test that debounce windows must be non-negative."""
        with pytest.raises(ValueError, match="non-negative"):
            TimingConfig(inline_debounce_ms=-1)

    def test_zero_timeout_rejected(self) -> None:
        """Test that the timeout must be positive."""
        with pytest.raises(ValueError, match="positive"):
            EndpointConfig(timeout_seconds=0)

    def test_base_url_must_be_http(self) -> None:
        """Test the base URL scheme check."""
        with pytest.raises(ValueError, match="http"):
            EndpointConfig(base_url="ftp://example.com")

    def test_log_level_normalised(self) -> None:
        """Test that log levels are upper-cased and validated."""
        assert GlobalConfig(log_level="debug").log_level == "DEBUG"
        with pytest.raises(ValueError):
            GlobalConfig(log_level="LOUD")


class TestLoadConfig:
    """Test loading TOML configuration files."""

    def test_full_file(self, tmp_path: Path) -> None:
        """Test every table of a configuration file."""
        path = tmp_path / "babylog.conf"
        path.write_text(
            """
            [global]
            log_level = "debug"
            show_date = true

            [timing]
            inline_debounce_ms = 100

            [endpoint]
            base_url = "https://baby.example.com"
            """
        )

        config = load_config(path)

        assert config.global_config.log_level == "DEBUG"
        assert config.global_config.show_date is True
        assert config.timing.inline_debounce_ms == 100
        assert config.timing.suggestion_debounce_ms == 500
        assert config.endpoint.base_url == "https://baby.example.com"
        assert config.to_dict()["endpoint"]["command_route"] == "/baby"

    def test_empty_file_gives_defaults(self, tmp_path: Path) -> None:
        """Test that every table is optional."""
        path = tmp_path / "empty.conf"
        path.write_text("")
        assert load_config(path) == BabylogConfig()

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test a path that does not exist."""
        with pytest.raises(ConfigurationError, match="not found") as exc_info:
            load_config(tmp_path / "missing.conf")
        assert exc_info.value.path.endswith("missing.conf")

    def test_invalid_toml(self, tmp_path: Path) -> None:
        """Test a file that is not TOML."""
        path = tmp_path / "bad.conf"
        path.write_text('[timing\ninline = "')
        with pytest.raises(ConfigurationError, match="Invalid TOML"):
            load_config(path)

    def test_unknown_section_and_key(self, tmp_path: Path) -> None:
        """Test that typos are reported instead of silently ignored."""
        path = tmp_path / "typo.conf"
        path.write_text("[timings]\n")
        with pytest.raises(ConfigurationError, match="Unknown sections: timings"):
            load_config(path)

        path.write_text("[timing]\ninline_ms = 5\n")
        with pytest.raises(ConfigurationError, match="Unknown keys in \\[timing\\]: inline_ms"):
            load_config(path)

    def test_invalid_value(self, tmp_path: Path) -> None:
        """Test that validator failures become configuration errors."""
        path = tmp_path / "invalid.conf"
        path.write_text("[endpoint]\ntimeout_seconds = -3\n")
        with pytest.raises(ConfigurationError, match="positive"):
            load_config(path)


# 🔼⚙️🔚
