# Copyright 2026 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
# SPDX-License-Identifier: Apache-2.0

"""Tests for linfo.config."""

from __future__ import annotations

from unittest.mock import patch

import pytest
from linfo.config import LogLevel, OutputFormat, Settings, resolve_settings
from linfo.errors import ConfigError

_CLEAN_ENV = {'LINFO_LOG_LEVEL': '', 'LINFO_JSON_LOG': '', 'LINFO_FORMAT': ''}


class TestDefaults:
    """Tests for resolve_settings() with no flags or env vars."""

    def test_defaults(self) -> None:
        """Nothing set yields Settings()."""
        with patch.dict('os.environ', _CLEAN_ENV, clear=False):
            assert resolve_settings() == Settings()

    def test_base_is_kept(self) -> None:
        """Values from base survive when nothing overrides them."""
        base = Settings(log_level=LogLevel.DEBUG, output_format=OutputFormat.JSON)
        with patch.dict('os.environ', _CLEAN_ENV, clear=False):
            assert resolve_settings(base) == base


class TestEnvVars:
    """Tests for environment variable layering."""

    def test_log_level(self) -> None:
        """LINFO_LOG_LEVEL sets the level, case-insensitively."""
        with patch.dict('os.environ', {**_CLEAN_ENV, 'LINFO_LOG_LEVEL': 'WARNING'}, clear=False):
            assert resolve_settings().log_level is LogLevel.WARNING

    @pytest.mark.parametrize('value', ['1', 'true', 'yes', 'TRUE'])
    def test_json_log_truthy(self, value: str) -> None:
        """Truthy LINFO_JSON_LOG values enable JSON logs."""
        with patch.dict('os.environ', {**_CLEAN_ENV, 'LINFO_JSON_LOG': value}, clear=False):
            assert resolve_settings().json_log is True

    @pytest.mark.parametrize('value', ['0', 'false', 'no', ''])
    def test_json_log_falsy(self, value: str) -> None:
        """Other LINFO_JSON_LOG values leave JSON logs off."""
        with patch.dict('os.environ', {**_CLEAN_ENV, 'LINFO_JSON_LOG': value}, clear=False):
            assert resolve_settings().json_log is False

    def test_format(self) -> None:
        """LINFO_FORMAT sets the output format."""
        with patch.dict('os.environ', {**_CLEAN_ENV, 'LINFO_FORMAT': 'json'}, clear=False):
            assert resolve_settings().output_format is OutputFormat.JSON

    def test_invalid_format(self) -> None:
        """An unknown LINFO_FORMAT raises ConfigError naming the choices."""
        with patch.dict('os.environ', {**_CLEAN_ENV, 'LINFO_FORMAT': 'yaml'}, clear=False):
            with pytest.raises(ConfigError, match='table, json'):
                resolve_settings()

    def test_invalid_level(self) -> None:
        """An unknown LINFO_LOG_LEVEL raises ConfigError."""
        with patch.dict('os.environ', {**_CLEAN_ENV, 'LINFO_LOG_LEVEL': 'trace'}, clear=False):
            with pytest.raises(ConfigError, match='LINFO_LOG_LEVEL'):
                resolve_settings()


class TestFlags:
    """Tests for CLI flags overriding env vars."""

    def test_verbose_beats_env(self) -> None:
        """--verbose wins over LINFO_LOG_LEVEL."""
        with patch.dict('os.environ', {**_CLEAN_ENV, 'LINFO_LOG_LEVEL': 'warning'}, clear=False):
            assert resolve_settings(verbose=True).log_level is LogLevel.DEBUG

    def test_quiet_beats_verbose(self) -> None:
        """--quiet wins over --verbose."""
        with patch.dict('os.environ', _CLEAN_ENV, clear=False):
            assert resolve_settings(verbose=True, quiet=True).log_level is LogLevel.WARNING

    def test_format_flag_beats_env(self) -> None:
        """--format wins over LINFO_FORMAT."""
        with patch.dict('os.environ', {**_CLEAN_ENV, 'LINFO_FORMAT': 'json'}, clear=False):
            assert resolve_settings(output_format='table').output_format is OutputFormat.TABLE

    def test_json_log_flag(self) -> None:
        """--json-log enables JSON logs."""
        with patch.dict('os.environ', _CLEAN_ENV, clear=False):
            assert resolve_settings(json_log=True).json_log is True
