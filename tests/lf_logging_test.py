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

"""Tests for linfo.logging module."""

from __future__ import annotations

import json
import logging

import pytest
from linfo.config import LogLevel, Settings, resolve_settings
from linfo.logging import configure_logging, get_logger


class TestConfigureLogging:
    """Tests for configure_logging()."""

    def test_default_level_is_info(self) -> None:
        """Default settings log at INFO."""
        configure_logging()
        assert logging.root.level == logging.INFO

    @pytest.mark.parametrize(
        ('level', 'expected'),
        [
            (LogLevel.DEBUG, logging.DEBUG),
            (LogLevel.INFO, logging.INFO),
            (LogLevel.WARNING, logging.WARNING),
        ],
    )
    def test_level_from_settings(self, level: LogLevel, expected: int) -> None:
        """Settings.log_level sets the root level."""
        configure_logging(Settings(log_level=level))
        assert logging.root.level == expected

    def test_quiet_beats_verbose(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Resolved flags carry through: quiet wins over verbose."""
        monkeypatch.delenv('LINFO_LOG_LEVEL', raising=False)
        configure_logging(resolve_settings(verbose=True, quiet=True))
        assert logging.root.level == logging.WARNING

    def test_reconfigure(self) -> None:
        """A second call replaces the first."""
        configure_logging()
        configure_logging(Settings(log_level=LogLevel.DEBUG))
        assert logging.root.level == logging.DEBUG

    def test_json_lines_on_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        """JSON mode writes one object per event to stderr, leaving stdout clean."""
        configure_logging(Settings(json_log=True))
        get_logger('linfo.test').warning('to_stderr', value=1)
        captured = capsys.readouterr()
        assert captured.out == ''
        record = json.loads(captured.err.strip().splitlines()[-1])
        assert record['event'] == 'to_stderr'
        assert record['value'] == 1
        assert record['level'] == 'warning'
        assert record['logger'] == 'linfo.test'
        assert 'time' in record

    def test_console_has_no_timestamp(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Console mode renders the event without a timestamp."""
        configure_logging()
        get_logger('linfo.test').info('console_event', key='value')
        err = capsys.readouterr().err
        assert 'console_event' in err
        assert 'key=value' in err
        assert 'time' not in err

    def test_warning_level_drops_info(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Events below the configured level are filtered out."""
        configure_logging(Settings(log_level=LogLevel.WARNING))
        log = get_logger('linfo.test')
        log.info('hidden')
        log.warning('shown')
        err = capsys.readouterr().err
        assert 'hidden' not in err
        assert 'shown' in err


class TestGetLogger:
    """Tests for get_logger()."""

    def test_follows_reconfiguration(self, capsys: pytest.CaptureFixture[str]) -> None:
        """A logger created before configure_logging uses the new renderer."""
        log = get_logger('linfo.early')
        configure_logging(Settings(json_log=True))
        log.warning('late_event')
        assert json.loads(capsys.readouterr().err.strip().splitlines()[-1])['event'] == 'late_event'
