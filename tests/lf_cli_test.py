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

"""Tests for the linfo command."""

from __future__ import annotations

import json
from collections.abc import Iterator
from unittest.mock import patch

import pytest
from linfo.cli import build_parser, main, select_licenses
from linfo.spdx import AGPL, SpdxLicense

_CLEAN_ENV = {'LINFO_LOG_LEVEL': '', 'LINFO_JSON_LOG': '', 'LINFO_FORMAT': ''}


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep LINFO_* and color-forcing variables from the outer environment out of the tests."""
    for name in ('FORCE_COLOR', 'TTY_COMPATIBLE', 'TTY_INTERACTIVE'):
        monkeypatch.delenv(name, raising=False)
    with patch.dict('os.environ', _CLEAN_ENV, clear=False):
        yield


# ── select_licenses ─────────────────────────────────────────────────


class TestSelectLicenses:
    """Tests for select_licenses()."""

    def test_no_filters(self) -> None:
        """No filters returns the whole catalog."""
        assert select_licenses() == list(SpdxLicense.all())

    def test_family(self) -> None:
        """--family narrows to the family span."""
        assert select_licenses(family='agpl') == list(AGPL.members())

    def test_libre_and_osi(self) -> None:
        """Flags combine with AND."""
        selected = select_licenses(libre=True, osi=True)
        assert SpdxLicense.MIT in selected
        assert SpdxLicense.CC0_1_0 not in selected
        assert all(lic.is_libre and lic.is_osi_approved for lic in selected)

    def test_family_with_flags(self) -> None:
        """Only AGPL-3.0 variants are both AGPL and libre."""
        assert select_licenses(family='agpl', libre=True) == [
            SpdxLicense.AGPL_3_0_ONLY,
            SpdxLicense.AGPL_3_0_OR_LATER,
        ]


# ── Commands ────────────────────────────────────────────────────────


class TestList:
    """Tests for ``linfo list``."""

    def test_json(self, capsys: pytest.CaptureFixture[str]) -> None:
        """JSON output holds one record per selected license."""
        assert main(['--quiet', 'list', '--family', 'gpl', '--format', 'json']) == 0
        data = json.loads(capsys.readouterr().out)
        assert [r['id'] for r in data][0] == 'GPL-1.0-only'
        assert len(data) == 6

    def test_table(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Table output lists identifiers and a count."""
        assert main(['--quiet', 'list', '--family', 'agpl']) == 0
        out = capsys.readouterr().out
        assert 'AGPL-3.0-or-later' in out
        assert '4 license(s).' in out

    def test_env_format(self, capsys: pytest.CaptureFixture[str]) -> None:
        """LINFO_FORMAT=json switches the default output."""
        with patch.dict('os.environ', {'LINFO_FORMAT': 'json'}, clear=False):
            assert main(['--quiet', 'list', '--osi', '--libre']) == 0
        data = json.loads(capsys.readouterr().out)
        assert all(r['libre'] and r['osi_approved'] for r in data)

    def test_bad_env_is_usage_error(self, capsys: pytest.CaptureFixture[str]) -> None:
        """An invalid LINFO_FORMAT exits with status 2."""
        with patch.dict('os.environ', {'LINFO_FORMAT': 'xml'}, clear=False):
            with pytest.raises(SystemExit) as exc_info:
                main(['list'])
        assert exc_info.value.code == 2
        assert 'LINFO_FORMAT' in capsys.readouterr().err


class TestShow:
    """Tests for ``linfo show``."""

    def test_json(self, capsys: pytest.CaptureFixture[str]) -> None:
        """JSON output holds a single record."""
        assert main(['--quiet', 'show', 'MIT', '--format', 'json']) == 0
        data = json.loads(capsys.readouterr().out)
        assert data == [
            {
                'id': 'MIT',
                'name': 'MIT License',
                'ordinal': SpdxLicense.MIT.ordinal,
                'libre': True,
                'osi_approved': True,
                'gpl': False,
                'agpl': False,
                'creative_commons': False,
            }
        ]

    def test_table(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Detail output names the license."""
        assert main(['--quiet', 'show', 'CC-BY-4.0']) == 0
        out = capsys.readouterr().out
        assert 'Creative Commons Attribution 4.0 International' in out

    def test_unknown(self, capsys: pytest.CaptureFixture[str]) -> None:
        """An unknown identifier exits 1 and logs the failure on stderr."""
        assert main(['--json-log', 'show', 'mit']) == 1
        captured = capsys.readouterr()
        assert captured.out == ''
        assert 'license_parse_failed' in captured.err

    def test_empty(self, capsys: pytest.CaptureFixture[str]) -> None:
        """An empty identifier exits 1."""
        assert main(['show', '']) == 1
        assert 'license identifier is empty' in capsys.readouterr().err


class TestCheck:
    """Tests for ``linfo check``."""

    def test_all_known(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Known identifiers exit 0."""
        assert main(['--quiet', 'check', 'MIT', 'Apache-2.0']) == 0
        out = capsys.readouterr().out
        assert 'ok: MIT' in out
        assert 'ok: Apache-2.0' in out

    def test_some_unknown(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Any unknown identifier exits 1 and is reported."""
        assert main(['--quiet', 'check', 'MIT', 'mit']) == 1
        out = capsys.readouterr().out
        assert 'ok: MIT' in out
        assert "error: unknown license identifier: 'mit'" in out


class TestParser:
    """Tests for argument parsing."""

    def test_command_required(self) -> None:
        """A subcommand is required."""
        with pytest.raises(SystemExit):
            build_parser().parse_args([])

    def test_family_choices(self) -> None:
        """Unknown families are rejected."""
        with pytest.raises(SystemExit):
            build_parser().parse_args(['list', '--family', 'bsd'])

    def test_check_needs_ids(self) -> None:
        """check requires at least one identifier."""
        with pytest.raises(SystemExit):
            build_parser().parse_args(['check'])
