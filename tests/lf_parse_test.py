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

"""Tests for identifier lookup."""

from __future__ import annotations

import pytest
from linfo.errors import EmptyLicenseIdError, LinfoError, ParseError, UnknownLicenseIdError
from linfo.spdx import SpdxLicense, parse, try_parse


class TestParse:
    """Tests for parse()."""

    def test_exact_match(self) -> None:
        """parse('MIT') returns the MIT license."""
        assert parse('MIT') is SpdxLicense.MIT

    @pytest.mark.parametrize('lic', SpdxLicense.all(), ids=str)
    def test_round_trip(self, lic: SpdxLicense) -> None:
        """parse(str(lic)) returns the same license."""
        assert parse(str(lic)) is lic

    def test_classmethod(self) -> None:
        """SpdxLicense.parse is the same lookup."""
        assert SpdxLicense.parse('Apache-2.0') is SpdxLicense.APACHE_2_0

    def test_quirky_identifier(self) -> None:
        """Identifiers with no-break spaces and leading hyphens resolve verbatim."""
        assert parse('-PHP\u00a03.01') is SpdxLicense.PHP_3_01
        assert parse('BSD\u00a00') is SpdxLicense.BSD_0

    def test_quirky_identifier_needs_no_break_space(self) -> None:
        """An ASCII space in place of U+00A0 does not match."""
        with pytest.raises(UnknownLicenseIdError):
            parse('BSD 0')
        assert try_parse('-PHP 3.01') is None


class TestParseErrors:
    """Tests for parse() failures."""

    def test_empty(self) -> None:
        """Empty input raises EmptyLicenseIdError."""
        with pytest.raises(EmptyLicenseIdError) as exc_info:
            parse('')
        assert exc_info.value.license_id == ''

    def test_unknown(self) -> None:
        """Unknown input raises UnknownLicenseIdError carrying the input."""
        with pytest.raises(UnknownLicenseIdError) as exc_info:
            parse('NOT-A-REAL-LICENSE')
        assert exc_info.value.license_id == 'NOT-A-REAL-LICENSE'
        assert 'NOT-A-REAL-LICENSE' in str(exc_info.value)

    def test_case_sensitive(self) -> None:
        """Lowercase 'mit' does not match 'MIT'."""
        with pytest.raises(UnknownLicenseIdError) as exc_info:
            parse('mit')
        assert exc_info.value.license_id == 'mit'

    @pytest.mark.parametrize('value', [' MIT', 'MIT ', '\tMIT', 'MIT\n'])
    def test_no_trimming(self, value: str) -> None:
        """Surrounding whitespace is not stripped."""
        with pytest.raises(UnknownLicenseIdError):
            parse(value)

    @pytest.mark.parametrize('value', ['GPL-3.0', 'GPL-3.0+', 'Apache', 'MI'])
    def test_no_partial_or_alias_match(self, value: str) -> None:
        """Prefixes, deprecated short forms and '+' suffixes are rejected."""
        with pytest.raises(UnknownLicenseIdError):
            parse(value)

    def test_whitespace_only_is_unknown_not_empty(self) -> None:
        """A single space is non-empty input."""
        with pytest.raises(UnknownLicenseIdError):
            parse(' ')

    def test_hierarchy(self) -> None:
        """Both failures are ParseError, LinfoError and ValueError."""
        for exc_type in (EmptyLicenseIdError, UnknownLicenseIdError):
            assert issubclass(exc_type, ParseError)
            assert issubclass(exc_type, LinfoError)
            assert issubclass(exc_type, ValueError)

    def test_catch_as_value_error(self) -> None:
        """Callers can catch the stdlib ValueError."""
        with pytest.raises(ValueError, match='unknown license identifier'):
            parse('nope')


class TestTryParse:
    """Tests for try_parse()."""

    def test_known(self) -> None:
        """Known identifiers resolve."""
        assert try_parse('Zlib') is SpdxLicense.ZLIB

    def test_unknown(self) -> None:
        """Unknown identifiers return None."""
        assert try_parse('zlib') is None

    def test_empty(self) -> None:
        """Empty input returns None."""
        assert try_parse('') is None
