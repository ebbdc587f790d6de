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

"""Tests for JSON encoding of licenses."""

from __future__ import annotations

import json

import pytest
from linfo.errors import EmptyLicenseIdError, UnknownLicenseIdError
from linfo.serde import from_json_value, json_default, license_record, to_json
from linfo.spdx import LicenseMap, SpdxLicense


class TestEncode:
    """Tests for to_json() and json_default()."""

    def test_license_as_identifier(self) -> None:
        """A license encodes as its identifier string."""
        assert to_json(SpdxLicense.MIT) == '"MIT"'

    def test_nested(self) -> None:
        """Licenses nested in containers are encoded."""
        text = to_json({'project': 'demo', 'licenses': [SpdxLicense.MIT, SpdxLicense.APACHE_2_0]})
        assert json.loads(text) == {'project': 'demo', 'licenses': ['MIT', 'Apache-2.0']}

    def test_kwargs_forwarded(self) -> None:
        """Keyword arguments reach json.dumps."""
        assert to_json({'b': 1, 'a': SpdxLicense.MIT}, sort_keys=True) == '{"a": "MIT", "b": 1}'

    def test_license_map(self) -> None:
        """A LicenseMap encodes as an object keyed by identifier."""
        decoded = json.loads(to_json(LicenseMap.filled(0)))
        assert len(decoded) == SpdxLicense.count()
        assert list(decoded)[0] == SpdxLicense.all()[0].identifier

    def test_unsupported_type(self) -> None:
        """Unknown objects still raise TypeError."""
        with pytest.raises(TypeError, match='not JSON serializable'):
            json_default(object())


class TestDecode:
    """Tests for from_json_value()."""

    @pytest.mark.parametrize('lic', SpdxLicense.all(), ids=str)
    def test_round_trip(self, lic: SpdxLicense) -> None:
        """Decoding the encoded form yields the same license."""
        assert from_json_value(json.loads(to_json(lic))) is lic

    def test_non_string(self) -> None:
        """Ordinals are not accepted as an encoding."""
        with pytest.raises(TypeError, match='string'):
            from_json_value(290)

    def test_empty(self) -> None:
        """An empty string fails like parse('')."""
        with pytest.raises(EmptyLicenseIdError):
            from_json_value('')

    def test_unknown(self) -> None:
        """An unknown string fails like parse()."""
        with pytest.raises(UnknownLicenseIdError):
            from_json_value('Mit')


class TestLicenseRecord:
    """Tests for license_record()."""

    def test_fields(self) -> None:
        """Every attribute and family flag is present."""
        lic = SpdxLicense.GPL_3_0_ONLY
        assert license_record(lic) == {
            'id': 'GPL-3.0-only',
            'name': 'GNU General Public License v3.0 only',
            'ordinal': lic.ordinal,
            'libre': True,
            'osi_approved': True,
            'gpl': True,
            'agpl': False,
            'creative_commons': False,
        }
