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

r"""Commonly found licenses listed at https://spdx.org/licenses.

This subpackage exposes the closed :class:`SpdxLicense` enumeration,
its ordinal-indexed attribute tables and the identifier index.

Usage::

    from linfo.spdx import SpdxLicense, parse, ParseError

    assert SpdxLicense.count() == len(SpdxLicense.all())

    mit = parse('MIT')
    assert mit.is_libre and mit.is_osi_approved

    try:
        parse('mit')
    except ParseError as exc:
        print(exc.license_id)  # 'mit'

The declaration is validated once, when this package is first
imported.
"""

from linfo.errors import (
    CatalogError,
    EmptyLicenseIdError,
    ParseError,
    UnknownLicenseIdError,
)
from linfo.spdx._decl import (
    AGPL,
    COUNT,
    CREATIVE_COMMONS,
    FAMILIES,
    GPL,
    ID,
    LIBRE,
    NAME,
    OSI,
    LicenseFamily,
    SpdxLicense,
    parse,
    try_parse,
)
from linfo.spdx._map import LicenseMap
from linfo.spdx._validate import validate_catalog

validate_catalog()

__all__ = [
    'AGPL',
    'COUNT',
    'CREATIVE_COMMONS',
    'CatalogError',
    'EmptyLicenseIdError',
    'FAMILIES',
    'GPL',
    'ID',
    'LIBRE',
    'LicenseFamily',
    'LicenseMap',
    'NAME',
    'OSI',
    'ParseError',
    'SpdxLicense',
    'UnknownLicenseIdError',
    'parse',
    'try_parse',
    'validate_catalog',
]
