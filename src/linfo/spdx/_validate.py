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

"""Structural checks over the license declaration.

The catalog is only correct if the declaration keeps a few properties
that Python cannot enforce on its own:

1. Every attribute table has exactly one entry per license.
2. Ordinals run ``0..COUNT-1`` without gaps.
3. Identifiers are non-empty and unique.
4. Each :class:`~linfo.spdx.LicenseFamily` span covers exactly the
   licenses whose identifiers carry the family's prefixes.

:func:`validate_catalog` collects every violation before raising, so a
broken edit to the declaration reports all of its problems at once.
"""

from __future__ import annotations

from linfo.errors import CatalogError
from linfo.spdx import _decl

__all__ = [
    'validate_catalog',
]


def _check_tables(errors: list[str]) -> None:
    tables: dict[str, tuple[object, ...]] = {
        'ID': _decl.ID,
        'NAME': _decl.NAME,
        'LIBRE': _decl.LIBRE,
        'OSI': _decl.OSI,
    }
    for label, table in tables.items():
        if len(table) != _decl.COUNT:
            errors.append(f'Table {label} has {len(table)} entries, expected {_decl.COUNT}')


def _check_ordinals(errors: list[str]) -> None:
    licenses = _decl.SpdxLicense.all()
    if len(licenses) != _decl.COUNT:
        errors.append(f'Catalog enumerates {len(licenses)} licenses, expected {_decl.COUNT}')
    for position, lic in enumerate(licenses):
        if lic.ordinal != position:
            errors.append(f'{lic.name} has ordinal {lic.ordinal} but is enumerated at position {position}')


def _check_identifiers(errors: list[str]) -> None:
    seen: dict[str, str] = {}
    for lic in _decl.SpdxLicense.all():
        identifier = lic.identifier
        if not identifier:
            errors.append(f'{lic.name} has an empty identifier')
            continue
        if identifier in seen:
            errors.append(f'Identifier {identifier!r} declared by both {seen[identifier]} and {lic.name}')
            continue
        seen[identifier] = lic.name


def _check_families(errors: list[str]) -> None:
    for family in _decl.FAMILIES.values():
        if family.first.ordinal > family.last.ordinal:
            errors.append(
                f'{family.title} span is inverted: {family.first.name} ({family.first.ordinal}) '
                f'is declared after {family.last.name} ({family.last.ordinal})'
            )
            continue
        for lic in _decl.SpdxLicense.all():
            claimed = lic.identifier.startswith(family.prefixes)
            inside = lic in family
            if claimed and not inside:
                errors.append(
                    f'{lic.identifier!r} belongs to the {family.title} family but is declared '
                    f'outside {family.first.name}..{family.last.name}'
                )
            elif inside and not claimed:
                errors.append(
                    f'{lic.identifier!r} is declared inside {family.first.name}..{family.last.name} '
                    f'but is not a {family.title} license'
                )


def validate_catalog() -> None:
    """Validate the license declaration.

    Raises:
        CatalogError: If any check fails. :attr:`CatalogError.errors`
            lists every problem found.
    """
    errors: list[str] = []
    _check_tables(errors)
    _check_ordinals(errors)
    _check_identifiers(errors)
    _check_families(errors)
    if errors:
        raise CatalogError(errors)
