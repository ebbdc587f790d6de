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

"""Compare the catalog against the upstream SPDX license list.

The catalog is a frozen snapshot (SPDX list 3.7).  This module reports
how it has drifted from a newer copy of the upstream
``licenses.json``: identifiers that no longer exist, and ``libre`` or
``osi_approved`` flags that disagree.

Identifiers that are known to differ from upstream on purpose are
listed in :data:`KNOWN_QUIRKS` and reported as warnings, not errors.

Source:
    - SPDX License List data: https://github.com/spdx/license-list-data
"""

from __future__ import annotations

import json
import urllib.request
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Final

from linfo.logging import get_logger
from linfo.spdx import SpdxLicense

__all__ = [
    'KNOWN_QUIRKS',
    'SPDX_URL',
    'UpstreamReport',
    'compare_with_spdx',
    'fetch_spdx_list',
]

log = get_logger('linfo.upstream')

SPDX_URL: Final = 'https://raw.githubusercontent.com/spdx/license-list-data/main/json/licenses.json'

#: Identifiers carried verbatim from the source list even though they do
#: not match upstream spelling (upstream uses ``0BSD``, ``PHP-3.0`` and
#: ``PHP-3.01``).  Keep sorted.
KNOWN_QUIRKS: Final[frozenset[str]] = frozenset({
    '-PHP\u00a03.0',
    '-PHP\u00a03.01',
    'BSD\u00a00',
})


@dataclass
class UpstreamReport:
    """Differences between the catalog and an upstream license list.

    Attributes:
        errors: Disagreements that indicate stale catalog data.
        warnings: Expected differences (quirks, deprecations).
    """

    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        """``True`` if no errors were found."""
        return not self.errors


def compare_with_spdx(spdx_data: Mapping[str, Any]) -> UpstreamReport:
    """Check every catalog entry against decoded SPDX ``licenses.json``.

    Args:
        spdx_data: The decoded document; only its ``licenses`` array is
            read, using the ``licenseId``, ``isOsiApproved``,
            ``isFsfLibre`` and ``isDeprecatedLicenseId`` fields.

    Returns:
        An :class:`UpstreamReport`.
    """
    upstream = {entry['licenseId']: entry for entry in spdx_data.get('licenses', [])}
    report = UpstreamReport()

    for lic in SpdxLicense.all():
        if lic.identifier in KNOWN_QUIRKS:
            report.warnings.append(f'[QUIRK] {lic.identifier!r} is not spelled as upstream')
            continue

        entry = upstream.get(lic.identifier)
        if entry is None:
            report.errors.append(f'[MISSING] {lic.identifier} not found in SPDX license list')
            continue

        if entry.get('isDeprecatedLicenseId', False):
            report.warnings.append(f'[DEPRECATED] {lic.identifier}')

        upstream_osi = bool(entry.get('isOsiApproved', False))
        if upstream_osi != lic.is_osi_approved:
            report.errors.append(f'[OSI MISMATCH] {lic.identifier}: ours={lic.is_osi_approved}, SPDX={upstream_osi}')

        upstream_libre = bool(entry.get('isFsfLibre', False))
        if upstream_libre != lic.is_libre:
            report.errors.append(f'[LIBRE MISMATCH] {lic.identifier}: ours={lic.is_libre}, SPDX={upstream_libre}')

    log.debug('upstream_compared', upstream=len(upstream), errors=len(report.errors), warnings=len(report.warnings))
    return report


def fetch_spdx_list(url: str = SPDX_URL) -> dict[str, Any]:
    """Download and decode the SPDX ``licenses.json`` document.

    Raises:
        ValueError: If *url* is not an ``https://`` URL.
    """
    if not url.startswith('https://'):
        msg = f'Only https:// URLs are allowed, got: {url}'
        raise ValueError(msg)
    log.info('fetching_spdx_list', url=url)
    with urllib.request.urlopen(url) as resp:  # noqa: S310
        return json.loads(resp.read())
