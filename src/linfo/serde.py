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

"""JSON encoding for licenses.

A license is serialized as its identifier string and deserialized
through :func:`linfo.spdx.parse`, so the encoded form survives catalog
reordering.

Usage::

    from linfo.serde import from_json_value, to_json

    text = to_json({'project': 'demo', 'license': SpdxLicense.MIT})
    # '{"project": "demo", "license": "MIT"}'

    assert from_json_value('MIT') is SpdxLicense.MIT

``json`` only calls the ``default`` hook for values, never for dict
keys; convert keys with ``str()`` or use :class:`~linfo.spdx.LicenseMap`.
"""

from __future__ import annotations

import json
from typing import Any

from linfo.spdx import LicenseMap, SpdxLicense, parse

__all__ = [
    'from_json_value',
    'json_default',
    'license_record',
    'to_json',
]


def json_default(obj: object) -> object:
    """``default=`` hook for :func:`json.dumps`.

    Licenses become their identifier; a :class:`LicenseMap` becomes an
    object keyed by identifier in ordinal order.

    Raises:
        TypeError: For any other type, as :func:`json.dumps` expects.
    """
    if isinstance(obj, SpdxLicense):
        return obj.identifier
    if isinstance(obj, LicenseMap):
        return {lic.identifier: value for lic, value in obj.items()}
    msg = f'Object of type {type(obj).__name__} is not JSON serializable'
    raise TypeError(msg)


def to_json(obj: object, **kwargs: Any) -> str:  # noqa: ANN401
    """Serialize *obj* to JSON, encoding licenses as identifiers."""
    return json.dumps(obj, default=json_default, **kwargs)


def from_json_value(value: object) -> SpdxLicense:
    """Decode a license from a decoded JSON value.

    Raises:
        TypeError: If *value* is not a string.
        ParseError: If the string is empty or unknown.
    """
    if not isinstance(value, str):
        msg = f'License must be encoded as a string, got {type(value).__name__}'
        raise TypeError(msg)
    return parse(value)


def license_record(lic: SpdxLicense) -> dict[str, object]:
    """Return every attribute of *lic* as a plain dict."""
    return {
        'id': lic.identifier,
        'name': lic.display_name,
        'ordinal': lic.ordinal,
        'libre': lic.is_libre,
        'osi_approved': lic.is_osi_approved,
        'gpl': lic.is_gpl,
        'agpl': lic.is_agpl,
        'creative_commons': lic.is_creative_commons,
    }
