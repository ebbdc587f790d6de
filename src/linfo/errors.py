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

"""Exception hierarchy for linfo.

This module must have **zero** imports from other ``linfo`` modules so
it can be imported from anywhere without creating cycles.

Hierarchy::

    LinfoError
    ├── ParseError (also a ValueError)
    │   ├── EmptyLicenseIdError
    │   └── UnknownLicenseIdError
    ├── CatalogError
    └── ConfigError

Parse failures are expected outcomes when handling user input; callers
should catch :class:`ParseError`.  :class:`CatalogError` means the
license declaration itself is broken and is never raised for valid
builds.
"""

from __future__ import annotations

__all__ = [
    'CatalogError',
    'ConfigError',
    'EmptyLicenseIdError',
    'LinfoError',
    'ParseError',
    'UnknownLicenseIdError',
]


class LinfoError(Exception):
    """Base class for all linfo errors."""


class ParseError(LinfoError, ValueError):
    """Raised when a string cannot be resolved to a license.

    Attributes:
        license_id: The rejected input, echoed back for diagnostics.
        detail: Human-readable description of the problem.
    """

    def __init__(self, license_id: str, detail: str) -> None:
        """Initialize with the rejected input and a detail message."""
        self.license_id = license_id
        self.detail = detail
        super().__init__(detail)


class EmptyLicenseIdError(ParseError):
    """The input string was empty."""

    def __init__(self) -> None:
        """Initialize with a fixed message; there is no input to echo."""
        super().__init__('', 'license identifier is empty')


class UnknownLicenseIdError(ParseError):
    """The input was non-empty but matched no license identifier."""

    def __init__(self, license_id: str) -> None:
        """Initialize with the unmatched identifier."""
        super().__init__(license_id, f'unknown license identifier: {license_id!r}')


class CatalogError(LinfoError):
    """Raised when the license declaration fails validation.

    Attributes:
        errors: List of human-readable error strings.
    """

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        bullet_list = '\n'.join(f'  - {e}' for e in errors)
        super().__init__(f'License catalog has {len(errors)} validation error(s):\n{bullet_list}')


class ConfigError(LinfoError):
    """Raised when an environment variable holds an unusable value."""
