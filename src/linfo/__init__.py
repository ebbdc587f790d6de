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

"""linfo: a static catalog of SPDX license identifiers.

Usage::

    from linfo import SpdxLicense, parse

    lic = parse('Apache-2.0')
    print(lic.display_name)  # Apache License 2.0
"""

from linfo.errors import (
    CatalogError,
    EmptyLicenseIdError,
    LinfoError,
    ParseError,
    UnknownLicenseIdError,
)
from linfo.spdx import LicenseMap, SpdxLicense, parse, try_parse

__version__ = '0.1.0'

__all__ = [
    'CatalogError',
    'EmptyLicenseIdError',
    'LicenseMap',
    'LinfoError',
    'ParseError',
    'SpdxLicense',
    'UnknownLicenseIdError',
    '__version__',
    'parse',
    'try_parse',
]
