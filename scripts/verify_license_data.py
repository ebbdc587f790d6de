#!/usr/bin/env python3
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
"""Verify the license catalog against the upstream SPDX license list.

Fetches the SPDX license list JSON (or reads a local copy) and checks
that every catalog identifier still exists upstream and that the
``libre`` and ``osi_approved`` flags match.

Exit codes:
    0  All checks passed.
    1  One or more errors found.

Usage::

    python scripts/verify_license_data.py
    python scripts/verify_license_data.py --file licenses.json
    python scripts/verify_license_data.py --warnings
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from linfo.config import resolve_settings
from linfo.logging import configure_logging
from linfo.upstream import SPDX_URL, compare_with_spdx, fetch_spdx_list


def main() -> int:
    """Run the upstream check and return 0 on success, 1 on failure."""
    parser = argparse.ArgumentParser(
        description='Verify the license catalog against the SPDX license list.',
    )
    parser.add_argument(
        '--file',
        type=Path,
        help='Read licenses.json from this path instead of downloading it.',
    )
    parser.add_argument(
        '--url',
        default=SPDX_URL,
        help='Where to download licenses.json from.',
    )
    parser.add_argument(
        '--warnings',
        action='store_true',
        help='Also print expected differences.',
    )
    args = parser.parse_args()

    configure_logging(resolve_settings())
    console = Console()

    if args.file:
        data = json.loads(args.file.read_text(encoding='utf-8'))
    else:
        data = fetch_spdx_list(args.url)

    report = compare_with_spdx(data)

    if args.warnings:
        for warning in report.warnings:
            console.print(f'[yellow]warning[/]: {escape(warning)}')
    for error in report.errors:
        console.print(f'[bold red]error[/]: {escape(error)}')

    if not report.ok:
        console.print(f'\n[bold red]{len(report.errors)} error(s)[/], {len(report.warnings)} warning(s).')
        return 1

    console.print(f'\n[bold green]Catalog matches upstream[/] ({len(report.warnings)} warning(s)).')
    return 0


if __name__ == '__main__':
    sys.exit(main())
