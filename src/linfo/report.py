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

"""Rendering of catalog entries as Rich tables or JSON.

Usage::

    from linfo.report import format_license_table, licenses_to_json

    rows = [lic for lic in SpdxLicense.all() if lic.is_gpl]
    print(format_license_table(rows))
    print(licenses_to_json(rows))
"""

from __future__ import annotations

from collections.abc import Iterable
from io import StringIO

from rich.console import Console
from rich.table import Table
from rich.text import Text

from linfo.serde import license_record, to_json
from linfo.spdx import FAMILIES, SpdxLicense

__all__ = [
    'format_license_table',
    'license_families',
    'licenses_to_json',
    'print_license_detail',
    'print_license_table',
]


def _flag(value: bool) -> Text:
    return Text('yes', style='green') if value else Text('no', style='dim')


def license_families(lic: SpdxLicense) -> list[str]:
    """Return the titles of every family *lic* belongs to."""
    return [family.title for family in FAMILIES.values() if lic in family]


def print_license_table(
    licenses: Iterable[SpdxLicense],
    console: Console | None = None,
) -> int:
    """Print licenses as a Rich table, one row per license.

    Args:
        licenses: Licenses to print, in the order given.
        console: Rich :class:`Console` to print to.  When ``None``,
            a default ``Console()`` is created (auto-detects TTY).

    Returns:
        The number of rows printed.
    """
    if console is None:
        console = Console()

    table = Table(
        show_header=True,
        header_style='bold',
        show_edge=False,
        pad_edge=False,
    )
    table.add_column('#', justify='right', style='dim')
    table.add_column('ID', style='bold', no_wrap=True)
    table.add_column('Name', ratio=3)
    table.add_column('Libre', justify='center')
    table.add_column('OSI', justify='center')

    rows = 0
    for lic in licenses:
        table.add_row(
            str(lic.ordinal),
            lic.identifier,
            lic.display_name,
            _flag(lic.is_libre),
            _flag(lic.is_osi_approved),
        )
        rows += 1

    console.print(table)
    console.print(f'\n{rows} license(s).')
    return rows


def print_license_detail(lic: SpdxLicense, console: Console | None = None) -> None:
    """Print every attribute of one license as a two-column grid."""
    if console is None:
        console = Console()

    grid = Table.grid(padding=(0, 2))
    grid.add_column(style='bold')
    grid.add_column()
    grid.add_row('ID', lic.identifier)
    grid.add_row('Name', lic.display_name)
    grid.add_row('Ordinal', str(lic.ordinal))
    grid.add_row('Libre', _flag(lic.is_libre))
    grid.add_row('OSI approved', _flag(lic.is_osi_approved))
    grid.add_row('Families', ', '.join(license_families(lic)) or '-')
    console.print(grid)


def format_license_table(
    licenses: Iterable[SpdxLicense],
    *,
    color: bool = False,
    width: int = 120,
) -> str:
    """Format licenses as a table string.

    Thin wrapper around :func:`print_license_table` that captures the
    Rich output.  Useful for tests and non-interactive callers.

    Args:
        licenses: Licenses to include.
        color: If ``True``, include ANSI color codes in the output.
        width: Console width in columns.

    Returns:
        Multi-line formatted string.
    """
    buf = StringIO()
    console = Console(file=buf, force_terminal=color, width=width)
    print_license_table(licenses, console=console)
    return buf.getvalue().rstrip('\n')


def licenses_to_json(licenses: Iterable[SpdxLicense], *, indent: int = 2) -> str:
    """Serialize licenses to a JSON array of attribute records."""
    return to_json([license_record(lic) for lic in licenses], indent=indent)
