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

"""The ``linfo`` command.

Subcommands::

    linfo list [--family gpl|agpl|cc] [--libre] [--osi] [--format table|json]
    linfo show ID [--format table|json]
    linfo check ID [ID ...]

Global flags (``--verbose``, ``--quiet``, ``--json-log``) go before the
subcommand.  Logs go to stderr, results to stdout.

Exit codes:
    0  Success.
    1  At least one identifier failed to parse.
    2  Usage or configuration error.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence

from rich.console import Console
from rich.markup import escape

from linfo import __version__
from linfo.config import OutputFormat, Settings, resolve_settings
from linfo.errors import ConfigError, ParseError
from linfo.logging import configure_logging, get_logger
from linfo.report import licenses_to_json, print_license_detail, print_license_table
from linfo.spdx import FAMILIES, SpdxLicense, parse

__all__ = [
    'build_parser',
    'main',
    'select_licenses',
]

log = get_logger('linfo.cli')

_Handler = Callable[[argparse.Namespace, Settings, Console], int]


def select_licenses(
    *,
    family: str | None = None,
    libre: bool = False,
    osi: bool = False,
) -> list[SpdxLicense]:
    """Return catalog entries matching every given filter, in ordinal order.

    Args:
        family: A key of :data:`linfo.spdx.FAMILIES` (``gpl``, ``agpl``,
            ``cc``), or ``None`` for all licenses.
        libre: Keep only FSF libre licenses.
        osi: Keep only OSI-approved licenses.
    """
    licenses = FAMILIES[family].members() if family else SpdxLicense.all()
    return [lic for lic in licenses if (not libre or lic.is_libre) and (not osi or lic.is_osi_approved)]


def _write_json(text: str) -> None:
    sys.stdout.write(text + '\n')


def _cmd_list(args: argparse.Namespace, settings: Settings, console: Console) -> int:
    licenses = select_licenses(family=args.family, libre=args.libre, osi=args.osi)
    log.debug('licenses_selected', family=args.family, libre=args.libre, osi=args.osi, count=len(licenses))
    if settings.output_format is OutputFormat.JSON:
        _write_json(licenses_to_json(licenses))
    else:
        print_license_table(licenses, console=console)
    return 0


def _cmd_show(args: argparse.Namespace, settings: Settings, console: Console) -> int:
    try:
        lic = parse(args.license_id)
    except ParseError as exc:
        log.warning('license_parse_failed', license_id=exc.license_id, error=exc.detail)
        return 1
    if settings.output_format is OutputFormat.JSON:
        _write_json(licenses_to_json([lic]))
    else:
        print_license_detail(lic, console=console)
    return 0


def _cmd_check(args: argparse.Namespace, settings: Settings, console: Console) -> int:
    failures = 0
    for license_id in args.license_ids:
        try:
            lic = parse(license_id)
        except ParseError as exc:
            failures += 1
            log.warning('license_parse_failed', license_id=exc.license_id, error=exc.detail)
            console.print(f'[bold red]error[/]: {escape(exc.detail)}')
            continue
        console.print(f'[green]ok[/]: {escape(lic.identifier)} ({escape(lic.display_name)})')
    log.info('licenses_checked', total=len(args.license_ids), failed=failures)
    return 1 if failures else 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for ``linfo``."""
    parser = argparse.ArgumentParser(
        prog='linfo',
        description='Query the SPDX license catalog.',
    )
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging.')
    parser.add_argument('-q', '--quiet', action='store_true', help='Only log warnings and errors.')
    parser.add_argument('--json-log', action='store_true', help='Emit logs as JSON lines on stderr.')

    formats = [f.value for f in OutputFormat]
    subparsers = parser.add_subparsers(dest='command', required=True)

    list_parser = subparsers.add_parser('list', help='List catalog entries.')
    list_parser.add_argument('--family', choices=sorted(FAMILIES), help='Only licenses in this family.')
    list_parser.add_argument('--libre', action='store_true', help='Only FSF libre licenses.')
    list_parser.add_argument('--osi', action='store_true', help='Only OSI-approved licenses.')
    list_parser.add_argument('--format', choices=formats, help='Output format (default: table).')
    list_parser.set_defaults(handler=_cmd_list)

    show_parser = subparsers.add_parser('show', help='Show one license.')
    show_parser.add_argument('license_id', help='Exact SPDX identifier, e.g. MIT.')
    show_parser.add_argument('--format', choices=formats, help='Output format (default: table).')
    show_parser.set_defaults(handler=_cmd_show)

    check_parser = subparsers.add_parser('check', help='Check that identifiers exist.')
    check_parser.add_argument('license_ids', nargs='+', metavar='ID', help='Identifiers to check.')
    check_parser.set_defaults(handler=_cmd_check)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the ``linfo`` command and return its exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = resolve_settings(
            verbose=args.verbose,
            quiet=args.quiet,
            json_log=args.json_log,
            output_format=getattr(args, 'format', None),
        )
    except ConfigError as exc:
        parser.error(str(exc))

    configure_logging(settings)

    handler: _Handler = args.handler
    return handler(args, settings, Console())
