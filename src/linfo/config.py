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

"""Runtime settings for the ``linfo`` command.

There is no configuration file.  Settings come from CLI flags layered
over environment variables.

Priority order (highest wins):

1. ``--verbose`` / ``--quiet`` / ``--json-log`` / ``--format`` CLI flags
2. ``LINFO_LOG_LEVEL`` env var (``debug``, ``info``, ``warning``)
3. ``LINFO_JSON_LOG`` env var (``1``, ``true`` or ``yes`` enables)
4. ``LINFO_FORMAT`` env var (``table`` or ``json``)
5. The defaults on :class:`Settings`
"""

from __future__ import annotations

import enum
import os
from dataclasses import dataclass, replace

from linfo.errors import ConfigError

__all__ = [
    'LogLevel',
    'OutputFormat',
    'Settings',
    'resolve_settings',
]

_TRUTHY = ('1', 'true', 'yes')


class OutputFormat(str, enum.Enum):
    """How commands render catalog data on stdout."""

    TABLE = 'table'
    JSON = 'json'


class LogLevel(str, enum.Enum):
    """Minimum level of log events written to stderr."""

    DEBUG = 'debug'
    INFO = 'info'
    WARNING = 'warning'


@dataclass(frozen=True)
class Settings:
    """Resolved settings.

    Attributes:
        log_level: Minimum log level.
        json_log: Emit logs as JSON lines instead of console text.
        output_format: Default rendering for command output.
    """

    log_level: LogLevel = LogLevel.INFO
    json_log: bool = False
    output_format: OutputFormat = OutputFormat.TABLE


def _env_choice(name: str, choices: type[enum.Enum]) -> enum.Enum | None:
    raw = os.environ.get(name, '').strip().lower()
    if not raw:
        return None
    try:
        return choices(raw)
    except ValueError:
        allowed = ', '.join(c.value for c in choices)
        msg = f'{name}={raw!r} is not valid. Must be one of: {allowed}'
        raise ConfigError(msg) from None


def resolve_settings(
    base: Settings | None = None,
    *,
    verbose: bool = False,
    quiet: bool = False,
    json_log: bool = False,
    output_format: str | None = None,
) -> Settings:
    """Merge CLI flags and env vars into the final settings.

    Args:
        base: Starting point. Defaults to ``Settings()``.
        verbose: ``True`` if ``--verbose`` was passed.
        quiet: ``True`` if ``--quiet`` was passed. Wins over *verbose*.
        json_log: ``True`` if ``--json-log`` was passed.
        output_format: Value of ``--format``, if given.

    Returns:
        Resolved :class:`Settings`.

    Raises:
        ConfigError: If an environment variable holds an unknown value.
    """
    settings = base or Settings()

    level = settings.log_level
    env_level = _env_choice('LINFO_LOG_LEVEL', LogLevel)
    if env_level is not None:
        level = LogLevel(env_level.value)

    use_json_log = settings.json_log
    if os.environ.get('LINFO_JSON_LOG', '').strip().lower() in _TRUTHY:
        use_json_log = True

    fmt = settings.output_format
    env_format = _env_choice('LINFO_FORMAT', OutputFormat)
    if env_format is not None:
        fmt = OutputFormat(env_format.value)

    if verbose:
        level = LogLevel.DEBUG
    if quiet:
        level = LogLevel.WARNING
    if json_log:
        use_json_log = True
    if output_format is not None:
        fmt = OutputFormat(output_format)

    return replace(settings, log_level=level, json_log=use_json_log, output_format=fmt)
