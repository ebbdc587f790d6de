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

"""Structured logging for the ``linfo`` command.

Events go through `structlog <https://www.structlog.org/>`_ into the
stdlib root logger, which writes to stderr so stdout stays clean for
piped output (``linfo list --format json | jq``).

The renderer follows :attr:`Settings.json_log`:

- console: ``level [logger] event key=value``, colored on a TTY;
- JSON: one object per line, with an ISO timestamp.

The catalog never logs; only the command-line layer does.
"""

from __future__ import annotations

import logging
import sys

import structlog

from linfo.config import LogLevel, Settings

__all__ = [
    'configure_logging',
    'get_logger',
]

_LEVELS = {
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARNING: logging.WARNING,
}


def configure_logging(settings: Settings | None = None) -> None:
    """Configure structlog from resolved settings.

    Calling it again replaces the previous configuration.

    Args:
        settings: Output of :func:`linfo.config.resolve_settings`.
            Defaults to ``Settings()`` (info level, console output).
    """
    settings = settings or Settings()

    logging.basicConfig(
        format='%(message)s',
        stream=sys.stderr,
        level=_LEVELS[settings.log_level],
        force=True,
    )

    if settings.json_log:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
        stamp: list[structlog.types.Processor] = [structlog.processors.TimeStamper(fmt='iso', key='time')]
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
        stamp = []

    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            *stamp,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
    )
    for handler in logging.root.handlers:
        handler.setFormatter(formatter)


def get_logger(name: str = 'linfo') -> structlog.stdlib.BoundLogger:
    """Return a structlog logger bound to *name*."""
    return structlog.get_logger(name)
