# Copyright 2025 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import logging
import logging.config
from collections import OrderedDict
from enum import IntEnum, auto
from typing import Any

import structlog
from structlog.typing import EventDict, Processor

_TIMESTAMP_FORMAT = '%Y-%m-%d %H:%M:%S'


class LoggingOutput(IntEnum):
    NULL = auto()
    PRETTY = auto()
    JSON = auto()


def _make_formatter(renderer: Processor, foreign_pre_chain: list[Processor]) -> dict[str, Any]:
    return {
        '()': structlog.stdlib.ProcessorFormatter,
        'processor': renderer,
        'foreign_pre_chain': foreign_pre_chain,
    }


def _make_extra_info_processor(extra_log_info: dict[str, str]) -> Processor:
    def add_extra_log_info(_logger: logging.Logger, _method_name: str, event_dict: EventDict) -> EventDict:
        for key, value in extra_log_info.items():
            assert key not in event_dict, f'extra log info key {key!r} conflicts with an event key'
            event_dict[key] = value
        return event_dict
    return add_extra_log_info


def setup_logging(
    *,
    logging_output: LoggingOutput = LoggingOutput.PRETTY,
    debug: bool = False,
    extra_log_info: dict[str, str] | None = None,
) -> None:
    """ Configure structlog on top of the stdlib logging module.

    The library itself only emits logs through `structlog.get_logger()`, applications embedding it call this once at
    startup to choose how those logs are rendered. Stream failures are logged at debug level, so they only show up
    with `debug=True`.
    """
    timestamper = structlog.processors.TimeStamper(fmt=_TIMESTAMP_FORMAT)

    # applied to records coming from plain stdlib loggers
    foreign_pre_chain: list[Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        timestamper,
    ]

    handler: dict[str, Any]
    if logging_output is LoggingOutput.NULL:
        handler = {'class': 'logging.NullHandler'}
    else:
        handler = {
            'class': 'logging.StreamHandler',
            'level': 'DEBUG',
            'formatter': logging_output.name.lower(),
        }

    logging.config.dictConfig({
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'pretty': _make_formatter(structlog.dev.ConsoleRenderer(colors=True), foreign_pre_chain),
            'json': _make_formatter(structlog.processors.JSONRenderer(), foreign_pre_chain),
        },
        'handlers': {'default': handler},
        'loggers': {
            '': {
                'handlers': ['default'],
                'level': logging.DEBUG if debug else logging.INFO,
            },
        },
    })

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            _make_extra_info_processor(extra_log_info or {}),
            structlog.stdlib.PositionalArgumentsFormatter(),
            timestamper,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=OrderedDict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
