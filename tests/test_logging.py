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

import io
import json
from contextlib import contextmanager
from typing import Any, Iterator

from structlog import get_logger

from slim.logging import LoggingOutput, setup_logging
from slim.serialization import SlimError
from slim.serialization.stream import StreamDeserializer


@contextmanager
def json_logging(**kwargs: Any) -> Iterator[None]:
    # entered from the test body, so the handler writes to the stderr that capsys captures for the test
    setup_logging(logging_output=LoggingOutput.JSON, **kwargs)
    try:
        yield
    finally:
        setup_logging(logging_output=LoggingOutput.NULL)


def _log_lines(err: str) -> list[dict]:
    return [json.loads(line) for line in err.splitlines() if line.startswith('{')]


def test_json_output(capsys) -> None:
    with json_logging(debug=True, extra_log_info={'peer': 'test'}):
        get_logger().info('hello', answer=42)

    lines = _log_lines(capsys.readouterr().err)

    assert len(lines) == 1
    assert lines[0]['event'] == 'hello'
    assert lines[0]['answer'] == 42
    assert lines[0]['level'] == 'info'
    assert lines[0]['peer'] == 'test'


def test_stream_closed_is_logged_at_debug(capsys) -> None:
    with json_logging(debug=True):
        de = StreamDeserializer(io.BytesIO(b'abc'))
        assert de.read_bytes(5).unwrap_err() is SlimError.STREAM_CLOSED

    lines = _log_lines(capsys.readouterr().err)

    events = [line for line in lines if line['event'] == 'stream closed']
    assert len(events) == 1
    assert events[0]['level'] == 'debug'
    assert events[0]['expected'] == 5
    assert events[0]['received'] == 3


def test_debug_is_filtered_without_debug_flag(capsys) -> None:
    with json_logging(debug=False):
        get_logger().debug('hidden')
        get_logger().info('shown')

    events = [line['event'] for line in _log_lines(capsys.readouterr().err)]
    assert events == ['shown']


def test_null_output(capsys) -> None:
    setup_logging(logging_output=LoggingOutput.NULL)
    get_logger().warning('nobody sees this')

    assert capsys.readouterr().err == ''
