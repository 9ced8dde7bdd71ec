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

import pytest

from slim.serialization import Deserializer, Serializer, SlimError
from slim.serialization.encoding.error import DECODE_CODES, ENCODE_CODES, decode_slim_error, encode_slim_error
from slim.utils.result import Err, Ok


@pytest.mark.parametrize('error, code', [
    (SlimError.DESERIALIZATION_ERROR, 0),
    (SlimError.SERIALIZATION_ERROR, 1),
    (SlimError.STREAM_CLOSED, 2),
    (SlimError.STREAM_ERROR, 3),
])
def test_encode_codes(error: SlimError, code: int) -> None:
    se = Serializer.build_bytes_serializer()
    assert encode_slim_error(se, error) == Ok(None)
    assert bytes(se.finalize()) == bytes([code])


@pytest.mark.parametrize('code, error', [
    (0, SlimError.SERIALIZATION_ERROR),
    (1, SlimError.DESERIALIZATION_ERROR),
    (2, SlimError.STREAM_CLOSED),
    (3, SlimError.STREAM_ERROR),
])
def test_decode_codes(code: int, error: SlimError) -> None:
    assert decode_slim_error(Deserializer.build_bytes_deserializer(bytes([code]))) == Ok(error)


def test_first_two_codes_swap_on_a_round_trip() -> None:
    for error in SlimError:
        se = Serializer.build_bytes_serializer()
        encode_slim_error(se, error).unwrap()
        decoded = decode_slim_error(Deserializer.build_bytes_deserializer(bytes(se.finalize()))).unwrap()
        if error in (SlimError.STREAM_CLOSED, SlimError.STREAM_ERROR):
            assert decoded is error
        else:
            assert decoded is not error
            assert {decoded, error} == {SlimError.SERIALIZATION_ERROR, SlimError.DESERIALIZATION_ERROR}


def test_tables_cover_every_variant() -> None:
    assert set(ENCODE_CODES) == set(SlimError)
    assert set(DECODE_CODES.values()) == set(SlimError)


@pytest.mark.parametrize('code', [4, 0x80, 0xff])
def test_unknown_code(code: int) -> None:
    assert decode_slim_error(Deserializer.build_bytes_deserializer(bytes([code]))) == \
        Err(SlimError.DESERIALIZATION_ERROR)


def test_empty_stream() -> None:
    assert decode_slim_error(Deserializer.build_bytes_deserializer(b'')) == Err(SlimError.STREAM_CLOSED)


def test_encode_rejects_non_error() -> None:
    se = Serializer.build_bytes_serializer()
    assert encode_slim_error(se, 'stream_closed') == Err(SlimError.SERIALIZATION_ERROR)  # type: ignore[arg-type]
