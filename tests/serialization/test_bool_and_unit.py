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
from slim.serialization.encoding.bool import decode_bool, encode_bool
from slim.serialization.encoding.unit import decode_unit, encode_unit
from slim.utils.result import Err, Ok


@pytest.mark.parametrize('value, expected', [(False, b'\x00'), (True, b'\x01')])
def test_encode_bool(value: bool, expected: bytes) -> None:
    se = Serializer.build_bytes_serializer()
    assert encode_bool(se, value) == Ok(None)
    assert bytes(se.finalize()) == expected


@pytest.mark.parametrize('data, expected', [
    (b'\x00', False),
    (b'\x01', True),
    (b'\x02', True),
    (b'\xff', True),
])
def test_decode_bool_is_lenient(data: bytes, expected: bool) -> None:
    assert decode_bool(Deserializer.build_bytes_deserializer(data)) == Ok(expected)


def test_decode_bool_empty() -> None:
    assert decode_bool(Deserializer.build_bytes_deserializer(b'')) == Err(SlimError.STREAM_CLOSED)


def test_encode_bool_rejects_int() -> None:
    se = Serializer.build_bytes_serializer()
    assert encode_bool(se, 1) == Err(SlimError.SERIALIZATION_ERROR)  # type: ignore[arg-type]


def test_unit_uses_no_bytes() -> None:
    se = Serializer.build_bytes_serializer()
    assert encode_unit(se, ()) == Ok(None)
    assert se.cur_pos() == 0
    de = Deserializer.build_bytes_deserializer(b'\x07')
    assert decode_unit(de) == Ok(())
    assert de.read_byte() == Ok(7)


def test_unit_decodes_from_empty_stream() -> None:
    assert decode_unit(Deserializer.build_bytes_deserializer(b'')) == Ok(())


def test_encode_unit_rejects_other_values() -> None:
    se = Serializer.build_bytes_serializer()
    assert encode_unit(se, None) == Err(SlimError.SERIALIZATION_ERROR)  # type: ignore[arg-type]
