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

from typing import Optional

from slim.serialization import SlimError
from slim.serialization.buffer_stream import BufferStream
from slim.types import U8, U64, Cow, Unit, make_slim_type
from slim.types.sequence_type import MAX_ZERO_WIDTH_ITEMS, SequenceType
from slim.types.unit_type import UnitType
from slim.utils.result import Err, Ok, Result
from tests import unittest


class WireScenariosTestCase(unittest.TestCase):
    def test_u64_hundred(self) -> None:
        slim_type = make_slim_type(U64)
        data = slim_type.to_bytes(100).unwrap()
        self.assertEqual(data, bytes([0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x64]))
        self.assertOk(slim_type.from_bytes(data), 100)

    def test_string(self) -> None:
        slim_type = make_slim_type(str)
        data = slim_type.to_bytes('12345678').unwrap()
        self.assertEqual(data, bytes([0, 0, 0, 0, 0, 0, 0, 8]) + b'12345678')
        self.assertOk(slim_type.from_bytes(data), '12345678')

    def test_result_success(self) -> None:
        slim_type = make_slim_type(Result[str, SlimError])
        data = slim_type.to_bytes(Ok('1234567')).unwrap()
        self.assertEqual(data, b'\x00' + bytes.fromhex('0000000000000007') + b'1234567')
        self.assertOk(slim_type.from_bytes(data), Ok('1234567'))

    def test_result_failure_changes_error_on_the_way_back(self) -> None:
        slim_type = make_slim_type(Result[str, SlimError])
        data = slim_type.to_bytes(Err(SlimError.SERIALIZATION_ERROR)).unwrap()
        self.assertEqual(data, b'\x01\x01')
        # the decoding table reads code 1 as a deserialization error, this is the current wire behavior
        self.assertOk(slim_type.from_bytes(data), Err(SlimError.DESERIALIZATION_ERROR))

    def test_truncated_length_prefix(self) -> None:
        stream = BufferStream(bytes.fromhex('00000000'))
        self.assertErr(make_slim_type(str).receive(stream), SlimError.STREAM_CLOSED)

    def test_optional_with_invalid_tag(self) -> None:
        slim_type = make_slim_type(Optional[str])
        for rest in [b'', b'\x00', bytes.fromhex('0000000000000003') + b'foo', b'\xff' * 16]:
            stream = BufferStream(b'\x02' + rest)
            self.assertErr(slim_type.receive(stream), SlimError.DESERIALIZATION_ERROR)
            self.assertOk(stream.deserializer.read_all(), rest)


class EdgeCasesTestCase(unittest.TestCase):
    def test_result_invalid_tag(self) -> None:
        slim_type = make_slim_type(Result[U8, SlimError])
        stream = BufferStream(b'\x02\x00')
        self.assertErr(slim_type.receive(stream), SlimError.DESERIALIZATION_ERROR)
        self.assertOk(stream.deserializer.read_all(), b'\x00')

    def test_invalid_utf8(self) -> None:
        data = bytes.fromhex('0000000000000001') + b'\xff'
        self.assertErr(make_slim_type(str).from_bytes(data), SlimError.DESERIALIZATION_ERROR)

    def test_truncation_is_always_stream_closed(self) -> None:
        cases = [
            (U64, U64(100)),
            (str, 'hello'),
            (list[U8], [1, 2, 3]),
            (list[str], ['a', 'bc']),
            (tuple[str, ...], ('a', 'bc')),
        ]
        for type_, value in cases:
            slim_type = make_slim_type(type_)
            data = slim_type.to_bytes(value).unwrap()
            for cut in range(len(data)):
                self.assertErr(slim_type.from_bytes(data[:cut]), SlimError.STREAM_CLOSED)

    def test_truncated_sum_and_pair_collapse(self) -> None:
        cases = [
            (Optional[U64], U64(100)),
            (Result[str, SlimError], Ok('abc')),
            (tuple[U8, str], (1, 'abc')),
        ]
        for type_, value in cases:
            slim_type = make_slim_type(type_)
            data = slim_type.to_bytes(value).unwrap()
            # after the tag, or after the first component, any missing byte is reported by the sum or pair
            for cut in range(1, len(data)):
                self.assertErr(slim_type.from_bytes(data[:cut]), SlimError.DESERIALIZATION_ERROR)

    def test_zero_length(self) -> None:
        self.assertOk(make_slim_type(list[U8]).from_bytes(bytes(8)), [])
        self.assertOk(make_slim_type(tuple[str, ...]).from_bytes(bytes(8)), ())
        self.assertOk(make_slim_type(str).from_bytes(bytes(8)), '')

    def test_bool(self) -> None:
        slim_type = make_slim_type(bool)
        self.assertOk(slim_type.to_bytes(False), b'\x00')
        self.assertOk(slim_type.to_bytes(True), b'\x01')
        self.assertOk(slim_type.from_bytes(b'\x02'), True)

    def test_unit(self) -> None:
        slim_type = make_slim_type(Unit)
        self.assertOk(slim_type.to_bytes(()), b'')
        self.assertOk(slim_type.from_bytes(b''), ())
        self.assertErr(slim_type.to_bytes(None), SlimError.SERIALIZATION_ERROR)

    def test_sequence_of_zero_width_items(self) -> None:
        huge_count = bytes.fromhex('ffffffffffffffff')
        for type_ in [list[Unit], list[tuple[Unit, Unit]], tuple[Cow[Unit], ...]]:
            slim_type = make_slim_type(type_)
            self.assertErr(slim_type.from_bytes(huge_count), SlimError.DESERIALIZATION_ERROR)

        slim_type = make_slim_type(list[Unit])
        self.assertOk(slim_type.from_bytes(bytes.fromhex('0000000000000003')), [(), (), ()])
        count = MAX_ZERO_WIDTH_ITEMS.to_bytes(8, 'big')
        self.assertOk(slim_type.from_bytes(count), [()] * MAX_ZERO_WIDTH_ITEMS)
        self.assertErr(SequenceType(UnitType(), max_length=2).from_bytes(count), SlimError.DESERIALIZATION_ERROR)

        self.assertTrue(make_slim_type(tuple[Unit, Cow[Unit]]).is_zero_width())
        self.assertFalse(make_slim_type(tuple[Unit, U8]).is_zero_width())
        self.assertFalse(make_slim_type(list[Unit]).is_zero_width())

    def test_trailing_data(self) -> None:
        self.assertErr(make_slim_type(U8).from_bytes(b'\x01\x02'), SlimError.DESERIALIZATION_ERROR)

    def test_vec_of_results(self) -> None:
        slim_type = make_slim_type(list[Result[Unit, SlimError]])
        value = [Ok(()), Err(SlimError.STREAM_ERROR), Ok(())]
        data = slim_type.to_bytes(value).unwrap()
        self.assertEqual(data.hex(), '0000000000000003' '00' '0103' '00')
        self.assertOk(slim_type.from_bytes(data), value)
