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
from typing import Optional

from slim.serialization import SlimError
from slim.serialization.buffer_stream import BufferStream
from slim.serialization.encoding.int import decode_int, encode_int
from slim.serialization.encoding.utf8 import decode_utf8, encode_utf8
from slim.serialization.stream import FileStream, StreamDeserializer, StreamSerializer
from tests import unittest


class _BrokenFile(io.RawIOBase):
    """Raises on every read and write."""

    def readable(self) -> bool:
        return True

    def writable(self) -> bool:
        return True

    def readinto(self, b) -> int:
        raise ConnectionResetError('connection reset by peer')

    def write(self, b) -> int:
        raise BrokenPipeError('broken pipe')


class _TrickleFile(io.RawIOBase):
    """Hands out at most `step` bytes per read and accepts at most `step` bytes per write."""

    def __init__(self, data: bytes = b'', step: int = 1) -> None:
        self._data = data
        self._pos = 0
        self._step = step
        self.written = bytearray()
        self.read_sizes: list[int] = []

    def readable(self) -> bool:
        return True

    def writable(self) -> bool:
        return True

    def read(self, size: int = -1) -> Optional[bytes]:
        self.read_sizes.append(size)
        chunk = self._data[self._pos:self._pos + min(size, self._step)]
        self._pos += len(chunk)
        return chunk

    def write(self, b) -> int:
        chunk = bytes(b[:self._step])
        self.written.extend(chunk)
        return len(chunk)


class _StuckFile(io.RawIOBase):
    """Non-blocking file with nothing to give and no room to take."""

    def readable(self) -> bool:
        return True

    def writable(self) -> bool:
        return True

    def read(self, size: int = -1) -> Optional[bytes]:
        return None

    def write(self, b) -> Optional[int]:
        return None


class BufferStreamTestCase(unittest.TestCase):
    def test_read_what_was_written(self) -> None:
        stream = BufferStream()
        self.assertOk(encode_utf8(stream.serializer, 'hello'))
        self.assertOk(encode_int(stream.serializer, 7, length=2, signed=False))
        self.assertOk(decode_utf8(stream.deserializer), 'hello')
        self.assertOk(decode_int(stream.deserializer, length=2, signed=False), 7)
        self.assertTrue(stream.deserializer.is_empty())

    def test_initial_data(self) -> None:
        stream = BufferStream(bytes.fromhex('0000000000000064'))
        self.assertOk(decode_int(stream.deserializer, length=8, signed=False), 100)

    def test_truncated(self) -> None:
        stream = BufferStream(bytes.fromhex('00000000'))
        self.assertErr(decode_utf8(stream.deserializer), SlimError.STREAM_CLOSED)

    def test_finalize_with_leftover(self) -> None:
        stream = BufferStream(b'\x01')
        self.assertErr(stream.deserializer.finalize(), SlimError.DESERIALIZATION_ERROR)
        self.assertOk(stream.deserializer.read_byte(), 1)
        self.assertOk(stream.deserializer.finalize())

    def test_write_invalid_byte(self) -> None:
        stream = BufferStream()
        self.assertErr(stream.serializer.write_byte(256), SlimError.SERIALIZATION_ERROR)
        self.assertEqual(stream.getvalue(), b'')


class FileStreamTestCase(unittest.TestCase):
    def test_bytes_io(self) -> None:
        file = io.BytesIO()
        stream = FileStream(file)
        self.assertOk(encode_utf8(stream.serializer, 'héllo'))
        self.assertOk(stream.flush())
        self.assertEqual(stream.serializer.cur_pos(), 8 + len('héllo'.encode('utf-8')))
        file.seek(0)
        self.assertOk(decode_utf8(stream.deserializer), 'héllo')
        self.assertTrue(stream.deserializer.is_empty())
        self.assertOk(stream.deserializer.finalize())

    def test_eof_is_stream_closed(self) -> None:
        de = StreamDeserializer(io.BytesIO(bytes.fromhex('00000000')))
        self.assertErr(decode_utf8(de), SlimError.STREAM_CLOSED)

    def test_is_empty_does_not_lose_data(self) -> None:
        de = StreamDeserializer(io.BytesIO(bytes.fromhex('0102')))
        self.assertFalse(de.is_empty())
        self.assertFalse(de.is_empty())
        self.assertOk(decode_int(de, length=2, signed=False), 0x0102)
        self.assertTrue(de.is_empty())

    def test_read_all(self) -> None:
        de = StreamDeserializer(io.BytesIO(b'abcdef'), read_chunk_size=2)
        self.assertOk(de.read_byte(), ord('a'))
        self.assertFalse(de.is_empty())
        self.assertOk(de.read_all(), b'bcdef')
        self.assertTrue(de.is_empty())

    def test_partial_reads_and_writes(self) -> None:
        writer = _TrickleFile(step=3)
        self.assertOk(encode_utf8(StreamSerializer(writer), 'hello world'))
        reader = _TrickleFile(bytes(writer.written), step=3)
        self.assertOk(decode_utf8(StreamDeserializer(reader)), 'hello world')

    def test_reads_are_chunked(self) -> None:
        # the prefix announces 2**40 bytes but the peer only has 5
        data = bytes.fromhex('0000010000000000') + b'hello'
        reader = _TrickleFile(data, step=1024)
        self.assertErr(decode_utf8(StreamDeserializer(reader, read_chunk_size=16)), SlimError.STREAM_CLOSED)
        self.assertLessEqual(max(reader.read_sizes), 16)

    def test_chunk_size_from_settings(self) -> None:
        from slim.conf import get_global_settings
        reader = _TrickleFile(b'x' * 100, step=1024)
        de = StreamDeserializer(reader)
        self.assertOk(de.read_bytes(100), b'x' * 100)
        self.assertEqual(reader.read_sizes, [min(100, get_global_settings().READ_CHUNK_SIZE)])

    def test_invalid_chunk_size(self) -> None:
        with self.assertRaises(ValueError):
            StreamDeserializer(io.BytesIO(), read_chunk_size=-1)

    def test_negative_read(self) -> None:
        with self.assertRaises(ValueError):
            StreamDeserializer(io.BytesIO(b'abc')).read_bytes(-1)

    def test_read_error_is_stream_error(self) -> None:
        de = StreamDeserializer(_BrokenFile())
        self.assertErr(decode_utf8(de), SlimError.STREAM_ERROR)
        self.assertTrue(de.is_empty())

    def test_finalize_reports_read_error(self) -> None:
        self.assertErr(StreamDeserializer(_BrokenFile()).finalize(), SlimError.STREAM_ERROR)
        self.assertErr(StreamDeserializer(_StuckFile()).finalize(), SlimError.STREAM_ERROR)
        self.assertOk(StreamDeserializer(io.BytesIO(b'')).finalize())

    def test_write_error_is_stream_error(self) -> None:
        se = StreamSerializer(_BrokenFile())
        result = encode_utf8(se, 'abc')
        self.assertErr(result, SlimError.STREAM_ERROR)
        self.assertEqual(se.cur_pos(), 0)

    def test_closed_file(self) -> None:
        file = io.BytesIO(b'abc')
        file.close()
        self.assertErr(StreamDeserializer(file).read_byte(), SlimError.STREAM_ERROR)
        self.assertErr(StreamSerializer(file).write_byte(1), SlimError.STREAM_ERROR)
        self.assertErr(StreamSerializer(file).flush(), SlimError.STREAM_ERROR)

    def test_would_block(self) -> None:
        self.assertErr(StreamDeserializer(_StuckFile()).read_byte(), SlimError.STREAM_ERROR)
        self.assertErr(StreamSerializer(_StuckFile()).write_byte(1), SlimError.STREAM_ERROR)

    def test_zero_byte_write(self) -> None:
        writer = _TrickleFile(step=0)
        self.assertErr(StreamSerializer(writer).write_bytes(b'abc'), SlimError.STREAM_ERROR)


class MaxBytesTestCase(unittest.TestCase):
    def test_serializer_limit(self) -> None:
        se = self.new_serializer().with_max_bytes(10)
        self.assertOk(encode_utf8(se, 'ab'))
        self.assertErr(se.write_byte(0), SlimError.SERIALIZATION_ERROR)
        self.assertEqual(bytes(se.finalize()).hex(), '00000000000000026162')

    def test_serializer_write_too_big_is_not_forwarded(self) -> None:
        se = self.new_serializer().with_max_bytes(4)
        self.assertErr(se.write_bytes(b'abcde'), SlimError.SERIALIZATION_ERROR)
        self.assertEqual(se.cur_pos(), 0)

    def test_deserializer_limit(self) -> None:
        data = bytes.fromhex('0000000000000003') + b'foo'
        self.assertOk(decode_utf8(self.new_deserializer(data).with_max_bytes(11)), 'foo')
        self.assertErr(decode_utf8(self.new_deserializer(data).with_max_bytes(10)), SlimError.DESERIALIZATION_ERROR)

    def test_deserializer_checks_before_reading(self) -> None:
        file = io.BytesIO(bytes.fromhex('00000000ffffffff'))
        de = StreamDeserializer(file).with_max_bytes(1024)
        self.assertErr(decode_utf8(de), SlimError.DESERIALIZATION_ERROR)
        self.assertEqual(file.tell(), 8)

    def test_optional_limit(self) -> None:
        de = self.new_deserializer('01')
        self.assertIs(de.with_optional_max_bytes(None), de)
        self.assertOk(de.with_optional_max_bytes(1).read_byte(), 1)

    def test_limit_is_cumulative(self) -> None:
        de = self.new_deserializer('010203').with_max_bytes(2)
        self.assertOk(de.read_byte(), 1)
        self.assertOk(de.read_byte(), 2)
        self.assertErr(de.read_byte(), SlimError.DESERIALIZATION_ERROR)
        self.assertFalse(hasattr(de, '__enter__'))
