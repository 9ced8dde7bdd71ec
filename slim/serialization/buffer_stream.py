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

r"""
An in-memory duplex stream.

Writes are appended to a shared buffer and reads consume it from the front, with a read position that is independent
from the write position.

>>> from slim.serialization.encoding.int import decode_int, encode_int
>>> stream = BufferStream()
>>> encode_int(stream.serializer, 100, length=8, signed=False)
Ok(None)
>>> stream.getvalue().hex()
'0000000000000064'
>>> decode_int(stream.deserializer, length=8, signed=False)
Ok(100)
>>> decode_int(stream.deserializer, length=8, signed=False)
Err(<SlimError.STREAM_CLOSED: 'stream_closed'>)
>>> stream.rewind()
>>> decode_int(stream.deserializer, length=8, signed=False)
Ok(100)
"""

from typing_extensions import override

from slim.utils.result import Err, Ok, Result

from .deserializer import Deserializer
from .duplex import DuplexStream
from .exceptions import SlimError
from .serializer import Serializer
from .types import Buffer


class _BufferWriter(Serializer):
    def __init__(self, buffer: bytearray) -> None:
        self._buffer = buffer

    @override
    def cur_pos(self) -> int:
        return len(self._buffer)

    @override
    def write_byte(self, data: int) -> Result[None, SlimError]:
        if not 0 <= data <= 0xff:
            return Err(SlimError.SERIALIZATION_ERROR)
        self._buffer.append(data)
        return Ok(None)

    @override
    def write_bytes(self, data: Buffer) -> Result[None, SlimError]:
        self._buffer.extend(data)
        return Ok(None)


class _BufferReader(Deserializer):
    def __init__(self, buffer: bytearray) -> None:
        self._buffer = buffer
        self._pos = 0

    @override
    def finalize(self) -> Result[None, SlimError]:
        if not self.is_empty():
            return Err(SlimError.DESERIALIZATION_ERROR)
        return Ok(None)

    @override
    def is_empty(self) -> bool:
        return self._pos >= len(self._buffer)

    @override
    def read_byte(self) -> Result[int, SlimError]:
        if self.is_empty():
            return Err(SlimError.STREAM_CLOSED)
        b = self._buffer[self._pos]
        self._pos += 1
        return Ok(b)

    @override
    def read_bytes(self, n: int) -> Result[bytes, SlimError]:
        if n < 0:
            raise ValueError('value cannot be negative')
        if len(self._buffer) - self._pos < n:
            return Err(SlimError.STREAM_CLOSED)
        # XXX: copy, the buffer may still grow or be rewound
        b = bytes(self._buffer[self._pos:self._pos + n])
        self._pos += n
        return Ok(b)

    @override
    def read_all(self) -> Result[bytes, SlimError]:
        b = bytes(self._buffer[self._pos:])
        self._pos = len(self._buffer)
        return Ok(b)


class BufferStream(DuplexStream):
    """ Duplex stream over a `bytearray`, like a socket connected to itself.
    """

    def __init__(self, data: Buffer = b'') -> None:
        self._buffer = bytearray(data)
        self._writer = _BufferWriter(self._buffer)
        self._reader = _BufferReader(self._buffer)

    @property
    @override
    def serializer(self) -> Serializer:
        return self._writer

    @property
    @override
    def deserializer(self) -> Deserializer:
        return self._reader

    def getvalue(self) -> bytes:
        """Everything written so far, including what was already read."""
        return bytes(self._buffer)

    def rewind(self) -> None:
        """Move the read position back to the start of the buffer."""
        self._reader._pos = 0
