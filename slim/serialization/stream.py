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

"""
Adapters from binary file-like objects to the `Serializer` and `Deserializer` interfaces.

Anything with a `read(n)` and/or `write(data)` method that follows the `io` semantics can be used: files opened in
binary mode, pipes, `socket.makefile('rwb')`, `io.BytesIO`. The adapters never open, flush implicitly, or close the
wrapped object, its lifecycle belongs to the caller. No buffering is added either, so unbuffered raw streams should
be wrapped in `io.BufferedReader`/`io.BufferedWriter` by the caller.

Reads of `n` bytes are issued in chunks of at most `read_chunk_size` bytes, so a length prefix announcing more bytes
than the peer actually sends will not allocate the announced size upfront.
"""

from typing import IO

from structlog import get_logger
from typing_extensions import override

from slim.utils.result import Err, Ok, Result, propagate_result

from .deserializer import Deserializer
from .duplex import DuplexStream
from .exceptions import SlimError
from .serializer import Serializer
from .types import Buffer

logger = get_logger()


def _default_chunk_size() -> int:
    from slim.conf.get_settings import get_global_settings
    return get_global_settings().READ_CHUNK_SIZE


class StreamSerializer(Serializer):
    """ Serializer that writes to a binary file-like object.

    Every failure to write, including a write that makes no progress, is reported as `SlimError.STREAM_ERROR`.
    """

    def __init__(self, stream: IO[bytes]) -> None:
        self._stream = stream
        self._pos = 0
        self.log = logger.new(stream=repr(stream))

    @override
    def cur_pos(self) -> int:
        return self._pos

    @override
    def write_byte(self, data: int) -> Result[None, SlimError]:
        if not 0 <= data <= 0xff:
            return Err(SlimError.SERIALIZATION_ERROR)
        return self.write_bytes(bytes((data,)))

    @override
    def write_bytes(self, data: Buffer) -> Result[None, SlimError]:
        view = memoryview(data).cast('B')
        offset = 0
        while offset < len(view):
            try:
                written = self._stream.write(view[offset:])
            except (OSError, ValueError) as e:
                self.log.debug('stream write failed', pos=self._pos + offset, error=repr(e))
                return Err(SlimError.STREAM_ERROR, cause=e)
            if written is None:
                # raw non-blocking streams return None when they would block
                self.log.debug('stream write would block', pos=self._pos + offset)
                return Err(SlimError.STREAM_ERROR)
            if written == 0:
                self.log.debug('stream write made no progress', pos=self._pos + offset)
                return Err(SlimError.STREAM_ERROR)
            offset += written
        self._pos += offset
        return Ok(None)

    def flush(self) -> Result[None, SlimError]:
        """Flush the wrapped object, if it supports flushing."""
        flush = getattr(self._stream, 'flush', None)
        if flush is None:
            return Ok(None)
        try:
            flush()
        except (OSError, ValueError) as e:
            self.log.debug('stream flush failed', error=repr(e))
            return Err(SlimError.STREAM_ERROR, cause=e)
        return Ok(None)


class StreamDeserializer(Deserializer):
    """ Deserializer that reads from a binary file-like object.

    An empty read (end-of-file) before the requested amount was received is `SlimError.STREAM_CLOSED`. Errors raised
    by the object, or a non-blocking read with no data available, are `SlimError.STREAM_ERROR`.
    """

    def __init__(self, stream: IO[bytes], *, read_chunk_size: int | None = None) -> None:
        self._stream = stream
        self._read_chunk_size = read_chunk_size or _default_chunk_size()
        if self._read_chunk_size <= 0:
            raise ValueError('read_chunk_size must be positive')
        # single byte of lookahead, only filled by is_empty()
        self._lookahead = b''
        self.log = logger.new(stream=repr(stream))

    def _read_chunk(self, n: int) -> Result[bytes, SlimError]:
        try:
            chunk = self._stream.read(n)
        except (OSError, ValueError) as e:
            self.log.debug('stream read failed', error=repr(e))
            return Err(SlimError.STREAM_ERROR, cause=e)
        if chunk is None:
            self.log.debug('stream read would block')
            return Err(SlimError.STREAM_ERROR)
        return Ok(chunk)

    @propagate_result
    def _fill_lookahead(self) -> Result[bytes, SlimError]:
        if not self._lookahead:
            self._lookahead = self._read_chunk(1).unwrap_or_propagate()
        return Ok(self._lookahead)

    @override
    @propagate_result
    def finalize(self) -> Result[None, SlimError]:
        if self._fill_lookahead().unwrap_or_propagate():
            return Err(SlimError.DESERIALIZATION_ERROR)
        return Ok(None)

    @override
    def is_empty(self) -> bool:
        """ Whether the stream has no more bytes, a stream that fails to read is considered empty.

        Use `finalize` to tell a failed stream apart from one that ended cleanly.
        """
        return not self._fill_lookahead().unwrap_or(b'')

    @override
    def read_byte(self) -> Result[int, SlimError]:
        return self.read_bytes(1).map(lambda data: data[0])

    @override
    @propagate_result
    def read_bytes(self, n: int) -> Result[bytes, SlimError]:
        if n < 0:
            raise ValueError('value cannot be negative')
        parts: list[bytes] = []
        remaining = n
        if self._lookahead and remaining:
            parts.append(self._lookahead)
            remaining -= len(self._lookahead)
            self._lookahead = b''
        while remaining > 0:
            chunk = self._read_chunk(min(remaining, self._read_chunk_size)).unwrap_or_propagate()
            if not chunk:
                self.log.debug('stream closed', expected=n, received=n - remaining)
                return Err(SlimError.STREAM_CLOSED)
            parts.append(chunk)
            remaining -= len(chunk)
        return Ok(b''.join(parts))

    @override
    @propagate_result
    def read_all(self) -> Result[bytes, SlimError]:
        parts: list[bytes] = [self._lookahead]
        self._lookahead = b''
        while chunk := self._read_chunk(self._read_chunk_size).unwrap_or_propagate():
            parts.append(chunk)
        return Ok(b''.join(parts))


class FileStream(DuplexStream):
    """ Duplex stream over one file-like object that supports both reading and writing, like a socket file.

    >>> import io
    >>> from slim.serialization.encoding.utf8 import decode_utf8, encode_utf8
    >>> stream = FileStream(io.BytesIO())
    >>> encode_utf8(stream.serializer, 'foo')
    Ok(None)
    >>> _ = stream.file.seek(0)
    >>> decode_utf8(stream.deserializer)
    Ok('foo')
    """

    def __init__(self, file: IO[bytes], *, read_chunk_size: int | None = None) -> None:
        self.file = file
        self._serializer = StreamSerializer(file)
        self._deserializer = StreamDeserializer(file, read_chunk_size=read_chunk_size)

    @property
    @override
    def serializer(self) -> StreamSerializer:
        return self._serializer

    @property
    @override
    def deserializer(self) -> StreamDeserializer:
        return self._deserializer

    def flush(self) -> Result[None, SlimError]:
        return self._serializer.flush()
