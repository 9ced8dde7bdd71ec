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
Adapters that put a ceiling on how many bytes can go through a serializer or deserializer.

They are the way to bound what a single value may cost when the peer is not trusted: every length or count prefix
is peer-controlled, wrapping the stream caps the total regardless of what the prefixes announce.

>>> from slim.serialization.encoding.utf8 import decode_utf8
>>> data = bytes.fromhex('0000000000000003') + b'foo'
>>> decode_utf8(Deserializer.build_bytes_deserializer(data).with_max_bytes(11))
Ok('foo')
>>> decode_utf8(Deserializer.build_bytes_deserializer(data).with_max_bytes(10))
Err(<SlimError.DESERIALIZATION_ERROR: 'deserialization_error'>)
"""

from typing import TypeVar

from typing_extensions import override

from slim.serialization.deserializer import Deserializer
from slim.serialization.exceptions import SlimError
from slim.serialization.serializer import Serializer
from slim.utils.result import Err, Result

from ..types import Buffer
from .generic_adapter import GenericDeserializerAdapter, GenericSerializerAdapter

S = TypeVar('S', bound=Serializer)
D = TypeVar('D', bound=Deserializer)


class MaxBytesSerializer(GenericSerializerAdapter[S]):
    """ Fails with `SERIALIZATION_ERROR` once more than `max_bytes` would be written.

    After the limit is exceeded the adapted serializer cannot be used anymore. Nothing of the write that would exceed
    the limit reaches the inner serializer, but what was written before does, so the output as a whole must be
    considered a failed serialization.
    """

    def __init__(self, serializer: S, max_bytes: int) -> None:
        super().__init__(serializer)
        self._bytes_left = max_bytes

    def _exceeds(self, write_size: int) -> bool:
        self._bytes_left -= write_size
        return self._bytes_left < 0

    @override
    def write_byte(self, data: int) -> Result[None, SlimError]:
        if self._exceeds(1):
            return Err(SlimError.SERIALIZATION_ERROR)
        return super().write_byte(data)

    @override
    def write_bytes(self, data: Buffer) -> Result[None, SlimError]:
        data_view = memoryview(data)
        if self._exceeds(data_view.nbytes):
            return Err(SlimError.SERIALIZATION_ERROR)
        return super().write_bytes(data_view)


class MaxBytesDeserializer(GenericDeserializerAdapter[D]):
    """ Fails with `DESERIALIZATION_ERROR` once more than `max_bytes` would be read.

    The check happens before the inner deserializer is asked for anything, so an oversized read never reaches the
    underlying stream.
    """

    def __init__(self, deserializer: D, max_bytes: int) -> None:
        super().__init__(deserializer)
        self._bytes_left = max_bytes

    def _exceeds(self, read_size: int) -> bool:
        self._bytes_left -= read_size
        return self._bytes_left < 0

    @override
    def read_byte(self) -> Result[int, SlimError]:
        if self._exceeds(1):
            return Err(SlimError.DESERIALIZATION_ERROR)
        return super().read_byte()

    @override
    def read_bytes(self, n: int) -> Result[Buffer, SlimError]:
        if self._exceeds(n):
            return Err(SlimError.DESERIALIZATION_ERROR)
        return super().read_bytes(n)

    @override
    def read_all(self) -> Result[Buffer, SlimError]:
        result = self.inner.read_all()
        if result.is_ok() and self._exceeds(len(result.unwrap())):
            return Err(SlimError.DESERIALIZATION_ERROR)
        return result
