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

from __future__ import annotations

import struct
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, TypeVar, overload

from typing_extensions import Self

from slim.utils.result import Ok, Result, propagate_result

from .exceptions import SlimError
from .types import Buffer

if TYPE_CHECKING:
    from .adapters import MaxBytesDeserializer
    from .bytes_deserializer import BytesDeserializer

T = TypeVar('T')


class Deserializer(ABC):
    """ A readable byte stream.

    Reads are exact: asking for `n` bytes either yields `n` bytes or fails. When the input ends before that the
    failure is `Err(SlimError.STREAM_CLOSED)`, any other failure of the underlying stream is
    `Err(SlimError.STREAM_ERROR)`.
    """

    def finalize(self) -> Result[None, SlimError]:
        """Check that all bytes were consumed, the deserializer cannot be used after this."""
        raise TypeError('this deserializer does not support finalization')

    @staticmethod
    def build_bytes_deserializer(data: Buffer) -> BytesDeserializer:
        from .bytes_deserializer import BytesDeserializer
        return BytesDeserializer(data)

    @abstractmethod
    def is_empty(self) -> bool:
        raise NotImplementedError

    @abstractmethod
    def read_byte(self) -> Result[int, SlimError]:
        """Read a single byte as unsigned int."""
        raise NotImplementedError

    @abstractmethod
    def read_bytes(self, n: int) -> Result[Buffer, SlimError]:
        """Read exactly n bytes."""
        raise NotImplementedError

    @abstractmethod
    def read_all(self) -> Result[Buffer, SlimError]:
        """Read all bytes until the reader is empty."""
        raise NotImplementedError

    @propagate_result
    def read_struct(self, format: str) -> Result[tuple[Any, ...], SlimError]:
        size = struct.calcsize(format)
        data = self.read_bytes(size).unwrap_or_propagate()
        return Ok(struct.unpack_from(format, data))

    def read_type(self, type_: type[T]) -> Result[T, SlimError]:
        """Read a value using the decoder for the given type annotation.

        The effect on the stream is consuming only the encoded bytes.

        >>> from slim.types import U16
        >>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('04d2ff'))
        >>> de.read_type(U16)
        Ok(1234)
        >>> bytes(de.read_all().unwrap())
        b'\\xff'
        """
        from slim.types import make_slim_type
        return make_slim_type(type_).deserialize(self)

    def with_max_bytes(self, max_bytes: int) -> MaxBytesDeserializer[Self]:
        """Helper method to wrap the current deserializer with MaxBytesDeserializer."""
        from .adapters import MaxBytesDeserializer
        return MaxBytesDeserializer(self, max_bytes)

    @overload
    def with_optional_max_bytes(self, max_bytes: None) -> Self:
        ...

    @overload
    def with_optional_max_bytes(self, max_bytes: int) -> MaxBytesDeserializer[Self]:
        ...

    def with_optional_max_bytes(self, max_bytes: int | None) -> Self | MaxBytesDeserializer[Self]:
        """Helper method to optionally wrap the current deserializer."""
        if max_bytes is None:
            return self
        return self.with_max_bytes(max_bytes)
