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

from slim.utils.result import Err, Result

from .exceptions import SlimError
from .types import Buffer

if TYPE_CHECKING:
    from .adapters import MaxBytesSerializer
    from .bytes_serializer import BytesSerializer

T = TypeVar('T')


class Serializer(ABC):
    """ A writable byte stream.

    Every write returns a `Result`, a failure to write is reported as `Err(SlimError.STREAM_ERROR)` and leaves the
    stream in an undefined state.
    """

    def finalize(self) -> Buffer:
        """Get the resulting byte sequence, the serializer cannot be reused after this."""
        raise TypeError('this serializer does not support finalization')

    @abstractmethod
    def cur_pos(self) -> int:
        raise NotImplementedError

    @abstractmethod
    def write_byte(self, data: int) -> Result[None, SlimError]:
        """Write a single byte."""
        raise NotImplementedError

    @abstractmethod
    def write_bytes(self, data: Buffer) -> Result[None, SlimError]:
        """Write all of the given bytes."""
        raise NotImplementedError

    def write_struct(self, data: tuple[Any, ...], format: str) -> Result[None, SlimError]:
        try:
            data_bytes = struct.pack(format, *data)
        except (struct.error, OverflowError):
            return Err(SlimError.SERIALIZATION_ERROR)
        return self.write_bytes(data_bytes)

    def write_type(self, type_: type[T], value: T) -> Result[None, SlimError]:
        """Write a value using the encoder for the given type annotation.

        >>> from slim.types import U16
        >>> se = Serializer.build_bytes_serializer()
        >>> se.write_type(U16, 1234)
        Ok(None)
        >>> bytes(se.finalize()).hex()
        '04d2'
        """
        from slim.types import make_slim_type
        return make_slim_type(type_).serialize(self, value)

    def with_max_bytes(self, max_bytes: int) -> MaxBytesSerializer[Self]:
        """Helper method to wrap the current serializer with MaxBytesSerializer."""
        from .adapters import MaxBytesSerializer
        return MaxBytesSerializer(self, max_bytes)

    @overload
    def with_optional_max_bytes(self, max_bytes: None) -> Self:
        ...

    @overload
    def with_optional_max_bytes(self, max_bytes: int) -> MaxBytesSerializer[Self]:
        ...

    def with_optional_max_bytes(self, max_bytes: int | None) -> Self | MaxBytesSerializer[Self]:
        """Helper method to optionally wrap the current serializer."""
        if max_bytes is None:
            return self
        return self.with_max_bytes(max_bytes)

    @staticmethod
    def build_bytes_serializer() -> BytesSerializer:
        from .bytes_serializer import BytesSerializer
        return BytesSerializer()
