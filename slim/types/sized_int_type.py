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

from typing import Any, ClassVar

from typing_extensions import Self, override

from slim.serialization import Deserializer, Serializer, SlimError
from slim.serialization.encoding.int import decode_int, encode_int
from slim.types.aliases import I8, I16, I32, I64, U8, U16, U32, U64
from slim.types.slim_type import SlimType
from slim.types.utils import TypeToSlimTypeMap
from slim.utils.result import Result


class _SizedIntType(SlimType[int]):
    """ Base class for classes that represent builtin `int` values with a fixed size and signedness.
    """

    # XXX: subclass must define these values:
    _alias: ClassVar[Any]
    _signed: ClassVar[bool]
    _byte_size: ClassVar[int]

    @classmethod
    def upper_bound_value(cls) -> int:
        if cls._signed:
            return 2**(cls._byte_size * 8 - 1) - 1
        else:
            return 2**(cls._byte_size * 8) - 1

    @classmethod
    def lower_bound_value(cls) -> int:
        if cls._signed:
            return -(2**(cls._byte_size * 8 - 1))
        else:
            return 0

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: TypeToSlimTypeMap) -> Self:
        if type_ is not cls._alias:
            raise TypeError(f'expected {cls._alias.__name__} type')
        return cls()

    @override
    def _check_value(self, value: int, /, *, deep: bool) -> None:
        # bool is a subclass of int, but True is not a number that should go in the wire
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError('expected integer')
        if value > self.upper_bound_value():
            raise ValueError('above upper bound')
        if value < self.lower_bound_value():
            raise ValueError('below lower bound')

    @override
    def _serialize(self, serializer: Serializer, value: int, /) -> Result[None, SlimError]:
        return encode_int(serializer, value, length=self._byte_size, signed=self._signed)

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> Result[int, SlimError]:
        return decode_int(deserializer, length=self._byte_size, signed=self._signed)


class Uint8Type(_SizedIntType):
    _alias = U8
    _signed = False
    _byte_size = 1


class Uint16Type(_SizedIntType):
    _alias = U16
    _signed = False
    _byte_size = 2


class Uint32Type(_SizedIntType):
    _alias = U32
    _signed = False
    _byte_size = 4  # 4-bytes -> 32-bits


class Uint64Type(_SizedIntType):
    _alias = U64
    _signed = False
    _byte_size = 8


class Int8Type(_SizedIntType):
    _alias = I8
    _signed = True
    _byte_size = 1


class Int16Type(_SizedIntType):
    _alias = I16
    _signed = True
    _byte_size = 2


class Int32Type(_SizedIntType):
    _alias = I32
    _signed = True
    _byte_size = 4  # 4-bytes -> 32-bits


class Int64Type(_SizedIntType):
    _alias = I64
    _signed = True
    _byte_size = 8
