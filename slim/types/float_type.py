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
from slim.serialization.encoding.float import decode_float, encode_float
from slim.types.aliases import F32, F64
from slim.types.slim_type import SlimType
from slim.types.utils import TypeToSlimTypeMap
from slim.utils.result import Result


class _FloatType(SlimType[float]):
    """ Base class for IEEE 754 floats of a fixed size, both `int` and `float` values are accepted.
    """

    _aliases: ClassVar[tuple[Any, ...]]
    _byte_size: ClassVar[int]

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: TypeToSlimTypeMap) -> Self:
        if type_ not in cls._aliases:
            raise TypeError('expected float type')
        return cls()

    @override
    def _check_value(self, value: float, /, *, deep: bool) -> None:
        if not isinstance(value, (int, float)) or isinstance(value, bool):
            raise TypeError('expected float')

    @override
    def _serialize(self, serializer: Serializer, value: float, /) -> Result[None, SlimError]:
        return encode_float(serializer, value, length=self._byte_size)

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> Result[float, SlimError]:
        return decode_float(deserializer, length=self._byte_size)


class Float32Type(_FloatType):
    _aliases = (F32,)
    _byte_size = 4


class Float64Type(_FloatType):
    _aliases = (F64, float)
    _byte_size = 8
