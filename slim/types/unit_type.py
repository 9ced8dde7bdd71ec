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

from typing import Any, get_args, get_origin

from typing_extensions import Self, override

from slim.serialization import Deserializer, Serializer, SlimError
from slim.serialization.encoding.unit import UNIT, decode_unit, encode_unit
from slim.types.slim_type import SlimType
from slim.types.utils import TypeToSlimTypeMap
from slim.utils.result import Result


class UnitType(SlimType[tuple[()]]):
    """ Represents the unit value `()`, which is encoded with zero bytes.
    """

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: TypeToSlimTypeMap) -> Self:
        if get_origin(type_) is not tuple or get_args(type_) != ():
            raise TypeError('expected tuple[()] type')
        return cls()

    @override
    def is_zero_width(self) -> bool:
        return True

    @override
    def _check_value(self, value: tuple[()], /, *, deep: bool) -> None:
        if value != UNIT:
            raise TypeError('expected ()')

    @override
    def _serialize(self, serializer: Serializer, value: tuple[()], /) -> Result[None, SlimError]:
        return encode_unit(serializer, value)

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> Result[tuple[()], SlimError]:
        return decode_unit(deserializer)
