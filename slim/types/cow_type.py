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

from typing import Any, TypeVar, get_args, get_origin

from typing_extensions import Self, override

from slim.serialization import Deserializer, Serializer, SlimError
from slim.serialization.compound_encoding.cow import decode_cow, encode_cow
from slim.types.aliases import Cow
from slim.types.slim_type import SlimType
from slim.types.utils import TypeToSlimTypeMap
from slim.utils.result import Result

V = TypeVar('V')


class CowType(SlimType[V]):
    """ Represents `Cow[V]`, with the exact same encoding and values as `V`.
    """

    __slots__ = ('_inner',)

    _inner: SlimType[V]

    def __init__(self, inner: SlimType[V]) -> None:
        self._inner = inner

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: TypeToSlimTypeMap) -> Self:
        if get_origin(type_) is not Cow:
            raise TypeError('expected Cow[V]')
        inner_type, = get_args(type_)
        return cls(SlimType.from_type(inner_type, type_map=type_map))

    @override
    def is_zero_width(self) -> bool:
        return self._inner.is_zero_width()

    @override
    def _check_value(self, value: V, /, *, deep: bool) -> None:
        self._inner._check_value(value, deep=deep)

    @override
    def _serialize(self, serializer: Serializer, value: V, /) -> Result[None, SlimError]:
        return encode_cow(serializer, value, self._inner._checked_serialize)

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> Result[V, SlimError]:
        return decode_cow(deserializer, self._inner.deserialize)

    def __repr__(self) -> str:
        return f'CowType({self._inner!r})'
