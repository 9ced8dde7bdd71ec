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

from typing import Any, Optional, TypeVar

from typing_extensions import Self, override

from slim.serialization import Deserializer, Serializer, SlimError
from slim.serialization.compound_encoding.optional import decode_optional, encode_optional
from slim.types.slim_type import SlimType
from slim.types.utils import TypeToSlimTypeMap, get_union_without_none, is_union
from slim.utils.result import Result

V = TypeVar('V')


class OptionalType(SlimType[Optional[V]]):
    """ Represents a value that is either `V` or `None`.

    Python flattens `Optional[Optional[V]]` into `Optional[V]`, so nested optionals can't be annotated.
    """

    __slots__ = ('_value',)

    _value: SlimType[V]

    def __init__(self, slim_type: SlimType[V]) -> None:
        self._value = slim_type

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: TypeToSlimTypeMap) -> Self:
        if not is_union(type_):
            raise TypeError('expected type union')
        not_none_type = get_union_without_none(type_)
        return cls(SlimType.from_type(not_none_type, type_map=type_map))

    @override
    def _check_value(self, value: Optional[V], /, *, deep: bool) -> None:
        if value is None:
            return
        if deep:
            self._value._check_value(value, deep=True)

    @override
    def _serialize(self, serializer: Serializer, value: Optional[V], /) -> Result[None, SlimError]:
        return encode_optional(serializer, value, self._value._checked_serialize)

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> Result[Optional[V], SlimError]:
        return decode_optional(deserializer, self._value.deserialize)

    def __repr__(self) -> str:
        return f'OptionalType({self._value!r})'
