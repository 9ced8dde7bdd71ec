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

from collections.abc import Iterable
from typing import Any, Callable, Final, Optional, TypeVar, get_args, get_origin

from typing_extensions import Self, override

from slim.conf import get_global_settings
from slim.serialization import Deserializer, Serializer, SlimError
from slim.serialization.compound_encoding.collection import decode_collection, encode_collection
from slim.types.slim_type import SlimType
from slim.types.utils import TypeToSlimTypeMap
from slim.utils.result import Result

V = TypeVar('V')

# bound on the decoded count of items that take no bytes, used when no max_length is set
MAX_ZERO_WIDTH_ITEMS: Final[int] = 1 << 16


class SequenceType(SlimType[list[V] | tuple[V, ...]]):
    """ Represents homogeneous variable size sequences, `list[V]` or `tuple[V, ...]`.

    Both `list` and `tuple` values are accepted when encoding, the decoded value has the annotated container type.
    """

    __slots__ = ('_item', '_builder', '_max_length')

    _item: SlimType[V]
    _builder: Callable[[Iterable[V]], Any]
    _max_length: Optional[int]

    def __init__(
        self,
        item: SlimType[V],
        *,
        builder: Callable[[Iterable[V]], Any] = list,
        max_length: Optional[int] = None,
    ) -> None:
        self._item = item
        self._builder = builder
        self._max_length = max_length

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: TypeToSlimTypeMap) -> Self:
        origin = get_origin(type_)
        args = get_args(type_)
        max_length = get_global_settings().MAX_LENGTH
        if origin is list and len(args) == 1:
            item_type, = args
            return cls(SlimType.from_type(item_type, type_map=type_map), builder=list, max_length=max_length)
        if origin is tuple and len(args) == 2 and args[1] is Ellipsis:
            item_type, _ellipsis = args
            return cls(SlimType.from_type(item_type, type_map=type_map), builder=tuple, max_length=max_length)
        raise TypeError('expected list[V] or tuple[V, ...]')

    @override
    def _check_value(self, value: list[V] | tuple[V, ...], /, *, deep: bool) -> None:
        if not isinstance(value, (list, tuple)):
            raise TypeError('expected list or tuple')
        if deep:
            for item in value:
                self._item._check_value(item, deep=True)

    @override
    def _serialize(self, serializer: Serializer, value: list[V] | tuple[V, ...], /) -> Result[None, SlimError]:
        return encode_collection(serializer, value, self._item._checked_serialize)

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> Result[list[V] | tuple[V, ...], SlimError]:
        max_length = self._max_length
        if max_length is None and self._item.is_zero_width():
            # the input never runs out for these items, so only the count can stop the loop
            max_length = MAX_ZERO_WIDTH_ITEMS
        return decode_collection(deserializer, self._item.deserialize, self._builder, max_length=max_length)

    def __repr__(self) -> str:
        return f'SequenceType({self._item!r}, builder={self._builder.__name__})'
