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
from typing import Any, get_args, get_origin

from typing_extensions import override

from slim.serialization import Deserializer, Serializer, SlimError
from slim.serialization.compound_encoding.tuple import decode_tuple, encode_tuple
from slim.types.slim_type import SlimType
from slim.types.utils import TypeToSlimTypeMap
from slim.utils.result import Result


# XXX: we can't usefully describe the tuple type
class TupleType(SlimType[tuple]):
    """ Represents fixed size heterogeneous tuples, `tuple[A, B, ...]`, the pair `tuple[A, B]` being the common case.

    The `tuple` annotation has two other forms which are handled by other classes: `tuple[()]` is the unit type and
    `tuple[V, ...]` is a sequence.
    """

    __slots__ = ('_args',)

    _args: tuple[SlimType, ...]

    def __init__(self, args: Iterable[SlimType]) -> None:
        self._args = tuple(args)
        for arg in self._args:
            assert isinstance(arg, SlimType)

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: TypeToSlimTypeMap) -> SlimType[Any]:
        from slim.types.sequence_type import SequenceType
        from slim.types.unit_type import UnitType
        if get_origin(type_) is not tuple:
            raise TypeError('expected tuple[<args...>]')
        args = get_args(type_)
        if not args:
            return UnitType._from_type(type_, type_map=type_map)
        if Ellipsis in args:
            return SequenceType._from_type(type_, type_map=type_map)
        return cls(SlimType.from_type(arg, type_map=type_map) for arg in args)

    @override
    def is_zero_width(self) -> bool:
        return all(arg.is_zero_width() for arg in self._args)

    @override
    def _check_value(self, value: tuple, /, *, deep: bool) -> None:
        if not isinstance(value, tuple):
            raise TypeError('expected tuple')
        if len(value) != len(self._args):
            raise TypeError('wrong tuple size')
        if deep:
            for i, arg_slim_type in zip(value, self._args):
                arg_slim_type._check_value(i, deep=True)

    @override
    def _serialize(self, serializer: Serializer, value: tuple, /) -> Result[None, SlimError]:
        return encode_tuple(serializer, value, tuple(i._checked_serialize for i in self._args))

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> Result[tuple, SlimError]:
        return decode_tuple(deserializer, tuple(i.deserialize for i in self._args))

    def __repr__(self) -> str:
        return f'TupleType({list(self._args)!r})'
