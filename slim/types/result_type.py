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
from slim.serialization.compound_encoding.result import decode_result, encode_result
from slim.types.slim_type import SlimType
from slim.types.utils import TypeToSlimTypeMap, is_result_union
from slim.utils.result import Err, Ok, Result

V = TypeVar('V')
X = TypeVar('X')


class ResultType(SlimType[Result[V, X]]):
    """ Represents a `Result[V, X]` value, that is either `Ok(V)` or `Err(X)`.

    The `Result` carried as a value is unrelated to the `Result` returned by every operation: decoding gives an
    `Ok(Err(x))` when the stream held a well-formed error value.
    """

    __slots__ = ('_ok', '_err')

    _ok: SlimType[V]
    _err: SlimType[X]

    def __init__(self, ok: SlimType[V], err: SlimType[X]) -> None:
        self._ok = ok
        self._err = err

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: TypeToSlimTypeMap) -> Self:
        if not is_result_union(type_):
            raise TypeError('expected Result[V, X]')
        args_by_origin = {get_origin(arg): get_args(arg) for arg in get_args(type_)}
        ok_args = args_by_origin[Ok]
        err_args = args_by_origin[Err]
        if len(ok_args) != 1 or len(err_args) != 1:
            raise TypeError('expected Result[V, X]')
        ok_type, = ok_args
        err_type, = err_args
        return cls(SlimType.from_type(ok_type, type_map=type_map), SlimType.from_type(err_type, type_map=type_map))

    @override
    def _check_value(self, value: Result[V, X], /, *, deep: bool) -> None:
        if isinstance(value, Ok):
            if deep:
                self._ok._check_value(value.unwrap(), deep=True)
        elif isinstance(value, Err):
            if deep:
                self._err._check_value(value.unwrap_err(), deep=True)
        else:
            raise TypeError('expected Ok or Err')

    @override
    def _serialize(self, serializer: Serializer, value: Result[V, X], /) -> Result[None, SlimError]:
        return encode_result(serializer, value, self._ok._checked_serialize, self._err._checked_serialize)

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> Result[Result[V, X], SlimError]:
        return decode_result(deserializer, self._ok.deserialize, self._err.deserialize)

    def __repr__(self) -> str:
        return f'ResultType({self._ok!r}, {self._err!r})'
