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

from collections.abc import Hashable, Mapping
from types import NoneType, UnionType
from typing import TYPE_CHECKING, Any, Optional, TypeAlias, Union, get_args, get_origin

from slim.utils.result import Err, Ok, Result

if TYPE_CHECKING:
    from slim.types.slim_type import SlimType

TypeToSlimTypeMap: TypeAlias = Mapping[Any, type['SlimType']]


def is_union(type_: Any) -> bool:
    """ Whether the given annotation is an union, written either as `A | B` or as `Union[A, B]`.

    >>> is_union(int | str)
    True
    >>> is_union(Union[int, str])
    True
    >>> is_union(Optional[int])
    True
    >>> is_union(int)
    False
    """
    origin = get_origin(type_)
    return origin is UnionType or origin is Union


def is_result_union(type_: Any) -> bool:
    """ Whether the given annotation is a parametrized `Result[T, E]`, that is `Ok[T] | Err[E]`.

    >>> is_result_union(Result[int, str])
    True
    >>> is_result_union(Ok[int] | Err[str])
    True
    >>> is_result_union(Ok[int] | None)
    False
    """
    if not is_union(type_):
        return False
    origins = [get_origin(arg) for arg in get_args(type_)]
    return len(origins) == 2 and Ok in origins and Err in origins


def get_usable_origin_type(type_: Any, /, *, type_map: TypeToSlimTypeMap) -> Any:
    """ The key under which the SlimType class for the given annotation is found in `type_map`.

    Concrete types and aliases are their own key, generic aliases use their origin (`list[int]` uses `list`), unions
    with `None` use `Optional`, and `Ok[T] | Err[E]` uses `Result`.
    """
    if isinstance(type_, Hashable) and type_ in type_map:
        return type_
    if is_union(type_):
        if NoneType in get_args(type_):
            return Optional
        if is_result_union(type_):
            return Result
        raise TypeError(f'union type not supported: {type_}')
    origin = get_origin(type_)
    if origin is None or origin not in type_map:
        raise TypeError(f'type not supported: {type_}')
    return origin


def get_union_without_none(type_: Any) -> Any:
    """ Remove `None` from an union, collapsing to the only remaining type when there is just one.

    >>> get_union_without_none(int | None)
    <class 'int'>
    >>> get_union_without_none(Optional[str])
    <class 'str'>
    """
    args = tuple(arg for arg in get_args(type_) if arg is not NoneType)
    if not args:
        raise TypeError('union of only None is not supported')
    if len(args) == 1:
        return args[0]
    return Union[args]
