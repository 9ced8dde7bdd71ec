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

from typing import Optional, Union

import pytest

from slim.serialization import SlimError
from slim.types import (
    F32,
    F64,
    I8,
    I64,
    U8,
    U16,
    U32,
    U64,
    BoolType,
    Cow,
    CowType,
    Float32Type,
    Float64Type,
    Int8Type,
    Int64Type,
    OptionalType,
    ResultType,
    SequenceType,
    SlimErrorType,
    SlimType,
    StrType,
    Transportable,
    TupleType,
    Uint8Type,
    Uint16Type,
    Uint32Type,
    Uint64Type,
    Unit,
    UnitType,
    is_transportable,
    make_slim_type,
)
from slim.utils.result import Result


@pytest.mark.parametrize('type_, slim_type_class', [
    (bool, BoolType),
    (str, StrType),
    (float, Float64Type),
    (F64, Float64Type),
    (F32, Float32Type),
    (U8, Uint8Type),
    (U16, Uint16Type),
    (U32, Uint32Type),
    (U64, Uint64Type),
    (I8, Int8Type),
    (I64, Int64Type),
    (Unit, UnitType),
    (tuple[()], UnitType),
    (SlimError, SlimErrorType),
    (list[U8], SequenceType),
    (tuple[str, ...], SequenceType),
    (tuple[str, U8], TupleType),
    (tuple[bool, bool, bool], TupleType),
    (Optional[str], OptionalType),
    (str | None, OptionalType),
    (Union[None, U8], OptionalType),
    (Result[str, SlimError], ResultType),
    (Cow[str], CowType),
])
def test_make_slim_type(type_, slim_type_class) -> None:
    slim_type = make_slim_type(type_)
    assert type(slim_type) is slim_type_class
    assert isinstance(slim_type, Transportable)
    assert is_transportable(type_)


@pytest.mark.parametrize('type_', [
    int,
    bytes,
    dict[str, U8],
    list,
    tuple,
    list[int],
    tuple[str, int],
    Optional[int],
    str | U8,
    Result[str, int],
    Cow[int],
    None,
    object,
])
def test_unsupported_types(type_) -> None:
    with pytest.raises(TypeError):
        make_slim_type(type_)
    assert not is_transportable(type_)


def test_nested_types() -> None:
    type_ = list[tuple[str, Optional[Result[U64, SlimError]]]]
    assert is_transportable(type_)
    slim_type = make_slim_type(type_)
    assert isinstance(slim_type, SequenceType)


def test_nested_optional_collapses() -> None:
    # Optional[Optional[T]] is the same annotation as Optional[T]
    assert Optional[Optional[U8]] == Optional[U8]
    slim_type = make_slim_type(Optional[Optional[U8]])
    assert isinstance(slim_type, OptionalType)
    assert slim_type.to_bytes(None).unwrap() == b'\x00'
    assert slim_type.to_bytes(1).unwrap() == b'\x01\x01'


def test_optional_result() -> None:
    slim_type = make_slim_type(Result[U8, str] | None)
    assert isinstance(slim_type, OptionalType)


def test_cow_is_annotation_only() -> None:
    with pytest.raises(TypeError):
        Cow()


def test_subclass_without_from_type() -> None:
    class LocalType(SlimType[int]):
        def _check_value(self, value, /, *, deep):
            pass

        def _serialize(self, serializer, value, /):
            raise NotImplementedError

        def _deserialize(self, deserializer, /):
            raise NotImplementedError

    with pytest.raises(TypeError):
        SlimType.from_type(int, type_map={int: LocalType})
