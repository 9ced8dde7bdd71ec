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

"""
Mapping from Python annotations to wire encodings.

A value is sent by building a `SlimType` for its annotation and using it against a stream:

>>> from slim.serialization.buffer_stream import BufferStream
>>> stream = BufferStream()
>>> send(stream, tuple[str, U16 | None], ('foo', 7))
Ok(None)
>>> stream.getvalue().hex()
'0000000000000003666f6f010007'
>>> receive(stream, tuple[str, U16 | None])
Ok(('foo', 7))

Supported annotations are `bool`, `str`, `float`, `SlimError`, the sized aliases (`U8`, ..., `F64`), `Unit` and the
compositions `list[T]`, `tuple[T, ...]`, `tuple[A, B, ...]`, `T | None`, `Result[T, E]` and `Cow[T]`. A bare `int`
is not supported because it has no width.
"""

from typing import Any, Optional

from slim.serialization import DuplexStream, SlimError
from slim.types.aliases import F32, F64, I8, I16, I32, I64, U8, U16, U32, U64, Cow, Unit
from slim.types.bool_type import BoolType
from slim.types.cow_type import CowType
from slim.types.error_type import SlimErrorType
from slim.types.float_type import Float32Type, Float64Type
from slim.types.optional_type import OptionalType
from slim.types.result_type import ResultType
from slim.types.sequence_type import SequenceType
from slim.types.sized_int_type import (
    Int8Type,
    Int16Type,
    Int32Type,
    Int64Type,
    Uint8Type,
    Uint16Type,
    Uint32Type,
    Uint64Type,
)
from slim.types.slim_type import SlimType
from slim.types.str_type import StrType
from slim.types.transportable import Transportable, is_transportable
from slim.types.tuple_type import TupleType
from slim.types.unit_type import UnitType
from slim.types.utils import TypeToSlimTypeMap
from slim.utils.result import Result

__all__ = [
    'DEFAULT_TYPE_MAP',
    'F32',
    'F64',
    'I8',
    'I16',
    'I32',
    'I64',
    'U8',
    'U16',
    'U32',
    'U64',
    'BoolType',
    'Cow',
    'CowType',
    'Float32Type',
    'Float64Type',
    'Int8Type',
    'Int16Type',
    'Int32Type',
    'Int64Type',
    'OptionalType',
    'ResultType',
    'SequenceType',
    'SlimErrorType',
    'SlimType',
    'StrType',
    'Transportable',
    'TupleType',
    'TypeToSlimTypeMap',
    'Uint8Type',
    'Uint16Type',
    'Uint32Type',
    'Uint64Type',
    'Unit',
    'UnitType',
    'is_transportable',
    'make_slim_type',
    'receive',
    'send',
]

# Mapping between types and SlimType classes.
DEFAULT_TYPE_MAP: TypeToSlimTypeMap = {
    # builtin types:
    bool: BoolType,
    float: Float64Type,
    list: SequenceType,
    str: StrType,
    # also handles tuple[()] and tuple[T, ...]
    tuple: TupleType,
    # sized types:
    U8: Uint8Type,
    U16: Uint16Type,
    U32: Uint32Type,
    U64: Uint64Type,
    I8: Int8Type,
    I16: Int16Type,
    I32: Int32Type,
    I64: Int64Type,
    F32: Float32Type,
    F64: Float64Type,
    # slim types:
    Cow: CowType,
    Optional: OptionalType,
    Result: ResultType,
    SlimError: SlimErrorType,
}


def make_slim_type(type_: Any, /) -> SlimType[Any]:
    """ Like SlimType.from_type, but with the default map.

    If you need to customize the mapping use `SlimType.from_type` instead. Raises a `TypeError` for annotations that
    are not supported.
    """
    return SlimType.from_type(type_, type_map=DEFAULT_TYPE_MAP)


def send(stream: DuplexStream, type_: Any, value: Any, /) -> Result[None, SlimError]:
    """ Encode a value of the given type into the stream."""
    return make_slim_type(type_).send(stream, value)


def receive(stream: DuplexStream, type_: Any, /) -> Result[Any, SlimError]:
    """ Decode a value of the given type from the stream."""
    return make_slim_type(type_).receive(stream)
