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

r"""
In Python a tuple type can be used in annotations in 2 different ways:

1. `tuple[A, B, C]`: known fixed length and heterogeneous types
2. `tuple[X, ...]`: variable length and homogeneous type

This module only implements encoding of the first case, the second case can be encoded using the collection encoder.
The most common use is the pair, `tuple[A, B]`.

There actually isn't a "format" per-se, the encoding of `tuple[A, B]` is just the encoding of A concatenated with B,
without any delimiter, each component's encoding is self-delimiting.

>>> from slim.serialization.encoding.int import decode_int, encode_int
>>> from slim.serialization.encoding.utf8 import encode_utf8, decode_utf8
>>> from functools import partial
>>> encode_u8, decode_u8 = partial(encode_int, length=1, signed=False), partial(decode_int, length=1, signed=False)
>>> se = Serializer.build_bytes_serializer()
>>> encode_pair(se, ('foo', 7), encode_utf8, encode_u8)
Ok(None)
>>> bytes(se.finalize()).hex()
'0000000000000003666f6f07'

Breakdown of the result:

    0000000000000003666f6f: 'foo'
    07: 7

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('0000000000000003666f6f07'))
>>> decode_pair(de, decode_utf8, decode_u8)
Ok(('foo', 7))

If any component fails the tuple fails with a deserialization error, there is no telling which component it was:

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('0000000000000003666f6f'))
>>> decode_pair(de, decode_utf8, decode_u8)
Err(<SlimError.DESERIALIZATION_ERROR: 'deserialization_error'>)
"""

from typing import Any, TypeVar

from typing_extensions import TypeVarTuple, Unpack

from slim.serialization import Deserializer, Serializer, SlimError
from slim.utils.result import Err, Ok, Result, propagate_result

from . import Decoder, Encoder, collapse_error

A = TypeVar('A')
B = TypeVar('B')
Ts = TypeVarTuple('Ts')


@propagate_result
def encode_tuple(
    serializer: Serializer,
    values: tuple[Unpack[Ts]],
    encoders: tuple[Encoder[Any], ...],
) -> Result[None, SlimError]:
    if not isinstance(values, tuple) or len(values) != len(encoders):
        return Err(SlimError.SERIALIZATION_ERROR)
    for value, encoder in zip(values, encoders):
        encoder(serializer, value).unwrap_or_propagate()
    return Ok(None)


@propagate_result
def decode_tuple(
    deserializer: Deserializer,
    decoders: tuple[Decoder[Any], ...],
) -> Result[tuple[Unpack[Ts]], SlimError]:
    values: list[Any] = []
    for decoder in decoders:
        values.append(decoder(deserializer).map_err(collapse_error).unwrap_or_propagate())
    return Ok(tuple(values))


def encode_pair(
    serializer: Serializer,
    value: tuple[A, B],
    first_encoder: Encoder[A],
    second_encoder: Encoder[B],
) -> Result[None, SlimError]:
    return encode_tuple(serializer, value, (first_encoder, second_encoder))


def decode_pair(
    deserializer: Deserializer,
    first_decoder: Decoder[A],
    second_decoder: Decoder[B],
) -> Result[tuple[A, B], SlimError]:
    return decode_tuple(deserializer, (first_decoder, second_decoder))
