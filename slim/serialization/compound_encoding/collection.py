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
A collection is basically any value that has a known size and is iterable, all elements having the same type.

Layout: [N: 8-byte big-endian unsigned][value_0]...[value_N-1]

>>> from slim.serialization.encoding.utf8 import encode_utf8, decode_utf8
>>> se = Serializer.build_bytes_serializer()
>>> value = ['foo', 'π']
>>> encode_collection(se, value, encode_utf8)
Ok(None)
>>> bytes(se.finalize()).hex()
'00000000000000020000000000000003666f6f0000000000000002cf80'

Breakdown of the result:

    0000000000000002: 2 elements
    0000000000000003666f6f: 'foo' (with length prefix)
    0000000000000002cf80: 'π' (with length prefix)

When decoding, the builder can be any compatible collection, in the previous example a `list` was encoded, but when
decoding a `tuple` could be used, it only matters that the collection can be initialized with an `Iterable[T]`.

>>> data = bytes.fromhex('00000000000000020000000000000003666f6f0000000000000002cf80')
>>> de = Deserializer.build_bytes_deserializer(data)
>>> decode_collection(de, decode_utf8, tuple)
Ok(('foo', 'π'))
>>> de.finalize()
Ok(None)

The failure of any element is the failure of the whole collection, unchanged:

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('00000000000000020000000000000003666f6f'))
>>> decode_collection(de, decode_utf8, list)
Err(<SlimError.STREAM_CLOSED: 'stream_closed'>)
"""

from collections.abc import Collection, Iterable
from typing import Callable, TypeVar

from slim.serialization import Deserializer, Serializer, SlimError
from slim.serialization.encoding.length import decode_length, encode_length
from slim.utils.result import Err, Ok, Result, propagate_result

from . import Decoder, Encoder

T = TypeVar('T')
R = TypeVar('R', bound=Collection)


@propagate_result
def encode_collection(serializer: Serializer, values: Collection[T], encoder: Encoder[T]) -> Result[None, SlimError]:
    if not isinstance(values, Collection) or isinstance(values, (str, bytes)):
        return Err(SlimError.SERIALIZATION_ERROR)
    encode_length(serializer, len(values)).unwrap_or_propagate()
    for value in values:
        encoder(serializer, value).unwrap_or_propagate()
    return Ok(None)


@propagate_result
def decode_collection(
    deserializer: Deserializer,
    decoder: Decoder[T],
    builder: Callable[[Iterable[T]], R],
    *,
    max_length: int | None = None,
) -> Result[R, SlimError]:
    length = decode_length(deserializer, max_length=max_length).unwrap_or_propagate()
    # XXX: the count comes from the peer, it is not used to reserve memory. Items that take no bytes never run out of
    #      input, a decoder of such items must be given a max_length
    values: list[T] = []
    for _ in range(length):
        values.append(decoder(deserializer).unwrap_or_propagate())
    return Ok(builder(values))
