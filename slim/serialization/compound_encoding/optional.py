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
An optional value is encoded with a tag byte followed by the value when there is one.

Layout:

    [0x00] when None
    [0x01][value] when not None

>>> from slim.serialization.encoding.utf8 import encode_utf8, decode_utf8
>>> se = Serializer.build_bytes_serializer()
>>> encode_optional(se, 'foo', encode_utf8)
Ok(None)
>>> bytes(se.finalize()).hex()
'010000000000000003666f6f'

>>> se = Serializer.build_bytes_serializer()
>>> encode_optional(se, None, encode_utf8)
Ok(None)
>>> bytes(se.finalize()).hex()
'00'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('010000000000000003666f6f'))
>>> decode_optional(de, decode_utf8)
Ok('foo')
>>> de.finalize()
Ok(None)

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('00'))
>>> decode_optional(de, decode_utf8)
Ok(None)

Any other tag is invalid, and nothing after it is read:

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('020000000000000003666f6f'))
>>> decode_optional(de, decode_utf8)
Err(<SlimError.DESERIALIZATION_ERROR: 'deserialization_error'>)
>>> bytes(de.read_all().unwrap()).hex()
'0000000000000003666f6f'

When the tag says there is a value but the value fails to decode, the failure is reported as a deserialization
error, whatever the inner cause was:

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('01000000'))
>>> decode_optional(de, decode_utf8)
Err(<SlimError.DESERIALIZATION_ERROR: 'deserialization_error'>)
"""

from typing import Final, Optional, TypeVar

from slim.serialization import Deserializer, Serializer, SlimError
from slim.serialization.encoding.int import decode_int, encode_int
from slim.utils.result import Err, Ok, Result, propagate_result

from . import Decoder, Encoder, collapse_error

T = TypeVar('T')

TAG_NONE: Final = 0x00
TAG_SOME: Final = 0x01


@propagate_result
def encode_optional(serializer: Serializer, value: Optional[T], encoder: Encoder[T]) -> Result[None, SlimError]:
    if value is None:
        return encode_int(serializer, TAG_NONE, length=1, signed=False)
    encode_int(serializer, TAG_SOME, length=1, signed=False).unwrap_or_propagate()
    return encoder(serializer, value)


@propagate_result
def decode_optional(deserializer: Deserializer, decoder: Decoder[T]) -> Result[Optional[T], SlimError]:
    tag = decode_int(deserializer, length=1, signed=False).unwrap_or_propagate()
    if tag == TAG_NONE:
        return Ok(None)
    if tag == TAG_SOME:
        return decoder(deserializer).map_err(collapse_error)
    return Err(SlimError.DESERIALIZATION_ERROR)
