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
A result value, either `Ok(value)` or `Err(error)`, is encoded with a tag byte followed by the contents of the arm.

Layout:

    [0x00][value] when Ok
    [0x01][error] when Err

The two arms are independently typed, each one has its own encoder.

>>> from slim.serialization.encoding.error import encode_slim_error, decode_slim_error
>>> from slim.serialization.encoding.utf8 import encode_utf8, decode_utf8
>>> se = Serializer.build_bytes_serializer()
>>> encode_result(se, Ok('1234567'), encode_utf8, encode_slim_error)
Ok(None)
>>> data = bytes(se.finalize())
>>> data.hex()
'00000000000000000731323334353637'
>>> decode_result(Deserializer.build_bytes_deserializer(data), decode_utf8, decode_slim_error)
Ok(Ok('1234567'))

Note how decoding returns a result inside a result: the outer one is the outcome of decoding, the inner one is the
decoded value.

>>> se = Serializer.build_bytes_serializer()
>>> encode_result(se, Err(SlimError.STREAM_CLOSED), encode_utf8, encode_slim_error)
Ok(None)
>>> data = bytes(se.finalize())
>>> data.hex()
'0102'
>>> decode_result(Deserializer.build_bytes_deserializer(data), decode_utf8, decode_slim_error)
Ok(Err(<SlimError.STREAM_CLOSED: 'stream_closed'>))

Like optional values, an unknown tag or a failure inside an arm is a deserialization error:

>>> decode_result(Deserializer.build_bytes_deserializer(b'\x05'), decode_utf8, decode_slim_error)
Err(<SlimError.DESERIALIZATION_ERROR: 'deserialization_error'>)
>>> decode_result(Deserializer.build_bytes_deserializer(b'\x00\x00'), decode_utf8, decode_slim_error)
Err(<SlimError.DESERIALIZATION_ERROR: 'deserialization_error'>)
"""

from typing import Final, TypeVar

from slim.serialization import Deserializer, Serializer, SlimError
from slim.serialization.encoding.int import decode_int, encode_int
from slim.utils.result import Err, Ok, Result, propagate_result

from . import Decoder, Encoder, collapse_error

T = TypeVar('T')
E = TypeVar('E')

TAG_OK: Final = 0x00
TAG_ERR: Final = 0x01


@propagate_result
def encode_result(
    serializer: Serializer,
    value: Result[T, E],
    ok_encoder: Encoder[T],
    err_encoder: Encoder[E],
) -> Result[None, SlimError]:
    match value:
        case Ok(ok_value):
            encode_int(serializer, TAG_OK, length=1, signed=False).unwrap_or_propagate()
            return ok_encoder(serializer, ok_value)
        case Err(err_value):
            encode_int(serializer, TAG_ERR, length=1, signed=False).unwrap_or_propagate()
            return err_encoder(serializer, err_value)
        case _:
            return Err(SlimError.SERIALIZATION_ERROR)


@propagate_result
def decode_result(
    deserializer: Deserializer,
    ok_decoder: Decoder[T],
    err_decoder: Decoder[E],
) -> Result[Result[T, E], SlimError]:
    tag = decode_int(deserializer, length=1, signed=False).unwrap_or_propagate()
    if tag == TAG_OK:
        return ok_decoder(deserializer).map(Ok).map_err(collapse_error)
    if tag == TAG_ERR:
        return err_decoder(deserializer).map(Err).map_err(collapse_error)
    return Err(SlimError.DESERIALIZATION_ERROR)
