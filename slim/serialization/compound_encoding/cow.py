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
A copy-on-write value is encoded exactly like the value it wraps, the wrapper itself leaves no trace on the wire.

Decoding always produces an owned value, never a view over the stream's memory, so the result stays valid after the
deserializer moves on or its buffer is reused.

>>> from slim.serialization.encoding.utf8 import encode_utf8, decode_utf8
>>> se = Serializer.build_bytes_serializer()
>>> encode_cow(se, 'foo', encode_utf8)
Ok(None)
>>> data = bytes(se.finalize())
>>> data.hex()
'0000000000000003666f6f'
>>> decode_cow(Deserializer.build_bytes_deserializer(data), decode_utf8)
Ok('foo')
"""

from typing import Any, TypeVar

from slim.serialization import Deserializer, Serializer, SlimError
from slim.utils.result import Result

from . import Decoder, Encoder

T = TypeVar('T')


def encode_cow(serializer: Serializer, value: T, encoder: Encoder[T]) -> Result[None, SlimError]:
    return encoder(serializer, value)


def _to_owned(value: Any) -> Any:
    # memoryviews are the only borrowed values a decoder can produce
    if isinstance(value, memoryview):
        return bytes(value)
    return value


def decode_cow(deserializer: Deserializer, decoder: Decoder[T]) -> Result[T, SlimError]:
    return decoder(deserializer).map(_to_owned)
