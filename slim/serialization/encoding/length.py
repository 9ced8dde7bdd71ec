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
Every variable-size value (strings, sequences) is prefixed by its length or element count, always written as an
unsigned 64-bit big-endian integer.

>>> se = Serializer.build_bytes_serializer()
>>> encode_length(se, 8)
Ok(None)
>>> bytes(se.finalize()).hex()
'0000000000000008'

The prefix comes from the peer, a `max_length` can be given to reject it before anything is read or allocated:

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('ffffffffffffffff'))
>>> decode_length(de, max_length=1024)
Err(<SlimError.DESERIALIZATION_ERROR: 'deserialization_error'>)
"""

from slim.serialization import Deserializer, Serializer, SlimError
from slim.utils.result import Err, Ok, Result, propagate_result

from .int import decode_int, encode_int

LENGTH_PREFIX_SIZE = 8


def encode_length(serializer: Serializer, length: int) -> Result[None, SlimError]:
    return encode_int(serializer, length, length=LENGTH_PREFIX_SIZE, signed=False)


@propagate_result
def decode_length(deserializer: Deserializer, *, max_length: int | None = None) -> Result[int, SlimError]:
    length = decode_int(deserializer, length=LENGTH_PREFIX_SIZE, signed=False).unwrap_or_propagate()
    if max_length is not None and length > max_length:
        return Err(SlimError.DESERIALIZATION_ERROR)
    return Ok(length)
