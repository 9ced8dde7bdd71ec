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
A `SlimError` is encoded as a single byte.

The byte assigned to each variant depends on the direction, the first two codes are swapped between encoding and
decoding:

    variant                 encode  decode
    SERIALIZATION_ERROR     0x01    0x00
    DESERIALIZATION_ERROR   0x00    0x01
    STREAM_CLOSED           0x02    0x02
    STREAM_ERROR            0x03    0x03

This is the format peers already exchange, so a value sent as `SERIALIZATION_ERROR` is received as
`DESERIALIZATION_ERROR` and vice-versa, while the stream variants survive the trip unchanged:

>>> se = Serializer.build_bytes_serializer()
>>> encode_slim_error(se, SlimError.SERIALIZATION_ERROR)
Ok(None)
>>> data = bytes(se.finalize())
>>> data.hex()
'01'
>>> decode_slim_error(Deserializer.build_bytes_deserializer(data))
Ok(<SlimError.DESERIALIZATION_ERROR: 'deserialization_error'>)

>>> decode_slim_error(Deserializer.build_bytes_deserializer(b'\\x02'))
Ok(<SlimError.STREAM_CLOSED: 'stream_closed'>)
>>> decode_slim_error(Deserializer.build_bytes_deserializer(b'\\x04'))
Err(<SlimError.DESERIALIZATION_ERROR: 'deserialization_error'>)
"""

from types import MappingProxyType
from typing import Final, Mapping

from slim.serialization import Deserializer, Serializer, SlimError
from slim.utils.result import Err, Ok, Result, propagate_result

# TODO: agree on a single table with the peers and bump the protocol, until then both tables must be kept as they are
ENCODE_CODES: Final[Mapping[SlimError, int]] = MappingProxyType({
    SlimError.DESERIALIZATION_ERROR: 0,
    SlimError.SERIALIZATION_ERROR: 1,
    SlimError.STREAM_CLOSED: 2,
    SlimError.STREAM_ERROR: 3,
})

DECODE_CODES: Final[Mapping[int, SlimError]] = MappingProxyType({
    0: SlimError.SERIALIZATION_ERROR,
    1: SlimError.DESERIALIZATION_ERROR,
    2: SlimError.STREAM_CLOSED,
    3: SlimError.STREAM_ERROR,
})


def encode_slim_error(serializer: Serializer, value: SlimError) -> Result[None, SlimError]:
    if not isinstance(value, SlimError):
        return Err(SlimError.SERIALIZATION_ERROR)
    return serializer.write_byte(ENCODE_CODES[value])


@propagate_result
def decode_slim_error(deserializer: Deserializer) -> Result[SlimError, SlimError]:
    code = deserializer.read_byte().unwrap_or_propagate()
    error = DECODE_CODES.get(code)
    if error is None:
        return Err(SlimError.DESERIALIZATION_ERROR)
    return Ok(error)
