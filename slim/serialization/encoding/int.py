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
This module implements encoding of integers with a fixed size, the size and signedness are parametrized.

The encoding format itself is a standard big-endian format, with no padding.

>>> se = Serializer.build_bytes_serializer()
>>> encode_int(se, 0, length=1, signed=True)  # writes 00
Ok(None)
>>> encode_int(se, 255, length=1, signed=False)  # writes ff
Ok(None)
>>> encode_int(se, 1234, length=2, signed=True)  # writes 04d2
Ok(None)
>>> encode_int(se, -1234, length=2, signed=True)  # writes fb2e
Ok(None)
>>> encode_int(se, 100, length=8, signed=False)  # writes 0000000000000064
Ok(None)
>>> bytes(se.finalize()).hex()
'00ff04d2fb2e0000000000000064'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('00ff04d2fb2e0000000000000064'))
>>> decode_int(de, length=1, signed=True)  # reads 00
Ok(0)
>>> decode_int(de, length=1, signed=False)  # reads ff
Ok(255)
>>> decode_int(de, length=2, signed=True)  # reads 04d2
Ok(1234)
>>> decode_int(de, length=2, signed=True)  # reads fb2e
Ok(-1234)
>>> decode_int(de, length=8, signed=False)  # reads 0000000000000064
Ok(100)

A value that does not fit is not written at all:

>>> se = Serializer.build_bytes_serializer()
>>> encode_int(se, 256, length=1, signed=False)
Err(<SlimError.SERIALIZATION_ERROR: 'serialization_error'>)
>>> se.cur_pos()
0

A short read fails as a closed stream:

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('000000'))
>>> decode_int(de, length=4, signed=False)
Err(<SlimError.STREAM_CLOSED: 'stream_closed'>)
"""

from slim.serialization import Deserializer, Serializer, SlimError
from slim.utils.result import Err, Result

INT_LENGTHS = (1, 2, 4, 8)


def encode_int(serializer: Serializer, number: int, *, length: int, signed: bool) -> Result[None, SlimError]:
    """ Encode an int using the given byte-length and signedness.

    This modules's docstring has more details and examples.
    """
    if length not in INT_LENGTHS:
        raise ValueError('unsupported length')
    if not isinstance(number, int):
        return Err(SlimError.SERIALIZATION_ERROR)
    try:
        data = int.to_bytes(number, length, byteorder='big', signed=signed)
    except OverflowError:
        return Err(SlimError.SERIALIZATION_ERROR)
    return serializer.write_bytes(data)


def decode_int(deserializer: Deserializer, *, length: int, signed: bool) -> Result[int, SlimError]:
    """ Decode an int using the given byte-length and signedness.

    This modules's docstring has more details and examples.
    """
    if length not in INT_LENGTHS:
        raise ValueError('unsupported length')
    return deserializer.read_bytes(length).map(lambda data: int.from_bytes(data, byteorder='big', signed=signed))
