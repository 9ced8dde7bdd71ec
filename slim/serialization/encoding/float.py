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
This module implements encoding of IEEE 754 floating point numbers, in single (4 bytes) or double (8 bytes)
precision, big-endian.

>>> se = Serializer.build_bytes_serializer()
>>> encode_float(se, 1.5, length=4)  # writes 3fc00000
Ok(None)
>>> encode_float(se, -0.1, length=8)  # writes bfb999999999999a
Ok(None)
>>> bytes(se.finalize()).hex()
'3fc00000bfb999999999999a'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('3fc00000bfb999999999999a'))
>>> decode_float(de, length=4)
Ok(1.5)
>>> decode_float(de, length=8)
Ok(-0.1)

Single precision cannot hold every double, values that are too big fail instead of becoming infinite:

>>> se = Serializer.build_bytes_serializer()
>>> encode_float(se, 1e300, length=4)
Err(<SlimError.SERIALIZATION_ERROR: 'serialization_error'>)
"""

import struct

from slim.serialization import Deserializer, Serializer, SlimError
from slim.utils.result import Err, Ok, Result, propagate_result

_FORMAT_BY_LENGTH = {
    4: '>f',
    8: '>d',
}


def encode_float(serializer: Serializer, number: float, *, length: int) -> Result[None, SlimError]:
    """ Encode a float with the given precision, `length=4` for single and `length=8` for double.
    """
    fmt = _FORMAT_BY_LENGTH.get(length)
    if fmt is None:
        raise ValueError('unsupported length')
    # XXX: bool is an int, and struct would accept it
    if isinstance(number, bool) or not isinstance(number, (int, float)):
        return Err(SlimError.SERIALIZATION_ERROR)
    try:
        data = struct.pack(fmt, number)
    except (struct.error, OverflowError):
        return Err(SlimError.SERIALIZATION_ERROR)
    return serializer.write_bytes(data)


@propagate_result
def decode_float(deserializer: Deserializer, *, length: int) -> Result[float, SlimError]:
    """ Decode a float with the given precision, `length=4` for single and `length=8` for double.
    """
    fmt = _FORMAT_BY_LENGTH.get(length)
    if fmt is None:
        raise ValueError('unsupported length')
    data = deserializer.read_bytes(length).unwrap_or_propagate()
    number, = struct.unpack(fmt, data)
    return Ok(number)
