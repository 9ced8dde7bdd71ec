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
This module implements utf-8 string encoding with a length prefix.

The prefix is the byte-length of the utf-8 data (not the number of characters) as an 8-byte big-endian integer, and
there is no terminator.

>>> se = Serializer.build_bytes_serializer()
>>> encode_utf8(se, '12345678')  # writes 0000000000000008 3132333435363738
Ok(None)
>>> encode_utf8(se, 'π')  # writes 0000000000000002 cf80
Ok(None)
>>> encode_utf8(se, '')  # writes 0000000000000000
Ok(None)
>>> bytes(se.finalize()).hex()
'000000000000000831323334353637380000000000000002cf800000000000000000'

>>> de = Deserializer.build_bytes_deserializer(
...     bytes.fromhex('000000000000000831323334353637380000000000000002cf800000000000000000')
... )
>>> decode_utf8(de)
Ok('12345678')
>>> decode_utf8(de)
Ok('π')
>>> decode_utf8(de)
Ok('')
>>> de.finalize()
Ok(None)

Bytes that are not valid utf-8 are rejected:

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('0000000000000002c328'))
>>> decode_utf8(de)
Err(<SlimError.DESERIALIZATION_ERROR: 'deserialization_error'>)
"""

from slim.serialization import Deserializer, Serializer, SlimError
from slim.utils.result import Err, Ok, Result, propagate_result

from .length import decode_length, encode_length


@propagate_result
def encode_utf8(serializer: Serializer, value: str) -> Result[None, SlimError]:
    """ Encodes a string using UTF-8 and adding a length prefix.

    This modules's docstring has more details and examples.
    """
    if not isinstance(value, str):
        return Err(SlimError.SERIALIZATION_ERROR)
    try:
        data = value.encode('utf-8')
    except UnicodeEncodeError:
        # lone surrogates can exist in a str but have no utf-8 encoding
        return Err(SlimError.SERIALIZATION_ERROR)
    encode_length(serializer, len(data)).unwrap_or_propagate()
    return serializer.write_bytes(data)


@propagate_result
def decode_utf8(deserializer: Deserializer, *, max_length: int | None = None) -> Result[str, SlimError]:
    """ Decodes a UTF-8 string with a length prefix, `max_length` limits the byte-length.

    This modules's docstring has more details and examples.
    """
    size = decode_length(deserializer, max_length=max_length).unwrap_or_propagate()
    data = deserializer.read_bytes(size).unwrap_or_propagate()
    try:
        return Ok(bytes(data).decode('utf-8'))
    except UnicodeDecodeError:
        return Err(SlimError.DESERIALIZATION_ERROR)
