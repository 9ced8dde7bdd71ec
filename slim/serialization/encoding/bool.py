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
This module implements encoding a boolean value using 1 byte.

The format is simple, but note that decoding is lenient:

- `False` maps to `b'\x00'`
- `True` maps to `b'\x01'`
- when decoding, any byte other than `b'\x00'` is `True`

>>> se = Serializer.build_bytes_serializer()
>>> encode_bool(se, False)
Ok(None)
>>> bytes(se.finalize())
b'\x00'

>>> se = Serializer.build_bytes_serializer()
>>> encode_bool(se, True)
Ok(None)
>>> bytes(se.finalize())
b'\x01'

>>> de = Deserializer.build_bytes_deserializer(b'\x00')
>>> decode_bool(de)
Ok(False)
>>> de.finalize()
Ok(None)

>>> de = Deserializer.build_bytes_deserializer(b'\x01')
>>> decode_bool(de)
Ok(True)

>>> de = Deserializer.build_bytes_deserializer(b'\x02')
>>> decode_bool(de)
Ok(True)

>>> de = Deserializer.build_bytes_deserializer(b'\x01test')
>>> decode_bool(de)
Ok(True)
>>> bytes(de.read_all().unwrap())
b'test'
"""

from slim.serialization import Deserializer, Serializer, SlimError
from slim.utils.result import Err, Result


def encode_bool(serializer: Serializer, value: bool) -> Result[None, SlimError]:
    """ Encodes a boolean value using 1 byte.
    """
    if not isinstance(value, bool):
        return Err(SlimError.SERIALIZATION_ERROR)
    return serializer.write_byte(0x01 if value else 0x00)


def decode_bool(deserializer: Deserializer) -> Result[bool, SlimError]:
    """ Decodes a boolean value from 1 byte, any nonzero byte is `True`.
    """
    return deserializer.read_byte().map(lambda i: i != 0)
