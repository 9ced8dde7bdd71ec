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
The unit value `()` carries no information, so it is encoded with zero bytes and decoding it always succeeds.

>>> se = Serializer.build_bytes_serializer()
>>> encode_unit(se, ())
Ok(None)
>>> bytes(se.finalize())
b''
>>> decode_unit(Deserializer.build_bytes_deserializer(b''))
Ok(())
"""

from typing import Final

from slim.serialization import Deserializer, Serializer, SlimError
from slim.utils.result import Err, Ok, Result

UNIT: Final[tuple[()]] = ()


def encode_unit(serializer: Serializer, value: tuple[()]) -> Result[None, SlimError]:
    if value != UNIT:
        return Err(SlimError.SERIALIZATION_ERROR)
    return Ok(None)


def decode_unit(deserializer: Deserializer) -> Result[tuple[()], SlimError]:
    return Ok(UNIT)
