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

from __future__ import annotations

from typing import Any

from typing_extensions import Self, override

from slim.serialization import Deserializer, Serializer, SlimError
from slim.serialization.encoding.error import decode_slim_error, encode_slim_error
from slim.types.slim_type import SlimType
from slim.types.utils import TypeToSlimTypeMap
from slim.utils.result import Result


class SlimErrorType(SlimType[SlimError]):
    """ Represents a `SlimError` value as a single code byte.

    The code tables for encoding and decoding differ, see `slim.serialization.encoding.error`.
    """

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: TypeToSlimTypeMap) -> Self:
        if type_ is not SlimError:
            raise TypeError('expected SlimError type')
        return cls()

    @override
    def _check_value(self, value: SlimError, /, *, deep: bool) -> None:
        if not isinstance(value, SlimError):
            raise TypeError('expected SlimError')

    @override
    def _serialize(self, serializer: Serializer, value: SlimError, /) -> Result[None, SlimError]:
        return encode_slim_error(serializer, value)

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> Result[SlimError, SlimError]:
        return decode_slim_error(deserializer)
