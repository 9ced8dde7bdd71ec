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

from typing import Any, Optional

from typing_extensions import Self, override

from slim.conf import get_global_settings
from slim.serialization import Deserializer, Serializer, SlimError
from slim.serialization.encoding.utf8 import decode_utf8, encode_utf8
from slim.types.slim_type import SlimType
from slim.types.utils import TypeToSlimTypeMap
from slim.utils.result import Result


class StrType(SlimType[str]):
    """ Represents builtin `str` values, encoded as length-prefixed UTF-8.

    When built from an annotation the maximum accepted length comes from the `MAX_LENGTH` setting.
    """

    __slots__ = ('_max_length',)

    _max_length: Optional[int]

    def __init__(self, *, max_length: Optional[int] = None) -> None:
        self._max_length = max_length

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: TypeToSlimTypeMap) -> Self:
        if type_ is not str:
            raise TypeError('expected str type')
        return cls(max_length=get_global_settings().MAX_LENGTH)

    @override
    def _check_value(self, value: str, /, *, deep: bool) -> None:
        if not isinstance(value, str):
            raise TypeError('expected str type')

    @override
    def _serialize(self, serializer: Serializer, value: str, /) -> Result[None, SlimError]:
        return encode_utf8(serializer, value)

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> Result[str, SlimError]:
        return decode_utf8(deserializer, max_length=self._max_length)

    def __repr__(self) -> str:
        return f'StrType(max_length={self._max_length!r})'
