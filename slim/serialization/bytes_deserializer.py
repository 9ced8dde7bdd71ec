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

from typing_extensions import override

from slim.utils.result import Err, Ok, Result

from .deserializer import Deserializer
from .exceptions import SlimError
from .types import Buffer

_EMPTY_VIEW = memoryview(b'')


class BytesDeserializer(Deserializer):
    """Simple implementation of a Deserializer to parse values from a byte sequence.

    This implementation maintains a memoryview that is shortened as the bytes are read. Reaching the end of the byte
    sequence is reported the same way a closed stream would be.
    """

    def __init__(self, data: Buffer) -> None:
        self._view = memoryview(data)

    @override
    def finalize(self) -> Result[None, SlimError]:
        if not self.is_empty():
            return Err(SlimError.DESERIALIZATION_ERROR)
        del self._view
        return Ok(None)

    @override
    def is_empty(self) -> bool:
        # XXX: least amount of OPs, "not" converts to bool with the correct semantics of "is empty"
        return not self._view

    @override
    def read_byte(self) -> Result[int, SlimError]:
        if not len(self._view):
            return Err(SlimError.STREAM_CLOSED)
        b = self._view[0]
        self._view = self._view[1:]
        return Ok(b)

    @override
    def read_bytes(self, n: int) -> Result[memoryview, SlimError]:
        if n < 0:
            raise ValueError('value cannot be negative')
        if len(self._view) < n:
            return Err(SlimError.STREAM_CLOSED)
        b = self._view[:n]
        self._view = self._view[n:]
        return Ok(b)

    @override
    def read_all(self) -> Result[memoryview, SlimError]:
        b = self._view
        self._view = _EMPTY_VIEW
        return Ok(b)
