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

from enum import Enum, unique


@unique
class SlimError(Enum):
    """ The closed set of failures that an encode or decode operation can report.

    Values of this enum are returned inside an `Err`, they are never raised directly. They are also transportable,
    which means a `SlimError` can be sent over the wire, for instance as the failure arm of a result value.

    The enum values are only names, the wire codes live in `slim.serialization.encoding.error`.
    """

    # the value could not be encoded, for example an int out of the range of its declared width
    SERIALIZATION_ERROR = 'serialization_error'

    # the bytes were read but are not a valid encoding: unknown tag, invalid utf-8, length over the allowed maximum
    DESERIALIZATION_ERROR = 'deserialization_error'

    # the input ended before all the bytes needed for a value were available
    STREAM_CLOSED = 'stream_closed'

    # any other failure of the underlying stream, including every write failure
    STREAM_ERROR = 'stream_error'


class SlimException(Exception):
    """ Exception wrapper over a `SlimError`, for callers that prefer raising.

    It is meant to be used with `Result.unwrap_or_raise_another`:

    >>> from slim.utils.result import Err
    >>> try:
    ...     Err(SlimError.STREAM_CLOSED).unwrap_or_raise_another(SlimException)
    ... except SlimException as e:
    ...     print(e.error.name)
    STREAM_CLOSED
    """

    def __init__(self, error: SlimError) -> None:
        super().__init__(error.value)
        self.error = error
