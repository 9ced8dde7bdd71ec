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
Type aliases that give a Python annotation the information needed to pick a wire encoding.

A Python `int` has no width, so integers must be annotated with one of the sized aliases. They are `NewType`s, so at
runtime the values are plain `int`/`float`:

>>> U8(255)
255
"""

from typing import Generic, NewType, TypeAlias, TypeVar

T = TypeVar('T')

U8 = NewType('U8', int)
U16 = NewType('U16', int)
U32 = NewType('U32', int)
U64 = NewType('U64', int)
I8 = NewType('I8', int)
I16 = NewType('I16', int)
I32 = NewType('I32', int)
I64 = NewType('I64', int)
F32 = NewType('F32', float)
F64 = NewType('F64', float)

# the value is `()`, encoded with zero bytes
Unit: TypeAlias = tuple[()]


class Cow(Generic[T]):
    """ Marks a value as copy-on-write, only meaningful in annotations.

    `Cow[T]` has the same encoding as `T` and its values are plain `T` values. When decoding, the value is always an
    owned copy, never a view into the stream's memory.
    """

    def __init__(self) -> None:
        raise TypeError('Cow is only used in annotations, use the wrapped value directly')
