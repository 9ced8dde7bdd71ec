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

from typing import Any, Protocol, TypeVar, runtime_checkable

from slim.serialization import Deserializer, Serializer, SlimError
from slim.utils.result import Result

T = TypeVar('T')


@runtime_checkable
class Transportable(Protocol[T]):
    """ Anything that can both write a `T` to a serializer and read it back from a deserializer.

    Every `SlimType` is transportable, a protocol is used so custom codecs can be passed where a `SlimType` would be
    without subclassing it:

    >>> from slim.types import U8, make_slim_type
    >>> isinstance(make_slim_type(U8), Transportable)
    True
    >>> isinstance(object(), Transportable)
    False
    """

    def serialize(self, serializer: Serializer, value: T, /) -> Result[None, SlimError]:
        ...

    def deserialize(self, deserializer: Deserializer, /) -> Result[T, SlimError]:
        ...


def is_transportable(type_: Any, /) -> bool:
    """ Whether a codec can be built for the given annotation, which requires every component to be transportable.

    >>> from slim.types import U8
    >>> is_transportable(list[U8])
    True
    >>> is_transportable(list[int])
    False
    """
    from slim.types import make_slim_type
    try:
        make_slim_type(type_)
    except TypeError:
        return False
    return True
