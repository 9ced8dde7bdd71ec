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

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar, final

from slim.serialization import Deserializer, DuplexStream, Serializer, SlimError
from slim.types.utils import TypeToSlimTypeMap, get_usable_origin_type
from slim.utils.result import Err, Ok, Result, propagate_result

T = TypeVar('T')


class SlimType(ABC, Generic[T]):
    """ This class models a type with a known wire encoding, it is what makes a value "transportable".

    An instance is built from a type annotation (see `make_slim_type`) and knows how to check, encode and decode
    values of that type. Compound instances (sequences, optionals, results, tuples) hold the instances of their
    component types and delegate to them.

    Every encoding and decoding operation reports failures through a `Result` with a `SlimError`, nothing is raised
    for malformed input or broken streams. Exceptions are only raised for programming errors, like building a
    SlimType from an unsupported annotation.
    """

    # XXX: subclasses must override this if they need any properties
    __slots__ = ()

    @final
    @staticmethod
    def from_type(type_: Any, /, *, type_map: TypeToSlimTypeMap) -> SlimType[Any]:
        """ Instantiate a SlimType from a type annotation, using `type_map` to find the class for each (sub)type.
        """
        usable_origin = get_usable_origin_type(type_, type_map=type_map)
        slim_type_class = type_map[usable_origin]
        return slim_type_class._from_type(type_, type_map=type_map)

    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: TypeToSlimTypeMap) -> SlimType[Any]:
        """ Instantiate from a type annotation, inspecting its origin and args.

        Compound types are expected to call `SlimType.from_type` for their args, forwarding the given `type_map`.
        """
        raise TypeError(f'{cls} is not compatible with use in a type map')

    @final
    def check_value(self, value: T, /) -> None:
        """ Raise a TypeError or ValueError if the value can't be encoded with this type.

        The check is deep, so every member of a compound value is checked as well.
        """
        self._check_value(value, deep=True)

    @final
    def is_valid(self, value: T, /) -> bool:
        try:
            self._check_value(value, deep=True)
        except (TypeError, ValueError):
            return False
        return True

    @final
    @propagate_result
    def serialize(self, serializer: Serializer, value: T, /) -> Result[None, SlimError]:
        """ Encode a value into the serializer.

        The whole value is encoded in memory first and handed to the serializer in a single write, so a value that
        doesn't fit the type results in a `SERIALIZATION_ERROR` and nothing is written. A failure of the serializer
        itself can still leave part of that write behind.
        """
        staging = Serializer.build_bytes_serializer()
        self._checked_serialize(staging, value).unwrap_or_propagate()
        return serializer.write_bytes(staging.finalize())

    @final
    def _checked_serialize(self, serializer: Serializer, value: T, /) -> Result[None, SlimError]:
        """ Shallowly check a value and encode it, used by compound types to encode their members.
        """
        try:
            self._check_value(value, deep=False)
        except (TypeError, ValueError) as e:
            return Err(SlimError.SERIALIZATION_ERROR, cause=e)
        return self._serialize(serializer, value)

    def is_zero_width(self) -> bool:
        """Whether every value of this type is encoded with zero bytes."""
        return False

    @final
    def deserialize(self, deserializer: Deserializer, /) -> Result[T, SlimError]:
        """ Decode a value from the deserializer, consuming exactly the bytes of its encoding on success.
        """
        return self._deserialize(deserializer)

    @final
    def to_bytes(self, value: T, /) -> Result[bytes, SlimError]:
        """ Shortcut to encode a value into `bytes` without setting up a serializer.
        """
        serializer = Serializer.build_bytes_serializer()
        return self._checked_serialize(serializer, value).map(lambda _: bytes(serializer.finalize()))

    @final
    @propagate_result
    def from_bytes(self, data: bytes, /) -> Result[T, SlimError]:
        """ Shortcut to decode a value from `bytes`, all of the data must be consumed.
        """
        deserializer = Deserializer.build_bytes_deserializer(data)
        value = self.deserialize(deserializer).unwrap_or_propagate()
        deserializer.finalize().unwrap_or_propagate()
        return Ok(value)

    @final
    def send(self, stream: DuplexStream, value: T, /) -> Result[None, SlimError]:
        """ Encode a value into the writing half of a duplex stream.
        """
        return self.serialize(stream.serializer, value)

    @final
    def receive(self, stream: DuplexStream, /) -> Result[T, SlimError]:
        """ Decode a value from the reading half of a duplex stream.
        """
        return self.deserialize(stream.deserializer)

    @abstractmethod
    def _check_value(self, value: T, /, *, deep: bool) -> None:
        """ Inner implementation of `check_value`, raise TypeError or ValueError for an incompatible value.

        When `deep=False` the members of a compound value are not checked, because they'll be checked when they are
        serialized by their own SlimType.
        """
        raise NotImplementedError

    @abstractmethod
    def _serialize(self, serializer: Serializer, value: T, /) -> Result[None, SlimError]:
        """ Inner implementation of `serialize`, the given value has already been "shallow checked".

        Compound types must pass `SlimType.serialize` of their members as an `Encoder`, not `SlimType._serialize`.
        """
        raise NotImplementedError

    @abstractmethod
    def _deserialize(self, deserializer: Deserializer, /) -> Result[T, SlimError]:
        """ Inner implementation of `deserialize`."""
        raise NotImplementedError

    def __repr__(self) -> str:
        return f'{type(self).__name__}()'
