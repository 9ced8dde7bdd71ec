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

from abc import ABC, abstractmethod

from .deserializer import Deserializer
from .serializer import Serializer


class DuplexStream(ABC):
    """ A single resource that values can be both written to and read from.

    This is the stream a transportable type is sent and received over: the same object hands out its writing half as
    a `Serializer` and its reading half as a `Deserializer`.
    """

    @property
    @abstractmethod
    def serializer(self) -> Serializer:
        raise NotImplementedError

    @property
    @abstractmethod
    def deserializer(self) -> Deserializer:
        raise NotImplementedError
