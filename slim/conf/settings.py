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

from pathlib import Path
from typing import Optional, Union

from pydantic import NonNegativeInt, PositiveInt

from slim.utils import pydantic
from slim.utils.yaml import dict_from_yaml


class SlimSettings(pydantic.BaseModel):
    # Maximum accepted value of a length or count prefix when decoding strings and sequences. `None` trusts the peer
    # and accepts anything that fits in 64 bits.
    MAX_LENGTH: Optional[NonNegativeInt] = None

    # Largest single read issued to a file-like stream. A declared length bigger than this is read in several chunks,
    # so memory grows with the bytes actually received, not with what the prefix announced.
    READ_CHUNK_SIZE: PositiveInt = 64 * 1024

    @classmethod
    def from_yaml(cls, *, filepath: Union[Path, str]) -> SlimSettings:
        """Takes a filepath to a yaml file and returns a validated SlimSettings instance."""
        settings_dict = dict_from_yaml(filepath=filepath)
        return cls.model_validate(settings_dict)
