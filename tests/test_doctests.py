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

import doctest
import importlib

import pytest

MODULES_WITH_DOCTESTS = [
    'slim.serialization.adapters.max_bytes',
    'slim.serialization.buffer_stream',
    'slim.serialization.compound_encoding.collection',
    'slim.serialization.compound_encoding.cow',
    'slim.serialization.compound_encoding.optional',
    'slim.serialization.compound_encoding.result',
    'slim.serialization.compound_encoding.tuple',
    'slim.serialization.deserializer',
    'slim.serialization.encoding.bool',
    'slim.serialization.encoding.error',
    'slim.serialization.encoding.float',
    'slim.serialization.encoding.int',
    'slim.serialization.encoding.length',
    'slim.serialization.encoding.unit',
    'slim.serialization.encoding.utf8',
    'slim.serialization.exceptions',
    'slim.serialization.serializer',
    'slim.serialization.stream',
    'slim.types',
    'slim.types.aliases',
    'slim.types.transportable',
    'slim.types.utils',
    'slim.utils.result',
]


@pytest.mark.parametrize('module_name', MODULES_WITH_DOCTESTS)
def test_module_doctests(module_name: str) -> None:
    module = importlib.import_module(module_name)
    failures, tests = doctest.testmod(module)
    assert tests > 0, f'no doctests found in {module_name}'
    assert failures == 0
