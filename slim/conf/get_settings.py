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
Process-wide settings of the library.

The encoding functions in `slim.serialization` take every limit as an argument and never look at the environment.
Only the annotation-driven types of `slim.types` and the stream adapters read these settings, to pick their default
limits and read size. Reading them from the yaml file named by the `SLIM_CONFIG_YAML` env var is an addition on top
of the wire protocol, which has no configuration of its own: with the var unset the defaults reproduce the
unconfigured behavior.
"""

import os
from typing import NamedTuple, Optional

from structlog import get_logger

from slim.conf.settings import SlimSettings

logger = get_logger()

CONFIG_YAML_ENV_VAR = 'SLIM_CONFIG_YAML'


class _SettingsMetadata(NamedTuple):
    source: Optional[str]
    settings: SlimSettings


_settings_singleton: Optional[_SettingsMetadata] = None


def get_global_settings() -> SlimSettings:
    """
    Returns the settings in use.

    The settings are read from the yaml file in the 'SLIM_CONFIG_YAML' env var the first time this is called. When the
    var is not set the defaults are used.
    """
    source = os.environ.get(CONFIG_YAML_ENV_VAR)
    return _load_settings_singleton(source)


def get_settings_source() -> Optional[str]:
    """ Returns the path of the YAML file that was loaded, or None when using the defaults.

    XXX: Will raise an assertion error if get_global_settings() wasn't used before.
    """
    assert _settings_singleton is not None, 'get_global_settings() not called before'
    return _settings_singleton.source


def reset_global_settings() -> None:
    """Forget the loaded settings, the next call to get_global_settings() loads them again. Meant for tests."""
    global _settings_singleton
    _settings_singleton = None


def _load_settings_singleton(source: Optional[str]) -> SlimSettings:
    global _settings_singleton

    if _settings_singleton is not None:
        if _settings_singleton.source != source:
            raise Exception('loading config twice with a different file')

        return _settings_singleton.settings

    if source is None:
        settings = SlimSettings()
    else:
        logger.new().info('loading settings', source=source)
        settings = SlimSettings.from_yaml(filepath=source)
    _settings_singleton = _SettingsMetadata(source=source, settings=settings)

    return settings
