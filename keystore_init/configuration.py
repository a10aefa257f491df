# Licensed to the Apache Software Foundation (ASF) under one
# or more contributor license agreements.  See the NOTICE file
# distributed with this work for additional information
# regarding copyright ownership.  The ASF licenses this file
# to you under the Apache License, Version 2.0 (the
# "License"); you may not use this file except in compliance
# with the License.  You may obtain a copy of the License at
#
#   http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing,
# software distributed under the License is distributed on an
# "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY
# KIND, either express or implied.  See the License for the
# specific language governing permissions and limitations
# under the License.
from __future__ import annotations

import logging
import os
from configparser import ConfigParser
from typing import overload

from keystore_init.exceptions import KeystoreInitConfigException

log = logging.getLogger(__name__)

ENV_VAR_PREFIX = "KEYSTORE_INIT__"

CONFIG_FILE_ENV_VAR = "KEYSTORE_INIT_CONFIG"


@overload
def expand_env_var(env_var: None) -> None:
    ...


@overload
def expand_env_var(env_var: str) -> str:
    ...


def expand_env_var(env_var: str | None) -> str | None:
    """
    Expand (potentially nested) env vars.

    Repeat and apply `expandvars` and `expanduser` until
    interpolation stops having any effect.
    """
    if not env_var:
        return env_var
    while True:
        interpolated = os.path.expanduser(os.path.expandvars(str(env_var)))
        if interpolated == env_var:
            return interpolated
        else:
            env_var = interpolated


def _default_config_file_path(file_name: str) -> str:
    templates_dir = os.path.join(os.path.dirname(__file__), "config_templates")
    return os.path.join(templates_dir, file_name)


class KeystoreInitConfigParser(ConfigParser):
    """
    Custom keystore-init Configparser supporting defaults and environment overrides.

    Values are looked up in the environment first, with the format
    ``KEYSTORE_INIT__{SECTION}__{KEY}`` (note the double underscore), then in
    the loaded configuration files.
    """

    def __init__(self, default_config: str | None = None, *args, **kwargs):
        super().__init__(*args, **kwargs)
        if default_config is not None:
            self.read_string(default_config)

    def _env_var_name(self, section: str, key: str) -> str:
        return f"{ENV_VAR_PREFIX}{section.replace('.', '_').upper()}__{key.upper()}"

    def _get_env_var_option(self, section: str, key: str) -> str | None:
        env_var = self._env_var_name(section, key)
        if env_var in os.environ:
            return expand_env_var(os.environ[env_var])
        return None

    def get_mandatory_value(self, section: str, key: str, **kwargs) -> str:
        value = self.get(section, key, **kwargs)
        if value is None:
            raise KeystoreInitConfigException(f"The value {section}/{key} should be set!")
        return value

    def get(self, section: str, key: str, **kwargs) -> str | None:  # type: ignore[override]
        section = section.lower()
        key = key.lower()

        option = self._get_env_var_option(section, key)
        if option is not None:
            return option

        if super().has_option(section, key):
            return expand_env_var(super().get(section, key, **kwargs))

        if "fallback" in kwargs:
            return kwargs["fallback"]

        log.warning("section/key [%s/%s] not found in config", section, key)
        raise KeystoreInitConfigException(f"section/key [{section}/{key}] not found in config")

    def has_option(self, section: str, option: str) -> bool:
        return self.get(section, option, fallback=None) is not None


def _read_default_config_file(file_name: str) -> str:
    with open(_default_config_file_path(file_name), encoding="utf-8") as config_file:
        return config_file.read()


def initialize_config() -> KeystoreInitConfigParser:
    """
    Load the keystore-init configuration.

    Defaults come from the packaged template; the file named by the
    ``KEYSTORE_INIT_CONFIG`` environment variable is layered on top when set.
    """
    config_parser = KeystoreInitConfigParser(default_config=DEFAULT_CONFIG)
    user_config_file = os.environ.get(CONFIG_FILE_ENV_VAR)
    if user_config_file:
        user_config_file = expand_env_var(user_config_file)
        if not os.path.isfile(user_config_file):
            raise KeystoreInitConfigException(f"Config file {user_config_file} does not exist")
        log.debug("Reading the config from %s", user_config_file)
        config_parser.read(user_config_file, encoding="utf-8")
    return config_parser


DEFAULT_CONFIG = _read_default_config_file("default_keystore_init.cfg")

conf = initialize_config()
