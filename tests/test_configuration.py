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

import os
import textwrap
from unittest import mock

import pytest

from keystore_init.configuration import (
    DEFAULT_CONFIG,
    KeystoreInitConfigParser,
    expand_env_var,
    initialize_config,
)
from keystore_init.exceptions import KeystoreInitConfigException

TEST_CONFIG = textwrap.dedent(
    """\
    [test]
    key1 = keystore_init_lib
    key2 = $HOME/keystore
    """
)


@pytest.fixture
def test_conf():
    return KeystoreInitConfigParser(default_config=TEST_CONFIG)


class TestConf:
    def test_get(self, test_conf):
        assert test_conf.get("test", "key1") == "keystore_init_lib"

    def test_case_insensitive(self, test_conf):
        assert test_conf.get("TEST", "KEY1") == "keystore_init_lib"

    @mock.patch.dict("os.environ", {"KEYSTORE_INIT__TEST__KEY1": "from_env"})
    def test_env_var_overrides_file(self, test_conf):
        assert test_conf.get("test", "key1") == "from_env"

    @mock.patch.dict("os.environ", {"KEYSTORE_INIT__TEST__MISSING": "from_env"})
    def test_env_var_without_file_value(self, test_conf):
        assert test_conf.get("test", "missing") == "from_env"
        assert test_conf.has_option("test", "missing")

    def test_env_var_expanded(self, test_conf):
        assert test_conf.get("test", "key2") == os.path.expandvars("$HOME/keystore")

    def test_fallback(self, test_conf):
        assert test_conf.get("test", "missing", fallback="default") == "default"
        assert not test_conf.has_option("test", "missing")

    def test_missing_raises(self, test_conf):
        with pytest.raises(KeystoreInitConfigException, match=r"section/key \[test/missing\] not found"):
            test_conf.get("test", "missing")

    def test_get_mandatory_value(self, test_conf):
        assert test_conf.get_mandatory_value("test", "key1") == "keystore_init_lib"
        with pytest.raises(KeystoreInitConfigException, match="should be set"):
            test_conf.get_mandatory_value("test", "missing", fallback=None)


class TestExpandEnvVar:
    @mock.patch.dict("os.environ", {"KEYSTORE_DIR": "/data", "NESTED": "$KEYSTORE_DIR/keystore"})
    def test_nested(self):
        assert expand_env_var("$NESTED") == "/data/keystore"

    def test_empty(self):
        assert expand_env_var(None) is None
        assert expand_env_var("") == ""


class TestInitializeConfig:
    def test_defaults(self):
        config = initialize_config()

        assert config.get("keystore", "secure_settings_volume_name") == "elastic-internal-secure-settings"
        assert config.get("keystore", "secure_settings_mount_path") == "/mnt/elastic-internal/secure-settings"
        assert config.get("keystore", "init_container_requests_cpu") == ""
        assert config.get("logging", "logging_level") == "INFO"
        assert "%(message)s" in config.get("logging", "log_format")

    def test_default_config_is_packaged(self):
        assert "[keystore]" in DEFAULT_CONFIG

    def test_user_config_file(self, tmp_path):
        config_file = tmp_path / "keystore_init.cfg"
        config_file.write_text("[keystore]\nsecure_settings_mount_path = /custom/secure-settings\n")

        with mock.patch.dict("os.environ", {"KEYSTORE_INIT_CONFIG": str(config_file)}):
            config = initialize_config()

        assert config.get("keystore", "secure_settings_mount_path") == "/custom/secure-settings"
        assert config.get("keystore", "secure_settings_volume_name") == "elastic-internal-secure-settings"

    def test_missing_user_config_file(self, tmp_path):
        missing = str(tmp_path / "missing.cfg")
        with mock.patch.dict("os.environ", {"KEYSTORE_INIT_CONFIG": missing}):
            with pytest.raises(KeystoreInitConfigException, match="does not exist"):
                initialize_config()
