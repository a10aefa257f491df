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

import pytest

from keystore_init.configuration import CONFIG_FILE_ENV_VAR, ENV_VAR_PREFIX


@pytest.fixture(autouse=True)
def clean_keystore_init_environment(monkeypatch):
    """Tests run against the packaged defaults only."""
    for env_var in list(os.environ):
        if env_var.startswith(ENV_VAR_PREFIX) or env_var == CONFIG_FILE_ENV_VAR:
            monkeypatch.delenv(env_var)
