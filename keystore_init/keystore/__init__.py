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

from keystore_init.keystore.init_container import (
    INIT_CONTAINER_NAME,
    InitContainerParameters,
    attach_to_pod,
    build_init_container,
    serialize_container,
)
from keystore_init.keystore.script import render_script
from keystore_init.keystore.volumes import data_volume, secure_settings_volume

__all__ = [
    "INIT_CONTAINER_NAME",
    "InitContainerParameters",
    "attach_to_pod",
    "build_init_container",
    "data_volume",
    "render_script",
    "secure_settings_volume",
    "serialize_container",
]
