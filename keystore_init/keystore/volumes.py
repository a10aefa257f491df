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
"""Volumes shared by the keystore init container and the main container."""
from __future__ import annotations

from keystore_init.configuration import conf
from keystore_init.kubernetes.volume import EmptyDirVolume, SecretVolume

DATA_VOLUME_SUFFIX = "data"


def secure_settings_volume(secret_name: str) -> SecretVolume:
    """Secret volume exposing one file per secure setting at the configured mount path."""
    return SecretVolume(
        name=conf.get_mandatory_value("keystore", "secure_settings_volume_name"),
        secret_name=secret_name,
        mount_path=conf.get_mandatory_value("keystore", "secure_settings_mount_path"),
    )


def data_volume(volume_prefix: str, data_volume_path: str) -> EmptyDirVolume:
    """Volume the keystore is written to, so the main container can pick it up."""
    return EmptyDirVolume(name=f"{volume_prefix}-{DATA_VOLUME_SUFFIX}", mount_path=data_volume_path)
