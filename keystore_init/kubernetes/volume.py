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
"""
Classes describing the volumes mounted into the keystore init container
"""
from __future__ import annotations

import kubernetes.client.models as k8s


class SecretVolume:
    """
    A volume populated from a Kubernetes secret, mounted read-only.

    :param name: the name of the volume
    :param secret_name: the name of the secret backing the volume
    :param mount_path: where the secret entries appear in the container
    :param items: optional list of ``k8s.V1KeyToPath`` selecting secret keys
    """

    def __init__(
        self,
        name: str,
        secret_name: str,
        mount_path: str,
        items: list[k8s.V1KeyToPath] | None = None,
    ):
        self.name = name
        self.secret_name = secret_name
        self.mount_path = mount_path
        self.items = items

    def volume_mount(self) -> k8s.V1VolumeMount:
        return k8s.V1VolumeMount(name=self.name, mount_path=self.mount_path, read_only=True)

    def to_k8s_client_obj(self) -> k8s.V1Volume:
        return k8s.V1Volume(
            name=self.name,
            secret=k8s.V1SecretVolumeSource(secret_name=self.secret_name, items=self.items),
        )

    def __eq__(self, other):
        if not isinstance(other, SecretVolume):
            return NotImplemented
        return (self.name, self.secret_name, self.mount_path, self.items) == (
            other.name,
            other.secret_name,
            other.mount_path,
            other.items,
        )

    def __repr__(self):
        return (
            f"SecretVolume(name={self.name!r}, secret_name={self.secret_name!r}, "
            f"mount_path={self.mount_path!r})"
        )


class EmptyDirVolume:
    """
    A scratch volume living as long as the pod, mounted read-write.

    :param name: the name of the volume
    :param mount_path: where the volume is mounted in the container
    """

    def __init__(self, name: str, mount_path: str):
        self.name = name
        self.mount_path = mount_path

    def volume_mount(self) -> k8s.V1VolumeMount:
        return k8s.V1VolumeMount(name=self.name, mount_path=self.mount_path, read_only=False)

    def to_k8s_client_obj(self) -> k8s.V1Volume:
        return k8s.V1Volume(name=self.name, empty_dir=k8s.V1EmptyDirVolumeSource())

    def __eq__(self, other):
        if not isinstance(other, EmptyDirVolume):
            return NotImplemented
        return (self.name, self.mount_path) == (other.name, other.mount_path)

    def __repr__(self):
        return f"EmptyDirVolume(name={self.name!r}, mount_path={self.mount_path!r})"
