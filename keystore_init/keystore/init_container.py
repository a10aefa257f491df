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
Builds the init container loading secure settings into a keystore.

The container inherits its image from the pod template, so it can use the
keystore tool shipped with the application image (Kibana, APM server...).
"""
from __future__ import annotations

import copy
import logging
from dataclasses import dataclass
from typing import Any

import kubernetes.client.models as k8s
from kubernetes.client import ApiClient

from keystore_init.configuration import conf
from keystore_init.keystore.script import render_script
from keystore_init.keystore.volumes import data_volume
from keystore_init.kubernetes.volume import SecretVolume

log = logging.getLogger(__name__)

INIT_CONTAINER_NAME = "elastic-internal-init-keystore"

IMAGE_PULL_POLICY = "IfNotPresent"

SCRIPT_INTERPRETER = ["/usr/bin/env", "bash", "-c"]


@dataclass(frozen=True)
class InitContainerParameters:
    """
    Parameters of the keystore init script and container.

    :param secure_settings_mount_path: where the user provided secure settings are mounted
    :param keystore_create_command: command creating the keystore, run once
    :param keystore_add_command: command adding one entry, run for each secure setting.
        It can refer to the ``$key`` and ``$filename`` shell variables.
    :param data_volume_path: where the keystore is written. When empty, the caller
        already takes care of mounting the data volume.
    :param resources: resources for the init container. Defaults to the
        ``[keystore]`` resources from the configuration.
    """

    secure_settings_mount_path: str
    keystore_create_command: str
    keystore_add_command: str
    data_volume_path: str = ""
    resources: k8s.V1ResourceRequirements | dict | None = None

    def __post_init__(self):
        if not self.secure_settings_mount_path:
            raise ValueError("secure_settings_mount_path must not be empty")


def default_resources() -> k8s.V1ResourceRequirements | None:
    """Resources from the configuration, or None when none are configured."""
    requests = {
        name: value
        for name, value in (
            ("cpu", conf.get("keystore", "init_container_requests_cpu", fallback="")),
            ("memory", conf.get("keystore", "init_container_requests_memory", fallback="")),
        )
        if value
    }
    limits = {
        name: value
        for name, value in (
            ("cpu", conf.get("keystore", "init_container_limits_cpu", fallback="")),
            ("memory", conf.get("keystore", "init_container_limits_memory", fallback="")),
        )
        if value
    }
    if not requests and not limits:
        return None
    return k8s.V1ResourceRequirements(requests=requests or None, limits=limits or None)


def build_init_container(
    secure_settings_volume: SecretVolume,
    volume_prefix: str,
    parameters: InitContainerParameters,
) -> k8s.V1Container:
    """
    Returns an init container running a bash script which loads the secure
    settings into a keystore.

    When ``parameters.resources`` is None, the resources come from the
    ``[keystore] init_container_*`` options, so the result then depends on the
    configuration file and the ``KEYSTORE_INIT__KEYSTORE__INIT_CONTAINER_*``
    environment variables.

    :param secure_settings_volume: the volume holding one file per secure setting
    :param volume_prefix: prefix of the data volume name
    :param parameters: keystore commands, paths and resources
    :return: the init container, without image
    """
    script = render_script(parameters)

    volume_mounts = [
        # access secure settings
        secure_settings_volume.volume_mount(),
    ]

    # the caller might already be mounting the data volume itself
    if parameters.data_volume_path:
        # write the keystore into the data volume
        volume_mounts.append(data_volume(volume_prefix, parameters.data_volume_path).volume_mount())

    log.debug(
        "Building %s init container with volume mounts %s",
        INIT_CONTAINER_NAME,
        [mount.name for mount in volume_mounts],
    )

    resources = parameters.resources
    if resources is None:
        resources = default_resources()

    return k8s.V1Container(
        # image is inherited from the pod template defaults
        name=INIT_CONTAINER_NAME,
        image_pull_policy=IMAGE_PULL_POLICY,
        security_context=k8s.V1SecurityContext(privileged=False),
        command=[*SCRIPT_INTERPRETER, script],
        volume_mounts=volume_mounts,
        resources=copy.deepcopy(resources),
    )


def attach_to_pod(pod: k8s.V1Pod, init_container: k8s.V1Container) -> k8s.V1Pod:
    """
    Attaches the init container to a copy of the pod.

    An init container with the same name is replaced where it stands,
    otherwise the init container runs after the existing ones.

    :return: Copy of the Pod object
    """
    cp_pod = copy.deepcopy(pod)
    init_containers = list(cp_pod.spec.init_containers or [])
    for index, existing in enumerate(init_containers):
        if existing.name == init_container.name:
            init_containers[index] = copy.deepcopy(init_container)
            break
    else:
        init_containers.append(copy.deepcopy(init_container))
    cp_pod.spec.init_containers = init_containers
    return cp_pod


def serialize_container(init_container: k8s.V1Container) -> dict[str, Any]:
    """Converts the container to the dict sent to the Kubernetes API."""
    api_client = ApiClient()
    return api_client.sanitize_for_serialization(init_container)
