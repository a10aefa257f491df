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
Renders the bash script run by the keystore init container.

The script creates the keystore, then adds every entry found in the secure
settings volume. ``set -e`` makes any failing command abort the whole script,
so a broken keystore stops the pod from starting.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

import jinja2

from keystore_init.exceptions import KeystoreScriptRenderException

if TYPE_CHECKING:
    from keystore_init.keystore.init_container import InitContainerParameters

SCRIPT = """#!/usr/bin/env bash
set -eux
echo "Initializing keystore."
{{ keystore_create_command }}
for filename in {{ secure_settings_mount_path }}/*; do
    [[ -e "$filename" ]] || continue
    key=$(basename "$filename")
    echo "Adding "$key" to the keystore."
    {{ keystore_add_command }}
done
echo "Keystore initialization successful."
"""

# Commands are substituted verbatim: no HTML escaping, and a missing variable is an error.
_jinja_env = jinja2.Environment(
    autoescape=False,
    undefined=jinja2.StrictUndefined,
    keep_trailing_newline=True,
)

SCRIPT_TEMPLATE = _jinja_env.from_string(SCRIPT)


def render_script(parameters: InitContainerParameters) -> str:
    """
    Render the keystore init script for the given parameters.

    :param parameters: the keystore commands and the secure settings mount path
    :return: the bash script, ending with a newline
    """
    try:
        return SCRIPT_TEMPLATE.render(
            keystore_create_command=parameters.keystore_create_command,
            keystore_add_command=parameters.keystore_add_command,
            secure_settings_mount_path=parameters.secure_settings_mount_path,
        )
    except jinja2.TemplateError as e:
        raise KeystoreScriptRenderException(f"Unable to render the keystore init script: {e}") from e
