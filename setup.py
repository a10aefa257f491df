#
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
"""Setup.py for the keystore-init project."""
from typing import Dict, List

from setuptools import find_packages, setup

version = '1.0.0'

install_requires = [
    'jinja2>=3.0.0',
    # The python kubernetes client follows the Kubernetes API versions
    # (https://github.com/kubernetes-client/python#compatibility)
    'kubernetes>=21.7.0',
]

devel = [
    'pytest>=7.0',
    'pytest-cov',
]

EXTRAS_REQUIREMENTS: Dict[str, List[str]] = {
    'devel': devel,
}


def do_setup() -> None:
    """Perform the keystore-init package setup."""
    setup(
        name='keystore-init',
        description='Builds the Kubernetes init container loading secure settings into a keystore',
        license='Apache License 2.0',
        version=version,
        packages=find_packages(include=['keystore_init', 'keystore_init.*']),
        package_data={'keystore_init': ['config_templates/*.cfg']},
        include_package_data=True,
        python_requires='>=3.8',
        install_requires=install_requires,
        extras_require=EXTRAS_REQUIREMENTS,
    )


if __name__ == "__main__":
    do_setup()
