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
from logging.config import dictConfig
from typing import Any

from keystore_init.exceptions import KeystoreInitConfigException

log = logging.getLogger(__name__)


def configure_logging(logging_config: dict[str, Any] | None = None) -> dict[str, Any]:
    """
    Configure logging for the ``keystore_init`` loggers.

    Callers embedding the library usually own logging themselves; this is only
    needed when running standalone.
    """
    if logging_config is None:
        from keystore_init.config_templates.default_logging import DEFAULT_LOGGING_CONFIG

        logging_config = DEFAULT_LOGGING_CONFIG
    try:
        dictConfig(logging_config)
    except (ValueError, KeyError, TypeError, AttributeError, ImportError) as e:
        log.error("Unable to load the logging config: %s", e)
        raise KeystoreInitConfigException(f"Unable to load the logging config: {e}") from e

    return logging_config
