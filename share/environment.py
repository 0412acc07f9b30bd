# Copyright Elasticsearch B.V. and/or licensed to Elasticsearch B.V. under one
# or more contributor license agreements. Licensed under the Elastic License 2.0;
# you may not use this file except in compliance with the Elastic License 2.0.

import os
import platform

_ENVIRONMENT_VARIABLE = "EVENT_SINK_ENVIRONMENT"


def is_overridden() -> bool:
    return os.getenv(_ENVIRONMENT_VARIABLE) is not None


def get_environment() -> str:
    if is_overridden():
        return os.environ[_ENVIRONMENT_VARIABLE]
    else:
        return f"Python/{platform.python_version()} {platform.system()}/{platform.machine()}"
