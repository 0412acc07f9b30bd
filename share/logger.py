# Copyright Elasticsearch B.V. and/or licensed to Elasticsearch B.V. under one
# or more contributor license agreements. Licensed under the Elastic License 2.0;
# you may not use this file except in compliance with the Elastic License 2.0.

import logging
import os

import ecs_logging
from elasticapm.handlers.logging import LoggingFilter

log_level = logging.getLevelName(os.getenv("LOG_LEVEL", "INFO").upper())

# Sink and formatter records share one logger so that the driver controls a single handler
logger = logging.getLogger("event_sink")
logger.setLevel(log_level)
logger.propagate = False

# ECS formatted records on stderr
handler = logging.StreamHandler()
handler.setFormatter(ecs_logging.StdlibFormatter())

# Trace ids from an active APM transaction, if any
handler.addFilter(LoggingFilter())
logger.handlers = [handler]
