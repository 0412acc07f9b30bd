# Copyright Elasticsearch B.V. and/or licensed to Elasticsearch B.V. under one
# or more contributor license agreements. Licensed under the Elastic License 2.0;
# you may not use this file except in compliance with the Elastic License 2.0.

from .config import Config, ElasticsearchOutput, Output, parse_config
from .events import Event
from .json import json_document, json_dumper, json_normaliser, json_parser
from .logger import logger as shared_logger
from .utils import create_user_agent, format_rfc3339, get_document_id
