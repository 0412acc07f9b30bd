# Copyright Elasticsearch B.V. and/or licensed to Elasticsearch B.V. under one
# or more contributor license agreements. Licensed under the Elastic License 2.0;
# you may not use this file except in compliance with the Elastic License 2.0.

from .chain import NodeChain
from .exceptions import EventNotMarshaledException, FormatterException, IndexResponseException
from .factory import NodeFactory
from .formatter import ElasticsearchFormatter
from .node import (
    CONTEXT_REQUEST_TIMEOUT,
    JSON_FORMAT,
    NODE_TYPE_FILTER,
    NODE_TYPE_FORMATTER,
    NODE_TYPE_SINK,
    NodeContext,
    ProtocolNode,
)
from .sink import ElasticsearchSink, JSONSerializer, elasticsearch_client
