# Copyright Elasticsearch B.V. and/or licensed to Elasticsearch B.V. under one
# or more contributor license agreements. Licensed under the Elastic License 2.0;
# you may not use this file except in compliance with the Elastic License 2.0.

from typing import Any, Optional, Protocol

from share import Event

# NodeContext is passed along every call of a pipeline; nodes read the keys they understand.
NodeContext = dict[str, Any]

# Per request deadline in seconds, honoured by nodes performing network calls
CONTEXT_REQUEST_TIMEOUT = "request_timeout"

JSON_FORMAT = "json"

NODE_TYPE_FILTER = "filter"
NODE_TYPE_FORMATTER = "formatter"
NODE_TYPE_SINK = "sink"


class ProtocolNode(Protocol):
    """
    Protocol for pipeline Node components
    """

    def process(self, event: Event, context: Optional[NodeContext] = None) -> Optional[Event]:
        pass  # pragma: no cover

    def reopen(self) -> None:
        pass  # pragma: no cover

    def type(self) -> str:
        pass  # pragma: no cover

    def name(self) -> str:
        pass  # pragma: no cover
