# Copyright Elasticsearch B.V. and/or licensed to Elasticsearch B.V. under one
# or more contributor license agreements. Licensed under the Elastic License 2.0;
# you may not use this file except in compliance with the Elastic License 2.0.

from typing import Any, Optional

from share import Event, format_rfc3339, json_document, json_normaliser, shared_logger

from .exceptions import FormatterException
from .node import JSON_FORMAT, NODE_TYPE_FORMATTER, NodeContext


class ElasticsearchFormatter:
    """
    Elasticsearch Formatter.
    Renders the event as a JSON document and stores it in the event under the `json` format
    """

    def process(self, event: Event, context: Optional[NodeContext] = None) -> Optional[Event]:
        try:
            payload = json_normaliser(event.payload)
        except (TypeError, ValueError, OverflowError) as e:
            raise FormatterException(f"cannot marshal payload of event type {event.type}: {e}") from e

        document: dict[str, Any] = {
            "created_at": format_rfc3339(event.created_at),
            "event_type": event.type,
            "payload": payload,
        }

        try:
            formatted = json_document(document)
        except (TypeError, ValueError) as e:
            raise FormatterException(f"cannot encode document of event type {event.type}: {e}") from e

        shared_logger.debug("elasticsearch formatter", extra={"event_type": event.type, "size": len(formatted)})

        event.formatted_as(JSON_FORMAT, formatted)

        return event

    def reopen(self) -> None:
        return

    def type(self) -> str:
        return NODE_TYPE_FORMATTER

    def name(self) -> str:
        return "ElasticsearchFormatter"
