# Copyright Elasticsearch B.V. and/or licensed to Elasticsearch B.V. under one
# or more contributor license agreements. Licensed under the Elastic License 2.0;
# you may not use this file except in compliance with the Elastic License 2.0.

from typing import Any, Optional

import elasticapm  # noqa: F401
from elasticsearch import ApiError, Elasticsearch
from elasticsearch.exceptions import SerializationError
from elasticsearch.serializer import Serializer

from share import Event, create_user_agent, get_document_id, json_dumper, json_parser, shared_logger
from share.environment import get_environment
from share.version import version

from .exceptions import EventNotMarshaledException, IndexResponseException
from .node import CONTEXT_REQUEST_TIMEOUT, JSON_FORMAT, NODE_TYPE_SINK, NodeContext


class JSONSerializer(Serializer):
    """
    Bodies already rendered by a formatter are forwarded untouched:
    the indexed bytes must be the ones the document id was computed from
    """

    mimetype = "application/json"

    def loads(self, data: bytes) -> Any:
        try:
            return json_parser(data)
        except Exception as e:
            raise SerializationError(f"unable to deserialize response body: {e}", errors=(e,))

    def dumps(self, data: Any) -> bytes:
        if isinstance(data, bytes):
            return data

        if isinstance(data, str):
            return data.encode("utf-8")

        try:
            return json_dumper(data).encode("utf-8")
        except Exception as e:
            raise SerializationError(f"unable to serialize request body: {e}", errors=(e,))


def elasticsearch_client(
    elasticsearch_url: str = "",
    cloud_id: str = "",
    username: str = "",
    password: str = "",
    api_key: str = "",
    ssl_assert_fingerprint: str = "",
    request_timeout: float = 30,
    max_retries: int = 4,
) -> Elasticsearch:
    """
    Builds the client shared by every sink writing to the same cluster.
    Retries on connection errors and timeouts are left to the client
    """

    es_client_kwargs: dict[str, Any] = {}
    if elasticsearch_url:
        es_client_kwargs["hosts"] = [elasticsearch_url]
    elif cloud_id:
        es_client_kwargs["cloud_id"] = cloud_id
    else:
        raise ValueError("You must provide one between elasticsearch_url or cloud_id")

    if api_key:
        es_client_kwargs["api_key"] = api_key
    elif username:
        es_client_kwargs["basic_auth"] = (username, password)
    else:
        raise ValueError("You must provide one between username and password or api_key")

    if ssl_assert_fingerprint:
        es_client_kwargs["ssl_assert_fingerprint"] = ssl_assert_fingerprint

    es_client_kwargs["serializer"] = JSONSerializer()
    es_client_kwargs["request_timeout"] = request_timeout
    es_client_kwargs["max_retries"] = max_retries
    es_client_kwargs["http_compress"] = True
    es_client_kwargs["retry_on_timeout"] = True
    es_client_kwargs["headers"] = {
        "User-Agent": create_user_agent(sink_version=version, environment=get_environment())
    }

    return Elasticsearch(**es_client_kwargs)


class ElasticsearchSink:
    """
    Elasticsearch Sink.
    Indexes every formatted event as a single document whose id is the SHA-256 of its body,
    so delivering the same event twice overwrites the same document
    """

    def __init__(self, client: Elasticsearch, index_name: str = "", format_name: str = JSON_FORMAT):
        if not index_name:
            raise ValueError("You must provide index_name")

        self._client = client
        self._index_name = index_name
        self._format = format_name or JSON_FORMAT

    def process(self, event: Event, context: Optional[NodeContext] = None) -> Optional[Event]:
        formatted = event.format(self._format)
        if formatted is None:
            raise EventNotMarshaledException("event was not marshaled")

        document_id = get_document_id(formatted)

        client = self._client
        if context is not None and context.get(CONTEXT_REQUEST_TIMEOUT) is not None:
            client = client.options(request_timeout=context[CONTEXT_REQUEST_TIMEOUT])

        # The client reads and releases the response before returning or raising
        try:
            response = client.index(index=self._index_name, id=document_id, document=formatted, refresh=True)
        except ApiError as e:
            shared_logger.warning(
                "elasticsearch sink", extra={"_id": document_id, "_index": self._index_name, "status": e.meta.status}
            )
            raise IndexResponseException(status=e.meta.status, body=_raw_body(e.body)) from e

        self._validate_response_is_not_error(status=response.meta.status, body=response.body)

        shared_logger.debug(
            "elasticsearch sink", extra={"_id": document_id, "_index": self._index_name, "status": response.meta.status}
        )

        # Sinks are leaves: nothing downstream can consume the event
        return None

    def reopen(self) -> None:
        return

    def type(self) -> str:
        return NODE_TYPE_SINK

    def name(self) -> str:
        return "ElasticsearchSink"

    @staticmethod
    def _validate_response_is_not_error(status: int, body: Any) -> None:
        """
        Fallback check on returned responses: the client already raises ApiError for
        4xx and 5xx, so only a non-2xx status it lets through (3xx) ends up here
        """
        if status <= 299:
            return

        raise IndexResponseException(status=status, body=_raw_body(body))


def _raw_body(body: Any) -> bytes:
    if body is None:
        return b""

    if isinstance(body, bytes):
        return body

    if isinstance(body, str):
        return body.encode("utf-8")

    return json_dumper(body).encode("utf-8")
