# Copyright Elasticsearch B.V. and/or licensed to Elasticsearch B.V. under one
# or more contributor license agreements. Licensed under the Elastic License 2.0;
# you may not use this file except in compliance with the Elastic License 2.0.

import http


class FormatterException(Exception):
    """Raised when an event cannot be rendered as a document"""

    pass


class EventNotMarshaledException(Exception):
    """Raised when a sink receives an event without the format it ships"""

    pass


class IndexResponseException(Exception):
    """Raised when the cluster answers an index request with an error status"""

    def __init__(self, status: int, body: bytes):
        self.status = status
        self.body = body

        super().__init__(f"unhandled error ({_status_line(status)}): {body!r}")


def _status_line(status: int) -> str:
    try:
        return f"{status} {http.HTTPStatus(status).phrase}"
    except ValueError:
        return str(status)
