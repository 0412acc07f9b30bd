# Copyright Elasticsearch B.V. and/or licensed to Elasticsearch B.V. under one
# or more contributor license agreements. Licensed under the Elastic License 2.0;
# you may not use this file except in compliance with the Elastic License 2.0.
import datetime
import hashlib
import sys


def get_document_id(src: bytes) -> str:
    return hashlib.sha256(src).hexdigest()


def format_rfc3339(timestamp: datetime.datetime) -> str:
    """
    Formats a datetime as RFC 3339.
    Fractional seconds are trimmed of trailing zeros, UTC is rendered as `Z`.
    Naive datetimes are considered UTC
    """
    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=datetime.timezone.utc)

    formatted = timestamp.replace(microsecond=0, tzinfo=None).isoformat()
    if timestamp.microsecond > 0:
        formatted += "." + f"{timestamp.microsecond:06d}".rstrip("0")

    offset = timestamp.utcoffset()
    assert offset is not None

    offset_seconds = int(offset.total_seconds())
    if offset_seconds == 0:
        return formatted + "Z"

    sign = "+" if offset_seconds > 0 else "-"
    offset_seconds = abs(offset_seconds)

    return f"{formatted}{sign}{offset_seconds // 3600:02d}:{(offset_seconds % 3600) // 60:02d}"


def create_user_agent(sink_version: str, environment: str = sys.version) -> str:
    """Creates the 'User-Agent' header given the sink version and running environment"""
    return f"ElasticsearchEventSink/{sink_version} ({environment})"
