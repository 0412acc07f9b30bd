# Copyright Elasticsearch B.V. and/or licensed to Elasticsearch B.V. under one
# or more contributor license agreements. Licensed under the Elastic License 2.0;
# you may not use this file except in compliance with the Elastic License 2.0.

import datetime
import os
import sys
from typing import Any, Iterable, Iterator, Optional

from nodes import NodeChain, NodeContext, NodeFactory
from share import Event, json_parser, parse_config, shared_logger


def event_from_record(record: dict[str, Any]) -> Event:
    """
    Builds an Event from a record with `event_type`, `payload` and an optional ISO 8601 `created_at`
    """

    if "event_type" not in record:
        raise ValueError("`event_type` must be provided in record")

    created_at: Optional[datetime.datetime] = None
    if record.get("created_at"):
        # fromisoformat() does not accept the `Z` suffix before Python 3.11
        created_at = datetime.datetime.fromisoformat(str(record["created_at"]).replace("Z", "+00:00"))

    return Event(event_type=record["event_type"], payload=record.get("payload"), created_at=created_at)


def records_from_lines(lines: Iterable[str]) -> Iterator[dict[str, Any]]:
    """
    Parses NDJSON lines into records.
    Blank lines are ignored, lines that are not a JSON object are logged and skipped
    """

    for line_n, line in enumerate(lines):
        if not line.strip():
            continue

        try:
            record = json_parser(line)
        except ValueError:
            shared_logger.exception("cannot parse record", extra={"line_number": line_n + 1})
            continue

        if not isinstance(record, dict):
            shared_logger.error("record must be a JSON object", extra={"line_number": line_n + 1})
            continue

        yield record


def forward(config_yaml: str, records: Iterable[dict[str, Any]], context: Optional[NodeContext] = None) -> int:
    """
    Delivers every record to every configured output.
    Failures are logged and the record skipped for that output, nothing is retried.
    Returns the number of successful deliveries
    """

    config = parse_config(config_yaml)
    chains: list[NodeChain] = [NodeFactory.create_chain_from_output(output) for output in config.outputs]

    delivered = 0
    for record_n, record in enumerate(records):
        for chain in chains:
            try:
                # every chain renders its own copy of the event
                event = event_from_record(record)
                chain.process(event, context)
            except Exception:
                shared_logger.exception("exception raised while delivering event", extra={"record_number": record_n})
                continue

            delivered += 1

    shared_logger.info("delivery completed", extra={"delivered": delivered})

    return delivered


def main() -> int:
    config_file = os.getenv("CONFIG_FILE", "")
    if not config_file:
        shared_logger.error("CONFIG_FILE environment variable must be set")
        return 1

    with open(config_file, "r") as f:
        config_yaml = f.read()

    records = records_from_lines(sys.stdin)

    forward(config_yaml, records)

    return 0


if __name__ == "__main__":
    sys.exit(main())
