# Copyright Elasticsearch B.V. and/or licensed to Elasticsearch B.V. under one
# or more contributor license agreements. Licensed under the Elastic License 2.0;
# you may not use this file except in compliance with the Elastic License 2.0.

import datetime
from typing import Optional
from unittest import TestCase

import mock
import pytest

from nodes import (
    JSON_FORMAT,
    NODE_TYPE_FILTER,
    ElasticsearchFormatter,
    ElasticsearchSink,
    FormatterException,
    NodeChain,
    NodeContext,
)
from share import Event

_created_at = datetime.datetime(2024, 1, 1, tzinfo=datetime.timezone.utc)


class DropAllFilter:
    def __init__(self) -> None:
        self.reopened = False

    def process(self, event: Event, context: Optional[NodeContext] = None) -> Optional[Event]:
        return None

    def reopen(self) -> None:
        self.reopened = True

    def type(self) -> str:
        return NODE_TYPE_FILTER

    def name(self) -> str:
        return "DropAllFilter"


def _sink(client: mock.MagicMock) -> ElasticsearchSink:
    client.index.return_value = mock.MagicMock(meta=mock.MagicMock(status=201), body={"result": "created"})
    return ElasticsearchSink(client=client, index_name="audit")


@pytest.mark.unit
class TestNodeChain(TestCase):
    def test_init(self) -> None:
        with self.subTest("empty chain"):
            with self.assertRaisesRegex(ValueError, "A node chain must include at least one node"):
                NodeChain([])

        with self.subTest("no sink at the end"):
            with self.assertRaisesRegex(
                ValueError, "The last node of the chain must be a sink: ElasticsearchFormatter given"
            ):
                NodeChain([ElasticsearchFormatter()])

        with self.subTest("sink before the end"):
            with self.assertRaisesRegex(ValueError, "Sink ElasticsearchSink must be the last node of the chain"):
                NodeChain([_sink(mock.MagicMock()), ElasticsearchFormatter(), _sink(mock.MagicMock())])

    def test_process(self) -> None:
        with self.subTest("formatter then sink"):
            client = mock.MagicMock()
            chain = NodeChain([ElasticsearchFormatter(), _sink(client)])
            event = Event(event_type="login", payload={"user": "alice"}, created_at=_created_at)

            assert chain.process(event) is None
            assert event.format(JSON_FORMAT) is not None
            assert client.index.call_args.kwargs["document"] == event.format(JSON_FORMAT)

        with self.subTest("chain stops when a node drops the event"):
            client = mock.MagicMock()
            chain = NodeChain([DropAllFilter(), ElasticsearchFormatter(), _sink(client)])
            event = Event(event_type="login", payload={"user": "alice"}, created_at=_created_at)

            assert chain.process(event) is None
            assert event.format(JSON_FORMAT) is None
            client.index.assert_not_called()

        with self.subTest("errors are propagated"):
            client = mock.MagicMock()
            chain = NodeChain([ElasticsearchFormatter(), _sink(client)])
            event = Event(event_type="login", payload={"handle": object()}, created_at=_created_at)

            with self.assertRaises(FormatterException):
                chain.process(event)

            client.index.assert_not_called()

    def test_reopen(self) -> None:
        drop_all = DropAllFilter()
        chain = NodeChain([drop_all, ElasticsearchFormatter(), _sink(mock.MagicMock())])

        chain.reopen()

        assert drop_all.reopened
