# Copyright Elasticsearch B.V. and/or licensed to Elasticsearch B.V. under one
# or more contributor license agreements. Licensed under the Elastic License 2.0;
# you may not use this file except in compliance with the Elastic License 2.0.

from typing import Optional

from share import Event

from .node import NODE_TYPE_SINK, NodeContext, ProtocolNode


class NodeChain:
    """
    Chain of nodes to process events.
    A chain must end with a sink, and a sink can only be its last node
    """

    def __init__(self, nodes: list[ProtocolNode]) -> None:
        if len(nodes) == 0:
            raise ValueError("A node chain must include at least one node")

        for node in nodes[:-1]:
            if node.type() == NODE_TYPE_SINK:
                raise ValueError(f"Sink {node.name()} must be the last node of the chain")

        if nodes[-1].type() != NODE_TYPE_SINK:
            raise ValueError(f"The last node of the chain must be a sink: {nodes[-1].name()} given")

        self.nodes = nodes

    def process(self, event: Event, context: Optional[NodeContext] = None) -> Optional[Event]:
        if context is None:
            context = {}

        current: Optional[Event] = event
        for node in self.nodes:
            assert current is not None

            current = node.process(current, context)
            if current is None:
                break

        return current

    def reopen(self) -> None:
        for node in self.nodes:
            node.reopen()
