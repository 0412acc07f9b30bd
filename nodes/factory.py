# Copyright Elasticsearch B.V. and/or licensed to Elasticsearch B.V. under one
# or more contributor license agreements. Licensed under the Elastic License 2.0;
# you may not use this file except in compliance with the Elastic License 2.0.

from typing import Any, Callable

from share import ElasticsearchOutput, Output

from .chain import NodeChain
from .formatter import ElasticsearchFormatter
from .node import ProtocolNode
from .sink import ElasticsearchSink, elasticsearch_client

_init_definition_by_node_type: dict[str, dict[str, Any]] = {
    "elasticsearch_formatter": {
        "class": ElasticsearchFormatter,
    },
    "elasticsearch_sink": {
        "class": ElasticsearchSink,
    },
}


class NodeFactory:
    """
    Node factory.
    Provides static methods to instantiate nodes and node chains
    """

    @staticmethod
    def create_from_output(output: Output) -> ProtocolNode:
        """
        Instantiates the Sink delivering to the given Output
        """

        if output.type == "elasticsearch":
            if not isinstance(output, ElasticsearchOutput):
                raise ValueError(f"output expected to be ElasticsearchOutput type, given {type(output)}")

            client = elasticsearch_client(
                elasticsearch_url=output.elasticsearch_url,
                cloud_id=output.cloud_id,
                username=output.username,
                password=output.password,
                api_key=output.api_key,
                ssl_assert_fingerprint=output.ssl_assert_fingerprint,
                request_timeout=output.request_timeout,
                max_retries=output.max_retries,
            )

            return NodeFactory.create(
                node_type="elasticsearch_sink",
                client=client,
                index_name=output.index_name,
                format_name=output.format,
            )

        raise ValueError(f"You must provide one of the following outputs: elasticsearch. {output.type} given")

    @staticmethod
    def create_chain_from_output(output: Output) -> NodeChain:
        """
        Instantiates the formatter and sink chain for the given Output
        """

        sink = NodeFactory.create_from_output(output)

        return NodeChain([NodeFactory.create(node_type="elasticsearch_formatter"), sink])

    @staticmethod
    def create(node_type: str, **kwargs: Any) -> ProtocolNode:
        """
        Instantiates a concrete Node given a node type and the node init kwargs
        """

        if node_type not in _init_definition_by_node_type:
            raise ValueError(
                "You must provide one of the following node types: "
                + f"{', '.join(_init_definition_by_node_type.keys())}. {node_type} given"
            )

        node_definition = _init_definition_by_node_type[node_type]

        node_builder: Callable[..., ProtocolNode] = node_definition["class"]

        return node_builder(**kwargs)
