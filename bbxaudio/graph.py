"""A graph of connected DSP nodes, evaluated one block at a time."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from types import MappingProxyType

from bbxaudio.buffer import AudioBuffer
from bbxaudio.context import Context
from bbxaudio.errors import (
    CannotAddEffectorNodeError,
    CannotAddGeneratorNodeError,
    CannotAddNodeError,
    CannotRetrieveDestinationNodeError,
    CannotRetrieveSourceNodeError,
    CannotUpdateGraphProcessingOrderError,
    ConnectionAlreadyCreatedError,
    ConnectionHasNoNodeError,
    DspError,
    GraphContainsCycleError,
    GraphContainsNonConvergingPathsError,
    NodeHasNoInputsError,
    NodeHasNoOutputsError,
)
from bbxaudio.node import Effector, Generator, Node, NodeId
from bbxaudio.process import OperationType


class Graph:
    """Holds nodes and the connections between them."""

    def __init__(self, context: Context) -> None:
        self.context = context
        self._nodes: dict[NodeId, Node] = {}
        self._connections: list[tuple[NodeId, NodeId]] = []
        self._processes: dict[NodeId, list[AudioBuffer]] = {}
        self._processing_order: list[NodeId] = []

    @property
    def nodes(self) -> Mapping[NodeId, Node]:
        """The graph's nodes by id (read-only)."""
        return MappingProxyType(self._nodes)

    @property
    def connections(self) -> tuple[tuple[NodeId, NodeId], ...]:
        """The (source, destination) pairs, in the order they were made."""
        return tuple(self._connections)

    @property
    def processing_order(self) -> tuple[NodeId, ...]:
        """Node ids in evaluation order; empty until prepared for playback."""
        return tuple(self._processing_order)

    def add_node(self, node: Node, error: DspError | None = None) -> NodeId:
        """Add ``node`` with silent output buffers and return its id."""
        self._nodes[node.id] = node
        self._processes[node.id] = [
            AudioBuffer(self.context.buffer_size)
            for _ in range(self.context.num_channels)
        ]
        if self._nodes.get(node.id) is not node:
            raise error if error is not None else CannotAddNodeError()
        return node.id

    def add_effector(self, effector: Effector) -> NodeId:
        """Add a node for ``effector`` and return its id."""
        node = Node.from_effector(self.context, effector)
        return self.add_node(node, CannotAddEffectorNodeError())

    def add_generator(self, generator: Generator) -> NodeId:
        """Add a node for ``generator`` and return its id."""
        node = Node.from_generator(self.context, generator)
        return self.add_node(node, CannotAddGeneratorNodeError())

    def create_connection(self, source_id: NodeId, destination_id: NodeId) -> None:
        """Feed the output of the source node into the destination node."""
        if (source_id, destination_id) in self._connections:
            raise ConnectionAlreadyCreatedError()
        source = self._nodes.get(source_id)
        if source is None:
            raise CannotRetrieveSourceNodeError(source_id)
        destination = self._nodes.get(destination_id)
        if destination is None:
            raise CannotRetrieveDestinationNodeError(destination_id)
        source.add_output(destination_id)
        destination.add_input(source_id)
        self._connections.append((source_id, destination_id))

    def prepare_for_playback(self) -> None:
        """Order the nodes for evaluation and check the graph is playable."""
        self._update_processing_order()
        self._validate_acyclicity()
        self._validate_connections()
        self._validate_convergence()

    def evaluate(self) -> list[AudioBuffer]:
        """Process every node once and return the last node's channel buffers."""
        if not self._processing_order:
            raise DspError("graph has not been prepared for playback")
        for node_id in self._processing_order:
            node = self._nodes[node_id]
            inputs = [self._processes[input_id] for input_id in node.inputs]
            node.operation.process(inputs, self._processes[node_id])
        return self._processes[self._processing_order[-1]]

    def _update_processing_order(self) -> None:
        order: list[NodeId] = []
        visited: set[NodeId] = set()
        for root in self._nodes.values():
            if root.id in visited:
                continue
            visited.add(root.id)
            stack = [(root, iter(root.outputs))]
            while stack:
                current, children = stack[-1]
                for child_id in children:
                    if child_id in visited:
                        continue
                    child = self._nodes.get(child_id)
                    if child is None:
                        continue
                    visited.add(child_id)
                    stack.append((child, iter(child.outputs)))
                    break
                else:
                    stack.pop()
                    order.append(current.id)

        if len(order) != len(self._nodes):
            raise CannotUpdateGraphProcessingOrderError()
        order.reverse()
        self._processing_order = order

    def _reachable(
        self, start: Node, neighbours: Callable[[Node], list[NodeId]]
    ) -> set[NodeId]:
        seen = {start.id}
        pending = [start]
        while pending:
            node = pending.pop()
            for next_id in neighbours(node):
                next_node = self._nodes.get(next_id)
                if next_id in seen or next_node is None:
                    continue
                seen.add(next_id)
                pending.append(next_node)
        return seen

    def _validate_acyclicity(self) -> None:
        for node in self._nodes.values():
            reachable = self._reachable(node, lambda n: n.outputs)
            if any(node.id in self._nodes[r].outputs for r in reachable):
                raise GraphContainsCycleError(node.id)

    def _validate_connections(self) -> None:
        for source_id, destination_id in self._connections:
            if source_id not in self._nodes or destination_id not in self._nodes:
                raise ConnectionHasNoNodeError()
        for node_id, node in self._nodes.items():
            if node.operation_type is OperationType.EFFECTOR and not node.inputs:
                raise NodeHasNoInputsError(node_id)
            if (
                node.operation_type is OperationType.GENERATOR
                and not node.outputs
                and len(self._nodes) > 1
            ):
                raise NodeHasNoOutputsError(node_id)

    def _validate_convergence(self) -> None:
        if not self._processing_order:
            raise GraphContainsNonConvergingPathsError("graph has no nodes")
        last = self._nodes[self._processing_order[-1]]
        if len(self._reachable(last, lambda n: n.inputs)) != len(self._nodes):
            raise GraphContainsNonConvergingPathsError()