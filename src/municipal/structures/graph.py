"""
Graph of string-labelled nodes with plain connections and weighted routes.

Nodes are keyed by their trimmed, case-folded label and keep the spelling
first seen for display. Connections are directed adjacency entries walked by
the breadth-first and depth-first traversals. Routes are undirected weighted
edges that only feed the minimum spanning tree; adding a route does not add a
connection.

The graph is single writer: it must not change while a traversal or the
spanning tree is being computed. Every result is a fresh DynamicArray snapshot.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from ._definitions import ROUTE_SEPARATOR
from ._logging import null_logger
from ._utils import is_blank, normalize_label, require
from .containers import (
    ArrayStack,
    AssociativeArray,
    DynamicArray,
    OpenAddressHashSet,
    RingBufferQueue,
)
from .exceptions import InvalidArgumentError

logger: Final = null_logger(__name__)


@dataclass(frozen=True)
class SpanningEdge:
    """An edge selected for the minimum spanning tree."""

    source: str
    target: str
    weight: int

    def __str__(self) -> str:
        return f"{self.source}{ROUTE_SEPARATOR}{self.target} ({self.weight})"


@dataclass(frozen=True)
class _Route:
    target: str
    weight: int


class _GraphNode:
    __slots__ = ("label", "neighbours", "routes")

    def __init__(self, label: str) -> None:
        self.label = label
        self.neighbours: DynamicArray[str] = DynamicArray()
        self.routes: DynamicArray[_Route] = DynamicArray()


def _require_label(value: str | None, name: str) -> str:
    if is_blank(value):
        raise InvalidArgumentError(f"Graph node '{name}' cannot be empty")
    return value.strip()  # type: ignore[union-attr]


class Graph:
    """Service relationship graph supporting traversal and a spanning tree."""

    __slots__ = ("_nodes",)

    def __init__(self) -> None:
        self._nodes: AssociativeArray[str, _GraphNode] = AssociativeArray()

    def add_connection(self, source: str, target: str) -> None:
        """Add a directed connection, creating both nodes when missing."""
        source = _require_label(source, "source")
        target = _require_label(target, "target")

        source_node = self._get_or_create(source)
        self._get_or_create(target)

        target_key = normalize_label(target)
        if not source_node.neighbours.contains(target_key):
            source_node.neighbours.add(target_key)

    def add_route(self, source: str, target: str, weight: int) -> None:
        """Add an undirected weighted route between two nodes.

        Raises:
            InvalidArgumentError: If a label is blank or ``weight`` is not a
                positive integer.
        """
        source = _require_label(source, "source")
        target = _require_label(target, "target")
        if isinstance(weight, bool) or not isinstance(weight, int):
            raise InvalidArgumentError(
                f"Route weight must be an integer, got {type(weight).__name__}"
            )
        if weight <= 0:
            raise InvalidArgumentError(
                f"Routes must have a positive weight, got {weight}"
            )

        source_node = self._get_or_create(source)
        target_node = self._get_or_create(target)
        self._add_route(source_node, normalize_label(target), weight)
        self._add_route(target_node, normalize_label(source), weight)

    def get_connections(self, label: str) -> DynamicArray[str]:
        """Labels directly connected from ``label``; empty if the node is unknown."""
        require(label, "label")
        result: DynamicArray[str] = DynamicArray()

        node = self._nodes.get(normalize_label(label))
        if node is not None:
            for key in node.neighbours:
                result.add(self._nodes[key].label)
        return result

    def traverse(self, start: str) -> DynamicArray[str]:
        """Breadth-first walk of connections, returning labels in visit order."""
        start_key = normalize_label(_require_label(start, "start"))
        order: DynamicArray[str] = DynamicArray()
        if start_key not in self._nodes:
            return order

        visited: OpenAddressHashSet[str] = OpenAddressHashSet()
        queue: RingBufferQueue[str] = RingBufferQueue()
        visited.add(start_key)
        queue.enqueue(start_key)

        while len(queue) > 0:
            node = self._nodes[queue.dequeue()]
            order.add(node.label)
            for key in node.neighbours:
                if visited.add(key):
                    queue.enqueue(key)

        return order

    def traverse_depth_first(self, start: str) -> DynamicArray[str]:
        """Depth-first walk of connections, first-added neighbours explored first."""
        start_key = normalize_label(_require_label(start, "start"))
        order: DynamicArray[str] = DynamicArray()
        if start_key not in self._nodes:
            return order

        visited: OpenAddressHashSet[str] = OpenAddressHashSet()
        stack: ArrayStack[str] = ArrayStack()
        stack.push(start_key)

        while len(stack) > 0:
            key = stack.pop()
            if not visited.add(key):
                continue

            node = self._nodes[key]
            order.add(node.label)
            neighbours = node.neighbours
            for i in range(len(neighbours) - 1, -1, -1):
                if not visited.contains(neighbours[i]):
                    stack.push(neighbours[i])

        return order

    def get_minimum_spanning_tree(self) -> DynamicArray[SpanningEdge]:
        """Grow a spanning tree over the routes with Prim's algorithm.

        The tree starts at the first node that has a route. Each step scans
        every route leaving the tree and keeps the cheapest one, O(V^2) in
        total. When no route leaves the tree the edges found so far are
        returned, so a disconnected graph yields the tree of one component.
        """
        edges: DynamicArray[SpanningEdge] = DynamicArray()
        start_key = next(
            (key for key, node in self._nodes.items() if len(node.routes) > 0), None
        )
        if start_key is None:
            return edges

        visited: OpenAddressHashSet[str] = OpenAddressHashSet()
        tree: DynamicArray[str] = DynamicArray()
        visited.add(start_key)
        tree.add(start_key)

        while len(visited) < len(self._nodes):
            best_source: str | None = None
            best_route: _Route | None = None

            for key in tree:
                for route in self._nodes[key].routes:
                    if visited.contains(route.target):
                        continue
                    if best_route is None or route.weight < best_route.weight:
                        best_source = key
                        best_route = route

            if best_route is None or best_source is None:
                logger.debug(
                    "Spanning tree stopped at %d of %d nodes, no route leaves the tree",
                    len(visited),
                    len(self._nodes),
                )
                break

            visited.add(best_route.target)
            tree.add(best_route.target)
            edges.add(
                SpanningEdge(
                    source=self._nodes[best_source].label,
                    target=self._nodes[best_route.target].label,
                    weight=best_route.weight,
                )
            )

        return edges

    def clear(self) -> None:
        self._nodes.clear()

    def _get_or_create(self, label: str) -> _GraphNode:
        key = normalize_label(label)
        node = self._nodes.get(key)
        if node is None:
            node = _GraphNode(label)
            self._nodes.add(key, node)
        return node

    @staticmethod
    def _add_route(node: _GraphNode, target_key: str, weight: int) -> None:
        if any(route.target == target_key for route in node.routes):
            return
        node.routes.add(_Route(target_key, weight))

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, label: object) -> bool:
        if not isinstance(label, str) or is_blank(label):
            return False
        return normalize_label(label) in self._nodes
