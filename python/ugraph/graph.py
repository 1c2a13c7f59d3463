import logging
from collections import deque
from typing import Any, Deque, Dict, Iterable, Iterator, List, MutableSequence, Optional

from .constants import Constants
from .vertex import Vertex

logger = logging.getLogger(__name__)

class VertexNotFoundError(LookupError):
    """Exception raised when an operation refers to a label that is not in the graph."""

    def __init__(self, label: Any):
        super().__init__(f"Vertex {label!r} not in graph")
        self.label = label

class Graph:
    """
    Undirected graph with adjacency stored as per-vertex edge lists.

    Each undirected edge is kept as two directed entries, one in the edge list
    of each endpoint, and the edge counter counts those entries. Vertices are
    owned by the label map; edges only refer to them.
    """

    def __init__(
        self,
        vertices: Optional[Iterable[Any]] = None,
        edges: Optional[Iterable[tuple]] = None
    ):
        self.vertices: Dict[Any, Vertex] = {}
        self.num_edges: int = 0

        if vertices:
            for label in vertices:
                self.add_vertex(label)

        if edges:
            for begin, end, *weight in edges:
                # Endpoints named only by an edge are created on the fly
                for label in (begin, end):
                    if label not in self.vertices:
                        self.add_vertex(label)
                self.add_edge(begin, end, *weight)

    def __str__(self) -> str:
        # One line per undirected edge, isolated vertices on their own
        lines = []
        seen = set()
        for v in self.vertices.values():
            if not v.has_neighbor():
                lines.append(f"{v}\n")
            for edge in v.edges:
                key = (frozenset((v.label, edge.target.label)), edge.weight)
                if key in seen:
                    continue
                seen.add(key)
                if edge.weight != Constants.DEFAULT_WEIGHT:
                    lines.append(f"{v} -[{edge.weight}]- {edge.target}\n")
                else:
                    lines.append(f"{v} -- {edge.target}\n")
        return "".join(lines)

    def __len__(self) -> int:
        return len(self.vertices)

    def __contains__(self, label: Any) -> bool:
        return label in self.vertices

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self.vertices))

    def add_vertex(self, label: Any) -> bool:
        """
        Add a vertex for label. Returns False if the label was already present,
        in which case the old vertex is replaced and its edges are dropped.
        """
        existing = self.vertices.get(label)
        if existing is not None:
            self._detach(existing)
            logger.debug(f"Replaced vertex {label!r}, its edges were dropped")
        self.vertices[label] = Vertex(label)
        return existing is None

    def has_vertex(self, label: Any) -> bool:
        return label in self.vertices

    def get_vertex(self, label: Any) -> Vertex:
        try:
            return self.vertices[label]
        except KeyError:
            raise VertexNotFoundError(label) from None

    def remove_vertex(self, label: Any) -> Vertex:
        """Remove a vertex together with every edge incident to it."""
        vertex = self.get_vertex(label)
        self._detach(vertex)
        del self.vertices[label]
        logger.debug(f"Removed vertex {label!r}")
        return vertex

    def _detach(self, vertex: Vertex):
        for edge in tuple(vertex.edges):
            neighbor = edge.target
            removed = vertex.disconnect(neighbor, edge.weight)
            mirrored = neighbor.disconnect(vertex, edge.weight)
            # A lone half was never counted
            if removed and mirrored:
                self.num_edges -= 2

    def add_edge(self, begin: Any, end: Any, weight: float = Constants.DEFAULT_WEIGHT) -> bool:
        """
        Connect begin and end in both directions.

        Both directions are checked before either is connected, so a rejected
        edge never leaves half of itself behind.
        """
        begin_vertex = self.vertices.get(begin)
        end_vertex = self.vertices.get(end)

        if begin_vertex is None or end_vertex is None:
            logger.debug(f"Edge {begin!r} - {end!r} rejected: endpoint not in graph")
            return False

        if begin_vertex == end_vertex:
            logger.debug(f"Edge {begin!r} - {end!r} rejected: self-loop")
            return False

        if begin_vertex.has_edge_to(end_vertex, weight) or end_vertex.has_edge_to(begin_vertex, weight):
            logger.debug(f"Edge {begin!r} - {end!r} [{weight}] rejected: already exists")
            return False

        begin_vertex.connect(end_vertex, weight)
        end_vertex.connect(begin_vertex, weight)
        self.num_edges += 2
        return True

    def remove_edge(self, begin: Any, end: Any, weight: float = Constants.DEFAULT_WEIGHT) -> bool:
        """Remove the edge between begin and end with exactly this weight."""
        begin_vertex = self.vertices.get(begin)
        end_vertex = self.vertices.get(end)

        if begin_vertex is None or end_vertex is None:
            return False

        # Both halves must be present, otherwise nothing is touched
        if not (begin_vertex.has_edge_to(end_vertex, weight)
                and end_vertex.has_edge_to(begin_vertex, weight)):
            logger.debug(f"Edge {begin!r} - {end!r} [{weight}] not removed: does not exist")
            return False

        begin_vertex.disconnect(end_vertex, weight)
        end_vertex.disconnect(begin_vertex, weight)
        self.num_edges -= 2
        return True

    def has_edge(self, begin: Any, end: Any) -> bool:
        """Check for an unweighted edge between begin and end, in either direction."""
        begin_vertex = self.vertices.get(begin)
        end_vertex = self.vertices.get(end)

        if begin_vertex is None or end_vertex is None:
            return False

        return (begin_vertex.has_edge_to(end_vertex, Constants.DEFAULT_WEIGHT)
                or end_vertex.has_edge_to(begin_vertex, Constants.DEFAULT_WEIGHT))

    def neighbors(self, label: Any) -> List[Any]:
        """Return the labels adjacent to label, in edge-list order."""
        return [n.label for n in self.get_vertex(label).neighbors()]

    def vertex_count(self) -> int:
        return len(self.vertices)

    def edge_count(self) -> int:
        """Return the number of directed edge entries, twice the undirected edge count."""
        return self.num_edges

    def is_empty(self) -> bool:
        return not self.vertices

    def get_vertices(self) -> List[Vertex]:
        return list(self.vertices.values())

    def clear(self):
        self.vertices.clear()
        self.num_edges = 0

    def _reset(self):
        for v in self.vertices.values():
            v.reset()

    def get_breadth_first_traversal(self, origin: Any) -> Deque[Any]:
        """
        Breadth-first traversal from origin.

        A label is emitted the moment its vertex is discovered, so origin comes
        first and every reachable vertex appears exactly once.
        """
        start = self.get_vertex(origin)
        self._reset()

        start.visit()
        queue = deque([start])
        traversal = deque([start.label])

        while queue:
            current = queue.popleft()
            for neighbor in current.neighbors():
                if not neighbor.is_visited():
                    neighbor.visit()
                    queue.append(neighbor)
                    traversal.append(neighbor.label)

        logger.debug(f"Breadth-first traversal from {origin!r}: {list(traversal)}")
        return traversal

    def get_shortest_path(self, origin: Any, destination: Any, path: MutableSequence[Any]) -> int:
        """
        Find the fewest-hops path from origin to destination.

        The labels are pushed onto path (with append) from destination back to
        origin, so popping path yields origin first and destination last.
        Returns the hop count, or Constants.INFINITY if destination cannot be
        reached, in which case path is left as it was. When origin and
        destination are the same vertex, 0 is returned and path is not touched.
        """
        start = self.get_vertex(origin)
        target = self.get_vertex(destination)
        self._reset()

        start.visit()
        if start == target:
            return int(start.get_cost())

        queue = deque([start])
        while queue:
            current = queue.popleft()
            for neighbor in current.neighbors():
                if neighbor.is_visited():
                    continue
                neighbor.visit()
                neighbor.set_predecessor(current)
                neighbor.set_cost(current.get_cost() + 1)
                queue.append(neighbor)

                if neighbor == target:
                    self._push_path(neighbor, path)
                    logger.debug(f"Shortest path {origin!r} -> {destination!r}: {int(neighbor.get_cost())} hops")
                    return int(neighbor.get_cost())

        logger.debug(f"No path from {origin!r} to {destination!r}")
        return Constants.INFINITY

    @staticmethod
    def _push_path(vertex: Vertex, path: MutableSequence[Any]):
        path.append(vertex.label)
        while vertex.has_predecessor():
            vertex = vertex.get_predecessor()
            path.append(vertex.label)

    def shortest_path(self, origin: Any, destination: Any) -> Optional[List[Any]]:
        """Return the labels on a fewest-hops path from origin to destination, or None."""
        path = []
        if self.get_shortest_path(origin, destination, path) == Constants.INFINITY:
            return None
        if not path:
            return [self.get_vertex(origin).label]
        path.reverse()
        return path
