from dataclasses import dataclass, field
from typing import Any, Iterator, List, Optional

from .constants import Constants

@dataclass(frozen=True)
class Edge:
    """
    One half of an undirected edge, stored in the edge list of its source vertex.
    The graph detaches both halves before it drops a vertex.
    """
    weight: float
    target: 'Vertex'

    @classmethod
    def to(cls, target: 'Vertex', weight: float = Constants.DEFAULT_WEIGHT) -> 'Edge':
        return cls(weight=float(weight), target=target)

    def matches(self, target: 'Vertex', weight: float) -> bool:
        # Exact comparison, no tolerance on the weight
        return self.target == target and self.weight == weight

    def __str__(self) -> str:
        return f"--[{self.weight}]--> {self.target}"

@dataclass(unsafe_hash=True)
class Vertex:
    """
    Graph vertex identified by its label.

    Equality and hashing only look at the label. The visited flag, cost and
    predecessor are scratch state for traversal queries and are reset by the
    graph at the start of every query.
    """
    label: Any
    edges: List[Edge] = field(default_factory=list, compare=False, repr=False)
    visited: bool = field(default=False, compare=False)
    cost: float = field(default=Constants.INITIAL_COST, compare=False)
    predecessor: Optional['Vertex'] = field(default=None, compare=False, repr=False)

    def __str__(self) -> str:
        return f"{self.label}"

    def connect(self, target: 'Vertex', weight: float = Constants.DEFAULT_WEIGHT) -> bool:
        """
        Append an edge to target. Self-loops and repeated (target, weight)
        pairs are rejected and leave the edge list unchanged.
        """
        if target == self:
            return False
        if self.has_edge_to(target, weight):
            return False
        self.edges.append(Edge.to(target, weight))
        return True

    def disconnect(self, target: 'Vertex', weight: float = Constants.DEFAULT_WEIGHT) -> bool:
        """Remove the first edge matching (target, weight) exactly."""
        for i, edge in enumerate(self.edges):
            if edge.matches(target, weight):
                del self.edges[i]
                return True
        return False

    def has_edge_to(self, target: 'Vertex', weight: float = Constants.DEFAULT_WEIGHT) -> bool:
        return any(edge.matches(target, weight) for edge in self.edges)

    def neighbors(self) -> Iterator['Vertex']:
        """Iterate over neighbors in insertion order, over a snapshot of the edge list."""
        return (edge.target for edge in tuple(self.edges))

    def weights(self) -> Iterator[float]:
        """Iterate over edge weights, paired positionally with neighbors()."""
        return (edge.weight for edge in tuple(self.edges))

    def has_neighbor(self) -> bool:
        return len(self.edges) > 0

    def degree(self) -> int:
        return len(self.edges)

    def get_unvisited_neighbor(self) -> Optional['Vertex']:
        return next((n for n in self.neighbors() if not n.is_visited()), None)

    def unvisited_neighbor_count(self) -> int:
        return sum(1 for n in self.neighbors() if not n.is_visited())

    def visit(self):
        self.visited = True

    def unvisit(self):
        self.visited = False

    def is_visited(self) -> bool:
        return self.visited

    def set_cost(self, cost: float):
        self.cost = cost

    def get_cost(self) -> float:
        return self.cost

    def set_predecessor(self, predecessor: Optional['Vertex']):
        self.predecessor = predecessor

    def get_predecessor(self) -> Optional['Vertex']:
        return self.predecessor

    def has_predecessor(self) -> bool:
        return self.predecessor is not None

    def reset(self):
        """Clear the traversal state left behind by a previous query."""
        self.visited = False
        self.cost = Constants.INITIAL_COST
        self.predecessor = None
