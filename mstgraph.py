from dataclasses import dataclass, field
from typing import Any, Iterable, Optional


@dataclass(frozen=True, eq=False, repr=False)
class Edge:
    u: str
    v: str
    weight: int

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> 'Edge':
        return Edge(str(d['from']), str(d['to']), int(d['weight']))

    def to_dict(self) -> dict[str, Any]:
        return {'from': self.u, 'to': self.v, 'weight': self.weight}

    def other(self, vertex: str) -> str:
        return self.v if vertex == self.u else self.u

    # Undirected: (u, v, w) == (v, u, w)
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return (self.weight == other.weight
                and {self.u, self.v} == {other.u, other.v})

    def __hash__(self) -> int:
        return hash((frozenset((self.u, self.v)), self.weight))

    def __lt__(self, other: 'Edge') -> bool:
        return self.weight < other.weight

    def __repr__(self):
        return f'{self.u}-{self.v}({self.weight})'

    __str__ = __repr__


class Graph:
    '''
    Weighted undirected graph with insertion-ordered vertices.

    Edges are stored as given: endpoints are not checked against the vertex
    list, and duplicates and self-loops are kept.
    '''

    def __init__(self,
                 vertices: Iterable[str] = (),
                 edges: Iterable[tuple[str, str, int]] = (),
                 graph_id: Optional[int] = None) -> None:
        self.graph_id = graph_id
        self._vertices: list[str] = []
        self._vertex_set: set[str] = set()
        self._edges: list[Edge] = []

        for vertex in vertices:
            self.add_vertex(vertex)
        for (u, v, w) in edges:
            self.add_edge(u, v, w)

    def add_vertex(self, vertex: str) -> None:
        if vertex not in self._vertex_set:
            self._vertex_set.add(vertex)
            self._vertices.append(vertex)

    def add_edge(self, u: str, v: str, weight: int) -> None:
        self._edges.append(Edge(u, v, weight))

    def has_vertex(self, vertex: str) -> bool:
        return vertex in self._vertex_set

    @property
    def vertices(self) -> list[str]:
        return list(self._vertices)

    @property
    def edges(self) -> list[Edge]:
        return list(self._edges)

    @property
    def vertex_count(self) -> int:
        return len(self._vertices)

    @property
    def edge_count(self) -> int:
        return len(self._edges)

    @classmethod
    def from_dict(cls, entry: dict[str, Any]) -> 'Graph':
        graph = Graph(graph_id=entry.get('id'))
        for node in entry['nodes']:
            graph.add_vertex(str(node))
        for edge in entry['edges']:
            graph._edges.append(Edge.from_dict(edge))
        return graph

    def to_dict(self) -> dict[str, Any]:
        return {
            'id': self.graph_id,
            'nodes': self.vertices,
            'edges': [e.to_dict() for e in self._edges],
        }

    def __repr__(self):
        return f'Graph(vertices={self.vertex_count}, edges={self.edge_count})'


@dataclass(frozen=True)
class MSTResult:
    edges: tuple[Edge, ...] = field(default_factory=tuple)
    total_cost: int = 0
    operations: int = 0
    elapsed_ms: int = 0
    connected: bool = True

    @classmethod
    def empty(cls, elapsed_ms: int = 0) -> 'MSTResult':
        return MSTResult(elapsed_ms=elapsed_ms)

    @property
    def edge_count(self) -> int:
        return len(self.edges)

    def to_dict(self) -> dict[str, Any]:
        return {
            'mst_edges': [e.to_dict() for e in self.edges],
            'total_cost': self.total_cost,
            'operations_count': self.operations,
            'execution_time_ms': self.elapsed_ms,
            'connected': self.connected,
        }
