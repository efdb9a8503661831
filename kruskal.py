import math
import sys
import time

from typing import Iterable

from mstgraph import Edge, Graph, MSTResult

class UnionFind:
    '''
    Disjoint sets over a fixed set of vertex labels, with path compression
    and union by rank. Labels are mapped to dense indices on registration.
    '''

    def __init__(self, vertices: Iterable[str] = ()) -> None:
        self.index: dict[str, int] = {}
        self.labels: list[str] = []
        self.parents: list[int] = []
        self.ranks: list[int] = []
        self.count = 0

        for vertex in vertices:
            self.make_set(vertex)

    def make_set(self, vertex: str) -> None:
        if vertex in self.index:
            return

        i = len(self.labels)
        self.index[vertex] = i
        self.labels.append(vertex)
        self.parents.append(i)
        self.ranks.append(0)
        self.count += 1

    def _slot(self, vertex: str) -> int:
        try:
            return self.index[vertex]
        except KeyError:
            raise KeyError(f'vertex {vertex!r} was never registered') from None

    def _root(self, index: int) -> int:
        root = index
        while self.parents[root] != root:
            root = self.parents[root]

        # point everything on the path straight at the root
        while self.parents[index] != root:
            self.parents[index], index = root, self.parents[index]

        return root

    def find(self, vertex: str) -> str:
        return self.labels[self._root(self._slot(vertex))]

    def union(self, a: str, b: str) -> bool:
        i = self._root(self._slot(a))
        j = self._root(self._slot(b))
        if i == j:
            return False

        if self.ranks[i] < self.ranks[j]:
            self.parents[i] = j
        elif self.ranks[i] > self.ranks[j]:
            self.parents[j] = i
        else:
            self.parents[j] = i
            self.ranks[i] += 1

        self.count -= 1
        return True

    def connected(self, a: str, b: str) -> bool:
        return self.find(a) == self.find(b)

    def __contains__(self, vertex: object) -> bool:
        return vertex in self.index

    def __len__(self) -> int:
        return len(self.labels)


def sort_operations(nedges: int) -> int:
    # modeled cost of the sort, not a comparison count
    if nedges <= 0:
        return 0
    return nedges * int(math.log2(nedges))


def kruskal_mst(graph: Graph) -> tuple[list[Edge], int, int, bool]:
    '''
    Kruskal's algorithm over ``graph``.

    Returns ``(edges, total_cost, operations, connected)``. Operations are
    the modeled sort cost plus two per inspected edge (the finds) and one per
    accepted edge (the union). Edges naming a vertex the graph does not
    register are skipped without being counted.
    '''
    vertices = graph.vertices
    nvertices = len(vertices)
    if nvertices <= 1:
        return [], 0, 0, True

    # sorted() is stable, so equal weights keep their input order
    edges = sorted(graph.edges, key=lambda e: e.weight)
    operations = sort_operations(len(edges))

    uf = UnionFind(vertices)
    mst: list[Edge] = []
    total_cost = 0

    for edge in edges:
        if len(mst) == nvertices - 1:
            break
        if edge.u not in uf or edge.v not in uf:
            continue

        operations += 2
        if uf.find(edge.u) != uf.find(edge.v):
            mst.append(edge)
            total_cost += edge.weight

            operations += 1
            uf.union(edge.u, edge.v)

    return mst, total_cost, operations, len(mst) == nvertices - 1


def find_mst(graph: Graph) -> MSTResult:
    start = time.perf_counter()
    edges, total_cost, operations, connected = kruskal_mst(graph)
    elapsed_ms = int((time.perf_counter() - start) * 1000)

    return MSTResult(edges=tuple(edges),
                     total_cost=total_cost,
                     operations=operations,
                     elapsed_ms=elapsed_ms,
                     connected=connected)


if __name__ == '__main__':
    if len(sys.argv) < 2:
        print(f'Usage: {sys.argv[0]} <dataset.json> [verbose]')
        sys.exit(1)

    from mstanalyzer import load_dataset

    fname = sys.argv[1]
    verbose = (len(sys.argv) > 2)

    for graph in load_dataset(fname):
        result = find_mst(graph)
        print(f'Graph {graph.graph_id}: final MST sum: {result.total_cost} '
              f'({result.operations} ops, {result.elapsed_ms} ms)')
        if not result.connected:
            print('  Info: graph is not connected, result is a spanning forest')
        if verbose:
            print(list(result.edges))
