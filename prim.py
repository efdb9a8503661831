import heapq
import itertools
import sys
import time

from collections import defaultdict

from mstgraph import Edge, Graph, MSTResult

def incident_edges(edges: list[Edge]) -> dict[str, list[Edge]]:
    adjacency: dict[str, list[Edge]] = defaultdict(list)
    for edge in edges:
        adjacency[edge.u].append(edge)
        if edge.v != edge.u:
            adjacency[edge.v].append(edge)
    return adjacency


def prim_mst(graph: Graph) -> tuple[list[Edge], int, int, bool]:
    '''
    Prim's algorithm grown from the first vertex of ``graph``.

    Returns ``(edges, total_cost, operations, connected)``. Only frontier
    pushes and pops are counted as operations.

    When the frontier runs dry before every vertex is visited the graph is
    disconnected: ``connected`` is False and growth restarts from the first
    unvisited vertex, so the edges form a spanning forest with one tree per
    component.
    '''
    vertices = graph.vertices
    nvertices = len(vertices)
    if nvertices <= 1:
        return [], 0, 0, True

    registered = set(vertices)
    adjacency = incident_edges(graph.edges)

    # (weight, push order, edge): equal weights pop first-in first-out
    frontier: list[tuple[int, int, Edge]] = []
    order = itertools.count()
    operations = 0

    visited: set[str] = set()
    mst: list[Edge] = []
    total_cost = 0
    ntrees = 0

    for root in vertices:
        if len(visited) == nvertices:
            break
        if root in visited:
            continue

        ntrees += 1
        visited.add(root)

        for edge in adjacency[root]:
            heapq.heappush(frontier, (edge.weight, next(order), edge))
            operations += 1

        while frontier and len(visited) < nvertices:
            _, _, edge = heapq.heappop(frontier)
            operations += 1

            next_vertex = None
            if edge.u in visited and edge.v not in visited:
                next_vertex = edge.v
            elif edge.v in visited and edge.u not in visited:
                next_vertex = edge.u

            # unknown endpoints are never visited
            if next_vertex is None or next_vertex not in registered:
                continue

            visited.add(next_vertex)
            mst.append(edge)
            total_cost += edge.weight

            for incident in adjacency[next_vertex]:
                if incident.other(next_vertex) not in visited:
                    heapq.heappush(frontier, (incident.weight, next(order), incident))
                    operations += 1

    return mst, total_cost, operations, ntrees == 1


def find_mst(graph: Graph) -> MSTResult:
    start = time.perf_counter()
    edges, total_cost, operations, connected = prim_mst(graph)
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
