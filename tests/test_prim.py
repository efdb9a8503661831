import prim
from mstgraph import Edge, Graph


def test_scenario(scenario_graph):
    result = prim.find_mst(scenario_graph)

    assert list(result.edges) == [Edge('A', 'B', 1), Edge('B', 'C', 2), Edge('C', 'D', 3)]
    assert result.total_cost == 6
    assert result.connected
    # 3 pushes from A, then pop/push pairs for B and C and a final pop for D
    assert result.operations == 8


def test_starts_from_first_vertex():
    g = Graph(['C', 'A', 'B'], [('A', 'B', 1), ('B', 'C', 2), ('A', 'C', 3)])
    edges, cost, _, _ = prim.prim_mst(g)

    assert edges == [Edge('B', 'C', 2), Edge('A', 'B', 1)]
    assert cost == 3


def test_triangle_operation_count():
    # the heaviest edge is pushed but never popped
    g = Graph(['A', 'B', 'C'], [('A', 'B', 1), ('A', 'C', 2), ('B', 'C', 3)])
    edges, cost, operations, connected = prim.prim_mst(g)

    assert edges == [Edge('A', 'B', 1), Edge('A', 'C', 2)]
    assert cost == 3
    # push AB, AC; pop AB, push BC; pop AC -> everything visited
    assert operations == 5
    assert connected


def test_disconnected_grows_a_forest(disconnected_graph):
    result = prim.find_mst(disconnected_graph)

    assert list(result.edges) == [Edge('A', 'B', 1), Edge('C', 'D', 2)]
    assert result.total_cost == 3
    assert not result.connected
    assert result.operations == 4


def test_isolated_vertex():
    g = Graph(['A', 'B', 'C'], [('A', 'B', 1)])
    result = prim.find_mst(g)

    assert list(result.edges) == [Edge('A', 'B', 1)]
    assert not result.connected


def test_degenerate_graphs():
    for g in [Graph(), Graph(['A']), Graph(['A'], [('A', 'B', 1)])]:
        result = prim.find_mst(g)
        assert result.edges == ()
        assert result.total_cost == 0
        assert result.operations == 0


def test_unknown_vertices_are_never_visited():
    g = Graph(['A', 'B'], [('A', 'X', 1), ('A', 'B', 5)])
    edges, cost, operations, connected = prim.prim_mst(g)

    assert edges == [Edge('A', 'B', 5)]
    assert cost == 5
    # both pushes from A, the A-X pop is discarded, then A-B
    assert operations == 4
    assert connected


def test_self_loops_are_discarded():
    g = Graph(['A', 'B'], [('A', 'A', 0), ('A', 'B', 3)])
    result = prim.find_mst(g)

    assert list(result.edges) == [Edge('A', 'B', 3)]
    assert result.total_cost == 3


def test_equal_weights_pop_in_push_order():
    g = Graph(['A', 'B', 'C'], [('A', 'C', 1), ('A', 'B', 1), ('B', 'C', 1)])
    edges, _, _, _ = prim.prim_mst(g)

    assert edges == [Edge('A', 'C', 1), Edge('A', 'B', 1)]


def test_incident_edges():
    edges = [Edge('A', 'B', 1), Edge('B', 'C', 2), Edge('C', 'C', 3)]
    adjacency = prim.incident_edges(edges)

    assert adjacency['A'] == [edges[0]]
    assert adjacency['B'] == [edges[0], edges[1]]
    assert adjacency['C'] == [edges[1], edges[2]]


def test_does_not_mutate_graph(scenario_graph):
    before = (scenario_graph.vertices, scenario_graph.edges)
    prim.find_mst(scenario_graph)
    assert (scenario_graph.vertices, scenario_graph.edges) == before


def test_discarded_pops_are_counted():
    g = Graph(['A', 'B', 'C', 'D'],
              [('A', 'B', 1), ('B', 'C', 2), ('A', 'C', 3), ('C', 'D', 4)])
    edges, cost, operations, _ = prim.prim_mst(g)

    assert edges == [Edge('A', 'B', 1), Edge('B', 'C', 2), Edge('C', 'D', 4)]
    assert cost == 7
    # A-C is popped after both ends are visited
    assert operations == 8
