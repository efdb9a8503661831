import json
import random

import pytest

import graphgen
import nx_utils
from mstgraph import Graph


@pytest.mark.parametrize('nvertices,density', [(2, 0.0), (10, 0.3), (30, 0.7), (15, 1.0)])
def test_generated_graphs_are_simple_and_connected(nvertices, density):
    entry = graphgen.generate_graph(3, nvertices, density, random.Random(1))
    graph = Graph.from_dict(entry)

    pairs = [frozenset((e.u, e.v)) for e in graph.edges]
    assert entry['id'] == 3
    assert graph.vertices == [f'N{i}' for i in range(nvertices)]
    assert all(len(p) == 2 for p in pairs)
    assert len(set(pairs)) == len(pairs)
    assert graph.edge_count == graphgen.target_edge_count(nvertices, density)
    assert nx_utils.component_count(graph) == 1


def test_weights_respect_bounds():
    entry = graphgen.generate_graph(1, 20, 0.5, random.Random(0), min_weight=5, max_weight=9)
    assert {e['weight'] for e in entry['edges']} <= set(range(5, 10))


def test_target_edge_count():
    assert graphgen.target_edge_count(10, 0.0) == 9
    assert graphgen.target_edge_count(10, 0.5) == 22
    assert graphgen.target_edge_count(10, 1.0) == 45
    assert graphgen.target_edge_count(1, 0.5) == 0


def test_same_seed_same_dataset():
    first = graphgen.generate_dataset([10, 20], (0.2, 0.6), seed=5)
    second = graphgen.generate_dataset([10, 20], (0.2, 0.6), seed=5)
    other = graphgen.generate_dataset([10, 20], (0.2, 0.6), seed=6)

    assert first == second
    assert first != other
    assert [e['id'] for e in first] == [1, 2]


def test_density_stays_in_range():
    for entry in graphgen.generate_dataset([20, 30, 40], (0.3, 0.5), seed=1):
        assert 0.3 - 0.05 <= graphgen.density_of(entry) <= 0.5


def test_combine_renumbers_ids():
    a = graphgen.generate_dataset([5, 6], (0.5, 0.5))
    b = graphgen.generate_dataset([7], (0.5, 0.5))

    combined = graphgen.combine_datasets(a, b)

    assert [e['id'] for e in combined] == [1, 2, 3]
    assert [len(e['nodes']) for e in combined] == [5, 6, 7]
    # inputs keep their own numbering
    assert b[0]['id'] == 1


def test_small_preset():
    graphs = graphgen.preset_dataset('small')
    assert [len(e['nodes']) for e in graphs] == graphgen.PRESETS['small'][0]


def test_write_dataset(tmp_path):
    fname = tmp_path / 'input.json'
    graphs = graphgen.generate_dataset([4], (0.5, 0.5))

    graphgen.write_dataset(graphs, str(fname))

    assert json.loads(fname.read_text()) == {'graphs': graphs}
