import argparse
import json
import random

from typing import Any, Iterable, Optional

import numpy as np

# (sizes, (min density, max density)) per preset
PRESETS = {
    'small': ([10, 20, 30, 40, 50], (0.3, 0.7)),
    'medium': ([50, 75, 100, 125, 150, 175, 200, 225, 250, 300], (0.2, 0.5)),
    'large': ([300, 400, 500, 600, 700, 800, 900, 1000, 350, 450], (0.15, 0.4)),
    'extra_large': ([1000, 1500, 2000, 2500, 3000], (0.1, 0.3)),
}

def target_edge_count(nvertices: int, density: float) -> int:
    max_edges = nvertices * (nvertices - 1) // 2
    target = max(int(max_edges * density), nvertices - 1)
    return min(target, max_edges)


def generate_graph(graph_id: int,
                   nvertices: int,
                   density: float,
                   rng: random.Random,
                   min_weight: int = 1,
                   max_weight: int = 100) -> dict[str, Any]:
    '''
    Generate one connected dataset entry ``{id, nodes, edges}``.

    A random spanning tree is laid down first so the graph is always
    connected, then distinct random edges are added until the density target
    is met.
    '''
    nodes = [f'N{i}' for i in range(nvertices)]
    edges = []

    # upper triangle marks which pairs are taken
    adj_matrix = np.zeros((nvertices, nvertices), dtype=int)

    def add(i: int, j: int) -> None:
        i, j = min(i, j), max(i, j)
        w = rng.randint(min_weight, max_weight)
        adj_matrix[i, j] = 1
        edges.append({'from': nodes[i], 'to': nodes[j], 'weight': w})

    connected = [0]
    unconnected = list(range(1, nvertices))
    while unconnected:
        i = connected[rng.randrange(len(connected))]
        j = unconnected.pop(rng.randrange(len(unconnected)))
        add(i, j)
        connected.append(j)

    total_edges = target_edge_count(nvertices, density)
    while len(edges) < total_edges:
        i = rng.randrange(nvertices)
        j = rng.randrange(nvertices)
        # no self-loops, no repeated pairs
        if i == j or adj_matrix[min(i, j), max(i, j)] != 0:
            continue
        add(i, j)

    return {'id': graph_id, 'nodes': nodes, 'edges': edges}


def generate_dataset(sizes: Iterable[int],
                     density_range: tuple[float, float],
                     seed: int = 42,
                     min_weight: int = 1,
                     max_weight: int = 100) -> list[dict[str, Any]]:
    rng = random.Random(seed)
    low, high = density_range

    graphs = []
    for (i, nvertices) in enumerate(sizes):
        density = low + rng.random() * (high - low)
        graphs.append(generate_graph(i + 1, nvertices, density, rng,
                                     min_weight=min_weight,
                                     max_weight=max_weight))
    return graphs


def combine_datasets(*datasets: list[dict[str, Any]]) -> list[dict[str, Any]]:
    graphs = [dict(entry) for dataset in datasets for entry in dataset]
    for (i, entry) in enumerate(graphs):
        entry['id'] = i + 1
    return graphs


def density_of(entry: dict[str, Any]) -> float:
    n = len(entry['nodes'])
    max_edges = n * (n - 1) // 2
    if max_edges == 0:
        return 0.0
    return len(entry['edges']) / max_edges


def write_dataset(graphs: list[dict[str, Any]], fname: str) -> None:
    with open(fname, 'w') as f:
        json.dump({'graphs': graphs}, f, indent=2)


def preset_dataset(preset: str,
                   seed: int = 42,
                   min_weight: int = 1,
                   max_weight: int = 100) -> list[dict[str, Any]]:
    if preset == 'all':
        return combine_datasets(*[preset_dataset(name, seed, min_weight, max_weight)
                                  for name in PRESETS])

    sizes, density_range = PRESETS[preset]
    return generate_dataset(sizes, density_range, seed=seed,
                            min_weight=min_weight, max_weight=max_weight)


if __name__ == '__main__':
    parser = argparse.ArgumentParser(prog='GraphGen',
                                     description='Generate graph datasets for MST analysis')
    parser.add_argument('nvertices', type=int, nargs='*')
    parser.add_argument('-p', '--preset', choices=[*PRESETS, 'all'])
    parser.add_argument('-o', '--outfile', default='input.json')
    parser.add_argument('-d', '--density', default=0.5, type=float)
    parser.add_argument('-s', '--seed', default=42, type=int)
    parser.add_argument('--min-weight', default=1, type=int)
    parser.add_argument('--max-weight', default=100, type=int)
    parser.add_argument('-v', '--verbose', action='store_true')
    parser.add_argument('-q', '--quiet', action='store_true')

    args = parser.parse_args()

    if bool(args.nvertices) == bool(args.preset):
        parser.error('give either vertex counts or --preset, not both')
    if not 0.0 <= args.density <= 1.0:
        parser.error('density must be between 0 and 1')
    if args.min_weight > args.max_weight:
        parser.error('--min-weight must not exceed --max-weight')

    if args.preset:
        graphs = preset_dataset(args.preset, args.seed, args.min_weight, args.max_weight)
    else:
        graphs = generate_dataset(args.nvertices, (args.density, args.density),
                                  seed=args.seed,
                                  min_weight=args.min_weight,
                                  max_weight=args.max_weight)

    if not args.quiet:
        print(f'Generating {len(graphs)} graphs...')
        for entry in graphs:
            print(f'  Graph {entry["id"]}: {len(entry["nodes"])} vertices, '
                  f'{len(entry["edges"])} edges (density: {density_of(entry) * 100:.1f}%)')
        print(f'  Edge weights between: [{args.min_weight}, {args.max_weight}]')

    if args.verbose:
        print()
        for entry in graphs:
            print(f'Graph {entry["id"]} edges:')
            print([(e['from'], e['to'], e['weight']) for e in entry['edges']])

    write_dataset(graphs, args.outfile)

'''
File format:

{"graphs": [
  {"id": 1, "nodes": ["N0", "N1", ...],
   "edges": [{"from": "N0", "to": "N1", "weight": 7}, ...]},
  ...
]}

'''
