## Runs Prim and Kruskal over every graph in a dataset and writes a report

import json
import math

from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass
from typing import Any, Callable, Optional

import kruskal
import prim
from mstgraph import Graph, MSTResult

ENGINES: dict[str, Callable[[Graph], MSTResult]] = {
    'prim': prim.find_mst,
    'kruskal': kruskal.find_mst,
}

@dataclass
class AnalyzerConfig:
    input_path: str = 'data/input.json'
    output_path: str = 'data/output.json'
    workers: int = 1
    quiet: bool = False
    verbose: bool = False

    @classmethod
    def from_args(cls, args: Any) -> 'AnalyzerConfig':
        return AnalyzerConfig(input_path=args.infile,
                              output_path=args.outfile,
                              workers=args.workers,
                              quiet=args.quiet,
                              verbose=args.verbose)


@dataclass
class AnalysisResult:
    graph_id: Optional[int]
    vertices: int
    edges: int
    prim: MSTResult
    kruskal: MSTResult
    prim_theoretical: int
    kruskal_theoretical: int

    @property
    def costs_match(self) -> bool:
        return self.prim.total_cost == self.kruskal.total_cost

    @property
    def connected(self) -> bool:
        return self.prim.connected and self.kruskal.connected

    def to_dict(self) -> dict[str, Any]:
        return {
            'graph_id': self.graph_id,
            'input_stats': {
                'vertices': self.vertices,
                'edges': self.edges,
            },
            'prim': self.prim.to_dict(),
            'kruskal': self.kruskal.to_dict(),
            'theoretical_operations': {
                'prim': self.prim_theoretical,
                'kruskal': self.kruskal_theoretical,
            },
            'costs_match': self.costs_match,
        }


def prim_theoretical(graph: Graph) -> int:
    # O(E log V)
    if graph.edge_count == 0 or graph.vertex_count == 0:
        return 0
    return int(graph.edge_count * math.log2(graph.vertex_count))

def kruskal_theoretical(graph: Graph) -> int:
    # O(E log E) for the sort plus O(E) union-find work
    if graph.edge_count == 0:
        return 0
    return int(graph.edge_count * math.log2(graph.edge_count)) + graph.edge_count


def load_dataset(fname: str) -> list[Graph]:
    with open(fname, 'r') as f:
        data = json.load(f)

    return [Graph.from_dict(entry) for entry in data['graphs']]

def analyze_graph(graph: Graph) -> AnalysisResult:
    return AnalysisResult(graph_id=graph.graph_id,
                          vertices=graph.vertex_count,
                          edges=graph.edge_count,
                          prim=ENGINES['prim'](graph),
                          kruskal=ENGINES['kruskal'](graph),
                          prim_theoretical=prim_theoretical(graph),
                          kruskal_theoretical=kruskal_theoretical(graph))

def analyze_all(graphs: list[Graph], workers: int = 1) -> list[AnalysisResult]:
    if workers <= 1:
        return [analyze_graph(g) for g in graphs]

    # each graph is independent; map keeps input order
    with ProcessPoolExecutor(max_workers=workers) as executor:
        return list(executor.map(analyze_graph, graphs))

def write_report(results: list[AnalysisResult], fname: str) -> None:
    with open(fname, 'w') as f:
        json.dump({'results': [r.to_dict() for r in results]}, f, indent=2)


def print_result(result: AnalysisResult, verbose: bool = False) -> None:
    print(f'  Graph {result.graph_id} (V={result.vertices}, E={result.edges}):')
    print(f'    Prim: {result.prim.operations} ops (theoretical: {result.prim_theoretical})')
    print(f'    Kruskal: {result.kruskal.operations} ops (theoretical: {result.kruskal_theoretical})')

    if not result.connected:
        print('    Info: graph is not connected, MST covers a spanning forest')
    if not result.costs_match:
        print(f'!!! Error on graph {result.graph_id}: inconsistent costs '
              f'(prim={result.prim.total_cost}, kruskal={result.kruskal.total_cost})')
    if verbose:
        print(f'    Prim edges: {list(result.prim.edges)}')
        print(f'    Kruskal edges: {list(result.kruskal.edges)}')

def print_summary(results: list[AnalysisResult]) -> None:
    print()
    print('Performance summary:')
    print(f'{"Graph":>6} | {"V":>6} | {"E":>8} | {"Prim ms":>8} | {"Kruskal ms":>10} '
          f'| {"Prim ops":>10} | {"Kruskal ops":>11} | {"Cost":>8}')

    for r in results:
        print(f'{r.graph_id:>6} | {r.vertices:>6} | {r.edges:>8} | {r.prim.elapsed_ms:>8} '
              f'| {r.kruskal.elapsed_ms:>10} | {r.prim.operations:>10} '
              f'| {r.kruskal.operations:>11} | {r.prim.total_cost:>8}')

    consistent = sum(1 for r in results if r.costs_match)
    print()
    print(f'Consistent costs on {consistent}/{len(results)} graphs')
    print('Theoretical complexities: Prim O(E log V), Kruskal O(E log E)')

def analyze(config: AnalyzerConfig) -> list[AnalysisResult]:
    graphs = load_dataset(config.input_path)
    if not config.quiet:
        print(f'Loaded {len(graphs)} graphs from {config.input_path}')

    results = analyze_all(graphs, workers=config.workers)

    write_report(results, config.output_path)

    if not config.quiet:
        for result in results:
            print_result(result, verbose=config.verbose)
        print_summary(results)
        print(f'Results saved to: {config.output_path}')

    return results


if __name__ == '__main__':
    import argparse

    parser = argparse.ArgumentParser(prog='mstanalyzer',
                                     description='Compare Prim and Kruskal on a graph dataset')
    parser.add_argument('-i', '--infile', default='data/input.json')
    parser.add_argument('-o', '--outfile', default='data/output.json')
    parser.add_argument('-j', '--workers',
                        default=1,
                        help='the number of worker processes analyzing graphs',
                        type=int)
    parser.add_argument('-v', '--verbose', action='store_true')
    parser.add_argument('-q', '--quiet', action='store_true')

    args = parser.parse_args()
    if args.workers < 1:
        parser.error('--workers must be at least 1')

    analyze(AnalyzerConfig.from_args(args))
