## Tester for comparing the Prim and Kruskal engines on generated graphs

from typing import Any, Callable

import networkx as nx

from mstgraph import Graph, MSTResult

def run_engine(find_mst: Callable[[Graph], MSTResult], graph: Graph, reps: int) -> dict[str, Any]:
    results = [find_mst(graph) for _ in range(reps)]

    metrics = {
        'compute_times': [r.elapsed_ms for r in results],
        'operations': [r.operations for r in results],
        'weights': [r.total_cost for r in results],
        'connected': all(r.connected for r in results),
    }
    metrics['avg_compute_time'] = sum(metrics['compute_times'])/len(metrics['compute_times'])

    if min(metrics['weights']) == max(metrics['weights']):
        metrics['weight'] = min(metrics['weights'])
        del metrics['weights']

    # counters do not depend on timing; every run should agree
    metrics['ops'] = max(metrics['operations'])

    return metrics

def ratio(num: float, den: float) -> float:
    if den == 0:
        return float('inf') if num else 1.0
    return num / den

def print_stats(all_metrics: dict[Any, Any], baseline: str) -> None:
    for impl in all_metrics:
        if impl == baseline:
            continue

        print(f'Performance of {impl}:')
        all_tests = all_metrics[impl]
        time_ratios = []
        ops_ratios = []
        for (test, metrics) in all_tests.items():
            base = all_metrics[baseline][test]
            print(f'  {test} ({len(metrics["compute_times"])} runs):')

            if 'weight' not in metrics or metrics['weight'] != base.get('weight'):
                print('Inconsistent result on this test')
                continue

            time_ratio = ratio(metrics['avg_compute_time'], base['avg_compute_time'])
            ops_ratio = ratio(metrics['ops'], base['ops'])

            time_ratios.append(time_ratio)
            ops_ratios.append(ops_ratio)

            print(f'    Compute time = {metrics["avg_compute_time"]:0.2f}ms,  Operations = {metrics["ops"]},  Weight = {metrics["weight"]}')
            print(f'    Time vs {baseline}={time_ratio:0.2f}x, Operations vs {baseline}={ops_ratio:0.2f}x')
            print()

        if time_ratios:
            print(f'Average compute time ratio of {impl}: {sum(time_ratios)/len(time_ratios):0.2f}')
            print(f'Average operation ratio of {impl}: {sum(ops_ratios)/len(ops_ratios):0.2f}')
        print()

if __name__ == '__main__':
    import argparse

    import kruskal
    import nx_utils
    import prim

    parser = argparse.ArgumentParser(prog='mstbench',
                                     description='Benchmark the Prim and Kruskal MST engines')
    parser.add_argument('-r', '--reps',
                        default=3,
                        help='the number of times to repeat each experiment',
                        type=int)
    parser.add_argument('-s', '--seed',
                        default=0,
                        help='the seed value to use for generating random graphs',
                        type=int)
    parser.add_argument('--min-weight',
                        default=1,
                        help='the minimum edge weight in random graphs',
                        type=int)
    parser.add_argument('--max-weight',
                        default=1000,
                        help='the maximum edge weight in random graphs',
                        type=int)

    args = parser.parse_args()

    def create_arb_weight_test(g_fxn: Callable[..., nx.classes.graph.Graph],
                               g_args: tuple[Any, ...],
                               nodename: Callable[[Any], str]= lambda x: str(x)) -> Callable[[], Graph]:
        def inner():
            g = g_fxn(*g_args)
            return nx_utils.from_networkx(g,
                                          nx_utils.arbitrary_weight(args.min_weight, args.max_weight, args.seed),
                                          nodename=nodename)

        return inner

    # Which impl is the one being benchmarked against
    BASELINE = 'Kruskal'

    impls = {
        BASELINE: kruskal.find_mst,
        'Prim': prim.find_mst,
    }

    tests = {
        '2-degree Circulant n=5000':
            create_arb_weight_test(nx.circulant_graph,
                                   (5000, [1, 2]),
            ),

        'Hypercube d=12, n=4096':
            create_arb_weight_test(nx.hypercube_graph,
                                   (12,),
                                   lambda node: str(sum(node[-i-1]* 2**i for i in range(len(node)))),
            ),

        'Connected Caveman Graph, 200 groups of size k=20, n=4000':
            create_arb_weight_test(nx.connected_caveman_graph,
                                   (200, 20),
            ),

        'Binomial Graph, p=0.01 n=2000':
            create_arb_weight_test(nx.gnp_random_graph,
                                   (2000, 0.01, args.seed),
            ),
    }

    all_metrics = {
        impl: {} for impl in impls.keys()
    }

    for (test_name, test_gen) in tests.items():
        print(f'Generating graph for test "{test_name}"...')
        graph = test_gen()

        for (impl, find_mst) in impls.items():
            print(f'  Running {impl} on test "{test_name}"...')

            metrics = run_engine(find_mst, graph, args.reps)
            if 'weight' not in metrics:
                print(f'!!! Error on {impl}: inconsistent outputs')
            if not metrics['connected']:
                print(f'  Info: "{test_name}" is not connected')

            all_metrics[impl][test_name] = metrics

            print('   ', {k: v for (k, v) in metrics.items() if k != 'operations'})
            print()
        print()

    print_stats(all_metrics, BASELINE)
