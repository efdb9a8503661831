import networkx as nx
import random

from typing import Any, Callable

from mstgraph import Graph

def arbitrary_weight(low: int, high: int, seed: int=0) -> Callable[[Any, Any], int]:
    rng = random.Random(seed)
    return lambda _a, _b: rng.randint(low, high)

def from_networkx(g: nx.classes.graph.Graph,
                  decide_weight: Callable[[Any, Any], int],
                  nodename: Callable[[Any], str]= lambda x: str(x),
                  graph_id: int=None) -> Graph:
    graph = Graph(graph_id=graph_id)

    for node in g.nodes:
        graph.add_vertex(nodename(node))

    for edge in g.edges:
        graph.add_edge(nodename(edge[0]), nodename(edge[1]),
                       decide_weight(edge[0], edge[1]))

    return graph

def to_networkx(graph: Graph) -> nx.classes.graph.Graph:
    # parallel edges collapse to the lightest one
    g = nx.Graph()
    g.add_nodes_from(graph.vertices)

    for edge in graph.edges:
        if g.has_edge(edge.u, edge.v) and g[edge.u][edge.v]['weight'] <= edge.weight:
            continue
        g.add_edge(edge.u, edge.v, weight=edge.weight)

    return g

def reference_mst_cost(graph: Graph) -> int:
    forest = nx.minimum_spanning_tree(to_networkx(graph))
    return sum(d['weight'] for _, _, d in forest.edges(data=True))

def component_count(graph: Graph) -> int:
    return nx.number_connected_components(to_networkx(graph))


if __name__ == '__main__':
    import argparse
    import json

    parser = argparse.ArgumentParser(prog='nx_utils',
                                     description='Write a networkx-generated graph as a dataset')
    parser.add_argument('-o', '--outfile', default='nx_graphs.json')
    parser.add_argument('-s', '--seed', default=0, type=int)
    args = parser.parse_args()

    ## Generate a few structured graphs

    graphs = [
        from_networkx(nx.circulant_graph(1000, [1, 2]), arbitrary_weight(1, 500, args.seed), graph_id=1),
        from_networkx(nx.connected_caveman_graph(100, 10), arbitrary_weight(1, 500, args.seed), graph_id=2),
        from_networkx(nx.hypercube_graph(10), arbitrary_weight(1, 500, args.seed),
                      nodename=lambda node: str(sum(node[-i-1]* 2**i for i in range(len(node)))),
                      graph_id=3),
    ]

    with open(args.outfile, 'w') as f:
        json.dump({'graphs': [g.to_dict() for g in graphs]}, f, indent=2)
