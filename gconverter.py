import json

from mstgraph import Graph

def text_to_dataset(infile_name: str, outfile_name: str, graph_id: int = 1) -> Graph:
    '''
    Convert a ``<nvertices> <nedges>`` / ``<u> <v> <w>`` edge list into a
    one-graph JSON dataset. Vertices are labelled ``0..nvertices-1``.
    '''
    with open(infile_name, 'r') as infile:
        header = infile.readline().split()
        nvertices = int(header[0])
        nedges = int(header[1])

        graph = Graph((str(i) for i in range(nvertices)), graph_id=graph_id)
        for line in infile:
            if not line.strip():
                continue
            u, v, w = line.split()
            graph.add_edge(u, v, int(w))

    if graph.edge_count != nedges:
        raise ValueError(f'{infile_name}: header says {nedges} edges, found {graph.edge_count}')

    with open(outfile_name, 'w') as outfile:
        json.dump({'graphs': [graph.to_dict()]}, outfile, indent=2)

    return graph

def dataset_to_text(infile_name: str, outfile_name: str,
                    graph_id: int = None, reindex: bool = False) -> None:
    with open(infile_name, 'r') as infile:
        entries = json.load(infile)['graphs']

    if graph_id is None:
        entry = entries[0]
    else:
        matches = [e for e in entries if e['id'] == graph_id]
        if not matches:
            raise KeyError(f'no graph with id {graph_id} in {infile_name}')
        entry = matches[0]

    graph = Graph.from_dict(entry)

    # reindex maps labels to their position in the vertex list
    if reindex:
        index = {v: i for (i, v) in enumerate(graph.vertices)}
        to_idx = lambda v: index[v]
    else:
        to_idx = lambda v: int(v)

    with open(outfile_name, 'w') as outfile:
        outfile.write(f'{graph.vertex_count} {graph.edge_count}\n')
        for edge in graph.edges:
            outfile.write(f'{to_idx(edge.u)} {to_idx(edge.v)} {edge.weight}\n')

if __name__ == '__main__':
    import argparse

    parser = argparse.ArgumentParser(prog='gconverter',
                                     description='Convert between graph formats')
    parser.add_argument('-i', '--infile', required=True)
    parser.add_argument('-o', '--outfile', required=True)
    parser.add_argument('--to-text', action='store_true',
                        help='convert a JSON dataset to an edge list instead')
    parser.add_argument('-g', '--graph-id', type=int)
    parser.add_argument('--reindex', action='store_true',
                        help='number vertices by position instead of parsing labels')

    args = parser.parse_args()

    if args.to_text:
        dataset_to_text(args.infile, args.outfile, args.graph_id, args.reindex)
    else:
        text_to_dataset(args.infile, args.outfile, graph_id=args.graph_id or 1)
