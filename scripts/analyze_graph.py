# analyze_graph.py
# 2024-03-02
#
# Read an undirected graph file (V, E, then E vertex pairs)
# and report its components, cycles, bipartiteness and
# paths from a source vertex.

import argparse
import logging
import sys

import pandas as pd

from ugraph import (Bipartite, BreadthFirstPaths, ConnectedComponents, Cycle,
                    DepthFirstPaths, Graph, IndexOutOfRangeException,
                    MalformedInputException)

logger = logging.getLogger(__name__)


def components_table(cc, V):
    """
    Build a DataFrame with one row per vertex:
    its component id and the size of that component.
    """
    table = pd.DataFrame({"vertex": range(V),
                          "component": [cc.id(v) for v in range(V)],
                          "size": [cc.size(v) for v in range(V)]})
    return table


def format_path(path):
    if path is None:
        return "no path"
    return " -> ".join(str(v) for v in path)


def analyze(graph, source=0, targets=None, use_bfs=False, out=sys.stdout):

    cc = ConnectedComponents(graph)
    cycle = Cycle(graph)
    bipartite = Bipartite(graph)

    print("{} vertices, {} edges".format(graph.V(), graph.E()), file=out)
    print("components: {}".format(cc.count()), file=out)
    for i, component in enumerate(cc.components()):
        print("\t{}: {}".format(i, " ".join(str(v) for v in component)), file=out)

    print("has cycle: {}".format(cycle.has_cycle()), file=out)
    if cycle.has_cycle():
        print("\t{}".format(format_path(cycle.cycle())), file=out)

    print("bipartite: {}".format(bipartite.is_bipartite()), file=out)
    if not bipartite.is_bipartite():
        print("\todd cycle: {}".format(format_path(bipartite.odd_cycle())), file=out)

    if graph.V() == 0:
        return cc

    if use_bfs:
        paths = BreadthFirstPaths(graph, source)
    else:
        paths = DepthFirstPaths(graph, source)

    if targets is None:
        targets = range(graph.V())

    print("paths from {} ({}):".format(source, "bfs" if use_bfs else "dfs"), file=out)
    for v in targets:
        print("\t{}: {}".format(v, format_path(paths.path_to(v))), file=out)

    return cc


if __name__=="__main__":

    parser = argparse.ArgumentParser(description="Analyze an undirected graph file.")
    parser.add_argument("graph_file", help="graph file ('-' reads stdin)")
    parser.add_argument("--source", type=int, default=0,
                        help="source vertex for path queries")
    parser.add_argument("--target", type=int, action="append",
                        help="vertex to print a path to (repeatable; default: all)")
    parser.add_argument("--bfs", action="store_true",
                        help="use breadth-first (shortest) paths")
    parser.add_argument("--components-out",
                        help="write a TSV of vertex components to this file")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(levelname)s | %(message)s")

    try:
        if args.graph_file == "-":
            graph = Graph.from_stream(sys.stdin)
        else:
            with open(args.graph_file, "r") as f:
                graph = Graph.from_stream(f)

        logger.info("Loaded %s", args.graph_file)
        cc = analyze(graph, source=args.source, targets=args.target,
                     use_bfs=args.bfs)
    except (MalformedInputException, IndexOutOfRangeException) as e:
        logger.error("%s: %s", args.graph_file, e)
        sys.exit(1)

    if args.components_out is not None:
        table = components_table(cc, graph.V())
        table.to_csv(args.components_out, index=False, sep="\t")
        logger.info("Wrote %s", args.components_out)
