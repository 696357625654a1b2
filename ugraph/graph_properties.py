"""
graph_properties.py
2024-03-02

This contains some useful functions for
checking the properties of graph objects.

The graph is an (undirected) ugraph Graph.
"""

from ugraph.components import ConnectedComponents
from ugraph.search import dfs


def is_connected(graph):
    """
    Checks whether the graph is connected.

    The graph with no vertices counts as connected.

    :param graph:
    :return:
    """

    if graph.V() == 0:
        return True

    visited = dfs(graph, vertex=0)
    return len(visited) == graph.V()


def all_reachable(graph, root):
    """
    Checks whether all vertices are reachable from
    a given root vertex.

    :param graph:
    :param root:
    :return:
    """

    visited = dfs(graph, vertex=root)
    return len(visited) == graph.V()


def is_forest(graph):
    """
    Checks whether the graph is acyclic.

    Every edge of a forest joins two components,
    so E == V - (number of components).

    :param graph:
    :return:
    """

    cc = ConnectedComponents(graph)
    return graph.E() == graph.V() - cc.count()


def is_tree(graph):
    """
    Checks whether the given graph is a tree.

    :param graph:
    :return:
    """

    # Do we have N-1 edges?
    if graph.E() == graph.V() - 1:
        # is the graph connected?
        return is_connected(graph)

    return False
