"""
search.py
2024-03-02

Depth-first and breadth-first search from
a single source vertex of an undirected Graph.

Both searches visit neighbors in adjacency-list
(insertion) order, so results are reproducible.
DFS uses an explicit stack of neighbor iterators:
it marks vertices in exactly the order a recursive
DFS would, without the recursion depth limit.
"""

import logging
from collections import deque

import numpy as np

logger = logging.getLogger(__name__)

NO_VERTEX = -1


def dfs(graph, vertex=0):
    """
    Performs DFS traversal of the graph, starting at
    the specified vertex (default 0).

    :param graph: Graph
    :param vertex: source vertex
    :return: list of vertices in order of traversal
    """
    graph.validate_vertex(vertex)
    marked = np.zeros(graph.V(), dtype=bool)
    return depth_first_mark(graph, vertex, marked)


def bfs(graph, vertex=0):
    """
    Performs BFS traversal of the graph, starting at
    the specified vertex (default 0).

    :param graph: Graph
    :param vertex: source vertex
    :return: list of vertices in order of traversal
    """
    graph.validate_vertex(vertex)
    marked = np.zeros(graph.V(), dtype=bool)
    return breadth_first_mark(graph, vertex, marked)


def depth_first_mark(graph, s, marked, edge_to=None):
    """
    Mark every unmarked vertex reachable from s (depth-first).

    `marked` (and `edge_to`, if given) are updated in place;
    edge_to[w] is the vertex from which w was discovered.

    :return: list of newly marked vertices, in order of traversal
    """
    marked[s] = True
    visited = [s]
    stack = [(s, iter(graph.adj(s)))]

    while len(stack) > 0:
        v, neighbors = stack[-1]
        for w in neighbors:
            if not marked[w]:
                marked[w] = True
                if edge_to is not None:
                    edge_to[w] = v
                visited.append(w)
                stack.append((w, iter(graph.adj(w))))
                break
        else:
            stack.pop()

    return visited


def trace_cycle(edge_to, v, w):
    """
    Close a cycle found through the non-tree edge v-w,
    where w is an ancestor of v in the DFS tree (or v
    itself, for a self-loop).

    :param edge_to: array of DFS tree parents
    :return: the cycle as a closed walk [w, ..., v, w]
    """
    cycle = []
    x = v
    while x != w:
        cycle.append(x)
        x = int(edge_to[x])
    cycle.append(w)
    cycle.reverse()
    cycle.append(w)
    return cycle


def breadth_first_mark(graph, s, marked, edge_to=None, dist_to=None):
    """
    Mark every unmarked vertex reachable from s (breadth-first).

    Vertices are marked when they are enqueued, so they
    are marked in nondecreasing order of distance from s.

    :return: list of newly marked vertices, in order of traversal
    """
    marked[s] = True
    if dist_to is not None:
        dist_to[s] = 0
    visited = [s]
    queue = deque([s])

    while queue:
        v = queue.popleft()
        for w in graph.adj(v):
            if not marked[w]:
                marked[w] = True
                if edge_to is not None:
                    edge_to[w] = v
                if dist_to is not None:
                    dist_to[w] = dist_to[v] + 1
                visited.append(w)
                queue.append(w)

    return visited


class DepthFirstSearch:
    """
    The set of vertices reachable from a source vertex,
    found by depth-first search.
    """

    def __init__(self, graph, s):
        graph.validate_vertex(s)
        self._graph = graph
        self._marked = np.zeros(graph.V(), dtype=bool)
        self._count = len(depth_first_mark(graph, s, self._marked))
        logger.debug("DFS from %d reached %d of %d vertices", s, self._count, graph.V())

    def marked(self, v):
        """
        Is there a path between the source and v?
        """
        self._graph.validate_vertex(v)
        return bool(self._marked[v])

    has_visited = marked

    def count(self):
        """
        Number of vertices connected to the source (including itself).
        """
        return self._count


class BreadthFirstSearch:
    """
    The set of vertices reachable from a source vertex,
    found by breadth-first search.
    """

    def __init__(self, graph, s):
        graph.validate_vertex(s)
        self._graph = graph
        self._marked = np.zeros(graph.V(), dtype=bool)
        self._count = len(breadth_first_mark(graph, s, self._marked))
        logger.debug("BFS from %d reached %d of %d vertices", s, self._count, graph.V())

    def marked(self, v):
        self._graph.validate_vertex(v)
        return bool(self._marked[v])

    has_visited = marked

    def count(self):
        return self._count
