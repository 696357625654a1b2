"""
paths.py
2024-03-02

Single-source paths in an undirected Graph.

Both path finders record, for every reached vertex,
the vertex it was discovered from (edge_to). Paths
are rebuilt by walking edge_to back to the source.

BreadthFirstPaths gives shortest paths (fewest edges);
DepthFirstPaths gives *some* simple path.
"""

import logging

import numpy as np

from ugraph.search import NO_VERTEX, breadth_first_mark, depth_first_mark

logger = logging.getLogger(__name__)


class _Paths:

    def __init__(self, graph, s):
        graph.validate_vertex(s)
        self._graph = graph
        self._s = s
        self._marked = np.zeros(graph.V(), dtype=bool)
        self._edge_to = np.full(graph.V(), NO_VERTEX, dtype=int)
        self._count = 0

    def source(self):
        return self._s

    def count(self):
        return self._count

    def has_path_to(self, v):
        self._graph.validate_vertex(v)
        return bool(self._marked[v])

    def path_to(self, v):
        """
        Return the path from the source to v as a list
        of vertices [s, ..., v], or None if v is not
        reachable from the source.
        """
        if not self.has_path_to(v):
            return None

        stack = []
        x = v
        while x != self._s:
            stack.append(x)
            x = int(self._edge_to[x])
        stack.append(self._s)

        path = []
        while stack:
            path.append(stack.pop())
        return path


class DepthFirstPaths(_Paths):

    def __init__(self, graph, s):
        super(DepthFirstPaths, self).__init__(graph, s)
        self._count = len(depth_first_mark(graph, s, self._marked,
                                           edge_to=self._edge_to))
        logger.debug("DFS paths from %d: %d vertices reached", s, self._count)


class BreadthFirstPaths(_Paths):

    def __init__(self, graph, s):
        super(BreadthFirstPaths, self).__init__(graph, s)
        self._dist_to = np.full(graph.V(), NO_VERTEX, dtype=int)
        self._count = len(breadth_first_mark(graph, s, self._marked,
                                             edge_to=self._edge_to,
                                             dist_to=self._dist_to))
        logger.debug("BFS paths from %d: %d vertices reached", s, self._count)

    def dist_to(self, v):
        """
        Number of edges on a shortest path between
        the source and v (None if there is no such path).
        """
        if not self.has_path_to(v):
            return None
        return int(self._dist_to[v])
