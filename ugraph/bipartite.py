"""
bipartite.py
2024-03-02

Two-coloring of an undirected Graph.

A DFS from every unmarked vertex colors each newly
discovered vertex with the opposite color of the
vertex it was discovered from. An edge between two
vertices of the same color means there is an odd
cycle, and so the graph is not bipartite.
"""

import logging

import numpy as np

from ugraph.search import NO_VERTEX, trace_cycle

logger = logging.getLogger(__name__)


class Bipartite:

    def __init__(self, graph):
        self._graph = graph
        self._marked = np.zeros(graph.V(), dtype=bool)
        self._color = np.zeros(graph.V(), dtype=bool)
        self._edge_to = np.full(graph.V(), NO_VERTEX, dtype=int)
        self._odd_cycle = None

        for v in range(graph.V()):
            if not self._marked[v]:
                self._dfs(v)

        logger.debug("%r is bipartite: %s", graph, self.is_bipartite())

    def _dfs(self, s):
        # roots keep the default color (False)
        self._marked[s] = True
        stack = [(s, iter(self._graph.adj(s)))]

        while len(stack) > 0:
            v, neighbors = stack[-1]
            for w in neighbors:
                if not self._marked[w]:
                    self._marked[w] = True
                    self._color[w] = not self._color[v]
                    self._edge_to[w] = v
                    stack.append((w, iter(self._graph.adj(w))))
                    break
                if self._color[w] == self._color[v] and self._odd_cycle is None:
                    self._odd_cycle = trace_cycle(self._edge_to, v, w)
            else:
                stack.pop()

    def is_bipartite(self):
        return self._odd_cycle is None

    def color(self, v):
        """
        Return the side of the bipartition containing v.

        :raises NotBipartiteException: if the graph is not bipartite
        """
        self._graph.validate_vertex(v)
        if not self.is_bipartite():
            raise NotBipartiteException("graph is not bipartite")
        return bool(self._color[v])

    def odd_cycle(self):
        """
        Return an odd-length cycle as a closed walk
        [x, ..., x], or None if the graph is bipartite.
        """
        if self._odd_cycle is None:
            return None
        return list(self._odd_cycle)


class NotBipartiteException(Exception):
    pass
