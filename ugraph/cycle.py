"""
cycle.py
2024-03-02

Cycle detection in an undirected Graph.

We run a DFS from every unmarked vertex, keeping
track of the vertex we arrived from. A marked
neighbor that is not reached through the edge we
arrived on is a back edge, which closes a cycle.

Only *one* occurrence of the parent is excused: a
second edge back to the parent is a parallel edge,
i.e. a cycle of length 2. Self-loops are cycles of
length 1.
"""

import logging

import numpy as np

from ugraph.search import NO_VERTEX, trace_cycle

logger = logging.getLogger(__name__)


class _Frame:
    """
    One level of an (explicit-stack) DFS: the current
    vertex, the vertex it was discovered from, and
    the position in its adjacency list.
    """
    __slots__ = ("vertex", "parent", "neighbors", "parent_edge_seen")

    def __init__(self, graph, vertex, parent):
        self.vertex = vertex
        self.parent = parent
        self.neighbors = iter(graph.adj(vertex))
        self.parent_edge_seen = False


class Cycle:

    def __init__(self, graph):
        self._graph = graph
        self._marked = np.zeros(graph.V(), dtype=bool)
        self._edge_to = np.full(graph.V(), NO_VERTEX, dtype=int)
        self._cycle = None

        for v in range(graph.V()):
            if not self._marked[v]:
                self._dfs(v)

        logger.debug("%r has cycle: %s", graph, self.has_cycle())

    def _dfs(self, s):
        # the root is its own parent
        self._marked[s] = True
        stack = [_Frame(self._graph, s, s)]

        while len(stack) > 0:
            frame = stack[-1]
            v = frame.vertex
            for w in frame.neighbors:
                if not self._marked[w]:
                    self._marked[w] = True
                    self._edge_to[w] = v
                    stack.append(_Frame(self._graph, w, v))
                    break
                if w == frame.parent and not frame.parent_edge_seen:
                    frame.parent_edge_seen = True
                    continue
                if self._cycle is None:
                    self._cycle = trace_cycle(self._edge_to, v, w)
            else:
                stack.pop()

    def has_cycle(self):
        return self._cycle is not None

    def cycle(self):
        """
        Return a cycle as a closed walk [x, ..., x],
        or None if the graph is acyclic.
        """
        if self._cycle is None:
            return None
        return list(self._cycle)
