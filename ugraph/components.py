"""
components.py
2024-03-02

Connected components of an undirected Graph.
"""

import logging

import numpy as np

from ugraph.search import NO_VERTEX, depth_first_mark

logger = logging.getLogger(__name__)


class ConnectedComponents:
    """
    Partition of the vertices into connected components.

    Component ids are 0, 1, ..., count()-1, numbered
    in order of each component's smallest vertex.
    """

    def __init__(self, graph):
        self._graph = graph
        self._marked = np.zeros(graph.V(), dtype=bool)
        self._id = np.full(graph.V(), NO_VERTEX, dtype=int)
        self._size = []

        for v in range(graph.V()):
            if not self._marked[v]:
                component = depth_first_mark(graph, v, self._marked)
                self._id[component] = len(self._size)
                self._size.append(len(component))

        logger.debug("Found %d connected components in %r", self.count(), graph)

    def count(self):
        return len(self._size)

    def id(self, v):
        self._graph.validate_vertex(v)
        return int(self._id[v])

    def size(self, v):
        """
        Number of vertices in the component containing v.
        """
        return self._size[self.id(v)]

    def connected(self, v, w):
        return self.id(v) == self.id(w)

    def components(self):
        """
        :return: list of components (lists of vertices,
                 ascending), indexed by component id.
        """
        return [np.flatnonzero(self._id == i).tolist() for i in range(self.count())]
