"""
graph.py
2024-03-02

An adjacency-list representation of an
undirected graph on the vertices 0, ..., V-1.

Parallel edges and self-loops are allowed;
each undirected edge v-w is stored twice
(w in v's list and v in w's list).
"""

import logging
import operator
from collections.abc import Sequence

import numpy as np

logger = logging.getLogger(__name__)


class Graph:
    """
    Undirected graph backed by adjacency lists.

    The graph only grows: vertices are fixed at
    construction and edges can be added one at a time.
    It is *not* safe to call add_edge concurrently,
    or while an analysis is reading the graph.
    """

    def __init__(self, V):
        V = operator.index(V)
        if V < 0:
            raise ValueError("Number of vertices must be nonnegative")
        self._V = V
        self._E = 0
        self._adj = [[] for _ in range(self._V)]

    @classmethod
    def from_stream(cls, stream):
        """
        Read a graph from a stream of whitespace-delimited
        integers: V, then E, then E pairs of vertices.

        :param stream: a text file-like object, an iterable of lines,
                       or a single string
        :return: Graph
        :raises MalformedInputException: if the stream is truncated,
                 contains a non-integer or an out-of-range vertex.
        """
        tokens = _tokens(stream)

        V = _next_int(tokens, "vertex count")
        if V < 0:
            raise MalformedInputException("Number of vertices must be nonnegative")
        E = _next_int(tokens, "edge count")
        if E < 0:
            raise MalformedInputException("Number of edges must be nonnegative")

        graph = cls(V)
        for i in range(E):
            v = _next_int(tokens, "edge {} endpoint".format(i))
            w = _next_int(tokens, "edge {} endpoint".format(i))
            try:
                graph.add_edge(v, w)
            except IndexOutOfRangeException as e:
                raise MalformedInputException("Invalid edge {}: {}".format(i, e)) from e

        logger.debug("Read graph with %d vertices and %d edges", graph.V(), graph.E())
        return graph

    @classmethod
    def from_adjacency_matrix(cls, adj_mat):
        """
        Build a Graph from a square adjacency matrix.

        The matrix is interpreted as an *undirected* graph:
        i-j is an edge if either adj_mat[i,j] or adj_mat[j,i]
        is nonzero. A nonzero diagonal entry is a self-loop.

        :param adj_mat: (NxN array)
        :return: Graph
        """
        adj_mat = np.asarray(adj_mat)
        if adj_mat.ndim != 2 or adj_mat.shape[0] != adj_mat.shape[1]:
            raise MalformedInputException(
                "Adjacency matrix must be square, got shape {}".format(adj_mat.shape))

        nonzero = adj_mat != 0
        undirected = np.triu(nonzero | nonzero.T)

        graph = cls(adj_mat.shape[0])
        for i, j in zip(*np.nonzero(undirected)):
            graph.add_edge(int(i), int(j))

        return graph

    def V(self):
        return self._V

    def E(self):
        return self._E

    def validate_vertex(self, v):
        """
        Check that v is an integer vertex index in [0, V).

        :return: v as a plain int
        :raises TypeError: if v is not an integer
        :raises IndexOutOfRangeException: if v is out of range
        """
        v = operator.index(v)
        if not 0 <= v < self._V:
            raise IndexOutOfRangeException(
                "vertex {} is not between 0 and {}".format(v, self._V - 1))
        return v

    def add_edge(self, v, w):
        """
        Add the undirected edge v-w to this graph.
        """
        v = self.validate_vertex(v)
        w = self.validate_vertex(w)
        self._adj[v].append(w)
        self._adj[w].append(v)
        self._E += 1

    def adj(self, v):
        """
        Return the vertices adjacent to v, in the order
        their edges were added (duplicates included).

        The result is a read-only view: it can be iterated
        any number of times and reflects later edge additions.
        """
        v = self.validate_vertex(v)
        return Neighbors(self._adj[v])

    def degree(self, v):
        v = self.validate_vertex(v)
        return len(self._adj[v])

    def max_degree(self):
        return max((len(a) for a in self._adj), default=0)

    def average_degree(self):
        if self._V == 0:
            return 0.0
        return 2.0 * self._E / self._V

    def number_of_self_loops(self):
        # each self-loop appears twice in its vertex's list
        count = sum(1 for v in range(self._V) for w in self._adj[v] if v == w)
        return count // 2

    def to_adjacency_matrix(self):
        """
        Return a symmetric (VxV) integer matrix whose
        entries count the edges between each pair of
        vertices. The diagonal counts self-loops.
        """
        adj_mat = np.zeros((self._V, self._V), dtype=int)
        for v in range(self._V):
            for w in self._adj[v]:
                adj_mat[v, w] += 1

        diag = np.diag_indices(self._V)
        adj_mat[diag] = adj_mat[diag] // 2
        return adj_mat

    def __str__(self):
        lines = ["{} vertices, {} edges".format(self._V, self._E)]
        for v in range(self._V):
            lines.append("{}: {}".format(v, " ".join(str(w) for w in self._adj[v])))
        return "\n".join(lines)

    def __repr__(self):
        return "Graph(V={}, E={})".format(self._V, self._E)


class Neighbors(Sequence):
    """
    Read-only view of one vertex's adjacency list.
    """

    def __init__(self, neighbors):
        self._neighbors = neighbors

    def __getitem__(self, i):
        return self._neighbors[i]

    def __len__(self):
        return len(self._neighbors)

    def __iter__(self):
        return iter(self._neighbors)

    def __repr__(self):
        return "Neighbors({})".format(self._neighbors)


def _tokens(stream):
    if isinstance(stream, str):
        stream = stream.splitlines()
    for line in stream:
        for token in line.split():
            yield token


def _next_int(tokens, what):
    try:
        token = next(tokens)
    except StopIteration:
        raise MalformedInputException("Unexpected end of input reading {}".format(what)) from None

    try:
        return int(token)
    except ValueError:
        raise MalformedInputException(
            "Expected an integer for {}, got {!r}".format(what, token)) from None


class IndexOutOfRangeException(IndexError):
    pass


class MalformedInputException(ValueError):
    pass
