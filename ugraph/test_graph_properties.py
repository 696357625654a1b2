import unittest
import numpy as np
import ugraph.graph_properties as gp
from ugraph.bipartite import Bipartite
from ugraph.components import ConnectedComponents
from ugraph.cycle import Cycle
from ugraph.graph import Graph
from ugraph.paths import BreadthFirstPaths, DepthFirstPaths


class GraphPropertiesTests(unittest.TestCase):

    def setUp(self) -> None:

        self.linear_ugraph = Graph.from_adjacency_matrix(np.array([[0,1,0,0],
                                                                   [0,0,1,0],
                                                                   [0,0,0,1],
                                                                   [0,0,0,0]]))

        self.cyclic_ugraph = Graph.from_adjacency_matrix(np.array([[0, 1, 0, 0, 0],
                                                                   [0, 0, 1, 0, 0],
                                                                   [0, 0, 0, 1, 0],
                                                                   [0, 0, 0, 0, 1],
                                                                   [1, 0, 0, 0, 0]]))

        self.unconnected_graph = Graph.from_adjacency_matrix(np.array([[0,1,0,0],
                                                                       [0,0,0,0],
                                                                       [0,0,0,1],
                                                                       [0,0,0,0]]))

        self.tree = Graph.from_adjacency_matrix(np.array([[0,1,1,0,0],
                                                          [0,0,0,1,1],
                                                          [0,0,0,0,0],
                                                          [0,0,0,0,0],
                                                          [0,0,0,0,0]]))

        self.triangle = Graph.from_adjacency_matrix(np.array([[0,1,0],
                                                              [0,0,1],
                                                              [1,0,0]]))

    def test_is_connected(self):

        self.assertTrue(gp.is_connected(self.linear_ugraph))
        self.assertTrue(gp.is_connected(self.cyclic_ugraph))
        self.assertTrue(not gp.is_connected(self.unconnected_graph))
        self.assertTrue(gp.is_connected(Graph(0)))

    def test_all_reachable(self):

        self.assertTrue(gp.all_reachable(self.linear_ugraph, 3))
        self.assertTrue(gp.all_reachable(self.cyclic_ugraph, 2))
        self.assertTrue(not gp.all_reachable(self.unconnected_graph, 0))

    def test_is_tree(self):

        self.assertTrue(gp.is_tree(self.tree))
        self.assertTrue(gp.is_tree(self.linear_ugraph))
        self.assertTrue(not gp.is_tree(self.triangle))
        self.assertTrue(not gp.is_tree(self.unconnected_graph))

    def test_is_forest(self):

        self.assertTrue(gp.is_forest(self.tree))
        self.assertTrue(gp.is_forest(self.unconnected_graph))
        self.assertTrue(gp.is_forest(Graph(3)))
        self.assertTrue(not gp.is_forest(self.cyclic_ugraph))
        self.assertTrue(not gp.is_forest(self.triangle))

    def test_forest_iff_acyclic(self):

        rng = np.random.default_rng(11)
        for _ in range(20):
            V = int(rng.integers(1, 12))
            g = Graph(V)
            for _ in range(int(rng.integers(0, V + 2))):
                v, w = (int(x) for x in rng.integers(0, V, size=2))
                g.add_edge(v, w)
            self.assertEqual(gp.is_forest(g), not Cycle(g).has_cycle())

    def test_square_scenario(self):

        g = Graph.from_stream("4 4\n0 1\n1 2\n2 3\n3 0\n")
        self.assertTrue(Cycle(g).has_cycle())
        self.assertTrue(Bipartite(g).is_bipartite())
        self.assertEqual(ConnectedComponents(g).count(), 1)

    def test_triangle_and_edge_scenario(self):

        g = Graph.from_stream("5 4\n0 1\n1 2\n2 0\n3 4\n")
        cc = ConnectedComponents(g)
        self.assertEqual(cc.count(), 2)
        self.assertTrue(cc.connected(0, 2))
        self.assertTrue(not cc.connected(0, 3))
        self.assertTrue(Cycle(g).has_cycle())
        self.assertTrue(not Bipartite(g).is_bipartite())

    def test_no_edges_scenario(self):

        g = Graph.from_stream("3 0")
        self.assertEqual(ConnectedComponents(g).count(), 3)
        self.assertTrue(not Cycle(g).has_cycle())
        self.assertTrue(Bipartite(g).is_bipartite())
        self.assertIsNone(DepthFirstPaths(g, 0).path_to(1))
        self.assertIsNone(BreadthFirstPaths(g, 0).path_to(1))

    def test_path_graph_scenario(self):

        g = Graph.from_stream("4 3\n0 1\n1 2\n2 3\n")
        self.assertEqual(BreadthFirstPaths(g, 0).path_to(3), [0, 1, 2, 3])
        self.assertEqual(DepthFirstPaths(g, 0).path_to(3), [0, 1, 2, 3])


if __name__ == '__main__':
    unittest.main()
