from ugraph.bipartite import Bipartite, NotBipartiteException
from ugraph.components import ConnectedComponents
from ugraph.cycle import Cycle
from ugraph.graph import Graph, IndexOutOfRangeException, MalformedInputException
from ugraph.paths import BreadthFirstPaths, DepthFirstPaths
from ugraph.search import BreadthFirstSearch, DepthFirstSearch
