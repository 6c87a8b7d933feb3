import unittest

from dctri import triangulate
from dctri.delaunay.tds import ConnectivityGraph
from dctri.delaunay.cdt import ConstraintInserter, as_key
from dctri.delaunay.iter import EdgeIterator
from dctri.delaunay.errors import MalformedConstraintError

from checks import edge_set, crossings

#      1 ------- 3
#     /  \     /  \
#    0    \   /    4
#     \    \ /    /
#       ---- 2 --
POINTS = [(0, 0), (1, 1), (2, -1), (3, 1), (4, 0)]
EDGES = [(0, 1), (0, 2), (1, 2), (1, 3), (2, 3), (3, 4), (2, 4)]


def make_inserter():
    graph = ConnectivityGraph(len(POINTS))
    for a, b in EDGES:
        graph.connect(a, b)
    return ConstraintInserter(POINTS, graph)


class TestConstraintInserter(unittest.TestCase):

    def test_as_key(self):
        self.assertEqual(as_key(5, 2), (2, 5))
        self.assertEqual(as_key(2, 5), (2, 5))

    def test_walk(self):
        inserter = make_inserter()
        left, right, crossed = inserter.walk(0, 4)
        self.assertEqual(left, [1, 3])
        self.assertEqual(right, [2])
        self.assertEqual(crossed, [(1, 2), (3, 2)])
        # walking does not modify the graph
        self.assertEqual(edge_set(EdgeIterator(inserter.graph)),
                         edge_set(EDGES))

    def test_insert(self):
        inserter = make_inserter()
        inserter.insert([(0, 4)])
        edges = list(EdgeIterator(inserter.graph))
        self.assertEqual(edge_set(edges),
                         edge_set([(0, 1), (0, 2), (1, 3), (3, 4), (2, 4),
                                   (0, 4), (1, 4)]))
        self.assertEqual(inserter.removed, 2)
        self.assertEqual(inserter.constrained, set([(0, 4)]))
        self.assertEqual(crossings(POINTS, edges), [])

    def test_insert_existing_edge(self):
        inserter = make_inserter()
        inserter.insert([(3, 1), (1, 3)])
        self.assertEqual(edge_set(EdgeIterator(inserter.graph)),
                         edge_set(EDGES))
        self.assertEqual(inserter.removed, 0)
        self.assertEqual(inserter.constrained, set([(1, 3)]))

    def test_insert_reversed(self):
        inserter = make_inserter()
        inserter.insert_constraint(4, 0)
        self.assertTrue(inserter.graph.is_connected(0, 4))
        self.assertFalse(inserter.graph.is_connected(1, 2))
        self.assertFalse(inserter.graph.is_connected(2, 3))
        self.assertEqual(inserter.graph.edge_count(), 7)

    def test_crossing_constraints(self):
        inserter = make_inserter()
        inserter.insert_constraint(0, 4)
        with self.assertRaises(MalformedConstraintError):
            inserter.insert_constraint(1, 2)
        # graph left as it was
        self.assertTrue(inserter.graph.is_connected(0, 4))
        self.assertFalse(inserter.graph.is_connected(1, 2))

    def test_to_itself(self):
        inserter = make_inserter()
        with self.assertRaises(MalformedConstraintError):
            inserter.insert_constraint(2, 2)

    def test_through_vertex(self):
        # 2 lies on the segment 0 -> 4
        pts = [(0, 0), (1, -1), (1, 0), (1, 1), (2, 0)]
        graph = ConnectivityGraph(len(pts))
        for a, b in [(0, 1), (0, 2), (0, 3), (1, 2), (2, 3),
                     (1, 4), (2, 4), (3, 4)]:
            graph.connect(a, b)
        inserter = ConstraintInserter(pts, graph)
        with self.assertRaises(MalformedConstraintError):
            inserter.insert_constraint(0, 4)
        self.assertEqual(graph.edge_count(), 8)

    def test_retriangulate(self):
        # convex cavity above base edge 0 -> 5
        pts = [(0, 0), (0.5, 2), (1.5, 3), (3.5, 3), (4.5, 2), (5, 0)]
        graph = ConnectivityGraph(len(pts))
        for a in range(len(pts)):
            graph.connect(a, (a + 1) % len(pts))
        inserter = ConstraintInserter(pts, graph)
        inserter.retriangulate([0, 1, 2, 3, 4, 5])
        # a hexagon needs 3 diagonals
        self.assertEqual(graph.edge_count(), 9)
        self.assertEqual(crossings(pts, list(EdgeIterator(graph))), [])

    def test_long_constraint(self):
        # two rows, shifted half a unit; the constraint from the lower left
        # to the upper right corner crosses every edge between the rows
        n = 1500
        pts = [(i, 0) for i in range(n)] + [(i + 0.5, 1) for i in range(n)]
        dt = triangulate(pts, [(0, 2 * n - 1)])
        edges = edge_set(dt.edges())
        self.assertIn(frozenset((0, 2 * n - 1)), edges)
        # all points on the hull boundary
        self.assertEqual(len(edges), 2 * len(pts) - 3)
        self.assertEqual(len(dt.triangles()), len(pts) - 2)


if __name__ == "__main__":
    unittest.main()
