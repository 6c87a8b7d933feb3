import unittest

from dctri.delaunay.tds import ConnectivityGraph
from dctri.delaunay.strips import triangulate_strips

from checks import edge_set


def strips(points):
    graph = ConnectivityGraph(len(points))
    starts = triangulate_strips(points, graph)
    edges = set()
    for a in range(len(points)):
        for b in graph.connections(a):
            edges.add(frozenset((a, b)))
    return starts, edges


class TestStrips(unittest.TestCase):

    def test_triangles_and_single(self):
        starts, edges = strips([(0, 0), (1, 3), (2, 1), (3, 0)])
        self.assertEqual(starts, [0, 3, 4])
        self.assertEqual(edges, edge_set([(0, 1), (1, 2), (0, 2)]))

    def test_pair_at_end(self):
        starts, edges = strips([(0, 0), (1, 3), (2, 1), (3, 0), (4, 4)])
        self.assertEqual(starts, [0, 3, 5])
        self.assertEqual(edges, edge_set([(0, 1), (1, 2), (0, 2), (3, 4)]))

    def test_collinear_triple(self):
        starts, edges = strips([(0, 0), (1, 1), (2, 2)])
        self.assertEqual(starts, [0, 3])
        self.assertEqual(edges, edge_set([(0, 1), (1, 2)]))

    def test_vertical_run_first(self):
        starts, edges = strips([(0, 0), (0, 1), (0, 2), (1, 0)])
        self.assertEqual(starts, [0, 4])
        self.assertEqual(edges, edge_set([(0, 1), (1, 2),
                                          (0, 3), (1, 3), (2, 3)]))

    def test_vertical_run_only(self):
        starts, edges = strips([(0, 0), (0, 1), (0, 2)])
        self.assertEqual(starts, [0, 3])
        self.assertEqual(edges, edge_set([(0, 1), (1, 2)]))

    def test_vertical_run_second(self):
        starts, edges = strips([(0, 0), (1, 0), (1, 1), (1, 2)])
        self.assertEqual(starts, [0, 4])
        self.assertEqual(edges, edge_set([(1, 2), (2, 3),
                                          (0, 1), (0, 2), (0, 3)]))

    def test_run_starts_at_third(self):
        starts, edges = strips([(0, 0), (1, 5), (2, 0), (2, 1), (3, 3)])
        self.assertEqual(starts, [0, 2, 5])
        self.assertEqual(edges, edge_set([(0, 1),
                                          (2, 3), (2, 4), (3, 4)]))

    def test_small(self):
        self.assertEqual(strips([(0, 0)]), ([0, 1], set()))
        self.assertEqual(strips([(0, 0), (1, 1)]),
                         ([0, 2], edge_set([(0, 1)])))
        self.assertEqual(strips([]), ([0], set()))


if __name__ == "__main__":
    unittest.main()
