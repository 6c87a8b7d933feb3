import unittest
from math import pi

from dctri.delaunay.preds import orient2d, incircle, is_delaunay, angle


class TestPredicates(unittest.TestCase):

    def test_orient2d(self):
        # left turn (positive), looking from above
        self.assertEqual(orient2d((0, 0), (10, 0), (10, 10)), 100.0)
        self.assertEqual(orient2d((0, 0), (10, 0), (20, 0)), 0.0)
        self.assertEqual(orient2d((0, 0), (10, 0), (10, -10)), -100.0)

    def test_incircle(self):
        # on boundary
        self.assertEqual(incircle((0, 0), (10, 0), (0, 10), (0, 10)), 0.0)
        # inside, value positive
        self.assertEqual(incircle((0, 0), (10, 0), (0, 10), (1, 1)), 1800.0)
        # outside, value negative
        self.assertLess(incircle((0, 0), (10, 0), (0, 10), (-100, -100)), 0)

    def test_is_delaunay(self):
        square = [(0, 0), (1, 0), (1, 1), (0, 1)]
        # fourth corner is cocircular
        self.assertTrue(is_delaunay(*square))
        self.assertFalse(is_delaunay((0, 0), (1, 0), (1, 1), (0.5, 0.5)))
        self.assertTrue(is_delaunay((0, 0), (1, 0), (1, 1), (5, 5)))

    def test_angle(self):
        self.assertAlmostEqual(angle((0, 0), (1, 0), (0, 1)), pi / 2)
        self.assertAlmostEqual(angle((0, 0), (1, 0), (0, -1)), -pi / 2)
        self.assertAlmostEqual(angle((0, 0), (1, 0), (-1, 0)), pi)
        self.assertAlmostEqual(angle((1, 1), (2, 2), (1, 2)), pi / 4)
        self.assertEqual(angle((0, 0), (1, 0), (5, 0)), 0.)


if __name__ == "__main__":
    unittest.main()
