'''
Helpers to prepare input for the triangulation: random point sets and the
conversion of polygons / linestrings into points plus constraint pairs.
'''
import random
from math import sqrt, pi, cos, sin


def random_sorted_vertices(n=10, rnd=random):
    """Returns a sorted list with (at most) n distinct vertices, picked at
    random from the grid with spacing 1/n on the unit square

    Many of these are collinear or cocircular.
    """
    W = float(n)
    vertices = set()
    for _ in range(n):
        vertices.add((rnd.randint(0, n) / W, rnd.randint(0, n) / W))
    return sorted(vertices)


def random_circle_vertices(n=10, cx=0, cy=0, rnd=random):
    """Returns a sorted list with n random vertices, uniformly distributed
    over the unit circle around (cx, cy)

    Taking the square root of the radius keeps the density uniform, see:

    http://www.anderswallin.net/2009/05/uniform-random-points-in-a-circle-using-polar-coordinates/
    """
    vertices = set()
    while len(vertices) < n:
        r = sqrt(rnd.random())
        t = 2 * pi * rnd.random()
        vertices.add((cx + r * cos(t), cy + r * sin(t)))
    return sorted(vertices)


class ToPointsAndSegments(object):
    """Collects points and segments (pairs of point indices) from
    polygons, linestrings and loose points

    Points added twice get the index of the first occurrence; a segment
    is stored once, with its lowest point index first. The result can be
    given to triangulate(conv.points, conv.segments).
    """

    def __init__(self):
        self.points = []
        self.segments = []
        self._point_index = {}
        self._segment_index = {}

    def add_point(self, point):
        """Adds point (if not there yet), returns its index"""
        key = tuple(float(c) for c in point)
        idx = self._point_index.get(key)
        if idx is None:
            idx = self._point_index[key] = len(self.points)
            self.points.append(key)
        return idx

    def add_segment(self, start, end):
        """Adds segment between two points that were added before

        Returns the index of the segment, or its complement (~index) when
        the segment is stored in reverse direction.
        """
        a = self._point_index[tuple(float(c) for c in start)]
        b = self._point_index[tuple(float(c) for c in end)]
        if a == b:
            raise ValueError("Segment starts and ends at {}".format(start))
        key = (a, b) if a < b else (b, a)
        idx = self._segment_index.get(key)
        if idx is None:
            idx = self._segment_index[key] = len(self.segments)
            self.segments.append(key)
        return idx if a < b else ~idx

    def add_linestring(self, ln):
        """Adds the points of the linestring and a segment between every
        two consecutive points
        """
        for pt in ln:
            self.add_point(pt)
        for start, end in zip(ln[:-1], ln[1:]):
            self.add_segment(start, end)

    def add_polygon(self, polygon):
        """Adds a polygon, given as list of rings

        Every ring is a list of (x, y) pairs, of which the last one repeats
        the first one (ValueError if it does not).
        """
        for ring in polygon:
            if ring[0] != ring[-1]:
                raise ValueError("Ring not closed: {} != {}".format(
                    ring[0], ring[-1]))
            self.add_linestring(ring)
