'''
Divide and conquer merging of triangulated fragments.

Two adjacent fragments (ranges of x, y sorted vertices) are merged by
finding their lower common tangent and from there "sewing" them together
bottom up, removing edges of either side that stop being Delaunay.

See also:

    Primitives for the Manipulation of General Subdivisions and the
    Computation of Voronoi Diagrams
    Leonidas Guibas and Jorge Stolfi, ACM Transactions on Graphics 4(2),
    1985 -- the merge step (performed here on plain adjacency sets
    instead of on a quad-edge structure).
'''
import logging
from math import pi

from dctri.delaunay.preds import orient2d, is_delaunay, angle

# Candidates that make an angle with the base edge closer than this to
# pi (i.e. that are nearly collinear with it) are not considered
THETA = 1e-6


class Merger(object):
    """Merges fragments of a triangulation into one Delaunay triangulation
    """

    __slots__ = ('points', 'graph', 'theta', 'merges', 'removals')

    def __init__(self, points, graph, theta=THETA):
        self.points = points
        self.graph = graph
        self.theta = theta
        self.merges = 0
        self.removals = 0

    def merge_all(self, starts):
        """Merge the fragments given by their start indices (see
        triangulate_strips), in passes of 2, 4, 8, ... fragments
        """
        count = len(starts) - 1
        n = 2
        while (n // 2) < count:
            for m in range(0, count, n):
                if m + n // 2 >= count:
                    break
                left = starts[m]
                middle = starts[m + n // 2]
                right = starts[min(m + n, count)]
                self.merge(left, middle, right)
            logging.debug(" merged fragments of {} strips".format(n))
            n *= 2

    def merge(self, left, middle, right):
        """Merges triangulation of range [left, middle) with the one of
        [middle, right)
        """
        pts = self.points
        low_l, low_r = self.lower_tangent(left, middle, right)
        while True:
            l_cand = self._candidate(
                low_l, low_l, low_r,
                self._candidates(low_l, low_r, left, middle, 1.0))
            r_cand = self._candidate(
                low_r, low_l, low_r,
                self._candidates(low_r, low_l, middle, right, -1.0))
            self.graph.connect(low_l, low_r)
            if l_cand is not None:
                if r_cand is not None and \
                        not is_delaunay(pts[low_l], pts[low_r],
                                        pts[l_cand], pts[r_cand]):
                    low_r = r_cand
                else:
                    low_l = l_cand
            elif r_cand is not None:
                low_r = r_cand
            else:
                break
        self.merges += 1

    def lower_tangent(self, left, middle, right):
        """Returns the vertices (low_l, low_r) of the lower common tangent

        All vertices of both ranges lie on or left of the line
        low_l -> low_r. Of vertices on that line the ones nearest to the
        other range are taken, so that the tangent does not run through
        another vertex.
        """
        pts = self.points
        low_l, low_r = middle - 1, middle
        changed = True
        while changed:
            changed = False
            for v in range(left, middle):
                o = orient2d(pts[low_l], pts[low_r], pts[v])
                if o < 0 or (o == 0 and v > low_l):
                    low_l = v
                    changed = True
            for v in range(middle, right):
                o = orient2d(pts[low_l], pts[low_r], pts[v])
                if o < 0 or (o == 0 and v < low_r):
                    low_r = v
                    changed = True
        return low_l, low_r

    def _candidates(self, apex, towards, lo, hi, sign):
        """Neighbours of apex inside [lo, hi), sorted on the angle they make
        with the line apex -> towards (counterclockwise for sign 1,
        clockwise for sign -1)
        """
        pts = self.points
        limit = pi - self.theta
        candidates = []
        for j in self.graph.connections(apex):
            if not lo <= j < hi:
                continue
            a = sign * angle(pts[apex], pts[towards], pts[j])
            if 0. < a < limit:
                candidates.append((a, j))
        candidates.sort()
        return [j for _, j in candidates]

    def _candidate(self, apex, low_l, low_r, candidates):
        """Walks the sorted candidates, removes edge apex - candidate as
        long as the next candidate lies inside the circle through
        low_l, low_r and the candidate

        Returns the surviving candidate (None if there are no candidates)
        """
        if not candidates:
            return None
        pts = self.points
        cand = candidates[0]
        for nxt in candidates[1:]:
            if is_delaunay(pts[low_l], pts[low_r], pts[cand], pts[nxt]):
                break
            self.graph.disconnect(apex, cand)
            self.removals += 1
            cand = nxt
        return cand
