'''
Constraints

Forces segments into a triangulation that is stored as a connectivity
graph. The edges crossed by a segment are removed; the two polygons left
at both sides of the segment ("cavities", each bounded by a chain of
vertices and the segment) are re-triangulated.

The cavities are re-triangulated by repeated splitting, taking as apex
the chain vertex that sees the segment under the largest angle, which
gives the constrained Delaunay triangulation of the cavity, see:

    An improved incremental algorithm for constructing restricted
    Delaunay triangulations
    Marc Vigo Anglada, Computers & Graphics 21(2), 1997
'''
import logging
from datetime import datetime

from dctri.delaunay.errors import MalformedConstraintError
from dctri.delaunay.preds import orient2d, incircle, angle


def as_key(a, b):
    """Undirected edge key"""
    return (a, b) if a < b else (b, a)


class ConstraintInserter(object):
    """Constraint Inserter

    Insert segments into a Delaunay Triangulation, given by its sorted
    points and connectivity graph.
    """

    __slots__ = ('points', 'graph', 'constrained', 'removed')

    def __init__(self, points, graph):
        self.points = points
        self.graph = graph
        self.constrained = set()
        self.removed = 0

    def insert(self, segments):
        """Insert constraints into the graph

        Parameter: segments - list of 2-tuples, with (sorted) vertex indices
        """
        for j, segment in enumerate(segments):
            self.insert_constraint(segment[0], segment[1])
            if (j % 10000) == 0:
                logging.debug(" " + str(datetime.now()) + " " + str(j))

    def insert_constraint(self, P, Q):
        """Insert constraint P -> Q

        The graph is not modified when a MalformedConstraintError is raised.
        """
        logging.debug(" constraint LINESTRING({0[0]} {0[1]}, {1[0]} {1[1]})"
                      .format(self.points[P], self.points[Q]))
        if P == Q:
            raise MalformedConstraintError(
                "Constraint from vertex {} to itself".format(P))
        if self.graph.is_connected(P, Q):
            self.constrained.add(as_key(P, Q))
            return
        left, right, crossed = self.walk(P, Q)
        for a, b in crossed:
            self.graph.disconnect(a, b)
        self.removed += len(crossed)
        self.graph.connect(P, Q)
        self.constrained.add(as_key(P, Q))
        # both cavities with their chain left of the base edge
        self.retriangulate([P] + left + [Q])
        self.retriangulate([Q] + right[::-1] + [P])

    def walk(self, P, Q):
        """Walk from P to Q through the triangles overlapping the segment

        Returns the chain of vertices left of P -> Q, the chain right of
        it (both in order from P to Q) and the edges crossed on the way.
        """
        pts = self.points
        p, q = pts[P], pts[Q]
        l_con, r_con = self._first_crossing(P, Q)
        left, right = [l_con], [r_con]
        crossed = [(l_con, r_con)]
        last = P
        # every step moves into a new triangle, this bounds the walk
        for _ in range(2 * len(pts)):
            if as_key(l_con, r_con) in self.constrained:
                raise MalformedConstraintError(
                    "Constraint {} -> {} crosses constraint {} -> {}".format(
                        P, Q, l_con, r_con))
            nxt = self._apex(l_con, r_con, last)
            if nxt is None:
                raise MalformedConstraintError(
                    "No triangle found beyond edge {} -> {} while "
                    "inserting {} -> {}".format(l_con, r_con, P, Q))
            if nxt == Q:
                return left, right, crossed
            side = orient2d(p, q, pts[nxt])
            if side > 0:
                last = l_con
                l_con = nxt
                left.append(nxt)
            elif side < 0:
                last = r_con
                r_con = nxt
                right.append(nxt)
            else:
                raise MalformedConstraintError(
                    "Constraint {} -> {} runs through vertex {}".format(
                        P, Q, nxt))
            crossed.append((l_con, r_con))
        raise MalformedConstraintError(
            "Walk from {} did not reach {}".format(P, Q))

    def _first_crossing(self, P, Q):
        """The edge opposite to P of the triangle that the segment P -> Q
        starts in, as (vertex left of P -> Q, vertex right of it)
        """
        pts = self.points
        p, q = pts[P], pts[Q]
        l_con = r_con = None
        l_angle = r_angle = None
        for j in self.graph.connections(P):
            side = orient2d(p, q, pts[j])
            a = angle(p, q, pts[j])
            if side > 0:
                if l_con is None or a < l_angle:
                    l_angle = a
                    l_con = j
            elif side < 0:
                if r_con is None or a > r_angle:
                    r_angle = a
                    r_con = j
            elif (pts[j][0] - p[0]) * (q[0] - p[0]) + \
                    (pts[j][1] - p[1]) * (q[1] - p[1]) > 0:
                raise MalformedConstraintError(
                    "Constraint {} -> {} runs through vertex {}".format(
                        P, Q, j))
        if l_con is None or r_con is None or \
                not self.graph.is_connected(l_con, r_con):
            raise MalformedConstraintError(
                "No triangle at vertex {} overlaps constraint {} -> {}".format(
                    P, P, Q))
        return l_con, r_con

    def _apex(self, l_con, r_con, last):
        """Third vertex of the triangle at the other side of edge
        l_con -> r_con than vertex last
        """
        pts = self.points
        pl, pr = pts[l_con], pts[r_con]
        best = None
        best_angle = None
        for w in self.graph.common_connections(l_con, r_con):
            if w == last or orient2d(pl, pr, pts[w]) <= 0:
                continue
            # of several common neighbours the one nearest in angle
            # makes the triangle (the others enclose it)
            a = angle(pl, pr, pts[w])
            if best is None or a < best_angle:
                best_angle = a
                best = w
        return best

    def retriangulate(self, chain):
        """Triangulate the cavity with base edge chain[0] -> chain[-1] and
        the other vertices of chain lying left of it (in order)

        Sub-polygons wait on a stack as (first, last) index ranges into
        chain. Every sub-polygon is scanned for its apex, so a cavity of L
        vertices takes O(L^2) time in the worst case (apex next to a base
        end point every time), O(L log L) when the apexes fall halfway.
        """
        pts = self.points
        stack = [(0, len(chain) - 1)]
        while stack:
            first, last = stack.pop()
            # a triangle (or less) is done
            if last - first < 3:
                continue
            a, b = pts[chain[first]], pts[chain[last]]
            best = first + 1
            for i in range(first + 2, last):
                # strictly inside the circle: sees a -> b under a larger angle
                if incircle(a, b, pts[chain[best]], pts[chain[i]]) > 0:
                    best = i
            apex = chain[best]
            if best > first + 1:
                self.graph.connect(chain[first], apex)
                stack.append((first, best))
            if best < last - 1:
                self.graph.connect(apex, chain[last])
                stack.append((best, last))
