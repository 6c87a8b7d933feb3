'''
(Constrained) Delaunay triangulation of a planar point set

Pipeline: sort the points on x, y; triangulate small fragments of the
sorted sequence; merge the fragments (divide and conquer); force in the
constraints.
'''
import logging
import time

import numpy

from dctri.delaunay.sort import xysort
from dctri.delaunay.tds import ConnectivityGraph
from dctri.delaunay.strips import triangulate_strips
from dctri.delaunay.merge import Merger, THETA
from dctri.delaunay.cdt import ConstraintInserter
from dctri.delaunay.iter import EdgeIterator, TriangleIterator
from dctri.delaunay.errors import MalformedConstraintError, \
    TriangulationStateError, VertexIndexError


def as_constraints(constraints, size):
    """Validates constraint pairs against the number of points

    Returns a list with 2-tuples of ints.
    """
    arr = numpy.asarray(constraints)
    if arr.size == 0:
        return []
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(
            "Constraints should be given as pairs of vertex indices, "
            "got array with shape {}".format(arr.shape))
    if arr.dtype.kind not in 'iu':
        raise ValueError(
            "Constraint indices should be integers, not {}".format(arr.dtype))
    pairs = [(int(a), int(b)) for a, b in arr.tolist()]
    for a, b in pairs:
        for idx in (a, b):
            if not 0 <= idx < size:
                raise VertexIndexError(
                    "Constraint {} -> {} refers to vertex {}, "
                    "only {} vertices given".format(a, b, idx, size))
        if a == b:
            raise MalformedConstraintError(
                "Constraint from vertex {} to itself".format(a))
    return pairs


class Delaunay(object):
    """Triangulation of a point set, optionally with constraints

    The vertices are given first, the constraints (pairs of indices into
    the vertex list) may follow; then triangulate() can be run once.
    Edges and triangles are reported with indices into the vertex list.
    """

    def __init__(self, points=None, constraints=None, theta=THETA,
                 triangulate=False):
        self.theta = theta
        self._points = None
        self._sorted = None
        self._new2old = None
        self._old2new = None
        self._constraints = []
        self._graph = None
        if points is not None:
            self.set_vertices(points)
        if constraints is not None:
            self.set_constraints(constraints)
        if triangulate:
            self.triangulate()

    @property
    def points(self):
        """The points, in the order as given"""
        return self._points

    @property
    def constraints(self):
        return list(self._constraints)

    @property
    def graph(self):
        """Connectivity graph (vertex indices in x, y sorted order)"""
        return self._graph

    @property
    def is_triangulated(self):
        return self._graph is not None

    def set_vertices(self, points):
        """Specifies the vertices

        Calling this removes the constraints and the triangulation made
        before.
        """
        start = time.perf_counter()
        self._sorted, self._new2old, self._old2new = xysort(points)
        self._points = [self._sorted[i] for i in self._old2new]
        self._constraints = []
        self._graph = None
        end = time.perf_counter()
        logging.debug("Sorting points: " + str(end - start) + " secs")
        return self

    def set_constraints(self, constraints):
        """Specifies the constraints, as pairs of vertex indices"""
        if self._points is None:
            raise TriangulationStateError(
                "Vertices should be set before constraints")
        if self._graph is not None:
            raise TriangulationStateError(
                "Already triangulated, set the vertices again first")
        self._constraints = as_constraints(constraints, len(self._points))
        return self

    def triangulate(self):
        """Performs the triangulation"""
        if self._points is None:
            raise TriangulationStateError(
                "No vertices to triangulate")
        if self._graph is not None:
            raise TriangulationStateError(
                "Already triangulated, set the vertices again first")
        pts = self._sorted
        graph = ConnectivityGraph(len(pts))
        if len(pts) < 3:
            logging.debug("{} vertices, nothing to triangulate".format(
                len(pts)))
            self._graph = graph
            return self

        start = time.perf_counter()
        starts = triangulate_strips(pts, graph)
        merger = Merger(pts, graph, self.theta)
        merger.merge_all(starts)
        end = time.perf_counter()
        logging.debug("Triangulating took: " + str(end - start) + " secs")
        logging.debug("{} vertices".format(len(pts)))
        logging.debug("{} fragments".format(len(starts) - 1))
        logging.debug("{} merges".format(merger.merges))
        logging.debug("{} removals".format(merger.removals))

        if self._constraints:
            start = time.perf_counter()
            logging.debug("")
            logging.debug("inserting " + str(len(self._constraints)) +
                          " constraints")
            inserter = ConstraintInserter(pts, graph)
            # translate indexes of segments to be inserted (after sort)
            inserter.insert([(self._old2new[a], self._old2new[b])
                             for a, b in self._constraints])
            end = time.perf_counter()
            logging.debug(" {time} secs".format(time=(end - start)))
            logging.debug(" {count} edges removed".format(
                count=inserter.removed))
        logging.debug("{} edges".format(graph.edge_count()))
        self._graph = graph
        return self

    def _check_triangulated(self):
        if self._graph is None:
            raise TriangulationStateError("Not triangulated yet")

    def edges(self):
        """List with every edge once, as pair of vertex indices"""
        self._check_triangulated()
        new2old = self._new2old
        return [(new2old[a], new2old[b]) for a, b in EdgeIterator(self._graph)]

    def triangles(self):
        """List with triangles, as 3-tuples of vertex indices in
        clockwise order
        """
        self._check_triangulated()
        new2old = self._new2old
        return [(new2old[a], new2old[b], new2old[c])
                for a, b, c in TriangleIterator(self._graph, self._sorted)]


def triangulate(points, segments=None, theta=THETA):
    """Triangulate a set of points, forcing in the segments (pairs of
    indices into points) when given

    Returns the Delaunay object
    """
    return Delaunay(points, segments, theta=theta, triangulate=True)
