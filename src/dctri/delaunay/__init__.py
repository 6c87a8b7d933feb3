"""dctri - Divide and conquer (Constrained) Delaunay Triangulation of
planar point sets
"""

import logging

from dctri.delaunay.triangulation import triangulate, Delaunay
from dctri.delaunay.helpers import ToPointsAndSegments
from dctri.delaunay.errors import TriangulationError, \
    TopologyViolationError, DuplicateVertexError, MalformedConstraintError, \
    VertexIndexError, TriangulationStateError


__version__ = '0.1.0.dev0'
__license__ = 'MIT License'
__all__ = ("triangulate", "Delaunay", "ToPointsAndSegments",
           "TriangulationError", "TopologyViolationError",
           "DuplicateVertexError", "MalformedConstraintError",
           "VertexIndexError", "TriangulationStateError")


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    from dctri.delaunay.helpers import random_circle_vertices
    pts = random_circle_vertices(150000)
    triangulate(pts)
