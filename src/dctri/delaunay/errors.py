'''
Exceptions raised by the triangulator.

Every concrete error also derives from the builtin a caller would expect
(ValueError, IndexError, RuntimeError).
'''


class TriangulationError(Exception):
    """Base class for all errors of this package"""


class TopologyViolationError(TriangulationError, ValueError):
    """Connectivity graph would become invalid (self-loop, duplicate edge,
    removal of an edge that is not there)
    """


class DuplicateVertexError(TriangulationError, ValueError):
    """Two input points share the same location"""


class MalformedConstraintError(TriangulationError, ValueError):
    """A constraint cannot be forced into the triangulation: it joins a
    vertex to itself, runs through another vertex, crosses an earlier
    constraint, or its boundary chains cannot be completed
    """


class VertexIndexError(TriangulationError, IndexError):
    """Vertex index outside the supplied point range"""


class TriangulationStateError(TriangulationError, RuntimeError):
    """Operation invoked in the wrong order, e.g. triangulating twice
    without supplying the vertices again
    """
