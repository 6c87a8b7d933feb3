"""dctri - Divide and conquer (Constrained) Delaunay Triangulation of
planar point sets
"""

__version__ = '0.1.0.dev0'
__license__ = 'MIT License'

from dctri.delaunay import triangulate, Delaunay, ToPointsAndSegments

__all__ = ["triangulate", "Delaunay", "ToPointsAndSegments"]
