'''
Ordering of the input points: on x first, then on y.

The triangulator works on positions in this order ("new" indices); the
translation tables map them back to the caller's ("old") indices.
'''
import numpy

from dctri.delaunay.errors import DuplicateVertexError


def as_points(points):
    """Returns the points as a float array with shape (n, 2)

    Raises ValueError for other shapes and for non-finite coordinates.
    """
    arr = numpy.asarray(points, dtype=float)
    if arr.size == 0:
        return arr.reshape(0, 2)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(
            "Points should be given as (x, y) pairs, "
            "got array with shape {}".format(arr.shape))
    if not numpy.isfinite(arr).all():
        raise ValueError("Non-finite coordinate found in points")
    return arr


def xysort_order(arr):
    """Permutation that sorts the (n, 2) array on x first, then y
    (numpy.lexsort takes the primary key last)
    """
    return numpy.lexsort((arr[:, 1], arr[:, 0]))


def translate_new2old(order):
    """Build a translation table: sorted position -> original index
    """
    return [int(i) for i in order]


def translate_old2new(order):
    """Build a translation table: original index -> sorted position
    """
    old2new = numpy.empty(len(order), dtype=numpy.intp)
    old2new[order] = numpy.arange(len(order), dtype=numpy.intp)
    return old2new.tolist()


def find_duplicates(sorted_arr):
    """Sorted positions i for which point i coincides with point i - 1
    """
    if len(sorted_arr) < 2:
        return []
    same = (sorted_arr[1:] == sorted_arr[:-1]).all(axis=1)
    return [int(i) + 1 for i in numpy.flatnonzero(same)]


def xysort(points):
    """Sorts the points along x, then y.

    Returns a 3-tuple: (list with sorted (x, y) tuples, new2old, old2new)

    Raises DuplicateVertexError when two points share their location.
    """
    arr = as_points(points)
    order = xysort_order(arr)
    sorted_arr = arr[order]
    new2old = translate_new2old(order)
    duplicates = find_duplicates(sorted_arr)
    if duplicates:
        pos = duplicates[0]
        raise DuplicateVertexError(
            "Duplicate point found: {} at index {} and {}".format(
                tuple(sorted_arr[pos].tolist()),
                new2old[pos - 1], new2old[pos]))
    pts = [tuple(pt) for pt in sorted_arr.tolist()]
    return pts, new2old, translate_old2new(order)
