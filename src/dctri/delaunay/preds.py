'''
Geometric predicates on (x, y) pairs.

Plain floating point evaluation: no adaptive precision, ties are decided
by exact comparison with zero, and near-collinear configurations are
filtered with an angular tolerance by the callers.
'''
from math import atan2


def orient2d(pa, pb, pc):
    """Direction from pa to pc, via pb, where returned value is as follows:

    left:     + [ = ccw ]
    straight: 0.
    right:    - [ = cw ]

    returns twice signed area under triangle pa, pb, pc
    """
    detleft = (pa[0] - pc[0]) * (pb[1] - pc[1])
    detright = (pa[1] - pc[1]) * (pb[0] - pc[0])
    det = detleft - detright
    return det


def incircle(pa, pb, pc, pd):
    """Tests whether pd is in circle defined by the 3 points pa, pb and pc

    The points pa, pb and pc have to be in counterclockwise order, then:

    inside:   +
    on:       0.
    outside:  -

    (determinant of the points lifted onto the paraboloid z = x^2 + y^2)
    """
    adx = pa[0] - pd[0]
    bdx = pb[0] - pd[0]
    cdx = pc[0] - pd[0]
    ady = pa[1] - pd[1]
    bdy = pb[1] - pd[1]
    cdy = pc[1] - pd[1]
    bdxcdy = bdx * cdy
    cdxbdy = cdx * bdy
    alift = adx * adx + ady * ady
    cdxady = cdx * ady
    adxcdy = adx * cdy
    blift = bdx * bdx + bdy * bdy
    adxbdy = adx * bdy
    bdxady = bdx * ady
    clift = cdx * cdx + cdy * cdy
    det = alift * (bdxcdy - cdxbdy) + \
        blift * (cdxady - adxcdy) + \
        clift * (adxbdy - bdxady)
    return det


def is_delaunay(pa, pb, pc, pd):
    """True when pd does not lie strictly inside the circle through the
    counterclockwise triangle pa, pb, pc (also when all are collinear).
    """
    return incircle(pa, pb, pc, pd) <= 0.


def angle(origin, towards, pt):
    """Signed angle at origin, turning from the direction origin -> towards
    to the direction origin -> pt, in (-pi, pi]

    Positive when pt lies left of the directed line (ccw turn).
    """
    bx = towards[0] - origin[0]
    by = towards[1] - origin[1]
    px = pt[0] - origin[0]
    py = pt[1] - origin[1]
    return atan2(bx * py - by * px, bx * px + by * py)
