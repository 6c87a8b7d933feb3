'''
Initial triangulation of small groups of sorted vertices.

The vertices are cut into fragments of 1, 2 or 3 vertices (or longer
fragments around runs of vertices with the same x-coordinate). Every
fragment is triangulated on its own; the merge passes then glue the
fragments together.
'''
from dctri.delaunay.preds import orient2d


def triangulate_strips(points, graph):
    """Triangulates the fragments and connects them in graph

    points must be sorted on x, then y.

    Returns a list with the first vertex index of every fragment, followed
    by len(points) (so fragment i is range(starts[i], starts[i + 1])).
    """
    n = len(points)
    starts = []
    first = 0
    while first < n:
        starts.append(first)
        first = _fragment(points, graph, first)
    starts.append(n)
    return starts


def _run_end(points, start):
    """End (exclusive) of the run of vertices with same x as start"""
    x = points[start][0]
    end = start + 1
    while end < len(points) and points[end][0] == x:
        end += 1
    return end


def _connect_path(graph, start, end):
    for m in range(start, end - 1):
        graph.connect(m, m + 1)


def _fragment(points, graph, first):
    """Triangulates the fragment starting at first, returns its end"""
    n = len(points)
    remaining = n - first
    # vertical run at the start: fan to the vertex after the run
    if remaining >= 2 and points[first + 1][0] == points[first][0]:
        end = _run_end(points, first)
        _connect_path(graph, first, end)
        if end == n:
            return n
        for m in range(first, end):
            graph.connect(m, end)
        return end + 1
    # vertical run after the first vertex: fan from the first vertex
    if remaining >= 3 and points[first + 2][0] == points[first + 1][0]:
        end = _run_end(points, first + 1)
        _connect_path(graph, first + 1, end)
        for m in range(first + 1, end):
            graph.connect(first, m)
        return end
    # third vertex starts a run: leave the run to the next fragment
    if remaining >= 4 and points[first + 3][0] == points[first + 2][0]:
        graph.connect(first, first + 1)
        return first + 2
    if remaining >= 3:
        _connect_path(graph, first, first + 3)
        if orient2d(points[first],
                    points[first + 1],
                    points[first + 2]) != 0:
            graph.connect(first, first + 2)
        return first + 3
    if remaining == 2:
        graph.connect(first, first + 1)
    return n
