'''
Iterators over the connectivity graph

All indices are vertex indices in x, y sorted order; translating them back
to the input order is left to the caller.
'''
from math import atan2


class EdgeIterator(object):
    """Iterator over all edges in the graph.

    Every undirected edge is returned once, as (lower index, higher index).
    """

    def __init__(self, graph):
        self.graph = graph
        self.current_idx = 0  # this is the vertex
        self.pending = []  # edges found at the vertex, not returned yet

    def __iter__(self):
        return self

    def __next__(self):
        while not self.pending:
            if self.current_idx >= len(self.graph):
                raise StopIteration()
            n = self.current_idx
            self.pending = [(n, j) for j in self.graph.connections(n)
                            if j > n]
            self.pending.reverse()
            self.current_idx += 1
        return self.pending.pop()


class StarIterator(object):
    """Returns iterator over the neighbours of a vertex

    The neighbours are returned in counterclockwise order around the vertex,
    sorted on the polar angle (starting from the negative x-axis).
    With higher_only set, only neighbours with a higher index are visited,
    these lie all right of (or straight above) the vertex.
    """

    def __init__(self, graph, points, vertex, higher_only=False):
        origin = points[vertex]
        neighbours = [j for j in graph.connections(vertex)
                      if not higher_only or j > vertex]
        neighbours.sort(key=lambda j: atan2(points[j][1] - origin[1],
                                            points[j][0] - origin[0]))
        self.neighbours = neighbours
        self.pos = 0

    def __iter__(self):
        return self

    def __next__(self):
        if self.pos >= len(self.neighbours):
            raise StopIteration()
        j = self.neighbours[self.pos]
        self.pos += 1
        return j


class TriangleIterator(object):
    """Iterator over all triangles in the graph, as 3-tuples of vertex
    indices in clockwise order, the lowest index first.

    A triangle is found at its lowest vertex n: two higher neighbours v1,
    v2 that follow each other counterclockwise around n, given as
    (n, v2, v1). Assumes that the graph is a
    valid triangulation (this is not checked).
    """

    def __init__(self, graph, points):
        self.graph = graph
        self.points = points
        self.current_idx = 0
        self.pending = []

    def __iter__(self):
        return self

    def __next__(self):
        while not self.pending:
            # the last vertex has no higher neighbours
            if self.current_idx >= len(self.graph) - 1:
                raise StopIteration()
            n = self.current_idx
            star = list(StarIterator(self.graph, self.points, n,
                                     higher_only=True))
            self.pending = [(n, v2, v1) for v1, v2 in zip(star, star[1:])]
            self.pending.reverse()
            self.current_idx += 1
        return self.pending.pop()
