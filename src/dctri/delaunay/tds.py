'''
Connectivity graph data structure

Every vertex (by its index in x, y sorted order) owns a small set of
neighbour indices. Edges are not stored separately: an edge is a pair of
vertices that have each other as neighbour.
'''
from dctri.delaunay.errors import TopologyViolationError, VertexIndexError

# A vertex in a planar triangulation has on average 6 neighbours
INLINE_CAPACITY = 8


class SmallSet(object):
    """Set of integers with a fixed number of inline slots.

    Items that do not fit in the slots go to an overflow list, that is
    only allocated once it is needed. Slots freed by removal are reused.
    Iteration order: inline slots first, then the overflow list.
    """

    __slots__ = ('slots', 'more', 'size')

    def __init__(self, capacity=INLINE_CAPACITY):
        self.slots = [None] * capacity
        self.more = None
        self.size = 0

    def __len__(self):
        return self.size

    def __contains__(self, item):
        if item in self.slots:
            return True
        return self.more is not None and item in self.more

    def __iter__(self):
        for item in self.slots:
            if item is not None:
                yield item
        if self.more:
            for item in self.more:
                yield item

    def add(self, item):
        """Add item (no check whether it is present already)"""
        slots = self.slots
        for i, c in enumerate(slots):
            if c is None:
                slots[i] = item
                self.size += 1
                return
        if self.more is None:
            self.more = []
        self.more.append(item)
        self.size += 1

    def remove(self, item):
        """Remove item, KeyError if it is not there"""
        slots = self.slots
        for i, c in enumerate(slots):
            if c == item:
                slots[i] = None
                self.size -= 1
                return
        if self.more is not None:
            try:
                self.more.remove(item)
            except ValueError:
                pass
            else:
                self.size -= 1
                return
        raise KeyError(item)

    def discard(self, item):
        if item in self:
            self.remove(item)

    def clear(self):
        self.slots = [None] * len(self.slots)
        self.more = None
        self.size = 0


class ConnectivityGraph(object):
    """Undirected graph on the vertices 0..size-1

    Adjacency is kept symmetric: every operation updates both end points.
    """

    __slots__ = ('nodes',)

    def __init__(self, size, capacity=INLINE_CAPACITY):
        self.nodes = [SmallSet(capacity) for _ in range(size)]

    def __len__(self):
        return len(self.nodes)

    def _check(self, a):
        if not 0 <= a < len(self.nodes):
            raise VertexIndexError(
                "No vertex {} in graph of {} vertices".format(
                    a, len(self.nodes)))

    def connect(self, a, b):
        """Links vertex a and b to each other"""
        self._check(a)
        self._check(b)
        if a == b:
            raise TopologyViolationError(
                "Self-loop at vertex {}".format(a))
        if b in self.nodes[a]:
            raise TopologyViolationError(
                "Vertex {} and {} are connected already".format(a, b))
        self.nodes[a].add(b)
        self.nodes[b].add(a)

    def disconnect(self, a, b):
        """Removes the link between vertex a and b"""
        self._check(a)
        self._check(b)
        if b not in self.nodes[a]:
            raise TopologyViolationError(
                "Vertex {} and {} are not connected".format(a, b))
        self.nodes[a].remove(b)
        self.nodes[b].remove(a)

    def disconnect_all(self, a):
        """Removes all links of vertex a"""
        self._check(a)
        for b in self.nodes[a]:
            self.nodes[b].remove(a)
        self.nodes[a].clear()

    def is_connected(self, a, b):
        self._check(a)
        self._check(b)
        return b in self.nodes[a]

    def connections(self, a):
        """List with the neighbours of vertex a"""
        self._check(a)
        return list(self.nodes[a])

    def degree(self, a):
        self._check(a)
        return len(self.nodes[a])

    def common_connections(self, a, b):
        """Iterates over the vertices that are neighbour of both a and b"""
        self._check(a)
        self._check(b)
        nb = self.nodes[b]
        for c in self.nodes[a]:
            if c in nb:
                yield c

    def common_connection(self, a, b, exclude=None):
        """First vertex connected to both a and b that is not exclude,
        None if there is no such vertex
        """
        for c in self.common_connections(a, b):
            if c != exclude:
                return c
        return None

    def edge_count(self):
        return sum(len(node) for node in self.nodes) // 2
