#!/usr/bin/env python3

"""
Permutations of the points 1..n.
"""

from fingroup.errors import StructureError, PreconditionError


class Perm(object):

    """
    A permutation of {1..n}, stored as the tuple of images
    (p(1), p(2), ..., p(n)).
    """
    def __init__(self, perm):
        perm = tuple(perm)
        n = len(perm)
        if n == 0:
            raise StructureError("empty permutation")
        seen = set()
        for i in perm:
            if type(i) is not int or not 1 <= i <= n:
                raise StructureError("%r out of range in %s"%(i, perm))
            if i in seen:
                raise StructureError("%r repeated in %s"%(i, perm))
            seen.add(i)
        self.perm = perm
        self.n = n
        self._hash = None

    @classmethod
    def identity(cls, n):
        if n < 1:
            raise PreconditionError("n=%s"%(n,))
        return Perm(range(1, n+1))

    @classmethod
    def fromcycles(cls, cycles, n):
        perm = list(range(1, n+1))
        for cycle in cycles:
            m = len(cycle)
            for i in range(m):
                a, b = cycle[i], cycle[(i+1)%m]
                if not (1 <= a <= n and 1 <= b <= n):
                    raise StructureError("cycle %s out of range 1..%d"%(cycle, n))
                perm[a-1] = b
        return Perm(perm)

    @classmethod
    def cycle(cls, *items, n=None):
        if not items:
            raise PreconditionError("empty cycle")
        if n is None:
            n = max(items)
        return cls.fromcycles([items], n)

    @classmethod
    def transposition(cls, i, j, n):
        return cls.fromcycles([(i, j)], n)

    def is_identity(self):
        for i, j in enumerate(self.perm):
            if i+1 != j:
                return False
        return True

    def __call__(self, i):
        return self.perm[i-1]
    __getitem__ = __call__

    def __mul__(self, other):
        "(self*other)(i) == self(other(i))"
        if not isinstance(other, Perm):
            return NotImplemented
        if other.n != self.n:
            raise PreconditionError("degree %d != %d"%(self.n, other.n))
        perm = self.perm
        return Perm(tuple(perm[j-1] for j in other.perm))

    def __invert__(self):
        perm = [None]*self.n
        for i, j in enumerate(self.perm):
            perm[j-1] = i+1
        return Perm(perm)
    inverse = __invert__

    def __pow__(self, n):
        assert int(n)==n
        if n<0:
            self = ~self
            n = -n
        g = Perm.identity(self.n)
        for i in range(n):
            g = self*g
        return g

    def __eq__(self, other):
        if not isinstance(other, Perm):
            return NotImplemented
        return self.perm == other.perm

    def __ne__(self, other):
        if not isinstance(other, Perm):
            return NotImplemented
        return self.perm != other.perm

    def __lt__(self, other):
        return (self.n, self.perm) < (other.n, other.perm)

    def __hash__(self):
        if self._hash is None:
            self._hash = hash(self.perm)
        return self._hash

    def order(self):
        i = 1
        g = self
        while not g.is_identity():
            g = self*g
            i += 1
        return i

    def cycles(self):
        "disjoint cycles, fixed points included, each starting at its least point"
        remain = set(range(1, self.n+1))
        cycles = []
        for item in range(1, self.n+1):
            if item not in remain:
                continue
            orbit = [item]
            item1 = self(item)
            while item1 != item:
                orbit.append(item1)
                item1 = self(item1)
                assert len(orbit) <= self.n
            for i in orbit:
                remain.remove(i)
            cycles.append(orbit)
        return cycles

    def cycle_type(self):
        "this is a partition of n"
        sizes = [len(cycle) for cycle in self.cycles()]
        sizes.sort()
        return tuple(sizes)

    def sign(self):
        s = 1
        for orbit in self.cycles():
            if len(orbit)%2 == 0:
                s *= -1
        return s

    def fixed(self):
        return [i+1 for (i, j) in enumerate(self.perm) if i+1 == j]

    def cycle_str(self):
        cycles = [cycle for cycle in self.cycles() if len(cycle)>1]
        if not cycles:
            return "()"
        return ''.join("(%s)"%(' '.join(str(i) for i in cycle)) for cycle in cycles)

    def __str__(self):
        return "Perm(%s)"%(self.cycle_str())

    def __repr__(self):
        return "Perm(%s)"%(list(self.perm),)

