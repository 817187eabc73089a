#!/usr/bin/env python3

"""
Cayley's theorem: every finite group is a group of permutations.
"""

from fingroup.group import Group
from fingroup.perm import Perm
from fingroup.construct import Compose
from fingroup.hom import Hom


def cayley_table(G):
    "(els, T) with T[i,j] the index of els[i]*els[j]"
    return list(G.els), G.table()


class CayleyPermutationGroup(Group):
    """
    The left regular representation of source: g acts on the points
    1..n by i -> index(g * ordered[i-1]). The enumeration order is fixed
    once, here, and used for every g.
    """
    def __init__(self, source):
        assert isinstance(source, Group), type(source)
        self.source = source
        self.ordered = list(source.els)
        n = len(self.ordered)
        self.index = dict((g, i+1) for (i, g) in enumerate(self.ordered)) # 1-based
        self.send = dict((g, self.perm_of(g)) for g in self.ordered)
        perms = [self.send[g] for g in self.ordered]
        Group.__init__(self, perms, Compose(n), Perm.identity(n), self._inv,
            name="Cayley(%s)"%(source,))

    def _inv(self, perm):
        return ~perm

    def perm_of(self, g):
        op, index = self.source.op, self.index
        return Perm([index[op(g, x)] for x in self.ordered])

    def hom(self):
        "the isomorphism source -> self"
        return Hom(self.source, self, self.send)

