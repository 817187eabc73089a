#!/usr/bin/env python3

"""
Group actions.

"""

from fingroup.group import Group
from fingroup.perm import Perm
from fingroup.construct import Compose
from fingroup.hom import Hom
from fingroup.quotient import left_cosets


class Action(object):
    """
        A Group acting on a set of items: act(g, item) -> item.
    """
    def __init__(self, G, items, act, check=False):
        assert isinstance(G, Group)
        items = list(items)
        assert items, "nothing to act on"
        self.G = G
        self.items = items
        self.set_items = set(items)
        self.act = act
        if check:
            assert self.is_action(), "not an action"

    @classmethod
    def left_mul(cls, G):
        "G acting on itself by left multiplication"
        return cls(G, G.els, G.op)

    @classmethod
    def conjugation(cls, G):
        return cls(G, G.els, lambda g, x : G.conjugate(x, g))

    @classmethod
    def on_cosets(cls, G, H):
        "G acting on the left cosets of H"
        cosets = left_cosets(G, H)
        lookup = dict((coset, coset) for coset in cosets) # canonical rep's
        def act(g, coset):
            return lookup[coset.__class__(G, H, G.op(g, coset.rep))]
        return cls(G, cosets, act)

    def __str__(self):
        return "Action(%s, %s)"%(self.G, len(self.items))
    __repr__ = __str__

    def __len__(self):
        return len(self.items)

    def __getitem__(self, idx):
        return self.items[idx]

    def __contains__(self, x):
        return x in self.set_items

    def __call__(self, g, x):
        return self.act(g, x)

    def is_action(self):
        G, act = self.G, self.act
        e = G.identity
        for x in self.items:
            if act(e, x) != x:
                return False
        for g in G:
            for h in G:
                gh = G.op(g, h)
                for x in self.items:
                    if act(gh, x) != act(g, act(h, x)):
                        return False
        return True

    def orbit(self, x):
        return set(self.act(g, x) for g in self.G)

    def orbits(self):
        remain = dict.fromkeys(self.items) # ordered
        orbits = []
        while remain:
            x = next(iter(remain))
            orbit = self.orbit(x)
            for y in orbit:
                del remain[y]
            orbits.append(orbit)
        return orbits

    def stabilizer(self, x):
        G = self.G
        return G.generated([g for g in G if self.act(g, x) == x])

    def check_orbit_stabilizer(self, x):
        return len(self.orbit(x)) * len(self.stabilizer(x)) == len(self.G)

    def fixed_points(self, g):
        return [x for x in self.items if self.act(g, x) == x]

    def fixed_counts(self):
        return dict((g, len(self.fixed_points(g))) for g in self.G)

    def burnside(self):
        "number of orbits, by counting fixed points"
        total = sum(self.fixed_counts().values())
        n = len(self.G)
        assert total % n == 0
        return total // n

    def is_transitive(self):
        return len(self.orbit(self.items[0])) == len(self.items)

    def is_free(self):
        for x in self.items:
            if len(self.stabilizer(x)) != 1:
                return False
        return True

    def perm_rep(self):
        "the hom G -> Sym(items), numbering the items 1..n"
        n = len(self.items)
        lookup = dict((x, i+1) for (i, x) in enumerate(self.items))
        send = {}
        for g in self.G:
            send[g] = Perm([lookup[self.act(g, x)] for x in self.items])
        perms = set(send.values())
        tgt = Group(perms, Compose(n), Perm.identity(n), lambda p : ~p,
            name="Sym(%s)"%(self,))
        return Hom(self.G, tgt, send)

