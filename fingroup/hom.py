#!/usr/bin/env python3

"""
Group homomorphisms, kernels, images and automorphisms.
"""

from fingroup.group import Group
from fingroup.closure import mulclose_hom
from fingroup.errors import StructureError, PreconditionError, ConsistencyError
from fingroup.structure import center


class Hom(object):
    """
    A map of sets src -> tgt, tabulated on construction.
    Whether it respects the group operations is a question
    to ask (is_hom), not an assumption.
    """
    def __init__(self, src, tgt, send):
        assert isinstance(src, Group), type(src)
        assert isinstance(tgt, Group), type(tgt)
        if isinstance(send, dict):
            for g in src:
                if g not in send:
                    raise StructureError("%s is not sent anywhere"%(g,))
            send = dict((g, send[g]) for g in src)
        else:
            send = dict((g, send(g)) for g in src)
        self.src = src
        self.tgt = tgt
        self.send = send
        self._hash = None

    @classmethod
    def identity(cls, G):
        return cls(G, G, dict((g, g) for g in G))

    @classmethod
    def from_gens(cls, src, tgt, gens, images):
        "extend gens -> images to the whole of src"
        send = mulclose_hom(list(gens), list(images), src.op, tgt.op)
        send.setdefault(src.identity, tgt.identity)
        if len(send) != len(src):
            raise StructureError("%d generators do not generate %s"%(len(gens), src))
        return cls(src, tgt, send)

    def __call__(self, g):
        return self.send[g]

    def __str__(self):
        return "Hom(%s, %s)"%(self.src, self.tgt)
    __repr__ = __str__

    # Equality on-the-nose:
    def __eq__(self, other):
        if not isinstance(other, Hom):
            return NotImplemented
        return self.src == other.src and self.tgt == other.tgt and self.send == other.send

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        if self._hash is None:
            self._hash = hash(frozenset(self.send.items()))
        return self._hash

    def is_hom(self):
        src, tgt, send = self.src, self.tgt, self.send
        if send[src.identity] != tgt.identity:
            return False
        for g in src:
            for h in src:
                if send[src.op(g, h)] != tgt.op(send[g], send[h]):
                    return False
        return True

    def kernel(self):
        e = self.tgt.identity
        found = [g for g in self.src if self.send[g] == e]
        return self.src.generated(found)

    def image(self):
        return self.tgt.generated(set(self.send.values()))

    def is_injective(self):
        return len(self.kernel()) == 1

    def is_surjective(self):
        return len(self.image()) == len(self.tgt)

    def is_iso(self):
        return self.is_injective() and self.is_surjective()

    def first_iso(self):
        "|src / kernel| == |image|, returns that order"
        n = len(self.src) // len(self.kernel())
        m = len(self.image())
        if n != m:
            raise ConsistencyError("|G/ker| = %d but |image| = %d"%(n, m))
        return n

    def compose(self, other):
        # other o self
        assert isinstance(other, Hom)
        if self.tgt != other.src:
            raise PreconditionError("cannot compose %s with %s"%(self, other))
        a = self.send
        b = other.send
        send = dict((g, b[a[g]]) for g in self.src)
        return Hom(self.src, other.tgt, send)

    def __mul__(self, other):
        assert isinstance(other, Hom)
        return other.compose(self)

    def inverse(self):
        "the inverse of a bijection"
        send = {}
        for g, h in self.send.items():
            if h in send:
                raise PreconditionError("%s is not injective"%(self,))
            send[h] = g
        for h in self.tgt:
            if h not in send:
                raise PreconditionError("%s is not surjective"%(self,))
        return Hom(self.tgt, self.src, send)


# Automorphisms
# -------------

def is_automorphism(phi):
    return phi.src == phi.tgt and phi.is_hom() and phi.is_iso()


def inner(G, g):
    "conjugation by g"
    return Hom(G, G, lambda h : G.conjugate(h, g))


def inner_automorphisms(G):
    "the distinct inner automorphisms"
    found = set()
    homs = []
    for g in G:
        phi = inner(G, g)
        if phi not in found:
            found.add(phi)
            homs.append(phi)
    return homs


def is_inner(phi):
    G = phi.src
    if phi.tgt != G:
        return False
    for g in G:
        if inner(G, g) == phi:
            return True
    return False


def is_centerless(G):
    return len(center(G)) == 1

