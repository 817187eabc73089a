#!/usr/bin/env python3

"""
Cosets and quotient groups.
"""

from fingroup.group import Group, Operation
from fingroup.structure import is_normal
from fingroup.hom import Hom
from fingroup.errors import StructureError, PreconditionError


class Coset(object):
    """
    The left coset rep*H inside parent.
    Two cosets are equal when their element sets are, whatever
    representative they were built from. Comparing or hashing
    costs O(|H|) the first time.
    """
    def __init__(self, parent, subgroup, rep):
        if rep not in parent:
            raise PreconditionError("%s is not in %s"%(rep, parent))
        self.parent = parent
        self.subgroup = subgroup
        self.rep = rep
        self._elements = None # cache
        self._hash = None

    def get_elements(self):
        op, rep = self.parent.op, self.rep
        return frozenset(op(rep, h) for h in self.subgroup)

    @property
    def elements(self):
        if self._elements is None:
            self._elements = self.get_elements()
        return self._elements

    def __len__(self):
        return len(self.subgroup)

    def __iter__(self):
        return iter(self.elements)

    def __contains__(self, g):
        return g in self.elements

    def __eq__(self, other):
        if not isinstance(other, Coset):
            return NotImplemented
        return self.elements == other.elements

    def __ne__(self, other):
        if not isinstance(other, Coset):
            return NotImplemented
        return self.elements != other.elements

    def __hash__(self):
        if self._hash is None:
            self._hash = hash(self.elements)
        return self._hash

    def __str__(self):
        if self.rep == self.parent.identity:
            return "H"
        return "%sH"%(self.rep,)

    def __repr__(self):
        return "%s(%s)"%(self.__class__.__name__, self.rep)


class RightCoset(Coset):
    "H*rep"
    def get_elements(self):
        op, rep = self.parent.op, self.rep
        return frozenset(op(h, rep) for h in self.subgroup)

    def __str__(self):
        if self.rep == self.parent.identity:
            return "H"
        return "H%s"%(self.rep,)


def get_cosets(G, H, cls):
    cosets = []
    seen = set()
    for g in G:
        coset = cls(G, H, g)
        if coset.elements not in seen:
            seen.add(coset.elements)
            cosets.append(coset)
    return cosets


def left_cosets(G, H):
    return get_cosets(G, H, Coset)


def right_cosets(G, H):
    return get_cosets(G, H, RightCoset)


class CosetMul(Operation):
    "(aH)(bH) = (ab)H"
    def __init__(self, parent, subgroup):
        Operation.__init__(self, parent, subgroup)
        self.parent = parent
        self.subgroup = subgroup

    def __call__(self, a, b):
        return Coset(self.parent, self.subgroup, self.parent.op(a.rep, b.rep))


class QuotientGroup(Group):
    """
    G/H for a normal subgroup H of G. The elements are the
    distinct left cosets, each kept with the first representative found.
    """
    def __init__(self, parent, subgroup):
        if subgroup.op != parent.op or not parent.is_subgroup(subgroup):
            raise StructureError("%s is not inside %s"%(subgroup, parent))
        if not is_normal(parent, subgroup):
            raise StructureError("%s is not normal in %s"%(subgroup, parent))
        self.parent = parent
        self.subgroup = subgroup
        cosets = left_cosets(parent, subgroup)
        identity = Coset(parent, subgroup, parent.identity)
        op = CosetMul(parent, subgroup)
        name = "%s/%s"%(parent, subgroup)
        Group.__init__(self, cosets, op, identity, self._inv, name=name)
        assert len(self) * len(subgroup) == len(parent)

    def _inv(self, coset):
        return Coset(self.parent, self.subgroup, self.parent.inverse(coset.rep))

    def coset(self, g):
        "the coset of g, as it appears in self.els"
        return self.els[self.lookup[Coset(self.parent, self.subgroup, g)]]

    def projection(self):
        "the natural hom G -> G/H"
        return Hom(self.parent, self, self.coset)

