#!/usr/bin/env python3

"""
Finite groups over arbitrary hashable elements.

A Group is a frozen set of elements together with an Operation, an
identity and an inverse. The inverse belongs to the group, not to the
element: the same python value (say the int 2) can live in many different
groups.
"""

from functools import reduce

import numpy

from fingroup.closure import mulclose
from fingroup.errors import StructureError, PreconditionError
from fingroup.util import lcm


class Operation(object):
    """
    A closed binary operation on some domain.

    Operations compare by the data they close over (self.key) so that two
    groups built from the same recipe compare equal.
    """
    def __init__(self, *key):
        self.key = key

    def __call__(self, a, b):
        raise NotImplementedError

    def __eq__(self, other):
        if not isinstance(other, Operation):
            return NotImplemented
        return type(self) is type(other) and self.key == other.key

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        return hash((self.__class__.__name__, self.key))

    def __str__(self):
        return "%s%s"%(self.__class__.__name__, self.key)
    __repr__ = __str__


class Table(Operation):
    "the operation i*j = T[i,j] on range(n)"
    def __init__(self, T):
        T = numpy.array(T, dtype=int)
        n = len(T)
        assert T.shape == (n, n), T.shape
        Operation.__init__(self, T.shape, T.tobytes())
        self.T = T

    def __call__(self, i, j):
        return int(self.T[i, j])


class Group(object):
    """
    A finite group.
        els      : the elements in a fixed enumeration order, identity first
        elements : the same, as a frozenset
        op       : the Operation
        identity : the unit
    """

    def __init__(self, els, op, identity, inv=None, gens=None, name=None, check=False):
        els = list(dict.fromkeys(els))
        if identity in els:
            els.remove(identity)
            els.insert(0, identity)
        self.els = els
        self.elements = frozenset(els)
        self.op = op
        self.identity = identity
        self.inv = inv
        self.gens = list(gens) if gens is not None else None
        self.name = name
        self.lookup = dict((g, i) for (i, g) in enumerate(els))
        self._inverse = None # cache
        self._table = None # cache
        self._hash = None # cache
        if check:
            self.do_check()

    def do_check(self):
        from fingroup.verify import verify
        result = verify(self)
        if not result.ok:
            raise StructureError(result.summary())

    @classmethod
    def generate(cls, gens, op, identity, inv=None, verbose=False, **kw):
        "materialize the group spanned by gens"
        gens = list(gens)
        els = mulclose(gens, op, inv, identity, verbose=verbose)
        if identity not in els:
            els.append(identity)
        return cls(els, op, identity, inv, gens=gens, **kw)

    @classmethod
    def from_table(cls, T, check=False):
        "the group on range(n) with multiplication table T"
        op = Table(T)
        n = len(op.T)
        row = numpy.arange(n)
        identity = None
        for i in range(n):
            if (op.T[i] == row).all() and (op.T[:, i] == row).all():
                identity = i
                break
        if identity is None:
            raise StructureError("table has no identity")
        return cls(list(range(n)), op, identity, check=check)

    def __str__(self):
        if self.name:
            return self.name
        return "%s(%d)"%(self.__class__.__name__, len(self.els))

    def __repr__(self):
        return "%s(%s, %s)"%(self.__class__.__name__, self.els, self.op)

    def __len__(self):
        return len(self.els)

    def order(self):
        return len(self.els)

    def __iter__(self):
        return iter(self.els)

    def __getitem__(self, idx):
        return self.els[idx]

    def __contains__(self, g):
        return g in self.elements

    def index_of(self, g):
        return self.lookup[g]

    def __eq__(self, other):
        if not isinstance(other, Group):
            return NotImplemented
        if len(self.els) != len(other.els):
            return False
        return self.elements == other.elements and self.op == other.op

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        if self._hash is None:
            self._hash = hash(self.elements)
        return self._hash

    def mul(self, a, b):
        return self.op(a, b)

    def inverse(self, a):
        if self.inv is not None:
            return self.inv(a)
        if self._inverse is None:
            # tabulate by search
            e = self.identity
            inverse = {}
            for g in self.els:
                for h in self.els:
                    if self.op(g, h) == e:
                        inverse[g] = h
                        break
            self._inverse = inverse
        return self._inverse.get(a)

    def conjugate(self, g, x):
        "x*g*x^-1"
        return self.op(self.op(x, g), self.inverse(x))

    def pow(self, g, k):
        if k < 0:
            g = self.inverse(g)
            k = -k
        h = self.identity
        while k:
            if k & 1:
                h = self.op(h, g)
            g = self.op(g, g)
            k >>= 1
        return h

    def element_order(self, g):
        e = self.identity
        i = 1
        h = g
        while h != e:
            h = self.op(h, g)
            i += 1
            assert i <= len(self.els), "%s has no finite order"%(g,)
        return i

    def is_abelian(self):
        op = self.op
        els = self.els
        for i, g in enumerate(els):
            for h in els[i+1:]:
                if op(g, h) != op(h, g):
                    return False
        return True

    def is_cyclic(self):
        n = len(self)
        for g in self:
            if self.element_order(g) == n:
                return True
        return False

    def exponent(self):
        orders = [self.element_order(g) for g in self]
        return reduce(lcm, orders, 1)

    def is_subgroup(self, H):
        "is every element of H in here ?"
        return H.elements.issubset(self.elements)

    def subgroup(self, els, check=True):
        return Subgroup(self, els, check=check)

    def generated(self, gens, verbose=False):
        "the subgroup spanned by gens"
        gens = list(gens)
        for g in gens:
            if g not in self.elements:
                raise PreconditionError("%s is not in %s"%(g, self))
        els = mulclose(gens, self.op, self.inverse, self.identity, verbose=verbose)
        H = Subgroup(self, els, check=False)
        H.gens = gens
        return H

    def trivial(self):
        return Subgroup(self, [self.identity], check=False)

    def table(self):
        """
        Cayley table as an integer array, T[i,j] is the index of
        els[i]*els[j], or -1 when the product falls outside the group.
        """
        if self._table is None:
            n = len(self.els)
            T = numpy.empty((n, n), dtype=int)
            lookup = self.lookup
            op = self.op
            for i, g in enumerate(self.els):
                for j, h in enumerate(self.els):
                    T[i, j] = lookup.get(op(g, h), -1)
            self._table = T
        return self._table


class Subgroup(Group):
    """
    A subset of a parent group that is itself a group under the parent's
    operation. This is checked on construction unless check=False, which
    is reserved for element sets that are closed by construction.
    """

    def __init__(self, parent, els, check=True, name=None):
        assert isinstance(parent, Group), type(parent)
        els = list(els)
        if check:
            Subgroup.check_subset(parent, els)
        self.parent = parent
        Group.__init__(self, els, parent.op, parent.identity, parent.inverse, name=name)

    @staticmethod
    def check_subset(parent, els):
        if not els:
            raise StructureError("a subgroup contains at least the identity")
        items = set(els)
        for g in items:
            if g not in parent.elements:
                raise StructureError("%s is not in %s"%(g, parent))
        if parent.identity not in items:
            raise StructureError("missing the identity %s"%(parent.identity,))
        op = parent.op
        for a in items:
            for b in items:
                c = op(a, b)
                if c not in items:
                    raise StructureError("not closed: %s*%s = %s"%(a, b, c))
        for a in items:
            if parent.inverse(a) not in items:
                raise StructureError("missing the inverse of %s"%(a,))

    def index(self):
        "|parent| / |self|"
        n, m = len(self.parent), len(self)
        if n % m:
            raise PreconditionError("order %d does not divide %d"%(m, n))
        return n // m

    def intersect(self, other):
        assert isinstance(other, Group)
        els = [g for g in self.els if g in other.elements]
        return Subgroup(self.parent, els, check=False)
    intersection = intersect

    def __str__(self):
        if self.name:
            return self.name
        return "Subgroup(%d, %d)"%(len(self), len(self.parent))

