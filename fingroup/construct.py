#!/usr/bin/env python3

"""
Concrete groups.

Each family is a GenerationStrategy: it knows an Operation, the identity,
inverses and a generating set. The elements are then found by the closure
engine. Pick the strategy yourself, or look it up by name in a table that
you pass in (STRATEGIES by default):

    G = Dihedral(4).build()
    G = get_group("dihedral", 4)
"""

from types import MappingProxyType

from fingroup.group import Group, Operation
from fingroup.perm import Perm
from fingroup.errors import PreconditionError, SizeLimitError
from fingroup.util import factorial, divisors

MAX_DEGREE = 8 # S_8 has 40320 elements


# Operations
# ----------

class AddMod(Operation):
    "a+b mod n"
    def __init__(self, n):
        Operation.__init__(self, n)
        self.n = n

    def __call__(self, a, b):
        return (a + b) % self.n


class DihedralMul(Operation):
    """
    Elements are (r, f): rotate by r then reflect f times,
    with r^n = e, s^2 = e and s r = r^-1 s.
    """
    def __init__(self, n):
        Operation.__init__(self, n)
        self.n = n

    def __call__(self, a, b):
        r, f = a
        r1, f1 = b
        if f == 0:
            r2 = r + r1
        else:
            r2 = r - r1
        return (r2 % self.n, (f + f1) % 2)


class Compose(Operation):
    "composition of permutations of 1..n"
    def __init__(self, n):
        Operation.__init__(self, n)
        self.n = n

    def __call__(self, a, b):
        return a*b


QUNITS = "1ijk"
QTABLE = {
    ("i", "i") : (-1, "1"), ("j", "j") : (-1, "1"), ("k", "k") : (-1, "1"),
    ("i", "j") : (1, "k"), ("j", "k") : (1, "i"), ("k", "i") : (1, "j"),
    ("j", "i") : (-1, "k"), ("k", "j") : (-1, "i"), ("i", "k") : (-1, "j"),
}
for u in QUNITS:
    QTABLE["1", u] = (1, u)
    QTABLE[u, "1"] = (1, u)


class QuaternionMul(Operation):
    "elements are (sign, unit) with unit one of 1,i,j,k"
    def __init__(self):
        Operation.__init__(self)

    def __call__(self, a, b):
        s, u = a
        s1, u1 = b
        s2, u2 = QTABLE[u, u1]
        return (s*s1*s2, u2)


class VectorAdd(Operation):
    "componentwise addition of k-tuples mod p"
    def __init__(self, p, k):
        Operation.__init__(self, p, k)
        self.p = p
        self.k = k

    def __call__(self, a, b):
        p = self.p
        return tuple((x + y) % p for (x, y) in zip(a, b))


class ProductMul(Operation):
    "componentwise product on pairs"
    def __init__(self, G, H):
        Operation.__init__(self, G, H)
        self.G = G
        self.H = H

    def __call__(self, a, b):
        return (self.G.op(a[0], b[0]), self.H.op(a[1], b[1]))


# Strategies
# ----------

class GenerationStrategy(object):
    """
    Recipe for a finite group: op, identity, inverse and gens().
    """
    op = None
    identity = None

    def inverse(self, a):
        raise NotImplementedError

    def gens(self):
        raise NotImplementedError

    def get_name(self):
        return self.__class__.__name__

    def build(self, name=None, verbose=False):
        if name is None:
            name = self.get_name()
        return Group.generate(self.gens(), self.op, self.identity, self.inverse,
            verbose=verbose, name=name)


class Cyclic(GenerationStrategy):
    def __init__(self, n):
        if n < 1:
            raise PreconditionError("cyclic group needs n >= 1, got %s"%(n,))
        self.n = n
        self.op = AddMod(n)
        self.identity = 0

    def inverse(self, a):
        return (-a) % self.n

    def gens(self):
        return [1 % self.n]

    def get_name(self):
        return "C%d"%self.n


class Dihedral(GenerationStrategy):
    "symmetries of the regular n-gon, order 2n"
    def __init__(self, n):
        if n < 2:
            raise PreconditionError("dihedral group needs n >= 2, got %s"%(n,))
        self.n = n
        self.op = DihedralMul(n)
        self.identity = (0, 0)

    def inverse(self, a):
        r, f = a
        if f:
            return a # reflections are involutions
        return ((-r) % self.n, 0)

    def gens(self):
        return [(1 % self.n, 0), (0, 1)]

    def get_name(self):
        return "D%d"%self.n


class Symmetric(GenerationStrategy):
    def __init__(self, n):
        if n < 1:
            raise PreconditionError("symmetric group needs n >= 1, got %s"%(n,))
        if n > MAX_DEGREE:
            raise SizeLimitError("degree %d > %d"%(n, MAX_DEGREE))
        self.n = n
        self.op = Compose(n)
        self.identity = Perm.identity(n)

    def inverse(self, a):
        return ~a

    def gens(self):
        n = self.n
        return [Perm.transposition(i, i+1, n) for i in range(1, n)]

    def get_name(self):
        return "S%d"%self.n

    def build(self, name=None, verbose=False):
        G = GenerationStrategy.build(self, name, verbose)
        assert len(G) == factorial(self.n)
        return G


class Alternating(Symmetric):
    def gens(self):
        n = self.n
        return [Perm.cycle(i, i+1, i+2, n=n) for i in range(1, n-1)]

    def get_name(self):
        return "A%d"%self.n

    def build(self, name=None, verbose=False):
        G = GenerationStrategy.build(self, name, verbose)
        assert len(G) == max(1, factorial(self.n)//2)
        return G


class Quaternion(GenerationStrategy):
    def __init__(self):
        self.op = QuaternionMul()
        self.identity = (1, "1")

    def inverse(self, a):
        s, u = a
        if u == "1":
            return a
        return (-s, u)

    def gens(self):
        return [(1, "i"), (1, "j")]

    def get_name(self):
        return "Q8"


class ElementaryAbelian(GenerationStrategy):
    "(Z/p)^k"
    def __init__(self, p, k):
        if p < 2 or divisors(p) != [1, p]:
            raise PreconditionError("p=%s is not prime"%(p,))
        if k < 1:
            raise PreconditionError("k=%s"%(k,))
        self.p = p
        self.k = k
        self.op = VectorAdd(p, k)
        self.identity = (0,)*k

    def inverse(self, a):
        p = self.p
        return tuple((-x) % p for x in a)

    def gens(self):
        k = self.k
        return [tuple(int(i==j) for j in range(k)) for i in range(k)]

    def get_name(self):
        return "E%d^%d"%(self.p, self.k)


class DirectProduct(GenerationStrategy):
    "G x H on pairs (g, h)"
    def __init__(self, G, H):
        self.G = G
        self.H = H
        self.op = ProductMul(G, H)
        self.identity = (G.identity, H.identity)

    def inverse(self, a):
        return (self.G.inverse(a[0]), self.H.inverse(a[1]))

    def gens(self):
        G, H = self.G, self.H
        gens = [(g, H.identity) for g in (G.gens or G.els)]
        gens += [(G.identity, h) for h in (H.gens or H.els)]
        return gens

    def get_name(self):
        return "%sx%s"%(self.G, self.H)

    def build(self, name=None, verbose=False):
        GH = GenerationStrategy.build(self, name, verbose)
        assert len(GH) == len(self.G)*len(self.H)
        return GH


STRATEGIES = MappingProxyType({
    "cyclic" : Cyclic,
    "dihedral" : Dihedral,
    "symmetric" : Symmetric,
    "alternating" : Alternating,
    "quaternion" : Quaternion,
    "elementary_abelian" : ElementaryAbelian,
    "direct_product" : DirectProduct,
})


def get_group(name, *args, strategies=STRATEGIES, verbose=False):
    cls = strategies.get(name)
    if cls is None:
        raise PreconditionError("no group family called %r"%(name,))
    return cls(*args).build(verbose=verbose)


def cyclic(n):
    return Cyclic(n).build()

def dihedral(n):
    return Dihedral(n).build()

def symmetric(n):
    return Symmetric(n).build()

def alternating(n):
    return Alternating(n).build()

def quaternion():
    return Quaternion().build()

def elementary_abelian(p, k):
    return ElementaryAbelian(p, k).build()

def klein():
    return ElementaryAbelian(2, 2).build(name="V4")

def direct_product(G, H):
    return DirectProduct(G, H).build()

