#!/usr/bin/env python3

"""
Conjugacy classes and the class equation.
"""

from collections import Counter

from fingroup.errors import PreconditionError


class ConjugacyClass(object):
    """
    The orbit of representative under conjugation by the parent group.
    """
    def __init__(self, parent, representative, elements):
        if representative not in elements:
            raise PreconditionError("%s is not in its own class"%(representative,))
        self.parent = parent
        self.representative = representative
        self.elements = frozenset(elements)

    def size(self):
        return len(self.elements)
    __len__ = size

    def __iter__(self):
        return iter(self.elements)

    def __contains__(self, g):
        return g in self.elements

    def __eq__(self, other):
        if not isinstance(other, ConjugacyClass):
            return NotImplemented
        return self.elements == other.elements

    def __ne__(self, other):
        if not isinstance(other, ConjugacyClass):
            return NotImplemented
        return self.elements != other.elements

    def __hash__(self):
        return hash(self.elements)

    def __str__(self):
        return "[%s]"%(self.representative,)

    def __repr__(self):
        return "ConjugacyClass(%s, %d)"%(self.representative, len(self.elements))


def conjugate(G, g, x):
    "x*g*x^-1"
    return G.conjugate(g, x)


def conjugacy_class(G, g):
    if g not in G:
        raise PreconditionError("%s is not in %s"%(g, G))
    return set(G.conjugate(g, x) for x in G)


def conjugacy_classes(G):
    """
    Partition G into conjugacy classes, sorted by the order
    of their elements, then by size.
    """
    remain = dict.fromkeys(G.els) # ordered
    classes = []
    while remain:
        g = next(iter(remain))
        items = conjugacy_class(G, g)
        classes.append(ConjugacyClass(G, g, items))
        for h in items:
            del remain[h]
    classes.sort(key = lambda cls : (G.element_order(cls.representative), len(cls)))
    return classes


def are_conjugate(G, g, h):
    for a in (g, h):
        if a not in G:
            raise PreconditionError("%s is not in %s"%(a, G))
    for x in G:
        if G.conjugate(g, x) == h:
            return True
    return False


def class_equation(G):
    "class size -> number of classes of that size"
    return dict(Counter(len(cls) for cls in conjugacy_classes(G)))


def verify_class_equation(G):
    classes = conjugacy_classes(G)
    n = len(G)
    return sum(len(cls) for cls in classes) == n and all(n % len(cls) == 0 for cls in classes)


def number_of_classes(G):
    return len(conjugacy_classes(G))

