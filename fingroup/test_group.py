#!/usr/bin/env python3

import pytest
import numpy

from fingroup.group import Group, Subgroup
from fingroup.construct import (AddMod, cyclic, dihedral, symmetric,
    alternating, quaternion, klein, direct_product)
from fingroup.subgroups import all_subgroups
from fingroup.conjugacy import conjugacy_classes
from fingroup.cayley import CayleyPermutationGroup
from fingroup.verify import verify
from fingroup.errors import StructureError, PreconditionError
from fingroup.argv import argv


def get_groups():
    return [cyclic(1), cyclic(6), cyclic(7), dihedral(4), dihedral(5),
        symmetric(3), symmetric(4), alternating(4), quaternion(), klein(),
        direct_product(cyclic(2), cyclic(4))]


def test_elements():
    G = cyclic(6)
    assert G.order() == len(G) == 6
    assert 5 in G
    assert 6 not in G
    assert G.elements == frozenset(range(6))
    assert G.index_of(G.identity) == 0
    assert G[G.index_of(4)] == 4
    assert G.element_order(2) == 3
    assert G.element_order(0) == 1
    assert G.pow(1, -1) == 5
    assert G.pow(2, 3) == 0
    assert G.pow(5, 0) == 0
    assert G.exponent() == 6


def test_subgroup():
    G = cyclic(6)
    H = Subgroup(G, [0, 3])
    assert H.parent is G
    assert H.index() == 3
    assert len(H) == 2
    assert G.is_subgroup(H)
    assert H.identity == 0
    assert H.inverse(3) == 3

    with pytest.raises(StructureError):
        Subgroup(G, [0, 2]) # 2+2 = 4
    with pytest.raises(StructureError):
        Subgroup(G, [2, 4]) # no identity
    with pytest.raises(StructureError):
        Subgroup(G, [])
    with pytest.raises(StructureError):
        Subgroup(G, [0, 7])
    with pytest.raises(PreconditionError):
        G.generated([7])

    K = G.subgroup([0, 2, 4])
    assert H.intersect(K) == G.trivial()
    assert len(G.generated([2, 3])) == 6


def test_index_precondition():
    G = cyclic(6)
    # not a subgroup, but nobody checked: the index is then undefined
    H = Subgroup(G, [0, 1, 2, 3], check=False)
    with pytest.raises(PreconditionError):
        H.index()


def test_from_table():
    G = Group.from_table([[0, 1, 2], [1, 2, 0], [2, 0, 1]])
    assert G.identity == 0
    assert G.inverse(1) == 2
    assert G.mul(2, 2) == 1
    assert verify(G).ok
    assert Group.from_table(G.table()) == G

    with pytest.raises(StructureError):
        Group.from_table([[0, 0], [0, 0]]) # no identity


def test_table():
    G = dihedral(3)
    T = G.table()
    assert T.shape == (6, 6)
    assert (T >= 0).all()
    for row in T:
        assert sorted(row) == list(range(6)) # latin square
    e = G.index_of(G.identity)
    assert (T[e] == numpy.arange(6)).all()


def test_axioms():
    for G in get_groups():
        e = G.identity
        for g in G:
            assert G.mul(e, g) == g
            assert G.mul(g, e) == g
            assert G.inverse(g) in G
            assert G.mul(g, G.inverse(g)) == e
            assert G.mul(G.inverse(g), g) == e


def test_lagrange():
    for G in get_groups():
        for H in all_subgroups(G):
            assert len(G) % len(H) == 0
            assert H.index() * len(H) == len(G)


def test_class_partition():
    for G in get_groups():
        classes = conjugacy_classes(G)
        items = set()
        for cls in classes:
            assert not items.intersection(cls.elements)
            items.update(cls.elements)
            assert len(G) % len(cls) == 0
        assert items == G.elements
        assert sum(len(cls) for cls in classes) == len(G)


def test_cayley_order():
    for G in get_groups():
        assert len(CayleyPermutationGroup(G)) == len(G)


def test_from_elements():
    # no inverse given: found by search
    G = Group(range(5), AddMod(5), 0)
    assert G.inverse(2) == 3
    assert verify(G).ok
    assert G == cyclic(5)


if __name__ == "__main__":

    from time import time
    start_time = time()

    name = argv.next()
    if name is not None:
        fn = eval(name)
        fn()
    else:
        for name, fn in list(globals().items()):
            if name.startswith("test_") and callable(fn):
                fn()

    t = time() - start_time
    print("OK! finished in %.3f seconds\n"%t)

