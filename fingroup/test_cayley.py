#!/usr/bin/env python3

from fingroup.construct import (cyclic, dihedral, symmetric, quaternion,
    klein, direct_product)
from fingroup.perm import Perm
from fingroup.cayley import CayleyPermutationGroup, cayley_table
from fingroup.verify import verify
from fingroup.argv import argv


def test_regular():
    for G in [cyclic(1), cyclic(5), dihedral(3), dihedral(4), quaternion(),
            klein(), direct_product(cyclic(2), cyclic(3))]:
        P = CayleyPermutationGroup(G)
        n = len(G)
        assert len(P) == n
        assert P.source is G
        assert P.identity == Perm.identity(n)
        assert verify(P).ok
        phi = P.hom()
        assert phi.is_hom()
        assert phi.is_iso()
        for g in G:
            p = P.perm_of(g)
            assert p in P
            assert p.order() == G.element_order(g)
            if g != G.identity:
                assert p.fixed() == [] # regular: no fixed points


def test_index():
    G = dihedral(4)
    P = CayleyPermutationGroup(G)
    assert P.ordered == G.els
    for i, g in enumerate(P.ordered):
        assert P.index[g] == i+1
    e = G.identity
    for g in G:
        # g sends the point of e to the point of g
        assert P.perm_of(g)(P.index[e]) == P.index[g]
    assert P.is_abelian() == G.is_abelian()


def test_table():
    G = quaternion()
    els, T = cayley_table(G)
    assert els == G.els
    assert T.shape == (8, 8)
    for i, a in enumerate(els):
        for j, b in enumerate(els):
            assert els[T[i, j]] == G.mul(a, b)


def test_symmetric():
    G = symmetric(3)
    P = CayleyPermutationGroup(G)
    assert len(P) == 6
    assert not P.is_abelian()
    assert P.hom().is_iso()


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

