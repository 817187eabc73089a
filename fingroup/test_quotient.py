#!/usr/bin/env python3

import pytest

from fingroup.construct import cyclic, dihedral, symmetric, quaternion
from fingroup.perm import Perm
from fingroup.structure import center, commutator_subgroup
from fingroup.quotient import (Coset, RightCoset, QuotientGroup,
    left_cosets, right_cosets)
from fingroup.verify import verify
from fingroup.errors import StructureError, PreconditionError
from fingroup.argv import argv


def test_cyclic_quotient():
    G = cyclic(6)
    H = G.subgroup([0, 3])
    Q = QuotientGroup(G, H)
    assert len(Q) == 3
    assert Q.identity == Coset(G, H, 0)
    assert Q.coset(1) == Q.coset(4)
    assert hash(Q.coset(1)) == hash(Q.coset(4))
    assert Q.coset(1) != Q.coset(2)
    assert Q.mul(Q.coset(1), Q.coset(2)) == Q.identity
    assert Q.inverse(Q.coset(1)) == Q.coset(2)
    assert Q.is_cyclic()
    assert str(Q.identity) == "H"
    assert verify(Q).ok


def test_coset():
    G = cyclic(6)
    H = G.subgroup([0, 2, 4])
    a = Coset(G, H, 1)
    b = Coset(G, H, 5)
    assert a == b
    assert len({a, b}) == 1
    assert set(a) == {1, 3, 5}
    assert 3 in a
    assert len(a) == 3
    with pytest.raises(PreconditionError):
        Coset(G, H, 6)


def test_sign_quotient():
    G = symmetric(3)
    A = G.generated([Perm.cycle(1, 2, 3)])
    Q = QuotientGroup(G, A)
    assert len(Q) == 2
    assert verify(Q).ok

    H = G.generated([Perm.transposition(1, 2, 3)])
    with pytest.raises(StructureError):
        QuotientGroup(G, H)


def test_not_inside():
    with pytest.raises(StructureError):
        QuotientGroup(cyclic(6), cyclic(7))
    with pytest.raises(StructureError):
        QuotientGroup(cyclic(6), cyclic(3)) # different operation


def test_dihedral_quotient():
    G = dihedral(4)
    Z = center(G)
    Q = QuotientGroup(G, Z)
    assert len(Q) == 4
    assert Q.exponent() == 2
    assert Q.is_abelian()
    assert not Q.is_cyclic()
    assert verify(Q).ok

    Q = QuotientGroup(quaternion(), center(quaternion()))
    assert len(Q) == 4
    assert Q.exponent() == 2


def test_extremes():
    G = symmetric(3)
    Q = QuotientGroup(G, G.trivial())
    assert len(Q) == 6
    assert not Q.is_abelian()
    Q = QuotientGroup(G, G.generated(G.els))
    assert len(Q) == 1


def test_abelianization():
    G = symmetric(4)
    Q = QuotientGroup(G, commutator_subgroup(G))
    assert len(Q) == 2
    assert Q.is_abelian()


def test_left_right():
    G = symmetric(3)
    H = G.generated([Perm.transposition(1, 2, 3)])
    left = left_cosets(G, H)
    right = right_cosets(G, H)
    assert len(left) == len(right) == 3
    assert set(c.elements for c in left) != set(c.elements for c in right)
    for cosets in [left, right]:
        items = set()
        for c in cosets:
            assert len(c.elements) == len(H)
            assert not items.intersection(c.elements)
            items.update(c.elements)
        assert items == G.elements

    # normal: left and right agree
    A = G.generated([Perm.cycle(1, 2, 3)])
    left = set(c.elements for c in left_cosets(G, A))
    right = set(c.elements for c in right_cosets(G, A))
    assert left == right

    r = Perm.cycle(1, 2, 3)
    assert set(RightCoset(G, H, r)) == set(G.mul(h, r) for h in H)


def test_projection():
    G = dihedral(4)
    Z = center(G)
    Q = QuotientGroup(G, Z)
    pi = Q.projection()
    assert pi.is_hom()
    assert pi.is_surjective()
    assert pi.kernel().elements == Z.elements
    assert pi.first_iso() == 4
    for g in G:
        assert g in pi(g)


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

