#!/usr/bin/env python3

import pytest

from fingroup.closure import mulclose, mulclose_hom
from fingroup.construct import AddMod, Compose, cyclic, symmetric
from fingroup.perm import Perm
from fingroup.errors import PreconditionError, StructureError
from fingroup.argv import argv


def test_mulclose_cyclic():
    add = AddMod(6)
    assert set(mulclose([2], add)) == {0, 2, 4}
    assert set(mulclose([2], add, lambda a : (-a)%6)) == {0, 2, 4}
    assert set(mulclose([1], add)) == set(range(6))
    assert set(mulclose([2, 3], add)) == set(range(6))


def test_mulclose_empty():
    assert mulclose([], AddMod(6), identity=0) == [0]
    with pytest.raises(PreconditionError):
        mulclose([], AddMod(6))


def test_mulclose_perms():
    op = Compose(4)
    gen = [Perm.cycle(1, 2, 3, 4), Perm.transposition(1, 2, 4)]
    els = mulclose(gen, op)
    assert len(els) == 24
    assert len(set(els)) == 24 # no repeats

    gen = [Perm.fromcycles([(1, 2), (3, 4)], 4), Perm.fromcycles([(1, 3), (2, 4)], 4)]
    els = mulclose(gen, op)
    assert len(els) == 4
    assert Perm.identity(4) in els


def test_mulclose_inverses():
    G = symmetric(4)
    for gen in [[G[3]], [G[5], G[7]], [G[10], G[20], G[1]]]:
        els = set(mulclose(gen, G.op, G.inverse))
        for g in els:
            assert G.inverse(g) in els
        for g in gen:
            assert g in els
        assert G.identity in els


def test_idempotent():
    G = symmetric(4)
    for gen in [[G[1]], [G[2], G[9]], [G[5], G[11], G[17]]]:
        els = mulclose(gen, G.op, G.inverse)
        assert set(mulclose(els, G.op, G.inverse)) == set(els)


def test_maxsize():
    els = mulclose([1], AddMod(100), maxsize=10)
    assert len(els) == 10


def test_mulclose_hom():
    add6, add3, add4 = AddMod(6), AddMod(3), AddMod(4)
    hom = mulclose_hom([1], [1], add6, add3)
    assert len(hom) == 6
    for g in range(6):
        assert hom[g] == g % 3

    with pytest.raises(StructureError):
        mulclose_hom([1], [1], add6, add4)

    with pytest.raises(PreconditionError):
        mulclose_hom([1, 2], [1], add6, add3)


def test_group_closure():
    G = cyclic(12)
    H = G.generated([8])
    assert set(H) == {0, 4, 8}
    assert H.gens == [8]


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

