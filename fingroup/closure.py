#!/usr/bin/env python3

"""
Closure of a generating set under a binary operation.

Everything else is built on top of mulclose: concrete groups, subgroups
spanned by a set of elements, kernels, images, normalizers, ...
"""

from fingroup.errors import PreconditionError, StructureError
from fingroup.tool import write


def mulclose(gen, mul, inv=None, identity=None, verbose=False, maxsize=None):
    """
    Smallest set containing gen that is closed under mul.

    The generators and (when inv is given) their inverses seed the
    boundary; each round multiplies every boundary element on the right by
    every seed element. In a finite group the result contains all the
    inverses anyway. An empty gen closes to [identity].

    Returns the distinct elements in the order they were found.
    """
    gen = list(gen)
    if inv is not None:
        gen = gen + [inv(g) for g in gen]
    if not gen:
        if identity is None:
            raise PreconditionError("closure of nothing needs an identity")
        return [identity]

    found = dict.fromkeys(gen) # ordered set
    gen = list(found)
    bdy = list(gen)
    while bdy:
        if verbose:
            write("%d "%len(found))
        _bdy = []
        for A in bdy:
            for B in gen:
                C = mul(A, B)
                if C not in found:
                    found[C] = None
                    _bdy.append(C)
                    if maxsize and len(found)>=maxsize:
                        return list(found)
        bdy = _bdy
    if verbose:
        write("\n")
    return list(found)


def mulclose_hom(gen1, gen2, mul1, mul2, verbose=False):
    "build a group hom from generators: gen1 -> gen2"
    hom = {}
    if len(gen1) != len(gen2):
        raise PreconditionError("%d generators but %d images"%(len(gen1), len(gen2)))
    for i in range(len(gen1)):
        if gen1[i] in hom and hom[gen1[i]] != gen2[i]:
            raise StructureError("generator %s sent to two places"%(gen1[i],))
        hom[gen1[i]] = gen2[i]
    bdy = list(hom)
    gen1 = list(hom)
    while bdy:
        if verbose:
            write("%d "%len(hom))
        _bdy = []
        for A in gen1:
            for B in bdy:
                C1 = mul1(A, B)
                C2 = mul2(hom[A], hom[B])
                if C1 not in hom:
                    hom[C1] = C2
                    _bdy.append(C1)
                elif hom[C1] != C2:
                    raise StructureError("not a hom: %s*%s"%(A, B))
        bdy = _bdy
    if verbose:
        write("\n")
    return hom

