#!/usr/bin/env python3

"""
Find all the subgroups of a finite group.

Three searches, same answer format (a list of Subgroup's sorted by order):

    brute  : test every candidate subset for closure. Exact, exponential,
             refused above MAX_BRUTE elements.
    gens   : close every set of at most k elements. Only finds subgroups
             that need at most k generators: k=4 up to GENS_SMALL elements,
             k=2 above that.
    cyclic : start from the cyclic subgroups and keep joining cyclic
             subgroups on until nothing new turns up. Exact, since a
             subgroup is the join of its cyclic subgroups.
"""

from fingroup.group import Subgroup
from fingroup.closure import mulclose
from fingroup.errors import SizeLimitError, PreconditionError
from fingroup.util import choose, divisors
from fingroup.tool import write

MAX_BRUTE = 20
GENS_SMALL = 32
MAX_SEARCH = 200


def is_closed(G, items):
    "do these elements form a subgroup of G ?"
    items = set(items)
    if G.identity not in items:
        return False
    op = G.op
    for a in items:
        if G.inverse(a) not in items:
            return False
        for b in items:
            if op(a, b) not in items:
                return False
    return True


def brute_subgroups(G, maxsize=MAX_BRUTE, verbose=False):
    """
    Every subset that is closed and contains inverses.
    Subsets without the identity, or whose size does not divide |G|,
    can never pass the test and are skipped.
    """
    n = len(G)
    if maxsize is not None and n > maxsize:
        raise SizeLimitError("brute force subgroup search on %d > %d elements"%(n, maxsize))
    e = G.identity
    rest = [g for g in G if g != e]
    subs = []
    for m in divisors(n):
        if verbose:
            write("[%d]"%m)
        for items in choose(rest, m-1):
            items = (e,) + items
            if is_closed(G, items):
                subs.append(Subgroup(G, items, check=False))
                if verbose:
                    write(".")
    if verbose:
        write("\n")
    return subs


def gens_subgroups(G, k=None, maxsize=MAX_SEARCH, verbose=False):
    """
    Close every set of at most k generators, deduplicate by element set.
    XXX a subgroup needing more than k generators is missed.
    """
    n = len(G)
    if maxsize is not None and n > maxsize:
        raise SizeLimitError("subgroup search on %d > %d elements"%(n, maxsize))
    if k is None:
        k = 4 if n <= GENS_SMALL else 2
    e = G.identity
    rest = [g for g in G if g != e]
    found = {}
    for r in range(k+1):
        for gens in choose(rest, r):
            els = mulclose(gens, G.op, G.inverse, e)
            key = frozenset(els)
            if key not in found:
                H = Subgroup(G, els, check=False)
                H.gens = list(gens)
                found[key] = H
                if verbose:
                    write(".")
    if verbose:
        write("\n")
    return list(found.values())


def cyclic_subgroups(G):
    found = {}
    for g in G:
        els = mulclose([g], G.op)
        key = frozenset(els)
        if key not in found:
            H = Subgroup(G, els, check=False)
            H.gens = [g]
            found[key] = H
    return list(found.values())


def join_subgroups(G, maxsize=MAX_SEARCH, verbose=False):
    "grow the lattice upwards from the cyclic subgroups"
    n = len(G)
    if maxsize is not None and n > maxsize:
        raise SizeLimitError("subgroup search on %d > %d elements"%(n, maxsize))
    cyclic = cyclic_subgroups(G)
    subs = dict((H.elements, H) for H in cyclic)
    if G.elements not in subs:
        top = Subgroup(G, G.els, check=False)
        top.gens = G.gens
        subs[G.elements] = top
    bdy = [H for H in cyclic if len(H) < n]
    while bdy:
        _bdy = []
        for H in bdy:
            # enlarge by a cyclic subgroup
            for C in cyclic:
                if C.elements.issubset(H.elements):
                    continue
                gens = H.gens + C.gens
                els = mulclose(gens, G.op)
                key = frozenset(els)
                if key in subs:
                    continue
                K = Subgroup(G, els, check=False)
                K.gens = gens
                subs[key] = K
                if len(K) < n:
                    _bdy.append(K)
                if verbose:
                    write(".")
        bdy = _bdy
    if verbose:
        write("\n")
    return list(subs.values())


METHODS = {
    "brute" : brute_subgroups,
    "gens" : gens_subgroups,
    "cyclic" : join_subgroups,
}


def all_subgroups(G, method="cyclic", maxsize=None, verbose=False, **kw):
    search = METHODS.get(method)
    if search is None:
        raise PreconditionError("unknown subgroup search %r"%(method,))
    if maxsize is not None:
        kw["maxsize"] = maxsize
    subs = search(G, verbose=verbose, **kw)
    for H in subs:
        assert len(G) % len(H) == 0, "Lagrange says no"
    subs.sort(key = len)
    return subs


def maximal_subgroups(G, subs=None, **kw):
    "proper subgroups with nothing strictly between them and G"
    if subs is None:
        subs = all_subgroups(G, **kw)
    n = len(G)
    proper = [H for H in subs if len(H) < n]
    maximal = []
    for H in proper:
        for K in proper:
            if len(K) > len(H) and H.elements.issubset(K.elements):
                break
        else:
            maximal.append(H)
    return maximal


def frattini_subgroup(G, subs=None, **kw):
    "intersection of the maximal subgroups"
    maximal = maximal_subgroups(G, subs, **kw)
    if not maximal:
        return G.trivial()
    items = set(maximal[0].elements)
    for H in maximal[1:]:
        items.intersection_update(H.elements)
    return G.generated(items)


def subgroup_lattice(subs):
    """
    The covering relation: pairs (i, j) with subs[i] a maximal
    subgroup of subs[j].
    """
    pairs = []
    for i, H in enumerate(subs):
        above = [j for (j, K) in enumerate(subs)
            if len(K) > len(H) and H.elements.issubset(K.elements)]
        for j in above:
            K = subs[j]
            for l in above:
                L = subs[l]
                if len(L) < len(K) and L.elements.issubset(K.elements):
                    break
            else:
                pairs.append((i, j))
    return pairs


def conjugate_subgroup(G, H, g):
    "g*H*g^-1"
    return Subgroup(G, [G.conjugate(h, g) for h in H], check=False)


def subgroup_classes(G, subs=None, **kw):
    "the subgroups of G up to conjugacy, as a list of lists"
    if subs is None:
        subs = all_subgroups(G, **kw)
    remain = dict((H.elements, H) for H in subs)
    classes = []
    for H in subs:
        if H.elements not in remain:
            continue
        cls = []
        for g in G:
            K = conjugate_subgroup(G, H, g)
            K = remain.pop(K.elements, None)
            if K is not None:
                cls.append(K)
        classes.append(cls)
    return classes

