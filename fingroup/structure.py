#!/usr/bin/env python3

"""
Normality, normalizers, centralizers, the center and the
commutator subgroup.

Each of these filters the parent's elements and hands the survivors to
the closure engine, so the answer always comes back as a Subgroup.
"""

from fingroup.subgroups import all_subgroups


def conjugates(G, H, g):
    "the set g*H*g^-1"
    return set(G.conjugate(h, g) for h in H)


def is_normal(G, H):
    items = H.elements
    for g in G:
        if conjugates(G, H, g) != items:
            return False
    return True


def normalizer(G, H):
    "{g : gHg^-1 == H}"
    items = H.elements
    found = [g for g in G if conjugates(G, H, g) == items]
    return G.generated(found)


def centralizer(G, H):
    "{g : gh == hg for all h in H}"
    op = G.op
    found = []
    for g in G:
        for h in H:
            if op(g, h) != op(h, g):
                break
        else:
            found.append(g)
    return G.generated(found)


def element_centralizer(G, g):
    return centralizer(G, G.generated([g]))


def center(G):
    return centralizer(G, G)


def commutator(G, g, h):
    "g^-1 h^-1 g h"
    op = G.op
    return op(op(G.inverse(g), G.inverse(h)), op(g, h))


def commutator_subgroup(G):
    found = set()
    for g in G:
        for h in G:
            found.add(commutator(G, g, h))
    return G.generated(found)


def normal_subgroups(G, subs=None, **kw):
    if subs is None:
        subs = all_subgroups(G, **kw)
    return [H for H in subs if is_normal(G, H)]


def is_simple(G, **kw):
    "no normal subgroups but the trivial one and G"
    if len(G) == 1:
        return False
    return len(normal_subgroups(G, **kw)) == 2

