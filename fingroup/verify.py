#!/usr/bin/env python3

"""
Check the group axioms by brute force.

This is for tests, not for hot paths: associativity costs |G|^3.
"""

from collections import namedtuple

import numpy


class Result(namedtuple("Result", ["ok", "violations"])):
    def summary(self):
        if self.ok:
            return "All axioms satisfied."
        lines = ["Violations (%d):"%len(self.violations)]
        lines += [" - %s"%v for v in self.violations]
        return "\n".join(lines)


def verify(G, maxerrors=20):
    violations = []
    els = list(G.els)
    if not els:
        return Result(False, ["Element set is empty"])

    # identity
    e = G.identity
    if e not in G.elements:
        violations.append("Identity %s is not an element"%(e,))
    for a in els:
        if G.op(e, a) != a:
            violations.append("Left identity fails for element: %s"%(a,))
        if G.op(a, e) != a:
            violations.append("Right identity fails for element: %s"%(a,))

    # inverses
    for a in els:
        b = G.inverse(a)
        if b is None or b not in G.elements:
            violations.append("Inverse not in set for element: %s"%(a,))
        elif G.op(a, b) != e or G.op(b, a) != e:
            violations.append("Inverse fails for element: %s"%(a,))

    # closure
    T = G.table()
    for i, j in zip(*numpy.where(T < 0)):
        a, b = els[i], els[j]
        violations.append("Closure violated for pair: %s, %s -> %s"%(a, b, G.op(a, b)))

    # associativity, only meaningful on a closed table
    if (T >= 0).all():
        n = len(els)
        for i in range(n):
            # left[j,k] = (a*b)*c, right[j,k] = a*(b*c) with a = els[i]
            left = T[T[i]]
            right = T[i][T]
            bad = numpy.argwhere(left != right)
            for j, k in bad[:maxerrors]:
                violations.append("Associativity fails for triple: %s, %s, %s"%(
                    els[i], els[j], els[k]))
            if len(violations) > 10*maxerrors:
                break

    return Result(not violations, violations)

