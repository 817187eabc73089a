#!/usr/bin/env python3

"""
Everything that can go wrong is fatal: nothing here is retried or repaired.
"""


class GroupError(Exception):
    pass


class StructureError(GroupError, ValueError):
    "a structure failed its axioms at construction time"


class PreconditionError(GroupError, ValueError):
    "the caller asked for something undefined"


class SizeLimitError(GroupError):
    "exhaustive search refused above a size ceiling"


class ConsistencyError(GroupError, AssertionError):
    "two computations that must agree did not: this is a bug"

