#!/usr/bin/env python3

"""
Command line arguments as attributes.

    python -m fingroup.test_hom test_sign seed=1 verbose

gives argv.next() == "test_sign", argv.seed == 1, argv.verbose == True
and argv.anything_else == None.
"""

import sys
from ast import literal_eval


def parse(value):
    try:
        return literal_eval(value)
    except (ValueError, SyntaxError):
        return value


class Argv(object):
    def __init__(self, args=None):
        if args is None:
            args = sys.argv[1:]
        self.args = [] # positional, in order
        self.kw = {}
        for arg in args:
            if "=" in arg:
                key, value = arg.split("=", 1)
                self.kw[key.lstrip("-")] = parse(value)
            elif arg.startswith("-"):
                self.kw[arg.lstrip("-")] = True
            else:
                self.args.append(arg)
                self.kw[arg] = True

    def __getattr__(self, name):
        if name.startswith("__"):
            raise AttributeError(name)
        return self.kw.get(name)

    def get(self, name, default=None):
        return self.kw.get(name, default)

    def next(self):
        if not self.args:
            return None
        arg = self.args.pop(0)
        return arg

    def __str__(self):
        return "Argv(%s, %s)"%(self.args, self.kw)
    __repr__ = __str__


argv = Argv()

