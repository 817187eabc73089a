#!/usr/bin/env python3

from fingroup.argv import argv


if argv.silent:
    def write(s):
        pass

else:

    def write(s):
        print(s, end="", flush=True)

