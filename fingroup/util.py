#!/usr/bin/env python3


def factorial(n):
    r = 1
    for i in range(1, n+1):
        r *= i
    return r

assert factorial(0) == 1
assert factorial(1) == 1
assert factorial(4) == 2*3*4


def choose(items, n):
    if type(items) is int:
        items = list(range(items))
    if n > len(items):
        return
    if n == 0:
        yield ()
        return
    if n == 1:
        for item in items:
            yield (item,)
        return
    for i, item in enumerate(items):
        for rest in choose(items[i+1:], n-1):
            yield (item,)+rest

assert len(list(choose(range(4), 1))) == 4
assert len(list(choose(range(4), 2))) == 6
assert len(list(choose(range(4), 3))) == 4


def divisors(n):
    divs = [1]
    for i in range(2, n):
        if n%i == 0:
            divs.append(i)
    if n>1:
        divs.append(n)
    return divs

assert divisors(1) == [1]
assert divisors(12) == [1, 2, 3, 4, 6, 12]


def gcd(a, b):
    while b:
        a, b = b, a%b
    return a


def lcm(a, b):
    return a*b // gcd(a, b)

