"""This module collects all gmpy2 functions used by polyarith.

Plain integer helpers for polynomial arithmetic are provided as well:
gcd and lcm for (lists of) integers, the extended Euclidean algorithm,
a sign-normalizing modulo, and factoring into distinct primes as needed
for the irreducibility and primitivity tests over GF(2).
Results are always returned as Python ints, never as mpz's.
"""

import logging
import math
import gmpy2

logging.debug(f'Load gmpy2 version {gmpy2.version()}')


def gcd(a, b):
    """Greatest common divisor of integers a and b (nonnegative)."""
    return int(gmpy2.gcd(a, b))


def lcm(a, b):
    """Least common multiple of integers a and b (nonnegative, 0 if a or b is 0)."""
    return int(gmpy2.lcm(a, b))


def array_gcd(x):
    """Greatest common divisor of all integers in x (0 for empty x)."""
    g = 0
    for a in x:
        g = gcd(a, g)
        if g == 1:
            break  # cannot get any smaller

    return g


def gcdext(a, b):
    """Return a 3-element tuple (g, s, t) such that g == gcd(a, b) and g == a*s + b*t."""
    g, s, t = gmpy2.gcdext(a, b)
    return int(g), int(s), int(t)


def invert(x, m):
    """Return y such that x*y == 1 modulo m.

    Raises ZeroDivisionError if no inverse y exists (or, if m is zero).
    """
    return int(gmpy2.invert(x, m))


def is_prime(x, n=25):
    """Return True if x is probably prime, else False if x is
    definitely composite, performing up to n Miller-Rabin
    primality tests.
    """
    return bool(gmpy2.is_prime(x, n))


def next_prime(x):
    """Return the next probable prime number > x."""
    return int(gmpy2.next_prime(x))


def powmod(x, y, m):
    """Return (x**y) mod m."""
    return int(gmpy2.powmod(x, y, m))


def mod(x, m):
    """Return x modulo m in the range 0 <= x < |m|, leaving x as is for m=0."""
    if m == 0:
        return x

    return x % abs(m)


def _pollard_brent(n):
    # Brent's variant of Pollard's rho, for odd composite n
    for c in range(1, n):
        y, r, q, g = 2, 1, 1, 1
        m = max(1, n.bit_length())
        while g == 1:
            x = y
            for _ in range(r):
                y = (y * y + c) % n
            k = 0
            while k < r and g == 1:
                ys = y
                for _ in range(min(m, r - k)):
                    y = (y * y + c) % n
                    q = q * abs(x - y) % n
                g = math.gcd(q, n)
                k += m
            r *= 2
        if g == n:
            g = 1
            while g == 1:
                ys = (ys * ys + c) % n
                g = math.gcd(abs(x - ys), n)
        if g != n:
            return g

    raise ValueError(f'no factor found for {n}')  # unreachable for composite n


def prime_factors(n):
    """Return the sorted list of distinct prime divisors of n >= 1."""
    if n < 1:
        raise ValueError('positive number required')

    factors = set()
    p = 2
    while p < 1<<10 and p * p <= n:
        if n % p == 0:
            factors.add(p)
            while n % p == 0:
                n //= p
        p = next_prime(p)
    if n > 1:
        stack = [n]
        while stack:
            n = stack.pop()
            if n == 1:
                continue

            if is_prime(n):
                factors.add(n)
                continue

            r = gmpy2.iroot(n, 2)
            if r[1]:
                stack.append(int(r[0]))
                continue

            d = _pollard_brent(n)
            stack.extend((d, n // d))
    factors = sorted(factors)
    logging.debug(f'Prime factors found: {factors}')
    return factors
