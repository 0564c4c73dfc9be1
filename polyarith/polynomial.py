"""This module supports arithmetic with polynomials over the integers.

Polynomials are represented as coefficient lists, highest degree first.
The polynomial a_n x^n + ... + a_1 x + a_0 corresponds to the list
[a_n, ... , a_1, a_0] of integers, where a_n is nonzero, using [0] for
the zero polynomial. The string and exponent views of a polynomial are
kept alongside, see module polyarith.formatter.

The operators +,-,*,//,%, and function divmod are overloaded, as well as
== and != for equality testing. Long division is exact over the integers,
or done modulo a given prime, reducing all intermediate coefficients as
soon as they are computed. GCDs and derivatives are supported too.
"""

import logging
from polyarith.formatter import (Formats, Representation, to_coefficients, remove_leading_zeros,
                                 coef_to_string, string_to_coef)
from polyarith.gmpy import gcd, array_gcd, invert, mod


def _deg(a):
    return len(a) - 1 if a[0] else -1


def is_all_zero(a):
    """Test if all coefficients in list a are zero."""
    return all(a_i == 0 for a_i in a)


def _reduce(a, modulus):
    if not modulus:
        return a

    return remove_leading_zeros([mod(a_i, modulus) for a_i in a])


def _neg(a):
    return [-a_i for a_i in a]


def _add(a, b):
    if len(a) < len(b):
        a, b = b, a
    # len(a) >= len(b), align constant terms
    c = list(a)
    k = len(a) - len(b)
    for i, b_i in enumerate(b):
        c[k + i] += b_i
    return remove_leading_zeros(c)


def _sub(a, b):
    return _add(a, _neg(b))


def _mul(a, b):
    c = [0] * (len(a) + len(b) - 1)
    for i, a_i in enumerate(a):
        if a_i:
            for j, b_j in enumerate(b):
                c[i + j] += a_i * b_j
    return remove_leading_zeros(c)


def _divmod(a, b, modulus=0):
    a = _reduce(a, modulus)
    b = _reduce(b, modulus)
    if not b[0]:
        raise ZeroDivisionError('division by zero polynomial')

    m = len(a)
    n = len(b)
    if m < n:
        raise ValueError(f'degree of divisor exceeds degree of dividend ({n-1} > {m-1})')

    if modulus:
        b1 = invert(b[0], modulus)
    q, r = [0] * (m - n + 1), a[:]
    for i in range(m - n + 1):
        if modulus:
            q_i = (r[i] * b1) % modulus
        else:
            q_i, t = divmod(r[i], b[0])
            if t:
                raise ValueError(f'inexact division of {r[i]} by {b[0]} over the integers')

        q[i] = q_i
        if q_i:
            for j in range(n):
                r[i + j] = mod(r[i + j] - q_i * b[j], modulus)
    return remove_leading_zeros(q), remove_leading_zeros(r[m - n + 1:])


def _derivative(a):
    n = len(a) - 1
    if n == 0:
        return [0]

    return remove_leading_zeros([a[i] * (n - i) for i in range(n)])


def _primitive(a):
    # divide a by the gcd of its coefficients
    c = array_gcd(a)
    if c <= 1:
        return a

    return [a_i // c for a_i in a]


def _prem(a, b):
    # pseudo-remainder: a scaled by lc(b)^(deg a - deg b + 1) divides exactly over Z
    k = len(a) - len(b) + 1
    s = b[0]**k
    return _divmod([a_i * s for a_i in a], b)[1]


def _gcd(a, b, modulus=0):
    a = _reduce(a, modulus)
    b = _reduce(b, modulus)
    if _deg(a) < _deg(b):
        a, b = b, a
    if modulus:
        while _deg(b) >= 0:
            a, b = b, _divmod(a, b, modulus)[1]
        return a

    # primitive remainder sequence, content of the gcd restored at the end
    c = gcd(array_gcd(a), array_gcd(b))
    a, b = _primitive(a), _primitive(b)
    while _deg(b) >= 0:
        a, b = b, _primitive(_prem(a, b))
    if c > 1:
        a = [c * a_i for a_i in a]
    return a


def poly_gcd(p, q, modulus=0):
    """Greatest common divisor of coefficient lists p and q, optionally modulo a prime.

    Over the integers, Euclid's algorithm runs on pseudo-remainders reduced to
    their primitive parts, so all coefficients stay integral. The result is
    determined up to sign; no monic normalization is applied.
    """
    return _gcd(remove_leading_zeros(p), remove_leading_zeros(q), modulus)


class Polynomial(Representation):
    """Polynomials with integer coefficients.

    A polynomial is given by a string, by a list of coefficients or exponents
    with fmt set accordingly, by an int (constant polynomial), or by another
    polynomial. All arithmetic returns new polynomials, leaving operands unchanged.
    """

    __slots__ = ()

    def __init__(self, value=0, fmt=None, check=True):
        """Initialize polynomial to given value (zero polynomial, by default).

        If check is False, value must be a list of coefficients without leading zeros.
        """
        if check:
            value = self._intern(value, fmt)
        self.value = Formats(coef_to_string(value), tuple(value), None)  # exponents derived lazily

    @classmethod
    def _intern(cls, a, fmt=None):
        # convert a to list of coefficients, if possible
        if isinstance(a, int):
            return [a]

        return to_coefficients(a, fmt)

    @classmethod
    def _coerce(cls, a):
        # convert operand a to list of coefficients, NotImplemented if type of a is unsupported
        if isinstance(a, Representation):
            return a.coefficients

        if isinstance(a, int):
            return [a]

        if isinstance(a, str):
            return string_to_coef(a)

        return NotImplemented

    def degree(self):
        """Degree of polynomial (-1 for zero polynomial)."""
        return _deg(self.value.coefficients)

    def __call__(self, x):
        """Evaluate polynomial at given x."""
        y = 0
        for c in self.value.coefficients:
            y *= x
            y += c
        return y

    def add(self, other):
        """Add polynomial other to this polynomial."""
        cls = type(self)
        return cls(_add(self.coefficients, cls._intern(other)), check=False)

    def sub(self, other):
        """Subtract polynomial other from this polynomial."""
        cls = type(self)
        return cls(_sub(self.coefficients, cls._intern(other)), check=False)

    def multiply(self, other):
        """Multiply this polynomial by polynomial other."""
        cls = type(self)
        return cls(_mul(self.coefficients, cls._intern(other)), check=False)

    def divide(self, divisor, modulus=0):
        """Divide this polynomial by divisor with remainder.

        Return quotient and remainder. If modulus is nonzero, all coefficients
        are reduced modulo the (prime) modulus. Otherwise, coefficients are kept
        as integers and each step of the long division must divide exactly.
        The degree of divisor may not exceed the degree of this polynomial.
        """
        cls = type(self)
        q, r = _divmod(self.coefficients, cls._intern(divisor), modulus)
        return cls(q, check=False), cls(r, check=False)

    def derivative(self):
        """Formal derivative of this polynomial."""
        cls = type(self)
        return cls(_derivative(self.coefficients), check=False)

    def gcd(self, other, modulus=0):
        """Greatest common divisor of this polynomial and polynomial other.

        Computed by Euclid's algorithm, optionally modulo a prime. Over the
        integers, pseudo-remainders are used, see poly_gcd(). The result is
        not made monic.
        """
        cls = type(self)
        d = _gcd(self.coefficients, cls._intern(other), modulus)
        logging.debug(f'gcd({self}, {other}) = {coef_to_string(d)}')
        return cls(d, check=False)

    def __neg__(self):
        cls = type(self)
        return cls(_neg(self.coefficients), check=False)

    def __pos__(self):
        return self

    def __add__(self, other):
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return cls(_add(self.coefficients, other), check=False)

    __radd__ = __add__

    def __sub__(self, other):
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return cls(_sub(self.coefficients, other), check=False)

    def __rsub__(self, other):
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return cls(_sub(other, self.coefficients), check=False)

    def __mul__(self, other):
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return cls(_mul(self.coefficients, other), check=False)

    __rmul__ = __mul__

    def __pow__(self, other):
        if not isinstance(other, int):
            return NotImplemented

        if other < 0:
            raise ValueError('negative exponent')

        cls = type(self)
        a, c = self.coefficients, [1]
        while other:
            if other & 1:
                c = _mul(c, a)
            a = _mul(a, a)
            other >>= 1
        return cls(c, check=False)

    def __floordiv__(self, other):
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return cls(_divmod(self.coefficients, other)[0], check=False)

    def __rfloordiv__(self, other):
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return cls(_divmod(other, self.coefficients)[0], check=False)

    def __mod__(self, other):
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return cls(_divmod(self.coefficients, other)[1], check=False)

    def __rmod__(self, other):
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return cls(_divmod(other, self.coefficients)[1], check=False)

    def __divmod__(self, other):
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        q, r = _divmod(self.coefficients, other)
        return cls(q, check=False), cls(r, check=False)

    def __rdivmod__(self, other):
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        q, r = _divmod(other, self.coefficients)
        return cls(q, check=False), cls(r, check=False)

    def __eq__(self, other):
        """Equality test."""
        if isinstance(other, Polynomial):
            other = other.value.coefficients
        elif isinstance(other, (int, str)):
            other = tuple(self._coerce(other))
        else:
            return NotImplemented

        return self.value.coefficients == other

    def __ne__(self, other):
        """Negated equality test."""
        eq = self.__eq__(other)
        if eq is NotImplemented:
            return NotImplemented

        return not eq

    def __hash__(self):
        """Make polynomials hashable (e.g., for LRU caching)."""
        return hash((type(self).__name__, self.value.coefficients))
