"""This module supports arithmetic with polynomials over GF(2).

Binary polynomials are handled in two sparse forms. As sets of exponents,
the polynomial x^4 + x + 1 corresponds to {4, 1, 0}, and as nonnegative
integers, with bit i set for term x^i, x^4 + x + 1 corresponds to 0b10011.
Addition and subtraction coincide, both amount to XOR of bit-packed integers.
Multiplication is carryless, shifting and XORing bit-packed integers.
Long division works on exponent sets directly, replacing the running remainder
by its symmetric difference with the shifted divisor, which is efficient for
polynomials of high degree with few terms, such as those for LFSRs.

Rabin's irreducibility test and a test for primitivity are provided,
as well as a test whether the exponents of a polynomial are setwise coprime.
Powers x^k modulo a polynomial are computed by square-and-multiply, where
squaring simply doubles all exponents: (a + b)^2 = a^2 + b^2 over GF(2).
"""

import logging
from polyarith.formatter import (Formats, Format, FormatError, Representation, to_coefficients,
                                 coef_to_string, exp_to_coef, string_to_coef)
from polyarith.gmpy import array_gcd, prime_factors


def exp_max(exps):
    """Largest exponent in exps (-1 if exps is empty)."""
    return max(exps, default=-1)


def symmetric_difference(a, b):
    """Exponents occurring in exactly one of a and b, highest first."""
    return sorted(set(a) ^ set(b), reverse=True)


def to_int(exps):
    """Bit-packed integer for set of exponents exps."""
    a = 0
    for e in exps:
        a |= 1 << e
    return a


def from_int(a):
    """Set of exponents for bit-packed integer a, highest first."""
    return [i for i in range(a.bit_length() - 1, -1, -1) if (a >> i) & 1]


def _mul(a, b):
    if a < b:
        a, b = b, a
    # a >= b
    c = 0
    while b:
        if b & 1:
            c ^= a
        a <<= 1
        b >>= 1
    return c


def _divmod(a, b):
    if not b:
        raise ZeroDivisionError('division by zero polynomial')

    n = max(b)
    q, r = set(), set(a)
    while r:
        d = max(r) - n
        if d < 0:
            break

        q.add(d)
        r.symmetric_difference_update([e + d for e in b])
    return q, r


def _mod(a, b):
    if not b:
        raise ZeroDivisionError('division by zero polynomial')

    n = max(b)
    r = set(a)
    while r:
        d = max(r) - n
        if d < 0:
            break

        r.symmetric_difference_update([e + d for e in b])
    return r


def _gcd(a, b):
    a, b = set(a), set(b)
    while b:
        a, b = b, _mod(a, b)
    return a


def _powmod_x(n, f):
    # x^n modulo f, for n >= 0
    c = _mod({0}, f)
    for i in range(n.bit_length() - 1, -1, -1):
        c = _mod({2*e for e in c}, f)
        if (n >> i) & 1:
            c = _mod({e + 1 for e in c}, f)
    return c


def _pow2_x(k, f):
    # x^(2^k) modulo f, for k >= 0, by k squarings
    c = _mod({1}, f)
    for _ in range(k):
        c = _mod({2*e for e in c}, f)
    return c


def _is_irreducible(f):
    n = exp_max(f)
    if n < 1:
        return False

    # x^(2^n) = x modulo f
    x = _mod({1}, f)
    if _pow2_x(n, f) != x:
        return False

    # gcd(f, x^(2^(n/q)) - x) = 1 for all prime divisors q of n
    for q in prime_factors(n):
        if _gcd(f, _pow2_x(n // q, f) ^ x) != {0}:
            return False

    return True


def _is_primitive(f):
    n = exp_max(f)
    if n < 1:
        return False

    # order of x modulo f is 2^n - 1 exactly
    m = 2**n - 1
    if _powmod_x(m, f) != {0}:
        return False

    for q in prime_factors(m):
        if _powmod_x(m // q, f) == {0}:
            return False

    return True


class FieldPolynomial(Representation):
    """Polynomials over GF(2).

    A polynomial is given by a string, by a list of coefficients or exponents
    with fmt set accordingly, by a bit-packed int, or by another polynomial.
    Coefficients must be 0 or 1, except in strings where they are reduced
    modulo 2. Repeated exponents cancel in pairs.

    If fast is set, value must be a set of exponents (or a FieldPolynomial),
    and the string and coefficients are only derived once needed.
    """

    __slots__ = ()

    def __init__(self, value=0, fmt=None, fast=False):
        """Initialize polynomial to given value (zero polynomial, by default)."""
        if fast:
            if isinstance(value, FieldPolynomial):
                value = value.value.exponents
            self.value = Formats(None, None, tuple(sorted(value, reverse=True)))
        else:
            exps = self._intern(value, fmt)
            coefs = exp_to_coef(exps)
            self.value = Formats(coef_to_string(coefs), tuple(coefs), exps)

    @classmethod
    def _intern(cls, a, fmt=None):
        # convert a to tuple of exponents, highest first
        if isinstance(a, FieldPolynomial):
            return a.value.exponents

        if isinstance(a, int):
            if a < 0:
                raise FormatError('negative bit-packed polynomial', a)

            return tuple(from_int(a))

        if isinstance(a, str) and fmt in (None, Format.STRING, Format.STRING.value):
            coefs = string_to_coef(a)
            return cls._from_coefficients([c % 2 for c in coefs])

        if isinstance(a, (list, tuple)) and fmt in (Format.EXPONENTS, Format.EXPONENTS.value):
            if not all(isinstance(e, int) and e >= 0 for e in a):
                raise FormatError('exponents must be nonnegative integers', a)

            s = set()
            for e in a:
                s ^= {e}  # repeated exponents cancel
            return tuple(sorted(s, reverse=True))

        coefs = to_coefficients(a, fmt)
        if not all(c in (0, 1) for c in coefs):
            raise FormatError('coefficients must be 0 or 1', a)

        return cls._from_coefficients(coefs)

    @staticmethod
    def _from_coefficients(coefs):
        n = len(coefs) - 1
        return tuple(n - i for i, c in enumerate(coefs) if c)

    @classmethod
    def _coerce(cls, a):
        # convert operand a to tuple of exponents, NotImplemented if type of a is unsupported
        if isinstance(a, (Representation, int, str)):
            return cls._intern(a)

        return NotImplemented

    def __int__(self):
        return to_int(self.value.exponents)

    def degree(self):
        """Degree of polynomial (-1 for zero polynomial)."""
        return exp_max(self.value.exponents)

    def __call__(self, x):
        """Evaluate polynomial at given x."""
        exps = self.value.exponents
        if x % 2:
            return len(exps) % 2

        return int(bool(exps) and exps[-1] == 0)

    def divide_gf(self, divisor):
        """Divide this polynomial by divisor with remainder, working on exponent sets.

        Return quotient and remainder. If the degree of divisor exceeds the degree
        of this polynomial, the quotient is zero and the remainder is this polynomial.
        """
        cls = type(self)
        q, r = _divmod(self.value.exponents, cls._intern(divisor))
        return cls(q, fast=True), cls(r, fast=True)

    def multiply_gf(self, multiplier):
        """Multiply this polynomial by multiplier, using carryless multiplication."""
        cls = type(self)
        c = _mul(int(self), to_int(cls._intern(multiplier)))
        return cls(from_int(c), fast=True)

    def add_gf(self, other):
        """Add polynomial other to this polynomial, using XOR."""
        cls = type(self)
        c = int(self) ^ to_int(cls._intern(other))
        return cls(from_int(c), fast=True)

    sub_gf = add_gf

    def poly_gcd(self, other, modulus=2):
        """Greatest common divisor of this polynomial and polynomial other."""
        if modulus != 2:
            raise ValueError('only modulus 2 supported for polynomials over GF(2)')

        cls = type(self)
        return cls(_gcd(cls._intern(other), self.value.exponents), fast=True)

    def is_irreducible(self):
        """Test polynomial for irreducibility, using Rabin's test."""
        b = _is_irreducible(self.value.exponents)
        logging.debug(f'Polynomial {self.exponents} irreducible: {b}')
        return b

    def is_primitive(self):
        """Test polynomial for primitivity.

        Polynomial f of degree n is primitive if x has order 2^n - 1 modulo f,
        hence x generates all nonzero elements of GF(2)[x]/(f), a field of order 2^n.
        """
        b = _is_primitive(self.value.exponents)
        logging.debug(f'Polynomial {self.exponents} primitive: {b}')
        return b

    def is_setwise_coprime(self):
        """Test if the exponents of this polynomial have greatest common divisor 1."""
        return array_gcd(self.value.exponents) == 1

    @classmethod
    def _operand(cls, a):
        # operand a as polynomial, None if type of a is unsupported
        a = cls._coerce(a)
        if a is NotImplemented:
            return None

        return cls(a, fast=True)

    def __add__(self, other):
        other = self._operand(other)
        if other is None:
            return NotImplemented

        return self.add_gf(other)

    __radd__ = __add__
    __sub__ = __add__
    __rsub__ = __add__

    def __mul__(self, other):
        other = self._operand(other)
        if other is None:
            return NotImplemented

        return self.multiply_gf(other)

    __rmul__ = __mul__

    def __pow__(self, other):
        if not isinstance(other, int):
            return NotImplemented

        if other < 0:
            raise ValueError('negative exponent')

        a, c = int(self), 1
        while other:
            if other & 1:
                c = _mul(c, a)
            a = _mul(a, a)
            other >>= 1
        return type(self)(from_int(c), fast=True)

    def __floordiv__(self, other):
        other = self._operand(other)
        if other is None:
            return NotImplemented

        return self.divide_gf(other)[0]

    def __rfloordiv__(self, other):
        other = self._operand(other)
        if other is None:
            return NotImplemented

        return other.divide_gf(self)[0]

    def __mod__(self, other):
        other = self._operand(other)
        if other is None:
            return NotImplemented

        return self.divide_gf(other)[1]

    def __rmod__(self, other):
        other = self._operand(other)
        if other is None:
            return NotImplemented

        return other.divide_gf(self)[1]

    def __divmod__(self, other):
        other = self._operand(other)
        if other is None:
            return NotImplemented

        return self.divide_gf(other)

    def __rdivmod__(self, other):
        other = self._operand(other)
        if other is None:
            return NotImplemented

        return other.divide_gf(self)

    def __eq__(self, other):
        """Equality test."""
        if isinstance(other, FieldPolynomial):
            other = other.value.exponents
        elif isinstance(other, (int, str)):
            other = self._intern(other)
        else:
            return NotImplemented

        return self.value.exponents == other

    def __ne__(self, other):
        """Negated equality test."""
        eq = self.__eq__(other)
        if eq is NotImplemented:
            return NotImplemented

        return not eq

    def __hash__(self):
        """Make polynomials hashable (e.g., for LRU caching)."""
        return hash((type(self).__name__, self.value.exponents))
