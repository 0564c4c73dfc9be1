"""This module converts polynomials between their three representations.

A polynomial is kept as a string, as a list of coefficients, and as a list
of exponents, all at the same time. For example, 2x^3 - x + 1 corresponds to:

    string        '2x^3 - x + 1'
    coefficients  [2, 0, -1, 1]      (highest degree first)
    exponents     [3, 3, -1, 0]      (coefficient 2 gives exponent 3 twice)

The coefficient list has no leading zeros, using [0] for the zero polynomial,
which has no exponents and is written as '0'. Over GF(2) all coefficients are
0 or 1, hence the exponents form a set, e.g., x^4 + x + 1 gives [4, 1, 0].

Bare lists of integers are ambiguous ([2, 0, 1] may be 2x^2 + 1 or x^2 + 2),
so their format must always be given explicitly.
"""

import enum
import re
import collections
from polyarith import max_degree

X = 'x'  # symbol for indeterminate in polynomials

Formats = collections.namedtuple('Formats', ('string', 'coefficients', 'exponents'))


class Format(enum.Enum):
    """Representations of a polynomial."""

    STRING = 'string'
    COEFFICIENTS = 'coefficients'
    EXPONENTS = 'exponents'


class FormatError(ValueError):
    """Raised for input not in any of the polynomial formats.

    The offending input is available as attribute 'value'.
    """

    def __init__(self, message, value):
        super().__init__(f'{message}: {value!r}')
        self.value = value


def _check_degree(d):
    m = max_degree()
    if d > m:
        raise OverflowError(f'degree {d} exceeds maximum degree {m}')


def coef_to_string(coefs, x=X):
    """Convert list of coefficients to a string, e.g., [1, 0, -1] gives 'x^2 - 1'.

    Terms are joined by ' + ' and ' - ', and a negative leading term gets its
    sign attached without a space, e.g., [-1, 0, 1] gives '-x^2 + 1', which
    is the canonical string form accepted by string_to_coef().
    """
    s = ''
    n = len(coefs) - 1
    for i, c in enumerate(coefs):
        if not c:
            continue

        e = n - i
        m = abs(c)
        m = '' if m == 1 and e else m  # x^0 = 1
        if e == 0:
            term = f'{m}'
        elif e == 1:
            term = f'{m}{x}'  # x^1 = x
        else:
            term = f'{m}{x}^{e}'
        s += f' - {term}' if c < 0 else f' + {term}'
    if not s:
        return '0'

    if s.startswith(' - '):
        return '-' + s[3:]

    return s[3:]


def string_to_coef(s, x=X):
    """Convert string with sum of powers of x to list of coefficients.

    Whitespace is ignored and repeated powers of x are accumulated.
    """
    t = ''.join(s.split())  # remove all whitespace
    if t == '':
        return [0]

    pattern = re.compile(rf'([+-]?)(\d*)(\*?{re.escape(x)}(?:\^(\d+))?)?')
    d = {}
    for term in re.split(r'(?=[+-])', t):
        if not term:
            continue

        match = pattern.fullmatch(term)
        if match is None or not (match[2] or match[3]):
            raise FormatError('ill formatted polynomial', s)

        sign, c, var, e = match.groups()
        if var and var[0] == '*' and not c:
            raise FormatError('ill formatted polynomial', s)

        c = int(c) if c else 1
        if sign == '-':
            c = -c
        if var is None:
            i = 0
        else:
            i = int(e) if e else 1
        d[i] = d.get(i, 0) + c

    if not d:
        raise FormatError('ill formatted polynomial', s)

    m = max(d.keys())
    _check_degree(m)
    a = [0] * (m+1)
    for i, c in d.items():
        a[m - i] = c
    return remove_leading_zeros(a)


def exp_to_coef(exps):
    """Convert list of exponents to list of coefficients.

    Each exponent e adds sign(e) to the coefficient of x^|e|, where
    exponent 0 always adds 1. E.g., [5, 1, 1] gives [1, 0, 0, 0, 2, 0].
    """
    if not exps:
        return [0]

    n = max(abs(e) for e in exps)
    _check_degree(n)
    a = [0] * (n+1)
    for e in exps:
        a[n - abs(e)] += 1 if e >= 0 else -1
    return remove_leading_zeros(a)


def coef_to_exp(coefs):
    """Convert list of coefficients to list of exponents.

    A coefficient c contributes its exponent |c| times, negated if c < 0,
    e.g., [1, 0, 0, 0, -2, 0] gives [5, -1, -1]. The length of the result
    is limited like the degree, hence huge coefficients raise OverflowError.
    """
    m = max_degree()
    k = sum(abs(c) for c in coefs)
    if k > m:
        raise OverflowError(f'exponent list of {k} terms exceeds maximum {m}')

    n = len(coefs) - 1
    exps = []
    for i, c in enumerate(coefs):
        e = n - i
        exps.extend([e if c > 0 else -e] * abs(c))
    return exps


def remove_leading_zeros(coefs):
    """Return copy of coefs without leading zeros, [0] if all coefs are zero."""
    for i, c in enumerate(coefs):
        if c:
            return list(coefs[i:])

    return [0]


def to_coefficients(poly, fmt=None):
    """Return list of coefficients for poly, given in any format accepted by reformat()."""
    if isinstance(poly, Representation):
        return poly.coefficients

    if fmt is not None:
        try:
            fmt = Format(fmt)
        except ValueError:
            raise FormatError('unknown polynomial format', fmt) from None

    if isinstance(poly, str):
        if fmt not in (None, Format.STRING):
            raise FormatError(f'string given for format {fmt.value}', poly)

        return string_to_coef(poly)

    if isinstance(poly, (list, tuple)):
        if not all(isinstance(a, int) for a in poly):
            raise FormatError('polynomial terms must be integers', poly)

        if fmt is Format.COEFFICIENTS:
            return remove_leading_zeros(poly)

        if fmt is Format.EXPONENTS:
            return exp_to_coef(poly)

        raise FormatError('format of numeric sequence must be given', poly)

    raise FormatError('invalid polynomial format', poly)


def reformat(poly, fmt=None):
    """Return all three representations of poly as a Formats triple.

    Argument poly is a polynomial (returned as is), a string, or a list/tuple
    of integers, in which case fmt must be set to either Format.COEFFICIENTS
    or Format.EXPONENTS (or their values 'coefficients' and 'exponents').
    """
    if isinstance(poly, Representation):
        return poly.formats()

    coefs = to_coefficients(poly, fmt)
    return Formats(coef_to_string(coefs), coefs, coef_to_exp(coefs))


class Representation:
    """Common base class for polynomials kept in all three representations.

    Invariant: attribute 'value' is a Formats triple with tuples for the
    coefficients and exponents. Views not set yet are None and derived once
    needed: polynomials over GF(2) may be created from exponents only, and
    polynomials over the integers from coefficients only.
    """

    __slots__ = 'value'

    def _derive(self):
        # fill in string and coefficients for polynomials given by exponents only
        exps = self.value.exponents
        coefs = exp_to_coef(exps)
        self.value = Formats(coef_to_string(coefs), tuple(coefs), exps)

    @property
    def string(self):
        """Polynomial as a string in x, highest degree first."""
        if self.value.string is None:
            self._derive()
        return self.value.string

    @property
    def coefficients(self):
        """List of coefficients, highest degree first."""
        if self.value.coefficients is None:
            self._derive()
        return list(self.value.coefficients)

    @property
    def exponents(self):
        """List of exponents, highest first."""
        if self.value.exponents is None:
            exps = tuple(coef_to_exp(self.value.coefficients))
            self.value = self.value._replace(exponents=exps)
        return list(self.value.exponents)

    def formats(self):
        """Return all three representations as a Formats triple."""
        return Formats(self.string, self.coefficients, self.exponents)

    def is_all_zero(self):
        """Test if all coefficients are zero (zero polynomial)."""
        if self.value.coefficients is None:
            return not self.value.exponents

        return not any(self.value.coefficients)

    def __repr__(self):
        return self.string

    def __bool__(self):
        """Truth value testing.

        Return False if this polynomial is zero, True otherwise.
        """
        return not self.is_all_zero()
