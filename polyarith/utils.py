"""Math and formatting helpers of polyarith collected in one namespace.

For use by tools built on top of polyarith, e.g., to generate LFSR taps:

    from polyarith import utils
    utils.array_gcd([16, 15, 13, 4, 0])  # 1, hence setwise coprime
"""

from polyarith.formatter import remove_leading_zeros, reformat
from polyarith.gmpy import gcd, lcm, array_gcd, gcdext, invert, is_prime, powmod, mod
from polyarith.polynomial import is_all_zero, poly_gcd
from polyarith.gf2x import exp_max, symmetric_difference

__all__ = ['remove_leading_zeros', 'reformat',
           'gcd', 'lcm', 'array_gcd', 'gcdext', 'invert', 'is_all_zero', 'poly_gcd',
           'is_prime', 'powmod', 'mod',
           'symmetric_difference', 'exp_max']
