"""Report the properties of binary polynomials relevant for LFSR taps.

For each polynomial over GF(2) given on the command line, run:

    python -m polyarith 'x^16 + x^15 + x^13 + x^4 + 1' 'x^4 + x^2 + 1'

to print its degree, and whether it is irreducible, primitive, and whether its
exponents are setwise coprime. A maximal-length LFSR requires a primitive
polynomial, hence the output also flags the polynomials suitable as taps.
The options of polyarith itself (e.g., --log-level debug) are accepted as well.
"""

import sys
import argparse
import logging
import polyarith
from polyarith.formatter import FormatError
from polyarith.gf2x import FieldPolynomial


def report(poly):
    """Return one line of text describing polynomial poly over GF(2)."""
    f = FieldPolynomial(poly)
    irreducible = f.is_irreducible()
    primitive = irreducible and f.is_primitive()
    coprime = f.is_setwise_coprime()
    taps = 'yes' if primitive and coprime else 'no'
    return (f'{f}: degree={f.degree()} irreducible={irreducible} primitive={primitive} '
            f'setwise_coprime={coprime} lfsr_taps={taps}')


def main(args=None):
    parser = argparse.ArgumentParser(prog='python -m polyarith',
                                     parents=[polyarith.get_arg_parser()],
                                     description='Test binary polynomials for use as LFSR taps.')
    parser.add_argument('polynomials', nargs='+', metavar='poly',
                        help="polynomial over GF(2), e.g. 'x^3 + x + 1'")
    parser.add_argument('-V', '--version', action='version',
                        version=f'polyarith {polyarith.__version__}')
    options = parser.parse_args(args)

    for poly in options.polynomials:
        try:
            print(report(poly))
        except FormatError as exc:
            logging.error(exc)
            return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
