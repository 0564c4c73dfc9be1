"""polyarith is a Python package for polynomial arithmetic over the integers and GF(2).

Polynomials are kept in three equivalent views at once: a string in infix
notation, a dense coefficient vector (highest degree first), and a sparse
list of exponents. Generic polynomials with integer coefficients support
addition, subtraction, multiplication, long division (optionally modulo a
prime), derivatives and Euclidean GCDs.

Binary polynomials (over GF(2)) use carryless arithmetic instead: division
works on exponent sets via symmetric differences, multiplication and addition
on bit-packed integers. Rabin's irreducibility test, a primitivity test,
and a test for setwise coprime exponents are provided, which is what is
needed to check the feedback taps of maximal-length LFSRs.

Module polyarith.gmpy collects the number-theoretic helpers, backed by gmpy2.
"""

__version__ = '0.3.1'
__license__ = 'MIT License'

import os
import sys
import argparse
import logging

DEFAULT_MAX_DEGREE = 2**20


def get_arg_parser():
    """Return parser for command line arguments recognized by polyarith."""
    parser = argparse.ArgumentParser(add_help=False, allow_abbrev=False)

    group = parser.add_argument_group('polyarith configuration')
    group.add_argument('--log-level', type=str, metavar='ll',
                       help='logging level ll=debug/info/warning(default)/error')
    group.add_argument('--no-log', action='store_true',
                       help='disable logging messages')
    group.add_argument('--max-degree', type=int, metavar='d',
                       help='maximum degree d for dense polynomial views')

    parser.set_defaults(log_level=os.getenv('POLYARITH_LOGLEVEL', 'warning'))
    return parser


def max_degree():
    """Maximum degree for which string and coefficient views are derived."""
    return int(os.getenv('POLYARITH_MAXDEGREE', DEFAULT_MAX_DEGREE))


if os.getenv('READTHEDOCS') != 'True':
    options = get_arg_parser().parse_known_args()[0]

    # Set logging level as early as possible.
    if options.no_log:
        logging.basicConfig(level=logging.WARNING)
    else:
        ch = options.log_level[0].upper()
        ch = {'N': '0', 'D': '1', 'I': '2', 'W': '3', 'E': '4', 'C': '5'}.get(ch, ch)
        ch = ch if '0' <= ch <= '5' else '3'  # default to '3'
        level = int(ch)
        level = (logging.NOTSET, logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR,
                 logging.CRITICAL)[level]
        if sys.flags.dev_mode:
            level = logging.DEBUG
        logging.basicConfig(format='{asctime} {message}', style='{', level=level, stream=sys.stdout)
        logging.debug(f'Set logging level to {level}: {logging.getLevelName(level)}')
        del ch, level

    # NB: POLYARITH_MAXDEGREE also set for subprocesses
    if options.max_degree is not None:
        if options.max_degree < 0:
            logging.warning(f'Ignoring negative maximum degree {options.max_degree}')
        else:
            os.environ['POLYARITH_MAXDEGREE'] = str(options.max_degree)
    logging.debug(f'Maximum degree for dense views set to {max_degree()}')

    del options
