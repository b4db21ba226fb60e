"""
bigfraction - Exact fractions of arbitrarily large integers.

Usage example:

    import bigfraction

    half = bigfraction.Fraction(1, 2)
    third = bigfraction.Fraction(1, 3)
    assert half + third == bigfraction.Fraction(5, 6)
    assert half * 2 == 1

Usage example:

    from bigfraction import Fraction, ParseOptions, LocaleSymbols, try_parse

    success, price = try_parse('(€ 1.234,50)', ParseOptions.CURRENCY, LocaleSymbols.DE_DE)
    assert success and price == Fraction(-2469, 2)
    assert Fraction.NAN == Fraction.POSITIVE_INFINITY - Fraction.POSITIVE_INFINITY
"""

from .fraction import Fraction
from .fraction import State
from .fraction import reduce
from .fraction import from_decimal
from .fraction import from_decimal_bits
from .fraction import decimal_bits
from .parse import ParseOptions
from .parse import LocaleSymbols
from .parse import ParseError
from .parse import parse
from .parse import try_parse

__all__ = [
    'Fraction',
    'State',
    'reduce',
    'from_decimal',
    'from_decimal_bits',
    'decimal_bits',
    'ParseOptions',
    'LocaleSymbols',
    'ParseError',
    'parse',
    'try_parse',
]

from . import version
__version__ = version.__doc__
