"""
Text to Fraction.

    from bigfraction.parse import try_parse, ParseOptions, LocaleSymbols

    success, fraction = try_parse('3/4')                  # True, 3/4
    success, fraction = try_parse('1.25')                 # True, 5/4
    success, fraction = try_parse('1.23e-2')              # True, 123/10000
    success, fraction = try_parse('($1,234.50)', ParseOptions.CURRENCY, LocaleSymbols.EN_US)
                                                          # True, -2469/2
    success, fraction = try_parse('1.5f')                 # False, Fraction.INVALID

What text is accepted depends on two things the caller hands in every time:
    ParseOptions - which conventions are allowed (whitespace, signs, parentheses, currency, ...)
    LocaleSymbols - the strings for the decimal separator, group separator, currency, signs, ...
Nothing here consults the process locale.
"""

import collections
import logging

from bigfraction.fraction import Fraction, State, int_from_decimal_digits


log = logging.getLogger(__name__)


class ParseOptions(object):
    """
    Bit flags for the textual conventions a parse accepts.  Combine with |.

    Option values are plain ints, so they never change.
    Narrowing an option set makes a new one:  options & ~ParseOptions.ALLOW_LEADING_SIGN

    Composite Styles
    ----------------
        NONE        digits only
        INTEGER     white space around, a leading sign
        HEX_NUMBER  white space around, hexadecimal digits
        NUMBER      INTEGER, a trailing sign, a decimal point, group separators
        FLOAT       INTEGER, a decimal point, an exponent
        CURRENCY    NUMBER, parentheses for negative, a currency symbol
        ANY         everything but hexadecimal

    ParseOptions class properties
    -----------------------------
        ParseOptions.name_from_flag - {ParseOptions.ALLOW_EXPONENT: 'ALLOW_EXPONENT', ...}
        ParseOptions.ALL_FLAGS - every single-bit flag or'd together
    """
    ALLOW_LEADING_WHITE   = 0x001
    ALLOW_TRAILING_WHITE  = 0x002
    ALLOW_LEADING_SIGN    = 0x004
    ALLOW_TRAILING_SIGN   = 0x008
    ALLOW_PARENTHESES     = 0x010
    ALLOW_DECIMAL_POINT   = 0x020
    ALLOW_THOUSANDS       = 0x040
    ALLOW_EXPONENT        = 0x080
    ALLOW_CURRENCY_SYMBOL = 0x100
    ALLOW_HEX_SPECIFIER   = 0x200

    NONE       = 0
    INTEGER    = ALLOW_LEADING_WHITE | ALLOW_TRAILING_WHITE | ALLOW_LEADING_SIGN
    HEX_NUMBER = ALLOW_LEADING_WHITE | ALLOW_TRAILING_WHITE | ALLOW_HEX_SPECIFIER
    NUMBER     = INTEGER | ALLOW_TRAILING_SIGN | ALLOW_DECIMAL_POINT | ALLOW_THOUSANDS
    FLOAT      = INTEGER | ALLOW_DECIMAL_POINT | ALLOW_EXPONENT
    CURRENCY   = NUMBER | ALLOW_PARENTHESES | ALLOW_CURRENCY_SYMBOL
    ANY        = CURRENCY | ALLOW_EXPONENT

    name_from_flag = None   # {0x001: 'ALLOW_LEADING_WHITE', ... }
    ALL_FLAGS = None

    class InvalidOptionsError(ValueError):
        """e.g. ParseOptions.validate(0x400) or ParseOptions.validate(HEX_NUMBER | ALLOW_DECIMAL_POINT)"""

    @classmethod
    def internal_setup(cls):
        """Initialize ParseOptions properties after the class is otherwise defined."""
        cls.name_from_flag = {getattr(cls, attr): attr for attr in dir(cls) if attr.startswith('ALLOW_')}
        cls.ALL_FLAGS = 0
        for flag in cls.name_from_flag:
            cls.ALL_FLAGS |= flag

    @classmethod
    def names(cls, options):
        """
        Describe an option set.

            assert 'ALLOW_LEADING_WHITE|ALLOW_TRAILING_WHITE' == ParseOptions.names(0x003)
        """
        if options == cls.NONE:
            return 'NONE'
        return '|'.join(cls.name_from_flag[flag] for flag in sorted(cls.name_from_flag) if options & flag)

    @classmethod
    def validate(cls, options):
        """
        Raise InvalidOptionsError for an option set no parse could honor.

        Hexadecimal mixes with white space only.
        """
        if not isinstance(options, int) or options & ~cls.ALL_FLAGS:
            raise cls.InvalidOptionsError("Unknown parse options {}".format(repr(options)))
        if options & cls.ALLOW_HEX_SPECIFIER and options & ~cls.HEX_NUMBER:
            raise cls.InvalidOptionsError("Hexadecimal cannot be combined with {}".format(
                cls.names(options & ~cls.HEX_NUMBER)
            ))


ParseOptions.internal_setup()
assert ParseOptions.ALL_FLAGS == 0x3FF
assert ParseOptions.ANY == 0x1FF


DEFAULT_OPTIONS = ParseOptions.NUMBER | ParseOptions.ALLOW_EXPONENT


class LocaleSymbols(collections.namedtuple('LocaleSymbols', (
    'decimal_separator',
    'group_separator',
    'currency_symbol',
    'positive_sign',
    'negative_sign',
    'nan_symbol',
    'positive_infinity_symbol',
    'negative_infinity_symbol',
))):
    """
    The literal strings a parse matches against.

    Immutable.  Derive a variant with replace():
        swiss = LocaleSymbols.DE_DE.replace(currency_symbol='CHF', group_separator="'")

    An empty currency_symbol or decimal_separator turns that convention off.
    An empty sign turns off that sign.

    Presets:  LocaleSymbols.INVARIANT, EN_US, DE_DE, FR_FR
    """
    __slots__ = ()

    def replace(self, **kwargs):
        return self._replace(**kwargs)

    INVARIANT = None
    EN_US = None
    DE_DE = None
    FR_FR = None

    @classmethod
    def internal_setup(cls):
        """Initialize the preset symbol tables after the class is defined."""
        cls.INVARIANT = cls(
            decimal_separator='.',
            group_separator=',',
            currency_symbol='¤',
            positive_sign='+',
            negative_sign='-',
            nan_symbol='NaN',
            positive_infinity_symbol='Infinity',
            negative_infinity_symbol='-Infinity',
        )
        cls.EN_US = cls.INVARIANT.replace(
            currency_symbol='$',
            positive_infinity_symbol='∞',
            negative_infinity_symbol='-∞',
        )
        cls.DE_DE = cls.EN_US.replace(
            decimal_separator=',',
            group_separator='.',
            currency_symbol='€',
        )
        cls.FR_FR = cls.DE_DE.replace(
            group_separator='\u202f',   # narrow no-break space
        )


LocaleSymbols.internal_setup()
assert LocaleSymbols.DE_DE.decimal_separator == ','


class ParseError(ValueError):
    """parse() could not make a Fraction out of the text."""


def parse(text, options=DEFAULT_OPTIONS, locale=None, normalize=True):
    """
    Like try_parse() but return the Fraction, or raise ParseError.

        assert Fraction(5, 4) == parse('1.25')
    """
    success, fraction = try_parse(text, options, locale, normalize)
    if not success:
        raise ParseError("Cannot parse {} as a fraction".format(repr(text)))
    return fraction


def try_parse(text, options=DEFAULT_OPTIONS, locale=None, normalize=True):
    """
    Convert text to a Fraction.  Never raises for bad text.

    :param text:  e.g. '3/4', '-1.25', ' $ 12,345.1234321e-4- '
    :param options:  ParseOptions flags, default NUMBER plus exponent
    :param locale:  LocaleSymbols, default LocaleSymbols.INVARIANT
    :param normalize:  reduce the result to lowest terms
                       (decimals and slash forms, e.g. '0.50' or '2/4', may otherwise stay NOT_NORMALIZED)
    :return:  (True, the Fraction) or (False, Fraction.INVALID)

    Raises ParseOptions.InvalidOptionsError for option sets that make no sense,
    since that's a mistake in the calling code, not in the text.

    The slash form is numerator/denominator, each an integer under the same options
    (less the decimal point), and each must come out whole.  A zero denominator is a failed parse.
    """
    if locale is None:
        locale = LocaleSymbols.INVARIANT
    ParseOptions.validate(options)
    try:
        return True, _parse_text(text, options, locale, normalize)
    except CannotParse as e:
        log.debug("Cannot parse %r: %s", text, e)
        return False, Fraction.INVALID


class CannotParse(Exception):
    """Internal signal from deep in the parser to try_parse().  The message is the reason."""


def _parse_text(text, options, locale, normalize):
    if not isinstance(text, str):
        raise CannotParse("not a string")
    if len(text) == 0:
        raise CannotParse("empty")

    # NOTE:  The special symbols can't be combined with anything else.
    #        They go before the single-character shortcut so a one-character symbol like '∞' still works.
    if text == locale.nan_symbol:
        return Fraction.NAN
    if text == locale.positive_infinity_symbol:
        return Fraction.POSITIVE_INFINITY
    if text == locale.negative_infinity_symbol:
        return Fraction.NEGATIVE_INFINITY

    if len(text) == 1:
        return _parse_integer(text, options, locale, is_negative=False)

    parts = text.split('/')
    if len(parts) == 2:
        return _parse_slash_form(parts[0], parts[1], options, locale, normalize)

    return _parse_number(text, options, locale, normalize)


def _parse_slash_form(numerator_text, denominator_text, options, locale, normalize):
    """
    numerator/denominator, each a whole number under the options less the decimal point.

    An exponent is fine as long as the part comes out whole, e.g. '1e2/5' is 100/5 but '1e-2/5' fails.
    """
    whole_options = options & ~ParseOptions.ALLOW_DECIMAL_POINT
    numerator = _whole_number(_parse_number(numerator_text, whole_options, locale, normalize=True))
    denominator = _whole_number(_parse_number(denominator_text, whole_options, locale, normalize=True))
    if denominator == 0:
        raise CannotParse("zero denominator")
    return Fraction(numerator, denominator, normalize=normalize)


def _whole_number(fraction):
    reduced = fraction.reduce()
    if reduced.denominator != 1:
        raise CannotParse("not a whole number on one side of the slash")
    return reduced.numerator


# Sign and Symbol Scans
# ---------------------
class Cursor(collections.namedtuple('Cursor', 'options start end is_negative currency_detected')):
    """
    Where the scans have got to.

    options - what's still allowed, narrowed as signs and symbols are used up
    start, end - the part of the text not yet consumed, text[start:end]
    is_negative - a minus sign or an opening parenthesis was seen
    currency_detected - the one currency symbol allowed has been used up

    Every step makes a new Cursor (cursor._replace(...)), none changes one.
    """
    __slots__ = ()

    def without(self, flags, **changes):
        """A new Cursor with some options removed, and maybe other fields changed."""
        return self._replace(options=self.options & ~flags, **changes)


def _parse_number(text, options, locale, normalize):
    """
    Everything but the slash form and the special symbols.

    E.g. ' $ 12345.1234321e-4- ' with ParseOptions.ANY is -1.23451234321

    1. Scan forward over the leading white space, parenthesis, sign, currency symbol.
    2. Scan backward over the trailing white space, parenthesis, sign, currency symbol.
    3. What's between must be a decimal, exponential or integer number.
    """
    if options & ParseOptions.ALLOW_CURRENCY_SYMBOL and not locale.currency_symbol:
        options &= ~ParseOptions.ALLOW_CURRENCY_SYMBOL
    if options & ParseOptions.ALLOW_DECIMAL_POINT and not locale.decimal_separator:
        options &= ~ParseOptions.ALLOW_DECIMAL_POINT
    currency_allowed = bool(options & ParseOptions.ALLOW_CURRENCY_SYMBOL)

    cursor = Cursor(options=options, start=0, end=len(text), is_negative=False, currency_detected=False)

    cursor, diverted = _scan_leading(text, cursor, locale, currency_allowed)
    if diverted:
        return _parse_hex_remainder(text, cursor, locale)
    if cursor.start >= cursor.end:
        raise CannotParse("nothing after the leading symbols")

    if cursor.is_negative:
        cursor = cursor.without(ParseOptions.ALLOW_LEADING_WHITE | ParseOptions.ALLOW_LEADING_SIGN)
    else:
        cursor = cursor.without(
            ParseOptions.ALLOW_LEADING_WHITE | ParseOptions.ALLOW_LEADING_SIGN | ParseOptions.ALLOW_PARENTHESES
        )

    cursor, diverted = _scan_trailing(text, cursor, locale, currency_allowed)
    if diverted:
        return _parse_hex_remainder(text, cursor, locale)
    if cursor.start >= cursor.end:
        raise CannotParse("nothing between the leading and trailing symbols")
    if cursor.is_negative and cursor.options & ParseOptions.ALLOW_PARENTHESES:
        raise CannotParse("no closing parenthesis")

    cursor = cursor.without(
        ParseOptions.ALLOW_TRAILING_WHITE | ParseOptions.ALLOW_TRAILING_SIGN | ParseOptions.ALLOW_CURRENCY_SYMBOL
    )
    body = text[cursor.start:cursor.end]
    options = cursor.options

    if len(body) == 1:
        return _parse_integer(body, options, locale, cursor.is_negative)
    if options & ParseOptions.ALLOW_EXPONENT:
        return _parse_with_exponent(body, options, locale, cursor.is_negative, normalize)
    if options & ParseOptions.ALLOW_DECIMAL_POINT:
        return _parse_decimal(body, options, locale, cursor.is_negative, normalize)
    return _parse_integer(body, options, locale, cursor.is_negative)


def _scan_leading(text, cursor, locale, currency_allowed):
    """
    Consume leading white space, an opening parenthesis, a sign, a currency symbol.

    Stops at a digit or a decimal separator.
    Return (cursor, diverted).  Diverted means an unexpected character turned up
    but hexadecimal is allowed, so the rest goes to the integer parser as is.

    Once a sign or parenthesis is seen, no other sign or parenthesis may follow.
    A currency symbol right after either one keeps the scan going, to allow white space after it, e.g. '-$ 5'.
    Otherwise the number must come right away, e.g. '- 5' is rejected.
    """
    while cursor.start < cursor.end:
        character = text[cursor.start]
        if is_digit(character):
            break

        if character.isspace():
            if not cursor.options & ParseOptions.ALLOW_LEADING_WHITE:
                raise CannotParse("leading white space")
            cursor = cursor._replace(start=cursor.start + 1)
            continue

        if character == '(':
            if not cursor.options & ParseOptions.ALLOW_PARENTHESES:
                raise CannotParse("parentheses")
            if cursor.start == cursor.end - 1:
                raise CannotParse("nothing after the opening parenthesis")
            cursor = cursor._replace(start=cursor.start + 1, is_negative=True)
            cursor, keep_scanning = _after_leading_mark(
                text, cursor, locale, currency_allowed,
                ParseOptions.ALLOW_LEADING_SIGN | ParseOptions.ALLOW_TRAILING_SIGN | ParseOptions.ALLOW_HEX_SPECIFIER,
            )
            if keep_scanning:
                continue
            break

        if cursor.options & ParseOptions.ALLOW_LEADING_SIGN:
            sign_length, is_negative = _sign_at_start(text, cursor, locale)
            if sign_length > 0:
                cursor = cursor._replace(start=cursor.start + sign_length, is_negative=is_negative)
                cursor, keep_scanning = _after_leading_mark(
                    text, cursor, locale, currency_allowed,
                    ParseOptions.ALLOW_LEADING_SIGN | ParseOptions.ALLOW_TRAILING_SIGN |
                    ParseOptions.ALLOW_PARENTHESES | ParseOptions.ALLOW_HEX_SPECIFIER,
                )
                if keep_scanning:
                    continue
                break

        if currency_allowed and not cursor.currency_detected and starts_with(text, locale.currency_symbol, cursor):
            cursor = cursor.without(
                ParseOptions.ALLOW_CURRENCY_SYMBOL,
                start=cursor.start + len(locale.currency_symbol),
                currency_detected=True,
            )
            continue

        if cursor.options & ParseOptions.ALLOW_DECIMAL_POINT and starts_with(text, locale.decimal_separator, cursor):
            break   # e.g. '.5' with no leading zero

        if cursor.options & ParseOptions.ALLOW_HEX_SPECIFIER:
            return cursor, True
        raise CannotParse("unexpected leading character {}".format(repr(character)))
    return cursor, False


def _after_leading_mark(text, cursor, locale, currency_allowed, excluded):
    """
    Narrow the options after a leading parenthesis or sign.  Return (cursor, keep_scanning).

    excluded - what the mark itself rules out from here on
    """
    if cursor.currency_detected:
        return cursor.without(excluded), True
    if currency_allowed and starts_with(text, locale.currency_symbol, cursor):
        return cursor.without(
            excluded | ParseOptions.ALLOW_CURRENCY_SYMBOL,
            start=cursor.start + len(locale.currency_symbol),
            currency_detected=True,
        ), True
    return cursor.without(excluded | ParseOptions.ALLOW_LEADING_WHITE), False


def _sign_at_start(text, cursor, locale):
    """(length, is_negative) of a sign at the cursor start, or (0, False)."""
    if locale.negative_sign and starts_with(text, locale.negative_sign, cursor):
        return len(locale.negative_sign), True
    if locale.positive_sign and starts_with(text, locale.positive_sign, cursor):
        return len(locale.positive_sign), False
    return 0, False


def _scan_trailing(text, cursor, locale, currency_allowed):
    """
    Consume trailing white space, a closing parenthesis, a sign, a currency symbol.  Backwards from the end.

    Stops at a digit or a decimal separator.
    Return (cursor, diverted), same as _scan_leading().
    """
    while cursor.start < cursor.end:
        character = text[cursor.end - 1]
        if is_digit(character):
            break

        if character.isspace():
            if not cursor.options & ParseOptions.ALLOW_TRAILING_WHITE:
                raise CannotParse("trailing white space")
            cursor = cursor._replace(end=cursor.end - 1)
            continue

        if character == ')':
            if not cursor.options & ParseOptions.ALLOW_PARENTHESES:
                raise CannotParse("closing parenthesis without an opening one")
            cursor = cursor.without(
                ParseOptions.ALLOW_PARENTHESES | ParseOptions.ALLOW_CURRENCY_SYMBOL,
                end=cursor.end - 1,
            )
            continue

        if cursor.options & ParseOptions.ALLOW_TRAILING_SIGN:
            sign_length, is_negative = _sign_at_end(text, cursor, locale)
            if sign_length > 0:
                cursor = cursor.without(
                    ParseOptions.ALLOW_TRAILING_SIGN | ParseOptions.ALLOW_HEX_SPECIFIER,
                    end=cursor.end - sign_length,
                    is_negative=is_negative,
                )
                continue

        if currency_allowed and not cursor.currency_detected and ends_with(text, locale.currency_symbol, cursor):
            cursor = cursor.without(
                ParseOptions.ALLOW_CURRENCY_SYMBOL,
                end=cursor.end - len(locale.currency_symbol),
                currency_detected=True,
            )
            continue

        if cursor.options & ParseOptions.ALLOW_DECIMAL_POINT and ends_with(text, locale.decimal_separator, cursor):
            break   # e.g. '12.' with nothing after the separator

        if cursor.options & ParseOptions.ALLOW_HEX_SPECIFIER:
            return cursor, True
        raise CannotParse("unexpected trailing character {}".format(repr(character)))
    return cursor, False


def _sign_at_end(text, cursor, locale):
    """(length, is_negative) of a sign just before the cursor end, or (0, False)."""
    if locale.negative_sign and ends_with(text, locale.negative_sign, cursor):
        return len(locale.negative_sign), True
    if locale.positive_sign and ends_with(text, locale.positive_sign, cursor):
        return len(locale.positive_sign), False
    return 0, False


def _parse_hex_remainder(text, cursor, locale):
    return _parse_integer(
        text[cursor.start:cursor.end],
        cursor.options & ~ParseOptions.ALLOW_TRAILING_SIGN,
        locale,
        cursor.is_negative,
    )


def starts_with(text, symbol, cursor):
    """Does the unconsumed text begin with this (nonempty) symbol?"""
    return len(symbol) > 0 and text.startswith(symbol, cursor.start, cursor.end)


def ends_with(text, symbol, cursor):
    """Does the unconsumed text end with this (nonempty) symbol?"""
    return len(symbol) > 0 and text.endswith(symbol, cursor.start, cursor.end)


# Number Bodies
# -------------
EXPONENT_MARKERS = ('e', 'E')
EXPONENT_MIN = -2**31
EXPONENT_MAX = 2**31 - 1


def _parse_with_exponent(body, options, locale, is_negative, normalize):
    """
    Scientific notation, e.g. '1.23e-2' is 123/10000

    The coefficient is a decimal or an integer.  The exponent is a signed 32-bit integer.
    No exponent marker at all and it's just a decimal or an integer.
    """
    options &= ~ParseOptions.ALLOW_EXPONENT
    markers = [index for index in (body.find(marker) for marker in EXPONENT_MARKERS) if index != -1]
    if not markers:
        if options & ParseOptions.ALLOW_DECIMAL_POINT:
            return _parse_decimal(body, options, locale, is_negative, normalize)
        return _parse_integer(body, options, locale, is_negative)

    exponent_index = min(markers)
    coefficient_text = body[:exponent_index]
    if len(coefficient_text) == 0:
        raise CannotParse("nothing before the exponent")
    exponent = _parse_exponent(body[exponent_index + 1:], locale)

    if len(coefficient_text) == 1 or not options & ParseOptions.ALLOW_DECIMAL_POINT:
        coefficient = _parse_integer(coefficient_text, options, locale, is_negative)
    else:
        coefficient = _parse_decimal(coefficient_text, options, locale, is_negative, normalize)
    return coefficient.multiply(Fraction.TEN.pow(exponent))


def _parse_exponent(text, locale):
    """A signed 32-bit integer, white space around it allowed."""
    text = text.strip()
    is_negative = False
    if locale.negative_sign and text.startswith(locale.negative_sign):
        is_negative = True
        text = text[len(locale.negative_sign):]
    elif locale.positive_sign and text.startswith(locale.positive_sign):
        text = text[len(locale.positive_sign):]
    if not is_all_digits(text):
        raise CannotParse("exponent is not an integer")
    magnitude = int_from_decimal_digits(text)
    exponent = -magnitude if is_negative else magnitude
    if not EXPONENT_MIN <= exponent <= EXPONENT_MAX:
        raise CannotParse("exponent out of range")
    return exponent


def _parse_decimal(body, options, locale, is_negative, normalize):
    """
    Decimal notation, e.g. '1.25' is 125/100, or 5/4 when normalizing.

    The digits on both sides of the separator make the numerator.
    The count of digits after it makes the denominator, a power of ten.
    """
    separator = locale.decimal_separator
    separator_index = body.find(separator)
    if separator_index == -1:
        return _parse_integer(body, options, locale, is_negative)

    integer_text = body[:separator_index]
    fractional_text = body[separator_index + len(separator):]
    if len(integer_text) == 0 and len(fractional_text) == 0:
        raise CannotParse("nothing around the decimal separator")
    if len(fractional_text) == 0:
        return _parse_integer(integer_text, options, locale, is_negative)   # e.g. '12.'
    if options & ParseOptions.ALLOW_THOUSANDS and locale.group_separator and locale.group_separator in fractional_text:
        raise CannotParse("group separator after the decimal separator")

    numerator = parse_unsigned_integer(integer_text + fractional_text, options, locale)
    if numerator == 0 and normalize:
        return Fraction.ZERO
    if is_negative:
        numerator = -numerator
    denominator = 10 ** len(fractional_text)
    if normalize:
        return Fraction(numerator, denominator, normalize=True)
    return Fraction._make(numerator, denominator, State.NOT_NORMALIZED)


def _parse_integer(text, options, locale, is_negative):
    magnitude = parse_unsigned_integer(text, options, locale)
    return Fraction(-magnitude if is_negative else magnitude)


# Integer Text
# ------------
DECIMAL_DIGITS = frozenset('0123456789')
HEX_DIGITS = frozenset('0123456789abcdefABCDEF')


def is_digit(character):
    return character in DECIMAL_DIGITS


def is_all_digits(text, digits=DECIMAL_DIGITS):
    return len(text) > 0 and all(character in digits for character in text)
assert is_all_digits('0123')
assert not is_all_digits('')
assert not is_all_digits('١')   # ARABIC-INDIC DIGIT ONE


def parse_unsigned_integer(text, options, locale):
    """
    Digits to int.  No signs, no symbols, those are dealt with before this.

    White space around the digits only as the options allow.
    Group separators after the first digit, anywhere, if ALLOW_THOUSANDS.
    Base 16 if ALLOW_HEX_SPECIFIER, no '0x' prefix, always unsigned.
    """
    if options & ParseOptions.ALLOW_LEADING_WHITE:
        text = text.lstrip()
    if options & ParseOptions.ALLOW_TRAILING_WHITE:
        text = text.rstrip()

    if options & ParseOptions.ALLOW_HEX_SPECIFIER:
        if not is_all_digits(text, HEX_DIGITS):
            raise CannotParse("not hexadecimal digits")
        return int(text, 16)

    if options & ParseOptions.ALLOW_THOUSANDS and locale.group_separator and text[:1] in DECIMAL_DIGITS:
        text = text.replace(locale.group_separator, '')
    if not is_all_digits(text):
        raise CannotParse("not decimal digits")
    return int_from_decimal_digits(text)
