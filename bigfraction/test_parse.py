"""
Testing bigfraction parse.py
"""

import unittest

from bigfraction.fraction import Fraction, State
from bigfraction.parse import *


class ParseTests(unittest.TestCase):

    def assertParses(self, expected, text, options=DEFAULT_OPTIONS, locale=LocaleSymbols.INVARIANT, normalize=True):
        success, fraction = try_parse(text, options, locale, normalize)
        if not success:
            self.fail("Expected {} to parse".format(repr(text)[:80]))
        if expected != fraction:
            self.fail("{} parsed as {}".format(repr(text)[:80], repr(fraction)))
        return fraction

    def assertFails(self, text, options=DEFAULT_OPTIONS, locale=LocaleSymbols.INVARIANT, normalize=True):
        success, fraction = try_parse(text, options, locale, normalize)
        if success:
            self.fail("Expected {} not to parse, got {}".format(repr(text), repr(fraction)))
        self.assertIs(Fraction.INVALID, fraction)


class ParseCorpusTests(ParseTests):
    """The everyday inputs, valid and invalid, normalized or not."""

    VALID = (
        ("0", Fraction(0)),
        ("1", Fraction(1)),
        ("-1", Fraction(-1)),
        ("10242048", Fraction(10242048)),
        ("1/5", Fraction(1, 5)),
        ("-1/5", Fraction(-1, 5)),
        ("3.5", Fraction(7, 2)),
        ("-3.5", Fraction(-7, 2)),
        ("1.2345678901234567890", Fraction(12345678901234567890, 10**19)),
    )
    INVALID = (
        "",
        "invalid",
        "-10242048/",
        "1.2345678901234567890f",
    )

    def test_valid(self):
        for text, expected in self.VALID:
            self.assertTrue(self.assertParses(expected, text).is_normalized())

    def test_valid_not_normalized(self):
        for text, expected in self.VALID:
            self.assertParses(expected, text, normalize=False)

    def test_invalid(self):
        for text in self.INVALID:
            self.assertFails(text)
            self.assertFails(text, normalize=False)

    def test_not_normalized_keeps_the_digits(self):
        self.assertEqual('35/10', str(self.assertParses(Fraction(7, 2), '3.5', normalize=False)))
        self.assertEqual('2/4', str(self.assertParses(Fraction(1, 2), '2/4', normalize=False)))
        self.assertEqual('1/2', str(self.assertParses(Fraction(1, 2), '2/4')))

    def test_not_a_string(self):
        self.assertFails(42)
        self.assertFails(None)
        self.assertFails(b'42')


class ParseSlashTests(ParseTests):

    def test_slash(self):
        self.assertParses(Fraction(3, 4), '3/4')
        self.assertParses(Fraction(-1, 5), '1/-5')
        self.assertParses(Fraction(1, 5), '-1/-5')
        self.assertParses(Fraction(1, 2), ' 1 / 2 ')

    def test_slash_zero_denominator(self):
        self.assertFails('1/0')
        self.assertFails('0/0')

    def test_slash_malformed(self):
        self.assertFails('/5')
        self.assertFails('1/2/3')
        self.assertFails('1.5/2')
        self.assertFails('NaN/1')

    def test_slash_exponent(self):
        self.assertParses(Fraction(20), '1e2/5')
        self.assertParses(Fraction(20), '1e2/5', ParseOptions.FLOAT)
        self.assertParses(Fraction(1, 4), '100e-2/4', ParseOptions.ANY)
        self.assertParses(Fraction(3, 1000), '3/1E3')
        self.assertEqual('100/5', str(self.assertParses(Fraction(20), '1e2/5', normalize=False)))

    def test_slash_exponent_must_come_out_whole(self):
        self.assertFails('1e-2/5')
        self.assertFails('5/1e-2', ParseOptions.FLOAT)
        self.assertFails('1e2/5', ParseOptions.NUMBER)
        self.assertFails('1/0e5')

    def test_slash_big(self):
        numerator = 10**60 + 7
        self.assertParses(Fraction(numerator, 3), '{}/3'.format(numerator))


class ParseSpecialTests(ParseTests):

    def test_special_symbols(self):
        self.assertParses(Fraction.NAN, 'NaN')
        self.assertParses(Fraction.POSITIVE_INFINITY, 'Infinity')
        self.assertParses(Fraction.NEGATIVE_INFINITY, '-Infinity')

    def test_special_symbols_exact(self):
        self.assertFails(' NaN')
        self.assertFails('nan')
        self.assertFails('+Infinity')

    def test_single_character_symbol(self):
        self.assertParses(Fraction.POSITIVE_INFINITY, '∞', locale=LocaleSymbols.EN_US)
        self.assertParses(Fraction.NEGATIVE_INFINITY, '-∞', locale=LocaleSymbols.EN_US)
        self.assertFails('∞')


class ParseIntegerTests(ParseTests):

    def test_single_character(self):
        self.assertParses(Fraction(7), '7')
        self.assertFails('-')
        self.assertFails('.')
        self.assertFails('x')

    def test_white_space(self):
        self.assertParses(Fraction(42), ' 42 ', ParseOptions.INTEGER)
        self.assertParses(Fraction(42), '\t42\n', ParseOptions.INTEGER)
        self.assertFails(' 42', ParseOptions.NONE)
        self.assertFails('42 ', ParseOptions.ALLOW_LEADING_WHITE)
        self.assertParses(Fraction(42), '42', ParseOptions.NONE)

    def test_leading_sign(self):
        self.assertParses(Fraction(7), '+7', ParseOptions.INTEGER)
        self.assertParses(Fraction(-7), ' -7', ParseOptions.INTEGER)
        self.assertFails('-7', ParseOptions.NONE)
        self.assertFails('--7', ParseOptions.INTEGER)
        self.assertFails('+-7', ParseOptions.INTEGER)
        self.assertFails('- 7', ParseOptions.INTEGER)

    def test_trailing_sign(self):
        self.assertParses(Fraction(-5), '5-', ParseOptions.NUMBER)
        self.assertParses(Fraction(5), '5+ ', ParseOptions.NUMBER)
        self.assertFails('5-', ParseOptions.INTEGER)
        self.assertFails('5--', ParseOptions.NUMBER)

    def test_non_ascii_digits(self):
        self.assertFails('١٢', ParseOptions.INTEGER)   # ARABIC-INDIC DIGITS
        self.assertFails('\uff11\uff12', ParseOptions.INTEGER)   # FULLWIDTH DIGITS

    def test_thousands(self):
        self.assertParses(Fraction(1234567), '1,234,567', ParseOptions.NUMBER)
        self.assertFails('1,234', ParseOptions.INTEGER)
        self.assertFails(',234', ParseOptions.NUMBER)

    def test_many_digits(self):
        digits = '1' * 10000
        self.assertParses(Fraction((10**10000 - 1) // 9), digits, ParseOptions.INTEGER)


class ParseDecimalTests(ParseTests):

    def test_decimal(self):
        self.assertParses(Fraction(5, 4), '1.25')
        self.assertParses(Fraction(1, 2), '.5')
        self.assertParses(Fraction(-1, 2), '-.5')
        self.assertParses(Fraction(12), '12.')
        self.assertParses(Fraction(2001, 2), '1,000.5')

    def test_decimal_zero(self):
        self.assertIs(Fraction.ZERO, self.assertParses(Fraction.ZERO, '0.00'))
        zero = self.assertParses(Fraction.ZERO, '0.00', normalize=False)
        self.assertEqual('0/100', str(zero))
        self.assertEqual(State.NOT_NORMALIZED, zero.state)

    def test_decimal_malformed(self):
        self.assertFails('1.2.3')
        self.assertFails('1.000,5')
        self.assertFails('1..5')
        self.assertFails('1.5', ParseOptions.INTEGER)

    def test_decimal_separator_off(self):
        locale = LocaleSymbols.INVARIANT.replace(decimal_separator='')
        self.assertFails('1.5', locale=locale)
        self.assertParses(Fraction(15), '15', locale=locale)

    def test_german(self):
        self.assertParses(Fraction(2469, 2), '1.234,5', ParseOptions.NUMBER, LocaleSymbols.DE_DE)
        self.assertFails('1,234.5', ParseOptions.NUMBER, LocaleSymbols.DE_DE)

    def test_french(self):
        self.assertParses(Fraction(2469, 2), '1\u202f234,5', ParseOptions.NUMBER, LocaleSymbols.FR_FR)


class ParseExponentTests(ParseTests):

    def test_exponent(self):
        self.assertEqual('123/10000', str(self.assertParses(Fraction(123, 10000), '1.23e-2')))
        self.assertParses(Fraction(1000), '1E3')
        self.assertParses(Fraction(100), '1e+2')
        self.assertParses(Fraction(-25), '-2.5e1')
        self.assertParses(Fraction(5), '.5e1')
        self.assertParses(Fraction(-100), '1e2-')

    def test_exponent_big(self):
        self.assertParses(Fraction(10**400), '1e400')
        self.assertParses(Fraction(1, 10**400), '1e-400')

    def test_exponent_malformed(self):
        self.assertFails('1e')
        self.assertFails('e5')
        self.assertFails('1e2.5')
        self.assertFails('1e99999999999')
        self.assertFails('1e' + '9' * 5000)
        self.assertFails('1e5', ParseOptions.NUMBER)

    def test_exponent_float_style(self):
        self.assertParses(Fraction(-3, 20), '-1.5E-1', ParseOptions.FLOAT)
        self.assertFails('1,000e1', ParseOptions.FLOAT)


class ParseCurrencyTests(ParseTests):

    def test_parentheses(self):
        self.assertParses(Fraction(-5), '(5)', ParseOptions.CURRENCY)
        self.assertFails('(5)', ParseOptions.NUMBER)
        self.assertFails('(5', ParseOptions.CURRENCY)
        self.assertFails('5)', ParseOptions.CURRENCY)
        self.assertFails('-(5)', ParseOptions.CURRENCY)
        self.assertFails('(-5)', ParseOptions.CURRENCY)
        self.assertFails('(', ParseOptions.CURRENCY)
        self.assertFails('()', ParseOptions.CURRENCY)

    def test_accounting_negative(self):
        self.assertParses(Fraction(-2469, 2), '($1,234.50)', ParseOptions.CURRENCY, LocaleSymbols.EN_US)
        self.assertParses(Fraction(-2469, 2), '(€ 1.234,50)', ParseOptions.CURRENCY, LocaleSymbols.DE_DE)

    def test_currency_symbol(self):
        en_us = LocaleSymbols.EN_US
        self.assertParses(Fraction(5), '$5', ParseOptions.CURRENCY, en_us)
        self.assertParses(Fraction(5), '5$', ParseOptions.CURRENCY, en_us)
        self.assertParses(Fraction(-5), '$-5', ParseOptions.CURRENCY, en_us)
        self.assertParses(Fraction(-5), '-$ 5', ParseOptions.CURRENCY, en_us)
        self.assertParses(Fraction(-5), '$5-', ParseOptions.CURRENCY, en_us)
        self.assertFails('- 5', ParseOptions.CURRENCY, en_us)
        self.assertFails('$5$', ParseOptions.CURRENCY, en_us)
        self.assertFails('$5', ParseOptions.NUMBER, en_us)
        self.assertFails('€5', ParseOptions.CURRENCY, en_us)

    def test_long_currency_symbol(self):
        locale = LocaleSymbols.INVARIANT.replace(currency_symbol='CHF')
        self.assertParses(Fraction(21, 2), 'CHF 10.50', ParseOptions.CURRENCY, locale)
        self.assertParses(Fraction(21, 2), '10.50 CHF', ParseOptions.CURRENCY, locale)

    def test_everything_at_once(self):
        self.assertParses(
            Fraction(-123451234321, 10**11),
            ' $ 12,345.1234321e-4- ',
            ParseOptions.ANY,
            LocaleSymbols.EN_US,
        )


class ParseHexTests(ParseTests):

    def test_hex(self):
        self.assertParses(Fraction(255), 'FF', ParseOptions.HEX_NUMBER)
        self.assertParses(Fraction(255), 'ff', ParseOptions.HEX_NUMBER)
        self.assertParses(Fraction(26), ' 1a ', ParseOptions.HEX_NUMBER)
        self.assertParses(Fraction(10), 'A', ParseOptions.HEX_NUMBER)
        self.assertParses(Fraction(0x10), '10', ParseOptions.HEX_NUMBER)
        self.assertParses(Fraction(2**128 - 1), 'F' * 32, ParseOptions.HEX_NUMBER)

    def test_hex_malformed(self):
        self.assertFails('G1', ParseOptions.HEX_NUMBER)
        self.assertFails('-FF', ParseOptions.HEX_NUMBER)
        self.assertFails('0xFF', ParseOptions.HEX_NUMBER)
        self.assertFails('FF', ParseOptions.INTEGER)

    def test_hex_fraction(self):
        self.assertParses(Fraction(1, 16), '1/10', ParseOptions.HEX_NUMBER)


class ParseOptionsTests(ParseTests):

    def test_composites(self):
        self.assertEqual(0x007, ParseOptions.INTEGER)
        self.assertEqual(0x203, ParseOptions.HEX_NUMBER)
        self.assertEqual(0x06F, ParseOptions.NUMBER)
        self.assertEqual(0x0A7, ParseOptions.FLOAT)
        self.assertEqual(0x17F, ParseOptions.CURRENCY)
        self.assertEqual(0x1FF, ParseOptions.ANY)

    def test_names(self):
        self.assertEqual('NONE', ParseOptions.names(ParseOptions.NONE))
        self.assertEqual(
            'ALLOW_LEADING_WHITE|ALLOW_TRAILING_WHITE|ALLOW_HEX_SPECIFIER',
            ParseOptions.names(ParseOptions.HEX_NUMBER),
        )

    def test_invalid_options(self):
        with self.assertRaises(ParseOptions.InvalidOptionsError):
            try_parse('1', 0x400)
        with self.assertRaises(ParseOptions.InvalidOptionsError):
            try_parse('1', ParseOptions.HEX_NUMBER | ParseOptions.ALLOW_DECIMAL_POINT)
        with self.assertRaises(ValueError):
            try_parse('1', ParseOptions.ALLOW_HEX_SPECIFIER | ParseOptions.ALLOW_LEADING_SIGN)
        with self.assertRaises(ValueError):
            parse('1', 'NUMBER')

    def test_validate_accepts(self):
        ParseOptions.validate(ParseOptions.ANY)
        ParseOptions.validate(ParseOptions.HEX_NUMBER)
        ParseOptions.validate(ParseOptions.ALLOW_HEX_SPECIFIER)
        ParseOptions.validate(ParseOptions.NONE)


class ParseLocaleTests(ParseTests):

    def test_presets(self):
        self.assertEqual('.', LocaleSymbols.INVARIANT.decimal_separator)
        self.assertEqual('$', LocaleSymbols.EN_US.currency_symbol)
        self.assertEqual(',', LocaleSymbols.DE_DE.decimal_separator)
        self.assertEqual('\u202f', LocaleSymbols.FR_FR.group_separator)

    def test_replace_makes_a_new_one(self):
        swiss = LocaleSymbols.DE_DE.replace(currency_symbol='CHF', group_separator="'")
        self.assertEqual('CHF', swiss.currency_symbol)
        self.assertEqual('€', LocaleSymbols.DE_DE.currency_symbol)
        self.assertParses(Fraction(123456, 100), "CHF 1'234,56", ParseOptions.CURRENCY, swiss)

    def test_immutable(self):
        with self.assertRaises(AttributeError):
            LocaleSymbols.INVARIANT.decimal_separator = ','

    def test_other_signs(self):
        locale = LocaleSymbols.INVARIANT.replace(negative_sign='−')   # MINUS SIGN
        self.assertParses(Fraction(-3), '−3', ParseOptions.INTEGER, locale)
        self.assertFails('-3', ParseOptions.INTEGER, locale)

    def test_no_positive_sign(self):
        locale = LocaleSymbols.INVARIANT.replace(positive_sign='')
        self.assertFails('+3', ParseOptions.INTEGER, locale)
        self.assertParses(Fraction(-3), '-3', ParseOptions.INTEGER, locale)


class ParseRoundTripTests(ParseTests):
    """str() of a Fraction parses back to an equal Fraction."""

    def assertRoundTrip(self, fraction):
        text = str(fraction)
        self.assertEqual(fraction, parse(text, normalize=False))
        self.assertEqual(text, str(parse(text, normalize=False)))
        self.assertEqual(fraction, parse(text))

    def test_corpus(self):
        for text, _ in ParseCorpusTests.VALID:
            self.assertRoundTrip(parse(text))
            self.assertRoundTrip(parse(text, normalize=False))

    def test_as_stored(self):
        self.assertRoundTrip(Fraction(6, -8))
        self.assertRoundTrip(Fraction(-6, 8))
        self.assertRoundTrip(Fraction(0, 7))
        self.assertRoundTrip(Fraction(-22, 7, normalize=True))

    def test_special_values(self):
        self.assertRoundTrip(Fraction.NAN)
        self.assertRoundTrip(Fraction.POSITIVE_INFINITY)
        self.assertRoundTrip(Fraction.NEGATIVE_INFINITY)

    def test_many_digits(self):
        success, fraction = try_parse('1' * 5000)
        self.assertTrue(success)
        self.assertRoundTrip(fraction)
        self.assertRoundTrip(-fraction)
        self.assertRoundTrip(Fraction(1, 10**5000 + 3))
        self.assertRoundTrip(Fraction(-(10**9000) - 1, 7**6000))


class ParseRaisingTests(ParseTests):

    def test_parse(self):
        self.assertEqual(Fraction(5, 4), parse('1.25'))
        self.assertEqual('125/100', str(parse('1.25', normalize=False)))
        self.assertEqual(Fraction(-5), parse('(5)', ParseOptions.CURRENCY))

    def test_parse_error(self):
        with self.assertRaises(ParseError):
            parse('1.5f')
        with self.assertRaises(ValueError):
            parse('')


class ParseLoggingTests(ParseTests):

    def test_failure_logged(self):
        with self.assertLogs('bigfraction.parse', level='DEBUG') as logs:
            try_parse('junk')
        self.assertEqual(1, len(logs.output))
        self.assertIn("Cannot parse 'junk'", logs.output[0])
        self.assertIn("unexpected leading character 'j'", logs.output[0])

    def test_zero_denominator_logged(self):
        with self.assertLogs('bigfraction.parse', level='DEBUG') as logs:
            try_parse('1/0')
        self.assertIn("zero denominator", logs.output[0])


if __name__ == '__main__':
    unittest.main()
