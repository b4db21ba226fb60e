"""
A bigfraction Fraction is an exact ratio of two arbitrarily large integers.

Features:
 - arbitrary precision, never rounds
 - lazy normalization (reduce to lowest terms only when asked, or when it's cheap)
 - NaN and signed infinities as terminal states
"""

import decimal
import math
import numbers
import struct


class State(object):
    """
    A State says how to read the numerator and denominator of a Fraction.

    There are 5 states.  Two are finite, three are special.

    Finite States
    -------------
    NOT_NORMALIZED - numerator and denominator stored as given.
                     The denominator may be negative, the terms may share factors.
                     E.g. Fraction(4, -8) is NOT_NORMALIZED, with numerator 4, denominator -8.
    IS_NORMALIZED - lowest terms, denominator > 0, zero is 0/1.
                    E.g. Fraction(4, -8, normalize=True) is IS_NORMALIZED, -1/2.

    Special States
    --------------
    IS_NAN, IS_POSITIVE_INFINITY, IS_NEGATIVE_INFINITY
    A special Fraction has no numerator or denominator.
    Arithmetic on them follows the state alone, see Fraction._special_sum() etc.

    State class properties
    ----------------------
        State.name_from_code - {State.IS_NAN: 'IS_NAN', ...}
        State.SPECIAL - the three special state codes
    """
    NOT_NORMALIZED       = 0
    IS_NORMALIZED        = 1
    IS_NAN               = 2
    IS_POSITIVE_INFINITY = 3
    IS_NEGATIVE_INFINITY = 4

    name_from_code = None   # {0: 'NOT_NORMALIZED', 1: 'IS_NORMALIZED', ... }
    SPECIAL = None          # frozenset({2, 3, 4})

    @classmethod
    def internal_setup(cls):
        """Initialize State properties after the State class is otherwise defined."""
        cls.name_from_code = {getattr(cls, attr): attr for attr in dir(cls) if attr.isupper() and attr != 'SPECIAL'}
        cls.SPECIAL = frozenset((cls.IS_NAN, cls.IS_POSITIVE_INFINITY, cls.IS_NEGATIVE_INFINITY))


State.internal_setup()
assert State.name_from_code[State.IS_NAN] == 'IS_NAN'
assert len(State.name_from_code) == 5


class Fraction(object):
    """
    An exact rational number, or NaN, or an infinity.

    Construction:
        Fraction(3, 4)                  NOT_NORMALIZED 3/4
        Fraction(6, -8)                 NOT_NORMALIZED 6/-8, equal to -3/4
        Fraction(6, -8, normalize=True) IS_NORMALIZED -3/4
        Fraction(42)                    IS_NORMALIZED 42/1, whole numbers are born normalized
        Fraction('1.25')                parsed, NOT_NORMALIZED 125/100
        Fraction('1.25', normalize=True) parsed, IS_NORMALIZED 5/4
        Fraction(Decimal('1.50'))       NOT_NORMALIZED 150/100
        Fraction(other_fraction)        a copy

    Arithmetic never rounds:
        assert Fraction(1, 3) + Fraction(1, 6) == Fraction(1, 2)

    Reduction is lazy.  A NOT_NORMALIZED fraction does all the arithmetic right,
    it just hasn't spent any GCD work yet.  Call reduce() to get lowest terms.
    Equality compares values, not representations:
        assert Fraction(2, 4) == Fraction(1, 2)

    Special values:
        Fraction.NAN, Fraction.POSITIVE_INFINITY, Fraction.NEGATIVE_INFINITY
    These have no numerator or denominator.  Asking for one raises SpecialValueError.
    """

    __slots__ = ('_numerator', '_denominator', '_state')

    def __init__(self, content=0, denominator=None, normalize=False):
        """
        Fraction constructor.

        content - the type can be:
            int               numerator, over denominator (or over 1)
            Fraction          copy
            str               '3/4', '1.25', '-1.5e3', see bigfraction.parse
            decimal.Decimal   exact conversion, see from_decimal()
        denominator - int, only with an int numerator
        normalize=True - reduce to lowest terms with a positive denominator
        """
        if denominator is not None:
            if not isinstance(content, numbers.Integral) or not isinstance(denominator, numbers.Integral):
                raise self.ConstructorTypeError("Fraction({numerator}, {denominator}) needs two integers".format(
                    numerator=type_name(content),
                    denominator=type_name(denominator),
                ))
            self._from_terms(int(content), int(denominator), normalize)
        elif isinstance(content, numbers.Integral):
            self._set(int(content), 1, State.IS_NORMALIZED)
        elif isinstance(content, Fraction):
            self._from_another_fraction(content, normalize)
        elif isinstance(content, str):
            self._from_string(content, normalize)
        elif isinstance(content, decimal.Decimal):
            self._from_another_fraction(from_decimal(content, normalize=normalize), False)
        else:
            raise self.ConstructorTypeError("{outer}({inner}) is not supported".format(
                outer=type_name(self),
                inner=type_name(content),
            ))

    def _set(self, numerator, denominator, state):
        self._numerator = numerator
        self._denominator = denominator
        self._state = state

    def _from_terms(self, numerator, denominator, normalize):
        if denominator == 0:
            raise self.DivideByZero("Fraction with a zero denominator")
        if normalize:
            self._from_another_fraction(reduce(numerator, denominator), False)
        elif denominator == 1:
            self._set(numerator, 1, State.IS_NORMALIZED)
        else:
            self._set(numerator, denominator, State.NOT_NORMALIZED)

    def _from_another_fraction(self, another_fraction, normalize):
        """
        Copy Constructor

            assert Fraction(3, 4) == Fraction(Fraction(3, 4))
        """
        if normalize:
            another_fraction = another_fraction.reduce()
        self._set(another_fraction._numerator, another_fraction._denominator, another_fraction._state)

    def _from_string(self, s, normalize):
        from bigfraction.parse import try_parse
        success, fraction = try_parse(s, normalize=normalize)
        if not success:
            raise self.ConstructorValueError("A Fraction cannot be made from {}".format(repr(s)))
        self._from_another_fraction(fraction, False)

    @classmethod
    def _make(cls, numerator, denominator, state):
        """Bypass the constructor.  The caller vouches for the terms and the state."""
        fraction = cls.__new__(cls)
        fraction._set(numerator, denominator, state)
        return fraction

    class ConstructorTypeError(TypeError):
        """e.g. Fraction(object()) or Fraction(1.5, 2)"""

    class ConstructorValueError(ValueError):
        """e.g. Fraction('alpha string') or from_decimal_bits((0, 0, 0, 29 << 16))"""

    class DivideByZero(ZeroDivisionError):
        """e.g. Fraction(1, 0) or x / Fraction.ZERO or x % Fraction.ZERO"""

    class SpecialValueError(ValueError):
        """e.g. Fraction.NAN.numerator or math.floor(Fraction.POSITIVE_INFINITY)"""

    class ExponentTypeError(TypeError):
        """e.g. Fraction(2).pow(0.5)"""

    # Terms and State
    # ---------------
    @property
    def numerator(self):
        """
        The numerator, as stored.  Only normalized fractions carry the sign here alone.

            assert -3 == Fraction(3, -4).reduce().numerator
        """
        self._not_special("numerator")
        return self._numerator

    @property
    def denominator(self):
        """The denominator, as stored.  Positive only for normalized fractions."""
        self._not_special("denominator")
        return self._denominator

    @property
    def state(self):
        return self._state

    def _not_special(self, what):
        if self._state in State.SPECIAL:
            raise self.SpecialValueError("{special} has no {what}".format(
                special=State.name_from_code[self._state],
                what=what,
            ))

    def is_normalized(self):
        return self._state == State.IS_NORMALIZED

    def is_nan(self):
        return self._state == State.IS_NAN

    def is_positive_infinity(self):
        return self._state == State.IS_POSITIVE_INFINITY

    def is_negative_infinity(self):
        return self._state == State.IS_NEGATIVE_INFINITY

    def is_infinity(self):
        """Is this either infinity?"""
        return self._state in (State.IS_POSITIVE_INFINITY, State.IS_NEGATIVE_INFINITY)

    def is_finite(self):
        return self._state not in State.SPECIAL

    def is_zero(self):
        """Is this zero?  Any finite fraction with a zero numerator is, e.g. Fraction(0, 5)."""
        return self._state not in State.SPECIAL and self._numerator == 0

    def is_negative(self):
        """Is this less than zero?  NaN is not."""
        if self._state == State.IS_NEGATIVE_INFINITY:
            return True
        if self._state in State.SPECIAL:
            return False
        return (self._numerator < 0) != (self._denominator < 0) and self._numerator != 0

    def _sign(self):
        """-1, 0, or +1 for finite fractions and infinities."""
        if self._state == State.IS_POSITIVE_INFINITY:
            return 1
        if self._state == State.IS_NEGATIVE_INFINITY:
            return -1
        if self._numerator == 0:
            return 0
        return -1 if self.is_negative() else 1

    # Reduction
    # ---------
    def reduce(self):
        """
        Lowest terms, positive denominator.

        Idempotent.  An already normalized fraction is returned as is, with no GCD work.
        Special values are returned as is.

            assert '-3/4' == str(Fraction(6, -8).reduce())
        """
        if self._state != State.NOT_NORMALIZED:
            return self
        return reduce(self._numerator, self._denominator)

    normalized = reduce

    # Arithmetic
    # ----------
    def add(self, summand):
        """
        Sum of two fractions.

        Equal denominators add numerators directly.
        Otherwise the common denominator is the least common multiple,
        (d1 / gcd(d1, d2)) * d2, not the product d1 * d2.
        That keeps intermediate integers near the size of the answer.
        """
        special = self._special_sum(self, summand)
        if special is not None:
            return special

        if self._denominator == summand._denominator:
            return reduce(self._numerator + summand._numerator, self._denominator)

        if self._numerator == 0:
            return summand   # 0 + b = b, b keeps its state

        if summand._numerator == 0:
            return self   # a + 0 = a

        gcd = math.gcd(self._denominator, summand._denominator)
        this_multiplier = self._denominator // gcd
        other_multiplier = summand._denominator // gcd
        least_common_multiple = this_multiplier * summand._denominator
        return reduce(
            self._numerator * other_multiplier + summand._numerator * this_multiplier,
            least_common_multiple,
        )

    def subtract(self, subtrahend):
        return self.add(subtrahend.invert())

    def invert(self):
        """
        Additive inverse, i.e. unary minus.  Not the reciprocal.

        The denominator and the state are unchanged.
            assert Fraction(-3, 4) == Fraction(3, 4).invert()
        """
        if self._state == State.IS_POSITIVE_INFINITY:
            return self.NEGATIVE_INFINITY
        if self._state == State.IS_NEGATIVE_INFINITY:
            return self.POSITIVE_INFINITY
        if self._state == State.IS_NAN:
            return self
        if self._numerator == 0:
            return self.ZERO
        return self._make(-self._numerator, self._denominator, self._state)

    def multiply(self, factor):
        """Product of two fractions, always reduced."""
        special = self._special_product(self, factor)
        if special is not None:
            return special
        return reduce(self._numerator * factor._numerator, self._denominator * factor._denominator)

    def divide(self, divisor):
        """
        Quotient of two fractions, always reduced.

        A zero divisor raises DivideByZero, whatever the dividend, NaN included.
        A negative divisor puts its sign in the denominator, which reduce() moves up.
        """
        if divisor.is_zero():
            raise self.DivideByZero("Division by zero")
        special = self._special_quotient(self, divisor)
        if special is not None:
            return special
        return reduce(self._numerator * divisor._denominator, self._denominator * divisor._numerator)

    def remainder(self, divisor):
        """
        What's left after dividing out a whole number of divisors.  The % operator.

        The remainder takes the sign of the dividend (truncated division):
            assert self == divisor * (self / divisor).truncate() + self.remainder(divisor)
        For a positive dividend and divisor that is the same as floor().
        """
        if divisor.is_zero():
            raise self.DivideByZero("Remainder by zero")
        special = self._special_remainder(self, divisor)
        if special is not None:
            return special
        if self._numerator == 0:
            return self.ZERO

        this_numerator, this_denominator = _positive_denominator(self._numerator, self._denominator)
        other_numerator, other_denominator = _positive_denominator(divisor._numerator, divisor._denominator)

        gcd = math.gcd(this_denominator, other_denominator)
        this_multiplier = this_denominator // gcd
        other_multiplier = other_denominator // gcd
        least_common_multiple = this_multiplier * other_denominator

        a = this_numerator * other_multiplier
        b = other_numerator * this_multiplier
        return reduce(remainder_toward_zero(a, b), least_common_multiple)

    def pow(self, exponent):
        """
        Raise to an integer power.

        A negative exponent swaps numerator and denominator first.
        No GCD work:  powers of coprime terms stay coprime.
        So a normalized base gives a normalized result (the sign moves up if the swap put it below),
        and a base that was NOT_NORMALIZED gives a result that is NOT_NORMALIZED.
        Anything to the zero power is one, even zero, even NaN.
        """
        if not isinstance(exponent, numbers.Integral):
            raise self.ExponentTypeError("Fraction exponent must be an integer, not a {}".format(type_name(exponent)))
        exponent = int(exponent)
        if exponent == 0:
            return self.ONE
        special = self._special_power(self, exponent)
        if special is not None:
            return special

        if exponent < 0:
            if self._numerator == 0:
                raise self.DivideByZero("Zero to a negative power")
            numerator, denominator = self._denominator, self._numerator
            exponent = -exponent
        else:
            numerator, denominator = self._numerator, self._denominator

        numerator **= exponent
        denominator **= exponent
        if self._state == State.IS_NORMALIZED:
            numerator, denominator = _positive_denominator(numerator, denominator)
            return self._make(numerator, denominator, State.IS_NORMALIZED)
        return self._make(numerator, denominator, State.NOT_NORMALIZED)

    def abs(self):
        """Absolute value of both terms.  Keeps the state."""
        if self._state in (State.IS_POSITIVE_INFINITY, State.IS_NEGATIVE_INFINITY):
            return self.POSITIVE_INFINITY
        if self._state == State.IS_NAN:
            return self
        return self._make(abs(self._numerator), abs(self._denominator), self._state)

    def truncate(self):
        """The whole number part, rounding toward zero.  An int."""
        self._not_special("whole number part")
        return quotient_toward_zero(self._numerator, self._denominator)

    def floor(self):
        """The greatest whole number not more than this.  An int."""
        self._not_special("floor")
        return self._numerator // self._denominator

    def ceil(self):
        """The least whole number not less than this.  An int."""
        self._not_special("ceiling")
        return -(-self._numerator // self._denominator)

    # Special-State Propagation
    # -------------------------
    # Each returns the answer when an operand is special, or None when both are finite.
    # The finite code paths never see a special operand, so never read their missing terms.

    @classmethod
    def _special_sum(cls, a, b):
        if a._state not in State.SPECIAL and b._state not in State.SPECIAL:
            return None
        if a.is_nan() or b.is_nan():
            return cls.NAN
        if a.is_infinity() and b.is_infinity():
            return a if a._state == b._state else cls.NAN   # Inf - Inf
        return a if a.is_infinity() else b

    @classmethod
    def _special_product(cls, a, b):
        if a._state not in State.SPECIAL and b._state not in State.SPECIAL:
            return None
        if a.is_nan() or b.is_nan():
            return cls.NAN
        sign = a._sign() * b._sign()
        if sign == 0:
            return cls.NAN   # Inf * 0
        return cls._infinity_signed(sign)

    @classmethod
    def _special_quotient(cls, a, b):
        if a._state not in State.SPECIAL and b._state not in State.SPECIAL:
            return None
        if a.is_nan() or b.is_nan():
            return cls.NAN
        if a.is_infinity() and b.is_infinity():
            return cls.NAN
        if b.is_infinity():
            return cls.ZERO   # finite / Inf
        return cls._infinity_signed(a._sign() * b._sign())

    @classmethod
    def _special_remainder(cls, a, b):
        if a._state not in State.SPECIAL and b._state not in State.SPECIAL:
            return None
        if a.is_nan() or b.is_nan() or a.is_infinity():
            return cls.NAN
        return a   # finite % Inf

    @classmethod
    def _special_power(cls, base, exponent):
        """Exponent is a nonzero int here."""
        if base._state not in State.SPECIAL:
            return None
        if base.is_nan():
            return cls.NAN
        if exponent < 0:
            return cls.ZERO
        if base.is_negative_infinity() and exponent % 2 == 1:
            return cls.NEGATIVE_INFINITY
        return cls.POSITIVE_INFINITY

    @classmethod
    def _infinity_signed(cls, sign):
        return cls.POSITIVE_INFINITY if sign > 0 else cls.NEGATIVE_INFINITY

    # Operators
    # ---------
    @classmethod
    def _coerce(cls, x):
        """A Fraction for x, or None if x isn't something Fraction math mixes with."""
        if isinstance(x, Fraction):
            return x
        if isinstance(x, numbers.Integral):
            return cls(x)
        return None

    def _binary_op(self, method, other, reflected=False):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        if reflected:
            return method(other, self)
        return method(self, other)

    def __add__(self, other):      return self._binary_op(Fraction.add, other)
    def __radd__(self, other):     return self._binary_op(Fraction.add, other, reflected=True)
    def __sub__(self, other):      return self._binary_op(Fraction.subtract, other)
    def __rsub__(self, other):     return self._binary_op(Fraction.subtract, other, reflected=True)
    def __mul__(self, other):      return self._binary_op(Fraction.multiply, other)
    def __rmul__(self, other):     return self._binary_op(Fraction.multiply, other, reflected=True)
    def __truediv__(self, other):  return self._binary_op(Fraction.divide, other)
    def __rtruediv__(self, other): return self._binary_op(Fraction.divide, other, reflected=True)
    def __mod__(self, other):      return self._binary_op(Fraction.remainder, other)
    def __rmod__(self, other):     return self._binary_op(Fraction.remainder, other, reflected=True)

    def __pow__(self, exponent):
        if not isinstance(exponent, numbers.Integral):
            return NotImplemented
        return self.pow(exponent)

    def __neg__(self): return self.invert()
    def __pos__(self): return self
    def __abs__(self): return self.abs()

    def __trunc__(self): return self.truncate()
    def __floor__(self): return self.floor()
    def __ceil__(self):  return self.ceil()

    def __bool__(self):
        return not self.is_zero()

    # Equality
    # --------
    def __eq__(self, other):
        """
        Same value?  Representation doesn't matter:  Fraction(1, 2) == Fraction(-2, -4)

        NaN equals NaN here.  A Fraction is a value, so NaN can be a dictionary key or a set member.
        """
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        if self._state in State.SPECIAL or other._state in State.SPECIAL:
            return self._state == other._state
        return self._numerator * other._denominator == other._numerator * self._denominator

    def __ne__(self, other):
        equality = self.__eq__(other)
        if equality is NotImplemented:
            return NotImplemented
        return not equality

    def __hash__(self):
        """Hashes like int for whole numbers, so Fraction(3) and 3 can share a dictionary slot."""
        if self._state in State.SPECIAL:
            return hash(State.name_from_code[self._state])
        reduced = self.reduce()
        if reduced._denominator == 1:
            return hash(reduced._numerator)
        return hash((reduced._numerator, reduced._denominator))

    # Text
    # ----
    def __repr__(self):
        if self._state in State.SPECIAL:
            return "Fraction." + self._special_constant_name[self._state]
        return "Fraction({numerator}, {denominator})".format(
            numerator=decimal_digits_from_int(self._numerator),
            denominator=decimal_digits_from_int(self._denominator),
        )

    def __str__(self):
        """
        Plain text, as stored.  Any number of digits.  Parses back to an equal Fraction.

            assert '3/4' == str(Fraction(3, 4))
            assert '6/8' == str(Fraction(6, 8))
            assert '42' == str(Fraction(42))
        """
        if self._state in State.SPECIAL:
            return self._special_symbol[self._state]
        if self._denominator == 1:
            return decimal_digits_from_int(self._numerator)
        return "{}/{}".format(
            decimal_digits_from_int(self._numerator),
            decimal_digits_from_int(self._denominator),
        )

    _special_constant_name = {
        State.IS_NAN: 'NAN',
        State.IS_POSITIVE_INFINITY: 'POSITIVE_INFINITY',
        State.IS_NEGATIVE_INFINITY: 'NEGATIVE_INFINITY',
    }
    _special_symbol = {
        State.IS_NAN: 'NaN',
        State.IS_POSITIVE_INFINITY: 'Infinity',
        State.IS_NEGATIVE_INFINITY: '-Infinity',
    }

    # ---------
    ZERO = None
    ONE = None
    MINUS_ONE = None
    TEN = None
    NAN = None
    POSITIVE_INFINITY = None
    NEGATIVE_INFINITY = None
    INVALID = None   # What a failed parse leaves behind.  Don't read it.

    @classmethod
    def internal_setup(cls):
        """Initialize Fraction constants after the Fraction class is defined."""
        cls.ZERO              = cls._make(0, 1, State.IS_NORMALIZED)
        cls.ONE               = cls._make(1, 1, State.IS_NORMALIZED)
        cls.MINUS_ONE         = cls._make(-1, 1, State.IS_NORMALIZED)
        cls.TEN               = cls._make(10, 1, State.IS_NORMALIZED)
        cls.NAN               = cls._make(None, None, State.IS_NAN)
        cls.POSITIVE_INFINITY = cls._make(None, None, State.IS_POSITIVE_INFINITY)
        cls.NEGATIVE_INFINITY = cls._make(None, None, State.IS_NEGATIVE_INFINITY)
        cls.INVALID           = cls.NAN


def reduce(numerator, denominator):
    """
    Reduce a numerator and denominator to a normalized Fraction.

    If either is zero the answer is Fraction.ZERO, 0/1.
    A negative denominator gives its sign to the numerator.
    Common factors are divided out.

        assert '-3/4' == str(reduce(6, -8))
    """
    if numerator == 0 or denominator == 0:
        return Fraction.ZERO

    numerator, denominator = _positive_denominator(numerator, denominator)
    gcd = math.gcd(numerator, denominator)
    if gcd > 1:
        numerator //= gcd
        denominator //= gcd
    return Fraction._make(numerator, denominator, State.IS_NORMALIZED)


# noinspection PyProtectedMember
Fraction.internal_setup()
assert Fraction.NAN.state == State.IS_NAN
assert Fraction.ZERO.is_normalized()


def _positive_denominator(numerator, denominator):
    if denominator < 0:
        return -numerator, -denominator
    return numerator, denominator


# Math
# ----
def remainder_toward_zero(a, b):
    """
    Integer remainder that takes the sign of the dividend, a.

    Unlike Python's % which takes the sign of the divisor.
    """
    magnitude = abs(a) % abs(b)
    return -magnitude if a < 0 else magnitude
assert  1 == remainder_toward_zero( 7,  3)
assert -1 == remainder_toward_zero(-7,  3)
assert  1 == remainder_toward_zero( 7, -3)


def quotient_toward_zero(a, b):
    """Integer quotient, truncated toward zero.  Unlike Python's // which floors."""
    magnitude = abs(a) // abs(b)
    return -magnitude if (a < 0) != (b < 0) else magnitude
assert  2 == quotient_toward_zero( 7,  3)
assert -2 == quotient_toward_zero(-7,  3)
assert -2 == quotient_toward_zero( 7, -3)


# Python limits how many digits int(str) and str(int) convert at once (sys.get_int_max_str_digits()).
# Longer numbers are split, converted in pieces, and put back together.
DIGITS_PER_CHUNK = 4000
BITS_PER_CHUNK = 13000   # 2**13000 has 3914 digits
LOG10_2 = math.log10(2)


def int_from_decimal_digits(digits):
    """int(digits), for any number of digits."""
    if len(digits) <= DIGITS_PER_CHUNK:
        return int(digits)
    middle = len(digits) // 2
    low_digits = digits[middle:]
    return int_from_decimal_digits(digits[:middle]) * 10 ** len(low_digits) + int_from_decimal_digits(low_digits)
assert 1234567 == int_from_decimal_digits('1234567')
assert 10**5000 == int_from_decimal_digits('1' + '0' * 5000)


def decimal_digits_from_int(i):
    """str(i), for any number of digits."""
    if i < 0:
        return '-' + decimal_digits_from_int(-i)
    if i.bit_length() <= BITS_PER_CHUNK:
        return str(i)
    low_length = int(i.bit_length() * LOG10_2) // 2
    high, low = divmod(i, 10 ** low_length)
    return decimal_digits_from_int(high) + decimal_digits_from_int(low).zfill(low_length)
assert '-1234567' == decimal_digits_from_int(-1234567)
assert '1' + '0' * 5000 == decimal_digits_from_int(10**5000)


# Decimal Conversion
# ------------------
DECIMAL_MAX_SCALE = 28
DECIMAL_MANTISSA_BYTES = 12   # 96 bits
WORD_MIN = -2**31             # the words of a 128-bit decimal may be signed
WORD_MAX = 2**32 - 1          # or unsigned


def from_decimal_bits(bits, normalize=True):
    """
    Decode a 128-bit decimal floating point value into an exact Fraction.

    bits - either four 32-bit integers (lo, mid, hi, flags), signed or unsigned,
           or the same 16 bytes, little-endian:
               bytes 0-11   mantissa, 96-bit unsigned, little-endian
               byte 14      scale, the power of ten in the denominator, 0 to 28
               byte 15      bit 7 is the sign
               bytes 12, 13 and the rest of byte 15 are unused

    value = (-1)**sign * mantissa / 10**scale

        assert Fraction(-314, 100) == from_decimal_bits((314, 0, 0, 0x80020000))
    """
    if isinstance(bits, (bytes, bytearray)):
        buffer = bytes(bits)
    else:
        try:
            lo, mid, hi, flags = bits
        except (TypeError, ValueError):
            raise Fraction.ConstructorValueError("Expecting four 32-bit integers, not a {}".format(type_name(bits)))
        words = lo, mid, hi, flags
        for index, word in enumerate(words):
            if not isinstance(word, numbers.Integral) or not WORD_MIN <= word <= WORD_MAX:
                raise Fraction.ConstructorValueError("Word {index} of the decimal bits is not a 32-bit {type}".format(
                    index=index,
                    type=type_name(word),
                ))
        buffer = struct.pack('<4I', *(int(word) & 0xFFFFFFFF for word in words))
    if len(buffer) != 16:
        raise Fraction.ConstructorValueError("Expecting 16 bytes, not {}".format(len(buffer)))

    mantissa = int.from_bytes(buffer[0:DECIMAL_MANTISSA_BYTES], 'little')
    scale = buffer[14]
    is_negative = (buffer[15] & 0x80) != 0
    if scale > DECIMAL_MAX_SCALE:
        raise Fraction.ConstructorValueError("Decimal scale {} is over {}".format(scale, DECIMAL_MAX_SCALE))
    return _from_scaled(is_negative, mantissa, scale, normalize)


def from_decimal(value, normalize=True):
    """
    Convert a decimal.Decimal exactly.

    Any precision, any exponent.  NaN (quiet or signaling) is Fraction.NAN,
    infinities are the matching Fraction infinity.

        assert Fraction(5, 4) == from_decimal(Decimal('1.25'))
    """
    if value.is_nan():
        return Fraction.NAN
    if value.is_infinite():
        return Fraction.NEGATIVE_INFINITY if value.is_signed() else Fraction.POSITIVE_INFINITY
    if normalize:
        if value == 0:
            return Fraction.ZERO
        if value == 1:
            return Fraction.ONE
        if value == -1:
            return Fraction.MINUS_ONE

    sign, digits, exponent = value.as_tuple()
    mantissa = int_from_decimal_digits(''.join(str(digit) for digit in digits)) if digits else 0
    if exponent >= 0:
        return _from_scaled(bool(sign), mantissa * 10 ** exponent, 0, normalize)
    return _from_scaled(bool(sign), mantissa, -exponent, normalize)


def decimal_bits(value):
    """
    Encode a finite decimal.Decimal into the four 32-bit signed integers of from_decimal_bits().

    Trailing zeros are dropped from the mantissa if that's what it takes to fit a scale of 28.
    Raises Fraction.ConstructorValueError if the value still won't fit 96 bits.

        assert (314, 0, 0, -2147352576) == decimal_bits(Decimal('-3.14'))
    """
    if not value.is_finite():
        raise Fraction.ConstructorValueError("{} has no 128-bit decimal encoding".format(value))
    sign, digits, exponent = value.as_tuple()
    mantissa = int_from_decimal_digits(''.join(str(digit) for digit in digits)) if digits else 0
    if exponent > 0:
        mantissa *= 10 ** exponent
        exponent = 0
    scale = -exponent
    while scale > DECIMAL_MAX_SCALE and mantissa % 10 == 0:
        mantissa //= 10
        scale -= 1
    if scale > DECIMAL_MAX_SCALE or mantissa.bit_length() > DECIMAL_MANTISSA_BYTES * 8:
        raise Fraction.ConstructorValueError("{} does not fit a 128-bit decimal".format(value))
    buffer = (
        mantissa.to_bytes(DECIMAL_MANTISSA_BYTES, 'little') +
        bytes((0, 0, scale, 0x80 if sign else 0x00))
    )
    return struct.unpack('<4i', buffer)


def _from_scaled(is_negative, mantissa, scale, normalize):
    """The exact Fraction for (-1)**is_negative * mantissa / 10**scale."""
    denominator = 10 ** scale
    if normalize:
        if mantissa == 0:
            return Fraction.ZERO
        if mantissa == denominator:
            return Fraction.MINUS_ONE if is_negative else Fraction.ONE
    numerator = -mantissa if is_negative else mantissa
    if normalize:
        return reduce(numerator, denominator)
    if denominator == 1:
        return Fraction._make(numerator, 1, State.IS_NORMALIZED)
    return Fraction._make(numerator, denominator, State.NOT_NORMALIZED)
assert '-157/50' == str(_from_scaled(True, 314, 2, normalize=True))
assert '-314/100' == str(_from_scaled(True, 314, 2, normalize=False))


# Inspection
# ----------
def type_name(x):
    """Describe (very briefly) what type of object this is."""
    return type(x).__name__
