"""
An arbidec Fixed is a fixed-point number of any size, in any base.

Features:
 - arbitrary precision
 - arbitrary range
 - any base from 2 up (text rendering up to base 36)
 - division truncated to a chosen scale, never rounded

    assert '333.3333' == str(Fixed(1000).div(Fixed(3), scale=4))
"""

import fractions
import re

from arbidec import digits
from arbidec import division


class Fixed:
    """
    A sign, a list of digits, and where the radix point goes.

        digits - most significant first, each in range(base)
        lp - how many of those digits are left of the radix point (the integer part)
        rp - how many are right of it (the fractional part), len(digits) - lp
        sign - +1 or -1.  Zero is never negative.

    Normalized numbers (the default) keep exactly one integer digit when the integer part
    is zero, and no other leading zeros.  Fractional digits are left alone, even trailing
    zeros, because they are the scale of the number.

        assert (1, 2) == (Fixed('0.05').lp, Fixed('0.05').rp)
        assert (3, 2) == (Fixed('007.50', normalize=False).lp, Fixed('007.50', normalize=False).rp)
    """

    DEFAULT_BASE = 10
    DEFAULT_SCALE = 20   # fractional digits of a quotient, when the caller doesn't say

    DivisionByZero = division.DivisionByZero

    class ConstructorTypeError(TypeError):
        """e.g. Fixed(1.5) or Fixed(object)"""

    class ConstructorValueError(ValueError):
        """e.g. Fixed('alpha') or Fixed('9', base=8)"""

    class CompareError(TypeError):
        """e.g. Fixed(1) < object"""

    class BaseMismatchError(ValueError):
        """e.g. Fixed(1, base=10) + Fixed(1, base=2)"""

    def __init__(self, content=None, base=None, normalize=True):
        if isinstance(content, Fixed):
            if base is not None and base != content.base:
                raise self.ConstructorValueError("No base conversion, Fixed(base {inner}, base={outer})".format(
                    inner=content.base,
                    outer=base,
                ))
            self._set(content.digits, content.lp, content.sign, content.base, normalize)
            return

        if base is None:
            base = self.DEFAULT_BASE
        try:
            digits.validate([], base)
        except digits.BaseError as e:
            raise self.ConstructorValueError(str(e))

        if content is None:
            self._set([0], 1, 1, base, normalize)
        elif isinstance(content, int):
            self._from_int(content, base, normalize)
        elif isinstance(content, str):
            self._from_string(content, base, normalize)
        else:
            raise self.ConstructorTypeError("{outer}({inner}) is not supported".format(
                outer=type_name(self),
                inner=type_name(content),
            ))

    @classmethod
    def from_digits(cls, digit_list, lp=None, sign=1, base=None, normalize=True):
        """
        Construct from raw digits.  The only way to get a base above 36.

            assert Fixed('-12.5') == Fixed.from_digits([1, 2, 5], lp=2, sign=-1)
        """
        if base is None:
            base = cls.DEFAULT_BASE
        digit_list = list(digit_list)
        if lp is None:
            lp = len(digit_list)
        try:
            digits.validate(digit_list, base)
        except ValueError as e:
            raise cls.ConstructorValueError(str(e))
        if not 0 <= lp <= len(digit_list):
            raise cls.ConstructorValueError("lp {lp} is outside 0 to {len}".format(lp=lp, len=len(digit_list)))
        if sign not in (1, -1):
            raise cls.ConstructorValueError("Sign is +1 or -1, not {!r}".format(sign))
        return_value = cls.__new__(cls)
        return_value._set(digit_list, lp, sign, base, normalize)
        return return_value

    def _from_int(self, i, base, normalize):
        """Digits of a Python int, in base."""
        sign = -1 if i < 0 else 1
        i = abs(i)
        digit_list = []
        while i > 0:
            i, digit = divmod(i, base)
            digit_list.append(digit)
        digit_list.reverse()
        self._set(digit_list or [0], len(digit_list) or 1, sign, base, normalize)

    STRING_PATTERN = re.compile(r'^([+-]?)([0-9A-Za-z]*)(?:\.([0-9A-Za-z]*))?$')

    def _from_string(self, s, base, normalize):
        """
        Digits from text, e.g. '-12.50' or '.5' or '1F.8' (base 16).

        Digit characters are read in the number's own base.  No base conversion.
        """
        match = self.STRING_PATTERN.match(s.strip())
        if match is None or (match.group(2) == '' and not match.group(3)):
            raise self.ConstructorValueError("Not a fixed-point number: {}".format(repr(s)))
        sign_text, integer_text, fraction_text = match.groups()
        fraction_text = fraction_text or ''
        digit_list = []
        for character in integer_text + fraction_text:
            value = digits.digit_value(character, base)
            if value is None:
                raise self.ConstructorValueError("{character} is not a base {base} digit, in {s}".format(
                    character=repr(character),
                    base=base,
                    s=repr(s),
                ))
            digit_list.append(value)
        lp = len(integer_text)
        if lp == 0 and normalize:
            digit_list.insert(0, 0)
            lp = 1
        self._set(digit_list, lp, -1 if sign_text == '-' else 1, base, normalize)

    def _set(self, digit_list, lp, sign, base, normalize):
        digit_list = list(digit_list)
        if normalize:
            excess = digits.strip_leading_zeros(digit_list[0:lp])
            digit_list = digit_list[excess:]
            lp -= excess
            if lp == 0:
                digit_list.insert(0, 0)
                lp = 1
        if not any(digit_list):
            sign = 1
        self._digits = tuple(digit_list)
        self._lp = lp
        self._sign = sign
        self._base = base

    # Shape
    # -----
    @property
    def digits(self):
        return self._digits

    @property
    def lp(self):
        return self._lp

    @property
    def rp(self):
        return len(self._digits) - self._lp

    @property
    def sign(self):
        return self._sign

    @property
    def base(self):
        return self._base

    def __len__(self):
        return len(self._digits)

    def integer_digit_count(self):
        return self._lp

    def fractional_digit_count(self):
        return len(self._digits) - self._lp

    def is_zero(self):
        return not any(self._digits)

    def is_negative(self):
        return self._sign < 0

    def is_positive(self):
        return self._sign > 0 and not self.is_zero()

    def normalized(self):
        return type(self).from_digits(self._digits, self._lp, self._sign, self._base)

    def integer_digits(self):
        return self._digits[0:self._lp]

    def fractional_digits(self):
        return self._digits[self._lp:]

    # Rendering
    # ---------
    def __str__(self):
        """
        Handle str(Fixed(x))

            assert '-0.05' == str(Fixed('-.05'))
            assert '1:40.30' == str(Fixed.from_digits([1, 40, 30], lp=2, base=60))
        """
        if self._base <= len(digits.DIGIT_CHARACTERS):
            render, joiner = digits.digit_character, ''
        else:
            render, joiner = str, ':'
            # NOTE:  No single characters left, so e.g. base 60 renders 1:40.30 for 100.5
        integer_text = joiner.join(render(d) for d in self.integer_digits()) or '0'
        fraction_text = joiner.join(render(d) for d in self.fractional_digits())
        text = '-' + integer_text if self.is_negative() else integer_text
        if fraction_text:
            text += '.' + fraction_text
        return text

    def __repr__(self):
        """Handle repr(Fixed(x))"""
        if self._base > len(digits.DIGIT_CHARACTERS):
            return "Fixed.from_digits({digits}, lp={lp}, sign={sign}, base={base})".format(
                digits=list(self._digits),
                lp=self._lp,
                sign=self._sign,
                base=self._base,
            )
        elif self._base == self.DEFAULT_BASE:
            return "Fixed('{}')".format(str(self))
        else:
            return "Fixed('{}', base={})".format(str(self), self._base)

    def fraction(self):
        """Exact value as a fractions.Fraction."""
        numerator = 0
        for digit in self._digits:
            numerator = numerator * self._base + digit
        return fractions.Fraction(self._sign * numerator, self._base ** self.rp)

    def __int__(self):
        """Truncate toward zero, like int(float)."""
        return int(self.fraction())

    def __float__(self):
        return float(self.fraction())

    def __bool__(self):
        return not self.is_zero()

    # Comparison
    # ----------
    def __eq__(self, other):
        """Handle Fixed(x) == something"""
        other = self._coerce(other, same_base=False)
        if other is NotImplemented:
            return NotImplemented
        return self._compare(other) == 0

    def __ne__(self, other):
        eq_result = self.__eq__(other)
        if eq_result is NotImplemented:
            return NotImplemented
        return not eq_result

    def __lt__(self, other):  return self._compare(self._comparable(other)) <  0
    def __le__(self, other):  return self._compare(self._comparable(other)) <= 0
    def __gt__(self, other):  return self._compare(self._comparable(other)) >  0
    def __ge__(self, other):  return self._compare(self._comparable(other)) >= 0

    def __hash__(self):
        return hash(self.fraction())
        # NOTE:  So Fixed(3) and 3 hash alike, as do Fixed('0.5') and Fixed('0.1', base=2).

    def _comparable(self, other):
        """Make sure other can be compared.  Otherwise CompareError."""
        other_fixed = self._coerce(other, same_base=False)
        if other_fixed is NotImplemented:
            raise self.CompareError("Fixed cannot be compared with a " + type_name(other))
        return other_fixed

    def _compare(self, other):
        """-1, 0, or +1, as self is less than, equal to, or greater than other."""
        if self._base != other.base:
            left, right = self.fraction(), other.fraction()
            return (left > right) - (left < right)
            # NOTE:  Different bases are compared exactly, but not digit by digit.
        if self.is_zero() and other.is_zero():
            return 0
        if self._sign != other.sign:
            return self._sign
        return self._sign * compare_magnitudes(self, other)

    def _coerce(self, other, same_base=True):
        """Turn int or str into a Fixed in my base.  NotImplemented for anything else."""
        if isinstance(other, Fixed):
            if same_base and other.base != self._base:
                raise self.BaseMismatchError("Base {} cannot mix with base {}".format(self._base, other.base))
            return other
        elif isinstance(other, (int, str)):
            try:
                return type(self)(other, base=self._base)
            except self.ConstructorValueError:
                return NotImplemented
        else:
            return NotImplemented

    def _operand(self, other):
        """Like _coerce() but for the named methods, add(), div(), etc.  Raise instead of NotImplemented."""
        other_fixed = self._coerce(other)
        if other_fixed is NotImplemented:
            raise self.ConstructorTypeError("Cannot do arithmetic with a {} in base {}: {}".format(
                type_name(other),
                self._base,
                repr(other),
            ))
        return other_fixed

    # Math
    # ----
    def __pos__(self): return self.normalized()
    def __neg__(self): return type(self).from_digits(self._digits, self._lp, -self._sign, self._base)
    def __abs__(self): return type(self).from_digits(self._digits, self._lp, 1, self._base)

    def __add__(self, other): return self._binary_op(Fixed.add, self, other)
    def __radd__(self, other): return self._binary_op(Fixed.add, other, self)
    def __sub__(self, other): return self._binary_op(Fixed.sub, self, other)
    def __rsub__(self, other): return self._binary_op(Fixed.sub, other, self)
    def __mul__(self, other): return self._binary_op(Fixed.mul, self, other)
    def __rmul__(self, other): return self._binary_op(Fixed.mul, other, self)
    def __truediv__( self, other): return self._binary_op(Fixed.div, self, other)
    def __rtruediv__(self, other): return self._binary_op(Fixed.div, other, self)
    def __mod__( self, other): return self._binary_op(Fixed.mod, self, other)
    def __rmod__(self, other): return self._binary_op(Fixed.mod, other, self)

    @staticmethod
    def _binary_op(method, input_left, input_right):
        """Two-input operator.  One of the inputs is a Fixed, the other may be int or str."""
        if isinstance(input_left, Fixed):
            input_right = input_left._coerce(input_right)
        else:
            input_left = input_right._coerce(input_left)
        if input_left is NotImplemented or input_right is NotImplemented:
            return NotImplemented
        return method(input_left, input_right)

    def add(self, other):
        """
        Exact sum.

            assert '10.05' == str(Fixed('9.99').add(Fixed('0.06')))
        """
        other = self._operand(other)
        if self._sign == other.sign:
            digit_list, lp = add_magnitudes(self, other)
            return type(self).from_digits(digit_list, lp, self._sign, self._base)
        comparison = compare_magnitudes(self, other)
        if comparison == 0:
            digit_list, lp = subtract_magnitudes(self, other)
            return type(self).from_digits(digit_list, lp, 1, self._base)
            # NOTE:  Zero, but with the scale of the wider operand, e.g. 1.50 - 1.5 == 0.00
        elif comparison > 0:
            digit_list, lp = subtract_magnitudes(self, other)
            return type(self).from_digits(digit_list, lp, self._sign, self._base)
        else:
            digit_list, lp = subtract_magnitudes(other, self)
            return type(self).from_digits(digit_list, lp, other.sign, self._base)

    def sub(self, other):
        """Exact difference."""
        return self.add(-self._operand(other))

    def mul(self, other, scale=None):
        """
        Product, keeping min(self.rp + other.rp, max(scale, self.rp, other.rp)) fractional digits.

        That is the bc rule.  Extra digits are truncated.  scale=None keeps them all.

            assert '0.0625' == str(Fixed('0.25').mul(Fixed('0.25')))
            assert '0.06' == str(Fixed('0.25').mul(Fixed('0.25'), scale=0))
        """
        other = self._operand(other)
        product = [0] * (len(self) + len(other))
        digits.multiply(self._digits, len(self), other.digits, len(other), product, self._base)
        lp = self._lp + other.lp
        if scale is not None:
            keep = min(self.rp + other.rp, max(scale, self.rp, other.rp))
            product = product[0:lp + keep]
        sign = -1 if self._sign != other.sign else 1
        return type(self).from_digits(product, lp, sign, self._base)

    def div(self, other, scale=None):
        """
        Quotient, truncated to scale fractional digits.

            assert '0.33' == str(Fixed(1).div(Fixed(3), scale=2))
        """
        if scale is None:
            scale = self.DEFAULT_SCALE
        return division.divide(self, self._operand(other), base=self._base, scale=scale)

    def mod(self, other, scale=None):
        """
        Modulus, self - other * (self / other), with the quotient truncated to scale.

        The sign follows self, as with C and bc, not Python's % on ints.

            assert '1' == str(Fixed(7).mod(Fixed(3), scale=0))
            assert '-1' == str(Fixed(-7).mod(Fixed(3), scale=0))
        """
        other = self._operand(other)
        quotient = self.div(other, scale=scale)
        return self.sub(other.mul(quotient))


def compare_magnitudes(a, b):
    """-1, 0, or +1, comparing absolute values of two same-base numbers."""
    a_digits, b_digits, _ = _aligned(a, b)
    return (a_digits > b_digits) - (a_digits < b_digits)


def _aligned(a, b, guard=0):
    """
    Digits of a and b padded to the same integer and fractional widths.

    guard adds that many more leading zeros, room for a carry.
    """
    a = strip_leading_zeros(a)
    b = strip_leading_zeros(b)
    lp = max(a.lp, b.lp) + guard
    rp = max(a.rp, b.rp)
    a_digits = [0] * (lp - a.lp) + list(a.digits) + [0] * (rp - a.rp)
    b_digits = [0] * (lp - b.lp) + list(b.digits) + [0] * (rp - b.rp)
    return a_digits, b_digits, lp


def add_magnitudes(a, b):
    """|a| + |b| as (digits, lp)"""
    a_digits, b_digits, lp = _aligned(a, b, guard=1)
    last = len(a_digits) - 1
    digits.add_range(a_digits, last, b_digits, last, a.base)
    return a_digits, lp


def subtract_magnitudes(a, b):
    """|a| - |b| as (digits, lp), for |a| >= |b|"""
    a_digits, b_digits, lp = _aligned(a, b)
    last = len(a_digits) - 1
    borrow = digits.subtract_range(a_digits, last, b_digits, last, a.base)
    assert borrow == 0, "|{}| < |{}|".format(a, b)
    return a_digits, lp


def strip_leading_zeros(number):
    """Canonical copy of a number, leading integer zeros gone, except one."""
    return number.normalized()


def type_name(x):
    """Describe (very briefly) what type of object this is."""
    return type(x).__name__
assert 'int' == type_name(3)
assert 'list' == type_name([])
