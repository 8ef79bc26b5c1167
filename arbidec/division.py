"""
Long division of fixed-point numbers to a chosen scale - Knuth's Algorithm D.

Knuth, The Art of Computer Programming, volume 2, section 4.3.1, Algorithm D.
Adapted here to numbers with a radix point, in any base, truncated (never rounded)
to a requested number of fractional digits, the scale.

    assert '333.3333' == str(divide(Fixed(1000), Fixed(3), scale=4))

Outline, with u the working dividend and v the working divisor:

    D1. Normalize.  Multiply u and v by one digit so v[0] >= base/2.
    D3. Guess a quotient digit from u[i], u[i+1] and v[0].  Refine it with u[i+2] and v[1].
        After that the guess is right, or one too high.
    D4. Multiply and subtract.  u[i:i+width+1] -= guess * v
    D6. Add back.  If D4 went negative, the guess was one too high.  Undo one v.

The remainder is not computed.  Modulus is a - b*(a/b), see Fixed.mod().
"""

import collections
import logging

from arbidec import digits


logger = logging.getLogger(__name__)


class DivisionByZero(ZeroDivisionError):
    """e.g. divide(Fixed(7), Fixed(0))"""


Sizing = collections.namedtuple('Sizing', [
    'int_width',         # integer digits of the dividend + fractional digits of the divisor
    'frac_delta',        # fractional digits of the dividend - fractional digits of the divisor
    'offset',            # extra dividend slots so there are enough digits to reach the scale
    'divisor_width',     # divisor digits, not counting leading zeros
    'produced_digits',   # quotient digits the loop will fill in
    'first_output',      # quotient position of the first digit the loop produces
    'out_of_scale',      # True if the quotient is zero at this scale, and there is no loop
])


def sizing(dividend_len, dividend_lp, divisor_len, divisor_lp, divisor_width, scale):
    """
    The shape of a division, from the shapes of its operands and the scale.

    lp is the count of integer digits, len the count of all digits.
    """
    divisor_rp = divisor_len - divisor_lp
    int_width = dividend_lp + divisor_rp
    frac_delta = (dividend_len - dividend_lp) - divisor_rp
    offset = scale - frac_delta if frac_delta < scale else 0
    out_of_scale = divisor_width > int_width + scale
    if divisor_width > int_width:
        produced_digits = scale + 1
        first_output = divisor_width - int_width
    else:
        produced_digits = int_width - divisor_width + scale + 1
        first_output = 0
    return Sizing(
        int_width=int_width,
        frac_delta=frac_delta,
        offset=offset,
        divisor_width=divisor_width,
        produced_digits=produced_digits,
        first_output=first_output,
        out_of_scale=out_of_scale,
    )


def normalizer(leading_digit, base):
    """The single-digit factor that brings a divisor's leading digit up to at least base/2."""
    return base // (leading_digit + 1)


def trial_digit(u, i, v, base):
    """
    Estimate the quotient digit for the window starting at u[i].  (Step D3)

    The two-digit estimate can be at most 2 too high.  Testing it against v[1] and u[i+2]
    takes that down to at most 1 too high, which is what the add-back step is for.
    """
    if u[i] == v[0]:
        guess = base - 1
    else:
        guess = (u[i] * base + u[i+1]) // v[0]
    for _ in range(2):
        if v[1] * guess > (u[i] * base + u[i+1] - v[0] * guess) * base + u[i+2]:
            guess -= 1
        else:
            break
    return guess


def long_divide(dividend_digits, dividend_lp, divisor_digits, divisor_lp, base, scale, norm=None):
    """
    Divide digit sequences.  Return (quotient_digits, quotient_lp).

    The operand sequences are only read, never modified.
    Quotient leading zeros are stripped, down to one integer digit.
    The quotient always has exactly scale fractional digits.

    norm overrides the normalizing factor.  Any factor that raises the leading divisor digit
    to at least base/2, without carrying out of the divisor, gives the same quotient.

    Each call makes its own working copies and scratch buffer, and shares nothing,
    so independent threads may divide at once.
    """
    if not any(divisor_digits):
        raise DivisionByZero("Division by zero")
    if scale < 0:
        raise ValueError("Scale cannot be negative: {}".format(scale))

    leading = digits.strip_leading_zeros(divisor_digits)
    size = sizing(
        len(dividend_digits),
        dividend_lp,
        len(divisor_digits),
        divisor_lp,
        len(divisor_digits) - leading,
        scale,
    )
    logger.debug("Dividing %d digits by %d at scale %d: %s", len(dividend_digits), len(divisor_digits), scale, size)

    quotient = [0] * size.produced_digits
    quotient_lp = size.produced_digits - scale
    if size.out_of_scale:
        logger.debug("Divisor is too wide, quotient is zero at scale %d", scale)
        return _finish(quotient, quotient_lp)

    width = size.divisor_width
    u = [0] + list(dividend_digits) + [0] * (size.offset + 2)
    v = list(divisor_digits[leading:]) + [0] * (size.offset + 3)
    # NOTE:  u[0] is the guard slot.  Normalizing can carry into it, never past it.
    # EXAMPLE:  1000 / 3, scale 4:  u = [0, 1,0,0,0, 0,0,0,0, 0,0]  v = [3, 0,0,0,0,0,0,0]
    product = [0] * (width + 1)

    if norm is None:
        norm = normalizer(v[0], base)
    if norm != 1:
        digits.scale(u, len(dividend_digits) + size.offset + 1, norm, u, base)
        digits.scale(v, width, norm, v, base)
        # NOTE:  A norm too big for this divisor carries out of v, and scale() raises DigitOverflowError.
    if v[0] < base // 2:
        raise ValueError("Normalizer {norm} leaves leading divisor digit {digit} under half of {base}".format(
            norm=norm,
            digit=v[0],
            base=base,
        ))

    j = size.first_output
    for i in range(size.int_width + scale - width + 1):
        guess = trial_digit(u, i, v, base)
        if guess != 0:
            digits.multiply(v, width, [guess], 1, product, base)
            if digits.subtract_range(u, i + width, product, width, base):
                guess -= 1
                digits.add_range(u, i + width, v, width - 1, base)
                # NOTE:  The carry out of the top of the window cancels the borrow.  Drop it.
        quotient[j] = guess
        j += 1

    return _finish(quotient, quotient_lp)


def _finish(quotient, quotient_lp):
    """Strip leading zeros from the integer part, keeping one."""
    excess = digits.strip_leading_zeros(quotient[0:quotient_lp])
    return quotient[excess:], quotient_lp - excess


def divide(dividend, divisor, base=None, scale=0):
    """
    Quotient of two Fixed numbers, truncated to scale fractional digits.

    The sign is negative when exactly one operand is.
    Raises DivisionByZero, before doing anything else, if the divisor is zero.
    """
    if divisor.is_zero():
        raise DivisionByZero("Cannot divide {} by zero".format(dividend))
    if base is None:
        base = dividend.base
    if dividend.base != base or divisor.base != base:
        raise dividend.BaseMismatchError("Cannot divide base {} by base {} in base {}".format(
            dividend.base,
            divisor.base,
            base,
        ))

    quotient_digits, quotient_lp = long_divide(
        dividend.digits,
        dividend.integer_digit_count(),
        divisor.digits,
        divisor.integer_digit_count(),
        base,
        scale,
    )
    sign = -1 if dividend.is_negative() != divisor.is_negative() else 1
    return type(dividend).from_digits(quotient_digits, quotient_lp, sign=sign, base=base)
