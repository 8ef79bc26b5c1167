"""
Digit-array primitives - the carry and borrow loops underneath every arbidec operation.

A digit sequence is a plain list of ints, most significant digit first, each in range(base).
Nothing here knows where the radix point is.  That is the business of arbidec.number.

The ranged functions work on a window of a larger buffer, named by the index of its
LAST (least significant) digit and a digit count, so one scratch buffer can be reused
by every step of a long division:

    subtract_range(u, 5, v, 2, 10)     # u[3:6] -= v[0:3]
"""


DIGIT_CHARACTERS = '0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ'


class BaseError(ValueError):
    """e.g. a base of 1 or 0"""


class DigitValueError(ValueError):
    """e.g. digit 10 in base 10"""


class DigitOverflowError(OverflowError):
    """e.g. scale() carried out of a window that has no spare leading slot"""


def validate(sequence, base):
    """Make sure base is sane and every digit is in range(base)."""
    if not isinstance(base, int) or base < 2:
        raise BaseError("Base must be an integer 2 or more, not {!r}".format(base))
    for index, digit in enumerate(sequence):
        if not isinstance(digit, int) or not 0 <= digit < base:
            raise DigitValueError("Digit {index} is {digit!r}, not in range({base})".format(
                index=index,
                digit=digit,
                base=base,
            ))


def scale(src, length, digit, dst, base, start=0):
    """
    Multiply the digits src[start:start+length] by a single digit, into dst[start:start+length].

    A nonzero final carry goes into dst[start-1], the spare leading slot.
    src and dst may be the same list.

        d = [0, 4, 5]
        scale(d, 2, 3, d, 10, start=1)
        assert d == [1, 3, 5]           # 45 * 3 == 135
    """
    if digit == 0:
        dst[start:start+length] = [0] * length
    elif digit == 1:
        dst[start:start+length] = src[start:start+length]
        # NOTE:  Neither shortcut can carry, so neither needs the spare slot.
    else:
        carry = 0
        for i in range(start + length - 1, start - 1, -1):
            value = src[i] * digit + carry
            dst[i] = value % base
            carry = value // base
        if carry != 0:
            if start == 0:
                raise DigitOverflowError("Carry {carry} has no leading slot to go into".format(carry=carry))
            dst[start-1] = carry


def multiply_by_digit(sequence, length, digit, base):
    """Standalone single-digit multiply.  Returns length+1 digits, the first being the carry."""
    result = [0] + list(sequence[0:length])
    scale(result, length, digit, result, base, start=1)
    return result


def subtract_range(u, u_end, v, v_end, base):
    """
    In-place u[u_end-v_end:u_end+1] -= v[0:v_end+1].  Return the borrow out, 0 or 1.

    A borrow of 1 means the window went negative.  Its digits are then the base-complement.
    """
    borrow = 0
    i = u_end
    for k in range(v_end, -1, -1):
        value = u[i] - v[k] - borrow
        borrow = 0
        if value < 0:
            value += base
            borrow = 1
        u[i] = value
        i -= 1
    return borrow


def add_range(u, u_end, v, v_end, base):
    """In-place u[u_end-v_end:u_end+1] += v[0:v_end+1].  Return the carry out, 0 or 1."""
    carry = 0
    i = u_end
    for k in range(v_end, -1, -1):
        value = u[i] + v[k] + carry
        carry = 0
        if value >= base:
            value -= base
            carry = 1
        u[i] = value
        i -= 1
    return carry


def multiply(a, a_len, b, b_len, dst, base):
    """
    Schoolbook long multiplication, a[0:a_len] * b[0:b_len] into dst[0:a_len+b_len].

    dst is overwritten, it need not start out zeroed.
    """
    dst[0:a_len+b_len] = [0] * (a_len + b_len)
    for k in range(b_len - 1, -1, -1):
        b_digit = b[k]
        if b_digit == 0:
            continue
        carry = 0
        for i in range(a_len - 1, -1, -1):
            position = i + k + 1
            value = dst[position] + a[i] * b_digit + carry
            dst[position] = value % base
            carry = value // base
        dst[k] += carry
        # NOTE:  dst[k] has not been touched by any higher b digit yet, so this never exceeds base-1.
    return dst


def strip_leading_zeros(sequence, keep=1):
    """How many leading zero digits can go, leaving at least keep digits?"""
    count = 0
    while count < len(sequence) - keep and sequence[count] == 0:
        count += 1
    return count


def digit_character(digit):
    return DIGIT_CHARACTERS[digit]


def digit_value(character, base):
    """Value of a digit character in a base, or None if it's not a digit there."""
    value = DIGIT_CHARACTERS.find(character.upper())
    if value < 0 or value >= base:
        return None
    return value
