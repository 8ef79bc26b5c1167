"""
arbidec - Fixed-point numbers of any size, in any base, with long division to any scale.

Usage example:

    import arbidec

    third = arbidec.Fixed(1) / arbidec.Fixed(3)        # to Fixed.DEFAULT_SCALE digits
    assert '333.3333' == str(arbidec.divide(arbidec.Fixed(1000), arbidec.Fixed(3), scale=4))

Usage example:

    from arbidec import Fixed, DivisionByZero

    try:
        Fixed(7).div(Fixed(0), scale=2)
    except DivisionByZero:
        ...
"""

from .number import Fixed
from .division import divide
from .division import long_divide
from .division import DivisionByZero
from .digits import DigitValueError
from .digits import DigitOverflowError
from .digits import BaseError

__all__ = [
    'Fixed',
    'divide',
    'long_divide',
    'DivisionByZero',
    'DigitValueError',
    'DigitOverflowError',
    'BaseError',
]

from . import version
__version__ = version.__doc__
