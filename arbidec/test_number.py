"""
Unit tests for Fixed
"""

import fractions
import unittest

from arbidec import number
from arbidec.number import Fixed


class ConstructorTests(unittest.TestCase):

    def test_string(self):
        n = Fixed('12.50')
        self.assertEqual((1, 2, 5, 0), n.digits)
        self.assertEqual(2, n.lp)
        self.assertEqual(2, n.rp)
        self.assertEqual('12.50', str(n))

    def test_string_shapes(self):
        self.assertEqual('0.5', str(Fixed('.5')))
        self.assertEqual('5', str(Fixed('5.')))
        self.assertEqual('-0.05', str(Fixed('-.05')))
        self.assertEqual('7', str(Fixed('+7')))
        self.assertEqual('7.50', str(Fixed('007.50')))
        self.assertEqual('0.000', str(Fixed('000.000')))

    def test_not_normalized(self):
        n = Fixed('007.50', normalize=False)
        self.assertEqual((0, 0, 7, 5, 0), n.digits)
        self.assertEqual(3, n.lp)
        self.assertEqual('007.50', str(n))
        self.assertEqual('7.50', str(number.strip_leading_zeros(n)))
        self.assertEqual(Fixed('7.5'), n)

    def test_negative_zero(self):
        self.assertFalse(Fixed('-0').is_negative())
        self.assertEqual('0.00', str(Fixed('-0.00')))
        self.assertFalse((-Fixed(0)).is_negative())

    def test_int(self):
        self.assertEqual('-42', str(Fixed(-42)))
        self.assertEqual('0', str(Fixed(0)))
        self.assertEqual('0', str(Fixed()))
        self.assertEqual('FF', str(Fixed(255, base=16)))
        self.assertEqual('101', str(Fixed(5, base=2)))
        self.assertEqual(10 ** 50, int(Fixed(10 ** 50)))

    def test_other_base_text(self):
        self.assertEqual(Fixed(255, base=16), Fixed('ff', base=16))
        self.assertEqual('1Z.Z', str(Fixed('1z.z', base=36)))

    def test_copy(self):
        n = Fixed('-3.25')
        self.assertEqual(n, Fixed(n))
        self.assertEqual(16, Fixed(Fixed(1, base=16)).base)

    def test_from_digits(self):
        self.assertEqual(Fixed('-12.5'), Fixed.from_digits([1, 2, 5], lp=2, sign=-1))
        self.assertEqual(Fixed(125), Fixed.from_digits([1, 2, 5]))
        self.assertEqual('0.05', str(Fixed.from_digits([0, 5], lp=0)))
        self.assertEqual('1:40.30', str(Fixed.from_digits([1, 40, 30], lp=2, base=60)))

    def test_type_errors(self):
        with self.assertRaises(Fixed.ConstructorTypeError):
            Fixed(1.5)
        with self.assertRaises(Fixed.ConstructorTypeError):
            Fixed(object())
        with self.assertRaises(TypeError):
            Fixed([1, 2])

    def test_value_errors(self):
        for bad in ('', '.', 'abc', '1.2.3', '1e5', '--1', '1 2', '0x10'):
            with self.subTest(bad=bad):
                with self.assertRaises(Fixed.ConstructorValueError):
                    Fixed(bad)
        with self.assertRaises(Fixed.ConstructorValueError):
            Fixed('9', base=8)
        with self.assertRaises(ValueError):
            Fixed(1, base=1)
        with self.assertRaises(Fixed.ConstructorValueError):
            Fixed(Fixed(1), base=2)

    def test_from_digits_errors(self):
        with self.assertRaises(Fixed.ConstructorValueError):
            Fixed.from_digits([1, 60], base=60)
        with self.assertRaises(Fixed.ConstructorValueError):
            Fixed.from_digits([1, 2], lp=3)
        with self.assertRaises(Fixed.ConstructorValueError):
            Fixed.from_digits([1, 2], lp=-1)
        with self.assertRaises(Fixed.ConstructorValueError):
            Fixed.from_digits([1, 2], sign=0)


class ShapeTests(unittest.TestCase):

    def test_counts(self):
        n = Fixed('-123.4567')
        self.assertEqual(3, n.integer_digit_count())
        self.assertEqual(4, n.fractional_digit_count())
        self.assertEqual(7, len(n))
        self.assertEqual((1, 2, 3), n.integer_digits())
        self.assertEqual((4, 5, 6, 7), n.fractional_digits())

    def test_zero(self):
        self.assertTrue(Fixed('0.000').is_zero())
        self.assertFalse(Fixed('0.001').is_zero())
        self.assertFalse(Fixed(0))
        self.assertTrue(Fixed(1))

    def test_sign(self):
        self.assertTrue(Fixed(-1).is_negative())
        self.assertTrue(Fixed(1).is_positive())
        self.assertFalse(Fixed(0).is_positive())
        self.assertEqual(-1, Fixed('-0.1').sign)

    def test_digits_are_read_only(self):
        n = Fixed('12')
        with self.assertRaises(TypeError):
            n.digits[0] = 9


class RenderTests(unittest.TestCase):

    def test_repr(self):
        self.assertEqual("Fixed('-1.5')", repr(Fixed('-1.5')))
        self.assertEqual("Fixed('1F', base=16)", repr(Fixed('1f', base=16)))
        self.assertEqual(
            "Fixed.from_digits([1, 40, 30], lp=2, sign=-1, base=60)",
            repr(Fixed.from_digits([1, 40, 30], lp=2, sign=-1, base=60)),
        )

    def test_fraction(self):
        self.assertEqual(fractions.Fraction(-5, 4), Fixed('-1.25').fraction())
        self.assertEqual(fractions.Fraction(1, 2), Fixed('0.1', base=2).fraction())
        self.assertEqual(fractions.Fraction(201, 2), Fixed.from_digits([1, 40, 30], lp=2, base=60).fraction())

    def test_int_float(self):
        self.assertEqual(-2, int(Fixed('-2.7')))
        self.assertEqual(2, int(Fixed('2.7')))
        self.assertEqual(0.5, float(Fixed('0.5')))


class CompareTests(unittest.TestCase):

    def test_equal(self):
        self.assertEqual(Fixed('1.50'), Fixed('1.5'))
        self.assertEqual(Fixed('1.5'), '1.5')
        self.assertEqual(Fixed(3), 3)
        self.assertEqual(3, Fixed(3))
        self.assertEqual(Fixed('0'), Fixed('-0.000'))
        self.assertNotEqual(Fixed('1.5'), Fixed('1.05'))
        self.assertNotEqual(Fixed('1'), Fixed('-1'))

    def test_equal_other_types(self):
        self.assertFalse(Fixed(1) == object())
        self.assertTrue(Fixed(1) != object())
        self.assertTrue(Fixed(1) != 'abc')

    def test_equal_across_bases(self):
        self.assertEqual(Fixed('0.5'), Fixed('0.1', base=2))
        self.assertEqual(Fixed(255), Fixed('FF', base=16))
        self.assertLess(Fixed(254), Fixed('FF', base=16))

    def test_hash(self):
        self.assertEqual(hash(Fixed('1.50')), hash(Fixed('1.5')))
        self.assertEqual(hash(Fixed(3)), hash(3))
        self.assertEqual(hash(Fixed('0.5')), hash(Fixed('0.1', base=2)))
        self.assertEqual(1, len({Fixed('2'), Fixed('2.0'), Fixed('02.000')}))

    def test_order(self):
        self.assertLess(Fixed('-2'), Fixed('1'))
        self.assertLess(Fixed('-2'), Fixed('-1.5'))
        self.assertGreater(Fixed('0'), Fixed('-0.1'))
        self.assertGreater(Fixed('10'), Fixed('9.99'))
        self.assertLessEqual(Fixed('9.990'), Fixed('9.99'))
        self.assertGreaterEqual(Fixed('0.001'), 0)
        self.assertLess(Fixed('0.001'), '0.01')

    def test_sort(self):
        numbers = [Fixed(x) for x in ('3', '-1.5', '0.25', '-10', '0', '2.999')]
        self.assertEqual(['-10', '-1.5', '0', '0.25', '2.999', '3'], [str(n) for n in sorted(numbers)])

    def test_compare_error(self):
        with self.assertRaises(Fixed.CompareError):
            Fixed(1) < object()
        with self.assertRaises(Fixed.CompareError):
            Fixed(1) >= 1.5


class AddSubtractTests(unittest.TestCase):

    def test_add(self):
        self.assertEqual('10.05', str(Fixed('9.99').add(Fixed('0.06'))))
        self.assertEqual('10.05', str(Fixed('9.99') + Fixed('0.06')))
        self.assertEqual('1000', str(Fixed(999) + 1))
        self.assertEqual('-2', str(Fixed(-5) + 3))
        self.assertEqual('-2', str(3 + Fixed(-5)))
        self.assertEqual('-12.75', str(Fixed('-10.5') + Fixed('-2.25')))

    def test_add_to_zero_keeps_scale(self):
        self.assertEqual('0.0', str(Fixed('-1.5') + Fixed('1.5')))
        self.assertEqual('0.00', str(Fixed('1.50') - Fixed('1.5')))

    def test_subtract(self):
        self.assertEqual('0.999', str(Fixed(1) - Fixed('0.001')))
        self.assertEqual('-0.5', str(Fixed('0.5') - 1))
        self.assertEqual('0.5', str(1 - Fixed('0.5')))
        self.assertEqual('8', str(Fixed(5) - Fixed(-3)))
        self.assertEqual('-8', str(Fixed(-5).sub(3)))

    def test_other_base(self):
        self.assertEqual('10', str(Fixed('F', base=16) + Fixed(1, base=16)))
        self.assertEqual('0.1', str(Fixed('1', base=2) - Fixed('0.1', base=2)))

    def test_base_mismatch(self):
        with self.assertRaises(Fixed.BaseMismatchError):
            Fixed(1) + Fixed(1, base=2)

    def test_unsupported_operand(self):
        with self.assertRaises(TypeError):
            Fixed(1) + 1.5
        with self.assertRaises(TypeError):
            Fixed(1).add(1.5)

    def test_negate(self):
        self.assertEqual('-1.5', str(-Fixed('1.5')))
        self.assertEqual('2', str(abs(Fixed('-2'))))
        self.assertEqual('7.50', str(+Fixed('007.50', normalize=False)))


class MultiplyTests(unittest.TestCase):

    def test_exact(self):
        self.assertEqual('0.0625', str(Fixed('0.25').mul(Fixed('0.25'))))
        self.assertEqual('-3.0', str(Fixed('1.5') * Fixed('-2')))
        self.assertEqual('15241578750190521', str(Fixed(123456789) * 123456789))
        self.assertEqual('0', str(Fixed(0) * Fixed(-7)))
        self.assertFalse((Fixed(0) * Fixed(-7)).is_negative())

    def test_scale(self):
        self.assertEqual('0.06', str(Fixed('0.25').mul(Fixed('0.25'), scale=0)))
        self.assertEqual('0.062', str(Fixed('0.25').mul('0.25', scale=3)))
        self.assertEqual('0.0625', str(Fixed('0.25').mul('0.25', scale=10)))
        self.assertEqual('-0.06', str(Fixed('-0.25').mul('0.25', scale=1)))

    def test_other_base(self):
        self.assertEqual('E1', str(Fixed('F', base=16) * Fixed('F', base=16)))


class DivideModTests(unittest.TestCase):

    def test_div(self):
        self.assertEqual('0.33', str(Fixed(1).div(Fixed(3), scale=2)))
        self.assertEqual('0.' + '3' * Fixed.DEFAULT_SCALE, str(Fixed(1) / Fixed(3)))
        self.assertEqual('-333.3333', str(Fixed(-1000).div(3, scale=4)))
        self.assertEqual(Fixed('0.5'), 1 / Fixed(2))

    def test_div_by_zero(self):
        with self.assertRaises(Fixed.DivisionByZero):
            Fixed(7) / 0
        with self.assertRaises(ZeroDivisionError):
            Fixed(7).div(Fixed('0.0'), scale=3)

    def test_div_base_mismatch(self):
        with self.assertRaises(Fixed.BaseMismatchError):
            Fixed(1) / Fixed(1, base=2)

    def test_mod(self):
        self.assertEqual('1', str(Fixed(7).mod(Fixed(3), scale=0)))
        self.assertEqual('-1', str(Fixed(-7).mod(Fixed(3), scale=0)))
        self.assertEqual('1', str(Fixed(7).mod(Fixed(-3), scale=0)))
        self.assertEqual('1.5', str(Fixed('5.5').mod(2, scale=0)))

    def test_mod_default_scale(self):
        remainder = Fixed(7) % Fixed(3)
        self.assertEqual(fractions.Fraction(1, 10 ** Fixed.DEFAULT_SCALE), remainder.fraction())
        self.assertEqual(fractions.Fraction(1, 10 ** Fixed.DEFAULT_SCALE), (7 % Fixed(3)).fraction())

    def test_mod_by_zero(self):
        with self.assertRaises(Fixed.DivisionByZero):
            Fixed(7) % Fixed(0)

    def test_mod_identity(self):
        for a, b, scale in (('100', '7', 0), ('-22.5', '4', 1), ('0.1234', '0.01', 2), ('99', '100', 0)):
            with self.subTest(a=a, b=b, scale=scale):
                a, b = Fixed(a), Fixed(b)
                quotient = a.div(b, scale=scale)
                self.assertEqual(a, quotient * b + a.mod(b, scale=scale))

    def test_default_scale_is_configurable(self):

        class ShortFixed(Fixed):
            DEFAULT_SCALE = 3

        self.assertEqual('0.333', str(ShortFixed(1) / ShortFixed(3)))
        self.assertIsInstance(ShortFixed(1) / ShortFixed(3), ShortFixed)


if __name__ == '__main__':
    unittest.main()
