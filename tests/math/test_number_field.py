from numfield.math.algebra.fields.number_field import NumberField, QuadraticField, CyclotomicField
from numfield.math.multivariate_polynomial import dim_symbol, qqx, x
from numfield.utilities.exceptions import CoercionException, NotInvertibleException
from fractions import Fraction
from sympy import Rational
import unittest

K = NumberField(x**2 - 2)
a = K.generator


class NumberFieldTestCase(unittest.TestCase):
    def test_min_poly(self):
        self.assertEqual(K.compute_min_poly(a), qqx(x**2 - 2))
        self.assertEqual(K.compute_min_poly(a + 1), qqx(x**2 - 2*x - 1))
        self.assertEqual(K(3).minimal_polynomial(), qqx(x - 3))


    def test_arithmetic(self):
        self.assertEqual(a*a, K(2))
        self.assertEqual(K.exp(a, 3), 2*a)
        self.assertEqual((a + 1) - a, K.one)
        self.assertEqual(-a + a, K.zero)
        self.assertEqual(K(2) / K(4), K(Fraction(1, 2)))


    def test_inverse(self):
        self.assertEqual(~a, K(x/2))
        self.assertEqual(a.inverse(), a**-1)
        self.assertEqual(a * ~a, K.one)
        self.assertFalse((~a).is_zero())
        self.assertEqual(a.negate(), -a)
        self.assertTrue(K(7).is_rational())
        self.assertFalse(a.is_rational())


    def test_inverse_of_zero(self):
        with self.assertRaises(NotInvertibleException):
            ~K.zero

        with self.assertRaises(NotInvertibleException):
            a / 0


    def test_norm_trace(self):
        self.assertEqual(a.norm(), -2)
        self.assertEqual((a + 1).norm(), -1)
        self.assertEqual((a + 1).trace(), 2)


    def test_evaluate(self):
        self.assertTrue(K.evaluate(x**2 - 2, a).is_zero())
        self.assertEqual(K.evaluate(x**3, a + 1), (a + 1)**3)


    def test_mixed_fields(self):
        L = NumberField(x**2 - 3)

        with self.assertRaises(CoercionException):
            a + L.generator

        self.assertFalse(a == L.generator)


    def test_bad_coercion(self):
        with self.assertRaises(CoercionException):
            K(dim_symbol(0)*dim_symbol(1))


    def test_not_a_field(self):
        with self.assertRaises(ValueError):
            NumberField(3)


    def test_non_monic(self):
        L = NumberField(2*x**2 - 1)
        t = L.generator

        self.assertEqual(L.min_poly, qqx(x**2 - Rational(1, 2)))
        self.assertEqual(L.scale, 2)
        self.assertEqual(L.int_poly, qqx(x**2 - 2))
        self.assertEqual(t*t, L(Fraction(1, 2)))

        d, o = L.O.make_o_el(t)
        self.assertEqual(d, 2)
        self.assertEqual(o, L.O([1, 0]))
        self.assertEqual(L.O.order_el_to_f_elem((d, o)), t)


    def test_printing(self):
        self.assertEqual(str(a + 1), 'z + 1')
        self.assertEqual(K.shorthand(), 'QQ[z]/(z**2 - 2)')


    def test_quadratic_field(self):
        with self.assertRaises(ValueError):
            QuadraticField(4)

        i = QuadraticField(-1).generator
        self.assertEqual(i*i, -1)


    def test_cyclotomic_field(self):
        F = CyclotomicField(5)
        self.assertEqual(F.degree(), 4)
        self.assertEqual(F.generator**5, F.one)
        self.assertNotEqual(F.generator, F.one)


    def test_make_elem_idempotent(self):
        C = NumberField(x**3 + x**2 - 2*x + 8)
        c = C.generator

        for e in [a, a + 1, ~a, K(Fraction(3, 7)), K.zero]:
            self.assertEqual(K.make_elem(e.val), e)

        for e in [c, c**2 - 5, ~(c + 1), c**4]:
            self.assertEqual(C.make_elem(e.val), e)
            self.assertLess(e.val.degree(), 3)


    def test_cubic_field(self):
        C = NumberField(x**3 + x**2 - 2*x + 8)
        c = C.generator

        self.assertEqual(C.degree(), 3)
        self.assertEqual(C.compute_min_poly(c), qqx(x**3 + x**2 - 2*x + 8))
        self.assertEqual(c**3, -c**2 + 2*c - 8)
        self.assertEqual(c * ~c, C.one)
        self.assertEqual(c.norm(), -8)
