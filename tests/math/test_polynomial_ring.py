from numfield.math.algebra.fields.number_field import NumberField
from numfield.math.multivariate_polynomial import dim_symbol, make_multivariate, make_univariate, qqx, x
from numfield.utilities.exceptions import NotLinearException, NotUnivariateException
from sympy import Rational
import unittest

K = NumberField(x**2 - 2)
P = K.X
a = K.generator
y = P.symbol

x_0, x_1, x_2 = dim_symbol(0), dim_symbol(1), dim_symbol(2)


class FieldPolynomialRingTestCase(unittest.TestCase):
    def test_arithmetic(self):
        f = P.lift(x**2 - 2)
        self.assertEqual((y - a)*(y + a), f)
        self.assertEqual(f - f, P.zero)
        self.assertEqual(f.degree(), 2)
        self.assertEqual(P.zero.degree(), -1)
        self.assertEqual(f.derivative(), 2*y)
        self.assertEqual((y**2).shift(1), y**2 + 2*y + 1)


    def test_division(self):
        f = P.lift(x**2 - 2)
        q, r = divmod(f, y - a)
        self.assertEqual(q, y + a)
        self.assertTrue(r.is_zero())

        q, r = f.qr(y - 1)
        self.assertEqual(q*(y - 1) + r, f)
        self.assertLess(r.degree(), 1)

        with self.assertRaises(ZeroDivisionError):
            f % P.zero


    def test_gcd(self):
        f = P.lift(x**2 - 2)
        g = (y - a)**2
        self.assertEqual(f.gcd(g), y - a)
        self.assertEqual((2*f).gcd(f), f)


    def test_evaluation(self):
        f = P.lift(x**2 - 2)
        self.assertTrue(f(a).is_zero())
        self.assertEqual(f(K(2)), K(2))


    def test_square_free_decomposition(self):
        f = P.lift((x - 1)**2 * (x + 1))
        self.assertEqual(P.square_free_decomposition(f), [(y + 1, 1), (y - 1, 2)])


    def test_factor_over_extension(self):
        lc, facs = P.factor(3*P.lift((x - 1)**2 * (x**2 - 2)))
        self.assertEqual(lc, K(3))
        self.assertEqual(sorted((str(g), e) for g, e in facs), [('x + z', 1), ('x - 1', 2), ('x - z', 1)])


    def test_factor_cube_root(self):
        L = NumberField(x**3 - 2)
        _, facs = L.X.factor(L.X.lift(x**3 - 2))
        self.assertEqual(sorted(g.degree() for g, _ in facs), [1, 2])

        linear = [g for g, _ in facs if g.degree() == 1][0]
        self.assertEqual(linear.extract_root_from_linear(), L.generator)


    def test_irreducible_stays_whole(self):
        _, facs = P.factor(P.lift(x**2 - 3))
        self.assertEqual(facs, [(P.lift(x**2 - 3), 1)])


    def test_extract_root(self):
        self.assertEqual((2*y - a).extract_root_from_linear(), a/2)

        with self.assertRaises(NotLinearException):
            P.lift(x**2 - 2).extract_root_from_linear()


    def test_multivariate_conversion(self):
        f = y**2 + a*y - 1
        q = f.de_lift()
        self.assertEqual(q, x_1**2 + x_0*x_1 - 1)
        self.assertEqual(P.from_multivariate(q), f)
        self.assertEqual(P.from_multivariate(x_2 + x_0, field_dim=0, var_dim=2), y + a)

        with self.assertRaises(NotUnivariateException):
            P.from_multivariate(x_2 + x_1)


    def test_lift_round_trip(self):
        for p in [Rational(3, 2)*x - 7, x, Rational(-1, 5), x**3 - 2*x + 1]:
            lifted = P.lift(p)
            q      = lifted.de_lift()

            self.assertEqual(make_univariate(q), qqx(p))
            self.assertEqual(P.from_multivariate(q), lifted)


    def test_element_round_trip(self):
        for e in [a, a + Rational(1, 3), K(5)]:
            q = make_multivariate(0, e.val)
            self.assertEqual(K.make_elem(make_univariate(q)), e)


    def test_from_multivariate_rejects_plain_symbols(self):
        with self.assertRaises(NotUnivariateException):
            P.from_multivariate(x + x_1)
