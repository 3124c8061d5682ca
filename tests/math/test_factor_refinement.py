from numfield.math.algebra.fields.number_field import NumberField
from numfield.math.algebra.rings.factor_refinement import is_invertible
from numfield.math.algebra.rings.ideal import FractionalIdeal
from numfield.math.multivariate_polynomial import x
from fractions import Fraction
import unittest

K5 = NumberField(x**2 - 5)
O5 = K5.O
a5 = K5.generator

Ki = NumberField(x**2 + 1)
Oi = Ki.O
i  = Ki.generator

K3 = NumberField(x**3 + x**2 - 2*x + 8)
O3 = K3.O
t3 = K3.generator

K4 = NumberField(4*x**2 - 5)
O4 = K4.O
t4 = K4.generator

P = O5.make_frac_ideal(1, O5.idealify([[1, 1], [0, 2]]))
Z_phi = O5.make_frac_ideal(2, O5.idealify([[1, 1], [0, 2]]))


def principal(order, elem):
    return order.frac_ideal_generated_by(elem)


def product(order, ideals):
    result = order.one
    for I in ideals:
        result = order.mul(result, I)

    return result


class FactorRefinementTestCase(unittest.TestCase):
    def assert_refinement(self, order, ideals):
        C, factors = order.factor_refinement(ideals)

        lifted   = product(order, [order.mul(I, C) for I in ideals])
        expected = C
        for J, e in factors:
            self.assertGreater(e, 0)
            expected = order.mul(expected, order.exp(J, e))

        self.assertEqual(lifted, expected)

        for a in range(len(factors)):
            self.assertNotEqual(factors[a][0], C)
            self.assertTrue(is_invertible(C, factors[a][0]))

            for b in range(a+1, len(factors)):
                self.assertEqual(order.sum(factors[a][0], factors[b][0]), C)

        return C, factors


    def test_invertibility(self):
        self.assertTrue(is_invertible(O5.one, principal(O5, a5 + 1)))
        self.assertFalse(is_invertible(O5.one, P))
        self.assertTrue(is_invertible(Z_phi, P))


    def test_compute_overorder(self):
        C, J = O5.compute_overorder(O5.one, P)
        self.assertEqual(C, Z_phi)
        self.assertEqual(J, P)
        self.assertTrue(O5.subset(O5.one, C))


    def test_compute_overorder_invertible(self):
        I = principal(O5, a5 + 1)
        C, J = O5.compute_overorder(O5.one, I)
        self.assertEqual(C, O5.one)
        self.assertEqual(J, I)


    def test_non_maximal_order(self):
        C, factors = self.assert_refinement(O5, [principal(O5, K5(2)), principal(O5, a5 + 1)])
        self.assertEqual(C, Z_phi)
        self.assertEqual(factors, [(P, 2)])


    def test_gaussian_integers(self):
        ideals = [principal(Oi, Ki(2)), principal(Oi, i + 1), principal(Oi, Ki(5)), principal(Oi, i + 2)]
        C, factors = self.assert_refinement(Oi, ideals)

        self.assertEqual(C, Oi.one)
        self.assertEqual(sorted(e for _, e in factors), [1, 2, 3])
        self.assertIn((principal(Oi, i + 1), 3), factors)
        self.assertIn((principal(Oi, i + 2), 2), factors)
        self.assertIn((principal(Oi, i - 2), 1), factors)


    def test_fractional_input(self):
        half = principal(Oi, Ki(Fraction(1, 2)))
        C, factors = Oi.factor_refinement([half, principal(Oi, i + 1)])

        self.assertEqual(C, Oi.one)
        self.assertEqual(factors, [(principal(Oi, i + 1), -1)])
        self.assertEqual(Oi.mul(half, principal(Oi, i + 1)), Oi.exp(factors[0][0], -1))


    def test_units_vanish(self):
        C, factors = O5.factor_refinement([principal(O5, a5 + 2)])
        self.assertEqual(C, O5.one)
        self.assertEqual(factors, [])


    def test_compute_factorization(self):
        rows, Js, C = O5.compute_factorization([principal(O5, K5(2)), principal(O5, a5 + 1)])
        self.assertEqual(rows, [[1], [1]])
        self.assertEqual(Js, [P])
        self.assertEqual(C, Z_phi)


    def test_compute_factorization_coprime(self):
        rows, Js, C = Oi.compute_factorization([principal(Oi, Ki(5)), principal(Oi, i + 2)])
        self.assertEqual(C, Oi.one)
        self.assertEqual(Js, [principal(Oi, i + 2), principal(Oi, i - 2)])
        self.assertEqual(rows, [[1, 1], [1, 0]])


    def test_cubic_non_maximal_order(self):
        ideals = [principal(O3, K3(2)), principal(O3, t3), principal(O3, t3 + 1), principal(O3, t3**2 + 3)]
        C, factors = self.assert_refinement(O3, ideals)

        self.assertTrue(O3.subset(O3.one, C))
        self.assertEqual(O3.mul(C, C), C)


    def test_non_monic_field(self):
        P4 = O4.make_frac_ideal(1, O4.idealify([[1, 1], [0, 2]]))
        C, factors = self.assert_refinement(O4, [principal(O4, K4(2)), principal(O4, 2*t4 + 1)])

        self.assertEqual(C, O4.make_frac_ideal(2, O4.idealify([[1, 1], [0, 2]])))
        self.assertEqual(factors, [(P4, 2)])



class UnitBasisTestCase(unittest.TestCase):
    def assert_units(self, order, gammas, basis):
        field = order.field

        for row in basis:
            u = field.one
            for g, m in zip(gammas, row):
                u *= field(g)**m

            self.assertFalse((~u).is_zero())
            self.assertIn(u.norm(), (1, -1))
            self.assertEqual(order.make_o_el(u)[0], 1)
            self.assertEqual(order.make_o_el(~u)[0], 1)


    def test_descent_to_base_order(self):
        gammas = [a5 + 1, K5(2)]
        basis  = O5.find_unit_basis(gammas)
        self.assertEqual(basis, [[3, -3]])
        self.assert_units(O5, gammas, basis)


    def test_golden_ratio(self):
        phi = (a5 + 1) / 2
        self.assertEqual(O5.find_unit_basis([phi]), [[3]])


    def test_fundamental_unit(self):
        self.assertEqual(O5.find_unit_basis([a5 + 2]), [[1]])


    def test_no_units(self):
        self.assertEqual(O5.find_unit_basis([K5(2), K5(3)]), [])
        self.assertEqual(O5.find_unit_basis([]), [])


    def test_gaussian_units(self):
        gammas = [i + 1, i - 1, Ki(2)]
        basis  = Oi.find_unit_basis(gammas)
        self.assertEqual(basis, [[1, 1, -1], [0, 2, -1]])
        self.assert_units(Oi, gammas, basis)


    def test_non_monic_units(self):
        phi = t4 + Fraction(1, 2)
        self.assertEqual(O4.find_unit_basis([phi]), [[3]])


    def test_deep_descent(self):
        K = NumberField(x**2 - 45)
        gammas = [(K.generator + 3) / 6]
        basis  = K.O.find_unit_basis(gammas)

        self.assertEqual(basis, [[12]])
        self.assert_units(K.O, gammas, basis)


    def test_cube_root_of_two(self):
        K = NumberField(x**3 - 2)
        gammas = [K.generator - 1, K.generator]
        basis  = K.O.find_unit_basis(gammas)

        self.assertEqual(basis, [[1, 0]])
        self.assert_units(K.O, gammas, basis)


    def test_cube_root_of_twelve(self):
        K = NumberField(x**3 - 12)
        gammas = [K.generator, K(2), K(3)]
        basis  = K.O.find_unit_basis(gammas)

        self.assertEqual(basis, [[3, -2, -1]])
        self.assert_units(K.O, gammas, basis)
