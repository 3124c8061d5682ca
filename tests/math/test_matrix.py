from numfield.math.matrix import *
from numfield.utilities.exceptions import NoSolutionException
from fractions import Fraction
import unittest


class MatrixTestCase(unittest.TestCase):
    def test_hnf_canonical(self):
        self.assertEqual(hermite_normal_form([[0, 2], [2, 0], [1, 1], [1, 5]]), [(1, 1), (0, 2)])
        self.assertEqual(hermite_normal_form([[1, 5], [1, 1]]), [(1, 1), (0, 4)])


    def test_hnf_same_lattice(self):
        a = hermite_normal_form([[3, 1, 0], [0, 2, 4], [1, 1, 1]])
        b = hermite_normal_form([[1, 1, 1], [3, 1, 0], [3, 3, 4]])
        self.assertEqual(a, b)


    def test_hnf_modulus(self):
        self.assertEqual(hermite_normal_form([[5, 7]], modulus=4), [(1, 3), (0, 4)])


    def test_hnf_rank_deficient(self):
        self.assertEqual(hermite_normal_form([[4, 6], [6, 9]]), [(2, 3)])
        self.assertEqual(hermite_normal_form([[0, 0]]), [])


    def test_reduce_vector(self):
        self.assertEqual(reduce_vector((5, 7), [(2, 0), (0, 3)]), (1, 1))
        self.assertTrue(lattice_contains([(1, 1), (0, 2)], (3, 5)))
        self.assertFalse(lattice_contains([(1, 1), (0, 2)], (1, 2)))


    def test_integer_kernel(self):
        self.assertEqual(integer_kernel([[1], [1]]), [(1, -1)])
        self.assertEqual(integer_kernel([[1, 0], [0, 1]]), [])
        self.assertEqual(integer_kernel([[], []], width=0), [(1, 0), (0, 1)])


    def test_lattice_intersection(self):
        self.assertEqual(lattice_intersection([[2, 0], [0, 2]], [[1, 0], [0, 2]]), [(2, 0), (0, 2)])
        self.assertEqual(lattice_intersection([[2, 0], [0, 1]], [[1, 0], [0, 3]]), [(2, 0), (0, 3)])


    def test_lattice_preimage(self):
        self.assertEqual(lattice_preimage([[2, 0], [0, 3]], [[6, 0], [0, 6]]), [(3, 0), (0, 2)])


    def test_determinants(self):
        self.assertEqual(hnf_determinant([(1, 1), (0, 4)]), 4)
        self.assertEqual(determinant([[1, 2], [3, 4]]), Fraction(-2))
        self.assertEqual(determinant([[1, 2], [2, 4]]), Fraction(0))


    def test_rational_rank(self):
        self.assertEqual(rational_rank([[1, 2], [2, 4]]), 1)
        self.assertEqual(rational_rank([[1, 2], [0, Fraction(1, 2)]]), 2)


    def test_rational_solve(self):
        self.assertEqual(rational_solve([[1, 0], [1, 2]], [3, 4]), [Fraction(1), Fraction(2)])

        with self.assertRaises(NoSolutionException):
            rational_solve([[1, 0]], [0, 1])
