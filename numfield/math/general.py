from fractions import Fraction
from functools import reduce
from sympy import factorint
import math


def gcd(*args: int) -> int:
    """
    Greatest common divisor of any number of integers. `gcd()` is 0.

    Examples:
        >>> from numfield.math.general import gcd
        >>> gcd(12, -18, 30)
        6

    """
    return reduce(math.gcd, args, 0)


def lcm(*args: int) -> int:
    """
    Least common multiple of positive integers. `lcm()` is 1.

    Examples:
        >>> from numfield.math.general import lcm
        >>> lcm(4, 6, 10)
        60

    """
    return reduce(lambda a, b: a*b // math.gcd(a, b), args, 1)


def product(elem_list: list) -> object:
    """
    Calculates the product of all elements in `elem_list`.

    Parameters:
        elem_list (list): List of elements to multiply.

    Returns:
        object: Product of all elements.
    """
    if not elem_list:
        return 1

    return reduce(lambda a, b: a*b, elem_list)


def to_fraction(c: object) -> Fraction:
    """
    Converts an int, Fraction or sympy rational into a `Fraction`.
    """
    if type(c) is Fraction:
        return c

    if hasattr(c, 'p') and hasattr(c, 'q'):
        return Fraction(int(c.p), int(c.q))

    if hasattr(c, 'numerator') and hasattr(c, 'denominator'):
        return Fraction(int(c.numerator), int(c.denominator))

    return Fraction(c)


def monic_integral_scale(coeffs: list) -> int:
    """
    Given the coefficients `a_0, ..., a_{n-1}` (ascending) of a monic rational polynomial
    of degree `n`, finds the least positive integer `c` such that `c^(n-i) * a_i` is
    an integer for all `i`. Then `c^n * f(x/c)` is monic with integer coefficients.

    Parameters:
        coeffs (list): Ascending coefficients, without the leading 1.

    Returns:
        int: Scaling factor `c`.

    Examples:
        >>> from fractions import Fraction
        >>> from numfield.math.general import monic_integral_scale
        >>> monic_integral_scale([Fraction(-1, 2), 0])
        2

        >>> monic_integral_scale([Fraction(1, 8), 0, 0])
        2

    """
    n = len(coeffs)
    needed = {}

    for i, a in enumerate(coeffs):
        den = to_fraction(a).denominator
        k   = n - i

        if den == 1:
            continue

        for p, e in factorint(den).items():
            needed[p] = max(needed.get(p, 0), -(-e // k))

    return product([p**e for p, e in needed.items()])
