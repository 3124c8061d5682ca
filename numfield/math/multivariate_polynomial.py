"""
Bridge between univariate rational polynomials (QQX, `sympy.Poly` over `QQ` in `x`)
and multivariate rational polynomials (QQXs, expanded sympy expressions in the
dimension symbols `x_0, x_1, ...`).
"""
from numfield.math.general import to_fraction
from numfield.utilities.exceptions import NotUnivariateException
from sympy import Poly, QQ, Rational, Symbol, expand, sympify
from fractions import Fraction

x = Symbol('x')


def dim_symbol(dim: int) -> Symbol:
    """
    Returns the symbol standing for dimension `dim` in multivariate polynomials.
    """
    return Symbol(f'x_{dim}')


def symbol_dim(symbol: Symbol) -> int:
    name = symbol.name
    if not name.startswith('x_'):
        raise ValueError(f'{symbol} is not a dimension symbol')

    return int(name[2:])


def qqx(p: object) -> Poly:
    """
    Coerces `p` into a QQX.

    Parameters:
        p (object): A `Poly`, a sympy expression in at most one symbol, a rational
                    constant, or a list of coefficients (highest degree first).

    Returns:
        Poly: Polynomial over `QQ` in `x`.

    Examples:
        >>> from numfield.math.multivariate_polynomial import qqx, x
        >>> qqx([1, 0, -2]) == qqx(x**2 - 2)
        True

    """
    if type(p) is list:
        return qqx_from_coeffs(p[::-1])

    if isinstance(p, Poly):
        if p.gens == (x,) and p.get_domain() == QQ:
            return p

        if len(p.gens) == 1:
            return Poly(p.as_expr().subs(p.gen, x), x, domain=QQ)

        return make_univariate(p.as_expr())

    return make_univariate(p)


def qqx_from_coeffs(coeffs: list) -> Poly:
    """
    Builds a QQX from ascending rational coefficients.
    """
    coeffs = [to_fraction(c) for c in coeffs] or [Fraction(0)]
    return Poly([Rational(c.numerator, c.denominator) for c in reversed(coeffs)], x, domain=QQ)


def qqx_coeffs(p: Poly, length: int=None) -> list:
    """
    Ascending coefficients of a QQX as `Fraction`s, zero-padded to `length`.
    """
    coeffs = [to_fraction(c) for c in reversed(p.all_coeffs())]

    if p.is_zero:
        coeffs = []

    if length is not None:
        coeffs += [Fraction(0)] * (length - len(coeffs))

    return coeffs


def make_multivariate(dim: int, p: Poly) -> object:
    """
    Given a univariate polynomial and a dimension, creates the equivalent multivariate
    polynomial over that dimension.

    Parameters:
        dim  (int): Dimension of the variable.
        p   (Poly): Univariate polynomial.

    Returns:
        Expr: Multivariate polynomial.

    Examples:
        >>> from numfield.math.multivariate_polynomial import make_multivariate, x, qqx
        >>> make_multivariate(1, qqx(x**2 - 2))
        x_1**2 - 2

    """
    return expand(qqx(p).as_expr(dim_symbol(dim)))


def make_univariate(q: object) -> Poly:
    """
    Given a multivariate polynomial over a single dimension, creates the equivalent
    univariate polynomial.

    Parameters:
        q (Expr): Multivariate polynomial.

    Returns:
        Poly: Univariate polynomial in `x`.

    Raises:
        NotUnivariateException: If `q` uses more than one indeterminate.
    """
    q = sympify(q)
    symbols = sorted(q.free_symbols, key=lambda s: s.name)

    if len(symbols) > 1:
        raise NotUnivariateException(f'{q} is not a univariate polynomial', parameters={'q': q, 'symbols': symbols})

    if symbols:
        q = q.subs(symbols[0], x)

    return Poly(q, x, domain=QQ)
