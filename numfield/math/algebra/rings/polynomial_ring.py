from numfield.math.algebra.rings.ring import Ring, RingElement
from numfield.math.multivariate_polynomial import dim_symbol, make_multivariate, make_univariate, qqx, qqx_coeffs, symbol_dim
from numfield.utilities.exceptions import CoercionException, NotLinearException, NotUnivariateException
from numfield.utilities.runtime import RUNTIME
from sympy import Poly, Symbol, expand, resultant, sstr, sympify
from itertools import count
import logging

log = logging.getLogger(__name__)


class FieldPolynomial(RingElement):
    """
    Univariate polynomial over a `NumberField`, stored as ascending coefficients
    with no trailing zeros.
    """

    def __init__(self, coeffs: list, ring: 'FieldPolynomialRing'):
        super().__init__(ring)
        coeffs = list(coeffs)

        while coeffs and coeffs[-1].is_zero():
            coeffs.pop()

        self.coeffs = tuple(coeffs)
        self.field  = ring.field


    @property
    def val(self) -> tuple:
        return self.coeffs


    def shorthand(self) -> str:
        z = Symbol(self.field.symbol_repr)
        y = Symbol(RUNTIME.poly_symbol)
        return sstr(sum((c.val.as_expr(z) * y**i for i, c in enumerate(self.coeffs)), sympify(0)))


    def degree(self) -> int:
        """
        Degree of the polynomial; the zero polynomial has degree -1.
        """
        return len(self.coeffs) - 1


    def is_zero(self) -> bool:
        return not self.coeffs


    def __getitem__(self, idx: int) -> 'NumberFieldElement':
        if idx < len(self.coeffs):
            return self.coeffs[idx]

        return self.field.zero


    def LC(self) -> 'NumberFieldElement':
        return self[self.degree()]


    def __elemadd__(self, other: 'FieldPolynomial') -> 'FieldPolynomial':
        n = max(len(self.coeffs), len(other.coeffs))
        return self.ring([self[i] + other[i] for i in range(n)])


    def __elemmul__(self, other: 'FieldPolynomial') -> 'FieldPolynomial':
        if self.is_zero() or other.is_zero():
            return self.ring.zero

        coeffs = [self.field.zero] * (len(self.coeffs) + len(other.coeffs) - 1)

        for i, a in enumerate(self.coeffs):
            if a.is_zero():
                continue

            for j, b in enumerate(other.coeffs):
                coeffs[i+j] += a*b

        return self.ring(coeffs)


    def __neg__(self) -> 'FieldPolynomial':
        return self.ring([-c for c in self.coeffs])


    def __divmod__(self, other: object) -> ('FieldPolynomial', 'FieldPolynomial'):
        other = self._coerce_other(other)

        if other.is_zero():
            raise ZeroDivisionError("Polynomial division by zero")

        d_self, d_other = self.degree(), other.degree()

        if d_self < d_other:
            return self.ring.zero, self

        quotient  = [self.field.zero] * (d_self - d_other + 1)
        remainder = list(self.coeffs)
        inv_lc    = ~other.LC()

        for k in range(d_self - d_other, -1, -1):
            c = remainder[k + d_other] * inv_lc
            quotient[k] = c

            if not c.is_zero():
                for j, b in enumerate(other.coeffs):
                    remainder[k+j] -= c*b

        return self.ring(quotient), self.ring(remainder[:d_other])


    def __floordiv__(self, other: object) -> 'FieldPolynomial':
        return divmod(self, other)[0]


    def __mod__(self, other: object) -> 'FieldPolynomial':
        return divmod(self, other)[1]


    def qr(self, other: object) -> ('FieldPolynomial', 'FieldPolynomial'):
        return divmod(self, other)


    def monic(self) -> 'FieldPolynomial':
        if self.is_zero():
            return self

        inv_lc = ~self.LC()
        return self.ring([c*inv_lc for c in self.coeffs])


    def derivative(self) -> 'FieldPolynomial':
        return self.ring([c*i for i, c in enumerate(self.coeffs)][1:])


    def gcd(self, other: object) -> 'FieldPolynomial':
        """
        Monic greatest common divisor (zero if both are zero).
        """
        a, b = self, self._coerce_other(other)

        while not b.is_zero():
            a, b = b, a % b

        return a.monic()


    def __call__(self, elem: 'NumberFieldElement') -> 'NumberFieldElement':
        elem   = self.field.coerce(elem)
        result = self.field.zero

        for c in reversed(self.coeffs):
            result = result*elem + c

        return result


    def shift(self, c: 'NumberFieldElement') -> 'FieldPolynomial':
        """
        Returns `self(x + c)`.
        """
        linear = self.ring([self.field.coerce(c), self.field.one])
        result = self.ring.zero

        for coeff in reversed(self.coeffs):
            result = result*linear + self.ring([coeff])

        return result


    def de_lift(self) -> object:
        return self.ring.de_lift(self)


    def extract_root_from_linear(self) -> 'NumberFieldElement':
        return self.ring.extract_root_from_linear(self)



class FieldPolynomialRing(Ring):
    """
    Ring of univariate polynomials over a `NumberField`.

    Examples:
        >>> from numfield.math.algebra.fields.number_field import NumberField
        >>> from numfield.math.multivariate_polynomial import x
        >>> K = NumberField(x**2 - 2)
        >>> P = K.X
        >>> f = P.lift(x**2 - 2)
        >>> lc, facs = P.factor(f)
        >>> sorted(str(g) for g, _ in facs)
        ['x + z', 'x - z']

    """

    def __init__(self, field: 'NumberField'):
        """
        Parameters:
            field (NumberField): Coefficient field.
        """
        self.field = field
        self.zero  = FieldPolynomial([], self)
        self.one   = FieldPolynomial([field.one], self)
        self.symbol = FieldPolynomial([field.zero, field.one], self)


    def __reprdir__(self):
        return ['field']


    def shorthand(self) -> str:
        return f'{self.field.shorthand()}[{RUNTIME.poly_symbol}]'


    def coerce(self, other: object) -> FieldPolynomial:
        """
        Attempts to coerce other into an element of the ring.

        Parameters:
            other (object): Object to coerce.

        Returns:
            FieldPolynomial: Coerced element.
        """
        if type(other) is FieldPolynomial:
            if other.ring is not self:
                raise CoercionException(f"{other} belongs to a different ring", parameters={'ring': self, 'other': other})

            return other

        if type(other) in (list, tuple):
            return FieldPolynomial([self.field.coerce(c) for c in other], self)

        if isinstance(other, Poly):
            return self.lift(other)

        return FieldPolynomial([self.field.coerce(other)], self)


    def lift(self, p: object) -> FieldPolynomial:
        """
        Converts a rational polynomial into a polynomial over the field.
        """
        return FieldPolynomial([self.field(c) for c in qqx_coeffs(qqx(p))], self)


    def de_lift(self, t: FieldPolynomial) -> object:
        """
        Converts a polynomial over the field into a multivariate rational polynomial.
        The field generator is dimension 0 and the polynomial variable is dimension 1.
        """
        t  = self.coerce(t)
        x1 = dim_symbol(1)
        return expand(sum((make_multivariate(0, c.val) * x1**i for i, c in enumerate(t.coeffs)), sympify(0)))


    def from_multivariate(self, q: object, field_dim: int=0, var_dim: int=1) -> FieldPolynomial:
        """
        Reads a multivariate rational polynomial in the dimensions `field_dim` (the
        field generator) and `var_dim` (the polynomial variable) as a polynomial
        over the field. Inverse of `de_lift` for the default dimensions.
        """
        q = sympify(q)

        try:
            dims = {symbol_dim(s) for s in q.free_symbols}
        except ValueError as e:
            raise NotUnivariateException(f'{q} uses symbols that are not dimensions', parameters={'q': q}) from e

        if not dims <= {field_dim, var_dim}:
            raise NotUnivariateException(f'{q} uses dimensions other than {field_dim} and {var_dim}', parameters={'q': q})

        as_var = Poly(q, dim_symbol(var_dim))
        coeffs = [self.field.make_elem(make_univariate(c)) for c in reversed(as_var.all_coeffs())]
        return FieldPolynomial(coeffs, self)


    def _norm(self, t: FieldPolynomial) -> Poly:
        min_poly = make_multivariate(0, self.field.min_poly)
        return make_univariate(resultant(min_poly, self.de_lift(t), dim_symbol(0)))


    def factor_square_free_poly(self, t: FieldPolynomial) -> ('NumberFieldElement', list):
        """
        Factors a square-free polynomial using Trager's norm method.

        Parameters:
            t (FieldPolynomial): Square-free polynomial.

        Returns:
            (NumberFieldElement, list): Leading coefficient and `[(monic factor, 1), ...]`.
        """
        t = self.coerce(t)

        if t.is_zero():
            raise ValueError("Cannot factor the zero polynomial")

        lc = t.LC()
        g  = t.monic()

        if g.degree() < 1:
            return lc, []

        if g.degree() == 1:
            return lc, [(g, 1)]

        theta = self.field.generator

        for s in count(0):
            shifted = g.shift(-s*theta)
            norm    = self._norm(shifted)

            if norm.gcd(norm.diff()).degree() > 0:
                log.debug(f'Norm of {g} shifted by {s} is not square-free')
                continue

            factors = []
            for h, _ in norm.factor_list()[1]:
                fac = self.lift(h).gcd(shifted)

                if fac.degree() > 0:
                    factors.append((fac.shift(s*theta), 1))

            log.debug(f'Factored {g} into {len(factors)} factors using shift {s}')
            return lc, factors


    def square_free_decomposition(self, t: FieldPolynomial) -> list:
        """
        Yun's algorithm. Returns `[(a_i, i), ...]` with `t/LC(t) = prod(a_i^i)` and the
        `a_i` monic, square-free and pairwise coprime.
        """
        f  = self.coerce(t).monic()
        fd = f.derivative()
        a  = f.gcd(fd)
        b  = f // a
        c  = fd // a
        d  = c - b.derivative()
        i  = 1
        result = []

        while b.degree() > 0:
            a = b.gcd(d)
            b = b // a
            c = d // a
            d = c - b.derivative()

            if a.degree() > 0:
                result.append((a, i))

            i += 1

        return result


    def factor(self, t: FieldPolynomial) -> ('NumberFieldElement', list):
        """
        Factors an arbitrary non-zero polynomial over the field.

        Parameters:
            t (FieldPolynomial): Polynomial.

        Returns:
            (NumberFieldElement, list): Leading coefficient and `[(monic irreducible factor, multiplicity), ...]`.
        """
        t = self.coerce(t)

        if t.is_zero():
            raise ValueError("Cannot factor the zero polynomial")

        factors = []
        for part, mult in self.square_free_decomposition(t):
            _, part_factors = self.factor_square_free_poly(part)
            factors.extend((fac, mult) for fac, _ in part_factors)

        return t.LC(), factors


    def extract_root_from_linear(self, t: FieldPolynomial) -> 'NumberFieldElement':
        """
        Extracts the root of a linear polynomial.

        Raises:
            NotLinearException: If `t` is not of degree 1.
        """
        t = self.coerce(t)

        if t.degree() != 1:
            raise NotLinearException(f"{t} is not linear", parameters={'t': t})

        return -t[0] / t[1]
