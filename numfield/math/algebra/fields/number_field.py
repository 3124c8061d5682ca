from numfield.math.algebra.fields.field import Field, FieldElement
from numfield.math.algebra.rings.ring import RingElement
from numfield.math.general import monic_integral_scale, to_fraction
from numfield.math.matrix import determinant, rational_solve
from numfield.math.multivariate_polynomial import qqx, qqx_coeffs, qqx_from_coeffs, x
from numfield.utilities.exceptions import CoercionException, InvariantViolation, NoSolutionException, NotInvertibleException, NotUnivariateException
from numfield.utilities.runtime import RUNTIME
from sympy import Poly, Rational, Symbol, cyclotomic_poly, sstr
from sympy.polys.polyerrors import PolynomialError
from fractions import Fraction
import math


class NumberFieldElement(FieldElement):
    """
    Element of a `NumberField`, stored as its reduced representative `val`
    (a polynomial over QQ of degree less than the field degree).
    """

    def __init__(self, val: Poly, field: 'NumberField'):
        """
        Parameters:
            val          (Poly): Reduced representative.
            field (NumberField): Parent field.
        """
        super().__init__(field)
        self.val = val


    def shorthand(self) -> str:
        return sstr(self.val.as_expr(Symbol(self.field.symbol_repr)))


    def coords(self) -> list:
        """
        Coordinates in the power basis `1, θ, ..., θ^(n-1)`.

        Returns:
            list: `n` `Fraction`s, constant term first.
        """
        return qqx_coeffs(self.val, self.field.degree())


    def __elemadd__(self, other: 'NumberFieldElement') -> 'NumberFieldElement':
        return NumberFieldElement(self.val + other.val, self.field)


    def __elemmul__(self, other: 'NumberFieldElement') -> 'NumberFieldElement':
        return self.field._reduce(self.val * other.val)


    def __neg__(self) -> 'NumberFieldElement':
        return NumberFieldElement(-self.val, self.field)


    def __invert__(self) -> 'NumberFieldElement':
        if self.is_zero():
            raise NotInvertibleException(f"{self} is not invertible", parameters={'a': self, 'field': self.field})

        if self.val.degree() < 1:
            c = to_fraction(self.val.LC())
            return self.field(1 / c)

        return self.field._reduce(self.val.invert(self.field.min_poly))


    def inverse(self) -> 'NumberFieldElement':
        return ~self


    def negate(self) -> 'NumberFieldElement':
        return -self


    def is_zero(self) -> bool:
        return self.val.is_zero


    def is_rational(self) -> bool:
        return self.val.degree() < 1


    def matrix(self) -> list:
        """
        Matrix of multiplication by `self` in the power basis; row `i` holds the
        coordinates of `self * θ^i`.
        """
        rows = []
        cur  = self

        for _ in range(self.field.degree()):
            rows.append(cur.coords())
            cur *= self.field.generator

        return rows


    def norm(self) -> Fraction:
        return determinant(self.matrix())


    def trace(self) -> Fraction:
        return sum(row[i] for i, row in enumerate(self.matrix()))


    def minimal_polynomial(self) -> Poly:
        return self.field.compute_min_poly(self)



class NumberField(Field):
    """
    Number field `QQ[z]/(f)` for an irreducible polynomial `f`.

    Elements are reduced modulo the monic associate `min_poly` of `f`, so the
    generator `θ` is a root of `f`. `int_poly` is a monic integral polynomial
    defining the same field; its root is `ω = scale*θ`.

    Examples:
        >>> from numfield.math.algebra.fields.number_field import NumberField
        >>> from numfield.math.multivariate_polynomial import x
        >>> K = NumberField(x**2 - 2)
        >>> a = K.generator
        >>> a*a == K(2)
        True

        >>> K.compute_min_poly(a + 1).as_expr()
        x**2 - 2*x - 1

    """

    def __init__(self, min_poly: object, symbol_repr: str=None):
        """
        Parameters:
            min_poly     (object): Irreducible polynomial; anything `qqx` accepts.
            symbol_repr     (str): Name of the generator when printing.
        """
        poly = qqx(min_poly)

        if poly.degree() < 1:
            raise ValueError(f"{min_poly} does not define a number field")

        self.min_poly    = poly.monic()
        self.symbol_repr = symbol_repr or RUNTIME.field_symbol

        n      = self.min_poly.degree()
        coeffs = qqx_coeffs(self.min_poly)[:n]

        self.scale = monic_integral_scale(coeffs)
        self.int_coeffs = [(a * self.scale**(n-i)).numerator for i, a in enumerate(coeffs)] + [1]
        self.int_poly   = qqx_from_coeffs(self.int_coeffs)

        self.zero = NumberFieldElement(qqx_from_coeffs([]), self)
        self.one  = NumberFieldElement(qqx_from_coeffs([1]), self)
        self.generator = self.make_elem(x)

        self._X     = None
        self._order = None


    def __reprdir__(self):
        return ['min_poly']


    def shorthand(self) -> str:
        z = Symbol(self.symbol_repr)
        return f'QQ[{z}]/({sstr(self.min_poly.as_expr(z))})'


    def degree(self) -> int:
        return self.min_poly.degree()


    @property
    def deg(self) -> int:
        return self.degree()


    def _reduce(self, p: Poly) -> NumberFieldElement:
        return NumberFieldElement(p.rem(self.min_poly), self)


    def make_elem(self, p: object) -> NumberFieldElement:
        """
        Converts a univariate polynomial into an element of the number field.

        Parameters:
            p (object): Polynomial (anything `qqx` accepts).

        Returns:
            NumberFieldElement: The reduced element.
        """
        return self._reduce(qqx(p))


    def from_coords(self, coords: list) -> NumberFieldElement:
        return self._reduce(qqx_from_coeffs(coords))


    def coerce(self, other: object) -> NumberFieldElement:
        """
        Attempts to coerce other into an element of the field.

        Parameters:
            other (object): Object to coerce.

        Returns:
            NumberFieldElement: Coerced element.
        """
        if type(other) is NumberFieldElement:
            if other.field is not self:
                raise CoercionException(f"{other} belongs to a different field", parameters={'field': self, 'other': other})

            return other

        if isinstance(other, RingElement):
            raise CoercionException(f"Cannot coerce {other} into {self}", parameters={'field': self, 'other': other})

        if type(other) is Fraction:
            other = Rational(other.numerator, other.denominator)

        try:
            return self.make_elem(other)
        except (NotUnivariateException, PolynomialError) as e:
            raise CoercionException(f"Cannot coerce {other} into {self}", parameters={'field': self, 'other': other}) from e


    def compute_min_poly(self, elem: NumberFieldElement) -> Poly:
        """
        Computes the monic minimal polynomial of `elem` from the first rational
        linear dependency among `1, elem, elem^2, ...`.

        Parameters:
            elem (NumberFieldElement): Element.

        Returns:
            Poly: Monic minimal polynomial over QQ.

        Examples:
            >>> from numfield.math.algebra.fields.number_field import NumberField
            >>> from numfield.math.multivariate_polynomial import x
            >>> K = NumberField(x**2 - 2)
            >>> K.compute_min_poly(K.generator).as_expr()
            x**2 - 2

        """
        elem   = self.coerce(elem)
        powers = [self.one.coords()]
        cur    = self.one

        for _ in range(self.degree()):
            cur *= elem

            try:
                c = rational_solve(powers, cur.coords())
                return qqx_from_coeffs([-a for a in c] + [1])

            except NoSolutionException:
                powers.append(cur.coords())

        raise InvariantViolation(f"No linear dependency among the powers of {elem}")


    def exp(self, elem: NumberFieldElement, k: int) -> NumberFieldElement:
        return self.coerce(elem)**k


    def evaluate(self, p: object, elem: NumberFieldElement) -> NumberFieldElement:
        """
        Evaluates the rational polynomial `p` at `elem` by Horner's rule.
        """
        elem   = self.coerce(elem)
        result = self.zero

        for c in reversed(qqx_coeffs(qqx(p))):
            result = result*elem + self(c)

        return result


    @property
    def X(self) -> 'FieldPolynomialRing':
        """
        Univariate polynomials over the field.
        """
        if self._X is None:
            from numfield.math.algebra.rings.polynomial_ring import FieldPolynomialRing
            self._X = FieldPolynomialRing(self)

        return self._X


    @property
    def O(self) -> 'Order':
        """
        The equation order `ZZ[ω]` where `ω` is a root of `int_poly`.
        """
        if self._order is None:
            from numfield.math.algebra.rings.order import Order
            self._order = Order(self)

        return self._order


    def order(self) -> 'Order':
        return self.O



class QuadraticField(NumberField):
    def __init__(self, D: int, symbol_repr: str=None):
        if D >= 0 and math.isqrt(D)**2 == D:
            raise ValueError(f'"D" ({D}) cannot be square')

        super().__init__(x**2 - D, symbol_repr or f'√{D}')



class CyclotomicField(NumberField):
    def __init__(self, n: int, symbol_repr: str=None):
        self.n = n
        super().__init__(cyclotomic_poly(n, x), symbol_repr or f'ζ{n}')
