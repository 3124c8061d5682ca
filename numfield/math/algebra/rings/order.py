from numfield.math.algebra.rings.ring import Ring, RingElement
from numfield.math.algebra.rings.ideal import Ideal, FractionalIdeal
from numfield.math.general import lcm, to_fraction
from numfield.math.matrix import identity
from numfield.utilities.exceptions import CoercionException


class OrderElement(RingElement):
    """
    Element of an `Order`: integer coordinates over the basis `ω^(n-1), ..., ω, 1`.
    The constant coordinate is last.
    """

    def __init__(self, val: tuple, ring: 'Order'):
        super().__init__(ring)
        self.val = tuple(int(a) for a in val)


    def shorthand(self) -> str:
        return str(list(self.val))


    def __elemadd__(self, other: 'OrderElement') -> 'OrderElement':
        return OrderElement([a + b for a, b in zip(self.val, other.val)], self.ring)


    def __elemmul__(self, other: 'OrderElement') -> 'OrderElement':
        return OrderElement(self.ring.multiply(self.val, other.val), self.ring)


    def __neg__(self) -> 'OrderElement':
        return OrderElement([-a for a in self.val], self.ring)


    def is_zero(self) -> bool:
        return not any(self.val)


    def to_field_element(self) -> 'NumberFieldElement':
        return self.ring.order_el_to_f_elem((1, self))



class Order(Ring):
    """
    The equation order `ZZ[ω]` of a `NumberField`, where `ω` is the root of the
    field's `int_poly`. It is a free ZZ-module of rank `n` with basis
    `ω^(n-1), ..., ω, 1`; elements are integer vectors over that basis with the
    constant coordinate last, e.g. `a + b*ω` is `[0, ..., b, a]`.

    Ideals are `Ideal`s (integral) and `FractionalIdeal`s. Overorders are
    represented as fractional ideals of this order.

    Examples:
        >>> from numfield.math.algebra.fields.number_field import NumberField
        >>> from numfield.math.multivariate_polynomial import x
        >>> O = NumberField(x**2 - 5).O
        >>> two  = O.ideal_generated_by(O(2))
        >>> a1   = O.ideal_generated_by(O([1, 1]))
        >>> O.sum_i(two, a1).basis
        ((1, 1), (0, 2))

        >>> O.equal_i(O.sum_i(O.ideal_generated_by(O(3)), a1), O.one_i)
        True

    """

    def __init__(self, field: 'NumberField'):
        """
        Parameters:
            field (NumberField): Field whose equation order to build.
        """
        self.field = field
        self.rank  = field.degree()
        self._int_coeffs = field.int_coeffs

        n = self.rank
        self.zero  = OrderElement([0]*n, self)
        self.basis = [OrderElement(row, self) for row in identity(n)]

        self.one_i = Ideal(self, identity(n))
        self.one   = FractionalIdeal(1, self.one_i)


    def __reprdir__(self):
        return ['field']


    def shorthand(self) -> str:
        return f'ZZ[{self.field.scale}*{self.field.symbol_repr}]' if self.field.scale > 1 else f'ZZ[{self.field.symbol_repr}]'


    def basis_name(self, i: int) -> str:
        k = self.rank - 1 - i
        if not k:
            return '1'

        return 'ω' if k == 1 else f'ω^{k}'


    def coerce(self, other: object) -> OrderElement:
        """
        Attempts to coerce other into an element of the order.

        Parameters:
            other (object): An `OrderElement`, an integer, an integer vector or an integral field element.

        Returns:
            OrderElement: Coerced element.
        """
        if type(other) is OrderElement:
            if other.ring is not self:
                raise CoercionException(f"{other} belongs to a different order", parameters={'order': self, 'other': other})

            return other

        if type(other) is int:
            return OrderElement([0]*(self.rank-1) + [other], self)

        if type(other) in (list, tuple):
            if len(other) != self.rank:
                raise CoercionException(f"Expected a vector of length {self.rank}", parameters={'order': self, 'other': other})

            return OrderElement(other, self)

        d, o = self.make_o_el(self.field.coerce(other))

        if d != 1:
            raise CoercionException(f"{other} is not in {self.shorthand()}", parameters={'order': self, 'other': other})

        return o


    def _reduce(self, coeffs: list) -> list:
        n = self.rank
        f = self._int_coeffs
        coeffs = list(coeffs) + [0]*max(n - len(coeffs), 0)

        # ω^k = -ω^(k-n) * (f_0 + ... + f_(n-1)*ω^(n-1))
        for k in range(len(coeffs)-1, n-1, -1):
            t = coeffs[k]
            if t:
                for j in range(n):
                    coeffs[k-n+j] -= t*f[j]

        return coeffs[:n]


    def multiply(self, u: tuple, v: tuple) -> tuple:
        """
        Multiplies two order elements given as coordinate vectors.
        """
        a = u[::-1]
        b = v[::-1]
        product = [0] * (2*self.rank - 1)

        for i, x in enumerate(a):
            if x:
                for j, y in enumerate(b):
                    product[i+j] += x*y

        return tuple(self._reduce(product)[::-1])


    def multiplication_matrix(self, o: tuple) -> list:
        """
        Rows are the products of the basis elements with `o`.
        """
        return [self.multiply(b.val, o) for b in self.basis]


    def make_o_el(self, elem: 'NumberFieldElement') -> (int, OrderElement):
        """
        Writes a field element as `o/d` with `o` in the order and `d` the least
        positive integer that allows it.

        Parameters:
            elem (NumberFieldElement): Element.

        Returns:
            (int, OrderElement): `(d, o)`.
        """
        elem  = self.field.coerce(elem)
        scale = self.field.scale
        omega_coeffs = [a / scale**i for i, a in enumerate(elem.coords())]

        d = lcm(*[c.denominator for c in omega_coeffs])
        return d, OrderElement([int(c*d) for c in reversed(omega_coeffs)], self)


    def order_el_to_f_elem(self, el: (int, OrderElement)) -> 'NumberFieldElement':
        """
        Inverse of `make_o_el`.
        """
        d, o  = el
        o     = self(o)
        scale = self.field.scale
        omega_coeffs = [to_fraction(a) / d for a in reversed(o.val)]
        return self.field.from_coords([c * scale**i for i, c in enumerate(omega_coeffs)])


    def pp_o(self, o: OrderElement) -> str:
        return self(o).shorthand()


    # Integral ideals

    def idealify(self, matrix: list) -> Ideal:
        """
        Converts an integer matrix whose rows generate an ideal as a ZZ-module into an `Ideal`.

        Raises:
            ValueError: If the rows do not span a full-rank lattice.
        """
        return Ideal.from_generators(self, matrix)


    def pp_i(self, ideal: Ideal) -> str:
        return ideal.shorthand()


    def equal_i(self, I: Ideal, J: Ideal) -> bool:
        return I == J


    def sum_i(self, I: Ideal, J: Ideal) -> Ideal:
        return I + J


    def mul_i(self, I: Ideal, J: Ideal) -> Ideal:
        return I * J


    def ideal_generated_by(self, o: OrderElement) -> Ideal:
        """
        Principal ideal generated by a non-zero order element.
        """
        return Ideal.from_generators(self, self.multiplication_matrix(self(o).val))


    def intersect_i(self, I: Ideal, J: Ideal) -> Ideal:
        return I & J


    def quotient_i(self, I: Ideal, J: Ideal) -> Ideal:
        """
        `I : J = {x in O : xJ ⊆ I}`.
        """
        return I.quotient(J)


    def get_smallest_int(self, I: Ideal) -> int:
        return I.smallest_integer()


    # Fractional ideals

    def make_frac_ideal(self, d: int, I: Ideal) -> FractionalIdeal:
        return FractionalIdeal(d, I)


    def frac_ideal_generated_by(self, elem: 'NumberFieldElement') -> FractionalIdeal:
        """
        Principal fractional ideal generated by a non-zero field element.
        """
        d, o = self.make_o_el(elem)
        return FractionalIdeal(d, self.ideal_generated_by(o))


    def pp(self, I: FractionalIdeal) -> str:
        return I.shorthand()


    def sum(self, I: FractionalIdeal, J: FractionalIdeal) -> FractionalIdeal:
        return I + J


    def intersect(self, I: FractionalIdeal, J: FractionalIdeal) -> FractionalIdeal:
        return I & J


    def mul(self, I: FractionalIdeal, J: FractionalIdeal) -> FractionalIdeal:
        return I * J


    def exp(self, I: FractionalIdeal, k: int) -> FractionalIdeal:
        return I**k


    def quotient(self, I: FractionalIdeal, J: FractionalIdeal) -> FractionalIdeal:
        """
        `I :_K J = {x in K : xJ ⊆ I}`.
        """
        return I.quotient(J)


    def equal(self, I: FractionalIdeal, J: FractionalIdeal) -> bool:
        return I == J


    def subset(self, I: FractionalIdeal, J: FractionalIdeal) -> bool:
        return I <= J


    # Overorders, factor refinement and units

    def compute_overorder(self, overorder: FractionalIdeal, ideal: FractionalIdeal) -> (FractionalIdeal, FractionalIdeal):
        from numfield.math.algebra.rings.factor_refinement import compute_overorder
        return compute_overorder(overorder, ideal)


    def factor_refinement(self, ideals: list) -> (FractionalIdeal, list):
        from numfield.math.algebra.rings.factor_refinement import factor_refinement
        return factor_refinement(self, ideals)


    def compute_factorization(self, ideals: list) -> (list, list, FractionalIdeal):
        from numfield.math.algebra.rings.factor_refinement import compute_factorization
        return compute_factorization(self, ideals)


    def find_unit_basis(self, gammas: list) -> list:
        from numfield.math.algebra.rings.factor_refinement import find_unit_basis
        return find_unit_basis(self, gammas)
