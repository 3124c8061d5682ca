from numfield.core.base_object import BaseObject
from numfield.math.general import gcd, lcm
from numfield.math.matrix import hermite_normal_form, hnf_determinant, lattice_contains, lattice_intersection, lattice_preimage


class Ideal(BaseObject):
    """
    Non-zero ideal of an `Order`, stored as the row Hermite normal form of a Z-basis
    written in the order's basis. Since the constant basis vector is last, the last
    HNF row is `(0, ..., 0, N)` where `N` generates the ideal's intersection with ZZ.

    Examples:
        >>> from numfield.math.algebra.fields.number_field import NumberField
        >>> from numfield.math.multivariate_polynomial import x
        >>> O = NumberField(x**2 - 5).O
        >>> I = O.ideal_generated_by(O([1, 1]))
        >>> I.basis
        ((1, 1), (0, 4))

        >>> I.smallest_integer()
        4

    """

    def __init__(self, order: 'Order', basis: list):
        """
        Parameters:
            order (Order): Parent order.
            basis  (list): Square HNF basis. Use `from_generators` for arbitrary generators.
        """
        self.order = order
        self.basis = tuple(tuple(row) for row in basis)


    @staticmethod
    def from_generators(order: 'Order', generators: list, modulus: int=None) -> 'Ideal':
        """
        Builds an ideal from Z-module generators.

        Parameters:
            order      (Order): Parent order.
            generators  (list): Integer vectors in the order's basis.
            modulus      (int): Positive integer known to lie in the ideal.

        Returns:
            Ideal: The ideal in canonical form.
        """
        basis = hermite_normal_form(generators, modulus=modulus)

        if len(basis) != order.rank:
            raise ValueError(f"Generators span a rank {len(basis)} lattice; ideals must have rank {order.rank}")

        return Ideal(order, basis)


    def __reprdir__(self):
        return ['basis']


    def shorthand(self) -> str:
        return str([list(row) for row in self.basis])


    def pretty(self):
        """
        Prints the basis as a table.
        """
        from rich.table import Table
        from rich import print

        table = Table(title=f"Ideal of norm {self.norm()}", show_lines=True)

        for i in range(self.order.rank):
            table.add_column(self.order.basis_name(i), style="bold cyan", no_wrap=True)

        for row in self.basis:
            table.add_row(*[str(a) for a in row])

        print()
        print(table)


    def __eq__(self, other: object) -> bool:
        return type(self) == type(other) and self.order is other.order and self.basis == other.basis


    def __hash__(self) -> int:
        return hash((self.__class__, self.basis))


    def smallest_integer(self) -> int:
        return self.basis[-1][-1]


    def norm(self) -> int:
        """
        Index of the ideal in the order.
        """
        return hnf_determinant(self.basis)


    def content(self) -> int:
        return gcd(*[a for row in self.basis for a in row])


    def scale(self, k: int) -> 'Ideal':
        """
        Returns `k*I` for a positive integer `k`.
        """
        return Ideal(self.order, [[k*a for a in row] for row in self.basis])


    def divide(self, k: int) -> 'Ideal':
        """
        Returns `I/k` for a positive integer `k` dividing every basis entry.
        """
        return Ideal(self.order, [[a // k for a in row] for row in self.basis])


    def contains(self, o: 'OrderElement') -> bool:
        return lattice_contains(self.basis, self.order(o).val)


    def __le__(self, other: 'Ideal') -> bool:
        return all(lattice_contains(other.basis, row) for row in self.basis)


    def __add__(self, other: 'Ideal') -> 'Ideal':
        modulus = gcd(self.smallest_integer(), other.smallest_integer())
        return Ideal.from_generators(self.order, self.basis + other.basis, modulus=modulus)


    def __mul__(self, other: object) -> 'Ideal':
        if type(other) is int:
            return self.scale(other)

        products = [self.order.multiply(a, b) for a in self.basis for b in other.basis]
        modulus  = self.smallest_integer() * other.smallest_integer()
        return Ideal.from_generators(self.order, products, modulus=modulus)


    __rmul__ = __mul__


    def __and__(self, other: 'Ideal') -> 'Ideal':
        return Ideal(self.order, lattice_intersection(self.basis, other.basis))


    def quotient(self, other: 'Ideal') -> 'Ideal':
        """
        Computes `I : J = {x in O : xJ ⊆ I}` as the intersection, over the generators
        `g` of `J`, of the preimages of `I` under multiplication by `g`.

        Parameters:
            other (Ideal): The ideal `J`.

        Returns:
            Ideal: `I : J`.
        """
        result = None

        for g in other.basis:
            preimage = lattice_preimage(self.order.multiplication_matrix(g), self.basis)
            result   = preimage if result is None else lattice_intersection(result, preimage)

        return Ideal(self.order, result)



class FractionalIdeal(BaseObject):
    """
    Fractional ideal `I/d` of an `Order`. The pair is normalized so that `d` and the
    content of `I` are coprime, which makes the representation unique.

    Examples:
        >>> from numfield.math.algebra.fields.number_field import NumberField
        >>> from numfield.math.multivariate_polynomial import x
        >>> O = NumberField(x**2 - 2).O
        >>> O.make_frac_ideal(2, O.ideal_generated_by(O(2))) == O.one
        True

    """

    def __init__(self, denominator: int, numerator: Ideal):
        """
        Parameters:
            denominator (int): Positive integer `d`.
            numerator (Ideal): Integral ideal `I`.
        """
        if denominator <= 0:
            raise ValueError("Denominator must be positive")

        g = gcd(denominator, numerator.content())

        if g > 1:
            denominator //= g
            numerator     = numerator.divide(g)

        self.denominator = denominator
        self.numerator   = numerator


    def __reprdir__(self):
        return ['denominator', 'numerator']


    @property
    def order(self) -> 'Order':
        return self.numerator.order


    def shorthand(self) -> str:
        if self.denominator == 1:
            return self.numerator.shorthand()

        return f'1/{self.denominator} * {self.numerator.shorthand()}'


    def __eq__(self, other: object) -> bool:
        return type(self) == type(other) and self.denominator == other.denominator and self.numerator == other.numerator


    def __hash__(self) -> int:
        return hash((self.__class__, self.denominator, self.numerator))


    def is_integral(self) -> bool:
        return self.denominator == 1


    def _over_common_denominator(self, other: 'FractionalIdeal') -> (int, Ideal, Ideal):
        L = lcm(self.denominator, other.denominator)
        return L, self.numerator.scale(L // self.denominator), other.numerator.scale(L // other.denominator)


    def __add__(self, other: 'FractionalIdeal') -> 'FractionalIdeal':
        L, I, J = self._over_common_denominator(other)
        return FractionalIdeal(L, I + J)


    def __and__(self, other: 'FractionalIdeal') -> 'FractionalIdeal':
        L, I, J = self._over_common_denominator(other)
        return FractionalIdeal(L, I & J)


    def __mul__(self, other: 'FractionalIdeal') -> 'FractionalIdeal':
        return FractionalIdeal(self.denominator * other.denominator, self.numerator * other.numerator)


    def __pow__(self, exponent: int) -> 'FractionalIdeal':
        """
        Negative powers are powers of `(O : I)`, the inverse of `I` whenever `I` is
        invertible in the base order.

        Examples:
            >>> from numfield.math.algebra.fields.number_field import NumberField
            >>> from numfield.math.multivariate_polynomial import x
            >>> O = NumberField(x**2 - 2).O
            >>> root_two = O.make_frac_ideal(1, O.ideal_generated_by(O([1, 0])))
            >>> root_two**-2 == O.make_frac_ideal(2, O.one_i)
            True

        """
        if exponent < 0:
            return self.order.one.quotient(self)**(-exponent)

        result = self.order.one
        base   = self

        while exponent:
            if exponent & 1:
                result *= base

            base     *= base
            exponent >>= 1

        return result


    def quotient(self, other: 'FractionalIdeal') -> 'FractionalIdeal':
        """
        Computes `I :_K J = {x in K : xJ ⊆ I}`.

        With `I = I'/d1` and `J = J'/d2`, and `N` the least positive integer in `J'`,
        `I :_K J = d2/(d1*N) * (N*I' : J')`.

        Parameters:
            other (FractionalIdeal): The fractional ideal `J`.

        Returns:
            FractionalIdeal: `I :_K J`.

        Examples:
            >>> from numfield.math.algebra.fields.number_field import NumberField
            >>> from numfield.math.multivariate_polynomial import x
            >>> O = NumberField(x**2 - 2).O
            >>> root_two = O.make_frac_ideal(1, O.ideal_generated_by(O([1, 0])))
            >>> O.one.quotient(root_two) * root_two == O.one
            True

        """
        N = other.numerator.smallest_integer()
        Q = self.numerator.scale(N).quotient(other.numerator)
        return FractionalIdeal(self.denominator * N, Q.scale(other.denominator))


    def __le__(self, other: 'FractionalIdeal') -> bool:
        L, I, J = self._over_common_denominator(other)
        return I <= J


    def contains(self, elem: 'NumberFieldElement') -> bool:
        d, o = self.order.make_o_el(elem)
        scaled = [a * self.denominator for a in o.val]

        if any(a % d for a in scaled):
            return False

        return lattice_contains(self.numerator.basis, [a // d for a in scaled])


    def basis_elements(self) -> list:
        """
        Z-basis of the fractional ideal as field elements.
        """
        return [self.order.order_el_to_f_elem((self.denominator, self.order(row))) for row in self.numerator.basis]
