"""
Overorders, factor refinement (Ge, 1993) and unit lattices.

Ideals of an overorder `C` of `O` are represented as `FractionalIdeal`s of `O`
that are closed under multiplication by `C`; `C` itself is a fractional ideal
containing `O.one`.
"""
from numfield.math.algebra.rings.ideal import FractionalIdeal
from numfield.math.matrix import hermite_normal_form, integer_kernel, reduce_vector
from numfield.utilities.exceptions import InvariantViolation
from numfield.utilities.runtime import RUNTIME
import logging

log = logging.getLogger(__name__)


def is_invertible(overorder: FractionalIdeal, ideal: FractionalIdeal) -> bool:
    """
    Determines whether `ideal` is invertible in `overorder`, i.e. `J*(C : J) == C`.
    """
    return ideal * overorder.quotient(ideal) == overorder


def compute_overorder(overorder: FractionalIdeal, ideal: FractionalIdeal) -> (FractionalIdeal, FractionalIdeal):
    """
    Enlarges `overorder` until the ideal it generates from `ideal` is invertible.

    If `J` is not invertible in `C`, then `A = J*(C : J)` is a proper ideal of `C`
    and its multiplier ring `(A : A)` strictly contains `C`. Since every overorder
    lies in the maximal order, this terminates.

    Parameters:
        overorder (FractionalIdeal): Overorder `C` of the base order.
        ideal     (FractionalIdeal): Fractional ideal `I`.

    Returns:
        (FractionalIdeal, FractionalIdeal): `(C', J)` with `C ⊆ C'` and `J = I*C'` invertible in `C'`.

    Examples:
        >>> from numfield.math.algebra.fields.number_field import NumberField
        >>> from numfield.math.multivariate_polynomial import x
        >>> O = NumberField(x**2 - 5).O
        >>> P = O.make_frac_ideal(1, O.idealify([[2, 0], [1, 1]]))
        >>> C, J = O.compute_overorder(O.one, P)
        >>> (C.denominator, C.numerator.basis)
        (2, ((1, 1), (0, 2)))

    """
    C = overorder
    J = ideal * C

    while True:
        A = J * C.quotient(J)

        if A == C:
            return C, J

        enlarged = A.quotient(A)

        if enlarged == C or not C <= enlarged:
            raise InvariantViolation(f"Multiplier ring of {A.shorthand()} does not enlarge {C.shorthand()}")

        log.debug(f'Enlarged overorder to {enlarged.shorthand()}')
        C = enlarged
        J = J * C



def _add_vectors(a: tuple, b: tuple) -> tuple:
    return tuple(x + y for x, y in zip(a, b))


def _lift(pieces: list, overorder: FractionalIdeal) -> list:
    return [(J * overorder, vec) for J, vec in pieces]


def _prune(pieces: list, overorder: FractionalIdeal) -> list:
    merged = {}

    for J, vec in pieces:
        if J == overorder:
            continue

        merged[J] = _add_vectors(merged[J], vec) if J in merged else vec

    return [(J, vec) for J, vec in merged.items() if any(vec)]


def _find_non_coprime(pieces: list, overorder: FractionalIdeal) -> (int, int, FractionalIdeal):
    for a in range(len(pieces)):
        for b in range(a+1, len(pieces)):
            G = pieces[a][0] + pieces[b][0]

            if G != overorder:
                return a, b, G

    return None


def refine(order: 'Order', ideals: list, visual: bool=False) -> (FractionalIdeal, list):
    """
    Runs factor refinement and keeps the exponent vectors.

    Each input `I'/d` contributes the piece `I'` with exponent vector `e_i` and,
    when `d > 1`, the piece `d*O` with exponent vector `-e_i`. The product of the
    pieces raised to their vectors, lifted to the current overorder, always equals
    the product of the inputs lifted to it.

    Parameters:
        order  (Order): Base order.
        ideals  (list): Fractional ideals of `order`.
        visual  (bool): Whether or not to show a progress bar.

    Returns:
        (FractionalIdeal, list): Overorder `C` and `[(J, exponent vector), ...]`.
    """
    k      = len(ideals)
    C      = order.one
    pieces = []

    for i, I in enumerate(ideals):
        vec = tuple(int(i == j) for j in range(k))
        pieces.append((FractionalIdeal(1, I.numerator), vec))

        if I.denominator > 1:
            pieces.append((FractionalIdeal(1, order.one_i.scale(I.denominator)), tuple(-v for v in vec)))


    for idx in range(len(pieces)):
        if not is_invertible(C, pieces[idx][0]):
            C, _   = compute_overorder(C, pieces[idx][0])
            pieces = _lift(pieces, C)


    pieces   = _prune(pieces, C)
    progress = RUNTIME.report_progress(None, visual=visual, desc='factor refinement', unit='split')

    while True:
        pair = _find_non_coprime(pieces, C)

        if not pair:
            break

        a, b, G = pair

        if not is_invertible(C, G):
            C, _   = compute_overorder(C, G)
            pieces = _prune(_lift(pieces, C), C)
            continue

        G_inv = C.quotient(G)
        (J_a, v_a), (J_b, v_b) = pieces[a], pieces[b]
        log.debug(f'Splitting {J_a.shorthand()} and {J_b.shorthand()} over {G.shorthand()}')

        rest   = [piece for idx, piece in enumerate(pieces) if idx not in (a, b)]
        pieces = _prune(rest + [(G, _add_vectors(v_a, v_b)), (J_a * G_inv, v_a), (J_b * G_inv, v_b)], C)
        progress.update(1)

    progress.close()
    return C, pieces


def factor_refinement(order: 'Order', ideals: list, visual: bool=False) -> (FractionalIdeal, list):
    """
    Computes an overorder `C` and pairwise coprime, proper, invertible ideals `J_1, ..., J_l`
    of `C` with exponents `e_i` such that the product of the inputs lifted to `C`
    equals `J_1^e_1 * ... * J_l^e_l`.

    The first non-coprime pair in list order is split first.

    Parameters:
        order  (Order): Base order.
        ideals  (list): Fractional ideals of `order`.
        visual  (bool): Whether or not to show a progress bar.

    Returns:
        (FractionalIdeal, list): `(C, [(J_1, e_1), ...])`.

    Examples:
        >>> from numfield.math.algebra.fields.number_field import NumberField
        >>> from numfield.math.multivariate_polynomial import x
        >>> O = NumberField(x**2 - 5).O
        >>> two = O.frac_ideal_generated_by(O.field(2))
        >>> C, factors = O.factor_refinement([two, two])
        >>> C == O.one, [(J.shorthand(), e) for J, e in factors]
        (True, [('[[2, 0], [0, 2]]', 2)])

    """
    C, pieces = refine(order, ideals, visual=visual)
    totals    = [(J, sum(vec)) for J, vec in pieces]
    return C, [(J, e) for J, e in totals if e]


def compute_factorization(order: 'Order', ideals: list, visual: bool=False) -> (list, list, FractionalIdeal):
    """
    Factors each input over a common coprime basis.

    Parameters:
        order  (Order): Base order.
        ideals  (list): Fractional ideals `I_1, ..., I_k` of `order`.
        visual  (bool): Whether or not to show a progress bar.

    Returns:
        (list, list, FractionalIdeal): `(M, [J_1, ..., J_l], C)` where `I_i*C = prod(J_j^M[i][j])`.
    """
    C, pieces = refine(order, ideals, visual=visual)
    rows = [[vec[i] for _, vec in pieces] for i in range(len(ideals))]
    return rows, [J for J, _ in pieces], C



class _UnitResidues(object):
    """
    Arithmetic in `C / f` for an overorder `C` with conductor `f = (O : C)`.

    An element `x` of `C` is held as the integer vector `d*x` (in the basis of `O`,
    where `x` is in `C ⊆ O/d`), reduced modulo `d*f`. Since `d*f ⊆ d*O`, `x` lies
    in `O` exactly when every entry is divisible by `d`.
    """

    def __init__(self, order: 'Order', overorder: FractionalIdeal):
        conductor = order.one.quotient(overorder)

        if not conductor.is_integral():
            raise InvariantViolation(f"Conductor {conductor.shorthand()} is not integral")

        self.order   = order
        self.d       = overorder.denominator
        self.modulus = conductor.numerator.scale(self.d)
        self.size    = self.modulus.norm() // overorder.numerator.norm()
        self.one     = self.residue(order.field.one)


    def residue(self, elem: 'NumberFieldElement') -> tuple:
        d, o = self.order.make_o_el(elem)

        if self.d % d:
            raise InvariantViolation(f"{elem} is not in the overorder")

        return reduce_vector([a * (self.d // d) for a in o.val], self.modulus.basis)


    def mul(self, y1: tuple, y2: tuple) -> tuple:
        return reduce_vector([a // self.d for a in self.order.multiply(y1, y2)], self.modulus.basis)


    def in_order(self, y: tuple) -> bool:
        return not any(a % self.d for a in y)



def _unit_relations(residues: _UnitResidues, units: list) -> list:
    """
    Computes generators of the lattice of `m` with `prod(u_j^m_j)` in `O`, where the
    `u_j` are units of the overorder. Builds the subgroup of `C^× / O^×` generated by
    `u_1, ..., u_j` one unit at a time; the order of `u_j` modulo the previous subgroup
    gives one relation per unit.
    """
    r        = len(units)
    subgroup = [(residues.one, residues.one, (0,)*r)]
    relations = []

    for j, (u, u_inv) in enumerate(units):
        power = residues.one
        found = None

        for t in range(1, residues.size + 1):
            power = residues.mul(power, u)
            found = next((h for h in subgroup if residues.in_order(residues.mul(power, h[1]))), None)

            if found:
                break

        if not found:
            raise InvariantViolation(f"Unit {j} has no finite order modulo the base order")

        log.debug(f'Unit {j} has order {t} modulo the units found so far')
        relations.append(tuple(t*int(i == j) - found[2][i] for i in range(r)))

        expanded = []
        p, p_inv = residues.one, residues.one

        for s in range(t):
            for h, h_inv, exps in subgroup:
                expanded.append((residues.mul(h, p), residues.mul(h_inv, p_inv), tuple(e + s*int(i == j) for i, e in enumerate(exps))))

            p, p_inv = residues.mul(p, u), residues.mul(p_inv, u_inv)

        if len(expanded) > residues.size:
            raise InvariantViolation("Unit subgroup outgrew the residue ring")

        subgroup = expanded

    return relations


def find_unit_basis(order: 'Order', gammas: list) -> list:
    """
    Computes a basis of the lattice of exponent vectors `(n_1, ..., n_k)` such that
    `gamma_1^n_1 * ... * gamma_k^n_k` is a unit of `order`.

    Refining the principal ideals `(gamma_i)` gives the exponent vectors whose product is
    a unit of the overorder `C`. Those units are then cut down to units of `order` by
    their relations in `C^× / O^×`, computed modulo the conductor.

    Parameters:
        order  (Order): Base order.
        gammas  (list): Non-zero field elements.

    Returns:
        list: Rows of the basis in Hermite normal form.

    Examples:
        >>> from numfield.math.algebra.fields.number_field import NumberField
        >>> from numfield.math.multivariate_polynomial import x
        >>> K = NumberField(x**2 - 5)
        >>> K.O.find_unit_basis([K.generator + 1, K(2)])
        [[3, -3]]

    """
    field  = order.field
    gammas = [field.coerce(g) for g in gammas]
    ideals = [order.frac_ideal_generated_by(g) for g in gammas]

    rows, Js, C = compute_factorization(order, ideals)
    kernel      = integer_kernel(rows, width=len(Js))

    if C == order.one or not kernel:
        return [list(row) for row in hermite_normal_form(kernel)]

    units = []
    for row in kernel:
        u = field.one
        for g, m in zip(gammas, row):
            if m:
                u *= g**m

        units.append(u)

    residues  = _UnitResidues(order, C)
    relations = _unit_relations(residues, [(residues.residue(u), residues.residue(~u)) for u in units])
    lattice   = [[sum(rel[r]*kernel[r][i] for r in range(len(kernel))) for i in range(len(gammas))] for rel in relations]

    return [list(row) for row in hermite_normal_form(lattice)]
