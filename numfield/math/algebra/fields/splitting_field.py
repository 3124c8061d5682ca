from numfield.math.algebra.fields.number_field import NumberField
from numfield.math.matrix import rational_rank, rational_solve
from numfield.math.multivariate_polynomial import make_multivariate, make_univariate, qqx, qqx_from_coeffs, x
from numfield.utilities.runtime import RUNTIME
from sympy import Poly
from itertools import count
import logging

log = logging.getLogger(__name__)


def _tower_coords(f: 'FieldPolynomial', degree: int) -> list:
    return [c for j in range(degree) for c in f[j].coords()]


def primitive_elem(p: object, q: object, v0: int, v1: int, visual: bool=False) -> (Poly, Poly, Poly):
    """
    Finds a primitive element of the compositum `QQ(v0, v1)` where `v0` is a root of
    `p` and `v1` is a root of `q` over `QQ(v0)`.

    Candidates `v0 + t*v1` are tried for `t = 0, 1, 2, ...` until their powers span the
    tower `QQ(v0)[y]/(q)` over QQ.

    Parameters:
        p (Expr): Irreducible multivariate polynomial in dimension `v0`.
        q (Expr): Multivariate polynomial in dimensions `v0` and `v1`, irreducible over `QQ[v0]/(p)`.
        v0 (int): Dimension of the first generator.
        v1 (int): Dimension of the second generator.
        visual (bool): Whether or not to show a progress bar.

    Returns:
        (Poly, Poly, Poly): `(prim, v0_in_prim, v1_in_prim)`, where `QQ[x]/(prim)` is the compositum
                            and the other two express `v0` and `v1` in it.

    Examples:
        >>> from numfield.math.algebra.fields.splitting_field import primitive_elem
        >>> from sympy import Symbol
        >>> x_0, x_1 = Symbol('x_0'), Symbol('x_1')
        >>> prim, a, b = primitive_elem(x_0**2 - 2, x_1**2 - 3, 0, 1)
        >>> prim.as_expr()
        x**4 - 10*x**2 + 1

    """
    K  = NumberField(make_univariate(p))
    Q  = K.X.from_multivariate(q, v0, v1).monic()
    dp = K.degree()
    dq = Q.degree()
    N  = dp*dq

    y   = K.X([K.zero, K.one])
    gen = K.X([K.generator])

    for t in RUNTIME.report_progress(count(0), visual=visual, desc='primitive element', unit='candidate'):
        theta  = (gen + y*K(t)) % Q
        powers = [K.X.one % Q]

        for _ in range(N):
            powers.append((powers[-1] * theta) % Q)

        basis = [_tower_coords(power, dq) for power in powers[:N]]

        if rational_rank(basis) < N:
            log.debug(f'{t} does not give a primitive element')
            continue

        log.debug(f'Found primitive element v{v0} + {t}*v{v1}')
        prim = rational_solve(basis, _tower_coords(powers[N], dq))
        v0_c = rational_solve(basis, _tower_coords(gen, dq))
        v1_c = rational_solve(basis, _tower_coords(y % Q, dq))

        return qqx_from_coeffs([-c for c in prim] + [1]), qqx_from_coeffs(v0_c), qqx_from_coeffs(v1_c)


def splitting_field(p: object, visual: bool=False) -> (Poly, list):
    """
    Computes the splitting field of a rational polynomial by repeatedly adjoining a root
    of a non-linear factor.

    Parameters:
        p    (object): Rational polynomial (anything `qqx` accepts).
        visual (bool): Whether or not to show a progress bar.

    Returns:
        (Poly, list): `(min_poly, [(root, multiplicity), ...])` where `QQ[x]/(min_poly)` is the
                      splitting field and each root is a polynomial in its generator.

    Examples:
        >>> from numfield.math.algebra.fields.splitting_field import splitting_field
        >>> from numfield.math.multivariate_polynomial import x
        >>> min_poly, roots = splitting_field(x**2 - 2)
        >>> min_poly.as_expr(), len(roots)
        (x**2 - 2, 2)

    """
    p = qqx(p)
    K = NumberField(x)
    progress = RUNTIME.report_progress(None, visual=visual, desc='splitting field', unit='extension')

    while True:
        _, factors = K.X.factor(K.X.lift(p))
        nonlinear  = [g for g, _ in factors if g.degree() > 1]

        if not nonlinear:
            progress.close()
            return K.min_poly, [(g.extract_root_from_linear().val, mult) for g, mult in factors]

        g = nonlinear[0]
        log.debug(f'Adjoining a root of {g} to {K.shorthand()}')

        prim, _, _ = primitive_elem(make_multivariate(0, K.min_poly), g.de_lift(), 0, 1)
        K = NumberField(prim)
        progress.update(1)
