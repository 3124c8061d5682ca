"""
Exact linear algebra over the integers and the rationals.

Matrices are lists of rows. Integer lattices are always given by generating
rows; `hermite_normal_form` brings them into the canonical row-style HNF: an
echelon basis with positive pivots and, above every pivot, entries reduced
into `[0, pivot)`. For full-rank lattices the HNF is square and upper triangular.
"""
from numfield.math.general import to_fraction
from numfield.utilities.exceptions import NoSolutionException
from fractions import Fraction


def identity(n: int, scale: int=1) -> list:
    return [[scale if i == j else 0 for j in range(n)] for i in range(n)]


def hermite_normal_form(rows: list, modulus: int=None) -> list:
    """
    Computes the row Hermite normal form of the lattice generated by `rows`.

    Parameters:
        rows    (list): Integer generators, all of the same length.
        modulus  (int): A positive integer `D` such that `D*Z^n` is contained in the lattice.
                        Lets the generators be reduced modulo `D` first.

    Returns:
        list: HNF basis as a list of tuples. Zero rows are dropped.

    Examples:
        >>> from numfield.math.matrix import hermite_normal_form
        >>> hermite_normal_form([[0, 2], [2, 0], [1, 1], [1, 5]])
        [(1, 1), (0, 2)]

        >>> hermite_normal_form([[4, 6], [6, 9]])
        [(2, 3)]

    """
    rows = [list(r) for r in rows]

    if not rows:
        return []

    n = len(rows[0])

    if modulus:
        rows  = [[a % modulus for a in r] for r in rows]
        rows += identity(n, modulus)

    rows = [r for r in rows if any(r)]
    pivot_row = 0

    for col in range(n):
        if pivot_row >= len(rows):
            break

        while True:
            nonzero = [i for i in range(pivot_row, len(rows)) if rows[i][col]]
            if not nonzero:
                break

            best = min(nonzero, key=lambda i: abs(rows[i][col]))
            rows[pivot_row], rows[best] = rows[best], rows[pivot_row]
            pivot  = rows[pivot_row]
            is_reduced = True

            for i in range(pivot_row+1, len(rows)):
                if rows[i][col]:
                    q = rows[i][col] // pivot[col]
                    rows[i] = [a - q*b for a, b in zip(rows[i], pivot)]

                    if rows[i][col]:
                        is_reduced = False

            if is_reduced:
                break


        if not rows[pivot_row][col]:
            continue

        if rows[pivot_row][col] < 0:
            rows[pivot_row] = [-a for a in rows[pivot_row]]

        pivot = rows[pivot_row]

        for i in range(pivot_row):
            q = rows[i][col] // pivot[col]
            if q:
                rows[i] = [a - q*b for a, b in zip(rows[i], pivot)]

        pivot_row += 1
        rows = rows[:pivot_row] + [r for r in rows[pivot_row:] if any(r)]

    return [tuple(r) for r in rows[:pivot_row]]


def pivot_columns(hnf: list) -> list:
    return [next(i for i, a in enumerate(row) if a) for row in hnf]


def reduce_vector(vector: list, hnf: list) -> tuple:
    """
    Reduces `vector` modulo the lattice spanned by the echelon basis `hnf`.
    The result is a canonical representative of the coset; it is zero iff `vector`
    lies in the lattice.
    """
    vector = list(vector)

    for row, col in zip(hnf, pivot_columns(hnf)):
        q = vector[col] // row[col]
        if q:
            vector = [a - q*b for a, b in zip(vector, row)]

    return tuple(vector)


def lattice_contains(hnf: list, vector: list) -> bool:
    return not any(reduce_vector(vector, hnf))


def integer_kernel(rows: list, width: int=None) -> list:
    """
    Computes a basis of the left kernel `{x in Z^k : x*M = 0}` of the `k x l` matrix `rows`.

    Parameters:
        rows  (list): The matrix `M`.
        width  (int): Number of columns `l`; only needed when `rows` may be empty rows.

    Returns:
        list: HNF basis of the kernel.

    Examples:
        >>> from numfield.math.matrix import integer_kernel
        >>> integer_kernel([[1], [1]])
        [(1, -1)]

    """
    k = len(rows)
    l = width if width is not None else (len(rows[0]) if rows else 0)

    augmented = [list(rows[i]) + [1 if i == j else 0 for j in range(k)] for i in range(k)]
    kernel    = [r[l:] for r in hermite_normal_form(augmented) if not any(r[:l])]
    return hermite_normal_form(kernel)


def lattice_intersection(A: list, B: list) -> list:
    """
    Computes the HNF basis of the intersection of the lattices spanned by `A` and `B`.

    Examples:
        >>> from numfield.math.matrix import lattice_intersection
        >>> lattice_intersection([[2, 0], [0, 2]], [[1, 0], [0, 2]])
        [(2, 0), (0, 2)]

    """
    n = len(A[0])
    augmented = [list(a) + list(a) for a in A] + [list(b) + [0]*n for b in B]
    meet      = [r[n:] for r in hermite_normal_form(augmented) if not any(r[:n])]
    return hermite_normal_form(meet)


def lattice_preimage(M: list, B: list) -> list:
    """
    Computes the HNF basis of `{x in Z^k : x*M in span(B)}` for a `k x n` matrix `M`
    and generators `B` of a sublattice of `Z^n`.
    """
    k = len(M)
    n = len(M[0])
    augmented  = [list(M[i]) + [1 if i == j else 0 for j in range(k)] for i in range(k)]
    augmented += [list(b) + [0]*k for b in B]
    preimage   = [r[n:] for r in hermite_normal_form(augmented) if not any(r[:n])]
    return hermite_normal_form(preimage)


def hnf_determinant(hnf: list) -> int:
    """
    Index of the full-rank lattice with square HNF basis `hnf` in `Z^n`.
    """
    det = 1
    for i, row in enumerate(hnf):
        det *= row[i]

    return det


def _row_reduce(matrix: list) -> (list, list):
    matrix = [[to_fraction(a) for a in row] for row in matrix]
    pivots = []

    if not matrix:
        return matrix, pivots

    num_rows = len(matrix)
    num_cols = len(matrix[0])
    r = 0

    for c in range(num_cols):
        pivot = next((i for i in range(r, num_rows) if matrix[i][c]), None)
        if pivot is None:
            continue

        matrix[r], matrix[pivot] = matrix[pivot], matrix[r]
        inv = 1 / matrix[r][c]
        matrix[r] = [a * inv for a in matrix[r]]

        for i in range(num_rows):
            if i != r and matrix[i][c]:
                f = matrix[i][c]
                matrix[i] = [a - f*b for a, b in zip(matrix[i], matrix[r])]

        pivots.append(c)
        r += 1

        if r == num_rows:
            break

    return matrix, pivots


def rational_rank(rows: list) -> int:
    return len(_row_reduce(rows)[1])


def rational_solve(rows: list, target: list) -> list:
    """
    Finds rational `c` such that `sum(c[i]*rows[i]) == target`.

    Parameters:
        rows   (list): Vectors to combine.
        target (list): Vector to express.

    Returns:
        list: Coefficients as `Fraction`s; free coefficients are set to zero.

    Examples:
        >>> from numfield.math.matrix import rational_solve
        >>> rational_solve([[1, 0], [1, 2]], [3, 4])
        [Fraction(1, 1), Fraction(2, 1)]

    """
    k = len(rows)
    n = len(target)
    augmented = [[rows[i][j] for i in range(k)] + [target[j]] for j in range(n)]
    reduced, pivots = _row_reduce(augmented)

    if k in pivots:
        raise NoSolutionException("Target is not in the span of the rows", parameters={'rows': rows, 'target': target})

    solution = [Fraction(0)] * k
    for r, c in enumerate(pivots):
        solution[c] = reduced[r][k]

    return solution


def determinant(matrix: list) -> Fraction:
    """
    Determinant of a square rational matrix by fraction-exact elimination.
    """
    matrix = [[to_fraction(a) for a in row] for row in matrix]
    n   = len(matrix)
    det = Fraction(1)

    for c in range(n):
        pivot = next((i for i in range(c, n) if matrix[i][c]), None)
        if pivot is None:
            return Fraction(0)

        if pivot != c:
            matrix[c], matrix[pivot] = matrix[pivot], matrix[c]
            det = -det

        det *= matrix[c][c]

        for i in range(c+1, n):
            if matrix[i][c]:
                f = matrix[i][c] / matrix[c][c]
                matrix[i] = [a - f*b for a, b in zip(matrix[i], matrix[c])]

    return det
