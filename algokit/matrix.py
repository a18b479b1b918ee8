"""Square matrix addition, subtraction and Strassen multiplication."""

from __future__ import annotations

from collections.abc import Sequence

Matrix = list[list[int]]


def _check_same_shape(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]) -> None:
    if len(a) != len(b) or any(len(ra) != len(rb) for ra, rb in zip(a, b)):
        raise ValueError("matrices must have the same shape")


def matrix_add(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]) -> Matrix:
    """Return the element-wise sum of two matrices of the same shape."""
    _check_same_shape(a, b)
    return [[x + y for x, y in zip(ra, rb)] for ra, rb in zip(a, b)]


def matrix_subtract(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]) -> Matrix:
    """Return the element-wise difference ``a - b``."""
    _check_same_shape(a, b)
    return [[x - y for x, y in zip(ra, rb)] for ra, rb in zip(a, b)]


def _quadrants(m: Matrix) -> tuple[Matrix, Matrix, Matrix, Matrix]:
    half = len(m) // 2
    top, bottom = m[:half], m[half:]
    return (
        [row[:half] for row in top],
        [row[half:] for row in top],
        [row[:half] for row in bottom],
        [row[half:] for row in bottom],
    )


def _join(c11: Matrix, c12: Matrix, c21: Matrix, c22: Matrix) -> Matrix:
    return [l + r for l, r in zip(c11, c12)] + [l + r for l, r in zip(c21, c22)]


def _strassen(a: Matrix, b: Matrix) -> Matrix:
    if len(a) == 1:
        return [[a[0][0] * b[0][0]]]
    a11, a12, a21, a22 = _quadrants(a)
    b11, b12, b21, b22 = _quadrants(b)

    p = _strassen(matrix_add(a11, a22), matrix_add(b11, b22))
    q = _strassen(matrix_add(a21, a22), b11)
    r = _strassen(a11, matrix_subtract(b12, b22))
    s = _strassen(a22, matrix_subtract(b21, b11))
    t = _strassen(matrix_add(a11, a12), b22)
    u = _strassen(matrix_subtract(a21, a11), matrix_add(b11, b12))
    v = _strassen(matrix_subtract(a12, a22), matrix_add(b21, b22))

    c11 = matrix_add(matrix_subtract(matrix_add(p, s), t), v)
    c12 = matrix_add(r, t)
    c21 = matrix_add(q, s)
    c22 = matrix_add(matrix_subtract(matrix_add(p, r), q), u)
    return _join(c11, c12, c21, c22)


def _pad(m: Sequence[Sequence[int]], size: int) -> Matrix:
    padded = [list(row) + [0] * (size - len(row)) for row in m]
    padded.extend([0] * size for _ in range(size - len(m)))
    return padded


def strassen_multiply(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]) -> Matrix:
    """Multiply two square matrices of equal size with Strassen's method.

    Sizes that are not a power of two are padded with zeros and trimmed back.
    """
    n = len(a)
    if len(b) != n or any(len(row) != n for row in a) or any(len(row) != n for row in b):
        raise ValueError("matrices must be square and of the same size")
    if n == 0:
        return []
    size = 1 << (n - 1).bit_length()
    product = _strassen(_pad(a, size), _pad(b, size))
    return [row[:n] for row in product[:n]]