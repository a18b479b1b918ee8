import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.matrix import matrix_add, matrix_subtract, strassen_multiply


def _square(n):
    return st.lists(
        st.lists(st.integers(-20, 20), min_size=n, max_size=n), min_size=n, max_size=n
    )


pairs = st.integers(1, 6).flatmap(lambda n: st.tuples(_square(n), _square(n)))
triples = st.integers(1, 5).flatmap(
    lambda n: st.tuples(_square(n), _square(n), _square(n))
)


def _naive(a, b):
    columns = list(zip(*b))
    return [[sum(x * y for x, y in zip(row, col)) for col in columns] for row in a]


def _identity(n):
    return [[1 if i == j else 0 for j in range(n)] for i in range(n)]


def test_strassen_two_by_two_example():
    assert strassen_multiply([[1, 2], [3, 4]], [[5, 6], [7, 8]]) == [[19, 22], [43, 50]]


@given(pair=pairs)
def test_strassen_matches_row_by_column_product(pair):
    a, b = pair
    assert strassen_multiply(a, b) == _naive(a, b)


@given(m=st.integers(1, 7).flatmap(_square))
def test_identity_is_neutral(m):
    n = len(m)
    assert strassen_multiply(m, _identity(n)) == m
    assert strassen_multiply(_identity(n), m) == m


@given(t=triples)
def test_multiplication_is_associative(t):
    a, b, c = t
    left = strassen_multiply(strassen_multiply(a, b), c)
    right = strassen_multiply(a, strassen_multiply(b, c))
    assert left == right


def test_strassen_single_element():
    assert strassen_multiply([[3]], [[-4]]) == [[-12]]


def test_strassen_empty():
    assert strassen_multiply([], []) == []


def test_strassen_rejects_mismatched_sizes():
    with pytest.raises(ValueError):
        strassen_multiply([[1, 2], [3, 4]], [[1]])
    with pytest.raises(ValueError):
        strassen_multiply([[1, 2]], [[1, 2]])


@given(pair=pairs)
def test_add_then_subtract_round_trip(pair):
    a, b = pair
    assert matrix_subtract(matrix_add(a, b), b) == a


@given(pair=pairs)
def test_add_is_commutative(pair):
    a, b = pair
    assert matrix_add(a, b) == matrix_add(b, a)


def test_add_and_subtract_reject_shape_mismatch():
    with pytest.raises(ValueError):
        matrix_add([[1, 2]], [[1]])
    with pytest.raises(ValueError):
        matrix_subtract([[1]], [[1], [2]])