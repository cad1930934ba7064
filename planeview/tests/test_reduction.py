import numpy as np
import pytest

from planeview import Matrix, pivot_columns, rank, reduce, rref, to_echelon


ATOL = 1e-5


def build_singular() -> Matrix:
    return Matrix.from_rows([[1, 2, 3], [4, 5, 6], [7, 8, 9]])


def test_rref_of_nonsingular_matrix_is_identity():
    reduced = rref(Matrix.from_entries(2, 2, [1, 2, 3, 4]))
    assert reduced.allclose(Matrix.identity(2), ATOL)


def test_rref_of_dependent_rows():
    reduced = rref(Matrix.from_rows([[1, 2, 3], [2, 4, 6]]))
    assert reduced.allclose(Matrix.from_rows([[1, 2, 3], [0, 0, 0]]), ATOL)


def test_rref_of_singular_square_matrix():
    reduced = rref(build_singular())
    expected = Matrix.from_rows([[1, 0, -1], [0, 1, 2], [0, 0, 0]])
    assert reduced.allclose(expected, ATOL)


def test_rref_does_not_mutate_input():
    matrix = build_singular()
    snapshot = [list(col) for col in matrix.values]
    rref(matrix)
    matrix.rref()
    assert matrix.values == snapshot


@pytest.mark.parametrize("seed", [0, 1, 2])
def test_rref_is_idempotent(seed):
    matrix = Matrix.random_matrix(3, 5, rng=np.random.default_rng(seed))
    once = rref(matrix)
    twice = rref(once)
    assert twice.allclose(once, ATOL)


def test_reduce_works_in_place_and_keeps_shape():
    matrix = Matrix.from_rows([[2, 4], [1, 3], [0, 1]])
    result = matrix.reduce()
    assert result is matrix
    assert matrix.shape == (3, 2)
    assert matrix.allclose(Matrix.from_rows([[1, 0], [0, 1], [0, 0]]), ATOL)


def test_forward_phase_uses_partial_pivoting():
    matrix = Matrix.from_rows([[1, 2], [3, 4]])
    to_echelon(matrix)
    assert np.allclose(matrix.to_array(), [[3.0, 4.0], [0.0, 2.0 / 3.0]])


def test_forward_phase_skips_columns_without_pivot():
    matrix = Matrix.from_rows([[0, 2, 1], [0, 4, 5]])
    to_echelon(matrix)
    assert np.allclose(matrix.to_array(), [[0.0, 4.0, 5.0], [0.0, 0.0, -1.5]])


def test_backward_phase_pivots_on_leftmost_nonzero_entry():
    # row 1 is scanned from column 0, so its pivot is column 2
    reduced = rref(Matrix.from_rows([[0, 1, 2], [0, 0, 1]]))
    assert reduced.allclose(Matrix.from_rows([[0, 1, 0], [0, 0, 1]]), ATOL)
    assert pivot_columns(Matrix.from_rows([[0, 1, 2], [0, 0, 1]])) == [1, 2]


def test_rref_has_unit_pivots_and_cleared_columns():
    matrix = Matrix.random_matrix(4, 6, rng=np.random.default_rng(11))
    reduced = rref(matrix)
    arr = reduced.to_array()
    for row, col in enumerate(pivot_columns(matrix)):
        assert np.isclose(arr[row, col], 1.0, atol=ATOL)
        others = np.delete(arr[:, col], row)
        assert np.allclose(others, 0.0, atol=ATOL)


def test_rank_matches_numpy():
    cases = [
        build_singular(),
        Matrix.from_rows([[1, 2, 3], [2, 4, 6]]),
        Matrix.identity(3),
        Matrix.from_rows([[1, 0, 2, 1], [0, 1, 1, 0], [1, 1, 3, 1]]),
    ]
    for matrix in cases:
        assert rank(matrix) == np.linalg.matrix_rank(matrix.to_array())


def test_tolerance_is_configurable():
    matrix = Matrix.from_rows([[1, 0], [0, 1e-6]])
    assert rank(matrix) == 1
    assert rank(matrix, atol=1e-9) == 2
    assert reduce(matrix.copy(), atol=1e-9).allclose(Matrix.identity(2))


def test_reduction_is_total_for_degenerate_shapes():
    assert rref(Matrix(1, 1)).allclose(Matrix(1, 1))
    assert rref(Matrix(3, 2)).allclose(Matrix(3, 2))
    assert rref(Matrix.from_rows([[5.0]])).allclose(Matrix.identity(1))
    column = rref(Matrix.from_columns([[0.0, 2.0, -4.0]]))
    assert column.allclose(Matrix.from_columns([[1.0, 0.0, 0.0]]), ATOL)
