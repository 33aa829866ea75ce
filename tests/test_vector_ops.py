import pytest

from adapters.linear_algebra.vector_ops import dot, matmul, scale


def test_dot_product():
    assert dot([1, 2, 3], [4, 5, 6]) == 32


def test_dot_product_requires_equal_lengths():
    with pytest.raises(ValueError):
        dot([1, 2], [1, 2, 3])


def test_matmul_of_rectangular_matrices():
    result = matmul([[1, 2], [3, 4]], [[5], [6]])

    assert result == [[17.0], [39.0]]


def test_matmul_identity():
    m = [[1.5, -2.0], [0.0, 3.0]]

    assert matmul(m, [[1, 0], [0, 1]]) == m


def test_matmul_rejects_mismatched_shapes():
    with pytest.raises(ValueError):
        matmul([[1, 2, 3]], [[1, 2, 3]])


def test_matmul_rejects_ragged_matrix():
    with pytest.raises(ValueError):
        matmul([[1, 2], [3]], [[1], [2]])


def test_scale_vector_and_matrix():
    assert scale([1, -2], 3) == [3, -6]
    assert scale([[1, 2], [3, 4]], 0.5) == [[0.5, 1.0], [1.5, 2.0]]
