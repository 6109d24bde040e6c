"""ML-SUBSET

:author: Sebastian Flennerhag
:copyright: 2017-2018
:licence: MIT
"""
import numpy as np
import pytest

from mlsubset import (DataSubset, datasubset, getobs, getobs_into, nobs,
                      shuffleobs, randobs)
from mlsubset.container import FirstAxis, LastAxis, compose_indices
from mlsubset.utils.exceptions import ArgumentError, BoundsError

X = np.arange(30).reshape(3, 10)
y = np.arange(10) * 10


###############################################################################
def test_compose_indices():
    """[Subset] compose_indices: ranges stay lazy, arrays are mapped."""
    assert compose_indices(range(10, 20), range(2, 8, 2)) == range(12, 18, 2)
    np.testing.assert_array_equal(
        compose_indices(range(10, 20), np.array([3, 0])), [13, 10])
    np.testing.assert_array_equal(
        compose_indices(np.array([4, 2, 7]), range(2, -1, -1)), [7, 2, 4])
    assert compose_indices(np.array([4, 2, 7]), 1) == 2
    np.testing.assert_array_equal(compose_indices(5, np.array([0, 0])),
                                  [5, 5])


def test_subset_default_indices():
    """[Subset] DataSubset: no indices spans the whole container."""
    sub = DataSubset(X)
    assert sub.indices == range(10)
    assert sub.axis == LastAxis()
    assert len(sub) == nobs(sub) == 10
    np.testing.assert_array_equal(getobs(sub), X)


def test_subset_composition_flattens():
    """[Subset] DataSubset: subsets of subsets refer to the base data."""
    inner = DataSubset(X, [9, 1, 4, 6, 2])
    outer = DataSubset(inner, [4, 0])
    assert outer.data is X
    np.testing.assert_array_equal(outer.indices, [2, 9])
    np.testing.assert_array_equal(getobs(outer), X[:, [2, 9]])


def test_subset_composition_law():
    """[Subset] DataSubset: getobs of a composed subset matches direct."""
    rng = np.random.default_rng(3)
    for _ in range(10):
        i = rng.integers(10, size=6)
        j = rng.integers(6, size=4)
        nested = getobs(datasubset(datasubset(X, i), j))
        direct = getobs(X, i[j])
        np.testing.assert_array_equal(nested, direct)


def test_subset_range_composition():
    """[Subset] DataSubset: range composition keeps a range."""
    sub = DataSubset(DataSubset(X, range(2, 10)), range(1, 5))
    assert sub.indices == range(3, 7)


def test_subset_scalar():
    """[Subset] DataSubset: scalar index drops the observation axis."""
    sub = DataSubset(X, 3)
    assert len(sub) == 1
    np.testing.assert_array_equal(getobs(sub), [3, 13, 23])


def test_subset_getobs_relative():
    """[Subset] getobs: indices are relative to the subset."""
    sub = DataSubset(X, range(5, 10))
    np.testing.assert_array_equal(getobs(sub, 0), X[:, 5])
    np.testing.assert_array_equal(getobs(sub, [4, 1]), X[:, [9, 6]])
    with pytest.raises(BoundsError):
        getobs(sub, 5)


def test_subset_bounds_checked_eagerly():
    """[Subset] DataSubset: invalid indices raise at construction."""
    with pytest.raises(BoundsError):
        DataSubset(X, [0, 10])
    with pytest.raises(BoundsError):
        DataSubset(X, -1)
    with pytest.raises(ArgumentError):
        DataSubset(X, [0.0, 1.0])


def test_subset_tuple_raises():
    """[Subset] DataSubset: tuples need datasubset."""
    with pytest.raises(TypeError):
        DataSubset((X, y))


def test_subset_axis():
    """[Subset] DataSubset: explicit axis is kept through composition."""
    sub = DataSubset(X, [0, 2], axis='first')
    assert sub.axis == FirstAxis()
    np.testing.assert_array_equal(getobs(sub), X[[0, 2]])

    inner = DataSubset(sub, [1])
    assert inner.axis == FirstAxis()
    with pytest.raises(ArgumentError):
        DataSubset(sub, [0], axis='last')
    with pytest.raises(ArgumentError):
        nobs(sub, 'last')


def test_subset_indices_immutable():
    """[Subset] DataSubset: stored indices are a read-only copy."""
    idx = np.array([1, 2, 3])
    sub = DataSubset(X, idx)
    idx[0] = 9
    assert sub.indices[0] == 1
    with pytest.raises(ValueError):
        sub.indices[0] = 0


def test_subset_getitem_iter():
    """[Subset] DataSubset: indexing and iteration give subsets."""
    sub = DataSubset(y, range(2, 6))
    part = sub[1:3]
    assert isinstance(part, DataSubset)
    assert part.indices == range(3, 5)

    values = [getobs(s) for s in sub]
    assert values == [20, 30, 40, 50]


def test_subset_equality():
    """[Subset] DataSubset: equal by data, indices and axis."""
    assert DataSubset(X, [1, 2]) == DataSubset(X, range(1, 3))
    assert DataSubset(X, [1, 2]) != DataSubset(X, [2, 1])
    assert DataSubset(X, [1, 2]) != DataSubset(X.copy(), [1, 2])


def test_subset_equality_scalar_and_sequence():
    """[Subset] DataSubset: a scalar subset never equals a sequence one."""
    y = np.arange(10)
    assert DataSubset(y, 3) != DataSubset(y, [3, 4])
    assert not DataSubset(y, [3, 4]) == DataSubset(y, 3)
    assert DataSubset(y, 3) != DataSubset(y, [3])
    assert DataSubset(y, 3) == DataSubset(y, 3)
    assert DataSubset(y, 3) != DataSubset(y, 4)


def test_subset_getobs_into():
    """[Subset] getobs_into: writes through to the base array."""
    sub = DataSubset(X, [7, 8])
    buffer = np.empty((3, 2), dtype=X.dtype)
    out = getobs_into(buffer, sub)
    assert out is buffer
    np.testing.assert_array_equal(buffer, X[:, 7:9])


def test_subset_list():
    """[Subset] DataSubset: works for lists and ranges."""
    sub = datasubset(['a', 'b', 'c', 'd'], [3, 3, 0])
    assert getobs(sub) == ['d', 'd', 'a']
    assert getobs(datasubset(range(100), range(10, 20)), 2) == 12


def test_datasubset_tuple():
    """[Subset] datasubset: maps over linked groups."""
    xs, ys = datasubset((X, y), [0, 4])
    np.testing.assert_array_equal(getobs(xs), X[:, [0, 4]])
    np.testing.assert_array_equal(getobs(ys), [0, 40])

    xs, ys = datasubset((X.T, y), [1], axis=('first', 'last'))
    np.testing.assert_array_equal(getobs(xs), X.T[[1]])


def test_shuffleobs():
    """[Subset] shuffleobs: permutes without copying, is reproducible."""
    xs, ys = shuffleobs((X, y), random_state=1)
    assert xs.data is X
    assert sorted(xs.indices) == list(range(10))
    np.testing.assert_array_equal(getobs(xs)[0] * 10, getobs(ys))

    again, _ = shuffleobs((X, y), random_state=1)
    np.testing.assert_array_equal(xs.indices, again.indices)


def test_randobs():
    """[Subset] randobs: draws observations with replacement."""
    obs = randobs(y, random_state=0)
    assert obs in y

    batch = randobs((X, y), 5, random_state=0)
    assert batch[0].shape == (3, 5)
    np.testing.assert_array_equal(batch[0][0] * 10, batch[1])
