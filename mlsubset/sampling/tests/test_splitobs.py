"""ML-SUBSET

:author: Sebastian Flennerhag
:copyright: 2017-2018
:licence: MIT
"""

import numpy as np
import pytest

from mlsubset import (splitobs, kfolds, leaveout, stratifiedobs, FoldsView,
                      DataSubset, getobs, targets, labelfreq)
from mlsubset.utils.exceptions import ArgumentError

X = np.arange(40).reshape(4, 10)
y = np.arange(10)


class Labeled(object):

    """Container whose targets are read without touching observations."""

    def __init__(self, labels):
        self.labels = labels

    def nobs(self, axis=None):
        return len(self.labels)

    def getobs(self, idx, axis=None):
        raise AssertionError("observations must not be materialized")

    def gettargets(self, idx, axis=None):
        if isinstance(idx, int):
            return self.labels[idx]
        return [self.labels[i] for i in idx]


###############################################################################
def test_splitobs_array():
    """[Sampling] splitobs: contiguous subsets of a matrix."""
    train, test = splitobs(X, at=0.7)
    assert isinstance(train, DataSubset)
    np.testing.assert_array_equal(getobs(train), X[:, :7])
    np.testing.assert_array_equal(getobs(test), X[:, 7:])


def test_splitobs_linked_group():
    """[Sampling] splitobs: linked groups split together."""
    (xtr, ytr), (xte, yte) = splitobs((X, y), at=0.5)
    np.testing.assert_array_equal(getobs(ytr), np.arange(5))
    np.testing.assert_array_equal(getobs(xte), X[:, 5:])


def test_splitobs_axis():
    """[Sampling] splitobs: split along the first axis."""
    train, test = splitobs(X, at=0.5, axis='first')
    np.testing.assert_array_equal(getobs(test), X[2:])


def test_splitobs_many():
    """[Sampling] splitobs: three-way split."""
    parts = splitobs(y, at=(0.5, 0.3))
    assert [len(p) for p in parts] == [5, 3, 2]


def test_splitobs_int():
    """[Sampling] splitobs: an int gives index ranges."""
    assert splitobs(10) == (range(0, 7), range(7, 10))
    with pytest.raises(ArgumentError):
        splitobs(10, at=1.2)


def test_kfolds():
    """[Sampling] kfolds: every observation validated once."""
    folds = kfolds(X, k=4)
    assert isinstance(folds, FoldsView)
    assert [len(val) for _, val in folds] == [3, 3, 2, 2]

    seen = np.concatenate([getobs(val)[0] for _, val in folds])
    np.testing.assert_array_equal(np.sort(seen), X[0])

    train, val = kfolds(10, k=4)
    assert len(train) == len(val) == 4


def test_kfolds_invalid():
    """[Sampling] kfolds: k must be within [2, n]."""
    with pytest.raises(ArgumentError):
        kfolds(y, k=1)
    with pytest.raises(ArgumentError):
        kfolds(y, k=11)


def test_leaveout():
    """[Sampling] leaveout: leave-one-out by default."""
    folds = leaveout(y)
    assert len(folds) == 10
    train, val = folds[3]
    assert getobs(val).tolist() == [3]
    assert len(train) == 9

    folds = leaveout((X, y), size=5)
    assert len(folds) == 2

    with pytest.raises(ArgumentError):
        leaveout(y, size=6)


def test_stratifiedobs_example():
    """[Sampling] stratifiedobs: 6 a's and 3 b's at 0.7."""
    labels = np.array(['a'] * 6 + ['b'] * 3)
    train, test = stratifiedobs(labels, at=0.7, random_state=1)
    assert labelfreq(targets(train)) == {'a': 4, 'b': 2}
    assert labelfreq(targets(test)) == {'a': 2, 'b': 1}


def test_stratifiedobs_linked_group():
    """[Sampling] stratifiedobs: labels come from the last member."""
    labels = np.array([0, 1] * 10)
    data = np.arange(20)
    (xtr, ytr), (xte, yte) = stratifiedobs((data, labels), at=0.5,
                                           random_state=2)
    np.testing.assert_array_equal(getobs(xtr) % 2, getobs(ytr))
    assert labelfreq(targets(ytr)) == {0: 5, 1: 5}
    covered = np.concatenate([getobs(xtr), getobs(xte)])
    np.testing.assert_array_equal(np.sort(covered), data)


def test_stratifiedobs_reproducible():
    """[Sampling] stratifiedobs: same seed gives the same split."""
    labels = np.repeat([0, 1, 2], 10)
    a = stratifiedobs(labels, random_state=3)
    b = stratifiedobs(labels, random_state=3)
    for sa, sb in zip(a, b):
        np.testing.assert_array_equal(getobs(sa), getobs(sb))


def test_stratifiedobs_unshuffled():
    """[Sampling] stratifiedobs: without shuffle, buckets group labels."""
    labels = np.repeat([0, 1], 5)
    train, _ = stratifiedobs(labels, at=0.6, shuffle=False, random_state=0)
    out = getobs(train).tolist()
    assert sorted(out) == [0, 0, 0, 1, 1, 1]
    assert out[:3] in ([0, 0, 0], [1, 1, 1])


def test_stratifiedobs_fn():
    """[Sampling] stratifiedobs: fn maps targets to labels."""
    Y = np.eye(2)[[0, 0, 0, 0, 1, 1, 1, 1]]
    train, test = stratifiedobs(Y, at=0.5, fn=np.argmax, axis='first',
                                random_state=0)
    assert sorted(int(np.argmax(r)) for r in getobs(train)) == [0, 0, 1, 1]


def test_stratifiedobs_bulk_targets():
    """[Sampling] stratifiedobs: labels read via gettargets."""
    data = Labeled(['a'] * 6 + ['b'] * 3)
    train, test = stratifiedobs(data, at=0.7, random_state=0)
    assert train.data is data and test.data is data
    assert labelfreq(targets(train)) == {'a': 4, 'b': 2}
    assert labelfreq(targets(test)) == {'a': 2, 'b': 1}
