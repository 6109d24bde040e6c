"""ML-SUBSET

:author: Sebastian Flennerhag
:copyright: 2017-2018
:licence: MIT
"""

import numpy as np
import pytest

from mlsubset import (oversample, undersample, getobs, targets, labelfreq,
                      nobs)
from mlsubset.utils.exceptions import ArgumentError

y = np.array(['a', 'b', 'b', 'b', 'b', 'a'])
X = np.arange(12).reshape(2, 6)


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
def test_undersample():
    """[Sampling] undersample: every label keeps the minority count."""
    sub = undersample(y, random_state=0)
    assert labelfreq(targets(sub)) == {'a': 2, 'b': 2}
    indices = list(sub.indices)
    assert indices == sorted(indices)
    assert 0 in indices and 5 in indices


def test_undersample_linked_group():
    """[Sampling] undersample: linked groups stay aligned."""
    xs, ys = undersample((X, y), shuffle=True, random_state=1)
    assert nobs(xs) == nobs(ys) == 4
    np.testing.assert_array_equal(y[getobs(xs)[0]], getobs(ys))


def test_oversample():
    """[Sampling] oversample: every label reaches the majority count."""
    sub = oversample(y, random_state=0)
    assert len(sub) == 8
    assert labelfreq(targets(sub)) == {'a': 4, 'b': 4}
    assert set(sub.indices) == set(range(6))


def test_oversample_unshuffled():
    """[Sampling] oversample: original observations come first."""
    sub = oversample(y, shuffle=False, random_state=0)
    np.testing.assert_array_equal(sub.indices[:6], np.arange(6))
    assert set(sub.indices[6:]) == {0, 5}


def test_oversample_whole_copies():
    """[Sampling] oversample: small labels are repeated in whole."""
    labels = np.array([0] * 7 + [1] * 2)
    sub = oversample(labels, shuffle=False, random_state=0)
    assert labelfreq(targets(sub)) == {0: 7, 1: 7}
    added = sub.indices[9:]
    np.testing.assert_array_equal(added[:4], [7, 8, 7, 8])


def test_oversample_fraction():
    """[Sampling] oversample: fraction scales the target count."""
    labels = np.array([0] * 8 + [1] * 2)
    sub = oversample(labels, fraction=0.5, random_state=0)
    assert labelfreq(targets(sub)) == {0: 8, 1: 4}

    for fraction in (0, -1, True, 'a'):
        with pytest.raises(ArgumentError):
            oversample(labels, fraction=fraction)


def test_oversample_fn():
    """[Sampling] oversample: fn maps targets to labels."""
    Y = np.eye(2)[[0, 0, 0, 1]]
    sub = oversample(Y, fn=np.argmax, axis='first', random_state=0)
    assert sorted(int(np.argmax(r)) for r in getobs(sub)) == [0, 0, 0,
                                                              1, 1, 1]


def test_resample_empty():
    """[Sampling] undersample: empty containers raise."""
    with pytest.raises(ArgumentError):
        undersample(np.array([]))
    with pytest.raises(ArgumentError):
        oversample([])


def test_resample_bulk_targets():
    """[Sampling] oversample, undersample: labels read via gettargets."""
    data = Labeled(['a', 'b', 'b', 'b', 'b', 'a'])

    sub = undersample(data, random_state=0)
    assert sub.data is data
    assert labelfreq(targets(sub)) == {'a': 2, 'b': 2}

    sub = oversample(data, random_state=0)
    assert sub.data is data
    assert labelfreq(targets(sub)) == {'a': 4, 'b': 4}
