"""ML-SUBSET

:author: Sebastian Flennerhag
:copyright: 2017-2018
:licence: MIT
"""

import numpy as np

from mlsubset import (BufferGetObs, BatchView, eachobs, eachbatch, kfolds,
                      slidingwindow)

X = np.arange(20, dtype=float).reshape(2, 10)
y = np.arange(10)


###############################################################################
def test_eachobs_reuses_buffer():
    """[Iterate] eachobs: every step yields the same array object."""
    it = eachobs(X)
    assert len(it) == 10

    seen = list()
    for i, x in enumerate(it):
        np.testing.assert_array_equal(x, X[:, i])
        seen.append(x)
    assert all(s is seen[0] for s in seen)
    assert it.buffer is seen[0]
    np.testing.assert_array_equal(seen[0], X[:, -1])


def test_eachobs_does_not_alias_data():
    """[Iterate] eachobs: writing into the buffer leaves data intact."""
    data = X.copy()
    for x in eachobs(data):
        x[:] = -1
    np.testing.assert_array_equal(data, X)


def test_eachobs_preallocated():
    """[Iterate] eachobs: a given buffer is filled in place."""
    buffer = np.empty(2)
    out = [x for x in eachobs(X, buffer=buffer)]
    assert all(o is buffer for o in out)
    np.testing.assert_array_equal(buffer, X[:, -1])


def test_eachobs_linked_group():
    """[Iterate] eachobs: tuple buffers for linked groups."""
    for i, (x, t) in enumerate(eachobs((X, y))):
        np.testing.assert_array_equal(x, X[:, i])
        assert t == i


def test_eachbatch():
    """[Iterate] eachbatch: batches written into one buffer."""
    it = eachbatch(X, size=5)
    batches = list()
    for b in it:
        assert b.shape == (2, 5)
        batches.append(b.copy())
    np.testing.assert_array_equal(np.hstack(batches), X)

    buffer = np.zeros((5, 2))
    out = list(eachbatch(X.T, size=5, axis='first', buffer=buffer))
    assert out[0] is buffer and out[1] is buffer
    np.testing.assert_array_equal(buffer, X.T[5:])


def test_buffer_list_fallback():
    """[Iterate] BufferGetObs: lists yield fresh values."""
    data = list('abcdef')
    out = list(eachbatch(data, size=2))
    assert out == [['a', 'b'], ['c', 'd'], ['e', 'f']]


def test_buffer_folds():
    """[Iterate] BufferGetObs: folds of different sizes."""
    out = list(BufferGetObs(kfolds(y, 3)))
    assert len(out) == 3
    sizes = [(len(tr), len(te)) for tr, te in out]
    assert sizes == [(6, 4), (7, 3), (7, 3)]
    np.testing.assert_array_equal(out[0][1], [0, 1, 2, 3])
    np.testing.assert_array_equal(out[2][1], [7, 8, 9])


def test_buffer_windows():
    """[Iterate] BufferGetObs: windows of a fixed size."""
    windows = slidingwindow(y, 3, stride=1)
    out = [w.copy() for w in BufferGetObs(windows)]
    assert len(out) == 8
    np.testing.assert_array_equal(out[-1], [7, 8, 9])


def test_buffer_repr():
    """[Iterate] BufferGetObs: repr shows the iterable."""
    it = BufferGetObs(BatchView(y, size=5))
    assert repr(it).startswith('BufferGetObs(BatchView(')
