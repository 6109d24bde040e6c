"""ML-SUBSET

:author: Sebastian Flennerhag
:copyright: 2017-2018
:licence: MIT
"""

import numpy as np
import pytest

from mlsubset import (SlidingWindow, LabeledSlidingWindow, slidingwindow,
                      getobs, nobs)
from mlsubset.utils.exceptions import ArgumentError

seq = np.arange(10)
X = np.arange(20).reshape(2, 10)


###############################################################################
@pytest.mark.parametrize('size,stride,count', [(3, None, 3), (3, 1, 8),
                                               (3, 2, 4), (10, 1, 1),
                                               (1, 1, 10), (4, 5, 2)])
def test_window_count(size, stride, count):
    """[Window] SlidingWindow: number of windows."""
    windows = slidingwindow(seq, size, stride)
    assert len(windows) == nobs(windows) == count
    for i, w in enumerate(windows):
        start = i * windows.stride
        np.testing.assert_array_equal(getobs(w),
                                      np.arange(start, start + size))


def test_window_matrix():
    """[Window] SlidingWindow: windows along the observation axis."""
    windows = SlidingWindow(X, 4, stride=3)
    assert len(windows) == 3
    np.testing.assert_array_equal(getobs(windows[-1]), X[:, 6:10])


def test_window_invalid():
    """[Window] SlidingWindow: size and stride must be valid."""
    with pytest.raises(ArgumentError):
        slidingwindow(seq, 0)
    with pytest.raises(ArgumentError):
        slidingwindow(seq, 11)
    with pytest.raises(ArgumentError):
        slidingwindow(seq, 2, stride=0)
    with pytest.raises(ArgumentError):
        slidingwindow(seq, 2.0)
    with pytest.raises(ArgumentError):
        slidingwindow(seq, 2, exclude_target=True)


def test_window_select():
    """[Window] SlidingWindow: sequence access returns a list."""
    out = slidingwindow(seq, 2)[[4, 0]]
    assert isinstance(out, list)
    np.testing.assert_array_equal(getobs(out[0]), [8, 9])


def test_labeled_next_obs():
    """[Window] LabeledSlidingWindow: target after each window."""
    windows = slidingwindow(seq, 3, stride=1, targetfn=lambda i: i + 3)
    assert isinstance(windows, LabeledSlidingWindow)
    assert len(windows) == 7
    x, t = windows[-1]
    np.testing.assert_array_equal(getobs(x), [6, 7, 8])
    assert getobs(t) == 9


def test_labeled_trims_front():
    """[Window] LabeledSlidingWindow: targets before the data are dropped."""
    windows = slidingwindow(seq, 2, stride=2, targetfn=lambda i: i - 3)
    assert len(windows) == 3
    x, t = windows[0]
    np.testing.assert_array_equal(getobs(x), [4, 5])
    assert getobs(t) == 1


def test_labeled_multiple_targets():
    """[Window] LabeledSlidingWindow: targets may be index sequences."""
    windows = slidingwindow(seq, 5, stride=1,
                            targetfn=lambda i: [i + 5, i + 6])
    assert len(windows) == 4
    x, t = windows[3]
    np.testing.assert_array_equal(getobs(t), [8, 9])


def test_labeled_exclude_target():
    """[Window] LabeledSlidingWindow: targets removed from the window."""
    windows = slidingwindow(seq, 5, stride=5, targetfn=lambda i: i + 2,
                            exclude_target=True)
    assert len(windows) == 2
    x, t = windows[1]
    np.testing.assert_array_equal(getobs(x), [5, 6, 8, 9])
    assert getobs(t) == 7


def test_labeled_no_window_left():
    """[Window] LabeledSlidingWindow: all windows can be dropped."""
    windows = LabeledSlidingWindow(seq, lambda i: i + 10, 5, stride=5)
    assert len(windows) == 0
    assert list(windows) == []
