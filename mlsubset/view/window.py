"""ML-SUBSET

:author: Sebastian Flennerhag
:copyright: 2017-2018
:licence: MIT

Sliding windows over sequence data.
"""

import numpy as np

from .base import DataView
from ..config import get_idx_dtype
from ..container.base import nobs
from ..container.subset import datasubset
from ..utils.checks import is_integer
from ..utils.exceptions import ArgumentError


def check_window(n, size, stride):
    """Check window arguments and return ``(size, stride)``."""
    if not is_integer(size) or size <= 0:
        raise ArgumentError("Window size must be a positive integer. "
                            "Got %r." % (size,))
    if size > n:
        raise ArgumentError("Window size %i is too large for %i "
                            "observations." % (size, n))
    if stride is None:
        stride = size
    if not is_integer(stride) or stride <= 0:
        raise ArgumentError("Stride must be a positive integer. "
                            "Got %r." % (stride,))
    return int(size), int(stride)


class SlidingWindow(DataView):

    """View of a container as a sequence of sliding windows.

    Window ``i`` spans observations ``range(i * stride, i * stride + size)``.
    There are ``(n - size + stride) // stride`` windows; observations past
    the last full window are not used.

    Parameters
    ----------
    data : container or tuple
        the sequence data.

    size : int
        observations per window.

    stride : int, optional
        offset between the starts of two windows. Defaults to ``size``,
        giving non-overlapping windows.

    axis : Axis, str, int, tuple or None
        observation axis.

    Examples
    --------
    >>> from mlsubset import slidingwindow, getobs
    >>> windows = slidingwindow(list(range(7)), 3, stride=2)
    >>> [getobs(w) for w in windows]
    [[0, 1, 2], [2, 3, 4], [4, 5, 6]]
    """

    def __init__(self, data, size, stride=None, axis=None):
        super(SlidingWindow, self).__init__(data, axis)
        n = nobs(self.data, self.axis)
        self.size, self.stride = check_window(n, size, stride)
        self.count = (n - self.size + self.stride) // self.stride
        self.offset = 0

    def __len__(self):
        return self.count

    def _window(self, i):
        """Start and observation range of window ``i``."""
        start = (i + self.offset) * self.stride
        return start, range(start, start + self.size)

    def _getelement(self, i):
        return datasubset(self.data, self._window(i)[1], self.axis)


def _as_array(idx):
    return np.atleast_1d(np.asarray(idx, dtype=get_idx_dtype()))


class LabeledSlidingWindow(SlidingWindow):

    """Sliding windows paired with target observations.

    ``targetfn`` maps the start of a window to the index (or indices) of its
    target observation(s). Element ``i`` is ``(window, target)``, both lazy
    subsets. Windows whose targets fall past the last observation are dropped
    from the back, windows whose targets fall before the first observation
    are dropped from the front.

    Parameters
    ----------
    data : container or tuple
        the sequence data.

    targetfn : callable
        maps a window start (0-based) to a target index or index sequence.

    size : int
        observations per window.

    stride : int, optional
        offset between the starts of two windows. Defaults to ``size``.

    exclude_target : bool (default = False)
        whether to remove the target observations from the window.

    axis : Axis, str, int, tuple or None
        observation axis.

    Examples
    --------
    Predict the observation following a window of three

    >>> from mlsubset import slidingwindow, getobs
    >>> windows = slidingwindow(list(range(6)), 3, stride=1,
    ...                         targetfn=lambda start: start + 3)
    >>> len(windows)
    3
    >>> x, y = windows[0]
    >>> getobs(x), getobs(y)
    ([0, 1, 2], 3)
    """

    def __init__(self, data, targetfn, size, stride=None, exclude_target=False,
                 axis=None):
        super(LabeledSlidingWindow, self).__init__(data, size, stride, axis)
        self.targetfn = targetfn
        self.exclude_target = exclude_target

        n = nobs(self.data, self.axis)
        while self.count > 0 and self._targets(self.count - 1).max() >= n:
            self.count -= 1

        while self.count > 0 and self._targets(0).min() < 0:
            self.offset += 1
            self.count -= 1

    def _targets(self, i):
        """Target indices of window ``i`` as an array."""
        return _as_array(self.targetfn(self._window(i)[0]))

    def _getelement(self, i):
        start, window = self._window(i)
        target = self.targetfn(start)
        if self.exclude_target:
            window = np.setdiff1d(np.asarray(window, dtype=get_idx_dtype()),
                                  _as_array(target))
        return (datasubset(self.data, window, self.axis),
                datasubset(self.data, target, self.axis))


def slidingwindow(data, size, stride=None, targetfn=None,
                  exclude_target=False, axis=None):
    """Build a sliding window view over ``data``.

    Returns a :class:`SlidingWindow`, or a :class:`LabeledSlidingWindow` if
    ``targetfn`` is given. See the classes for the parameters.
    """
    if targetfn is None:
        if exclude_target:
            raise ArgumentError("'exclude_target' needs a 'targetfn'.")
        return SlidingWindow(data, size, stride, axis)
    return LabeledSlidingWindow(data, targetfn, size, stride, exclude_target,
                                axis)
