"""ML-SUBSET

:author: Sebastian Flennerhag
:copyright: 2017-2018
:licence: MIT

Observation and batch views.
"""

import warnings

import numpy as np

from .base import DataView
from ..config import get_batch_bounds, get_batch_divisor, get_idx_dtype
from ..container.base import nobs
from ..container.subset import datasubset
from ..utils.checks import check_positive_int
from ..utils.exceptions import ArgumentError, UnusedObservationsWarning


def default_batch_size(n):
    """Default batch size for ``n`` observations.

    ``n // divisor`` clamped to the configured bounds, and never more than
    ``n``. See :mod:`mlsubset.config`.
    """
    low, high = get_batch_bounds()
    return min(max(n // get_batch_divisor(), low), high, n)


def batch_settings(n, size=None, count=None, maxsize=None):
    """Compute a compatible batch size and batch count.

    Parameters
    ----------
    n : int
        number of observations.

    size : int, optional
        number of observations per batch.

    count : int, optional
        number of batches.

    maxsize : int, optional
        upper bound of the batch size. The size is reduced until it divides
        ``n``, so that no observation is left out.

    Returns
    -------
    size, count : int

    Warns
    -----
    UnusedObservationsWarning :
        if ``size * count < n``.
    """
    if size is not None and maxsize is not None:
        raise ArgumentError("Providing both 'size' and 'maxsize' is not "
                            "supported.")
    size = check_positive_int(size, 'size', allow_none=True)
    count = check_positive_int(count, 'count', allow_none=True)
    maxsize = check_positive_int(maxsize, 'maxsize', allow_none=True)

    if n <= 0:
        raise ArgumentError("Cannot batch a container without observations.")

    if maxsize is not None:
        size = min(maxsize, n)
        while n % size != 0 and size > 1:
            size -= 1

    if size is not None and size > n:
        raise ArgumentError("Batch size %i is too large for %i "
                            "observations." % (size, n))
    if count is not None and count > n:
        raise ArgumentError("Batch count %i is too large for %i "
                            "observations." % (count, n))

    if size is None and count is None:
        size = default_batch_size(n)
        count = n // size
    elif size is None:
        size = n // count
    elif count is None:
        count = n // size
    elif count > n // size:
        raise ArgumentError("Batch count %i is too large for batches of size "
                            "%i and %i observations." % (count, size, n))

    unused = n - size * count
    if unused > 0:
        warnings.warn("The batch size (%i) and count (%i) leave %i of %i "
                      "observations unused." % (size, count, unused, n),
                      UnusedObservationsWarning)
    return size, count


class ObsView(DataView):

    """View of a container as a sequence of single observations.

    Element ``i`` is ``datasubset(data, i, axis)``: a lazy subset of one
    observation (a tuple of such for a linked group). No data is copied until
    :func:`mlsubset.getobs` is called on an element.

    Parameters
    ----------
    data : container or tuple
        data to view. An :class:`ObsView` gives a view over the same data;
        any other view is replaced by its parent with a
        :class:`ViewNestingWarning`.

    axis : Axis, str, int, tuple or None
        observation axis.

    Examples
    --------
    >>> import numpy as np
    >>> from mlsubset import ObsView, getobs
    >>> X = np.arange(6).reshape(2, 3)
    >>> view = ObsView(X)
    >>> len(view)
    3
    >>> getobs(view[-1])
    array([2, 5])
    """

    def __init__(self, data, axis=None):
        data, axis = self._unwrap(data, axis, silent=(ObsView,))
        super(ObsView, self).__init__(data, axis)
        self._n = nobs(self.data, self.axis)

    def __len__(self):
        return self._n

    def _getelement(self, i):
        return datasubset(self.data, i, self.axis)

    def _select(self, indices):
        return ObsView(datasubset(self.data, indices, self.axis), self.axis)


class BatchView(DataView):

    """View of a container as a sequence of equally sized batches.

    Element ``i`` is ``datasubset(data, range(i * size, (i + 1) * size))``.
    Trailing observations that do not fill a batch are left out with an
    :class:`UnusedObservationsWarning`, issued once when the view is built.

    Parameters
    ----------
    data : container or tuple
        data to batch. A :class:`BatchView` is replaced by its parent with a
        :class:`ViewNestingWarning`; other views are batched element-wise.

    size : int, optional
        observations per batch. Defaults to ``n // 5`` clamped to [2, 100]
        (see :mod:`mlsubset.config`), or ``n // count`` if ``count`` is set.

    count : int, optional
        number of batches. Defaults to ``n // size``.

    maxsize : int, optional
        upper bound of the batch size, reduced to a divisor of ``n``.
        Cannot be combined with ``size``.

    axis : Axis, str, int, tuple or None
        observation axis.

    Examples
    --------
    >>> import numpy as np
    >>> from mlsubset import BatchView, getobs
    >>> X = np.arange(20).reshape(2, 10)
    >>> view = BatchView(X, size=5)
    >>> len(view), view.batchsize
    (2, 5)
    >>> getobs(view[1])
    array([[ 5,  6,  7,  8,  9],
           [15, 16, 17, 18, 19]])
    """

    def __init__(self, data, size=None, count=None, maxsize=None, axis=None):
        data, axis = self._unwrap(data, axis) if \
            isinstance(data, BatchView) else (data, axis)
        super(BatchView, self).__init__(data, axis)
        self.size, self.count = batch_settings(
            nobs(self.data, self.axis), size, count, maxsize)

    @property
    def batchsize(self):
        """Number of observations in each batch."""
        return self.size

    def __len__(self):
        return self.count

    def _batchrange(self, i):
        return range(i * self.size, (i + 1) * self.size)

    def _getelement(self, i):
        return datasubset(self.data, self._batchrange(i), self.axis)

    def _select(self, indices):
        if len(indices) == 0:
            return list()
        obs = np.concatenate([np.asarray(self._batchrange(i),
                                         dtype=get_idx_dtype())
                              for i in indices])
        return BatchView(datasubset(self.data, obs, self.axis),
                         size=self.size, axis=self.axis)


obsview = ObsView
batchview = BatchView
