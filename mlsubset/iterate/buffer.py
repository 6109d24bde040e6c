"""ML-SUBSET

:author: Sebastian Flennerhag
:copyright: 2017-2018
:licence: MIT

Iteration with a reused result buffer.
"""

import numpy as np

from ..container.base import getobs_into
from ..utils.exceptions import DimensionMismatchError
from ..view import BatchView, ObsView, materialize


def _fresh(element):
    """Materialize ``element`` into an object that may be written into."""
    obs = materialize(element)
    if obs is element and isinstance(obs, np.ndarray):
        obs = obs.copy()
    return obs


def _into(buffer, element):
    """Write ``element`` into ``buffer`` where possible."""
    if isinstance(element, tuple):
        if isinstance(buffer, tuple) and len(buffer) == len(element):
            return tuple(_into(b, e) for b, e in zip(buffer, element))
        return _fresh(element)
    try:
        return getobs_into(buffer, element)
    except DimensionMismatchError:
        # Elements of different size, such as folds
        return _fresh(element)


class BufferGetObs(object):

    """Iterate over materialized elements, reusing one result buffer.

    The first element is materialized with :func:`mlsubset.getobs` and kept
    as buffer. Every later element is written into the buffer with
    :func:`mlsubset.getobs_into`, so for containers that support in-place
    extraction (numpy arrays and subsets of them) each step yields the same
    object with new contents. Containers without that capability yield a
    fresh value per step.

    Since yielded values may be overwritten by the next step, copy them
    before keeping them around.

    Parameters
    ----------
    iterable : iterable
        sequence of lazy elements, typically a view.

    buffer : object, optional
        preallocated buffer. If ``None``, the first element is used.

    Examples
    --------
    >>> import numpy as np
    >>> from mlsubset import BufferGetObs, ObsView
    >>> X = np.arange(6).reshape(2, 3)
    >>> for x in BufferGetObs(ObsView(X)):
    ...     print(x)
    [0 3]
    [1 4]
    [2 5]
    """

    def __init__(self, iterable, buffer=None):
        self.iterable = iterable
        self.buffer = buffer

    def __len__(self):
        return len(self.iterable)

    def __iter__(self):
        for element in self.iterable:
            if self.buffer is None:
                self.buffer = _fresh(element)
            else:
                self.buffer = _into(self.buffer, element)
            yield self.buffer

    def __repr__(self):
        return "BufferGetObs(%r)" % (self.iterable,)


def eachobs(data, axis=None, buffer=None):
    """Iterate over the observations of ``data`` with a reused buffer.

    Equivalent to ``BufferGetObs(ObsView(data, axis), buffer)``.

    Parameters
    ----------
    data : container or tuple
        data to iterate over.

    axis : Axis, str, int, tuple or None
        observation axis.

    buffer : object, optional
        preallocated observation buffer.
    """
    return BufferGetObs(ObsView(data, axis), buffer)


def eachbatch(data, size=None, count=None, maxsize=None, axis=None,
              buffer=None):
    """Iterate over batches of ``data`` with a reused buffer.

    Equivalent to ``BufferGetObs(BatchView(data, size, count, maxsize,
    axis), buffer)``. See :class:`mlsubset.BatchView` for the batch
    arguments.
    """
    return BufferGetObs(BatchView(data, size, count, maxsize, axis), buffer)
