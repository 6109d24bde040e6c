"""ML-SUBSET

:author: Sebastian Flennerhag
:copyright: 2017-2018
:licence: MIT

Base class of lazy views.

A view presents a container as a sequence of elements (observations,
batches, folds or windows). Elements are built on access and are lazy
subsets of the underlying data. A view is itself a container whose
observations are its elements.
"""

import warnings
from abc import abstractmethod

from ..container.axis import convert_axis
from ..container.base import get_axis, getobs
from ..utils.checks import check_indices, is_integer
from ..utils.exceptions import ArgumentError, BoundsError, ViewNestingWarning


def materialize(element):
    """Call :func:`getobs` on a view element.

    Tuples are materialized member-wise without a linked-group check, since
    an element such as a ``(train, val)`` fold holds subsets of different
    sizes.
    """
    if isinstance(element, tuple):
        return tuple(materialize(e) for e in element)
    return getobs(element)


class DataView(object):

    """Base class for views.

    Subclasses implement ``__len__`` and ``_getelement``. Integer indexing
    follows the Python convention, so ``view[-1]`` is the last element.

    Parameters
    ----------
    data : container or tuple
        the data to view.

    axis : Axis, str, int, tuple or None
        observation axis of ``data``.
    """

    def __init__(self, data, axis=None):
        self.data = data
        self.axis = get_axis(data, axis)

    @staticmethod
    def _unwrap(data, axis, silent=()):
        """Replace a view passed as ``data`` by its parent.

        Views of the classes in ``silent`` are unwrapped without a warning.
        """
        if not isinstance(data, DataView):
            return data, axis
        axis = convert_axis(axis)
        if axis is not None and axis != data.axis:
            raise ArgumentError("Cannot view %s along %r: it was created "
                                "with %r." % (type(data).__name__, axis,
                                              data.axis))
        if not isinstance(data, silent):
            warnings.warn("Nesting a %s in another view is not supported. "
                          "Using its parent data "
                          "instead." % type(data).__name__,
                          ViewNestingWarning)
        return data.data, data.axis

    @property
    def parent(self):
        """The data the view is built on."""
        return self.data

    @abstractmethod
    def __len__(self):
        """Number of elements in the view."""

    @abstractmethod
    def _getelement(self, i):
        """Build element ``i``, with ``0 <= i < len(self)``."""

    def _select(self, indices):
        """Elements at ``indices``. Subclasses may return a view instead."""
        return [self._getelement(i) for i in indices]

    def __getitem__(self, idx):
        n = len(self)
        if is_integer(idx):
            i = idx + n if idx < 0 else idx
            if not 0 <= i < n:
                raise BoundsError("Element %i is out of bounds for a view with "
                                  "%i elements." % (idx, n))
            return self._getelement(i)

        if isinstance(idx, slice):
            idx = range(n)[idx]
        return self._select(check_indices(idx, n))

    def __iter__(self):
        for i in range(len(self)):
            yield self._getelement(i)

    def nobs(self, axis=None):
        """Number of elements: the observations of a view are its elements."""
        return len(self)

    def getobs(self, idx=None, axis=None):
        """Materialize the element(s) at ``idx`` (all elements if None)."""
        if idx is None:
            return [materialize(e) for e in self]
        idx = check_indices(idx, len(self))
        if is_integer(idx):
            return materialize(self._getelement(idx))
        return [materialize(self._getelement(i)) for i in idx]

    def __repr__(self):
        name = type(self.data).__name__
        if isinstance(self.data, tuple):
            name = '(%s)' % ', '.join(type(d).__name__ for d in self.data)
        return "%s(%s, %i element(s), %r)" % (type(self).__name__, name,
                                              len(self), self.axis)
