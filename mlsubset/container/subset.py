"""ML-SUBSET

:author: Sebastian Flennerhag
:copyright: 2017-2018
:licence: MIT

Lazy subsets of data containers.
"""

import numpy as np

from .axis import convert_axis
from .base import (check_container, check_nobs, default_axis, get_axis,
                   getobs, getobs_into, gettargets, nobs, _member_axes)
from ..config import get_idx_dtype
from ..utils.checks import (check_indices, check_positive_int,
                            check_random_state, is_integer)
from ..utils.exceptions import ArgumentError


def compose_indices(outer, inner):
    """Map ``inner`` indices through ``outer`` indices.

    Equivalent to ``outer[inner]``, but keeps ranges lazy where possible:
    a range indexed by a range with a positive step is again a range.

    Parameters
    ----------
    outer : int, range or array
        indices of a subset into its base container.

    inner : int, range or array
        validated indices relative to the subset.

    Examples
    --------
    >>> from mlsubset.container.subset import compose_indices
    >>> compose_indices(range(10, 20), range(2, 5))
    range(12, 15)
    >>> compose_indices(range(10, 20), [5, 0])
    array([15, 10])
    """
    if is_integer(outer):
        if is_integer(inner):
            return outer
        return np.full(len(inner), outer, dtype=get_idx_dtype())

    if is_integer(inner):
        return int(outer[inner])

    if isinstance(outer, range) and isinstance(inner, range) and \
            inner.step > 0:
        return outer[inner.start:inner.stop:inner.step]

    return np.asarray(outer)[np.asarray(inner, dtype=get_idx_dtype())]


class DataSubset(object):

    """Lazy subset of a data container.

    Stores a reference to ``data`` and the indices of the observations the
    subset spans. No data is copied until :meth:`getobs` is called. A subset
    of a subset is built directly over the original container with composed
    indices, so subsets never nest.

    Parameters
    ----------
    data : container
        object satisfying the container protocol. Linked groups (tuples) are
        not accepted: use :func:`datasubset`, which returns a tuple of
        subsets.

    indices : int, range, array-like of int or None
        0-based indices of the observations in the subset. Duplicates and
        any order are allowed. An ``int`` gives a subset of a single
        observation for which :meth:`getobs` drops the observation axis.
        ``None`` spans all observations.

    axis : Axis, str, int or None
        observation axis of ``data``. Defaults to the container's default.
        When ``data`` is a :class:`DataSubset`, the axis must match its axis.

    Raises
    ------
    BoundsError :
        if any index is outside the range of ``data``.

    CapabilityError :
        if ``data`` is not a container.

    Examples
    --------
    >>> import numpy as np
    >>> from mlsubset import DataSubset
    >>> X = np.arange(20).reshape(2, 10)
    >>> sub = DataSubset(X, range(2, 8))
    >>> len(sub)
    6
    >>> sub2 = DataSubset(sub, [0, 5])
    >>> sub2.data is X, sub2.indices
    (True, array([2, 7]))
    >>> sub2.getobs()
    array([[ 2,  7],
           [12, 17]])
    """

    def __init__(self, data, indices=None, axis=None):
        if isinstance(data, tuple):
            raise TypeError("DataSubset does not accept a tuple of data "
                            "containers. Use 'datasubset' to get a tuple of "
                            "subsets.")
        axis = convert_axis(axis)

        if isinstance(data, DataSubset):
            if axis is not None and axis != data.axis:
                raise ArgumentError("Cannot subset a DataSubset along %r: it "
                                    "was created with %r." % (axis,
                                                              data.axis))
            axis = data.axis
            n = data.nobs()
            indices = range(n) if indices is None else \
                check_indices(indices, n)
            indices = compose_indices(data.indices, indices)
            data = data.data
        else:
            check_container(data)
            if axis is None:
                axis = default_axis(data)
            n = nobs(data, axis)
            indices = range(n) if indices is None else \
                check_indices(indices, n)

        if isinstance(indices, np.ndarray):
            indices = indices.copy()
            indices.flags.writeable = False

        self.data = data
        self.indices = indices
        self.axis = axis

    @property
    def default_axis(self):
        """Observation axis of the subset."""
        return self.axis

    def _check_axis(self, axis):
        """Check that ``axis`` does not change the axis of the subset."""
        axis = convert_axis(axis)
        if axis is not None and axis != self.axis:
            raise ArgumentError("DataSubset was created with %r: got a "
                                "request along %r." % (self.axis, axis))

    def _map(self, idx):
        """Map subset-relative indices to indices into the base."""
        if idx is None:
            return self.indices
        return compose_indices(self.indices, check_indices(idx, len(self)))

    def __len__(self):
        if is_integer(self.indices):
            return 1
        return len(self.indices)

    def nobs(self, axis=None):
        """Number of observations in the subset (not the base)."""
        self._check_axis(axis)
        return len(self)

    def getobs(self, idx=None, axis=None):
        """Materialize the observation(s) at subset-relative ``idx``.

        ``idx=None`` materializes the whole subset.
        """
        self._check_axis(axis)
        return getobs(self.data, self._map(idx), self.axis)

    def getobs_into(self, buffer, idx=None, axis=None):
        """Write the observation(s) at subset-relative ``idx`` into buffer."""
        self._check_axis(axis)
        return getobs_into(buffer, self.data, self._map(idx), self.axis)

    def gettargets(self, idx, axis=None):
        """Targets at subset-relative ``idx``, read through the base."""
        self._check_axis(axis)
        return gettargets(self.data, self._map(idx), self.axis)

    def __getitem__(self, idx):
        if isinstance(idx, slice):
            idx = range(len(self))[idx]
        return DataSubset(self, idx)

    def __iter__(self):
        for i in range(len(self)):
            yield DataSubset(self, i)

    def __eq__(self, other):
        if not isinstance(other, DataSubset):
            return NotImplemented
        if self.data is not other.data or self.axis != other.axis:
            return False
        if is_integer(self.indices) or is_integer(other.indices):
            # A scalar subset drops the observation axis: never equal to a
            # sequence subset
            return is_integer(self.indices) and \
                is_integer(other.indices) and self.indices == other.indices
        return np.array_equal(np.asarray(self.indices),
                              np.asarray(other.indices))

    def __ne__(self, other):
        eq = self.__eq__(other)
        return eq if eq is NotImplemented else not eq

    __hash__ = None

    def __repr__(self):
        return "DataSubset(%s, %i observation(s), %r)" % (
            type(self.data).__name__, len(self), self.axis)


def datasubset(data, indices=None, axis=None):
    """Return a lazy subset of the observations in ``data``.

    Like :class:`DataSubset`, but maps over linked groups: for a tuple of
    containers the group is checked for a common number of observations
    and a tuple of subsets is returned.

    Parameters
    ----------
    data : container or tuple
        container or linked group of containers.

    indices : int, range, array-like of int or None
        0-based observation indices. ``None`` spans all observations.

    axis : Axis, str, int, tuple or None
        observation axis, or one axis per member of a linked group.

    Examples
    --------
    >>> import numpy as np
    >>> from mlsubset import datasubset
    >>> X, y = np.zeros((3, 10)), np.arange(10)
    >>> Xs, ys = datasubset((X, y), range(4))
    >>> len(Xs), len(ys)
    (4, 4)
    """
    if isinstance(data, tuple):
        axis = get_axis(data, axis)
        check_nobs(data, axis)
        return tuple(datasubset(d, indices, a)
                     for d, a in zip(data, _member_axes(data, axis)))
    return DataSubset(data, indices, axis)


def shuffleobs(data, axis=None, random_state=None):
    """Return a subset of all observations in ``data`` in random order.

    Only the indices are permuted; no data is copied.

    Parameters
    ----------
    data : container or tuple
        container or linked group of containers.

    axis : Axis, str, int, tuple or None
        observation axis.

    random_state : None, int or :class:`numpy.random.Generator`
        source of randomness.
    """
    rng = check_random_state(random_state)
    n = nobs(data, axis)
    return datasubset(data, rng.permutation(n), axis)


def randobs(data, n=None, axis=None, random_state=None):
    """Pick a random observation, or a batch of ``n`` random observations.

    Observations are drawn with replacement and materialized.

    Parameters
    ----------
    data : container or tuple
        container or linked group of containers.

    n : int or None
        batch size. ``None`` returns a single observation.

    axis : Axis, str, int, tuple or None
        observation axis.

    random_state : None, int or :class:`numpy.random.Generator`
        source of randomness.
    """
    rng = check_random_state(random_state)
    total = nobs(data, axis)
    if total == 0:
        raise ArgumentError("Cannot sample from a container without "
                            "observations.")
    if n is None:
        return getobs(data, int(rng.integers(total)), axis)
    n = check_positive_int(n, 'n')
    return getobs(data, rng.integers(total, size=n), axis)
