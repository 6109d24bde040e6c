"""ML-SUBSET

:author: Sebastian Flennerhag
:copyright: 2017-2018
:licence: MIT

Lazy view of train/validation folds.
"""

import numpy as np

from .base import DataView
from ..config import get_idx_dtype
from ..container.base import nobs
from ..container.subset import datasubset
from ..utils.checks import check_indices, is_integer
from ..utils.exceptions import ArgumentError, DimensionMismatchError


def _check_fold_indices(indices, n, name):
    """Validate index sets against ``n`` observations.

    Returns a tuple of ranges and read-only copies of the index arrays.
    """
    checked = list()
    for i, idx in enumerate(indices):
        if is_integer(idx):
            raise ArgumentError("Each element of '%s' must be a sequence of "
                                "indices. Element %i is an integer." % (name,
                                                                        i))
        idx = check_indices(idx, n, '%s[%i]' % (name, i))
        if isinstance(idx, np.ndarray):
            idx = idx.copy()
            idx.flags.writeable = False
        checked.append(idx)
    return tuple(checked)


def check_folds_partition(train_indices, val_indices, n):
    """Check that the folds partition ``range(n)``.

    The validation sets must be pairwise disjoint and cover every
    observation, and each training set must be the complement of its
    validation set.
    """
    dtype = get_idx_dtype()
    vals = [np.asarray(v, dtype=dtype) for v in val_indices]

    covered = np.sort(np.concatenate(vals))
    if len(covered) != n or not np.array_equal(covered,
                                               np.arange(n, dtype=dtype)):
        raise ArgumentError("Validation sets must be disjoint and cover all "
                            "%i observations." % n)

    full = np.arange(n, dtype=dtype)
    for i, (tri, tei) in enumerate(zip(train_indices, vals)):
        tri = np.sort(np.asarray(tri, dtype=dtype))
        if not np.array_equal(tri, np.setdiff1d(full, tei)):
            raise ArgumentError("Training set of fold %i is not the "
                                "complement of its validation set." % i)


class FoldsView(DataView):

    """View of a container as a sequence of ``(train, val)`` folds.

    Element ``i`` is ``(datasubset(data, train_indices[i]),
    datasubset(data, val_indices[i]))``. The fold assignment is validated
    when the view is built.

    Parameters
    ----------
    data : container or tuple
        data to partition. A view is replaced by its parent with a
        :class:`ViewNestingWarning`.

    train_indices : list of index sequences
        training indices of each fold.

    val_indices : list of index sequences
        validation indices of each fold.

    axis : Axis, str, int, tuple or None
        observation axis.

    check_partition : bool (default = True)
        whether to check that the validation sets partition all
        observations and that each training set is the complement of its
        validation set. Set to ``False`` for custom assignments such as
        subsampled training sets.

    Raises
    ------
    DimensionMismatchError :
        if ``train_indices`` and ``val_indices`` differ in length.

    ArgumentError :
        if the number of folds is not in ``[2, n]``, a fold's training and
        validation sets overlap, or the partition check fails.

    BoundsError :
        if an index is outside ``[0, n)``.

    See Also
    --------
    :func:`mlsubset.kfolds`, :func:`mlsubset.leaveout`

    Examples
    --------
    >>> import numpy as np
    >>> from mlsubset import FoldsView, getobs
    >>> X = np.arange(4)
    >>> folds = FoldsView(X, [[2, 3], [0, 1]], [[0, 1], [2, 3]])
    >>> train, val = folds[0]
    >>> getobs(train), getobs(val)
    (array([2, 3]), array([0, 1]))
    """

    def __init__(self, data, train_indices, val_indices, axis=None,
                 check_partition=True):
        data, axis = self._unwrap(data, axis)
        super(FoldsView, self).__init__(data, axis)
        n = nobs(self.data, self.axis)

        train_indices = list(train_indices)
        val_indices = list(val_indices)
        if len(train_indices) != len(val_indices):
            raise DimensionMismatchError(
                "The number of training (%i) and validation (%i) index sets "
                "must match." % (len(train_indices), len(val_indices)))

        k = len(train_indices)
        if not 2 <= k <= n:
            raise ArgumentError("The number of folds must be within [2, %i]. "
                                "Got %i." % (n, k))

        train_indices = _check_fold_indices(train_indices, n, 'train_indices')
        val_indices = _check_fold_indices(val_indices, n, 'val_indices')

        for i, (tri, tei) in enumerate(zip(train_indices, val_indices)):
            if np.intersect1d(np.asarray(tri), np.asarray(tei)).size:
                raise ArgumentError("Training and validation sets of fold %i "
                                    "overlap." % i)

        if check_partition:
            check_folds_partition(train_indices, val_indices, n)

        self.train_indices = train_indices
        self.val_indices = val_indices

    def __len__(self):
        return len(self.train_indices)

    def _getelement(self, i):
        return (datasubset(self.data, self.train_indices[i], self.axis),
                datasubset(self.data, self.val_indices[i], self.axis))

    def __eq__(self, other):
        if not isinstance(other, FoldsView):
            return NotImplemented
        if self.data is not other.data or self.axis != other.axis or \
                len(self) != len(other):
            return False
        pairs = zip(self.train_indices + self.val_indices,
                    other.train_indices + other.val_indices)
        return all(np.array_equal(np.asarray(a), np.asarray(b))
                   for a, b in pairs)

    def __ne__(self, other):
        eq = self.__eq__(other)
        return eq if eq is NotImplemented else not eq

    __hash__ = None
