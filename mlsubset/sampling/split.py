"""ML-SUBSET

:author: Sebastian Flennerhag
:copyright: 2017-2018
:licence: MIT

Partitioning of data containers into subsets and folds.
"""

from ..container.base import nobs
from ..container.subset import datasubset, shuffleobs
from ..container.targets import labelmap, targets
from ..index import (kfold_indices, leaveout_indices, split_indices,
                     stratified_indices)
from ..utils.checks import check_random_state, is_integer
from ..view import FoldsView


def splitobs(data, at=0.7, axis=None):
    """Split ``data`` into contiguous subsets proportional to ``at``.

    The split is static: observations keep their order and there is no
    randomization. Use :func:`mlsubset.shuffleobs` first for a random split.

    Parameters
    ----------
    data : container, tuple or int
        data to split. For an int ``n`` the index ranges of a split of ``n``
        observations are returned.

    at : float or sequence of floats (default = 0.7)
        fraction of observations in the first subset, or in each of the
        first ``len(at)`` subsets. The last subset takes the rest.

    axis : Axis, str, int, tuple or None
        observation axis.

    Returns
    -------
    subsets : tuple
        one :func:`mlsubset.datasubset` per bucket (ranges for an int).

    Examples
    --------
    >>> import numpy as np
    >>> from mlsubset import splitobs
    >>> X, y = np.zeros((2, 10)), np.arange(10)
    >>> (X_train, y_train), (X_test, y_test) = splitobs((X, y), at=0.7)
    >>> len(X_train), len(y_test)
    (7, 3)
    >>> splitobs(10, at=(0.2, 0.3))
    (range(0, 2), range(2, 5), range(5, 10))
    """
    if is_integer(data):
        return split_indices(data, at)
    ranges = split_indices(nobs(data, axis), at)
    return tuple(datasubset(data, r, axis) for r in ranges)


def kfolds(data, k=5, axis=None):
    """Repartition ``data`` ``k`` times with a k-fold strategy.

    Each of the ``k`` roughly equal parts serves as validation set once,
    while the remaining parts are used for training. The folds are static;
    use :func:`mlsubset.shuffleobs` first to assign observations randomly.

    Parameters
    ----------
    data : container, tuple or int
        data to partition. For an int ``n`` the ``(train_indices,
        val_indices)`` lists are returned instead of a view.

    k : int (default = 5)
        number of folds, ``2 <= k <= n``.

    axis : Axis, str, int, tuple or None
        observation axis.

    Returns
    -------
    folds : FoldsView

    Examples
    --------
    >>> import numpy as np
    >>> from mlsubset import kfolds
    >>> X = np.zeros((2, 10))
    >>> [(len(train), len(val)) for train, val in kfolds(X, k=4)]
    [(7, 3), (7, 3), (8, 2), (8, 2)]
    """
    if is_integer(data):
        return kfold_indices(data, k)
    train_indices, val_indices = kfold_indices(nobs(data, axis), k)
    return FoldsView(data, train_indices, val_indices, axis)


def leaveout(data, size=1, axis=None):
    """Repartition ``data`` into folds with about ``size`` validation obs.

    A k-fold partitioning with ``k = round(n / size)``. ``size = 1`` gives
    leave-one-out.

    Parameters
    ----------
    data : container, tuple or int
        data to partition. For an int ``n`` the index lists are returned.

    size : int (default = 1)
        validation set size, ``1 <= size <= n // 2``.

    axis : Axis, str, int, tuple or None
        observation axis.

    Returns
    -------
    folds : FoldsView
    """
    if is_integer(data):
        return leaveout_indices(data, size)
    train_indices, val_indices = leaveout_indices(nobs(data, axis), size)
    return FoldsView(data, train_indices, val_indices, axis)


def stratifiedobs(data, at=0.7, shuffle=True, fn=None, axis=None,
                  random_state=None):
    """Split ``data`` into random subsets with preserved label proportions.

    The data is always shuffled first, so the result is a sample without
    replacement. The observations of each label are then split
    proportionally to ``at``, which keeps the label distribution of every
    subset close to that of ``data``.

    Parameters
    ----------
    data : container or tuple
        data to split. For a linked group ``(X, y)`` the labels are the
        targets in ``y``.

    at : float or sequence of floats (default = 0.7)
        split fraction(s), as for :func:`splitobs`.

    shuffle : bool (default = True)
        whether to shuffle each subset. If ``False``, the observations of a
        subset are grouped by label.

    fn : callable, optional
        function applied to each target to get its label.

    axis : Axis, str, int, tuple or None
        observation axis.

    random_state : None, int or :class:`numpy.random.Generator`
        source of randomness.

    Returns
    -------
    subsets : tuple
        one :func:`mlsubset.datasubset` per bucket.

    Examples
    --------
    >>> from mlsubset import stratifiedobs, targets
    >>> y = ['a'] * 6 + ['b'] * 3
    >>> train, test = stratifiedobs(y, at=0.7, random_state=0)
    >>> sorted(targets(train)), sorted(targets(test))
    (['a', 'a', 'a', 'a', 'b', 'b'], ['a', 'a', 'b'])
    """
    rng = check_random_state(random_state)
    shuffled = shuffleobs(data, axis, rng)

    lm = labelmap(targets(shuffled, fn))
    buckets = stratified_indices(lm, at)
    if shuffle:
        for bucket in buckets:
            rng.shuffle(bucket)

    return tuple(datasubset(shuffled, idx) for idx in buckets)
