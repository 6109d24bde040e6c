"""ML-SUBSET

:author: Sebastian Flennerhag
:copyright: 2017-2018
:licence: MIT

K-Fold and leave-out indexing.
"""

from ._checks import check_folds, check_leaveout
from .base import BaseIndex, get_n_samples, partition, prune_train


class FoldIndex(BaseIndex):

    """Indexer that partitions all observations into ``folds`` folds.

    K-Fold iterator that generates fold index tuples. Each fold holds out one
    contiguous block of observations for validation and trains on the rest.
    The validation blocks have size ``n // folds`` or ``n // folds + 1``, the
    first ``n % folds`` blocks being the larger ones. Every observation is
    in exactly one validation block.

    FoldIndex creates a generator that returns a tuple of start and stop
    positions to be used for slicing ``[start:stop]``. Slicing works for the
    validation set, but the training set is in general made up of the range
    below the validation block and the range above it. To build a single
    training index, use ::

        for train_tup, val_tup in indexer.generate():
            train_idx = build_range(train_tup)

    or pass ``as_array=True`` to :meth:`generate`.

    Parameters
    ----------
    folds : int (default = 5)
        number of folds. Must satisfy ``2 <= folds <= n``.

    X : container or int, optional
        data to fit the indexer on.

    axis : Axis, str, int or None
        observation axis of ``X``.

    See Also
    --------
    :class:`LeaveOutIndex`, :class:`SplitIndex`

    Examples
    --------
    >>> from mlsubset.index import FoldIndex
    >>> idx = FoldIndex(4, 10)
    >>> for train, val in idx.generate():
    ...     print(train, val)
    ((3, 10),) (0, 3)
    ((0, 3), (6, 10)) (3, 6)
    ((0, 6), (8, 10)) (6, 8)
    ((0, 8),) (8, 10)
    """

    def __init__(self, folds=5, X=None, axis=None):
        super(FoldIndex, self).__init__()
        self.folds = folds

        if X is not None:
            self.fit(X, axis)

    def get_params(self):
        return {'folds': self.folds}

    def fit(self, X, axis=None):
        """Method for storing the number of observations.

        Parameters
        ----------
        X : container or int
            data to partition, or its number of observations.

        axis : Axis, str, int or None
            observation axis of ``X``.

        Returns
        -------
        instance :
            indexer with stored sample size data.
        """
        n = get_n_samples(X, axis)
        check_folds(n, self.folds)

        self.n_samples = n
        self.__fitted__ = True
        return self

    def _gen_indices(self):
        """Generate K-Fold iterator."""
        n_samples = self.n_samples

        last = 0
        for size in partition(n_samples, self.folds):
            size = int(size)

            # Validation set
            tei_start, tei_stop = last, last + size
            tei = (tei_start, tei_stop)

            # Train set
            tri = prune_train(0, tei_start, tei_stop, n_samples)

            yield tri, tei
            last = tei_stop

    def assignment(self, X=None):
        """Get the fold assignment as two lists of index arrays.

        Parameters
        ----------
        X : container or int, optional
            data to fit on if the indexer has not been fitted.

        Returns
        -------
        train_indices : list of arrays
            training indices of each fold.

        val_indices : list of arrays
            validation indices of each fold.
        """
        train_indices, val_indices = list(), list()
        for tri, tei in self.generate(X, as_array=True):
            train_indices.append(tri)
            val_indices.append(tei)
        return train_indices, val_indices


class LeaveOutIndex(FoldIndex):

    """Indexer with validation folds of roughly ``size`` observations.

    A k-fold partitioning with ``k = round(n / size)``, so that every
    validation block holds ``size`` observations, give or take the remainder
    spread over the first blocks. ``size = 1`` is leave-one-out.

    Parameters
    ----------
    size : int (default = 1)
        number of observations per validation block. Must satisfy
        ``1 <= size <= n // 2``.

    X : container or int, optional
        data to fit the indexer on.

    axis : Axis, str, int or None
        observation axis of ``X``.

    Examples
    --------
    >>> from mlsubset.index import LeaveOutIndex
    >>> train, val = LeaveOutIndex(2).assignment(6)
    >>> val
    [array([0, 1]), array([2, 3]), array([4, 5])]
    """

    def __init__(self, size=1, X=None, axis=None):
        self.size = size
        super(LeaveOutIndex, self).__init__(None, X, axis)

    def get_params(self):
        return {'size': self.size}

    def fit(self, X, axis=None):
        """Method for storing the number of observations.

        Parameters
        ----------
        X : container or int
            data to partition, or its number of observations.

        axis : Axis, str, int or None
            observation axis of ``X``.

        Returns
        -------
        instance :
            indexer with stored sample size data.
        """
        n = get_n_samples(X, axis)
        check_leaveout(n, self.size)

        self.folds = int(round(n / self.size))
        return super(LeaveOutIndex, self).fit(n)


def kfold_indices(n, k=5):
    """Compute the train/validation assignment of a k-fold partitioning.

    Parameters
    ----------
    n : int
        number of observations.

    k : int (default = 5)
        number of folds, ``2 <= k <= n``.

    Returns
    -------
    train_indices, val_indices : list of arrays
        index arrays of the training and validation set of each fold.

    Examples
    --------
    >>> from mlsubset.index import kfold_indices
    >>> train, val = kfold_indices(5, 2)
    >>> train
    [array([3, 4]), array([0, 1, 2])]
    >>> val
    [array([0, 1, 2]), array([3, 4])]
    """
    return FoldIndex(k).assignment(n)


def leaveout_indices(n, size=1):
    """Compute a k-fold assignment with validation sets of about ``size``.

    Equivalent to ``kfold_indices(n, round(n / size))``.
    """
    return LeaveOutIndex(size).assignment(n)
