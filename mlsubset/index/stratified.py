"""ML-SUBSET

:author: Sebastian Flennerhag
:copyright: 2017-2018
:licence: MIT

Stratified split indexing.
"""

import numpy as np

from ._checks import check_fractions
from .base import BaseIndex
from .split import split_sizes
from ..config import get_idx_dtype
from ..container.targets import labelmap, targets
from ..utils.checks import is_integer
from ..utils.exceptions import ArgumentError


def stratified_indices(lm, at=0.7):
    """Split the positions of every label proportionally to ``at``.

    Each label's positions are split on their own with the sizes of
    :func:`mlsubset.index.split.split_sizes`, so the label proportions are
    preserved up to rounding in every bucket. Buckets collect the labels in
    the order of ``lm``.

    Parameters
    ----------
    lm : mapping
        label -> sequence of positions, as returned by
        :func:`mlsubset.labelmap`.

    at : float or sequence of floats (default = 0.7)
        split fraction(s).

    Returns
    -------
    buckets : tuple of arrays
        one index array per bucket.

    Examples
    --------
    >>> from mlsubset import labelmap
    >>> from mlsubset.index import stratified_indices
    >>> lm = labelmap(['a'] * 6 + ['b'] * 3)
    >>> stratified_indices(lm, 0.7)
    (array([0, 1, 2, 3, 6, 7]), array([4, 5, 8]))
    """
    n_buckets = len(check_fractions(at)) + 1
    dtype = get_idx_dtype()

    buckets = [list() for _ in range(n_buckets)]
    for positions in lm.values():
        positions = np.asarray(positions, dtype=dtype)
        last = 0
        for bucket, size in zip(buckets, split_sizes(len(positions), at)):
            bucket.append(positions[last:last + size])
            last += size

    return tuple(np.concatenate(b) if b else np.empty(0, dtype=dtype)
                 for b in buckets)


class StratifiedIndex(BaseIndex):

    """Indexer that splits the observations of every label proportionally.

    The fit call reads the targets of ``X`` and builds their label map; the
    generator yields one tuple with an index array per bucket. Buckets are
    in general not contiguous, so they are always returned as arrays.

    Parameters
    ----------
    at : float or sequence of floats (default = 0.7)
        split fraction(s), as for :class:`SplitIndex`.

    X : container, optional
        data to fit the indexer on. For a linked group ``(X, y)`` the
        targets are read from ``y``.

    fn : callable, optional
        function applied to each target to get its label.

    axis : Axis, str, int, tuple or None
        observation axis of ``X``.

    Examples
    --------
    >>> import numpy as np
    >>> from mlsubset.index import StratifiedIndex
    >>> y = np.array([0, 0, 1, 1, 0, 1])
    >>> for first, second in StratifiedIndex(0.5).generate(y):
    ...     print(first, second)
    [0 1 2 3] [4 5]
    """

    def __init__(self, at=0.7, X=None, fn=None, axis=None):
        super(StratifiedIndex, self).__init__()
        self.at = at
        self.fn = fn
        self.labelmap = None

        if X is not None:
            self.fit(X, axis)

    def get_params(self):
        return {'at': self.at, 'fn': self.fn}

    def fit(self, X, axis=None):
        """Method for storing the label map of the targets of ``X``.

        Parameters
        ----------
        X : container or tuple
            data, or linked group whose last member holds the targets.

        axis : Axis, str, int, tuple or None
            observation axis of ``X``.

        Returns
        -------
        instance :
            indexer with stored label data.
        """
        if is_integer(X):
            raise ArgumentError("StratifiedIndex needs targets to fit on, "
                                "not a number of observations.")
        check_fractions(self.at)

        labels = targets(X, self.fn, axis)
        self.labelmap = labelmap(labels)

        self.n_samples = len(labels)
        self.__fitted__ = True
        return self

    def _gen_indices(self):
        """Return the stratified bucket generator."""
        yield stratified_indices(self.labelmap, self.at)
