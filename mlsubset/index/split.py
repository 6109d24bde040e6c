"""ML-SUBSET

:author: Sebastian Flennerhag
:copyright: 2017-2018
:licence: MIT

Proportional split indexing.
"""

from numbers import Real

from ._checks import check_fractions
from .base import BaseIndex, get_n_samples


def split_sizes(n, at):
    """Get the number of observations in each bucket of a split.

    Parameters
    ----------
    n : int
        number of observations.

    at : float or sequence of floats
        fraction of observations in the first bucket, or in each of the first
        ``len(at)`` buckets. The last bucket takes the rest.

    Returns
    -------
    sizes : list of int
        one size per bucket, summing to ``n``.

    Examples
    --------
    >>> from mlsubset.index.split import split_sizes
    >>> split_sizes(10, 0.7)
    [7, 3]
    >>> split_sizes(10, (0.2, 0.3))
    [2, 3, 5]
    """
    fractions = check_fractions(at)

    if isinstance(at, Real):
        n1 = min(max(int(round(fractions[0] * n)), 1), n)
        return [n1, n - n1]

    sizes = list()
    nleft = n
    for i, fraction in enumerate(fractions):
        # Every later bucket keeps at least one observation if n allows
        rest = len(fractions) - i
        ni = int(round(fraction * n))
        if nleft > rest:
            ni = min(max(ni, 1), nleft - rest)
        else:
            ni = min(ni, nleft)
        sizes.append(ni)
        nleft -= ni
    sizes.append(nleft)
    return sizes


class SplitIndex(BaseIndex):

    """Indexer that generates contiguous, non-overlapping buckets of ``X``.

    Static proportional split: the first bucket holds the first ``at``
    fraction of the observations, the second bucket the rest. With a
    sequence of fractions, bucket ``i`` holds fraction ``at[i]`` and the
    last bucket the remainder. There is no randomization: use
    :func:`mlsubset.shuffleobs` first to randomize the assignment.

    SplitIndex creates a singleton generator that yields one tuple of
    ``(start, stop)`` integers per bucket, usable for slicing
    (``X[start:stop]``).

    Parameters
    ----------
    at : float or sequence of floats (default = 0.7)
        a fraction in (0, 1), or positive fractions summing to less than 1.

    X : container or int, optional
        data to fit the indexer on.

    axis : Axis, str, int or None
        observation axis of ``X``.

    See Also
    --------
    :class:`FoldIndex`, :class:`StratifiedIndex`

    Examples
    --------
    >>> from mlsubset.index import SplitIndex
    >>> idx = SplitIndex(0.7)
    >>> for train, val in idx.generate(10):
    ...     print(train, val)
    (0, 7) (7, 10)

    >>> idx = SplitIndex((0.2, 0.3), 10)
    >>> list(idx.generate())
    [((0, 2), (2, 5), (5, 10))]
    """

    def __init__(self, at=0.7, X=None, axis=None):
        super(SplitIndex, self).__init__()
        self.at = at
        self.sizes = None

        if X is not None:
            self.fit(X, axis)

    def get_params(self):
        return {'at': self.at}

    def fit(self, X, axis=None):
        """Method for storing the number of observations.

        Parameters
        ----------
        X : container or int
            data to split, or its number of observations.

        axis : Axis, str, int or None
            observation axis of ``X``.

        Returns
        -------
        instance :
            indexer with stored sample size data.
        """
        n = get_n_samples(X, axis)
        self.sizes = split_sizes(n, self.at)

        self.n_samples = n
        self.__fitted__ = True
        return self

    def _gen_indices(self):
        """Return the bucket index generator."""
        # There is no iteration: one tuple with all buckets.
        buckets = list()
        last = 0
        for size in self.sizes:
            buckets.append((last, last + size))
            last += size
        yield tuple(buckets)


def split_indices(n, at=0.7):
    """Split ``range(n)`` into contiguous ranges proportional to ``at``.

    Parameters
    ----------
    n : int
        number of observations.

    at : float or sequence of floats (default = 0.7)
        split fraction(s).

    Returns
    -------
    ranges : tuple of range
        ``len(at) + 1`` ranges (two for a single fraction) covering
        ``range(n)``.

    Examples
    --------
    >>> from mlsubset.index import split_indices
    >>> split_indices(100, 0.7)
    (range(0, 70), range(70, 100))
    """
    buckets = next(SplitIndex(at).generate(n))
    return tuple(range(start, stop) for start, stop in buckets)
