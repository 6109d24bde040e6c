"""ML-SUBSET

:author: Sebastian Flennerhag
:copyright: 2017-2018
:licence: MIT


Base classes for partitioning observation indices.
"""

from abc import abstractmethod
import numpy as np

from ..config import get_idx_dtype
from ..container.base import nobs
from ..utils.checks import is_integer
from ..utils.exceptions import ArgumentError, NotFittedError


def prune_train(start_below, stop_below, start_above, stop_above):
    """Checks if indices above or below are empty and remove them.

    A utility function for checking if the train indices below a given
    validation range are (0, 0), or if the indices above the validation
    range are (n, n). Such ranges are empty and are dropped, leaving a
    single training index range.

    Parameters
    ----------
    start_below : int
        index number starting below the validation set. Always 0.

    stop_below : int
        the index number at which the validation set is starting on.

    start_above : int
        the index number at which the validation set ends.

    stop_above : int
        The end of the data set (n).

    Examples
    --------
    >>> from mlsubset.index.base import prune_train
    >>> prune_train(0, 0, 3, 10)
    ((3, 10),)
    >>> prune_train(0, 3, 6, 10)
    ((0, 3), (6, 10))
    """
    if start_below == stop_below:
        tri = ((start_above, stop_above),)

    elif start_above == stop_above:
        tri = ((start_below, stop_below),)

    else:
        tri = ((start_below, stop_below), (start_above, stop_above))
    return tri


def partition(n, p):
    """Get partition sizes for a given number of samples and partitions.

    This method will give an array containing the sizes of ``p`` partitions
    given a total sample size of ``n``. If there is a remainder from the
    split, the r first folds will be incremented by 1.

    Parameters
    ----------
    n : int
        number of samples.

    p : int
        number of partitions.

    Examples
    --------

    Return sample sizes of 2 partitions given a total of 4 samples

    >>> from mlsubset.index.base import partition
    >>> partition(4, 2)
    array([2, 2])

    Return sample sizes of 3 partitions given a total of 8 samples

    >>> from mlsubset.index.base import partition
    >>> partition(8, 3)
    array([3, 3, 2])
    """
    sizes = np.full(p, n // p, dtype=get_idx_dtype())
    sizes[:n % p] += 1
    return sizes


def make_tuple(arr):
    """Make a list of index tuples from a sorted array

    Parameters
    ----------
    arr : array

    Returns
    -------
    out : list

    Examples
    --------
    >>> import numpy as np
    >>> from mlsubset.index.base import make_tuple
    >>> make_tuple(np.array([0, 1, 2, 5, 6, 8, 9, 10]))
    [(0, 3), (5, 7), (8, 11)]
    """
    out = list()
    if len(arr) == 0:
        return out

    t1 = t0 = int(arr[0])
    for i in arr[1:]:
        i = int(i)
        if i - t1 <= 1:
            t1 = i
            continue

        out.append((t0, t1 + 1))
        t1 = t0 = i

    out.append((t0, t1 + 1))
    return out


def build_range(idx):
    """Build an array of indexes from a list or tuple of index tuples.

    Given an index object containing tuples of ``(start, stop)`` indexes
    ``build_range`` will return an array that concatenate all elements
    between each ``start`` and ``stop`` number. Arrays are returned as is.

    Examples
    --------
    Single slice (convex slicing)

    >>> from mlsubset.index.base import build_range
    >>> build_range((0, 6))
    array([0, 1, 2, 3, 4, 5])

    Several slices (non-convex slicing)

    >>> build_range([(0, 2), (4, 6)])
    array([0, 1, 4, 5])
    """
    dtype = get_idx_dtype()
    if isinstance(idx, np.ndarray):
        return idx.astype(dtype, copy=False)
    if len(idx) == 0:
        return np.empty(0, dtype=dtype)
    if isinstance(idx[0], tuple):
        return np.hstack([np.arange(t0, t1, dtype=dtype) for t0, t1 in idx])
    return np.arange(idx[0], idx[1], dtype=dtype)


def get_n_samples(X, axis=None):
    """Number of observations to index: ``X`` itself if it is an int."""
    if is_integer(X):
        if X < 0:
            raise ArgumentError("Number of observations must be "
                                "non-negative. Got %i." % X)
        return int(X)
    return nobs(X, axis)


class BaseIndex(object):

    """Base Index class.

    Specification of indexer-wide methods and attributes that we can always
    expect to find in any indexer. Indexers only ever store the number of
    observations of the data they are fitted on, never the data itself.
    """

    def __init__(self):
        self.n_samples = None

        self.__fitted__ = False

    @abstractmethod
    def fit(self, X, axis=None):
        """Method for storing the number of observations.

        Parameters
        ----------
        X : container or int
            data to collect the number of observations from. An int is taken
            as the number of observations.

        axis : Axis, str, int or None
            observation axis of ``X``.

        Returns
        -------
        instance :
            indexer with stored sample size data.
        """

    @abstractmethod
    def _gen_indices(self):
        """Method for constructing the index generator.

        Returns
        -------
        iterable :
            a generator of index tuples, ``(train, val)`` for fold indexers.
        """

    def generate(self, X=None, as_array=False):
        r"""Front-end generator method.

        Generator for index tuples based on the generator specification in
        ``_gen_indices``.

        Parameters
        ----------
        X : container or int, optional
            If instance has not been fitted, the data ``X`` must be
            passed to the ``generate`` method, which will call ``fit`` before
            proceeding. If already fitted, ``X`` can be omitted.

        as_array : bool (default = False)
            whether to return indices as ``(start, stop)`` tuple(s)
            or numpy arrays. A ``(start, stop)`` tuple can be used for
            slicing (``X[start:stop]``), while a list of tuples requires
            first building an array of index numbers, either by setting
            ``as_array`` to ``True`` or with :func:`build_range`.
        """
        if not self.__fitted__:
            if X is None:
                raise NotFittedError("No data provided to indexer. Either "
                                     "pass data to the 'generate' method, "
                                     "or call the 'fit' method first.")
            self.fit(X)

        for idx in self._gen_indices():
            if as_array:
                idx = tuple(build_range(i) for i in idx)
            yield idx

    def __repr__(self):
        params = ', '.join('%s=%r' % (k, v) for k, v in
                           sorted(self.get_params().items()))
        return '%s(%s)' % (type(self).__name__, params)

    def get_params(self):
        """Get the constructor parameters of the indexer."""
        return {}

    def set_params(self, **params):
        """Set constructor parameters. The indexer must be fitted again."""
        valid = self.get_params()
        for key, value in params.items():
            if key not in valid:
                raise ArgumentError("Invalid parameter %r for %s. Valid "
                                    "parameters: %r." % (
                                        key, type(self).__name__,
                                        sorted(valid)))
            setattr(self, key, value)
        self.__fitted__ = False
        return self
