"""ML-SUBSET

:author: Sebastian Flennerhag
:copyright: 2017-2018
:licence: MIT

Random observation and batch iterators.
"""

from abc import abstractmethod

from ..container.base import get_axis, nobs
from ..container.subset import datasubset
from ..container.targets import labelmap, targets
from ..utils.checks import check_positive_int, check_random_state
from ..utils.exceptions import ArgumentError
from ..view.views import default_batch_size


class RandomIterator(object):

    """Base class for iterators that sample observations at random.

    Each call to ``iter`` draws from ``check_random_state(random_state)``:
    an int seed replays the same sequence, a shared
    :class:`numpy.random.Generator` continues where it left off.

    Parameters
    ----------
    data : container or tuple
        data to sample from.

    count : int, optional
        number of samples per iteration. ``None`` iterates forever.

    axis : Axis, str, int, tuple or None
        observation axis.

    random_state : None, int or :class:`numpy.random.Generator`
        source of randomness.
    """

    def __init__(self, data, count=None, axis=None, random_state=None):
        self.data = data
        self.axis = get_axis(data, axis)
        self.count = check_positive_int(count, 'count', allow_none=True)
        self.random_state = random_state

        self.n_samples = nobs(data, self.axis)
        if self.n_samples == 0:
            raise ArgumentError("Cannot sample from a container without "
                                "observations.")

    def __len__(self):
        if self.count is None:
            raise TypeError("%s without a count is infinite." %
                            type(self).__name__)
        return self.count

    @abstractmethod
    def _draw(self, rng):
        """Draw one sample from ``rng``."""

    def __iter__(self):
        rng = check_random_state(self.random_state)
        i = 0
        while self.count is None or i < self.count:
            yield self._draw(rng)
            i += 1


class RandomObs(RandomIterator):

    """Iterate over random single observations, drawn with replacement.

    Yields lazy one-observation subsets. See :class:`RandomIterator` for the
    parameters.

    Examples
    --------
    >>> import numpy as np
    >>> from mlsubset import RandomObs
    >>> X = np.zeros((2, 10))
    >>> len(list(RandomObs(X, count=3, random_state=0)))
    3
    """

    def _draw(self, rng):
        return datasubset(self.data, int(rng.integers(self.n_samples)),
                          self.axis)


class RandomBatches(RandomIterator):

    """Iterate over random batches of observations, drawn with replacement.

    Parameters
    ----------
    data : container or tuple
        data to sample from.

    size : int, optional
        observations per batch. Defaults to the default batch size (see
        :mod:`mlsubset.config`).

    count : int, optional
        number of batches per iteration. ``None`` iterates forever.

    axis : Axis, str, int, tuple or None
        observation axis.

    random_state : None, int or :class:`numpy.random.Generator`
        source of randomness.
    """

    def __init__(self, data, size=None, count=None, axis=None,
                 random_state=None):
        super(RandomBatches, self).__init__(data, count, axis, random_state)
        size = check_positive_int(size, 'size', allow_none=True)
        self.size = default_batch_size(self.n_samples) if size is None \
            else size

    def _draw(self, rng):
        return datasubset(self.data,
                          rng.integers(self.n_samples, size=self.size),
                          self.axis)


class BalancedObs(RandomIterator):

    """Iterate over random observations with balanced labels.

    Each step first draws a label uniformly, then an observation with that
    label, so every label is equally likely regardless of its frequency.

    Parameters
    ----------
    data : container or tuple
        data to sample from. For a linked group ``(X, y)`` the labels are
        the targets in ``y``.

    count : int, optional
        number of samples per iteration. ``None`` iterates forever.

    fn : callable, optional
        function applied to each target to get its label.

    axis : Axis, str, int, tuple or None
        observation axis.

    random_state : None, int or :class:`numpy.random.Generator`
        source of randomness.
    """

    def __init__(self, data, count=None, fn=None, axis=None,
                 random_state=None):
        super(BalancedObs, self).__init__(data, count, axis, random_state)
        self.fn = fn
        self.labelmap = labelmap(targets(data, fn, self.axis))
        self._labels = list(self.labelmap)

    def _draw(self, rng):
        label = self._labels[int(rng.integers(len(self._labels)))]
        positions = self.labelmap[label]
        i = positions[int(rng.integers(len(positions)))]
        return datasubset(self.data, i, self.axis)
