"""ML-SUBSET

:author: Sebastian Flennerhag
:copyright: 2017-2018
:licence: MIT

Class balancing by over- and undersampling.
"""

from numbers import Real

import numpy as np

from ..config import get_idx_dtype
from ..container.base import nobs
from ..container.subset import datasubset
from ..container.targets import labelmap, targets
from ..utils.checks import check_random_state
from ..utils.exceptions import ArgumentError


def _labelmap(data, fn, axis):
    lm = labelmap(targets(data, fn, axis))
    if not lm:
        raise ArgumentError("Cannot resample a container without "
                            "observations.")
    return lm


def oversample(data, fraction=1, shuffle=True, fn=None, axis=None,
               random_state=None):
    """Repeat observations of smaller classes to balance the labels.

    All observations are kept. For every label, observations are added until
    its count reaches ``round(fraction * M)``, where ``M`` is the count of
    the most frequent label: whole copies of the label's observations while
    more are missing than the label has, then a sample without replacement
    for the remainder.

    Parameters
    ----------
    data : container or tuple
        data to resample. For a linked group ``(X, y)`` the labels are the
        targets in ``y``.

    fraction : float (default = 1)
        target count of every label relative to the largest label count.

    shuffle : bool (default = True)
        whether to shuffle the resampled observations. If ``False``, the
        original observations come first, followed by the added ones
        grouped by label.

    fn : callable, optional
        function applied to each target to get its label.

    axis : Axis, str, int, tuple or None
        observation axis.

    random_state : None, int or :class:`numpy.random.Generator`
        source of randomness.

    Returns
    -------
    subset : DataSubset or tuple
        lazy subset with duplicated indices.

    Examples
    --------
    >>> from mlsubset import oversample, targets, labelfreq
    >>> y = ['a', 'b', 'b', 'b', 'b', 'a']
    >>> sorted(labelfreq(targets(oversample(y, random_state=0))).items())
    [('a', 4), ('b', 4)]
    """
    if not isinstance(fraction, Real) or isinstance(fraction, bool) or \
            not fraction > 0:
        raise ArgumentError("'fraction' must be a positive number. "
                            "Got %r." % (fraction,))
    rng = check_random_state(random_state)
    lm = _labelmap(data, fn, axis)

    dtype = get_idx_dtype()
    target = int(round(fraction * max(len(v) for v in lm.values())))

    indices = [np.arange(nobs(data, axis), dtype=dtype)]
    for positions in lm.values():
        positions = np.asarray(positions, dtype=dtype)
        needed = target - len(positions)
        while needed > len(positions):
            needed -= len(positions)
            indices.append(positions)
        if needed > 0:
            indices.append(rng.choice(positions, needed, replace=False))

    indices = np.concatenate(indices)
    if shuffle:
        rng.shuffle(indices)
    return datasubset(data, indices, axis)


def undersample(data, shuffle=False, fn=None, axis=None, random_state=None):
    """Drop observations of larger classes to balance the labels.

    Every label keeps ``m`` observations, sampled without replacement, where
    ``m`` is the count of the least frequent label.

    Parameters
    ----------
    data : container or tuple
        data to resample. For a linked group ``(X, y)`` the labels are the
        targets in ``y``.

    shuffle : bool (default = False)
        whether to shuffle the kept observations. If ``False`` they keep
        their original order.

    fn : callable, optional
        function applied to each target to get its label.

    axis : Axis, str, int, tuple or None
        observation axis.

    random_state : None, int or :class:`numpy.random.Generator`
        source of randomness.

    Returns
    -------
    subset : DataSubset or tuple

    Examples
    --------
    >>> from mlsubset import undersample, targets
    >>> y = ['a', 'b', 'b', 'b', 'b', 'a']
    >>> sub = undersample(y, random_state=0)
    >>> len(sub), sub.indices[[0, -1]]
    (4, array([0, 5]))
    """
    rng = check_random_state(random_state)
    lm = _labelmap(data, fn, axis)

    dtype = get_idx_dtype()
    count = min(len(v) for v in lm.values())

    indices = np.concatenate([
        rng.choice(np.asarray(positions, dtype=dtype), count, replace=False)
        for positions in lm.values()])

    if shuffle:
        rng.shuffle(indices)
    else:
        indices.sort()
    return datasubset(data, indices, axis)
