"""ML-SUBSET

:author: Sebastian Flennerhag
:copyright: 2017-2018
:licence: MIT

Target extraction and label bookkeeping.

For a linked group ``(X, y)`` the targets are taken from the last member.
Targets are read through :func:`gettargets`, so containers (and subsets of
containers) with a bulk target accessor never materialize their
observations.
"""

from collections import OrderedDict

import numpy as np

from .base import check_nobs, get_axis, gettargets, nobs, _member_axes
from ..utils.exceptions import ArgumentError


def _target_source(data, axis):
    """Get the container and axis that hold the targets of ``data``."""
    axis = get_axis(data, axis)
    if not isinstance(data, tuple):
        return data, axis
    if len(data) == 0:
        raise ArgumentError("Cannot extract targets from an empty tuple.")
    check_nobs(data, axis)
    return data[-1], _member_axes(data, axis)[-1]


def _scalar(value):
    """Turn numpy scalars into their Python equivalent."""
    if isinstance(value, np.generic):
        return value.item()
    return value


def eachtarget(data, fn=None, axis=None):
    """Iterate over the targets of all observations in ``data``.

    Parameters
    ----------
    data : container or tuple
        container, or linked group whose last member holds the targets.

    fn : callable or None
        function applied to each target.

    axis : Axis, str, int, tuple or None
        observation axis.
    """
    data, axis = _target_source(data, axis)
    for i in range(nobs(data, axis)):
        target = _scalar(gettargets(data, i, axis))
        yield fn(target) if fn is not None else target


def targets(data, fn=None, axis=None):
    """Return a list with the target of every observation in ``data``.

    Parameters
    ----------
    data : container or tuple
        container, or linked group whose last member holds the targets. Only
        the last member is used; a nested tuple in that slot is taken as a
        whole.

    fn : callable or None
        function applied to each target, for instance to turn a one-hot row
        into a class label.

    axis : Axis, str, int, tuple or None
        observation axis.

    Returns
    -------
    targets : list

    Examples
    --------
    >>> import numpy as np
    >>> from mlsubset import targets
    >>> X, y = np.zeros((2, 4)), np.array(['a', 'b', 'b', 'a'])
    >>> targets((X, y))
    ['a', 'b', 'b', 'a']
    >>> targets(y, fn=lambda t: t == 'a')
    [True, False, False, True]
    """
    source, src_axis = _target_source(data, axis)
    n = nobs(source, src_axis)

    values = gettargets(source, range(n), src_axis)
    if isinstance(values, np.ndarray) and values.shape == (n,):
        values = values.tolist()
    elif not (isinstance(values, list) and len(values) == n):
        values = list(eachtarget(data, axis=axis))

    if fn is None:
        return values
    return [fn(v) for v in values]


def labelmap(targets):
    """Map each distinct label to the positions where it occurs.

    Parameters
    ----------
    targets : iterable
        one hashable label per observation.

    Returns
    -------
    lm : OrderedDict
        label -> list of 0-based positions, labels in order of first
        appearance.

    Examples
    --------
    >>> from mlsubset import labelmap
    >>> dict(labelmap(['b', 'a', 'b']))
    {'b': [0, 2], 'a': [1]}
    """
    lm = OrderedDict()
    for i, label in enumerate(targets):
        lm.setdefault(_scalar(label), []).append(i)
    return lm


def labelfreq(targets):
    """Count the occurrences of each distinct label.

    Returns
    -------
    freq : OrderedDict
        label -> count, labels in order of first appearance.
    """
    freq = OrderedDict()
    for label in targets:
        label = _scalar(label)
        freq[label] = freq.get(label, 0) + 1
    return freq
