"""ML-SUBSET

:author: Sebastian Flennerhag
:copyright: 2017-2018
:licence: MIT

Controls that indices and arguments are valid before computing on them.
"""

from numbers import Integral

import numpy as np

from ..config import get_idx_dtype
from .exceptions import ArgumentError, BoundsError


def is_integer(value):
    """Check if ``value`` is an integer scalar (``bool`` is not)."""
    return isinstance(value, Integral) and not isinstance(value, bool)


def check_indices(indices, n, name='indices'):
    """Validate an index or index sequence against ``n`` observations.

    Parameters
    ----------
    indices : int, range or array-like of int
        observation indices, 0-based.

    n : int
        number of observations in the container indexed into.

    name : str (default = 'indices')
        name of the argument, used in error messages.

    Returns
    -------
    indices : int, range or array
        an ``int`` for a scalar index, the ``range`` itself if ``indices`` is
        a range, otherwise a one-dimensional integer array.

    Raises
    ------
    ArgumentError :
        if ``indices`` is not integer typed or not one-dimensional.

    BoundsError :
        if any index is outside ``[0, n)``.
    """
    if is_integer(indices):
        idx = int(indices)
        if not 0 <= idx < n:
            raise BoundsError("Index %i in '%s' is out of bounds for %i "
                              "observations." % (idx, name, n))
        return idx

    if isinstance(indices, range):
        if len(indices) > 0:
            lo = min(indices[0], indices[-1])
            hi = max(indices[0], indices[-1])
            if lo < 0 or hi >= n:
                raise BoundsError("Range %r in '%s' is out of bounds for %i "
                                  "observations." % (indices, name, n))
        return indices

    arr = np.asarray(indices)
    if arr.ndim != 1:
        raise ArgumentError("'%s' must be an integer or a one-dimensional "
                            "sequence of integers. Got an array of shape "
                            "%r." % (name, arr.shape))

    if arr.size == 0:
        return arr.astype(get_idx_dtype())

    if not np.issubdtype(arr.dtype, np.integer):
        raise ArgumentError("'%s' must contain integers. Got dtype "
                            "%s." % (name, arr.dtype))

    lo, hi = arr.min(), arr.max()
    if lo < 0 or hi >= n:
        bad = lo if lo < 0 else hi
        raise BoundsError("Index %i in '%s' is out of bounds for %i "
                          "observations." % (bad, name, n))
    return arr.astype(get_idx_dtype(), copy=False)


def check_positive_int(value, name, allow_none=False):
    """Check that ``value`` is a strictly positive integer."""
    if value is None and allow_none:
        return value
    if not is_integer(value) or value <= 0:
        raise ArgumentError("'%s' must be a positive integer. Got "
                            "%r." % (name, value))
    return int(value)


def check_random_state(random_state):
    """Turn ``random_state`` into a :class:`numpy.random.Generator`.

    Parameters
    ----------
    random_state : None, int, SeedSequence, BitGenerator or Generator
        source of randomness. ``None`` gives a fresh unseeded generator, an
        ``int`` a seeded one. A ``Generator`` is returned as is, so that
        successive calls sharing it draw different numbers.

    Returns
    -------
    rng : :class:`numpy.random.Generator`
    """
    if isinstance(random_state, np.random.Generator):
        return random_state

    if random_state is None or is_integer(random_state) or isinstance(
            random_state, (np.random.SeedSequence, np.random.BitGenerator)):
        return np.random.default_rng(random_state)

    raise ArgumentError("Cannot use %r as a random state. Pass None, an int "
                        "seed or a numpy Generator." % (random_state,))
