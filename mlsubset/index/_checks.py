"""ML-SUBSET

:author: Sebastian Flennerhag
:copyright: 2017-2018
:licence: MIT

Indexer checks
"""

from numbers import Real

import numpy as np

from ..utils.checks import is_integer
from ..utils.exceptions import ArgumentError


def check_folds(n_samples, folds):
    """Check that folds can be constructed from passed arguments."""
    if not is_integer(folds):
        raise ArgumentError("'folds' must be an integer. "
                            "type(%s) was passed." % type(folds).__name__)

    if folds < 2:
        raise ArgumentError("Need at least 2 folds to partition data. "
                            "Got %i." % folds)

    if folds > n_samples:
        raise ArgumentError("Number of folds %i is greater than the number "
                            "of observations: %i." % (folds, n_samples))


def check_leaveout(n_samples, size):
    """Check that a leave-out size is valid for the number of samples."""
    if not is_integer(size):
        raise ArgumentError("'size' must be an integer. "
                            "type(%s) was passed." % type(size).__name__)

    if not 1 <= size <= n_samples // 2:
        raise ArgumentError("'size' must be within [1, %i] for %i "
                            "observations. Got %i." % (n_samples // 2,
                                                       n_samples, size))


def _is_fraction(value):
    return isinstance(value, Real) and not isinstance(value, bool)


def check_fractions(at):
    """Check split fractions and return them as a tuple of floats.

    A single fraction must lie in the open interval (0, 1). A sequence of
    fractions must be non-empty, each fraction positive, and their sum
    smaller than 1.
    """
    if _is_fraction(at):
        if not 0 < at < 1:
            raise ArgumentError("The split fraction 'at' must be in the "
                                "interval (0, 1). Got %r." % (at,))
        return (float(at),)

    if isinstance(at, (tuple, list, np.ndarray)):
        fractions = tuple(at)
        if not fractions or not all(_is_fraction(f) for f in fractions):
            raise ArgumentError("'at' must be a fraction or a non-empty "
                                "sequence of fractions. Got %r." % (at,))
        if not all(f > 0 for f in fractions) or not sum(fractions) < 1:
            raise ArgumentError("All fractions in 'at' must be positive and "
                                "their sum must be smaller than 1. "
                                "Got %r." % (at,))
        return tuple(float(f) for f in fractions)

    raise ArgumentError("'at' must be a fraction or a sequence of "
                        "fractions. type(%s) was passed." % type(at).__name__)
