"""ML-SUBSET

:author: Sebastian Flennerhag
:license: MIT
:copyright: 2017-2018

Global configurations.

Variables

1. ``IDX_DTYPE``: data type of index arrays. Must be a numpy integer
   dtype. Default is ``intp``.

2. ``BATCH_DIVISOR``: the default batch size is the number of observations
   divided by ``BATCH_DIVISOR``. Default is ``5``.

3. ``BATCH_BOUNDS``: lower and upper bound of the default batch size.
   Default is ``(2, 100)``.

4. ``VERBOSE``: verbose import. Set to ``Y`` for verbose. Needs to be
   set before import (i.e. ``export MLSUBSET_VERBOSE=Y``).

Environmental variables can be set by ::

    export MLSUBSET_[VARIABLE]=VALUE

For changing defaults during a session, use
``set_[variable]`` and ``get_[variable]``, where ``[variable]`` is replaced
with the lower case name of the environmental variable to change.
"""
# pylint: disable=global-statement

import os
import sys

import numpy

###############################################################################
# Variables

_IDX_DTYPE = getattr(numpy, os.environ.get('MLSUBSET_IDX_DTYPE', 'intp'))
_BATCH_DIVISOR = int(os.environ.get('MLSUBSET_BATCH_DIVISOR', '5'))
_VERBOSE = os.environ.get('MLSUBSET_VERBOSE', 'N')

_BATCH_BOUNDS = os.environ.get('MLSUBSET_BATCH_BOUNDS', '2_100').split('_')
_BATCH_BOUNDS = (int(_BATCH_BOUNDS[0]), int(_BATCH_BOUNDS[1]))


###############################################################################
# dispatch configs

def get_idx_dtype():
    """Return index dtype"""
    return _IDX_DTYPE


def get_batch_divisor():
    """Return default batch size divisor"""
    return _BATCH_DIVISOR


def get_batch_bounds():
    """Return bounds of the default batch size"""
    return _BATCH_BOUNDS

###############################################################################
# Configuration calls


def set_idx_dtype(dtype):
    """Set the dtype of index arrays.

    Parameters
    ----------
    dtype : object
        numpy integer dtype
    """
    global _IDX_DTYPE
    if not numpy.issubdtype(dtype, numpy.integer):
        raise ValueError("Index dtype must be an integer type. "
                         "Got %r." % (dtype,))
    _IDX_DTYPE = dtype


def set_batch_divisor(divisor):
    """Set the divisor used to compute a default batch size.

    Parameters
    ----------
    divisor : int
        default batch size is ``n_obs // divisor`` before clamping.
    """
    global _BATCH_DIVISOR
    if divisor < 1:
        raise ValueError("Batch divisor must be a positive integer. "
                         "Got %r." % (divisor,))
    _BATCH_DIVISOR = divisor


def set_batch_bounds(lower, upper):
    """Set the bounds that the default batch size is clamped to.

    Parameters
    ----------
    lower : int
        smallest default batch size.

    upper : int
        largest default batch size.
    """
    global _BATCH_BOUNDS
    if not 1 <= lower <= upper:
        raise ValueError("Batch bounds must satisfy 1 <= lower <= upper. "
                         "Got (%r, %r)." % (lower, upper))
    _BATCH_BOUNDS = (lower, upper)

###############################################################################
# Set up


def print_settings():
    """Print package settings on system."""
    if _VERBOSE != 'Y':
        return
    msg = "[MLSUBSET] index dtype: %s | default batch: n // %i in [%i, %i]"
    arg = (numpy.dtype(_IDX_DTYPE).name, _BATCH_DIVISOR) + _BATCH_BOUNDS
    print(msg % arg, file=sys.stderr)


print_settings()
