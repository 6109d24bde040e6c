"""ML-SUBSET

:author: Sebastian Flennerhag
:copyright: 2017-2018
:licence: MIT
"""

from .exceptions import (
    CapabilityError, BoundsError, DimensionMismatchError, ArgumentError,
    NotFittedError, UnusedObservationsWarning, ViewNestingWarning)
from .checks import (
    check_indices, check_positive_int, check_random_state, is_integer)

__all__ = ['CapabilityError',
           'BoundsError',
           'DimensionMismatchError',
           'ArgumentError',
           'NotFittedError',
           'UnusedObservationsWarning',
           'ViewNestingWarning',
           'check_indices',
           'check_positive_int',
           'check_random_state',
           'is_integer'
           ]
