"""ML-SUBSET

:author: Sebastian Flennerhag
:copyright: 2017-2018
:licence: MIT

Partitioning and resampling of data containers.
"""

from .split import splitobs, kfolds, leaveout, stratifiedobs
from .resample import oversample, undersample

__all__ = ['splitobs',
           'kfolds',
           'leaveout',
           'stratifiedobs',
           'oversample',
           'undersample',
           ]
