"""ML-SUBSET

:author: Sebastian Flennerhag
:copyright: 2017-2018
:licence: MIT

Iterators over data containers.
"""

from .buffer import BufferGetObs, eachobs, eachbatch
from .random import RandomIterator, RandomObs, RandomBatches, BalancedObs

__all__ = ['BufferGetObs',
           'eachobs',
           'eachbatch',
           'RandomIterator',
           'RandomObs',
           'RandomBatches',
           'BalancedObs',
           ]
