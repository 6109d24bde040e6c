"""ML-SUBSET

:author: Sebastian Flennerhag
:copyright: 2017-2018
:license: MIT

Classes and functions for partitioning observation indices. By default,
indexers generate lists of ``(start, stop)`` tuples, as opposed to array
indexes, so that no index array is built until it is needed.
"""

from .base import BaseIndex, prune_train, make_tuple, partition, build_range
from .fold import FoldIndex, LeaveOutIndex, kfold_indices, leaveout_indices
from .split import SplitIndex, split_indices, split_sizes
from .stratified import StratifiedIndex, stratified_indices

INDEXERS = {
    'fold': FoldIndex,
    'leaveout': LeaveOutIndex,
    'split': SplitIndex,
    'stratified': StratifiedIndex,
}


__all__ = [
    'BaseIndex',
    'FoldIndex',
    'LeaveOutIndex',
    'SplitIndex',
    'StratifiedIndex',
    'INDEXERS',
    'prune_train',
    'partition',
    'make_tuple',
    'build_range',
    'kfold_indices',
    'leaveout_indices',
    'split_indices',
    'split_sizes',
    'stratified_indices',
]
