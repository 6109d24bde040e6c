"""ML-SUBSET

:author: Sebastian Flennerhag
:copyright: 2017-2018
:licence: MIT

ML-Subset, a Python library for lazy subsetting, partitioning and
resampling of data containers.
"""
# Initialize configurations
# pylint: disable=wildcard-import
from .config import *

from .utils import (CapabilityError, BoundsError, DimensionMismatchError,
                    ArgumentError, NotFittedError, UnusedObservationsWarning,
                    ViewNestingWarning)
from .container import (Axis, FirstAxis, LastAxis, ConstantAxis, Undefined,
                        DataContainer, BufferedContainer, TargetContainer,
                        default_axis, nobs, getobs, getobs_into, gettargets,
                        check_nobs, DataSubset, datasubset, shuffleobs,
                        randobs, targets, eachtarget, labelmap, labelfreq)
from .index import (FoldIndex, LeaveOutIndex, SplitIndex, StratifiedIndex,
                    kfold_indices, leaveout_indices, split_indices,
                    stratified_indices)
from .view import (ObsView, BatchView, obsview, batchview, FoldsView,
                   SlidingWindow, LabeledSlidingWindow, slidingwindow)
from .sampling import (splitobs, kfolds, leaveout, stratifiedobs, oversample,
                       undersample)
from .iterate import (BufferGetObs, eachobs, eachbatch, RandomObs,
                      RandomBatches, BalancedObs)

__version__ = "0.1.0"
