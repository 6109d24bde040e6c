"""ML-SUBSET

:author: Sebastian Flennerhag
:copyright: 2017-2018
:licence: MIT

Lazy views: containers presented as sequences of observations, batches,
folds or windows.
"""

from .base import DataView, materialize
from .views import (ObsView, BatchView, obsview, batchview, batch_settings,
                    default_batch_size)
from .folds import FoldsView, check_folds_partition
from .window import (SlidingWindow, LabeledSlidingWindow, slidingwindow,
                     check_window)

__all__ = ['DataView',
           'materialize',
           'ObsView',
           'BatchView',
           'obsview',
           'batchview',
           'batch_settings',
           'default_batch_size',
           'FoldsView',
           'check_folds_partition',
           'SlidingWindow',
           'LabeledSlidingWindow',
           'slidingwindow',
           'check_window',
           ]
