"""ML-SUBSET

:author: Sebastian Flennerhag
:copyright: 2017-2018
:licence: MIT

Data containers: axis specifiers, the capability protocol, lazy subsets and
targets.
"""

from .axis import (Axis, FirstAxis, LastAxis, ConstantAxis, Undefined,
                   convert_axis, resolve_axis)
from .base import (DataContainer, BufferedContainer, TargetContainer,
                   is_container, check_container, default_axis, get_axis,
                   check_nobs, nobs, getobs, getobs_into, gettargets)
from .subset import (DataSubset, compose_indices, datasubset, shuffleobs,
                     randobs)
from .targets import targets, eachtarget, labelmap, labelfreq

__all__ = ['Axis',
           'FirstAxis',
           'LastAxis',
           'ConstantAxis',
           'Undefined',
           'convert_axis',
           'resolve_axis',
           'DataContainer',
           'BufferedContainer',
           'TargetContainer',
           'is_container',
           'check_container',
           'default_axis',
           'get_axis',
           'check_nobs',
           'nobs',
           'getobs',
           'getobs_into',
           'gettargets',
           'DataSubset',
           'compose_indices',
           'datasubset',
           'shuffleobs',
           'randobs',
           'targets',
           'eachtarget',
           'labelmap',
           'labelfreq',
           ]
