"""ML-SUBSET

:author: Sebastian Flennerhag
:copyright: 2017-2018
:licence: MIT

Capability protocol of data containers.

A data container is anything that can report its number of observations
(``nobs``) and return observations by index (``getobs``). Membership is
structural: a class that defines the methods ``nobs`` and ``getobs`` is a
container. numpy arrays, scipy sparse matrices, lists and ranges are
supported out of the box, and a tuple of containers is a linked group that
behaves as one container.
"""
# pylint: disable=unused-argument

from abc import ABCMeta

import numpy as np
import scipy.sparse as sp

from .axis import LastAxis, Undefined, convert_axis, resolve_axis
from ..utils.checks import check_indices, is_integer
from ..utils.exceptions import CapabilityError, DimensionMismatchError


def _check_methods(cls, *methods):
    """Check that ``cls`` or one of its bases define all ``methods``."""
    mro = cls.__mro__
    for method in methods:
        for base in mro:
            if method in base.__dict__:
                if base.__dict__[method] is None:
                    return NotImplemented
                break
        else:
            return NotImplemented
    return True


class DataContainer(metaclass=ABCMeta):

    """Capability: report the number of observations and return them.

    Any class defining ``nobs(axis=None)`` and ``getobs(idx, axis=None)`` is
    considered a subclass; no inheritance is needed.
    """

    __slots__ = ()

    @classmethod
    def __subclasshook__(cls, C):
        if cls is DataContainer:
            return _check_methods(C, 'nobs', 'getobs')
        return NotImplemented


class BufferedContainer(metaclass=ABCMeta):

    """Capability: write observations into a caller supplied buffer.

    Any class defining ``getobs_into(buffer, idx, axis=None)`` is considered
    a subclass.
    """

    __slots__ = ()

    @classmethod
    def __subclasshook__(cls, C):
        if cls is BufferedContainer:
            return _check_methods(C, 'getobs_into')
        return NotImplemented


class TargetContainer(metaclass=ABCMeta):

    """Capability: return targets without materializing observations.

    Any class defining ``gettargets(idx, axis=None)`` is considered a
    subclass.
    """

    __slots__ = ()

    @classmethod
    def __subclasshook__(cls, C):
        if cls is TargetContainer:
            return _check_methods(C, 'gettargets')
        return NotImplemented


DataContainer.register(np.ndarray)
DataContainer.register(list)
DataContainer.register(range)
BufferedContainer.register(np.ndarray)


###############################################################################
def is_container(data):
    """Check if ``data`` satisfies the container protocol.

    A tuple is a container if all of its members are.
    """
    if isinstance(data, tuple):
        return all(is_container(d) for d in data)
    return isinstance(data, DataContainer) or sp.issparse(data)


def check_container(data):
    """Raise a :class:`CapabilityError` if ``data`` is not a container."""
    if not is_container(data):
        raise CapabilityError("%r does not implement the data container "
                              "protocol: define 'nobs' and 'getobs' "
                              "methods." % type(data).__name__)


def default_axis(data):
    """Return the default observation axis of ``data``.

    Arrays and sparse matrices enumerate observations along their last
    dimension. Tuples return the default of each member. Other containers
    may declare a ``default_axis`` attribute and are :class:`Undefined`
    otherwise.
    """
    if isinstance(data, tuple):
        return tuple(default_axis(d) for d in data)
    if isinstance(data, np.ndarray) or sp.issparse(data):
        return LastAxis()
    return getattr(data, 'default_axis', Undefined())


def get_axis(data, axis):
    """Convert ``axis`` and fall back on the default axis of ``data``."""
    axis = convert_axis(axis)
    if axis is None:
        return default_axis(data)
    return axis


def _member_axes(group, axis):
    """Get one axis per member of a linked group."""
    if isinstance(axis, tuple):
        if len(axis) != len(group):
            raise DimensionMismatchError(
                "Number of axis specifiers (%i) does not match the number "
                "of data containers (%i)." % (len(axis), len(group)))
        return axis
    return (axis,) * len(group)


def check_nobs(group, axis=None):
    """Check that all members of a linked group have the same size.

    Parameters
    ----------
    group : tuple
        linked group of containers.

    axis : Axis, tuple or None
        one axis for all members, or a tuple with one axis per member.

    Returns
    -------
    n : int
        the common number of observations (``0`` for an empty tuple).
    """
    if len(group) == 0:
        return 0

    counts = [nobs(d, a) for d, a in zip(group, _member_axes(group, axis))]
    if any(c != counts[0] for c in counts[1:]):
        raise DimensionMismatchError("All data containers must have the same "
                                     "number of observations. Got "
                                     "%r." % (counts,))
    return counts[0]


def _array_dim(data, axis):
    """Get the observation dimension of an array or sparse matrix."""
    if data.ndim == 0:
        raise CapabilityError("A 0-dimensional array has no observation "
                              "axis.")
    return resolve_axis(axis, data.ndim)


def _take_shape(shape, dim, idx):
    """Shape of ``numpy.take(array, idx, axis=dim)``."""
    if is_integer(idx):
        return shape[:dim] + shape[dim + 1:]
    return shape[:dim] + (len(idx),) + shape[dim + 1:]


###############################################################################
def nobs(data, axis=None):
    """Return the number of observations in ``data``.

    Parameters
    ----------
    data : container
        object satisfying the container protocol, or a tuple of such.

    axis : Axis, str, int, tuple or None
        observation axis. Defaults to :func:`default_axis` of ``data``.

    Returns
    -------
    n : int

    Examples
    --------
    >>> import numpy as np
    >>> from mlsubset import nobs
    >>> X = np.zeros((4, 10))
    >>> nobs(X), nobs(X, 'first')
    (10, 4)
    """
    axis = get_axis(data, axis)

    if isinstance(data, tuple):
        return check_nobs(data, axis)

    if isinstance(data, np.ndarray) or sp.issparse(data):
        return data.shape[_array_dim(data, axis)]

    if isinstance(data, (list, range)):
        return len(data)

    method = getattr(data, 'nobs', None)
    if method is None:
        raise CapabilityError("%r does not implement 'nobs'." %
                              type(data).__name__)
    return method(axis)


def getobs(data, idx=None, axis=None):
    """Return the observation(s) in ``data`` at ``idx``.

    An integer index returns a single observation; for arrays its shape is
    the array shape with the observation dimension removed. A sequence of
    indices returns a batch, with the observation dimension of length
    ``len(idx)``. The result is always materialized: arrays are copied.

    Parameters
    ----------
    data : container
        object satisfying the container protocol, or a tuple of such.

    idx : int, range, array-like of int or None
        0-based observation indices. ``None`` returns all observations.

    axis : Axis, str, int, tuple or None
        observation axis. Defaults to :func:`default_axis` of ``data``.

    Examples
    --------
    >>> import numpy as np
    >>> from mlsubset import getobs
    >>> X = np.arange(12).reshape(3, 4)
    >>> getobs(X, 1)
    array([1, 5, 9])
    >>> getobs(X, [0, 2], axis='first')
    array([[ 0,  1,  2,  3],
           [ 8,  9, 10, 11]])
    """
    axis = get_axis(data, axis)

    if isinstance(data, tuple):
        check_nobs(data, axis)
        return tuple(getobs(d, idx, a)
                     for d, a in zip(data, _member_axes(data, axis)))

    if isinstance(data, np.ndarray):
        if idx is None:
            return data.copy()
        dim = _array_dim(data, axis)
        idx = check_indices(idx, data.shape[dim])
        return np.take(data, idx, axis=dim)

    if sp.issparse(data):
        if idx is None:
            return data.copy()
        dim = _array_dim(data, axis)
        idx = check_indices(idx, data.shape[dim])
        data = data.tocsr() if dim == 0 else data.tocsc()
        if is_integer(idx):
            obs = data[[idx], :] if dim == 0 else data[:, [idx]]
            return obs.toarray().ravel()
        idx = np.asarray(idx)
        return data[idx, :] if dim == 0 else data[:, idx]

    if isinstance(data, (list, range)):
        if idx is None:
            return list(data)
        idx = check_indices(idx, len(data))
        if is_integer(idx):
            return data[idx]
        return [data[i] for i in idx]

    method = getattr(data, 'getobs', None)
    if method is None:
        raise CapabilityError("%r does not implement 'getobs'." %
                              type(data).__name__)
    if idx is not None:
        idx = check_indices(idx, nobs(data, axis))
    return method(idx, axis)


def getobs_into(buffer, data, idx=None, axis=None):
    """Write the observation(s) in ``data`` at ``idx`` into ``buffer``.

    If ``data`` does not support in-place extraction, ``buffer`` is left
    untouched and the result of :func:`getobs` is returned instead. Callers
    should always use the return value.

    Parameters
    ----------
    buffer : object
        preallocated result, typically from an earlier :func:`getobs` call
        with an index of the same length. Tuples of buffers match tuples of
        containers.

    data : container
        object satisfying the container protocol, or a tuple of such.

    idx : int, range, array-like of int or None
        0-based observation indices. ``None`` means all observations.

    axis : Axis, str, int, tuple or None
        observation axis. Defaults to :func:`default_axis` of ``data``.

    Returns
    -------
    out : object
        ``buffer`` if it was written into, a fresh result otherwise.

    Raises
    ------
    DimensionMismatchError :
        if ``buffer`` does not have the shape of the requested observations.
    """
    axis = get_axis(data, axis)

    if isinstance(data, tuple):
        if not isinstance(buffer, tuple) or len(buffer) != len(data):
            raise DimensionMismatchError(
                "A linked group needs a tuple buffer with one element per "
                "data container.")
        return tuple(getobs_into(b, d, idx, a) for b, d, a in
                     zip(buffer, data, _member_axes(data, axis)))

    if isinstance(data, np.ndarray):
        if not isinstance(buffer, np.ndarray):
            return getobs(data, idx, axis)
        dim = _array_dim(data, axis)
        if idx is None:
            idx = range(data.shape[dim])
        idx = check_indices(idx, data.shape[dim])

        shape = _take_shape(data.shape, dim, idx)
        if buffer.shape != shape:
            raise DimensionMismatchError("Buffer of shape %r cannot hold "
                                         "observations of shape "
                                         "%r." % (buffer.shape, shape))
        if buffer.dtype == data.dtype:
            np.take(data, idx, axis=dim, out=buffer)
        else:
            buffer[...] = np.take(data, idx, axis=dim)
        return buffer

    method = getattr(data, 'getobs_into', None)
    if method is None:
        return getobs(data, idx, axis)
    if idx is not None:
        idx = check_indices(idx, nobs(data, axis))
    return method(buffer, idx, axis)


def gettargets(data, idx, axis=None):
    """Return the target(s) of the observation(s) in ``data`` at ``idx``.

    Containers that define a ``gettargets`` method answer without
    materializing their observations. For all other containers the targets
    are the observations themselves, as returned by :func:`getobs`.

    Parameters
    ----------
    data : container
        object satisfying the container protocol, or a tuple of such.

    idx : int, range or array-like of int
        0-based observation indices.

    axis : Axis, str, int, tuple or None
        observation axis. Defaults to :func:`default_axis` of ``data``.
    """
    axis = get_axis(data, axis)

    if isinstance(data, tuple):
        check_nobs(data, axis)
        return tuple(gettargets(d, idx, a)
                     for d, a in zip(data, _member_axes(data, axis)))

    method = getattr(data, 'gettargets', None)
    if method is None:
        return getobs(data, idx, axis)
    idx = check_indices(idx, nobs(data, axis))
    return method(idx, axis)
