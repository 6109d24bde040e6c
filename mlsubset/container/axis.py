"""ML-SUBSET

:author: Sebastian Flennerhag
:copyright: 2017-2018
:licence: MIT

Axis specifiers: which dimension of a container enumerates observations.
"""

from ..utils.checks import is_integer
from ..utils.exceptions import ArgumentError, BoundsError, CapabilityError


class Axis(object):

    """Base class of the axis specifiers.

    The set of specifiers is closed: :class:`FirstAxis`, :class:`LastAxis`,
    :class:`ConstantAxis` and :class:`Undefined`. Specifiers compare equal
    by kind, and :class:`ConstantAxis` additionally by its dimension.
    """

    __slots__ = ()

    def __eq__(self, other):
        return type(self) is type(other)

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash(type(self).__name__)

    def __repr__(self):
        return '%s()' % type(self).__name__


class _SingletonAxis(Axis):

    """Axis without parameters: one shared instance per class."""

    __slots__ = ()
    _instance = None

    def __new__(cls):
        if cls.__dict__.get('_instance') is None:
            cls._instance = super(_SingletonAxis, cls).__new__(cls)
        return cls._instance


class FirstAxis(_SingletonAxis):

    """Observations along the first dimension (rows of a matrix)."""

    __slots__ = ()


class LastAxis(_SingletonAxis):

    """Observations along the last dimension (columns of a matrix)."""

    __slots__ = ()


class Undefined(_SingletonAxis):

    """The container has no notion of an observation dimension."""

    __slots__ = ()


class ConstantAxis(Axis):

    """Observations along a fixed dimension ``k`` (0-based).

    Parameters
    ----------
    k : int
        dimension that enumerates observations. Must be non-negative.
    """

    __slots__ = ('k',)

    def __init__(self, k):
        if not is_integer(k) or k < 0:
            raise ArgumentError("ConstantAxis needs a non-negative integer "
                                "dimension. Got %r." % (k,))
        self.k = int(k)

    def __eq__(self, other):
        return type(self) is type(other) and self.k == other.k

    def __hash__(self):
        return hash((type(self).__name__, self.k))

    def __repr__(self):
        return 'ConstantAxis(%i)' % self.k


_ALIASES = {
    'first': FirstAxis,
    'f': FirstAxis,
    'begin': FirstAxis,
    'last': LastAxis,
    'l': LastAxis,
    'end': LastAxis,
    'undefined': Undefined,
    'none': Undefined,
}


def convert_axis(axis):
    """Convert a user supplied axis to an :class:`Axis` instance.

    Parameters
    ----------
    axis : Axis, str, int, tuple or None
        the axis specification. Strings are matched case insensitively
        against ``'first'``, ``'last'`` and ``'undefined'`` (and their short
        forms). A non-negative int ``k`` is a :class:`ConstantAxis`, ``-1``
        is :class:`LastAxis`. A tuple is converted element-wise and
        describes the members of a linked group. ``None`` is passed through
        and means "the container's default".

    Returns
    -------
    axis : Axis, tuple or None

    Examples
    --------
    >>> from mlsubset.container.axis import convert_axis
    >>> convert_axis('first')
    FirstAxis()
    >>> convert_axis(2)
    ConstantAxis(2)
    >>> convert_axis(('last', -1))
    (LastAxis(), LastAxis())
    """
    if axis is None or isinstance(axis, Axis):
        return axis

    if isinstance(axis, tuple):
        return tuple(convert_axis(a) for a in axis)

    if isinstance(axis, str):
        try:
            return _ALIASES[axis.lower()]()
        except KeyError:
            raise ArgumentError("Unknown axis name %r. Use one of "
                                "%r." % (axis, sorted(_ALIASES)))

    if is_integer(axis):
        if axis == -1:
            return LastAxis()
        return ConstantAxis(axis)

    raise ArgumentError("Cannot interpret %r as an observation axis." % (axis,))


def resolve_axis(axis, ndim):
    """Get the array dimension that ``axis`` points to.

    Parameters
    ----------
    axis : Axis
        resolved axis specifier (not ``None``).

    ndim : int
        number of dimensions of the array.

    Returns
    -------
    dim : int

    Raises
    ------
    CapabilityError :
        if ``axis`` is :class:`Undefined`.

    BoundsError :
        if a :class:`ConstantAxis` exceeds ``ndim``.
    """
    if isinstance(axis, FirstAxis):
        return 0
    if isinstance(axis, LastAxis):
        return ndim - 1
    if isinstance(axis, ConstantAxis):
        if axis.k >= ndim:
            raise BoundsError("Observation axis %i does not exist for an "
                              "array with %i dimension(s)." % (axis.k, ndim))
        return axis.k
    if isinstance(axis, Undefined):
        raise CapabilityError("The observation axis is undefined: specify "
                              "'first', 'last' or an integer dimension.")
    raise ArgumentError("Expected a resolved axis specifier. "
                        "Got %r." % (axis,))
