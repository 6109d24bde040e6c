"""ML-SUBSET

Exception handling classes.
"""


class CapabilityError(TypeError):

    """Error class for a container that lacks a required capability.

    Raised when an operation needs an observation axis but the axis
    resolves to :class:`Undefined`, or when a container does not implement
    a protocol method (``nobs``, ``getobs``) that the operation calls.
    """


class BoundsError(IndexError):

    """Error class for indices outside the observation range.

    Raised eagerly when a subset, view or fold assignment is constructed
    with an index outside ``[0, n)``. Also raised when a constant axis
    points beyond the dimensions of an array.
    """


class DimensionMismatchError(ValueError):

    """Error class for containers that disagree on their dimensions.

    Raised if the members of a linked group report different numbers of
    observations, if train and validation index lists differ in length, or
    if a buffer does not have the shape of the data written into it.
    """


class ArgumentError(ValueError):

    """Error class for invalid arguments.

    Raised for invalid fractions, batch sizes or counts, number of folds,
    leave-out sizes, window settings, axis specifications and random
    states. Always raised before any index computation takes place.
    """


class NotFittedError(ValueError, AttributeError):

    """Error class for an indexer that is not fitted yet

    Raised when some method has been called that expects the instance to be
    fitted.
    """


###############################################################################
class UnusedObservationsWarning(UserWarning):

    """Warning to notify that observations are left out of a partitioning.

    Raised when the requested batch size or count does not divide the number
    of observations, so trailing observations are never visited. Not
    fatal: the partitioning proceeds on the observations that fit.
    """


class ViewNestingWarning(UserWarning):

    """Warning used to notify that a view was wrapped in another view.

    Nesting views is not supported; the parent container of the inner view
    is used instead.
    """
