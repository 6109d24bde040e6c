"""ML-SUBSET

:author: Sebastian Flennerhag
:copyright: 2017-2018
:licence: MIT
"""
import pytest

from mlsubset.container.axis import (FirstAxis, LastAxis, ConstantAxis,
                                     Undefined, convert_axis, resolve_axis)
from mlsubset.utils.exceptions import (ArgumentError, BoundsError,
                                       CapabilityError)


def test_singletons():
    """[Axis] singletons: one instance per parameterless axis."""
    assert FirstAxis() is FirstAxis()
    assert LastAxis() is LastAxis()
    assert Undefined() is Undefined()
    assert FirstAxis() != LastAxis()


def test_constant_axis_equality():
    """[Axis] ConstantAxis: equal and hashable by dimension."""
    assert ConstantAxis(1) == ConstantAxis(1)
    assert ConstantAxis(1) != ConstantAxis(2)
    assert len({ConstantAxis(1), ConstantAxis(1), FirstAxis()}) == 2


def test_constant_axis_raises():
    """[Axis] ConstantAxis: negative dimension raises."""
    with pytest.raises(ArgumentError):
        ConstantAxis(-2)


@pytest.mark.parametrize('value,expected', [
    ('first', FirstAxis()),
    ('F', FirstAxis()),
    ('begin', FirstAxis()),
    ('last', LastAxis()),
    ('end', LastAxis()),
    ('undefined', Undefined()),
    (-1, LastAxis()),
    (2, ConstantAxis(2)),
    (None, None),
])
def test_convert_axis(value, expected):
    """[Axis] convert_axis: maps names and ints to specifiers."""
    assert convert_axis(value) == expected


def test_convert_axis_tuple():
    """[Axis] convert_axis: converts tuples element-wise."""
    assert convert_axis(('first', 1)) == (FirstAxis(), ConstantAxis(1))


def test_convert_axis_raises():
    """[Axis] convert_axis: unknown values raise ArgumentError."""
    with pytest.raises(ArgumentError):
        convert_axis('diagonal')
    with pytest.raises(ArgumentError):
        convert_axis(1.5)


def test_resolve_axis():
    """[Axis] resolve_axis: maps specifiers to array dimensions."""
    assert resolve_axis(FirstAxis(), 3) == 0
    assert resolve_axis(LastAxis(), 3) == 2
    assert resolve_axis(ConstantAxis(1), 3) == 1

    with pytest.raises(BoundsError):
        resolve_axis(ConstantAxis(3), 3)
    with pytest.raises(CapabilityError):
        resolve_axis(Undefined(), 3)
