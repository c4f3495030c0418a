import math
from decimal import Decimal
from fractions import Fraction

import pytest

from flowgraph.measure import (
    DECIMAL,
    FLOAT,
    INT,
    FloatMeasure,
    Measure,
    measure_for,
    register_measure,
)


@pytest.mark.parametrize(
    "measure,finite",
    [
        (FLOAT, [-1e300, 0.0, 1e300]),
        (INT, [-(10**50), 0, 10**50]),
        (DECIMAL, [Decimal("-1e100"), Decimal(0), Decimal("1e100")]),
    ],
)
def test_infinity_is_order_maximal(measure, finite):
    for value in finite:
        assert value < measure.infinity()
        assert measure.is_finite(value)
    assert measure.is_infinite(measure.infinity())


@pytest.mark.parametrize("measure", [FLOAT, INT, DECIMAL])
def test_zero_is_additive_identity(measure):
    assert measure.add(measure.zero(), 7) == 7
    assert measure.add(measure.zero(), measure.zero()) == measure.zero()


def test_adding_to_infinity_stays_infinite():
    assert FLOAT.is_infinite(FLOAT.add(FLOAT.infinity(), 3.0))
    assert INT.is_infinite(INT.add(INT.infinity(), 3))


def test_measure_for_types_and_values():
    assert measure_for(float) is FLOAT
    assert measure_for(3) is INT
    assert measure_for(Decimal("1.5")) is DECIMAL
    # bool resolves through its int base class
    assert measure_for(True) is INT


def test_measure_for_unregistered_type_raises():
    with pytest.raises(TypeError, match="No Measure registered"):
        measure_for("text")


def test_register_custom_measure():
    class FractionMeasure(Measure):
        def zero(self):
            return Fraction(0)

        def infinity(self):
            return math.inf

    custom = FractionMeasure()
    register_measure(Fraction, custom)
    assert measure_for(Fraction(1, 3)) is custom
    assert Fraction(10**9, 1) < custom.infinity()


def test_register_rejects_non_measure():
    with pytest.raises(TypeError):
        register_measure(complex, object())


def test_measure_repr():
    assert repr(FloatMeasure()) == "FloatMeasure()"
