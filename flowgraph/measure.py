"""Numeric contract for edge weights and accumulated distances.

A Measure supplies the additive identity (``zero``), an unreachable-distance
sentinel (``infinity``) and addition for one family of numeric values. The
values themselves must be totally ordered with Python's comparison operators.

``infinity()`` must compare greater than every finite value of the family.
Shortest-path and flow results are silently wrong if it does not.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Any, Dict, Type, Union


class Measure(ABC):
    """Capability interface for a totally ordered numeric value family."""

    @abstractmethod
    def zero(self) -> Any:
        """Return the additive identity (starting distance)."""
        raise NotImplementedError

    @abstractmethod
    def infinity(self) -> Any:
        """Return the unreachable sentinel; must be order-maximal."""
        raise NotImplementedError

    def add(self, a: Any, b: Any) -> Any:
        return a + b

    def is_infinite(self, value: Any) -> bool:
        return value == self.infinity()

    def is_finite(self, value: Any) -> bool:
        return not self.is_infinite(value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class FloatMeasure(Measure):
    def zero(self) -> float:
        return 0.0

    def infinity(self) -> float:
        return math.inf

    def is_infinite(self, value: Any) -> bool:
        return math.isinf(value)


class IntMeasure(Measure):
    """Integer weights; infinity is ``math.inf``, which exceeds every int."""

    def zero(self) -> int:
        return 0

    def infinity(self) -> float:
        return math.inf


class DecimalMeasure(Measure):
    def zero(self) -> Decimal:
        return Decimal(0)

    def infinity(self) -> Decimal:
        return Decimal("Infinity")

    def is_infinite(self, value: Any) -> bool:
        return Decimal(value).is_infinite()


FLOAT = FloatMeasure()
INT = IntMeasure()
DECIMAL = DecimalMeasure()

_REGISTRY: Dict[type, Measure] = {
    float: FLOAT,
    int: INT,
    Decimal: DECIMAL,
}


def register_measure(value_type: type, measure: Measure) -> None:
    """Register (or replace) the Measure used for ``value_type``.

    Args:
        value_type: Numeric type the measure applies to.
        measure: Measure instance.

    Raises:
        TypeError: If ``measure`` is not a Measure.
    """
    if not isinstance(measure, Measure):
        raise TypeError(f"Expected a Measure instance, got {type(measure).__name__}")
    _REGISTRY[value_type] = measure


def measure_for(type_or_value: Union[Type[Any], Any]) -> Measure:
    """Look up the Measure for a numeric type or for the type of a value.

    Subclasses resolve through their MRO, so ``bool`` and numpy scalar types
    that subclass ``int``/``float`` find the base measure.

    Raises:
        TypeError: If no Measure is registered for the type.
    """
    value_type = type_or_value if isinstance(type_or_value, type) else type(type_or_value)
    for klass in value_type.__mro__:
        if klass in _REGISTRY:
            return _REGISTRY[klass]
    raise TypeError(f"No Measure registered for type '{value_type.__name__}'")
