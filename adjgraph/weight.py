"""Weight value type used to annotate edges."""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from decimal import Decimal
from typing import Union

from .errors import NullArgumentError

Number = Union[numbers.Real, Decimal]


def is_weight_number(value: object) -> bool:
    """Return whether ``value`` is an ordered number usable as a weight.

    Real numbers and ``Decimal`` qualify; bool does not.
    """
    if isinstance(value, bool):
        return False
    return isinstance(value, (numbers.Real, Decimal))


@dataclass(frozen=True, order=True)
class Weight:
    """
    Immutable wrapper around an ordered number.

    Equality and ordering defer to the wrapped values and only hold between
    weights: ``Weight(5) < Weight(7.5)`` but ``Weight(5) != 5``.

    Attributes:
        value: Real or Decimal payload (bool is rejected).

    Raises:
        NullArgumentError: If value is None.
        TypeError: If value is not a real number or a Decimal.
    """

    value: Number

    def __post_init__(self) -> None:
        if self.value is None:
            raise NullArgumentError("weight value == None")
        if not is_weight_number(self.value):
            raise TypeError(f"weight value must be a real number or Decimal, got {type(self.value).__name__}")

    @classmethod
    def of(cls, value: Number) -> "Weight":
        """Build a weight wrapping ``value``."""
        return cls(value)

    def __float__(self) -> float:
        return float(self.value)

    def __repr__(self) -> str:
        return f"Weight({self.value!r})"
