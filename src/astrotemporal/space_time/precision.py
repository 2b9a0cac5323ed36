"""Numeric configuration shared by the float and high-precision code paths.

The Meeus algorithm is written once against :class:`NumericOps` and run with
either :class:`FloatOps` or :class:`DecimalOps`. Every literal the algorithm
needs is converted once, at import time, into a :class:`MeeusConstants` table
for each numeric type.
"""

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import ROUND_DOWN, ROUND_HALF_UP, Context, Decimal
from typing import Generic, NamedTuple, TypeVar, Union

N = TypeVar("N", float, Decimal)
Number = Union[float, Decimal]


@dataclass(frozen=True)
class PrecisionPolicy:
    """Rounding and scale settings for ``Decimal`` computations.

    Attributes:
        digits: Significant digits kept by every operation
        decimal_time_rounding: Rounding mode for decimal time quotients
        julian_day_rounding: Rounding mode for the Julian day arithmetic
    """

    digits: int = 20
    decimal_time_rounding: str = ROUND_HALF_UP
    julian_day_rounding: str = ROUND_DOWN

    @property
    def decimal_time_context(self) -> Context:
        return Context(prec=self.digits, rounding=self.decimal_time_rounding)

    @property
    def julian_day_context(self) -> Context:
        return Context(prec=self.digits, rounding=self.julian_day_rounding)


DEFAULT_POLICY = PrecisionPolicy()


class MeeusConstants(NamedTuple):
    half: Number
    one: Number
    two: Number
    four: Number
    c100: Number
    c122_1: Number
    c365_25: Number
    c1524: Number
    c1524_5: Number
    c4716: Number
    c30_6001: Number
    c36524_25: Number
    c1867216_25: Number
    c2299161: Number


_LITERALS = {
    "half": "0.5",
    "one": "1",
    "two": "2",
    "four": "4",
    "c100": "100",
    "c122_1": "122.1",
    "c365_25": "365.25",
    "c1524": "1524",
    "c1524_5": "1524.5",
    "c4716": "4716",
    "c30_6001": "30.6001",
    "c36524_25": "36524.25",
    "c1867216_25": "1867216.25",
    "c2299161": "2299161",
}

FLOAT_CONSTANTS = MeeusConstants(**{k: float(v) for k, v in _LITERALS.items()})
DECIMAL_CONSTANTS = MeeusConstants(**{k: Decimal(v) for k, v in _LITERALS.items()})


class NumericOps(ABC, Generic[N]):
    """Arithmetic primitives the Meeus algorithm is written against."""

    constants: MeeusConstants

    @abstractmethod
    def number(self, value: int) -> N:
        """Convert an integer into the numeric type."""
        pass

    @abstractmethod
    def add(self, a: N, b: N) -> N:
        pass

    @abstractmethod
    def sub(self, a: N, b: N) -> N:
        pass

    @abstractmethod
    def mul(self, a: N, b: N) -> N:
        pass

    @abstractmethod
    def floor(self, a: N) -> N:
        """Reduce a value to an integral value of the same type."""
        pass

    @abstractmethod
    def div_integral(self, a: N, b: N) -> N:
        """Integral part of the quotient a / b."""
        pass


class FloatOps(NumericOps[float]):
    """IEEE double arithmetic, with ``math.floor`` for integral steps."""

    constants = FLOAT_CONSTANTS

    def number(self, value: int) -> float:
        return float(value)

    def add(self, a: float, b: float) -> float:
        return a + b

    def sub(self, a: float, b: float) -> float:
        return a - b

    def mul(self, a: float, b: float) -> float:
        return a * b

    def floor(self, a: float) -> float:
        return float(math.floor(a))

    def div_integral(self, a: float, b: float) -> float:
        return float(math.floor(a / b))


class DecimalOps(NumericOps[Decimal]):
    """``Decimal`` arithmetic in the policy's Julian day context.

    Integral steps truncate toward zero rather than flooring.
    """

    constants = DECIMAL_CONSTANTS

    def __init__(self, policy: PrecisionPolicy = DEFAULT_POLICY) -> None:
        self._context = policy.julian_day_context

    def number(self, value: int) -> Decimal:
        return Decimal(value)

    def add(self, a: Decimal, b: Decimal) -> Decimal:
        return self._context.add(a, b)

    def sub(self, a: Decimal, b: Decimal) -> Decimal:
        return self._context.subtract(a, b)

    def mul(self, a: Decimal, b: Decimal) -> Decimal:
        return self._context.multiply(a, b)

    def floor(self, a: Decimal) -> Decimal:
        return a.to_integral_value(rounding=ROUND_DOWN, context=self._context)

    def div_integral(self, a: Decimal, b: Decimal) -> Decimal:
        return self._context.divide_int(a, b)


FLOAT_OPS = FloatOps()
