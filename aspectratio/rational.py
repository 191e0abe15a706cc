"""Exact rational numbers with best-approximation support and NumPy interoperability."""
from __future__ import annotations

import math
import numbers
import operator
from fractions import Fraction
from typing import Any, Tuple, Union

import numpy as np

from .errors import InvalidBound, NonIntegerOperand, ZeroDenominator

NumberLike = Union["Rational", Fraction, numbers.Real]


def gcd(a: int, b: int) -> int:
    """Greatest common divisor of ``|a|`` and ``|b|`` (Euclid, iterative)."""
    a, b = abs(a), abs(b)
    while b:
        a, b = b, a % b
    return a


def _ensure_int(value: Any, *, name: str) -> int:
    """Convert *value* to ``int`` when it represents an integer exactly."""
    if isinstance(value, bool):  # bool is a subclass of int; treat explicitly.
        raise NonIntegerOperand(f"{name} must be an integer, got {type(value)!r}")
    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, numbers.Rational):
        if value.denominator == 1:
            return int(value.numerator)
    elif isinstance(value, numbers.Real) and math.isfinite(value) and int(value) == value:
        return int(value)
    raise NonIntegerOperand(f"{name} must be an integer, got {value!r}")


class Rational:
    """An exact fraction kept in lowest terms with a positive denominator.

    ``normalize=False`` skips the sign fix-up and gcd reduction; callers
    passing it must already hold a canonical pair.
    """

    __slots__ = ("_numerator", "_denominator")
    __array_priority__ = 1000.0  # Prefer Rational semantics in NumPy expressions.

    def __init__(
        self,
        numerator: Union[int, numbers.Real] = 0,
        denominator: Union[int, numbers.Real] = 1,
        normalize: bool = True,
    ) -> None:
        num = _ensure_int(numerator, name="numerator")
        den = _ensure_int(denominator, name="denominator")
        if den == 0:
            raise ZeroDenominator("denominator must be non-zero")
        if normalize:
            num, den = self._normalize(num, den)
        self._numerator = num
        self._denominator = den

    # ------------------------------------------------------------------
    # Constructors
    @classmethod
    def from_fraction(cls, value: Fraction) -> "Rational":
        """Create a :class:`Rational` from :class:`fractions.Fraction`."""
        return cls(value.numerator, value.denominator, normalize=False)

    @classmethod
    def from_float(cls, value: float) -> "Rational":
        """Return the exact value of the binary float *value*."""
        if isinstance(value, bool):
            raise NonIntegerOperand("cannot convert bool to Rational")
        try:
            return cls.from_fraction(Fraction(value))
        except (ValueError, OverflowError) as exc:
            raise NonIntegerOperand(f"cannot convert {value!r} to Rational") from exc

    @classmethod
    def rationalize(cls, value: NumberLike) -> "Rational":
        """Coerce a numeric-like value into :class:`Rational`."""
        if isinstance(value, Rational):
            return value
        if isinstance(value, Fraction):
            return cls.from_fraction(value)
        if isinstance(value, bool):
            raise TypeError("Cannot convert bool to Rational")
        if isinstance(value, numbers.Integral):
            return cls(int(value), 1, normalize=False)
        if isinstance(value, np.generic):
            return cls.rationalize(value.item())
        if isinstance(value, numbers.Real):
            return cls.from_float(float(value))
        raise TypeError(f"Cannot convert {type(value)!r} to Rational")

    # ------------------------------------------------------------------
    # Properties and helpers
    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    def as_fraction(self) -> Fraction:
        """Return a :class:`Fraction` with the same value."""
        return Fraction(self._numerator, self._denominator)

    def to_number(self) -> float:
        return self._numerator / self._denominator

    def subtract(self, other: NumberLike) -> "Rational":
        """Exact difference ``self - other`` in lowest terms."""
        other = Rational.rationalize(other)
        return Rational(
            self._numerator * other._denominator - other._numerator * self._denominator,
            self._denominator * other._denominator,
        )

    def abs(self) -> "Rational":
        return Rational(abs(self._numerator), self._denominator, normalize=False)

    def compare_to(self, other: NumberLike) -> int:
        """Return -1, 0 or 1 as ``self`` is less than, equal to or greater than *other*."""
        other = Rational.rationalize(other)
        lhs = self._numerator * other._denominator
        rhs = other._numerator * self._denominator
        if lhs < rhs:
            return -1
        if lhs > rhs:
            return 1
        return 0

    def limit_denominator(self, max_denominator: int) -> "Rational":
        """Return the closest :class:`Rational` whose denominator is at most *max_denominator*.

        A rational number is a best upper or lower approximation of x if and
        only if it is a convergent or semiconvergent of the continued fraction
        of x. The expansion is walked until the next convergent would exceed
        the bound; the best semiconvergent on the far side (``bound1``) and the
        last convergent (``bound2``) are then compared exactly and the closer
        one wins. On a tie ``bound2`` is returned.

        >>> Rational(3141592653589793, 1000000000000000).limit_denominator(10)
        Rational(22, 7)
        """
        if (
            isinstance(max_denominator, bool)
            or not isinstance(max_denominator, numbers.Integral)
            or max_denominator < 1
        ):
            raise InvalidBound(f"max_denominator should be at least 1, got {max_denominator!r}")
        if self._denominator <= max_denominator:
            return self

        p0, q0, p1, q1 = 0, 1, 1, 0
        n, d = self._numerator, self._denominator
        while True:
            a = n // d
            q2 = q0 + a * q1
            if q2 > max_denominator:
                break
            p0, q0, p1, q1 = p1, q1, p0 + a * p1, q2
            n, d = d, n - a * d

        k = (max_denominator - q0) // q1
        bound1 = Rational(p0 + k * p1, q0 + k * q1)
        bound2 = Rational(p1, q1)
        if abs(bound2 - self).compare_to(abs(bound1 - self)) <= 0:
            return bound2
        return bound1

    # ------------------------------------------------------------------
    # Numeric protocol
    def __float__(self) -> float:
        return self.to_number()

    def __int__(self) -> int:  # pragma: no cover - trivial mapping
        return int(self._numerator // self._denominator)

    def __bool__(self) -> bool:
        return self._numerator != 0

    # ------------------------------------------------------------------
    # Representation
    def __repr__(self) -> str:
        return f"Rational({self._numerator}, {self._denominator})"

    def __str__(self) -> str:
        return f"{self._numerator}/{self._denominator}"

    def __format__(self, format_spec: str) -> str:
        if format_spec in ("", "r", "R"):
            return str(self)
        if format_spec == ":":
            return f"{self._numerator}:{self._denominator}"
        return format(float(self), format_spec)

    # ------------------------------------------------------------------
    # Internal helpers
    def _binary_operation(self, other: Any, op):
        if isinstance(other, np.ndarray):
            vectorised = np.vectorize(
                lambda x: op(self, Rational.rationalize(x)),
                otypes=[object],
            )
            return vectorised(other)
        try:
            other_rat = Rational.rationalize(other)
        except TypeError:
            return NotImplemented
        return op(self, other_rat)

    @staticmethod
    def _normalize(num: int, den: int) -> Tuple[int, int]:
        if den < 0:
            num, den = -num, -den
        divisor = gcd(num, den)
        return num // divisor, den // divisor

    # ------------------------------------------------------------------
    # Arithmetic operators
    def __add__(self, other: Any) -> Any:
        def _add(a: "Rational", b: "Rational") -> "Rational":
            return Rational(
                a._numerator * b._denominator + b._numerator * a._denominator,
                a._denominator * b._denominator,
            )

        return self._binary_operation(other, _add)

    def __radd__(self, other: Any) -> Any:
        return self.__add__(other)

    def __sub__(self, other: Any) -> Any:
        return self._binary_operation(other, Rational.subtract)

    def __rsub__(self, other: Any) -> Any:
        return self._binary_operation(other, lambda a, b: b.subtract(a))

    def __mul__(self, other: Any) -> Any:
        def _mul(a: "Rational", b: "Rational") -> "Rational":
            return Rational(
                a._numerator * b._numerator,
                a._denominator * b._denominator,
            )

        return self._binary_operation(other, _mul)

    def __rmul__(self, other: Any) -> Any:
        return self.__mul__(other)

    def __truediv__(self, other: Any) -> Any:
        def _truediv(a: "Rational", b: "Rational") -> "Rational":
            if b._numerator == 0:
                raise ZeroDenominator("division by zero")
            return Rational(
                a._numerator * b._denominator,
                a._denominator * b._numerator,
            )

        return self._binary_operation(other, _truediv)

    def __rtruediv__(self, other: Any) -> Any:
        return self._binary_operation(other, lambda a, b: b / a)

    def __neg__(self) -> "Rational":
        return Rational(-self._numerator, self._denominator, normalize=False)

    def __pos__(self) -> "Rational":  # pragma: no cover - trivial
        return self

    def __abs__(self) -> "Rational":
        return self.abs()

    # ------------------------------------------------------------------
    # Comparisons
    def _compare(self, other: Any, op) -> bool:
        return op(self.compare_to(other), 0)

    def __eq__(self, other: Any) -> bool:
        try:
            return self._compare(other, operator.eq)
        except TypeError:
            return NotImplemented

    def __lt__(self, other: Any) -> bool:
        return self._compare(other, operator.lt)

    def __le__(self, other: Any) -> bool:
        return self._compare(other, operator.le)

    def __gt__(self, other: Any) -> bool:  # pragma: no cover - mirrors __lt__
        return self._compare(other, operator.gt)

    def __ge__(self, other: Any) -> bool:  # pragma: no cover - mirrors __le__
        return self._compare(other, operator.ge)

    def __hash__(self) -> int:
        # Same hash as the equal int / Fraction.
        return hash(self.as_fraction())

    # ------------------------------------------------------------------
    # NumPy interoperability
    _UFUNC_DISPATCH = {
        np.add: operator.add,
        np.subtract: operator.sub,
        np.multiply: operator.mul,
        np.divide: operator.truediv,
        np.negative: operator.neg,
        np.absolute: operator.abs,
    }

    def __array_ufunc__(self, ufunc, method, *inputs, **kwargs):
        if method != "__call__":
            return NotImplemented
        if kwargs.get("out") is not None:
            raise NotImplementedError("`out` argument is not supported for Rational ufuncs")
        op = self._UFUNC_DISPATCH.get(ufunc)
        if op is None:
            return NotImplemented

        coerced = []
        has_array = False
        for value in inputs:
            if isinstance(value, np.ndarray):
                vectorised = np.vectorize(Rational.rationalize, otypes=[object])
                coerced.append(vectorised(value))
                has_array = True
            else:
                coerced.append(Rational.rationalize(value))
        if has_array:
            vectorised = np.vectorize(lambda *args: op(*args), otypes=[object])
            return vectorised(*coerced)
        return op(*coerced)


def rationalize(value: NumberLike) -> Rational:
    """Public helper to convert *value* into :class:`Rational`."""

    return Rational.rationalize(value)


__all__ = ["Rational", "rationalize", "gcd"]
