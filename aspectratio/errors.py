"""Exceptions raised by the aspect ratio engine."""


class DomainError(ValueError):
    """An operand or argument lies outside the domain of the operation."""


class NonIntegerOperand(DomainError, TypeError):
    """A numerator or denominator is not an exact integer."""


class ZeroDenominator(DomainError, ZeroDivisionError):
    """A fraction was constructed (or divided) with a zero denominator."""


class InvalidBound(DomainError):
    """``limit_denominator`` was given a bound smaller than one."""


__all__ = ["DomainError", "NonIntegerOperand", "ZeroDenominator", "InvalidBound"]
