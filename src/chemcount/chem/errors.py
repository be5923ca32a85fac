from __future__ import annotations


class FormulaError(ValueError):
    """Base class for every rejected formula."""

    def __init__(self, message: str, formula: str | None = None, position: int | None = None) -> None:
        super().__init__(message)
        self.formula = formula
        self.position = position


class MalformedFormula(FormulaError):
    """The text does not follow the formula grammar."""


class UnbalancedBrackets(FormulaError):
    """A closing bracket has no opening partner, or a group is never closed."""
