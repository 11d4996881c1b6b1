# File: familialdisease/errors.py
# Location: familialdisease/familialdisease/errors.py
"""
Exception classes for familialdisease.

Two failure kinds are raised:
- InputValidationError: arguments rejected before any computation starts
- ConvergenceError: the bounded optimizer in the penetrance estimator did not
  reach its tolerance within the iteration budget

Degenerate segregation models (zero familial likelihood) are not errors; they
produce NaN fields on FamilialDiseaseResult instead.
"""

from typing import Dict, Optional


class FamilialDiseaseError(Exception):
    """Base exception for all familialdisease errors."""

    def __init__(self, message: str, details: Optional[Dict] = None):
        """Initialize familialdisease error.

        Parameters
        ----------
        message : str
            Error message
        details : dict, optional
            Additional error details
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InputValidationError(FamilialDiseaseError, ValueError):
    """Raised when counts, thresholds or probabilities are invalid."""

    def __init__(self, message: str, field: str):
        """Initialize input validation error."""
        super().__init__(message, {"field": field})
        self.field = field

    def __reduce__(self):
        """Custom pickling to handle multiprocessing correctly."""
        return (self.__class__, (self.message, self.field))


class ConvergenceError(FamilialDiseaseError):
    """Raised when the likelihood maximisation does not converge."""

    def __init__(
        self,
        message: str,
        iterations: Optional[int] = None,
        last_iterate: Optional[float] = None,
        optimizer_message: Optional[str] = None,
    ):
        """Initialize convergence error."""
        super().__init__(
            message,
            {
                "iterations": iterations,
                "last_iterate": last_iterate,
                "optimizer_message": optimizer_message,
            },
        )
        self.iterations = iterations
        self.last_iterate = last_iterate

    def __reduce__(self):
        """Custom pickling to handle multiprocessing correctly."""
        return (
            self.__class__,
            (
                self.message,
                self.iterations,
                self.last_iterate,
                self.details.get("optimizer_message"),
            ),
        )
