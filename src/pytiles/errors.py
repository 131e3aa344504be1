"""Error handling utilities for pytiles.

Provides exception classes and validation helpers used to reject
malformed input before any layout or animation state is touched.
"""

import math
from numbers import Integral

import numpy as np


class PytilesError(Exception):
    """Base exception for pytiles errors."""

    pass


class LayoutError(PytilesError):
    """Exception raised when layout calculation fails."""

    def __init__(self, reason: str) -> None:
        """Initialize layout error.

        Args:
            reason: Reason for failure
        """
        self.reason = reason
        super().__init__(f"Layout calculation failed: {reason}")


class ValidationError(PytilesError):
    """Exception raised when input validation fails."""

    def __init__(self, field: str, value: object, expected: str) -> None:
        """Initialize validation error.

        Args:
            field: Field name that failed validation
            value: Invalid value
            expected: Expected type/description
        """
        self.field = field
        self.value = value
        self.expected = expected
        super().__init__(f"Validation failed for '{field}': expected {expected}, got {value!r}")


class UnknownArrangementError(ValidationError):
    """Exception raised when an arrangement name is not recognised."""

    def __init__(self, value: object, known: list[str]) -> None:
        """Initialize unknown arrangement error.

        Args:
            value: The rejected arrangement name
            known: Names of the valid arrangements
        """
        self.known = known
        super().__init__("arrangement", value, f"one of {', '.join(known)}")


def validate_count(value: object, name: str = "count") -> int:
    """Validate an item count.

    Args:
        value: Value to validate
        name: Name of the value for error messages

    Returns:
        The count as a plain int

    Raises:
        ValidationError: If value is not a non-negative integer
    """
    # bool is an Integral subclass but never a meaningful count
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise ValidationError(name, value, "non-negative integer")
    if value < 0:
        raise ValidationError(name, value, "non-negative integer")
    return int(value)


def validate_positive(value: object, name: str = "value", allow_zero: bool = False) -> float:
    """Validate that a value is a finite positive number.

    Args:
        value: Value to validate
        name: Name of the value for error messages
        allow_zero: Whether zero is accepted

    Returns:
        The value as a float

    Raises:
        ValidationError: If value is not finite or out of range
    """
    try:
        number = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        raise ValidationError(name, value, "finite number") from None

    if not math.isfinite(number):
        raise ValidationError(name, value, "finite number")
    if number < 0 or (number == 0 and not allow_zero):
        expected = "non-negative number" if allow_zero else "positive number"
        raise ValidationError(name, value, expected)
    return number


def validate_finite_array(value: object, name: str = "positions") -> np.ndarray:
    """Validate an array of 3D vectors.

    Args:
        value: Array-like of shape (k, 3)
        name: Name of the value for error messages

    Returns:
        A float64 copy of the array

    Raises:
        ValidationError: If the shape is wrong or any component is NaN/inf
    """
    try:
        array = np.array(value, dtype=np.float64)
    except (TypeError, ValueError):
        raise ValidationError(name, value, "array of 3D vectors") from None

    # An empty sequence is the only shapeless input accepted as "no vectors"
    if array.ndim == 1 and array.size == 0:
        return array.reshape(0, 3)
    if array.ndim != 2 or array.shape[1] != 3:
        raise ValidationError(name, array.shape, "shape (k, 3)")
    if not np.isfinite(array).all():
        raise ValidationError(name, "non-finite component", "finite coordinates")
    return array
