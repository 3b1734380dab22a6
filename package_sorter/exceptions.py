"""
Package Sorter — Custom Exception Hierarchy
=============================================

What:  Application-specific exceptions for invalid package input.
Why:   Callers (CLI, HTTP API) need to tell apart "the input is wrong" from
       "something broke", and to know which field was wrong.
How:   Each exception carries a human-readable message and a context dict.
       The API registers global handlers in main.py that turn these into
       structured JSON error responses; the CLI turns them into exit code 1.
Who:   Raised by the package builder (models/package.py).
When:  At construction time, before any Package value exists.

Exception Hierarchy:
    PackageSorterError (base)
    └── ValidationError              → 400 Bad Request / CLI exit 1
        ├── InvalidDimensionError    (width, height or length not a positive integer)
        └── InvalidMassError         (mass not a positive finite number)

Classification itself never raises: once a Package exists it is valid,
and every branch of the classifier is total over valid packages.
"""

import math
from typing import Any, Dict, Optional


def json_safe(value: Any) -> Any:
    # JSON has no NaN/Infinity literals
    if isinstance(value, float) and not math.isfinite(value):
        return str(value)
    if isinstance(value, dict):
        return {key: json_safe(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [json_safe(item) for item in value]
    return value


class PackageSorterError(Exception):
    """
    Base exception for all Package Sorter errors.

    Attributes:
        message:  User-facing error description (safe to return in API responses)
        context:  Structured details (field name, rejected value)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(PackageSorterError):
    """
    Raised when package input fails validation.

    HTTP:    400 Bad Request
    CLI:     exit status 1

    Example response:
        {
            "error": "validation_error",
            "message": "Invalid width: -5. Dimensions must be positive integers (cm).",
            "details": {"field": "width", "value": -5}
        }
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class InvalidDimensionError(ValidationError):
    """A width, height or length that is not a positive integer."""

    def __init__(self, field: str, value: Any):
        super().__init__(
            message=(
                f"Invalid {field}: {value!r}. "
                f"Dimensions must be positive integers (cm)."
            ),
            field=field,
            context={"value": json_safe(value)},
        )
        self.value = value


class InvalidMassError(ValidationError):
    """A mass that is zero, negative, NaN, infinite or not a number."""

    def __init__(self, value: Any, field: str = "mass"):
        super().__init__(
            message=(
                f"Invalid {field}: {value!r}. "
                f"Mass must be a positive, finite number (grams)."
            ),
            field=field,
            context={"value": json_safe(value)},
        )
        self.value = value
