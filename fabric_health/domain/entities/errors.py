"""
Domain Errors

This module defines the error hierarchy raised by the health model layer.
"""

from typing import Any, Dict, List, Optional


class DomainError(Exception):
    """Base class for domain errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class InvalidEnumValueError(DomainError, ValueError):
    """Raised when a value outside an enumeration's token table is serialized."""

    def __init__(self, enum_name: str, value: Any):
        message = f"Invalid value {value} for enum type {enum_name}"
        super().__init__(message, {"enum_name": enum_name, "value": value})
        self.enum_name = enum_name
        self.value = value


class WireFormatError(DomainError):
    """Raised when a wire payload cannot be decoded into a health model."""

    def __init__(self, message: str, errors: Optional[List[Any]] = None):
        super().__init__(message, {"errors": errors or []})


class InvalidFilterError(DomainError, TypeError):
    """Raised when a filter tree holds something other than the expected filter type."""

    def __init__(self, expected: str, value: Any):
        message = f"Expected {expected}, got {type(value).__name__}: {value!r}"
        super().__init__(message, {"expected": expected, "value": value})
        self.expected = expected
        self.value = value
