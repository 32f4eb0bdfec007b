"""
Custom exceptions for the FAQ search service domain.

These exceptions represent domain-level errors and are independent
of infrastructure concerns (HTTP, storage, etc.).
"""

from typing import Any, Optional


class FAQServiceException(Exception):
    """Base exception for all FAQ service errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class FAQNotFoundException(FAQServiceException):
    """Raised when an FAQ cannot be found in the store."""

    def __init__(self, faq_id: str):
        super().__init__(message=f"FAQ not found: {faq_id}", details={"faq_id": faq_id})


class ValidationException(FAQServiceException):
    """Raised when input validation fails."""

    def __init__(self, field: str, value: Any, reason: str):
        message = f"Validation failed for {field}: {reason}"
        super().__init__(
            message=message,
            details={"field": field, "value": str(value), "reason": reason},
        )


class DataIntegrityException(FAQServiceException):
    """Raised when a stored FAQ payload is malformed."""

    def __init__(self, entity: str, reason: str):
        message = f"Data integrity error for {entity}: {reason}"
        super().__init__(message=message, details={"entity": entity, "reason": reason})
