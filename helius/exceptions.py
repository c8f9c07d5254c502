"""
Exception classes for the Helius SDK.
"""

from typing import Optional


class HeliusError(Exception):
    """Base exception for all Helius SDK errors."""
    pass


class OperationError(HeliusError):
    """Raised when a webhook operation fails.

    The message always reads ``error during <operation>: <cause>``.
    """

    kind = "unknown"

    def __init__(self, operation: str, cause: str):
        self.operation = operation
        self.cause = cause
        super().__init__(f"error during {operation}: {cause}")


class ServerError(OperationError):
    """Raised when the service answers with a non-success status."""

    kind = "server"

    def __init__(self, operation: str, cause: str, status: Optional[int] = None):
        self.status = status
        super().__init__(operation, cause)


class TransportError(OperationError):
    """Raised when the request fails before a usable response arrives."""

    kind = "transport"


class ValidationError(OperationError):
    """Raised when a local check rejects a write before it is sent."""

    kind = "validation"
