"""
castle-ai Error Hierarchy

Unified exception hierarchy for consistent error handling across the package.
All custom exceptions inherit from CastleError for easy catching and filtering.

Move selection itself never raises for an empty or unmatched candidate set;
these errors cover configuration and snapshot construction.

Usage:
    from castle_ai.errors import ConfigurationError

    try:
        behavior = parse_behavior(name)
    except ConfigurationError as e:
        logger.warning(f"Bad behavior: {e.message}")
"""

from typing import Any

__all__ = [
    # Base error
    "CastleError",
    "ConfigurationError",
    "InvalidStateError",
    # Validation errors
    "ValidationError",
]


class CastleError(Exception):
    """Base exception for all castle-ai errors.

    Attributes:
        code: Machine-readable error code for categorization
        message: Human-readable error description
        context: Additional context for debugging
    """
    code: str = "CASTLE_ERROR"

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        if code:
            self.code = code
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            ctx = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"[{self.code}] {self.message} ({ctx})"
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "code": self.code,
            "message": self.message,
            "context": self.context,
        }


# =============================================================================
# Game State Errors
# =============================================================================


class InvalidStateError(CastleError):
    """Corrupted or unexpected game state.

    Raised when a snapshot is assembled from pieces that cannot exist on
    the configured board (e.g. a piece outside the grid).
    """
    code: str = "INVALID_STATE"


# =============================================================================
# Validation Errors
# =============================================================================


class ValidationError(CastleError):
    """Base class for validation errors."""
    code: str = "VALIDATION_ERROR"


class ConfigurationError(ValidationError):
    """Invalid selector configuration.

    Attributes:
        key: The configuration key or environment variable at fault
    """
    code: str = "CONFIGURATION_ERROR"

    def __init__(
        self,
        message: str,
        key: str | None = None,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(message, context=context)
        self.key = key
        if key:
            self.context["key"] = key
