"""Exceptions raised by CF-Lite for malformed input.

Sparse data is never an error: an absent user, an empty row or a missing
neighbor all degrade to an empty result. These exceptions cover caller bugs
only and are raised at the public entry points.
"""

from typing import Optional


class CFError(ValueError):
    """Base exception for CF-Lite input errors."""

    detail: str = "Invalid collaborative filtering input"

    def __init__(self, detail: Optional[str] = None):
        """Initialize exception.

        Args:
            detail: Error detail message
        """
        if detail:
            self.detail = detail
        super().__init__(self.detail)


class InvalidConfigError(CFError):
    """Error raised when a CFConfig or call parameter is invalid."""

    detail = "Invalid collaborative filtering configuration"


class UnknownStrategyError(InvalidConfigError):
    """Error raised when no strategy is registered for a method."""

    detail = "Unknown collaborative filtering method"

    def __init__(self, method: Optional[str] = None):
        """Initialize exception.

        Args:
            method: Method name that was requested
        """
        detail = f"Unknown collaborative filtering method: {method}" if method else self.detail
        super().__init__(detail)


class InvalidInteractionError(CFError):
    """Error raised when an interaction record is malformed."""

    detail = "Invalid interaction record"

    def __init__(self, reason: Optional[str] = None, index: Optional[int] = None):
        """Initialize exception.

        Args:
            reason: Why the record was rejected
            index: Position of the record in the input, if known
        """
        detail_parts = [self.detail]

        if index is not None:
            detail_parts.append(f"at position {index}")

        detail = " ".join(detail_parts)
        if reason:
            detail = f"{detail}: {reason}"

        super().__init__(detail)
