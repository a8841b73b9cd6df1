"""Widget-specific exceptions."""

from typing import Any, Optional


class WidgetError(Exception):
    """Base exception for all widget-related errors.

    Args:
        message: Human-readable error description
        details: Optional dictionary containing additional error context

    Example:
        >>> raise WidgetError("Rendering failed", {"widget": "calendar"})
    """

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class BadRequestError(WidgetError):
    """Exception raised when a widget is constructed from invalid input.

    Args:
        message: Human-readable description of the rejected input
        field_name: Name of the argument that failed validation
        field_value: The rejected value
        details: Additional context about the failure

    Example:
        >>> raise BadRequestError(
        ...     "Bad total items passed to PaginationControl",
        ...     field_name="total",
        ...     field_value=0,
        ... )
    """

    def __init__(
        self,
        message: str,
        field_name: Optional[str] = None,
        field_value: Any = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        self.field_name = field_name
        self.field_value = field_value
        super().__init__(message, details)
