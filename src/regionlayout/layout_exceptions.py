"""Region registry exceptions.

Every error raised while creating, adjusting, removing or reading regions
derives from ``RegionLayoutException``. The error code and context travel
with the exception so the registry can log a rejection with the same
fields the caller receives.
"""

from typing import Any


class RegionLayoutException(Exception):
    """Base exception for all regionlayout errors.

    Attributes:
        message: Human-readable error message
        error_code: Optional error code for programmatic handling
        context: Region ids, option names and other details of the failure
    """

    def __init__(
        self, message: str, error_code: str | None = None, context: dict[str, Any] | None = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.context = context or {}

    @property
    def region_id(self) -> str | None:
        """Region the failure concerns, if known."""
        return self.context.get("region_id")

    def log_fields(self) -> dict[str, Any]:
        """Key-value fields describing the failure for a structured log event."""
        return {"error_code": self.error_code, "error": self.message, **self.context}

    def __str__(self) -> str:
        if self.error_code:
            return f"[{self.error_code}] {self.message}"
        return self.message


class LayoutException(RegionLayoutException):
    """Base exception for region registry errors."""

    pass


class InvalidArgumentException(LayoutException):
    """Raised when region options are missing, duplicated or malformed."""

    def __init__(self, argument: str, reason: str, **kwargs) -> None:
        """Initialize with the offending argument."""
        super().__init__(
            f"Invalid argument '{argument}': {reason}",
            error_code="INVALID_ARGUMENT",
            context={"argument": argument, "reason": reason, **kwargs},
        )


class RegionNotFoundException(LayoutException):
    """Raised when a region id is not registered."""

    def __init__(self, region_id: str, **kwargs) -> None:
        """Initialize with region id."""
        super().__init__(
            f"Region '{region_id}' not found",
            error_code="REGION_NOT_FOUND",
            context={"region_id": region_id, **kwargs},
        )


class InvalidOperationException(LayoutException):
    """Raised when an operation is not permitted on a region."""

    def __init__(self, region_id: str, operation: str, reason: str | None = None, **kwargs) -> None:
        """Initialize with operation details."""
        message = f"Cannot {operation} region '{region_id}'"
        if reason:
            message += f": {reason}"

        super().__init__(
            message,
            error_code="INVALID_OPERATION",
            context={
                "region_id": region_id,
                "operation": operation,
                "reason": reason,
                **kwargs,
            },
        )
