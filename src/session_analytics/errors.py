"""Error types raised by the analytics layer."""


class AnalyticsError(Exception):
    """Base class for analytics failures."""


class NotFoundError(AnalyticsError):
    """A single-result operation found nothing."""

    def __init__(self, operation: str, message: str) -> None:
        super().__init__(message)
        self.operation = operation


class MappingError(AnalyticsError):
    """A query row could not be converted into its response shape."""

    def __init__(self, field: str, value: object, reason: str) -> None:
        super().__init__(f"Cannot map field {field!r} (value={value!r}): {reason}")
        self.field = field
        self.value = value
        self.reason = reason
