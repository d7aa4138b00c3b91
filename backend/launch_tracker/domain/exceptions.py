"""Domain-specific exceptions — framework-independent."""


class LaunchValidationError(Exception):
    """Raised when a launch record or query parameter fails validation."""

    message = "Invalid launch data"

    def __init__(self, message: str | None = None):
        self.message = message or self.message
        super().__init__(self.message)


class MissingFieldsError(LaunchValidationError):
    """Raised when a submitted record lacks one or more required fields."""

    message = "Missing required fields"

    def __init__(self, fields: list[str] | None = None):
        self.fields = fields or []
        super().__init__()


class InvalidRegionError(LaunchValidationError):
    """Raised for a missing or unknown region code."""

    def __init__(self, value: object = None, valid: tuple[str, ...] = ("US", "EU", "CN", "JP")):
        self.value = value
        if value is None or value == "":
            message = "Region parameter is required"
        else:
            message = f"Invalid region. Must be one of: {', '.join(valid)}"
        super().__init__(message)


class InvalidDateError(LaunchValidationError):
    """Raised when a date string is not a real ``YYYY-MM-DD`` calendar day."""

    def __init__(self, field: str, value: object):
        self.field = field
        self.value = value
        super().__init__(f"Invalid date for {field}: '{value}' (expected YYYY-MM-DD)")
