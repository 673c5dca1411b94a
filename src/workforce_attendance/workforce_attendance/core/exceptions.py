class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class ResourceNotFoundError(DomainError):
    """Raised when a referenced employee, worksite or shift does not exist."""


class InvariantViolationError(DomainError):
    """Raised on data or programming errors that retrying would reproduce."""


class TimeLogsValidationError(InvariantViolationError):
    """Raised when a TimeLogs collection is built from open, missing or overlapping logs."""


class TimeLogChronologyError(InvariantViolationError):
    """Raised when a log exits after the next log in the sequence enters."""


class ExtractionError(InvariantViolationError):
    """Raised when a segment extractor's preconditions are not met."""
