class AJDError(ValueError):
    """Base error: the requested date does not exist or cannot be represented."""

class InvalidFieldError(AJDError):
    """Raised when a civil field (or year 0) is out of range."""

class ReformGapError(AJDError):
    """Raised for 1582-10-05 .. 1582-10-14, which never existed."""

class UnderflowError(AJDError):
    """Raised when a Julian Date would fall before JD 0."""

class HostRangeError(AJDError):
    """Raised when a value lies outside what datetime/date can hold (years 1..9999)."""
