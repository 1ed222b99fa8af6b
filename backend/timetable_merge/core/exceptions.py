class AppError(Exception):
    """Base class for all timetable merge exceptions."""
    def __init__(self, message: str, details: dict = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

class ConfigurationError(AppError):
    """Raised when the configured weekly grid is invalid."""
    def __init__(self, message: str, details: dict = None):
        super().__init__(message, details=details)

class InvalidSlotKeyError(AppError):
    """Raised when a slot key cannot be parsed against the grid."""
    def __init__(self, key: str, reason: str):
        super().__init__(f"Invalid slot key {key!r}: {reason}", details={"key": key, "reason": reason})
        self.key = key
