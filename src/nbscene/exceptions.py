"""Custom exceptions for nbscene."""


class NbSceneError(Exception):
    """Base exception for all nbscene errors."""
    pass


class InvalidArgumentError(NbSceneError, ValueError):
    """Raised when a required argument is missing or has the wrong shape."""
    pass


class UnknownDisplayModeError(NbSceneError):
    """Raised when the configured display mode is not a known DisplayMode."""
    pass
