"""Custom Exceptions for the AutoSubSync add-on."""

class AutoSubSyncError(Exception):
    """Base class for exceptions in this package.

    Every subclass carries the notification level and on-screen duration
    (seconds) used when the error is reported to the user.
    """
    level = "error"
    duration = 3

class ConfigurationError(AutoSubSyncError):
    """Exception raised for errors in configuration loading."""
    duration = 5

class FileSystemError(AutoSubSyncError):
    """Exception raised for file system related errors (permissions, not found etc)."""
    pass

class ToolNotFoundError(AutoSubSyncError):
    """Exception raised when an external executable is missing on disk."""
    duration = 5

class SubtitleNotFoundError(AutoSubSyncError):
    """Exception raised when the subtitle to retime does not exist."""
    pass

class InvocationFailedError(AutoSubSyncError):
    """Exception raised when an external process cannot be started at all."""
    level = "fatal"

class SyncFailedError(AutoSubSyncError):
    """Exception raised when the synchronization engine exits with an error."""
    pass

class ExtractionFailedError(AutoSubSyncError):
    """Exception raised when an internal subtitle stream cannot be extracted."""
    duration = 7

class TrackAddFailedError(AutoSubSyncError):
    """Exception raised when the player refuses the retimed subtitle."""
    pass
