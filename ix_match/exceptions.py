"""
Custom exception hierarchy for ix-match.

Every error is fatal to the run: the core raises, the CLI reports and exits.
"""


class IxMatchError(Exception):
    """Base exception for all ix-match errors."""
    pass


class InputError(IxMatchError):
    """Raised when a required source directory is missing or cannot be located."""
    pass


class ParseError(IxMatchError):
    """Raised when a file stem does not start with a YYMMDD_HHMMSSmmm timestamp."""
    pass


class FileReadError(IxMatchError):
    """Raised when the size of a capture file cannot be read."""
    pass


class FileOperationError(IxMatchError):
    """Raised when moving a file to its destination fails."""
    pass
