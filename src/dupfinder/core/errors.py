"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/errors.py
Exception hierarchy shared by the scanner, the scan command and the CLI.
"""


class DupfinderError(Exception):
    """Base class for all dupfinder errors."""


class ConfigurationError(DupfinderError):
    """Invalid scan parameters: missing root directory, path is not a directory, etc."""


class TraversalError(DupfinderError):
    """The directory walk itself failed (permission denied, I/O error)."""

    def __init__(self, path: str, cause: OSError):
        message = str(cause) if cause.filename else f"{cause} ({path})"
        super().__init__(message)
        self.path = path
        self.cause = cause
