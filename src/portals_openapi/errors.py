"""Exception hierarchy for portals-openapi.

Every fatal error raised during a build derives from :class:`BuildError`
and carries the process exit code the CLI should use. Record-level and
parameter-level problems are never raised; they are logged as warnings.
"""


class BuildError(Exception):
    """Base exception for all fatal build errors."""

    exit_code: int = 1

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class SourceParseError(BuildError):
    """Raised when the source document is not well-formed or has the wrong shape."""

    exit_code = 2


class CorrelationError(BuildError):
    """Raised when child records cannot be attributed to a declared parent."""

    exit_code = 3


class FormatterError(BuildError):
    """Raised when the external JSON formatter is missing or fails."""

    exit_code = 4


class ConfigError(BuildError):
    """Raised for unreadable or invalid configuration files."""

    exit_code = 5
