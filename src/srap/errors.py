"""Exceptions raised by srap."""


class SrapError(Exception):
    """Base class for fatal srap errors."""


class UsageError(SrapError):
    """Bad or missing flag argument."""


class EnvironmentLookupError(SrapError):
    """A required environment variable is not set."""


class UnsupportedShellError(SrapError):
    """The login shell has no known config file."""


class AppendError(SrapError):
    """Reading or writing a config file failed."""
