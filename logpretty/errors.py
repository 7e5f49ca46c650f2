"""Exceptions raised by logpretty."""


class PrettyError(ValueError):
    """Base class for errors raised while pretty-printing log records."""


class NestingTooDeepError(PrettyError):
    """Raised when a record nests objects deeper than the configured limit."""


class PrettyConfigError(PrettyError):
    """Raised when pretty-printer options cannot be loaded."""
