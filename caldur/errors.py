class CaldurError(Exception):
    """Base class for errors raised by caldur."""


class ParsingError(CaldurError, ValueError):
    """Raised when a string is not a valid ISO 8601 duration."""

    def __init__(self, text: object, reason: str | None = None):
        self.text: object = text
        self.reason: str | None = reason
        message = f"Invalid ISO 8601 duration: {text!r}"
        if reason:
            message += f" {reason}"
        super().__init__(message)


class InvalidArgument(CaldurError, TypeError):
    """Raised when a duration is applied to something that is not a time or date."""


class DeprecatedUsageWarning(DeprecationWarning):
    """Advisory warning for implicit number coercion and scalar fallbacks."""
