"""Domain errors surfaced to API clients."""


class InvalidInputError(ValueError):
    """Raised when user input fails validation.

    The message is user-facing and is returned verbatim as the alert text.
    """


class NotFoundError(LookupError):
    """Raised when a referenced row does not exist or is not visible."""


class InvalidTransitionError(RuntimeError):
    """Raised when a drawer step is attempted from the wrong drawer."""
