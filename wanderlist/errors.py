"""Application exceptions."""


class WanderlistError(Exception):
    """Base class for application errors."""


class StoreError(WanderlistError):
    """A data-store call failed (lookup, insert or update)."""


class StoreUnavailableError(StoreError):
    """The data store could not be reached at startup."""


class LoginRequired(WanderlistError):
    """Raised when a protected route is requested without a session."""


class UnknownUserError(WanderlistError):
    """The session's user has no record in the store."""
