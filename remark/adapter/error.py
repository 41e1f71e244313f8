"""Adapter layer errors."""


class AdapterError(Exception):
    """Base adapter error."""

    pass


class NotifierError(AdapterError):
    """Notification service rejected or failed a delivery."""

    pass


class AuthProviderError(AdapterError):
    """Auth service could not be reached or answered garbage."""

    pass
