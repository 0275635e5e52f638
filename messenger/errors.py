"""Error types raised by the data layer and shown to the console user."""


class MessengerError(Exception):
    """Base class for failures the console reports and recovers from."""


class ValidationError(MessengerError):
    pass


class NotFoundError(MessengerError):
    pass


class ConflictError(MessengerError):
    pass


class PermissionDeniedError(MessengerError):
    pass


class ConnectionFailedError(MessengerError):
    """The database could not be opened. Fatal at start-up."""
