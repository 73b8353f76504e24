"""Exception types for ICal Blocker."""


class IcalBlockerError(Exception):
    """Base class for all ICal Blocker errors."""


class InvalidEventsParameterError(IcalBlockerError):
    """Raised when the "events" request parameter cannot be used.

    Covers both malformed JSON and JSON values that are not arrays.
    The message is safe to return to the caller as-is.
    """

    def __init__(self, message: str, raw_value: str = ""):
        super().__init__(message)
        self.message = message
        self.raw_value = raw_value
