"""Exception hierarchy for time value operations."""


class TimeError(Exception):
    """Base exception for time value errors.

    Provides dual messaging: a sanitized user-facing message and
    internal details (such as the offending value) for logging.
    """

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
    ) -> None:
        super().__init__(user_message)
        self.user_message = user_message
        self.internal_details = internal_details or user_message
        self.wrapped = wrapped

    def internal(self) -> str:
        return self.internal_details


class InvalidTimeError(TimeError):
    """Raised when a time value cannot be normalized or represented."""


class NegativeTimeError(InvalidTimeError):
    """Raised when a negative time is given where only non-negative times are allowed."""


# Sanitized user-facing error message constants
ERR_MSG_INVALID_TIME = "invalid time"
ERR_MSG_NEGATIVE_TIME = "invalid negative time"
ERR_MSG_INVALID_NANOSECONDS = "invalid nanosecond value"
ERR_MSG_OUT_OF_RANGE = "time out of representable range"
ERR_MSG_NOT_A_TIME = "object is not a time"
