"""Error kinds raised by the habit services and mapped to HTTP statuses by the API."""


class HabitTrackerError(Exception):
    status_code = 500
    message = "internal server error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)
        if message:
            self.message = message


class ValidationError(HabitTrackerError):
    status_code = 400
    message = "invalid request"


class NotFound(HabitTrackerError):
    status_code = 404
    message = "habit not found"


class AlreadyCompleted(HabitTrackerError):
    status_code = 409
    message = "habit already completed for this date"


class CompletionNotFound(HabitTrackerError):
    status_code = 404
    message = "completion not found for this date"


class StoreError(HabitTrackerError):
    """Persistence failure. The message is logged, never returned to the client."""

    status_code = 500
