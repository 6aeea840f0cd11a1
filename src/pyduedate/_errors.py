"""Exception hierarchy for due-date calculation."""


class DueDateError(Exception):
    """Base exception for due-date calculation errors.

    ``str(err)`` is a fixed message that says which parameter was rejected
    and which calendar applies, safe to show to whoever submitted the task.
    ``internal()`` names the rejected value itself (the submit instant in
    ISO form and epoch msecs, or the turnaround as passed in) for the
    caller to log.
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


class InvalidSubmitDateError(DueDateError):
    """Raised when the submit date is not on a working day in a working hour."""


class InvalidTurnaroundError(DueDateError):
    """Raised when the turnaround time is negative or not finite."""


ERR_MSG_INVALID_SUBMIT_DATE = (
    "Invalid submitTimestamp parameter. "
    "Submit date should be a working day (Mon to Fri, 9:00 to 17:00)"
)
ERR_MSG_INVALID_TURNAROUND = (
    "Invalid turnaroundTime parameter. "
    "Turnaround time should be a finite, non-negative number of working hours"
)
