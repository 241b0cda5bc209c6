"""Exceptions raised by the work registration package."""


class RegistrationError(Exception):
    """Base class for work registration errors."""


class UnauthorizedError(RegistrationError):
    """The caller is not allowed to change a work's metadata."""

    def __init__(self, caller: str, token_id: int):
        self.caller = caller
        self.token_id = token_id
        super().__init__(
            f"Caller {caller} is not authorized to change metadata of work {token_id}"
        )


class NonTransferableError(RegistrationError):
    """The work token does not allow ownership transfers."""


class InsufficientBalanceError(RegistrationError):
    """A token transfer exceeds the sender's balance."""


class EventLogError(RegistrationError):
    """The event log cannot be replayed into a consistent history."""
