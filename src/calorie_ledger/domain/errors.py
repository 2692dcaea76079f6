"""Errors raised by ledger operations."""


class LedgerError(Exception):
    """Base class for ledger failures with a user-facing message."""

    message = "Something went wrong."

    def __init__(self, detail: str | None = None) -> None:
        super().__init__(detail or self.message)
        self.detail = detail or self.message


class ValidationError(LedgerError):
    """An entry was missing a field or had an invalid value."""

    message = "Please fill all fields!"


class EmptyLedgerError(LedgerError):
    """Undo was requested with nothing logged today."""

    message = "No food to remove today."


class ConfirmationRequiredError(LedgerError):
    """A destructive action was requested without confirmation."""

    message = "Reset requires confirmation."


class StorageReadError(LedgerError):
    """Persisted ledger state could not be decoded."""

    message = "Stored calorie data is unreadable."
