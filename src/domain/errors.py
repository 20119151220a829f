"""Domain errors for the expense ledger."""


class LedgerError(Exception):
    """Base class for ledger errors."""


class ValidationError(LedgerError, ValueError):
    """Raised when an entry cannot be created from the given input.

    Attributes:
        field: Name of the rejected input field.
    """

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field


class MalformedPersistedData(LedgerError):
    """Raised when a stored blob does not decode into ledger entries."""


class PersistenceWarning(UserWarning):
    """Issued when writing the ledger to storage fails."""


__all__ = [
    "LedgerError",
    "ValidationError",
    "MalformedPersistedData",
    "PersistenceWarning",
]
