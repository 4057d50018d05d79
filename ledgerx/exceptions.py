"""
Error taxonomy for the ledger.

Services raise these; the API layer turns them into HTTP
responses using the status code each class declares. Absence
(unknown id on a read, delete, rotate...) is not an error at the
service layer: those methods return None or False instead.
"""

from decimal import Decimal


class LedgerError(Exception):
    """Base class for every business-rule failure."""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(LedgerError, ValueError):
    """Malformed or missing input."""

    status_code = 400


class BalanceError(ValidationError):
    """A journal entry whose debits and credits do not match."""

    def __init__(self, total_debits: Decimal, total_credits: Decimal):
        super().__init__(
            f"Journal entry does not balance. "
            f"Total debits: {total_debits}, Total credits: {total_credits}"
        )
        self.total_debits = total_debits
        self.total_credits = total_credits


class ConflictError(LedgerError):
    """A unique key is already taken."""

    status_code = 409


class NotFoundError(LedgerError):
    """Raised by the API layer when a service reports absence."""

    status_code = 404


class StateError(LedgerError):
    """The operation is illegal in the entity's current state."""

    status_code = 400
