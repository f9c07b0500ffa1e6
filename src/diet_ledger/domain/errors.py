"""Errors raised by the ledger core."""


class ValidationError(ValueError):
    """A meal submission has no portion with a positive amount."""


class PersistenceError(RuntimeError):
    """The ledger could not be written to the blob store."""
