"""Domain errors raised by the billing and settlement engine."""


class LedgerError(Exception):
    """Base class for ledger errors."""
    pass


class ValidationError(LedgerError):
    """Non-positive or over-limit amount, or a missing required identifier."""
    pass


class NotFoundError(LedgerError):
    """Referenced shipment or transaction does not exist."""
    pass


class ReplicationFailure(LedgerError):
    """Network, timeout or parse failure while pushing or pulling a snapshot."""
    pass
