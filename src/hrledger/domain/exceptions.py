class HRLedgerError(Exception):
    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class NotFoundError(HRLedgerError):
    """Requested resource does not exist."""


class ConflictError(HRLedgerError):
    """Operation conflicts with existing state (e.g. duplicate period entry)."""


class MissingRateError(HRLedgerError):
    """No direct or USD-pivot rate exists for a currency pair (strict mode only)."""


class RateFetchError(HRLedgerError):
    """The external exchange-rate feed failed or returned an unusable body."""
