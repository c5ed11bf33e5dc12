class StoreError(Exception):
    """Base class for failures surfaced by the expense store client."""


class ValidationError(StoreError):
    """Candidate fields were rejected before reaching the store."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFound(StoreError):
    """The referenced transaction id does not exist in the store."""

    def __init__(self, transaction_id: str):
        super().__init__(f"Expense not found: {transaction_id}")
        self.transaction_id = transaction_id


class StoreUnavailable(StoreError):
    """Network failure or an unexpected answer from the store."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code
