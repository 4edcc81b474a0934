"""Custom exceptions for Expense Report."""


class ExpenseReportError(Exception):
    """Base exception for all Expense Report errors."""

    pass


class ConfigurationError(ExpenseReportError):
    """Raised when configuration is invalid or missing."""

    pass


class ReportInputError(ExpenseReportError):
    """Raised when the input document is malformed or fails validation."""

    pass


class UnknownParticipantError(ExpenseReportError):
    """Raised when a name is not in the participant list."""

    def __init__(self, name: str, message: str | None = None):
        self.name = name
        super().__init__(
            message or f"Participant '{name}' is not in the participant list"
        )


class UnknownCurrencyError(ExpenseReportError):
    """Raised when a currency code has no exchange rate."""

    def __init__(self, code: str, message: str | None = None):
        self.code = code
        super().__init__(
            message or f"Currency '{code}' is not defined in exchange rates"
        )


class NoShareRecipientsError(ExpenseReportError):
    """Raised when an expense split has no nonzero weight."""

    def __init__(self, what: str):
        self.what = what
        super().__init__(f"Expense '{what}' is not shared by anyone")


class InvalidShareWeightError(ExpenseReportError):
    """Raised when an expense split contains a negative weight."""

    pass


class SelfCareOfError(ExpenseReportError):
    """Raised when a participant is put in its own care."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Participant '{name}' cannot be in their own care")


class CareOfChainError(ExpenseReportError):
    """Raised when care-of edges would form a multi-level chain."""

    pass
