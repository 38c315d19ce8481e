"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidTransactionDataError(DomainException):
    """Transaction or budget record is malformed or invalid"""

    pass


class InvalidBudgetSummaryError(DomainException):
    """Budget status counts are inconsistent"""

    pass


class InvalidInstallmentPlanError(DomainException):
    """Installment plan parameters are out of range"""

    pass
