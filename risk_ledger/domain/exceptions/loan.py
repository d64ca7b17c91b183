"""Loan lifecycle domain exceptions."""

from .base import AlreadyExistsException, DomainException, NotFoundException


class ApplicationNotFoundException(NotFoundException):
    """Raised when a loan application cannot be found."""

    def __init__(self, application_id: int):
        super().__init__(f"Application not found: {application_id}")
        self.application_id = application_id


class LoanNotFoundException(NotFoundException):
    """Raised when no active loan exists for an id."""

    def __init__(self, loan_id: int):
        super().__init__(f"Active loan not found: {loan_id}")
        self.loan_id = loan_id


class LoanAlreadyExistsException(AlreadyExistsException):
    """Raised when disbursement would create a second loan for one application."""

    def __init__(self, loan_id: int):
        super().__init__(f"Active loan already exists: {loan_id}")
        self.loan_id = loan_id


class InvalidAmountException(DomainException):
    """Raised for non-positive amounts and payments against a repaid loan."""

    def __init__(self, message: str):
        super().__init__(message=message, code="INVALID_AMOUNT")


class InsufficientScoreException(DomainException):
    """Raised when a borrower's credit score is below the application floor."""

    def __init__(self, credit_score: int, floor: int):
        super().__init__(
            message=f"Credit score {credit_score} is below the minimum of {floor}",
            code="INSUFFICIENT_SCORE",
        )
        self.credit_score = credit_score
        self.floor = floor
