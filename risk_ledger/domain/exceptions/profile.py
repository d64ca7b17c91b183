"""Profile-related domain exceptions."""

from .base import NotFoundException


class ProfileNotFoundException(NotFoundException):
    """Raised when a borrower has no registered profile."""

    def __init__(self, borrower: str):
        super().__init__(f"Profile not found: {borrower}")
        self.borrower = borrower
