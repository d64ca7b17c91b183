"""Process-wide ledger statistics."""

from dataclasses import dataclass


@dataclass
class LedgerStats:
    """
    Aggregate counters for the whole ledger.

    Only loan disbursement writes to this record, and only by incrementing.
    """

    total_loans_issued: int = 0
    total_amount_disbursed: int = 0
    model_version: int = 1

    def record_disbursement(self, amount: int) -> None:
        """Count one more disbursed loan of the given principal."""
        self.total_loans_issued += 1
        self.total_amount_disbursed += amount

    def to_dict(self) -> dict:
        return {
            "total_loans_issued": self.total_loans_issued,
            "total_amount_disbursed": self.total_amount_disbursed,
            "model_version": self.model_version,
        }
