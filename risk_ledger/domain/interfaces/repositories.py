"""Repository interfaces for data persistence."""

from abc import ABC, abstractmethod
from typing import List, Optional

from risk_ledger.domain.entities import (
    ActiveLoan,
    BorrowerProfile,
    LedgerStats,
    LoanApplication,
)


class ProfileRepository(ABC):
    """
    Abstract repository for BorrowerProfile persistence.

    Profiles are keyed by borrower identity; saving an existing identity
    replaces the stored profile.
    """

    @abstractmethod
    async def save(self, profile: BorrowerProfile) -> BorrowerProfile:
        """
        Insert or replace a profile.

        Args:
            profile: The profile to save

        Returns:
            The saved profile
        """
        ...

    @abstractmethod
    async def get(self, borrower: str) -> Optional[BorrowerProfile]:
        """
        Retrieve a profile by borrower identity.

        Args:
            borrower: The borrower's identity

        Returns:
            The profile if registered, None otherwise
        """
        ...


class ApplicationRepository(ABC):
    """
    Abstract repository for LoanApplication persistence.

    Applications are never deleted, so the highest stored id is also the
    last id handed out.
    """

    @abstractmethod
    async def save(self, application: LoanApplication) -> LoanApplication:
        """
        Insert or update an application.

        Args:
            application: The application to save

        Returns:
            The saved application
        """
        ...

    @abstractmethod
    async def get(self, application_id: int) -> Optional[LoanApplication]:
        """
        Retrieve an application by id.

        Args:
            application_id: The application's id

        Returns:
            The application if found, None otherwise
        """
        ...

    @abstractmethod
    async def get_by_borrower(
        self,
        borrower: str,
        limit: int = 10,
        offset: int = 0,
    ) -> List[LoanApplication]:
        """
        Retrieve applications submitted by a borrower.

        Args:
            borrower: The borrower's identity
            limit: Maximum number of applications to return
            offset: Number of applications to skip

        Returns:
            List of applications, newest (highest id) first
        """
        ...

    @abstractmethod
    async def last_id(self) -> int:
        """
        Get the most recently assigned application id.

        Returns:
            The highest id stored, or 0 if there are no applications
        """
        ...


class ActiveLoanRepository(ABC):
    """Abstract repository for ActiveLoan persistence."""

    @abstractmethod
    async def save(self, loan: ActiveLoan) -> ActiveLoan:
        """
        Insert or update an active loan.

        Args:
            loan: The loan to save

        Returns:
            The saved loan
        """
        ...

    @abstractmethod
    async def get(self, loan_id: int) -> Optional[ActiveLoan]:
        """
        Retrieve an active loan by id.

        Args:
            loan_id: The loan's id (same as its application's id)

        Returns:
            The loan if found, None otherwise
        """
        ...


class LedgerStatsRepository(ABC):
    """Abstract repository for the singleton LedgerStats record."""

    @abstractmethod
    async def get(self) -> LedgerStats:
        """
        Retrieve the ledger statistics.

        Returns:
            The stored stats, or zeroed stats if none were written yet
        """
        ...

    @abstractmethod
    async def save(self, stats: LedgerStats) -> LedgerStats:
        """
        Persist the ledger statistics.

        Args:
            stats: The stats to save

        Returns:
            The saved stats
        """
        ...
