"""Loan service - the application, approval, disbursement and repayment lifecycle."""

from typing import List

import structlog

from risk_ledger.application.dto import LoanApplicationRequest, PaymentRequest
from risk_ledger.domain.entities import (
    ActiveLoan,
    ApplicationStatus,
    Caller,
    LoanApplication,
)
from risk_ledger.domain.exceptions import (
    ApplicationNotFoundException,
    InsufficientScoreException,
    InvalidAmountException,
    InvalidParametersException,
    LoanAlreadyExistsException,
    LoanNotFoundException,
    ProfileNotFoundException,
    UnauthorizedException,
)
from risk_ledger.domain.interfaces import (
    ActiveLoanRepository,
    ApplicationRepository,
    Clock,
    LedgerStatsRepository,
    ProfileRepository,
)
from risk_ledger.service.scoring import (
    ScoringSettings,
    amortized_monthly_payment,
    derive_interest_rate,
    scoring_settings,
)

logger = structlog.get_logger(__name__)


class LoanService:
    """
    Application service for the loan lifecycle.

    States per id: pending -> approved -> disbursed, after which the
    ActiveLoan is repaying until its balance reaches 0 (repaid). There are
    no backward transitions.

    Every operation checks all of its preconditions before the first
    write, so a raised DomainException means nothing was changed. Callers
    must run mutating operations one at a time (see
    DatabaseSessionManager.serialized_session).
    """

    def __init__(
        self,
        profile_repository: ProfileRepository,
        application_repository: ApplicationRepository,
        loan_repository: ActiveLoanRepository,
        stats_repository: LedgerStatsRepository,
        clock: Clock,
        settings: ScoringSettings = scoring_settings,
    ):
        self._profile_repo = profile_repository
        self._application_repo = application_repository
        self._loan_repo = loan_repository
        self._stats_repo = stats_repository
        self._clock = clock
        self._settings = settings

    async def apply(self, caller: Caller, request: LoanApplicationRequest) -> int:
        """
        Submit a loan application for the caller.

        Args:
            caller: The applying borrower
            request: Amount, purpose and term

        Returns:
            The new application id

        Raises:
            ProfileNotFoundException: If the caller has no profile
            InvalidAmountException: If the amount is not positive or above max_amount
            InvalidParametersException: If the term or purpose is out of range
            InsufficientScoreException: If the stored credit score is below the floor
        """
        log = logger.bind(borrower=caller.identity, amount=request.amount)

        profile = await self._profile_repo.get(caller.identity)
        if profile is None:
            raise ProfileNotFoundException(caller.identity)

        if request.amount <= 0:
            raise InvalidAmountException("amount must be positive")

        if request.amount > self._settings.max_amount:
            raise InvalidAmountException(f"amount must not exceed {self._settings.max_amount}")

        if not self._settings.min_term_months <= request.term_months <= self._settings.max_term_months:
            raise InvalidParametersException(
                f"term_months must be between {self._settings.min_term_months} "
                f"and {self._settings.max_term_months}"
            )

        if len(request.purpose) > self._settings.max_purpose_length:
            raise InvalidParametersException(
                f"purpose must be at most {self._settings.max_purpose_length} characters"
            )

        if profile.credit_score < self._settings.application_score_floor:
            log.info("application_rejected", credit_score=profile.credit_score)
            raise InsufficientScoreException(
                profile.credit_score,
                self._settings.application_score_floor,
            )

        application = LoanApplication(
            id=await self._application_repo.last_id() + 1,
            borrower=caller.identity,
            amount=request.amount,
            purpose=request.purpose,
            term_months=request.term_months,
            risk_score=profile.credit_score,
            interest_rate=derive_interest_rate(profile.credit_score, self._settings),
            status=ApplicationStatus.PENDING,
            applied_at=self._clock.now(),
        )
        await self._application_repo.save(application)

        log.info(
            "application_submitted",
            application_id=application.id,
            risk_score=application.risk_score,
            interest_rate=application.interest_rate,
        )
        return application.id

    async def approve(self, caller: Caller, application_id: int) -> LoanApplication:
        """
        Approve a pending application (owner only).

        Raises:
            UnauthorizedException: If the caller is not the owner
            ApplicationNotFoundException: If the application does not exist
            InvalidParametersException: If the application is not pending
        """
        self._require_owner(caller)
        application = await self._get_application_or_raise(application_id)

        if not application.is_pending:
            raise InvalidParametersException(
                f"Application {application_id} is {application.status.value}, expected pending"
            )

        application.status = ApplicationStatus.APPROVED
        application.approved_at = self._clock.now()
        await self._application_repo.save(application)

        logger.info("application_approved", application_id=application_id)
        return application

    async def disburse(self, caller: Caller, application_id: int) -> ActiveLoan:
        """
        Disburse an approved application into an active loan (owner only).

        The application is kept, marked disbursed, and the loan shares its id.

        Raises:
            UnauthorizedException: If the caller is not the owner
            ApplicationNotFoundException: If the application does not exist
            InvalidParametersException: If the application is not approved
            LoanAlreadyExistsException: If a loan already exists for this id
        """
        self._require_owner(caller)
        application = await self._get_application_or_raise(application_id)

        if not application.is_approved:
            raise InvalidParametersException(
                f"Application {application_id} is {application.status.value}, expected approved"
            )

        if await self._loan_repo.get(application_id) is not None:
            raise LoanAlreadyExistsException(application_id)

        stats = await self._stats_repo.get()

        loan = ActiveLoan(
            id=application.id,
            borrower=application.borrower,
            principal_amount=application.amount,
            outstanding_balance=application.amount,
            interest_rate=application.interest_rate,
            monthly_payment=amortized_monthly_payment(
                application.amount,
                application.interest_rate,
                application.term_months,
            ),
            term_months=application.term_months,
            disbursed_at=self._clock.now(),
        )
        application.status = ApplicationStatus.DISBURSED
        stats.record_disbursement(application.amount)

        await self._loan_repo.save(loan)
        await self._application_repo.save(application)
        await self._stats_repo.save(stats)

        logger.info(
            "loan_disbursed",
            application_id=application_id,
            borrower=loan.borrower,
            principal_amount=loan.principal_amount,
            monthly_payment=loan.monthly_payment,
        )
        return loan

    async def record_payment(self, caller: Caller, request: PaymentRequest) -> ActiveLoan:
        """
        Record a repayment from the loan's borrower.

        Overpayment clamps the balance at 0 and the excess is dropped. Every
        accepted call counts as one payment made, whatever its amount.

        Returns:
            The updated loan

        Raises:
            LoanNotFoundException: If no active loan exists for the id
            UnauthorizedException: If the caller is not the loan's borrower
            InvalidAmountException: If the loan is repaid or the amount is not
                positive or above max_amount
        """
        loan = await self._loan_repo.get(request.loan_id)
        if loan is None:
            raise LoanNotFoundException(request.loan_id)

        if caller.identity != loan.borrower:
            raise UnauthorizedException("Only the borrower can record payments on a loan")

        if loan.outstanding_balance == 0:
            raise InvalidAmountException(f"Loan {loan.id} is already repaid")

        if request.amount <= 0:
            raise InvalidAmountException("payment amount must be positive")

        if request.amount > self._settings.max_amount:
            raise InvalidAmountException(
                f"payment amount must not exceed {self._settings.max_amount}"
            )

        loan.outstanding_balance = max(0, loan.outstanding_balance - request.amount)
        loan.payments_made += 1
        await self._loan_repo.save(loan)

        logger.info(
            "payment_recorded",
            loan_id=loan.id,
            amount=request.amount,
            outstanding_balance=loan.outstanding_balance,
            payments_made=loan.payments_made,
        )
        if loan.is_repaid:
            logger.info("loan_repaid", loan_id=loan.id, borrower=loan.borrower)
        return loan

    async def get_application(self, application_id: int) -> LoanApplication:
        """
        Get an application by id.

        Raises:
            ApplicationNotFoundException: If the application does not exist
        """
        return await self._get_application_or_raise(application_id)

    async def get_active_loan(self, loan_id: int) -> ActiveLoan:
        """
        Get an active loan by id.

        Raises:
            LoanNotFoundException: If no loan exists for the id
        """
        loan = await self._loan_repo.get(loan_id)
        if loan is None:
            raise LoanNotFoundException(loan_id)
        return loan

    async def list_applications(self, borrower: str, limit: int = 10) -> List[LoanApplication]:
        """Get a borrower's applications, newest first."""
        return await self._application_repo.get_by_borrower(borrower, limit=limit)

    def _require_owner(self, caller: Caller) -> None:
        if not caller.is_owner:
            raise UnauthorizedException("Only the ledger owner can perform this operation")

    async def _get_application_or_raise(self, application_id: int) -> LoanApplication:
        application = await self._application_repo.get(application_id)
        if application is None:
            raise ApplicationNotFoundException(application_id)
        return application
