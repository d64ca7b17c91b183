"""SQLAlchemy ORM models for ledger entities."""

from sqlalchemy import BigInteger, ForeignKey, Integer, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


class Base(DeclarativeBase):
    pass


class BorrowerProfileModel(Base):
    """Persisted borrower profile, one row per identity."""

    __tablename__ = "borrower_profiles"

    borrower: Mapped[str] = mapped_column(String(255), primary_key=True)
    credit_score: Mapped[int] = mapped_column(Integer, nullable=False)
    annual_income: Mapped[int] = mapped_column(BigInteger, nullable=False)
    total_debt: Mapped[int] = mapped_column(BigInteger, nullable=False)
    employment_years: Mapped[int] = mapped_column(Integer, nullable=False)
    previous_defaults: Mapped[int] = mapped_column(Integer, nullable=False)
    on_time_payments: Mapped[int] = mapped_column(Integer, nullable=False)
    total_loans: Mapped[int] = mapped_column(Integer, nullable=False)
    risk_category: Mapped[str] = mapped_column(String(20), nullable=False)
    last_updated: Mapped[int] = mapped_column(BigInteger, nullable=False)


class LoanApplicationModel(Base):
    """Persisted loan application; ids are assigned by the service."""

    __tablename__ = "loan_applications"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    borrower: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    amount: Mapped[int] = mapped_column(BigInteger, nullable=False)
    purpose: Mapped[str] = mapped_column(Text, nullable=False, default="")
    term_months: Mapped[int] = mapped_column(Integer, nullable=False)
    risk_score: Mapped[int] = mapped_column(Integer, nullable=False)
    interest_rate: Mapped[int] = mapped_column(Integer, nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="pending")
    applied_at: Mapped[int] = mapped_column(BigInteger, nullable=False)
    approved_at: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)

    loan: Mapped["ActiveLoanModel | None"] = relationship(
        "ActiveLoanModel",
        back_populates="application",
        uselist=False,
    )


class ActiveLoanModel(Base):
    """Persisted active loan, keyed by its application's id."""

    __tablename__ = "active_loans"

    id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("loan_applications.id"),
        primary_key=True,
        autoincrement=False,
    )
    borrower: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    principal_amount: Mapped[int] = mapped_column(BigInteger, nullable=False)
    outstanding_balance: Mapped[int] = mapped_column(BigInteger, nullable=False)
    interest_rate: Mapped[int] = mapped_column(Integer, nullable=False)
    monthly_payment: Mapped[int] = mapped_column(BigInteger, nullable=False)
    payments_made: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    payments_missed: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    term_months: Mapped[int] = mapped_column(Integer, nullable=False)
    disbursed_at: Mapped[int] = mapped_column(BigInteger, nullable=False)

    application: Mapped["LoanApplicationModel"] = relationship(
        "LoanApplicationModel",
        back_populates="loan",
    )


class LedgerStatsModel(Base):
    """Singleton row of ledger aggregates (id is always 1)."""

    __tablename__ = "ledger_stats"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    total_loans_issued: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    total_amount_disbursed: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)
    model_version: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
