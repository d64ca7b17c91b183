"""
Risk Ledger - Credit Risk Engine & Loan Lifecycle Service

A FastAPI-based microservice that stores borrower financial profiles,
scores credit risk with integer fixed-point arithmetic, and tracks loans
from application through disbursement to repayment.
"""

__version__ = "0.1.0"
