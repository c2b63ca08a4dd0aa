"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, Field
from typing import List, Optional


class ApplicationSchema(BaseModel):
    """Applicant data submitted for evaluation"""

    applicant_name: str = Field(..., min_length=1, description="Applicant full name")
    monthly_income: float = Field(..., description="Monthly income in currency units")
    active_loans: int = Field(..., description="Number of loans currently active")
    credit_score: int = Field(..., description="Credit score from 0 (worst) to 1000 (best)")
    requested_amount: float = Field(..., description="Requested credit amount in currency units")
    has_cosigner: bool = Field(False, description="Whether a co-signer backs the application")


class LoanRequest(BaseModel):
    """Request body for POST /v1/installment and POST /v1/evaluation"""

    application: ApplicationSchema
    annual_nominal_rate: float = Field(..., description="Annual nominal rate as a decimal, e.g. 0.18")
    term_months: int = Field(..., description="Loan term in months")
    include_schedule: bool = Field(False, description="Return the amortization schedule")


class AmortizationRowSchema(BaseModel):
    """Single period in an amortization schedule"""

    period: int
    payment: float
    interest: float
    principal: float
    balance: float


class InstallmentResponse(BaseModel):
    """Response for POST /v1/installment"""

    monthly_rate: float
    monthly_installment: float
    total_payment: float
    schedule: Optional[List[AmortizationRowSchema]] = None


class EvaluationResponse(BaseModel):
    """Response for POST /v1/evaluation"""

    approved: bool
    tier: str
    monthly_installment: float
    payment_to_income_ratio: Optional[float] = None
    max_payment_to_income_ratio: Optional[float] = None
    rejection_reasons: List[str]
