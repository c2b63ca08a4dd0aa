"""POST /v1/installment - Monthly installment and amortization schedule"""

import logging
from fastapi import APIRouter, HTTPException, Request

from credit_evaluation.api.v1.schemas import LoanRequest, InstallmentResponse, AmortizationRowSchema
from credit_evaluation.api.dependencies import get_request_id
from credit_evaluation.domain.models import CreditApplication
from credit_evaluation.domain.installments import (
    generate_amortization_schedule,
    monthly_installment,
    monthly_rate,
)
from credit_evaluation.domain.exceptions import InvalidInputError
from credit_evaluation.infrastructure.observability.metrics import invalid_input_counter

router = APIRouter()


def to_application(request_body: LoanRequest) -> CreditApplication:
    """Build a validated domain application from the request body"""
    data = request_body.application
    return CreditApplication(
        applicant_name=data.applicant_name,
        monthly_income=data.monthly_income,
        active_loans=data.active_loans,
        credit_score=data.credit_score,
        requested_amount=data.requested_amount,
        has_cosigner=data.has_cosigner,
    )


@router.post("/installment", response_model=InstallmentResponse)
def calculate_installment(request_body: LoanRequest, request: Request):
    """
    Calculate the fixed monthly installment for the requested loan.

    Returns:
        Monthly rate, installment, total paid and, on request, the schedule
    """
    request_id = get_request_id(request)

    try:
        application = to_application(request_body)
        rate = monthly_rate(request_body.annual_nominal_rate)
        installment = monthly_installment(
            application, request_body.annual_nominal_rate, request_body.term_months
        )
        schedule = None
        if request_body.include_schedule:
            schedule = [
                AmortizationRowSchema(
                    period=row.period,
                    payment=row.payment,
                    interest=row.interest,
                    principal=row.principal,
                    balance=row.balance,
                )
                for row in generate_amortization_schedule(
                    application, request_body.annual_nominal_rate, request_body.term_months
                )
            ]

    except InvalidInputError as e:
        invalid_input_counter.labels(error=type(e).__name__).inc()
        logging.warning(f"Invalid installment input: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    return InstallmentResponse(
        monthly_rate=rate,
        monthly_installment=installment,
        total_payment=installment * request_body.term_months,
        schedule=schedule,
    )
