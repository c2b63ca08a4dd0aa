"""POST /v1/evaluation - Credit approval endpoint"""

import time
import logging
from fastapi import APIRouter, Depends, HTTPException, Request

from credit_evaluation.api.v1.schemas import LoanRequest, EvaluationResponse
from credit_evaluation.api.v1.installment import to_application
from credit_evaluation.api.dependencies import get_policy_thresholds, get_request_id
from credit_evaluation.domain.models import PolicyThresholds
from credit_evaluation.domain.policy import make_credit_evaluation
from credit_evaluation.domain.exceptions import InvalidInputError
from credit_evaluation.infrastructure.observability.metrics import record_evaluation, invalid_input_counter
from credit_evaluation.infrastructure.observability.logging import log_evaluation

router = APIRouter()


@router.post("/evaluation", response_model=EvaluationResponse)
def create_evaluation(
    request_body: LoanRequest,
    request: Request,
    thresholds: PolicyThresholds = Depends(get_policy_thresholds),
):
    """
    Evaluate a credit application against the tiered approval policy.

    Flow:
    1. Validate applicant data into a CreditApplication
    2. Compute the monthly installment for the requested terms
    3. Apply the tier rule for the applicant's credit score
    4. Record metrics and log the outcome
    """
    start_time = time.perf_counter()
    request_id = get_request_id(request)

    try:
        application = to_application(request_body)
        evaluation = make_credit_evaluation(
            application,
            request_body.annual_nominal_rate,
            request_body.term_months,
            thresholds,
        )

    except InvalidInputError as e:
        invalid_input_counter.labels(error=type(e).__name__).inc()
        logging.warning(f"Invalid evaluation input: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    duration_ms = (time.perf_counter() - start_time) * 1000
    record_evaluation(evaluation.approved, evaluation.tier.value, evaluation.payment_to_income_ratio)
    log_evaluation(
        request_id,
        application.applicant_name,
        evaluation.approved,
        evaluation.tier.value,
        evaluation.monthly_installment,
        duration_ms,
    )

    return EvaluationResponse(
        approved=evaluation.approved,
        tier=evaluation.tier.value,
        monthly_installment=evaluation.monthly_installment,
        payment_to_income_ratio=evaluation.payment_to_income_ratio,
        max_payment_to_income_ratio=evaluation.max_payment_to_income_ratio,
        rejection_reasons=evaluation.rejection_reasons,
    )
