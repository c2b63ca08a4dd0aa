"""Domain models - pure Python dataclasses representing business entities"""

import math
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import List, Optional

from credit_evaluation.domain.exceptions import (
    InvalidActiveLoansError,
    InvalidAmountError,
    InvalidIncomeError,
    InvalidScoreError,
)

MIN_CREDIT_SCORE = 0
MAX_CREDIT_SCORE = 1000
MAX_TERM_MONTHS = 600


def _is_non_negative(value: float) -> bool:
    return math.isfinite(value) and value >= 0


@dataclass(frozen=True)
class CreditApplication:
    """
    Applicant data for a single credit evaluation.

    Instances are immutable and validated on construction. Use
    `replace()` to obtain a modified copy; the copy is validated again.
    """

    applicant_name: str
    monthly_income: float
    active_loans: int
    credit_score: int
    requested_amount: float
    has_cosigner: bool

    def __post_init__(self) -> None:
        if not _is_non_negative(self.monthly_income):
            raise InvalidIncomeError(f"Monthly income must be non-negative, got {self.monthly_income}")
        if not _is_non_negative(self.requested_amount):
            raise InvalidAmountError(f"Requested amount must be non-negative, got {self.requested_amount}")
        if self.active_loans < 0:
            raise InvalidActiveLoansError(f"Active loans must be non-negative, got {self.active_loans}")
        if not MIN_CREDIT_SCORE <= self.credit_score <= MAX_CREDIT_SCORE:
            raise InvalidScoreError(
                f"Credit score must be within [{MIN_CREDIT_SCORE}, {MAX_CREDIT_SCORE}], got {self.credit_score}"
            )

    def replace(self, **changes) -> "CreditApplication":
        """Return a copy with the given fields changed"""
        return replace(self, **changes)


class ApprovalTier(str, Enum):
    """Approval rule applied to a credit score band"""

    REJECT = "reject"
    APPROVE_IF_COSIGNER_AND_RATIO = "approve_if_cosigner_and_ratio"
    APPROVE_IF_FEW_LOANS_AND_RATIO = "approve_if_few_loans_and_ratio"


@dataclass(frozen=True)
class PolicyThresholds:
    """Cut-off values for the tiered approval policy"""

    low_score_cutoff: int = 500  # scores below are rejected
    mid_score_ceiling: int = 700  # inclusive upper bound of the middle tier
    mid_tier_max_ratio: float = 0.25
    high_tier_max_ratio: float = 0.30
    high_tier_max_active_loans: int = 2  # exclusive


@dataclass
class CreditEvaluation:
    """Output of an approval evaluation"""

    approved: bool
    tier: ApprovalTier
    monthly_installment: float
    payment_to_income_ratio: Optional[float]
    max_payment_to_income_ratio: Optional[float]
    rejection_reasons: List[str] = field(default_factory=list)


@dataclass
class AmortizationRow:
    """Single period of a French amortization schedule"""

    period: int
    payment: float
    interest: float
    principal: float
    balance: float
