"""Tiered approval policy - core business logic for credit decisions"""

from typing import List, Optional, Tuple
from credit_evaluation.domain.models import (
    ApprovalTier,
    CreditApplication,
    CreditEvaluation,
    PolicyThresholds,
)
from credit_evaluation.domain.installments import monthly_installment

DEFAULT_THRESHOLDS = PolicyThresholds()


def build_rule_table(thresholds: PolicyThresholds) -> List[Tuple[float, ApprovalTier]]:
    """
    Ordered (exclusive upper score bound, tier) pairs.

    The first rule whose bound exceeds the score applies:
    - score < 500:        reject
    - 500 <= score <= 700: co-signer and installment <= 25% of income
    - score > 700:        fewer than 2 active loans and installment <= 30% of income
    """
    return [
        (thresholds.low_score_cutoff, ApprovalTier.REJECT),
        (thresholds.mid_score_ceiling + 1, ApprovalTier.APPROVE_IF_COSIGNER_AND_RATIO),
        (float("inf"), ApprovalTier.APPROVE_IF_FEW_LOANS_AND_RATIO),
    ]


def classify_tier(score: int, thresholds: PolicyThresholds = DEFAULT_THRESHOLDS) -> ApprovalTier:
    """Map a credit score to its approval tier"""
    for upper_bound, tier in build_rule_table(thresholds):
        if score < upper_bound:
            return tier
    return ApprovalTier.APPROVE_IF_FEW_LOANS_AND_RATIO


def _max_ratio(tier: ApprovalTier, thresholds: PolicyThresholds) -> Optional[float]:
    if tier == ApprovalTier.APPROVE_IF_COSIGNER_AND_RATIO:
        return thresholds.mid_tier_max_ratio
    if tier == ApprovalTier.APPROVE_IF_FEW_LOANS_AND_RATIO:
        return thresholds.high_tier_max_ratio
    return None


def make_credit_evaluation(
    application: CreditApplication,
    annual_nominal_rate: float,
    term_months: int,
    thresholds: PolicyThresholds = DEFAULT_THRESHOLDS,
) -> CreditEvaluation:
    """
    Main entry point: compute the installment and apply the tiered policy.

    Term and rate are validated even when the score alone would reject,
    so bad loan terms never produce a silent decline.

    Returns complete CreditEvaluation with outcome, tier, ratio and reasons.
    """
    installment = monthly_installment(application, annual_nominal_rate, term_months)
    tier = classify_tier(application.credit_score, thresholds)
    max_ratio = _max_ratio(tier, thresholds)

    income = application.monthly_income
    ratio = installment / income if income > 0 else None

    reasons = []
    if tier == ApprovalTier.REJECT:
        reasons.append(
            f"Credit score {application.credit_score} is below {thresholds.low_score_cutoff}"
        )
    else:
        # Compare against the income share rather than the ratio: income may be zero
        if installment > income * max_ratio:
            reasons.append(
                f"Installment {installment:.2f} exceeds {max_ratio:.0%} of monthly income {income:.2f}"
            )
        if tier == ApprovalTier.APPROVE_IF_COSIGNER_AND_RATIO and not application.has_cosigner:
            reasons.append(f"Co-signer required for credit scores up to {thresholds.mid_score_ceiling}")
        if (
            tier == ApprovalTier.APPROVE_IF_FEW_LOANS_AND_RATIO
            and application.active_loans >= thresholds.high_tier_max_active_loans
        ):
            reasons.append(
                f"{application.active_loans} active loans; at most "
                f"{thresholds.high_tier_max_active_loans - 1} allowed"
            )

    return CreditEvaluation(
        approved=not reasons,
        tier=tier,
        monthly_installment=installment,
        payment_to_income_ratio=ratio,
        max_payment_to_income_ratio=max_ratio,
        rejection_reasons=reasons,
    )


def evaluate_approval(
    application: CreditApplication,
    annual_nominal_rate: float,
    term_months: int,
    thresholds: PolicyThresholds = DEFAULT_THRESHOLDS,
) -> bool:
    """Return True if the application is approved for the given loan terms"""
    return make_credit_evaluation(application, annual_nominal_rate, term_months, thresholds).approved
