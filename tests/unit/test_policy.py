"""Unit tests for the tiered approval policy"""

import pytest
from credit_evaluation.domain.models import ApprovalTier, CreditApplication, PolicyThresholds
from credit_evaluation.domain.installments import monthly_installment
from credit_evaluation.domain.policy import (
    classify_tier,
    evaluate_approval,
    make_credit_evaluation,
)
from credit_evaluation.domain.exceptions import InvalidRateError, InvalidTermError


@pytest.fixture
def small_loan(sample_application: CreditApplication) -> CreditApplication:
    """1,200,000 at 0% over 12 months: installment of exactly 100,000"""
    return sample_application.replace(requested_amount=1_200_000, monthly_income=1_000_000)


def test_classify_tier_boundaries():
    """Test score bands: <500 reject, 500-700 middle, >700 high"""
    assert classify_tier(0) == ApprovalTier.REJECT
    assert classify_tier(499) == ApprovalTier.REJECT
    assert classify_tier(500) == ApprovalTier.APPROVE_IF_COSIGNER_AND_RATIO
    assert classify_tier(700) == ApprovalTier.APPROVE_IF_COSIGNER_AND_RATIO
    assert classify_tier(701) == ApprovalTier.APPROVE_IF_FEW_LOANS_AND_RATIO
    assert classify_tier(1000) == ApprovalTier.APPROVE_IF_FEW_LOANS_AND_RATIO


def test_classify_tier_custom_thresholds():
    thresholds = PolicyThresholds(low_score_cutoff=600, mid_score_ceiling=800)

    assert classify_tier(550, thresholds) == ApprovalTier.REJECT
    assert classify_tier(750, thresholds) == ApprovalTier.APPROVE_IF_COSIGNER_AND_RATIO
    assert classify_tier(801, thresholds) == ApprovalTier.APPROVE_IF_FEW_LOANS_AND_RATIO


@pytest.mark.parametrize("score", [0, 250, 499])
def test_low_score_always_rejected(small_loan: CreditApplication, score: int):
    """Test score < 500 rejects even with co-signer, no loans and huge income"""
    application = small_loan.replace(
        credit_score=score, has_cosigner=True, active_loans=0, monthly_income=1e12
    )

    evaluation = make_credit_evaluation(application, 0.0, 12)

    assert evaluation.approved is False
    assert evaluation.tier == ApprovalTier.REJECT
    assert evaluation.max_payment_to_income_ratio is None
    assert len(evaluation.rejection_reasons) == 1


@pytest.mark.parametrize("score", [500, 600, 700])
def test_middle_tier_without_cosigner_rejected(small_loan: CreditApplication, score: int):
    application = small_loan.replace(credit_score=score, has_cosigner=False, monthly_income=1e12)
    assert evaluate_approval(application, 0.0, 12) is False


def test_middle_tier_ratio_at_limit_approved(small_loan: CreditApplication):
    """Test installment exactly 25% of income is approved"""
    application = small_loan.replace(credit_score=650, has_cosigner=True, monthly_income=400_000)

    evaluation = make_credit_evaluation(application, 0.0, 12)

    assert evaluation.approved is True
    assert evaluation.payment_to_income_ratio == 0.25
    assert evaluation.rejection_reasons == []


def test_middle_tier_ratio_above_limit_rejected(small_loan: CreditApplication):
    application = small_loan.replace(credit_score=650, has_cosigner=True, monthly_income=399_999)
    assert evaluate_approval(application, 0.0, 12) is False


def test_middle_tier_reports_both_reasons(small_loan: CreditApplication):
    application = small_loan.replace(credit_score=650, has_cosigner=False, monthly_income=100_000)

    evaluation = make_credit_evaluation(application, 0.0, 12)

    assert evaluation.approved is False
    assert len(evaluation.rejection_reasons) == 2


@pytest.mark.parametrize("active_loans", [2, 3, 10])
def test_high_tier_many_loans_rejected(small_loan: CreditApplication, active_loans: int):
    """Test two or more active loans reject regardless of installment"""
    application = small_loan.replace(credit_score=900, active_loans=active_loans, monthly_income=1e12)
    assert evaluate_approval(application, 0.0, 12) is False


def test_high_tier_ratio_at_limit_approved(small_loan: CreditApplication):
    """Test installment exactly 30% of income is approved"""
    application = small_loan.replace(
        credit_score=800, active_loans=1, requested_amount=3_600_000, monthly_income=1_000_000
    )

    evaluation = make_credit_evaluation(application, 0.0, 12)

    assert evaluation.approved is True
    assert evaluation.payment_to_income_ratio == pytest.approx(0.30)
    assert evaluation.max_payment_to_income_ratio == 0.30


def test_high_tier_ratio_above_limit_rejected(small_loan: CreditApplication):
    application = small_loan.replace(credit_score=800, active_loans=0, monthly_income=300_000)
    assert evaluate_approval(application, 0.0, 12) is False


def test_high_tier_does_not_need_cosigner(small_loan: CreditApplication):
    application = small_loan.replace(credit_score=701, active_loans=0, has_cosigner=False)
    assert evaluate_approval(application, 0.0, 12) is True


def test_reference_case_matches_formula(sample_application: CreditApplication):
    """Test 10M at 18% over 12 months for score 750, 1 loan, income 3.5M"""
    installment = monthly_installment(sample_application, 0.18, 12)
    expected = sample_application.active_loans < 2 and installment <= 0.30 * sample_application.monthly_income

    evaluation = make_credit_evaluation(sample_application, 0.18, 12)

    assert evaluation.approved is expected
    assert evaluation.approved is True  # ratio ~0.262
    assert evaluation.payment_to_income_ratio == pytest.approx(0.262, abs=1e-3)
    assert evaluation.monthly_installment == installment


def test_reference_case_middle_tier_rejected(sample_application: CreditApplication):
    """Test same loan with co-signer but middle score: ~0.262 exceeds 0.25"""
    application = sample_application.replace(credit_score=650, has_cosigner=True)
    assert evaluate_approval(application, 0.18, 12) is False


def test_zero_income_has_no_ratio(sample_application: CreditApplication):
    application = sample_application.replace(monthly_income=0)

    evaluation = make_credit_evaluation(application, 0.18, 12)

    assert evaluation.approved is False
    assert evaluation.payment_to_income_ratio is None


def test_custom_thresholds_change_outcome(sample_application: CreditApplication):
    """Test a stricter ratio cap turns the reference approval into a rejection"""
    strict = PolicyThresholds(high_tier_max_ratio=0.20)
    assert evaluate_approval(sample_application, 0.18, 12, strict) is False


def test_evaluation_is_deterministic(sample_application: CreditApplication):
    first = make_credit_evaluation(sample_application, 0.24, 36)
    second = make_credit_evaluation(sample_application, 0.24, 36)
    assert first == second


def test_invalid_term_raises_even_for_low_score(sample_application: CreditApplication):
    """Test bad loan terms are reported instead of a silent rejection"""
    application = sample_application.replace(credit_score=100)

    with pytest.raises(InvalidTermError):
        evaluate_approval(application, 0.18, 0)


def test_negative_rate_raises(sample_application: CreditApplication):
    with pytest.raises(InvalidRateError):
        evaluate_approval(sample_application, -0.1, 12)


def test_term_above_max_raises(sample_application: CreditApplication):
    """Test very long terms fail validation instead of overflowing"""
    with pytest.raises(InvalidTermError):
        evaluate_approval(sample_application, 0.18, 100_000)


def test_tiny_rate_evaluates(sample_application: CreditApplication):
    """Test 10M over 12 months at a negligible rate: ~833k is ~0.238 of income"""
    evaluation = make_credit_evaluation(sample_application, 1e-17, 12)

    assert evaluation.approved is True
    assert evaluation.monthly_installment == pytest.approx(10_000_000 / 12)
