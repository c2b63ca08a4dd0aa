"""Pytest fixtures for testing"""

import pytest
from fastapi.testclient import TestClient
from credit_evaluation.api.main import create_app
from credit_evaluation.domain.models import CreditApplication


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client"""
    return TestClient(create_app())


@pytest.fixture
def sample_application() -> CreditApplication:
    """High-score applicant requesting 10M with one active loan"""
    return CreditApplication(
        applicant_name="Laura Gomez",
        monthly_income=3_500_000,
        active_loans=1,
        credit_score=750,
        requested_amount=10_000_000,
        has_cosigner=False,
    )


@pytest.fixture
def sample_payload() -> dict:
    """JSON body matching sample_application at 18% over 12 months"""
    return {
        "application": {
            "applicant_name": "Laura Gomez",
            "monthly_income": 3_500_000,
            "active_loans": 1,
            "credit_score": 750,
            "requested_amount": 10_000_000,
            "has_cosigner": False,
        },
        "annual_nominal_rate": 0.18,
        "term_months": 12,
    }
