"""Dependency injection for FastAPI endpoints"""

from fastapi import Request
from credit_evaluation.config import settings
from credit_evaluation.domain.models import PolicyThresholds


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_policy_thresholds() -> PolicyThresholds:
    """Provide approval thresholds from configuration"""
    return settings.policy_thresholds()
