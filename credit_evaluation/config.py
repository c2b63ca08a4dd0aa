"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict

from credit_evaluation.domain.models import PolicyThresholds


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "credit-evaluation"
    log_level: str = "INFO"

    # Approval policy
    low_score_cutoff: int = 500
    mid_score_ceiling: int = 700
    mid_tier_max_ratio: float = 0.25
    high_tier_max_ratio: float = 0.30
    high_tier_max_active_loans: int = 2

    def policy_thresholds(self) -> PolicyThresholds:
        """Approval thresholds as a domain value"""
        return PolicyThresholds(
            low_score_cutoff=self.low_score_cutoff,
            mid_score_ceiling=self.mid_score_ceiling,
            mid_tier_max_ratio=self.mid_tier_max_ratio,
            high_tier_max_ratio=self.high_tier_max_ratio,
            high_tier_max_active_loans=self.high_tier_max_active_loans,
        )


settings = Settings()
