"""Application Settings and Configuration.

This module provides application-wide settings that combine the validated
policy configuration with logging options read from the environment.
"""

import os
from typing import Optional

from src.infrastructure.config_manager import ConfigManager, PolicyConfig

# Application metadata
APP_NAME = "Care-Campus-Registry"
APP_VERSION = "1.0.0"


class Settings:
    """Application settings loaded from the configuration manager and environment.

    Parameters:
        policy: Explicit policy thresholds. When omitted they are loaded from
            the environment on first access.
    """

    def __init__(self, policy: Optional[PolicyConfig] = None):
        """Initialize settings from configuration manager and environment."""
        self._policy = policy

        self.app_name = os.getenv("REG_APP_NAME", APP_NAME)
        self.log_level = os.getenv("REG_LOG_LEVEL", "INFO")
        self.log_json = os.getenv("REG_LOG_JSON", "false").lower() == "true"

    @property
    def policy(self) -> PolicyConfig:
        """Validated admission and enrollment thresholds (loaded lazily)."""
        if self._policy is None:
            self._policy = ConfigManager.from_environment().get_policy_config()
        return self._policy

    @property
    def hospital_capacity(self) -> int:
        return self.policy.hospital_capacity

    @property
    def min_gpa(self) -> float:
        return self.policy.min_gpa

    @property
    def max_credits(self) -> int:
        return self.policy.max_credits


# Global settings instance
settings = Settings()
