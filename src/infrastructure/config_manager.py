"""Configuration Manager for Registry Policies.

This module loads the admission and enrollment policy thresholds from the
environment or a JSON file and validates them before use.

Architecture:
    - Infrastructure layer, isolated from the domain models
    - Type-safe configuration using Pydantic models
    - Fail-fast validation prevents running with nonsensical thresholds
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

ENV_PREFIX = "REG_"


class PolicyConfig(BaseModel):
    """Thresholds applied by the admission and enrollment rules.

    Parameters:
        hospital_capacity: Maximum number of distinct admitted patients
        min_gpa: Minimum cumulative GPA required to enroll
        max_credits: Maximum credit hours a student may carry
    """

    hospital_capacity: int = Field(default=500, ge=1, description="Maximum admitted patients")
    min_gpa: float = Field(default=2.0, ge=0.0, le=4.0, description="Minimum GPA for enrollment")
    max_credits: int = Field(default=18, ge=1, description="Maximum credit hours per semester")


class ConfigManager:
    """Holds raw configuration data and builds validated config models."""

    def __init__(self, config_data: dict[str, Any]):
        """Initialize configuration manager.

        Parameters:
            config_data: Configuration dictionary
        """
        self._config_data = config_data
        self._policy_config: Optional[PolicyConfig] = None

    @classmethod
    def from_environment(cls) -> 'ConfigManager':
        """Load configuration from environment variables.

        Environment Variables:
            - REG_HOSPITAL_CAPACITY: Maximum admitted patients
            - REG_MIN_GPA: Minimum GPA for enrollment
            - REG_MAX_CREDITS: Maximum credit hours per student

        A ``.env`` file in the project root is loaded first if present;
        variables already set in the environment take precedence.

        Returns:
            ConfigManager instance
        """
        env_path = Path(__file__).parent.parent.parent / ".env"
        if env_path.exists():
            load_dotenv(env_path)
            logger.debug(f"Loaded environment variables from {env_path}")

        policy: dict[str, Any] = {}
        for key in PolicyConfig.model_fields:
            raw = os.getenv(f"{ENV_PREFIX}{key.upper()}")
            if raw is not None and raw.strip():
                policy[key] = raw.strip()

        return cls({"policy": policy})

    @classmethod
    def from_file(cls, config_path: str) -> 'ConfigManager':
        """Load configuration from a JSON file.

        Parameters:
            config_path: Path to configuration file

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If config file is not valid JSON
        """
        config_file = Path(config_path)
        if not config_file.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                config_data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in configuration file: {str(e)}")

        return cls(config_data)

    def get_policy_config(self) -> PolicyConfig:
        """Get the validated policy configuration.

        Raises:
            pydantic.ValidationError: If a threshold is malformed or out of range
        """
        if self._policy_config is None:
            self._policy_config = PolicyConfig(**self._config_data.get("policy", {}))
        return self._policy_config

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value by dotted key, e.g. ``"policy.min_gpa"``."""
        value: Any = self._config_data
        for k in key.split("."):
            if isinstance(value, dict):
                value = value.get(k)
            else:
                return default
        return value if value is not None else default


def get_policy_config() -> PolicyConfig:
    """Convenience function to load policy configuration from the environment."""
    return ConfigManager.from_environment().get_policy_config()
