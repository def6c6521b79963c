"""Configuration manager for loading and validating .commento.yml"""

import copy
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError

from commento.domain.config import (
    AppConfig,
    CommentsConfig,
    LLMConfig,
    PromptsConfig,
    RetryConfig,
)

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".commento.yml"

_TRUE_VALUES = {"1", "true", "yes", "on"}


class ConfigurationError(Exception):
    """Configuration validation error."""

    pass


class ConfigManager:
    """Manages configuration from .commento.yml and environment variables

    Loads configuration with validation using Pydantic models. Configuration priority:
    1. Default values (defined in Pydantic models)
    2. .commento.yml file (searched from current directory upwards)
    3. Environment variables (COMMENTO_*)
    4. CLI arguments (handled by CLI layer)
    """

    DEFAULT_CONFIG = {
        "llm": {
            "provider": "gemini",
            "model": None,
            "api_key": None,
            "temperature": 0.4,
            "max_tokens": 1000,
            "top_p": 0.9,
            "timeout": 60,
        },
        "comments": {
            "include_examples": False,
            "timeout": 120,
        },
        "prompts": {
            "comment": None,
        },
        "retry": {
            "max_attempts": 1,
            "backoff_multiplier": 2,
            "initial_delay": 1,
            "jitter": 0.1,
        },
    }

    def __init__(self, config_path: Optional[Path] = None):
        """Initialize config manager

        Args:
            config_path: Path to .commento.yml (searches from current dir if None)

        Raises:
            ConfigurationError: If configuration validation fails
        """
        if isinstance(config_path, str):
            config_path = Path(config_path)
        self.config_path = config_path or self._find_config_file()
        try:
            self.config: AppConfig = self._load_config()
        except ValidationError as e:
            errors = []
            for error in e.errors():
                field = ".".join(str(x) for x in error["loc"])
                msg = error["msg"]
                errors.append(f"  - {field}: {msg}")
            raise ConfigurationError(
                "Configuration validation failed:\n" + "\n".join(errors)
            ) from e

    def _find_config_file(self) -> Optional[Path]:
        """Find .commento.yml file starting from current directory

        Returns:
            Path to config file or None if not found
        """
        current = Path.cwd()
        for parent in [current] + list(current.parents):
            config_file = parent / CONFIG_FILENAME
            if config_file.exists():
                logger.info(f"Found config file: {config_file}")
                return config_file
        logger.debug(f"No {CONFIG_FILENAME} found, using defaults")
        return None

    def _load_config(self) -> AppConfig:
        """Load configuration from file and validate with Pydantic

        Returns:
            Validated AppConfig instance

        Raises:
            ValidationError: If configuration is invalid
        """
        config_dict = copy.deepcopy(self.DEFAULT_CONFIG)

        if self.config_path and self.config_path.exists():
            try:
                with open(self.config_path, "r", encoding="utf-8") as f:
                    file_config = yaml.safe_load(f) or {}
            except (OSError, yaml.YAMLError) as e:
                logger.warning(f"Failed to load config from {self.config_path}: {e}")
                logger.info("Using default configuration")
            else:
                config_dict = self._merge_config(config_dict, file_config)
                logger.info(f"Loaded configuration from {self.config_path}")

        config_dict = self._apply_env_overrides(config_dict)

        return AppConfig(**config_dict)

    def _merge_config(self, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        """Recursively merge configuration dictionaries"""
        result = base.copy()
        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._merge_config(result[key], value)
            else:
                result[key] = value
        return result

    def _apply_env_overrides(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """Apply environment variable overrides

        Args:
            config: Configuration dictionary

        Returns:
            Configuration with env overrides applied
        """
        if os.getenv("COMMENTO_LLM_PROVIDER"):
            config["llm"]["provider"] = os.getenv("COMMENTO_LLM_PROVIDER")

        if os.getenv("COMMENTO_LLM_MODEL"):
            config["llm"]["model"] = os.getenv("COMMENTO_LLM_MODEL")

        if os.getenv("COMMENTO_API_KEY"):
            config["llm"]["api_key"] = os.getenv("COMMENTO_API_KEY")

        include_examples = os.getenv("COMMENTO_INCLUDE_EXAMPLES")
        if include_examples is not None and include_examples.strip():
            config["comments"]["include_examples"] = include_examples.strip().lower() in _TRUE_VALUES

        # Provider-specific keys (GEMINI_API_KEY, OPENAI_API_KEY) are handled by providers
        return config

    def get_llm_config(self) -> LLMConfig:
        """Get LLM provider configuration"""
        return self.config.llm

    def get_comments_config(self) -> CommentsConfig:
        """Get comment generation configuration"""
        return self.config.comments

    def get_prompts_config(self) -> PromptsConfig:
        """Get prompts configuration"""
        return self.config.prompts

    def get_retry_config(self) -> RetryConfig:
        """Get retry configuration"""
        return self.config.retry

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value by key (supports dot notation)

        Args:
            key: Configuration key (e.g., "llm.model" or "comments")
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        keys = key.split(".")
        value = self.config.model_dump()
        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default
        return value
