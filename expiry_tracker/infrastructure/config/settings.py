"""Application settings loaded from environment variables."""

import os
from dataclasses import dataclass, field
from functools import cached_property

from ...domain.value_objects import FreshnessThreshold
from ..adapters.vision import GatewayConfig

RUN_MODES = ("api", "extract")


def _env_bool(key: str, default: bool = False) -> bool:
    """Get boolean from environment variable."""
    return os.environ.get(key, str(default)).lower() in ("true", "1", "yes")


def _env_int(key: str, default: int) -> int:
    """Get integer from environment variable."""
    return int(os.environ.get(key, str(default)))


def _env_float(key: str, default: float) -> float:
    """Get float from environment variable."""
    return float(os.environ.get(key, str(default)))


def _env_str(key: str, default: str = "") -> str:
    """Get string from environment variable."""
    return os.environ.get(key, default)


@dataclass
class Settings:
    """Application settings container."""

    # Freshness
    freshness_threshold_days: int = field(default_factory=lambda: _env_int("FRESHNESS_THRESHOLD_DAYS", 7))

    # Run configuration
    run_mode: str = field(default_factory=lambda: _env_str("RUN_MODE", "api"))
    log_level: str = field(default_factory=lambda: _env_str("LOG_LEVEL", "INFO"))

    # AI gateway (label reading)
    ai_gateway_enabled: bool = field(default_factory=lambda: _env_bool("AI_GATEWAY_ENABLED"))
    ai_gateway_api_key: str = field(default_factory=lambda: _env_str("AI_GATEWAY_API_KEY"))
    ai_gateway_url: str = field(
        default_factory=lambda: _env_str(
            "AI_GATEWAY_URL", "https://ai.gateway.lovable.dev/v1/chat/completions"
        )
    )
    ai_gateway_model: str = field(default_factory=lambda: _env_str("AI_GATEWAY_MODEL", "google/gemini-2.5-flash"))
    ai_gateway_timeout: float = field(default_factory=lambda: _env_float("AI_GATEWAY_TIMEOUT", 30.0))

    # API settings
    api_host: str = field(default_factory=lambda: _env_str("API_HOST", "0.0.0.0"))  # noqa: S104
    api_port: int = field(default_factory=lambda: _env_int("API_PORT", 8080))

    def validate(self) -> None:
        """Validate settings."""
        problems: list[str] = []

        low, high = FreshnessThreshold.SETTING_MIN, FreshnessThreshold.SETTING_MAX
        if not (low <= self.freshness_threshold_days <= high):
            problems.append(
                f"FRESHNESS_THRESHOLD_DAYS must be between {low} and {high}, "
                f"got {self.freshness_threshold_days}"
            )
        if self.run_mode.lower() not in RUN_MODES:
            problems.append(f"RUN_MODE must be one of {', '.join(RUN_MODES)}, got {self.run_mode!r}")
        if self.ai_gateway_enabled and not self.ai_gateway_api_key:
            problems.append("AI_GATEWAY_API_KEY is required when AI_GATEWAY_ENABLED is set")

        if problems:
            msg = f"Invalid configuration: {'; '.join(problems)}"
            raise ValueError(msg)

    @cached_property
    def threshold(self) -> FreshnessThreshold:
        """Get the freshness threshold."""
        return FreshnessThreshold.from_setting(self.freshness_threshold_days)

    @cached_property
    def gateway_config(self) -> GatewayConfig:
        """Get AI gateway configuration."""
        return GatewayConfig(
            enabled=self.ai_gateway_enabled,
            api_key=self.ai_gateway_api_key,
            url=self.ai_gateway_url,
            model=self.ai_gateway_model,
            timeout=self.ai_gateway_timeout,
        )


def load_settings() -> Settings:
    """Load and validate settings from environment."""
    settings = Settings()
    settings.validate()
    return settings
