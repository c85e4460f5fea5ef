"""Environment-based configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_float(name: str, default: float) -> float:
    try:
        return float(os.getenv(name, default))
    except ValueError:
        return default


def _env_optional_int(name: str) -> int | None:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        return None


@dataclass(frozen=True)
class BaseConfig:
    """Base configuration shared by all environments."""

    APP_ENV: str = os.getenv("APP_ENV", "development")
    SECRET_KEY: str = os.getenv("SECRET_KEY", "dev-secret")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Tenant identification
    TENANT_COOKIE_NAME: str = os.getenv("TENANT_COOKIE_NAME", "lottery_tenant_name")
    TENANT_COOKIE_MAX_AGE: int = int(_env_float("TENANT_COOKIE_MAX_AGE", 3600 * 24 * 365))
    # Number of reverse proxies in front of the app whose X-Forwarded-For is trusted
    PROXY_FIX_HOPS: int = int(_env_float("PROXY_FIX_HOPS", 0))

    # Session expiry
    SESSION_MAX_IDLE_SECONDS: float = _env_float("SESSION_MAX_IDLE_SECONDS", 3600)
    SWEEP_INTERVAL_SECONDS: float = _env_float("SWEEP_INTERVAL_SECONDS", 600)
    SWEEP_ENABLED: bool = _env_bool("SWEEP_ENABLED", True)

    # None -> seeded from wall-clock time at startup
    RANDOM_SEED: int | None = _env_optional_int("RANDOM_SEED")


@dataclass(frozen=True)
class DevelopmentConfig(BaseConfig):
    """Development configuration."""

    DEBUG: bool = True


@dataclass(frozen=True)
class ProductionConfig(BaseConfig):
    """Production configuration."""

    DEBUG: bool = False


@dataclass(frozen=True)
class TestingConfig(BaseConfig):
    """Configuration for the test suite: no background sweep, fixed seed."""

    __test__ = False

    APP_ENV: str = "testing"
    TESTING: bool = True
    DEBUG: bool = False
    SWEEP_ENABLED: bool = False
    RANDOM_SEED: int | None = 1234


def get_config() -> type[BaseConfig]:
    """Resolve configuration class based on APP_ENV."""

    env = os.getenv("APP_ENV", "development").lower().strip()
    if env == "production":
        return ProductionConfig
    if env == "testing":
        return TestingConfig
    return DevelopmentConfig
