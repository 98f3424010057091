

# settings.py
from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from typing import Literal



class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )

    # -----------------------
    # Runtime
    # -----------------------
    ENV: Literal["dev", "staging", "prod"] = "dev"
    LOG_LEVEL: str = Field(default="INFO")

    # -----------------------
    # iyzico (Mode Switch)
    # -----------------------
    IYZICO_MODE: Literal["sandbox", "real"] = "sandbox"
    IYZICO_STRICT_STARTUP_VALIDATION: bool = False

    IYZICO_SANDBOX_API_KEY: str = ""
    IYZICO_SANDBOX_SECRET_KEY: str = ""
    IYZICO_SANDBOX_BASE_URL: str = "https://sandbox-api.iyzipay.com"

    IYZICO_REAL_API_KEY: str = ""
    IYZICO_REAL_SECRET_KEY: str = ""
    IYZICO_REAL_BASE_URL: str = "https://api.iyzipay.com"

    # Backward-compat (older single-key config)
    IYZICO_API_KEY: str = ""
    IYZICO_SECRET_KEY: str = ""

    IYZICO_CLIENT_VERSION: str = "iyzipay-python-auth-1.0.0"



settings = Settings()


def _credential_env_names(mode: str) -> list[tuple[str, str]]:
    prefix = "IYZICO_REAL_" if mode == "real" else "IYZICO_SANDBOX_"
    return [
        (prefix + "API_KEY", "IYZICO_API_KEY"),
        (prefix + "SECRET_KEY", "IYZICO_SECRET_KEY"),
    ]


def missing_credentials(mode: str) -> list[str]:
    """Mode-specific credential names with neither the value nor its single-key fallback set."""
    missing: list[str] = []
    for name, fallback in _credential_env_names(mode):
        value = (getattr(settings, name, "") or getattr(settings, fallback, "") or "").strip()
        if not value:
            missing.append(name)
    return missing


def validate_env_settings() -> None:
    """
    Fail fast when a deployed environment cannot sign iyzico requests.

    dev is allowed to run without credentials; the mode-level check
    lives in app.providers.iyzico.startup.
    """
    env = (settings.ENV or "dev").strip().lower()
    mode = (settings.IYZICO_MODE or "sandbox").strip().lower()

    if env == "dev":
        return

    missing = missing_credentials(mode)

    base_url_name = "IYZICO_REAL_BASE_URL" if mode == "real" else "IYZICO_SANDBOX_BASE_URL"
    if not (getattr(settings, base_url_name, "") or "").strip():
        missing.append(base_url_name)

    if missing:
        raise RuntimeError(
            f"Settings validation failed for ENV={env} IYZICO_MODE={mode}. "
            "Missing required env vars: " + ", ".join(sorted(missing))
        )
