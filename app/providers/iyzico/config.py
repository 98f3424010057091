

# app/providers/iyzico/config.py
from __future__ import annotations

from dataclasses import dataclass

from settings import settings


def iyzico_mode() -> str:
    return (settings.IYZICO_MODE or "sandbox").strip().lower()


def is_strict_startup_validation() -> bool:
    return bool(settings.IYZICO_STRICT_STARTUP_VALIDATION)


@dataclass(frozen=True)
class IyzicoConfig:
    mode: str  # "sandbox" | "real"
    base_url: str
    api_key: str
    secret_key: str
    client_version: str

    @property
    def has_credentials(self) -> bool:
        return bool(self.api_key and self.secret_key)


def iyzico_config() -> IyzicoConfig:
    mode = iyzico_mode()
    if mode == "real":
        return IyzicoConfig(
            mode=mode,
            base_url=(settings.IYZICO_REAL_BASE_URL or "").strip().rstrip("/"),
            api_key=(settings.IYZICO_REAL_API_KEY or settings.IYZICO_API_KEY or "").strip(),
            secret_key=(settings.IYZICO_REAL_SECRET_KEY or settings.IYZICO_SECRET_KEY or "").strip(),
            client_version=(settings.IYZICO_CLIENT_VERSION or "").strip(),
        )
    return IyzicoConfig(
        mode=mode,
        base_url=(settings.IYZICO_SANDBOX_BASE_URL or "").strip().rstrip("/"),
        api_key=(settings.IYZICO_SANDBOX_API_KEY or settings.IYZICO_API_KEY or "").strip(),
        secret_key=(settings.IYZICO_SANDBOX_SECRET_KEY or settings.IYZICO_SECRET_KEY or "").strip(),
        client_version=(settings.IYZICO_CLIENT_VERSION or "").strip(),
    )
