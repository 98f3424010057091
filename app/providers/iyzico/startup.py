

# app/providers/iyzico/startup.py
from __future__ import annotations

import logging

from app.providers.iyzico.config import (
    iyzico_config,
    iyzico_mode,
    is_strict_startup_validation,
)

logger = logging.getLogger("iyzico.startup")


def validate_iyzico_startup() -> None:
    mode = iyzico_mode()
    strict = is_strict_startup_validation()

    logger.info("iyzico startup check: mode=%s strict=%s", mode, strict)

    if mode not in ("sandbox", "real"):
        raise RuntimeError(
            "iyzico startup validation failed. "
            f"Invalid IYZICO_MODE={mode!r}. Allowed: sandbox, real"
        )

    if mode == "sandbox" and not strict:
        return

    cfg = iyzico_config()
    prefix = "IYZICO_REAL_" if mode == "real" else "IYZICO_SANDBOX_"

    missing: list[str] = []
    if not cfg.api_key:
        missing.append(prefix + "API_KEY")
    if not cfg.secret_key:
        missing.append(prefix + "SECRET_KEY")
    if not cfg.base_url:
        missing.append(prefix + "BASE_URL")

    if missing:
        raise RuntimeError(
            "iyzico startup validation failed. "
            f"mode={mode} Missing required env vars: " + ", ".join(sorted(missing))
        )
