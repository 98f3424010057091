

# app/providers/iyzico/headers.py
from __future__ import annotations

from typing import Dict, Optional

from app.providers.iyzico.config import iyzico_config
from app.providers.iyzico.signing import SignedAuthorization


def build_auth_headers(
    signed: SignedAuthorization,
    nonce: str,
    client_version: Optional[str] = None,
) -> Dict[str, str]:
    """
    Headers a transport sends with a signed request. The nonce must be the
    same value that went into the signature.
    """
    version = client_version if client_version is not None else iyzico_config().client_version
    h = {
        "Accept": "application/json",
        "Content-Type": "application/json",
        "Authorization": signed.authorization,
        "x-iyzi-rnd": nonce,
    }
    if version:
        h["x-iyzi-client-version"] = version
    return h
