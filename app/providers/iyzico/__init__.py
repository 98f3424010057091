from __future__ import annotations

from app.providers.iyzico.auth import (
    generate_authorization,
    generate_authorization_and_pki_string,
    generate_authorization_and_pki_string_for_create_payment,
)
from app.providers.iyzico.canonical import format_create_payment, format_initialize_bkm
from app.providers.iyzico.errors import (
    EmptyCredentials,
    EmptyInput,
    FieldMissing,
    IyzicoAuthError,
)
from app.providers.iyzico.headers import build_auth_headers
from app.providers.iyzico.signing import SignedAuthorization, get_authorization_and_pki_string
from app.providers.iyzico.validate import (
    validate_create_payment_request,
    validate_initialize_bkm_request,
)

__all__ = [
    "EmptyCredentials",
    "EmptyInput",
    "FieldMissing",
    "IyzicoAuthError",
    "SignedAuthorization",
    "build_auth_headers",
    "format_create_payment",
    "format_initialize_bkm",
    "generate_authorization",
    "generate_authorization_and_pki_string",
    "generate_authorization_and_pki_string_for_create_payment",
    "get_authorization_and_pki_string",
    "validate_create_payment_request",
    "validate_initialize_bkm_request",
]
