

# app/providers/iyzico/auth.py
from __future__ import annotations

import logging
from typing import Any, Optional

from app.providers.iyzico.canonical import render_object
from app.providers.iyzico.config import IyzicoConfig, iyzico_config
from app.providers.iyzico.errors import EmptyCredentials, FieldMissing
from app.providers.iyzico.fields import (
    CREATE_PAYMENT,
    INITIALIZE_BKM,
    ObjectSchema,
    schema_for,
)
from app.providers.iyzico.signing import (
    SignedAuthorization,
    get_authorization_and_pki_string,
)
from app.providers.iyzico.validate import validate_object
from schemas import CreatePaymentRequest, InitializeBkmRequest
from services.redaction import mask_api_key

logger = logging.getLogger("iyzico.auth")


def _build(
    api_key: str,
    secret_key: str,
    request: Any,
    nonce: str,
    schema: ObjectSchema,
) -> SignedAuthorization:
    # credentials -> validate -> canonicalize -> sign; first failure wins
    if not (api_key and secret_key and nonce):
        raise EmptyCredentials()

    try:
        validate_object(request, schema)
    except FieldMissing as exc:
        logger.warning(
            "iyzico %s request rejected: field=%s path=%s",
            schema.name,
            exc.field,
            exc.path,
        )
        raise

    request_string = render_object(request, schema)
    signed = get_authorization_and_pki_string(api_key, nonce, secret_key, request_string)

    logger.info(
        "iyzico %s authorization built: api_key=%s conversation_id=%s basket_items=%d",
        schema.name,
        mask_api_key(api_key),
        request.conversation_id,
        len(request.basket_items),
    )
    return signed


def _require_type(request: Any, expected: type) -> None:
    if not isinstance(request, expected):
        raise TypeError(
            f"Expected {expected.__name__}, got {type(request).__name__}"
        )


def generate_authorization_and_pki_string(
    api_key: str,
    secret_key: str,
    request: InitializeBkmRequest,
    nonce: str,
) -> SignedAuthorization:
    """Authorization header + pki string for an InitializeBkm (redirect) request."""
    _require_type(request, InitializeBkmRequest)
    return _build(api_key, secret_key, request, nonce, INITIALIZE_BKM)


def generate_authorization_and_pki_string_for_create_payment(
    api_key: str,
    secret_key: str,
    request: CreatePaymentRequest,
    nonce: str,
) -> SignedAuthorization:
    """Authorization header + pki string for a direct card payment."""
    _require_type(request, CreatePaymentRequest)
    return _build(api_key, secret_key, request, nonce, CREATE_PAYMENT)


def generate_authorization(
    request: Any,
    nonce: str,
    config: Optional[IyzicoConfig] = None,
) -> SignedAuthorization:
    """
    Pick the request kind from the model type and sign with configured
    credentials (settings) unless a config is passed in.
    """
    schema = schema_for(request)
    cfg = config or iyzico_config()
    return _build(cfg.api_key, cfg.secret_key, request, nonce, schema)
