

# app/providers/iyzico/validate.py
from __future__ import annotations

from typing import Any

from app.providers.iyzico.errors import FieldMissing
from app.providers.iyzico.fields import (
    CREATE_PAYMENT,
    INITIALIZE_BKM,
    ObjectSchema,
    field_value,
    schema_for,
)
from schemas import CreatePaymentRequest, InitializeBkmRequest


def validate_object(obj: Any, schema: ObjectSchema, prefix: str = "") -> None:
    """
    Walk `schema` depth-first and raise FieldMissing for the first required
    field that is empty ("" / None), zero (count fields) or, for the basket,
    an empty sequence. Individual basket items are not inspected.
    """
    for spec in schema.fields:
        value = field_value(obj, spec.attr)
        path = prefix + spec.attr

        if spec.kind == "text":
            if not value:
                raise FieldMissing(spec.label, path)
        elif spec.kind == "count":
            if not value:
                raise FieldMissing(spec.label, path, zero=True)
        elif spec.kind == "object":
            validate_object(value, spec.schema, prefix=path + ".")
        elif spec.kind == "items":
            if not value:
                raise FieldMissing(spec.label, path)


def validate_request(request: Any) -> None:
    validate_object(request, schema_for(request))


def validate_initialize_bkm_request(request: InitializeBkmRequest) -> None:
    validate_object(request, INITIALIZE_BKM)


def validate_create_payment_request(request: CreatePaymentRequest) -> None:
    validate_object(request, CREATE_PAYMENT)
