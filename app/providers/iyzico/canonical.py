

# app/providers/iyzico/canonical.py
from __future__ import annotations

from typing import Any, Iterable

from app.providers.iyzico.fields import (
    ADDRESS,
    BASKET_ITEM,
    BILLING_ADDRESS,
    BUYER,
    CREATE_PAYMENT,
    INITIALIZE_BKM,
    PAYMENT_CARD,
    FieldSpec,
    ObjectSchema,
    field_value,
    schema_for,
)
from schemas import (
    Address,
    BasketItem,
    BillingAddress,
    Buyer,
    CreatePaymentRequest,
    InitializeBkmRequest,
    PaymentCard,
)

# iyzico signs a bracketed key=value rendering of the request:
#   [locale=tr,conversationId=123,buyer=[id=BY1,...],basketItems=[[id=..], [id=..]],currency=TRY]
# Keys are always emitted; a missing value renders as "key=".


def _render_value(spec: FieldSpec, value: Any) -> str:
    if spec.kind == "object":
        return render_object(value, spec.schema)
    if spec.kind == "items":
        return "[" + _join_items(value, spec.schema) + "]"
    if spec.kind == "count":
        return "%d" % int(value or 0)
    return "" if value is None else str(value)


def _join_items(items: Iterable[Any] | None, schema: ObjectSchema) -> str:
    return ", ".join(render_object(item, schema) for item in (items or ()))


def render_object(obj: Any, schema: ObjectSchema) -> str:
    parts = [
        f"{spec.key}={_render_value(spec, field_value(obj, spec.attr))}"
        for spec in schema.signed_fields()
    ]
    return "[" + ",".join(parts) + "]"


def format_request(request: Any) -> str:
    return render_object(request, schema_for(request))


def format_basket_items(items: Iterable[BasketItem]) -> str:
    """Item blocks joined by ", " (without the enclosing brackets)."""
    return _join_items(items, BASKET_ITEM)


def format_payment_card(card: PaymentCard) -> str:
    return render_object(card, PAYMENT_CARD)


def format_buyer(buyer: Buyer) -> str:
    return render_object(buyer, BUYER)


def format_address(address: Address) -> str:
    return render_object(address, ADDRESS)


def format_billing_address(address: BillingAddress) -> str:
    return render_object(address, BILLING_ADDRESS)


def format_initialize_bkm(request: InitializeBkmRequest) -> str:
    return render_object(request, INITIALIZE_BKM)


def format_create_payment(request: CreatePaymentRequest) -> str:
    return render_object(request, CREATE_PAYMENT)
