

# app/providers/iyzico/fields.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, Optional, Tuple

from schemas import CreatePaymentRequest, InitializeBkmRequest

FieldKind = Literal["text", "count", "object", "items"]


@dataclass(frozen=True)
class FieldSpec:
    key: str  # name in the canonical string
    attr: str  # model attribute
    label: str  # name reported by FieldMissing
    kind: FieldKind = "text"
    schema: Optional["ObjectSchema"] = None  # for kind object / items
    signed: bool = True  # rendered into the canonical string


@dataclass(frozen=True)
class ObjectSchema:
    """
    Ordered field list of one composite.

    Order is significant twice: validation reports the first missing field
    in this order, and the canonical string renders keys in this order.
    """

    name: str
    fields: Tuple[FieldSpec, ...]

    def signed_fields(self) -> Tuple[FieldSpec, ...]:
        return tuple(f for f in self.fields if f.signed)


def _text(key: str, label: str, attr: str | None = None, **kw: Any) -> FieldSpec:
    return FieldSpec(key=key, attr=attr or _snake(key), label=label, kind="text", **kw)


def _count(key: str, label: str, attr: str | None = None) -> FieldSpec:
    return FieldSpec(key=key, attr=attr or _snake(key), label=label, kind="count")


def _object(key: str, label: str, schema: ObjectSchema, attr: str | None = None, **kw: Any) -> FieldSpec:
    return FieldSpec(key=key, attr=attr or _snake(key), label=label, kind="object", schema=schema, **kw)


def field_value(obj: Any, attr: str) -> Any:
    if obj is None:
        return None
    return getattr(obj, attr, None)


def _snake(key: str) -> str:
    out = []
    for ch in key:
        if ch.isupper():
            out.append("_" + ch.lower())
        else:
            out.append(ch)
    return "".join(out)


# -------- NESTED --------
PAYMENT_CARD = ObjectSchema(
    name="payment_card",
    fields=(
        _text("cardHolderName", "CardHolderName"),
        _text("cardNumber", "CardNumber"),
        _text("expireYear", "ExpireYear"),
        _text("expireMonth", "ExpireMonth"),
        _text("cvc", "Cvc"),
        _count("registerCard", "RegisterCard"),
    ),
)

BUYER = ObjectSchema(
    name="buyer",
    fields=(
        _text("id", "Id"),
        _text("name", "Name"),
        _text("surname", "Surname"),
        _text("identityNumber", "IdentityNumber"),
        _text("email", "Email"),
        _text("gsmNumber", "GsmNumber"),
        _text("registrationDate", "RegistrationDate"),
        _text("lastLoginDate", "LastLoginDate"),
        _text("registrationAddress", "RegistrationAddress"),
        _text("city", "City"),
        _text("country", "Country"),
        _text("zipCode", "ZipCode"),
        _text("ip", "Ip"),
    ),
)

ADDRESS = ObjectSchema(
    name="address",
    fields=(
        _text("address", "Address"),
        _text("zipCode", "ZipCode"),
        _text("contactName", "ContactName"),
        _text("city", "City"),
        _text("country", "Country"),
    ),
)

BILLING_ADDRESS = ObjectSchema(
    name="billing_address",
    fields=(
        _text("address", "Address"),
        _text("contactName", "ContactName"),
        _text("city", "City"),
        _text("country", "Country"),
    ),
)

# Items are not validated one by one, only the sequence must be non-empty.
# price is rendered before name.
BASKET_ITEM = ObjectSchema(
    name="basket_item",
    fields=(
        _text("id", "Id"),
        _text("price", "Price"),
        _text("name", "Name"),
        _text("category1", "Category1"),
        _text("category2", "Category2"),
        _text("itemType", "ItemType"),
    ),
)

BASKET_ITEMS = FieldSpec(
    key="basketItems",
    attr="basket_items",
    label="BasketItems",
    kind="items",
    schema=BASKET_ITEM,
)


# -------- REQUEST KINDS --------
# paymentChannel and paymentCard are validated but not signed for BKM.
INITIALIZE_BKM = ObjectSchema(
    name="initialize_bkm",
    fields=(
        _text("locale", "Locale"),
        _text("conversationId", "ConversationID"),
        _text("price", "Price"),
        _text("paymentChannel", "PaymentChannel", signed=False),
        _text("basketId", "BasketID"),
        _text("paymentGroup", "PaymentGroup"),
        _object("paymentCard", "PaymentCard", PAYMENT_CARD, signed=False),
        _object("buyer", "Buyer", BUYER),
        _object("shippingAddress", "ShippingAddress", ADDRESS),
        _object("billingAddress", "BillingAddress", ADDRESS),
        BASKET_ITEMS,
        _text("callbackUrl", "CallbackURL"),
    ),
)

CREATE_PAYMENT = ObjectSchema(
    name="create_payment",
    fields=(
        _text("locale", "Locale"),
        _text("conversationId", "ConversationID"),
        _text("price", "Price"),
        _text("paidPrice", "PaidPrice"),
        _count("installment", "Installment"),
        _text("paymentChannel", "PaymentChannel"),
        _text("basketId", "BasketID"),
        _text("paymentGroup", "PaymentGroup"),
        _object("paymentCard", "PaymentCard", PAYMENT_CARD),
        _object("buyer", "Buyer", BUYER),
        _object("shippingAddress", "ShippingAddress", ADDRESS),
        _object("billingAddress", "BillingAddress", BILLING_ADDRESS),
        BASKET_ITEMS,
        _text("currency", "Currency"),
    ),
)


REQUEST_SCHEMAS: dict[type, ObjectSchema] = {
    InitializeBkmRequest: INITIALIZE_BKM,
    CreatePaymentRequest: CREATE_PAYMENT,
}


def schema_for(request: Any) -> ObjectSchema:
    for cls in type(request).__mro__:
        schema = REQUEST_SCHEMAS.get(cls)
        if schema is not None:
            return schema
    raise TypeError(f"Unsupported iyzico request type: {type(request).__name__}")
