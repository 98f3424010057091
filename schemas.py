

# schemas.py
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Tuple


class IyzicoModel(BaseModel):
    """
    Base for iyzico request objects.

    Attributes are snake_case; the API's camelCase names are accepted and
    emitted as aliases. Unset scalars keep the zero value ("" / 0), which
    the validator treats the same as an empty value.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )


# -------- CARD / PARTIES --------
class PaymentCard(IyzicoModel):
    card_holder_name: str = ""
    card_number: str = ""
    expire_year: str = ""
    expire_month: str = ""
    cvc: str = ""
    register_card: int = 0  # 0 means unset


class Buyer(IyzicoModel):
    id: str = ""
    name: str = ""
    surname: str = ""
    identity_number: str = ""
    email: str = ""
    gsm_number: str = ""
    registration_date: str = ""
    last_login_date: str = ""
    registration_address: str = ""
    city: str = ""
    country: str = ""
    zip_code: str = ""
    ip: str = ""


class Address(IyzicoModel):
    address: str = ""
    zip_code: str = ""
    contact_name: str = ""
    city: str = ""
    country: str = ""


class BillingAddress(IyzicoModel):
    # no zip code on the payment billing address
    address: str = ""
    contact_name: str = ""
    city: str = ""
    country: str = ""


class BasketItem(IyzicoModel):
    id: str = ""
    name: str = ""
    category1: str = ""
    category2: str = ""
    item_type: str = ""
    price: str = ""


# -------- REQUESTS --------
class InitializeBkmRequest(IyzicoModel):
    locale: str = ""
    conversation_id: str = ""
    price: str = ""
    payment_channel: str = ""
    basket_id: str = ""
    payment_group: str = ""
    payment_card: PaymentCard = Field(default_factory=PaymentCard)
    buyer: Buyer = Field(default_factory=Buyer)
    shipping_address: Address = Field(default_factory=Address)
    billing_address: Address = Field(default_factory=Address)
    basket_items: Tuple[BasketItem, ...] = ()
    callback_url: str = ""


class CreatePaymentRequest(IyzicoModel):
    locale: str = ""
    conversation_id: str = ""
    price: str = ""
    paid_price: str = ""
    installment: int = 0  # 0 means unset
    payment_channel: str = ""
    basket_id: str = ""
    payment_group: str = ""
    payment_card: PaymentCard = Field(default_factory=PaymentCard)
    buyer: Buyer = Field(default_factory=Buyer)
    shipping_address: Address = Field(default_factory=Address)
    billing_address: BillingAddress = Field(default_factory=BillingAddress)
    basket_items: Tuple[BasketItem, ...] = ()
    currency: str = ""
