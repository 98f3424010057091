# tests/conftest.py

import pytest

from schemas import (
    Address,
    BasketItem,
    BillingAddress,
    Buyer,
    CreatePaymentRequest,
    InitializeBkmRequest,
    PaymentCard,
)


API_KEY = "sandbox-api-key-123"
SECRET_KEY = "sandbox-secret-key-456"
NONCE = "123456789"


# ---------------------------
# Request building blocks
# ---------------------------

@pytest.fixture
def card() -> PaymentCard:
    return PaymentCard(
        card_holder_name="John Doe",
        card_number="5528790000000008",
        expire_year="2030",
        expire_month="12",
        cvc="123",
        register_card=1,
    )


@pytest.fixture
def buyer() -> Buyer:
    return Buyer(
        id="BY789",
        name="John",
        surname="Doe",
        identity_number="74300864791",
        email="email@email.com",
        gsm_number="+905350000000",
        registration_date="2013-04-21 15:12:09",
        last_login_date="2015-10-05 12:43:35",
        registration_address="Nidakule Goztepe",
        city="Istanbul",
        country="Turkey",
        zip_code="34732",
        ip="85.34.78.112",
    )


@pytest.fixture
def address() -> Address:
    return Address(
        address="Nidakule Goztepe",
        zip_code="34742",
        contact_name="Jane Doe",
        city="Istanbul",
        country="Turkey",
    )


@pytest.fixture
def billing_address() -> BillingAddress:
    return BillingAddress(
        address="Nidakule Goztepe",
        contact_name="Jane Doe",
        city="Istanbul",
        country="Turkey",
    )


@pytest.fixture
def basket_item() -> BasketItem:
    return BasketItem(
        id="BI101",
        name="Binocular",
        category1="Collectibles",
        category2="Accessories",
        item_type="PHYSICAL",
        price="0.3",
    )


# ---------------------------
# Fully valid requests
# ---------------------------

@pytest.fixture
def payment_request(card, buyer, address, billing_address, basket_item) -> CreatePaymentRequest:
    return CreatePaymentRequest(
        locale="tr",
        conversation_id="123456789",
        price="1",
        paid_price="1.2",
        installment=1,
        payment_channel="WEB",
        basket_id="B67832",
        payment_group="PRODUCT",
        payment_card=card,
        buyer=buyer,
        shipping_address=address,
        billing_address=billing_address,
        basket_items=[basket_item],
        currency="TRY",
    )


@pytest.fixture
def bkm_request(card, buyer, address, basket_item) -> InitializeBkmRequest:
    return InitializeBkmRequest(
        locale="tr",
        conversation_id="123456789",
        price="1",
        payment_channel="WEB",
        basket_id="B67832",
        payment_group="PRODUCT",
        payment_card=card,
        buyer=buyer,
        shipping_address=address,
        billing_address=address,
        basket_items=[basket_item],
        callback_url="https://www.merchant.com/callback",
    )


def _clear_field(request, path: str, value=""):
    """Copy of `request` with the dotted attribute `path` set to `value`."""
    head, _, tail = path.partition(".")
    if not tail:
        return request.model_copy(update={head: value})
    nested = getattr(request, head)
    return request.model_copy(update={head: _clear_field(nested, tail, value)})
