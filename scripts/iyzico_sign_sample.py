import argparse
import json
import secrets
import sys

sys.path.insert(0, ".")

from app.providers.iyzico.auth import generate_authorization
from app.providers.iyzico.canonical import format_request
from app.providers.iyzico.config import iyzico_config
from app.providers.iyzico.headers import build_auth_headers
from schemas import (
    Address,
    BasketItem,
    BillingAddress,
    Buyer,
    CreatePaymentRequest,
    InitializeBkmRequest,
    PaymentCard,
)
from services.redaction import redact_dict, redact_text

CARD = PaymentCard(
    card_holder_name="John Doe",
    card_number="5528790000000008",
    expire_year="2030",
    expire_month="12",
    cvc="123",
    register_card=1,
)

BUYER = Buyer(
    id="BY789",
    name="John",
    surname="Doe",
    identity_number="74300864791",
    email="email@email.com",
    gsm_number="+905350000000",
    registration_date="2013-04-21 15:12:09",
    last_login_date="2015-10-05 12:43:35",
    registration_address="Nidakule Goztepe, Merdivenkoy Mah. Bora Sok. No:1",
    city="Istanbul",
    country="Turkey",
    zip_code="34732",
    ip="85.34.78.112",
)

ADDRESS = Address(
    address="Nidakule Goztepe, Merdivenkoy Mah. Bora Sok. No:1",
    zip_code="34742",
    contact_name="Jane Doe",
    city="Istanbul",
    country="Turkey",
)

ITEMS = (
    BasketItem(id="BI101", name="Binocular", category1="Collectibles", category2="Accessories", item_type="PHYSICAL", price="0.3"),
    BasketItem(id="BI102", name="Game code", category1="Game", category2="Online Game Items", item_type="VIRTUAL", price="0.5"),
    BasketItem(id="BI103", name="Usb", category1="Electronics", category2="Usb / Cable", item_type="PHYSICAL", price="0.2"),
)


def sample_request(kind: str):
    if kind == "bkm":
        return InitializeBkmRequest(
            locale="tr",
            conversation_id="123456789",
            price="1",
            payment_channel="WEB",
            basket_id="B67832",
            payment_group="PRODUCT",
            payment_card=CARD,
            buyer=BUYER,
            shipping_address=ADDRESS,
            billing_address=ADDRESS,
            basket_items=ITEMS,
            callback_url="https://www.merchant.com/callback",
        )
    return CreatePaymentRequest(
        locale="tr",
        conversation_id="123456789",
        price="1",
        paid_price="1.2",
        installment=1,
        payment_channel="WEB",
        basket_id="B67832",
        payment_group="PRODUCT",
        payment_card=CARD,
        buyer=BUYER,
        shipping_address=ADDRESS,
        billing_address=BillingAddress(
            address=ADDRESS.address,
            contact_name=ADDRESS.contact_name,
            city=ADDRESS.city,
            country=ADDRESS.country,
        ),
        basket_items=ITEMS,
        currency="TRY",
    )


def parse_args():
    parser = argparse.ArgumentParser(description="Sign a sample iyzico request with configured credentials")
    parser.add_argument("--kind", choices=("bkm", "payment"), default="payment")
    parser.add_argument("--nonce", default=None, help="defaults to a random value")
    return parser.parse_args()


def main() -> int:
    args = parse_args()
    cfg = iyzico_config()
    if not cfg.has_credentials:
        print("Missing iyzico credentials for mode=%s (run scripts/check_iyzico_env.py)" % cfg.mode)
        return 2

    nonce = args.nonce or secrets.token_hex(8)
    request = sample_request(args.kind)

    signed = generate_authorization(request, nonce, config=cfg)
    headers = build_auth_headers(signed, nonce, client_version=cfg.client_version)

    print("canonical request string:")
    print(redact_text(format_request(request)))
    print("headers:")
    print(json.dumps(redact_dict(headers), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
