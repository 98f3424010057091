import logging

from services.redaction import mask_api_key, redact_dict, redact_text


def test_redact_text_masks_email_phone_and_card():
    text = "buyer email@email.com phone +905350000000 card 5528790000000008"
    redacted = redact_text(text)
    assert "email@email.com" not in redacted
    assert "+905350000000" not in redacted
    assert "5528790000000008" not in redacted
    assert "552879******0008" in redacted


def test_redact_text_drops_authorization_header_value():
    assert redact_text("IYZWS key1:abcdef==") == "[REDACTED]"


def test_redact_dict_masks_sensitive_keys():
    payload = {
        "email": "email@email.com",
        "gsmNumber": "+905350000000",
        "Authorization": "IYZWS key1:abc=",
        "pki_string": "key1rndsecret[locale=tr]",
        "cvc": "123",
        "x-iyzi-rnd": "123456789",
        "items": [{"secretKey": "s"}],
    }
    redacted = redact_dict(payload)
    assert redacted["email"] == "e***@email.com"
    assert redacted["gsmNumber"] == "+90535****00"
    assert redacted["Authorization"] == "[REDACTED]"
    assert redacted["pki_string"] == "[REDACTED]"
    assert redacted["cvc"] == "[REDACTED]"
    assert redacted["x-iyzi-rnd"] == "123456789"
    assert redacted["items"] == [{"secretKey": "[REDACTED]"}]


def test_mask_api_key():
    assert mask_api_key("sandbox-api-key-123") == "sandbox-***"
    assert mask_api_key("short") == "***"
    assert mask_api_key("") == "***"


def test_log_line_uses_redaction_helper(caplog):
    logger = logging.getLogger("redaction-test")
    caplog.set_level(logging.INFO)
    msg = redact_text("email email@email.com card 5528790000000008")
    logger.info("payload=%s", msg)
    assert "email@email.com" not in caplog.text
    assert "5528790000000008" not in caplog.text


def test_redact_text_masks_card_segments_of_canonical_string():
    text = "[locale=tr,paymentCard=[cardHolderName=John Doe,cardNumber=5528790000000008,cvc=123,registerCard=1]]"
    redacted = redact_text(text)
    assert "cvc=123" not in redacted
    assert "John Doe" not in redacted
    assert "cardHolderName=***,cardNumber=552879******0008,cvc=***,registerCard=1" in redacted
