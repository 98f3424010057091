

# app/providers/iyzico/signing.py
from __future__ import annotations

import base64
import hashlib
from typing import NamedTuple

from app.providers.iyzico.errors import EmptyInput

AUTH_SCHEME = "IYZWS"


class SignedAuthorization(NamedTuple):
    authorization: str
    pki_string: str


def get_authorization_and_pki_string(
    api_key: str,
    nonce: str,
    secret_key: str,
    request_string: str,
) -> SignedAuthorization:
    """
    IYZWS v1 signature:
      pki = apiKey + rnd + secretKey + requestString
      Authorization: IYZWS {apiKey}:{base64(sha1(pki))}

    The pki string embeds the secret key; never log it.
    """
    if not (api_key and nonce and secret_key and request_string):
        raise EmptyInput()

    pki_string = api_key + nonce + secret_key + request_string
    digest = hashlib.sha1(pki_string.encode("utf-8")).digest()
    hash_b64 = base64.b64encode(digest).decode("ascii")

    return SignedAuthorization(
        authorization=f"{AUTH_SCHEME} {api_key}:{hash_b64}",
        pki_string=pki_string,
    )
