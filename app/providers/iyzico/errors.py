

# app/providers/iyzico/errors.py
from __future__ import annotations


class IyzicoAuthError(ValueError):
    """Base for every failure that must stop a request from being sent."""


class EmptyCredentials(IyzicoAuthError):
    def __init__(self) -> None:
        super().__init__("apiKey, secretKey, or rnd is empty")


class EmptyInput(IyzicoAuthError):
    def __init__(self) -> None:
        super().__init__("apiKey, rnd, secretKey, or requestString is empty")


class FieldMissing(IyzicoAuthError):
    """
    First required field found empty (or zero) while walking the request.

    field: label used by the remote model, e.g. "Currency", "RegisterCard"
    path:  dotted attribute path, e.g. "shipping_address.zip_code"
    """

    def __init__(self, field: str, path: str = "", *, zero: bool = False) -> None:
        self.field = field
        self.path = path or field
        self.zero = zero
        super().__init__(f"{field} is {'zero' if zero else 'empty'}")
