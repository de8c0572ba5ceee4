import re
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
EXPIRY_RE = re.compile(r"^(0[1-9]|1[0-2])/\d{2}$")
CVV_RE = re.compile(r"^\d{3,4}$")

ShippingMethod = Literal["standard", "express", "overnight"]


def _required(value: str) -> str:
    if not value or not value.strip():
        raise ValueError("must not be blank")
    return value.strip()


class ShippingForm(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    first_name: str = Field(alias="firstName")
    last_name: str = Field(alias="lastName")
    email: str
    phone: str
    address: str
    city: str
    state: str
    zip_code: str = Field(alias="zipCode")

    @field_validator("first_name", "last_name", "phone", "address", "city", "state", "zip_code")
    @classmethod
    def not_blank(cls, v):
        return _required(v)

    @field_validator("email")
    @classmethod
    def valid_email(cls, v):
        v = _required(v)
        if not EMAIL_RE.match(v):
            raise ValueError("invalid email address")
        return v


class PaymentForm(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    card_number: str = Field(alias="cardNumber")
    expiry_date: str = Field(alias="expiryDate")
    cvv: str
    cardholder_name: str = Field(alias="cardholderName")

    @field_validator("card_number")
    @classmethod
    def sixteen_digits(cls, v):
        digits = re.sub(r"\s", "", v)
        if not re.fullmatch(r"\d{16}", digits):
            raise ValueError("card number must be 16 digits")
        return digits

    @field_validator("expiry_date")
    @classmethod
    def mm_yy(cls, v):
        if not EXPIRY_RE.match(v):
            raise ValueError("expiry date must be MM/YY")
        return v

    @field_validator("cvv")
    @classmethod
    def cvv_digits(cls, v):
        if not CVV_RE.match(v):
            raise ValueError("invalid CVV")
        return v

    @field_validator("cardholder_name")
    @classmethod
    def cardholder_not_blank(cls, v):
        return _required(v)


class QuoteRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    shipping_method: ShippingMethod = Field(default="standard", alias="shippingMethod")


class CheckoutRequest(QuoteRequest):
    shipping_address: ShippingForm = Field(alias="shippingAddress")
    payment: PaymentForm
