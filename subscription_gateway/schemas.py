"""Request bodies and their validation into client errors."""
from __future__ import annotations

import re
from typing import Any, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from subscription_gateway.core.exceptions import ClientError

NOT_PROVIDED = "N/A"
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

ModelT = TypeVar("ModelT", bound=BaseModel)


class RequestModel(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)


class CustomerInfo(RequestModel):
    fullname: str = Field(min_length=1)
    email: str = Field(min_length=1)
    phone: Optional[str] = Field(default=None, validate_default=True)

    @field_validator("phone")
    @classmethod
    def default_phone(cls, value: Optional[str]) -> str:
        return value or NOT_PROVIDED


class SubscribeRequest(RequestModel):
    plan_id: str = Field(min_length=1)
    customer_info: CustomerInfo
    payment_method: Optional[str] = Field(default=None, validate_default=True)

    @field_validator("payment_method")
    @classmethod
    def default_payment_method(cls, value: Optional[str]) -> str:
        return value or NOT_PROVIDED


class ContactRequest(RequestModel):
    name: str = Field(min_length=1)
    email: str = Field(min_length=1)
    message: str = Field(min_length=1)

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: str) -> str:
        if value and not EMAIL_PATTERN.match(value):
            raise ValueError("Invalid email format")
        return value


def _reason(exc: ValidationError) -> str:
    """Human-readable reason for the first validation failure."""
    error = exc.errors()[0]
    field = ".".join(str(part) for part in error["loc"])
    if error["type"] in ("missing", "string_too_short") or error.get("input", "") is None:
        return f"Missing required field: {field}"
    if error["type"] == "value_error":
        return str(error.get("ctx", {}).get("error", error["msg"]))
    return f"Invalid value for {field}: {error['msg']}"


def parse_request(model: Type[ModelT], body: Any) -> ModelT:
    if not isinstance(body, dict):
        raise ClientError("Request body must be a JSON object")
    try:
        return model.model_validate(body)
    except ValidationError as exc:
        raise ClientError(_reason(exc)) from None


def parse_subscribe_request(body: Any) -> SubscribeRequest:
    return parse_request(SubscribeRequest, body)


def parse_contact_request(body: Any) -> ContactRequest:
    return parse_request(ContactRequest, body)
