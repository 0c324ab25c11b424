"""Input rules for the login and complaint endpoints.

Presence checks follow the front end's notion of "filled in": a value is
missing when it is absent, null, an empty string, zero or false.
"""
from __future__ import annotations

import re
from typing import Any

from backend.errors import ValidationError
from backend.models.schemas import ComplaintRequest, LoginRequest

# +91, optional whitespace, 5 ASCII digits, optional whitespace, 5 ASCII digits
MOBILE_PATTERN = re.compile(r"\+91\s?[0-9]{5}\s?[0-9]{5}")
SECURITY_PIN_LENGTH = 6

CREDENTIALS_REQUIRED = "Mobile and password are required"
INVALID_MOBILE = "Invalid mobile number format. Use: +91 XXXXX XXXXX"
ALL_FIELDS_REQUIRED = "All fields are required"
INVALID_PIN = "Security PIN must be 6 digits"


def is_missing(value: Any) -> bool:
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (int, float)):
        return value == 0
    return False


def is_valid_mobile(mobile: Any) -> bool:
    return isinstance(mobile, str) and MOBILE_PATTERN.fullmatch(mobile) is not None


def validate_login(credentials: LoginRequest) -> None:
    """Raise ValidationError unless the credentials are well-formed.

    The password is only checked for presence.
    """
    if is_missing(credentials.mobile) or is_missing(credentials.password):
        raise ValidationError(CREDENTIALS_REQUIRED)
    if not is_valid_mobile(credentials.mobile):
        raise ValidationError(INVALID_MOBILE)


def validate_complaint(complaint: ComplaintRequest) -> None:
    """Raise ValidationError unless the complaint can be registered.

    ``securityPin`` is checked by length only: any 6-character string, or a
    6-element list, is accepted.
    """
    required = (
        complaint.fullName,
        complaint.problemType,
        complaint.securityPin,
        complaint.investmentExperience,
    )
    if any(is_missing(value) for value in required):
        raise ValidationError(ALL_FIELDS_REQUIRED)
    pin = complaint.securityPin
    if not isinstance(pin, (str, list)) or len(pin) != SECURITY_PIN_LENGTH:
        raise ValidationError(INVALID_PIN)
