"""JSON body reading for the form endpoints.

Only bodies declared as JSON are parsed. Anything else (form posts,
``text/plain``, no body at all) reads as an empty object, so the endpoint's
own presence rules decide the response.
"""
from __future__ import annotations

import json
from typing import Any

from fastapi import Request

from backend.errors import INVALID_BODY_MESSAGE, ValidationError
from backend.models.schemas import ComplaintRequest, LoginRequest


def is_json_content_type(content_type: str | None) -> bool:
    media_type = (content_type or "").split(";", 1)[0].strip().lower()
    return media_type == "application/json" or media_type.endswith("+json")


async def read_json_object(request: Request) -> dict[str, Any]:
    """Return the request's JSON object body, or ``{}`` when it is not JSON.

    Raises ValidationError for a JSON body that fails to parse or is not an
    object.
    """
    if not is_json_content_type(request.headers.get("content-type")):
        return {}
    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        payload = json.loads(raw)
    except ValueError:
        raise ValidationError(INVALID_BODY_MESSAGE) from None
    if not isinstance(payload, dict):
        raise ValidationError(INVALID_BODY_MESSAGE)
    return payload


async def login_body(request: Request) -> LoginRequest:
    return LoginRequest.model_validate(await read_json_object(request))


async def complaint_body(request: Request) -> ComplaintRequest:
    return ComplaintRequest.model_validate(await read_json_object(request))
