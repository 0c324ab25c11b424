"""Mock login route."""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from backend.clock import iso_timestamp, new_user_id
from backend.models.schemas import LoginRequest, LoginResponse
from backend.request_body import login_body
from backend.validation import validate_login

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/login", response_model=LoginResponse)
async def login(credentials: LoginRequest = Depends(login_body)):
    """Accept any well-formed Indian mobile number and non-empty password.

    No credential store is consulted; a fresh ``USER-`` id is issued per call.
    """
    logger.info("Login attempt: mobile=%r", credentials.mobile)

    validate_login(credentials)

    return LoginResponse(
        userId=new_user_id(),
        mobile=credentials.mobile,
        timestamp=iso_timestamp(),
    )
