"""Pydantic schemas for API."""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

MASKED_PIN = "******"


class LoginRequest(BaseModel):
    """Login form body.

    Fields accept any JSON value; presence and format are decided in
    ``backend.validation`` so failures map to 400, not 422.
    """

    mobile: Any = None
    password: Any = None


class LoginResponse(BaseModel):
    success: bool = True
    userId: str
    message: str = "Login successful"
    mobile: str
    timestamp: str


class ComplaintRequest(BaseModel):
    """Complaint form body. ``userId`` is optional and never checked."""

    userId: Any = None
    fullName: Any = None
    problemType: Any = None
    securityPin: Any = None
    investmentExperience: Any = None


class ComplaintRecord(BaseModel):
    """A registered complaint as written to the log."""

    complaintId: str
    userId: Any = None
    fullName: Any
    problemType: Any
    investmentExperience: Any
    securityPin: str = MASKED_PIN
    timestamp: str
    status: str = "pending"


class ComplaintDetails(BaseModel):
    name: Any
    problem: Any
    experience: Any


class ComplaintResponse(BaseModel):
    success: bool = True
    complaintId: str
    message: str = "Complaint submitted successfully"
    timestamp: str
    details: ComplaintDetails


class ComplaintListResponse(BaseModel):
    success: bool = True
    message: str = "This would return all complaints from database"
    complaints: list[dict[str, Any]] = Field(default_factory=list)


class ApiInfoResponse(BaseModel):
    message: str = "SproDeal API is running"
    status: str = "success"
    version: str
    endpoints: list[str]


class SelfTestResponse(BaseModel):
    message: str = "Backend is working!"
    status: str = "success"
    timestamp: str


class HealthResponse(BaseModel):
    status: str = "healthy"
    uptime: float
    timestamp: str
