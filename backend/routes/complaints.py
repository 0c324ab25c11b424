"""Complaint submission routes."""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from backend.clock import iso_timestamp, new_complaint_id
from backend.models.schemas import (
    ComplaintDetails,
    ComplaintListResponse,
    ComplaintRecord,
    ComplaintRequest,
    ComplaintResponse,
)
from backend.request_body import complaint_body
from backend.validation import validate_complaint

router = APIRouter()
logger = logging.getLogger(__name__)


def build_record(complaint: ComplaintRequest) -> ComplaintRecord:
    """Derive the loggable record for a validated complaint. The PIN is masked."""
    return ComplaintRecord(
        complaintId=new_complaint_id(),
        userId=complaint.userId,
        fullName=complaint.fullName,
        problemType=complaint.problemType,
        investmentExperience=complaint.investmentExperience,
        timestamp=iso_timestamp(),
    )


@router.post("/submit-complaint", response_model=ComplaintResponse)
async def submit_complaint(complaint: ComplaintRequest = Depends(complaint_body)):
    """Validate a complaint and register it in the log."""
    logger.info(
        "Complaint submission: %s",
        complaint.model_dump(exclude={"securityPin"}),
    )

    validate_complaint(complaint)

    record = build_record(complaint)
    logger.info("Complaint registered: %s", record.model_dump())

    return ComplaintResponse(
        complaintId=record.complaintId,
        timestamp=record.timestamp,
        details=ComplaintDetails(
            name=complaint.fullName,
            problem=complaint.problemType,
            experience=complaint.investmentExperience,
        ),
    )


@router.get("/complaints", response_model=ComplaintListResponse)
async def list_complaints():
    """Placeholder listing; complaints are not stored."""
    return ComplaintListResponse()
