"""
Dispute data transfer models
Enum fields are read leniently and always written back by canonical name
"""

from datetime import datetime
from typing import List
from uuid import UUID
from pydantic import BaseModel, Field, field_validator

from skillsbarter.models.enums import DisputeReasonCode, DisputeResolution, DisputeStatus
from skillsbarter.models.converters import (
    parse_dispute_reason_code,
    parse_dispute_resolution,
    parse_dispute_status,
)


class EvidenceRequest(BaseModel):
    """A link to supporting material attached to a dispute"""
    link: str = Field(..., description="Absolute http(s) URL to the evidence")
    description: str = Field(..., min_length=1, max_length=500)

    @field_validator("link")
    @classmethod
    def validate_link(cls, v: str) -> str:
        v = v.strip()
        if not v.lower().startswith(("http://", "https://")):
            raise ValueError("Evidence link must be an http or https URL")
        return v


class OpenDisputeRequest(BaseModel):
    """Payload for opening a dispute against an agreement"""
    agreement_id: UUID = Field(..., description="Agreement under dispute")
    reason_code: DisputeReasonCode = Field(..., description="Reason, accepted in loose spellings")
    description: str = Field(..., min_length=20, max_length=2000)
    evidence: List[EvidenceRequest] = Field(default_factory=list)

    @field_validator("reason_code", mode="before")
    @classmethod
    def normalize_reason_code(cls, v):
        return parse_dispute_reason_code(v)


class RespondToDisputeRequest(BaseModel):
    """Respondent's answer to an open dispute"""
    response: str = Field(..., min_length=20, max_length=2000)
    evidence: List[EvidenceRequest] = Field(default_factory=list)


class ModeratorDecisionRequest(BaseModel):
    """Moderator ruling on an escalated dispute"""
    resolution: DisputeResolution = Field(..., description="Outcome, as a name or ordinal")
    notes: str = Field(..., min_length=20, max_length=2000)

    @field_validator("resolution", mode="before")
    @classmethod
    def normalize_resolution(cls, v):
        return parse_dispute_resolution(v)


class DisputeListResponse(BaseModel):
    """
    Summary row for dispute listings

    Stored rows may carry reason codes and resolutions written by older clients,
    so they go through the same lenient parsing as requests.
    """
    id: UUID
    agreement_id: UUID
    reason_code: DisputeReasonCode
    status: DisputeStatus = Field(default=DisputeStatus.OPEN)
    resolution: DisputeResolution = Field(default=DisputeResolution.NONE)
    score: int = 0
    complainer_name: str = ""
    respondent_name: str = ""
    created_at: datetime
    response_deadline: datetime
    requires_action: bool = False

    class Config:
        from_attributes = True

    @field_validator("reason_code", mode="before")
    @classmethod
    def normalize_reason_code(cls, v):
        return parse_dispute_reason_code(v)

    @field_validator("resolution", mode="before")
    @classmethod
    def normalize_resolution(cls, v):
        return parse_dispute_resolution(v)

    @field_validator("status", mode="before")
    @classmethod
    def validate_status(cls, v):
        return parse_dispute_status(v)

    @property
    def is_closed(self) -> bool:
        return self.status in (DisputeStatus.RESOLVED, DisputeStatus.CLOSED)
