"""
Data models for the SkillsBarter model layer
"""

from .enums import DisputeStatus, DisputeReasonCode, DisputeResolution, OfferStatusCode
from .converters import (
    parse_dispute_reason_code,
    parse_dispute_resolution,
    parse_dispute_status,
)
from .dispute import (
    EvidenceRequest,
    OpenDisputeRequest,
    RespondToDisputeRequest,
    ModeratorDecisionRequest,
    DisputeListResponse,
)
from .skill import (
    SkillCategory,
    Skill,
    Offer,
    SkillResponse,
    GetSkillsRequest,
    PaginatedResponse,
)

__all__ = [
    "DisputeStatus",
    "DisputeReasonCode",
    "DisputeResolution",
    "OfferStatusCode",
    "parse_dispute_reason_code",
    "parse_dispute_resolution",
    "parse_dispute_status",
    "EvidenceRequest",
    "OpenDisputeRequest",
    "RespondToDisputeRequest",
    "ModeratorDecisionRequest",
    "DisputeListResponse",
    "SkillCategory",
    "Skill",
    "Offer",
    "SkillResponse",
    "GetSkillsRequest",
    "PaginatedResponse",
]
