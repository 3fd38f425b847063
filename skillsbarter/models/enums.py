"""
Dispute and offer enumerations
Member values are the canonical wire names; declaration order defines the ordinal
"""

from enum import Enum


class DisputeStatus(str, Enum):
    """Lifecycle tag of a dispute"""
    OPEN = "Open"
    AWAITING_RESPONSE = "AwaitingResponse"  # Waiting on the respondent
    UNDER_REVIEW = "UnderReview"
    ESCALATED_TO_MODERATOR = "EscalatedToModerator"
    RESOLVED = "Resolved"
    CLOSED = "Closed"


class DisputeReasonCode(str, Enum):
    """Why a dispute was opened"""
    WORK_NOT_DELIVERED = "WorkNotDelivered"
    WORK_NOT_AS_DESCRIBED = "WorkNotAsDescribed"
    QUALITY_ISSUES = "QualityIssues"
    DEADLINE_MISSED = "DeadlineMissed"
    COMMUNICATION_ISSUES = "CommunicationIssues"
    OTHER = "Other"
    NON_DELIVERY = "NonDelivery"
    NO_DELIVERY = "NoDelivery"
    LATE_DELIVERY = "LateDelivery"
    POOR_QUALITY = "PoorQuality"


class DisputeResolution(str, Enum):
    """Outcome of a dispute"""
    NONE = "None"  # Not resolved yet
    FAVORS_COMPLAINER = "FavorsComplainer"
    FAVORS_RESPONDENT = "FavorsRespondent"
    MODERATOR_DECISION = "ModeratorDecision"
    MUTUAL_AGREEMENT = "MutualAgreement"
    ABANDONED = "Abandoned"


class OfferStatusCode(str, Enum):
    """Stored status code of an offer"""
    ACTIVE = "Active"
    PAUSED = "Paused"
    ARCHIVED = "Archived"
