"""
Lenient converters for dispute enums
Used by the dispute DTOs when reading payloads from clients and legacy data
"""

from typing import Any

from skillsbarter.models.enums import DisputeReasonCode, DisputeResolution, DisputeStatus
from skillsbarter.normalization import FormatError, LenientEnumParser, UnsupportedValueError


REASON_CODE_ALIASES = {
    "nodelivery": DisputeReasonCode.NO_DELIVERY,
    "nondelivery": DisputeReasonCode.NON_DELIVERY,
    "worknotdelivered": DisputeReasonCode.WORK_NOT_DELIVERED,
    "latedelivery": DisputeReasonCode.LATE_DELIVERY,
    "deadline": DisputeReasonCode.DEADLINE_MISSED,
    "deadlinemissed": DisputeReasonCode.DEADLINE_MISSED,
    "poorquality": DisputeReasonCode.POOR_QUALITY,
    "qualityissue": DisputeReasonCode.QUALITY_ISSUES,
    "qualityissues": DisputeReasonCode.QUALITY_ISSUES,
    "worknotasdescribed": DisputeReasonCode.WORK_NOT_AS_DESCRIBED,
    "communication": DisputeReasonCode.COMMUNICATION_ISSUES,
    "communicationissues": DisputeReasonCode.COMMUNICATION_ISSUES,
    "other": DisputeReasonCode.OTHER,
}

RESOLUTION_ALIASES = {
    "favorscomplainer": DisputeResolution.FAVORS_COMPLAINER,
    "favorsrespondent": DisputeResolution.FAVORS_RESPONDENT,
    "moderatordecision": DisputeResolution.MODERATOR_DECISION,
    "mutualagreement": DisputeResolution.MUTUAL_AGREEMENT,
    "abandoned": DisputeResolution.ABANDONED,
    # TODO: confirm with product whether a split outcome needs its own member
    "split": DisputeResolution.MUTUAL_AGREEMENT,
    "none": DisputeResolution.NONE,
}

reason_code_parser = LenientEnumParser(
    DisputeReasonCode,
    REASON_CODE_ALIASES,
    label="dispute reason",
)

resolution_parser = LenientEnumParser(
    DisputeResolution,
    RESOLUTION_ALIASES,
    label="dispute resolution",
    accept_numbers=True,
)


def parse_dispute_reason_code(raw: Any) -> DisputeReasonCode:
    """Parse a reason code; only strings are accepted"""
    return reason_code_parser.parse(raw)


def parse_dispute_resolution(raw: Any) -> DisputeResolution:
    """Parse a resolution from a string or an in-range ordinal"""
    return resolution_parser.parse(raw)


def parse_dispute_status(raw: Any) -> DisputeStatus:
    """
    Parse a dispute status by exact canonical name

    Statuses are written by the application itself, so no aliasing is applied.
    """
    if isinstance(raw, DisputeStatus):
        return raw
    if not isinstance(raw, str):
        raise FormatError("Expected string for dispute status")
    try:
        return DisputeStatus(raw)
    except ValueError:
        raise UnsupportedValueError("dispute status", raw)
