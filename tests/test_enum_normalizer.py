"""
Tests for lenient dispute enum parsing
Covers alias lookup, strict member matching, ordinals and failure kinds
"""

import pytest

from skillsbarter.models import DisputeReasonCode, DisputeResolution, DisputeStatus
from skillsbarter.models.converters import (
    REASON_CODE_ALIASES,
    RESOLUTION_ALIASES,
    parse_dispute_reason_code,
    parse_dispute_resolution,
    parse_dispute_status,
    reason_code_parser,
    resolution_parser,
)
from skillsbarter.normalization import (
    EnumNormalizationError,
    FormatError,
    LenientEnumParser,
    UnsupportedValueError,
    normalize_token,
    to_canonical,
)


def _spellings(alias):
    """Loose spellings of a normalized alias"""
    return [
        alias,
        alias.upper(),
        f"  {alias.title()}  ",
        "-".join(alias),
        "_".join(alias.upper()),
    ]


class TestNormalizeToken:
    """Test cases for token normalization"""

    def test_strips_separators_and_case(self):
        assert normalize_token("  Work-Not_Delivered ") == "worknotdelivered"

    def test_empty_string(self):
        assert normalize_token("   ") == ""


class TestDisputeReasonCode:
    """Test cases for the reason code converter"""

    @pytest.mark.parametrize("alias,expected", sorted(REASON_CODE_ALIASES.items()))
    def test_aliases_in_any_spelling(self, alias, expected):
        """Every alias resolves regardless of case and separators"""
        for spelling in _spellings(alias):
            assert parse_dispute_reason_code(spelling) is expected

    @pytest.mark.parametrize("member", list(DisputeReasonCode))
    def test_member_names_any_case(self, member):
        assert parse_dispute_reason_code(member.value) is member
        assert parse_dispute_reason_code(member.value.upper()) is member
        assert parse_dispute_reason_code(member.value.lower()) is member

    def test_documented_synonyms(self):
        assert parse_dispute_reason_code("deadline") is DisputeReasonCode.DEADLINE_MISSED
        assert parse_dispute_reason_code("Quality Issue") is DisputeReasonCode.QUALITY_ISSUES
        assert parse_dispute_reason_code("communication") is DisputeReasonCode.COMMUNICATION_ISSUES
        assert parse_dispute_reason_code("no-delivery") is DisputeReasonCode.NO_DELIVERY
        assert parse_dispute_reason_code("non_delivery") is DisputeReasonCode.NON_DELIVERY

    def test_unknown_value_raises(self):
        with pytest.raises(UnsupportedValueError) as exc_info:
            parse_dispute_reason_code("  banana ")
        assert exc_info.value.value == "banana"
        assert str(exc_info.value) == "Unsupported dispute reason: banana"

    def test_empty_string_is_unsupported(self):
        with pytest.raises(UnsupportedValueError):
            parse_dispute_reason_code("")

    @pytest.mark.parametrize("raw", [0, 3, 1.5, True, None, {"code": "other"}, ["other"]])
    def test_non_string_raises_format_error(self, raw):
        """Numbers are not accepted for reason codes"""
        with pytest.raises(FormatError, match="Expected string for dispute reason"):
            parse_dispute_reason_code(raw)

    def test_round_trip(self):
        for member in DisputeReasonCode:
            assert parse_dispute_reason_code(reason_code_parser.serialize(member)) is member

    def test_errors_are_value_errors(self):
        assert issubclass(FormatError, EnumNormalizationError)
        assert issubclass(UnsupportedValueError, ValueError)


class TestDisputeResolution:
    """Test cases for the resolution converter"""

    @pytest.mark.parametrize("alias,expected", sorted(RESOLUTION_ALIASES.items()))
    def test_aliases_in_any_spelling(self, alias, expected):
        for spelling in _spellings(alias):
            assert parse_dispute_resolution(spelling) is expected

    def test_split_collapses_to_mutual_agreement(self):
        assert parse_dispute_resolution("Split") is DisputeResolution.MUTUAL_AGREEMENT

    def test_spaced_names(self):
        assert parse_dispute_resolution("favors complainer") is DisputeResolution.FAVORS_COMPLAINER
        assert parse_dispute_resolution("MODERATOR_DECISION") is DisputeResolution.MODERATOR_DECISION

    @pytest.mark.parametrize("ordinal,expected", list(enumerate(DisputeResolution)))
    def test_in_range_ordinals(self, ordinal, expected):
        assert parse_dispute_resolution(ordinal) is expected

    def test_ordinal_order_matches_declaration(self):
        assert parse_dispute_resolution(0) is DisputeResolution.NONE
        assert parse_dispute_resolution(4) is DisputeResolution.MUTUAL_AGREEMENT
        assert parse_dispute_resolution(5) is DisputeResolution.ABANDONED

    @pytest.mark.parametrize("raw", [-1, 6, 99])
    def test_out_of_range_ordinals_fail(self, raw):
        with pytest.raises(FormatError, match="Expected string or number for dispute resolution"):
            parse_dispute_resolution(raw)

    @pytest.mark.parametrize("raw", [True, False, 2.0, None, {}, []])
    def test_other_kinds_raise_format_error(self, raw):
        """Booleans are not treated as ordinals"""
        with pytest.raises(FormatError):
            parse_dispute_resolution(raw)

    def test_unknown_value_raises(self):
        with pytest.raises(UnsupportedValueError, match="Unsupported dispute resolution: draw"):
            parse_dispute_resolution("draw")

    def test_repeated_failure_is_stable(self):
        for _ in range(3):
            with pytest.raises(UnsupportedValueError):
                parse_dispute_resolution("banana")

    def test_round_trip(self):
        for member in DisputeResolution:
            assert parse_dispute_resolution(resolution_parser.serialize(member)) is member

    def test_write_path_never_emits_aliases(self):
        member = parse_dispute_resolution("split")
        assert to_canonical(member) == "MutualAgreement"


class TestDisputeStatus:
    """Statuses are parsed strictly"""

    def test_exact_name(self):
        assert parse_dispute_status("EscalatedToModerator") is DisputeStatus.ESCALATED_TO_MODERATOR

    def test_loose_spelling_rejected(self):
        with pytest.raises(UnsupportedValueError):
            parse_dispute_status("escalated-to-moderator")

    def test_non_string_rejected(self):
        with pytest.raises(FormatError):
            parse_dispute_status(1)


class TestLenientEnumParser:
    """Test cases for parser construction"""

    def test_rejects_unnormalized_alias(self):
        with pytest.raises(ValueError, match="normalized form"):
            LenientEnumParser(
                DisputeStatus,
                {"Under-Review": DisputeStatus.UNDER_REVIEW},
                label="dispute status",
            )

    def test_rejects_foreign_member(self):
        with pytest.raises(ValueError):
            LenientEnumParser(
                DisputeStatus,
                {"other": DisputeReasonCode.OTHER},
                label="dispute status",
            )

    def test_alias_table_is_read_only(self):
        with pytest.raises(TypeError):
            reason_code_parser.aliases["banana"] = DisputeReasonCode.OTHER

    def test_strict_fallback_without_alias(self):
        """Member names resolve even when the alias table is empty"""
        parser = LenientEnumParser(DisputeStatus, {}, label="dispute status")
        assert parser.parse(" underreview ") is DisputeStatus.UNDER_REVIEW
        assert parser.parse("CLOSED") is DisputeStatus.CLOSED
        with pytest.raises(UnsupportedValueError):
            parser.parse("under review")

    def test_members_pass_through(self):
        assert reason_code_parser.parse(DisputeReasonCode.OTHER) is DisputeReasonCode.OTHER

    def test_alias_table_dump(self):
        table = resolution_parser.alias_table()
        assert table["split"] == "MutualAgreement"
        assert table["none"] == "None"

    def test_serialize_rejects_foreign_member(self):
        with pytest.raises(FormatError):
            reason_code_parser.serialize(DisputeResolution.NONE)
