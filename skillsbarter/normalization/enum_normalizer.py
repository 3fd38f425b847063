"""
Lenient enum normalization
Turns loosely formatted input (mixed case, separators, synonyms) into enum members
"""

from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Type
import structlog

logger = structlog.get_logger()

# Characters stripped from a token before alias lookup
SEPARATORS = ("-", "_", " ")


class EnumNormalizationError(ValueError):
    """Base class for enum normalization failures"""


class FormatError(EnumNormalizationError):
    """Raised when the input is not a kind of value the parser accepts"""


class UnsupportedValueError(EnumNormalizationError):
    """Raised when a string matches neither an alias nor a member name"""

    def __init__(self, label: str, value: str):
        self.label = label
        self.value = value
        super().__init__(f"Unsupported {label}: {value}")


def normalize_token(value: str) -> str:
    """
    Normalize a raw string for alias lookup

    Trims the value, removes hyphens, underscores and spaces, then lower-cases it.
    """
    normalized = value.strip()
    for separator in SEPARATORS:
        normalized = normalized.replace(separator, "")
    return normalized.lower()


class LenientEnumParser:
    """
    Parses raw values into members of a str-valued Enum

    Lookup order:
        1. integer ordinal (only when accept_numbers is set)
        2. alias table, keyed by normalized token
        3. case-insensitive match against canonical member names
    """

    def __init__(
        self,
        enum_cls: Type[Enum],
        aliases: Mapping[str, Enum],
        label: str,
        accept_numbers: bool = False,
    ):
        """
        Args:
            enum_cls: Enum whose values are the canonical member names
            aliases: Normalized alias -> member
            label: Human readable name used in error messages
            accept_numbers: Whether integer ordinals are accepted
        """
        self.enum_cls = enum_cls
        self.label = label
        self.accept_numbers = accept_numbers
        self.members = tuple(enum_cls)

        for alias, member in aliases.items():
            if alias != normalize_token(alias):
                raise ValueError(f"Alias '{alias}' for {label} is not in normalized form")
            if member not in self.members:
                raise ValueError(f"Alias '{alias}' maps outside {enum_cls.__name__}")

        self.aliases: Mapping[str, Enum] = MappingProxyType(dict(aliases))
        self._by_name: Mapping[str, Enum] = MappingProxyType(
            {member.value.lower(): member for member in self.members}
        )

    @property
    def expected_kinds(self) -> str:
        return "string or number" if self.accept_numbers else "string"

    def parse(self, raw: Any) -> Enum:
        """
        Parse a JSON-decoded value into an enum member

        Raises:
            FormatError: If raw is not a string (or in-range integer when numbers are accepted)
            UnsupportedValueError: If the string matches no alias or member name
        """
        if isinstance(raw, self.enum_cls):
            return raw

        # bool is an int subclass but never a valid ordinal
        if self.accept_numbers and isinstance(raw, int) and not isinstance(raw, bool):
            if 0 <= raw < len(self.members):
                return self.members[raw]

        if not isinstance(raw, str):
            raise FormatError(f"Expected {self.expected_kinds} for {self.label}")

        value = raw.strip()
        member = self.aliases.get(normalize_token(value))
        if member is not None:
            return member

        member = self._strict_match(value)
        if member is not None:
            logger.debug("Enum value matched by member name", label=self.label, value=value)
            return member

        logger.warning("Rejected unsupported enum value", label=self.label, value=value)
        raise UnsupportedValueError(self.label, value)

    def _strict_match(self, value: str) -> Optional[Enum]:
        return self._by_name.get(value.lower())

    def serialize(self, member: Enum) -> str:
        """Return the canonical member name; aliases are never emitted"""
        if not isinstance(member, self.enum_cls):
            raise FormatError(f"Expected {self.enum_cls.__name__} member for {self.label}")
        return member.value

    def alias_table(self) -> Dict[str, str]:
        """Alias table as plain strings, for documentation and diagnostics"""
        return {alias: member.value for alias, member in self.aliases.items()}


def to_canonical(member: Enum) -> str:
    """Canonical wire form of a str-valued enum member"""
    return member.value
