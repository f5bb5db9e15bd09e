"""
Identifier Taxonomy

Static catalogue of the safe-harbor identifier categories. Each category is
described by one or more attribute rules: a set of acceptable column header
labels (each with its own edit-distance tolerance) and an optional value
pattern used to detect the category from cell content.

The catalogue is built once at import time and never mutated.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Tuple

from harborcheck.services import value_patterns
from harborcheck.services.label_matcher import label_distance_within


class TaxonomyError(ValueError):
    """Raised when a label or pattern rule is malformed."""


class IdentifierCategory(str, Enum):
    NAME = "name"
    GEOGRAPHIC_SUBDIVISION = "geographic_subdivision"
    DATE = "date"
    TELEPHONE_NUMBER = "telephone_number"
    EMAIL_ADDRESS = "email_address"
    SOCIAL_SECURITY_NUMBER = "social_security_number"
    ACCOUNT_NUMBER = "account_number"
    CERTIFICATE_NUMBER = "certificate_number"
    VEHICLE_IDENTIFIER = "vehicle_identifier"
    DEVICE_IDENTIFIER = "device_identifier"
    URL = "url"
    IP_ADDRESS = "ip_address"


@dataclass(frozen=True)
class LabelRule:
    """An expected column header and the edit distance it tolerates."""
    text: str
    tolerance: int = 0

    def __post_init__(self):
        if not isinstance(self.text, str) or not self.text.strip():
            raise TaxonomyError("Label text must be a non-empty string")
        if not isinstance(self.tolerance, int) or isinstance(self.tolerance, bool) or self.tolerance < 0:
            raise TaxonomyError(
                f"Label '{self.text}' tolerance must be a non-negative integer, got {self.tolerance!r}"
            )

    def matches(self, header: str) -> bool:
        return label_distance_within(header, self.text, self.tolerance)


@dataclass(frozen=True)
class PatternRule:
    """A named value-shape predicate."""
    name: str
    predicate: Callable[[str], bool]
    # Heuristic patterns are tested after every other pattern
    low_confidence: bool = False

    def __post_init__(self):
        if not self.name:
            raise TaxonomyError("Pattern rules need a name")
        if not callable(self.predicate):
            raise TaxonomyError(f"Pattern '{self.name}' predicate is not callable")

    def matches(self, value: str) -> bool:
        return bool(self.predicate(value))


@dataclass(frozen=True)
class AttributeRule:
    """Header labels and optional value pattern for one identifier category."""
    category: IdentifierCategory
    labels: Tuple[LabelRule, ...]
    pattern: Optional[PatternRule] = None

    def __post_init__(self):
        if not isinstance(self.category, IdentifierCategory):
            raise TaxonomyError(f"Unknown identifier category: {self.category!r}")
        labels = tuple(self.labels)
        if not labels:
            raise TaxonomyError(f"Rule for {self.category.value} has no labels")
        for label in labels:
            if not isinstance(label, LabelRule):
                raise TaxonomyError(f"Rule for {self.category.value} has a non-label entry: {label!r}")
        if self.pattern is not None and not isinstance(self.pattern, PatternRule):
            raise TaxonomyError(f"Rule for {self.category.value} has an invalid pattern: {self.pattern!r}")
        object.__setattr__(self, "labels", labels)

    def matches_label(self, header: str) -> bool:
        return any(label.matches(header) for label in self.labels)

    def matches_pattern(self, value: str) -> bool:
        if self.pattern is None:
            return False
        return self.pattern.matches(value)


def _labels(*entries) -> Tuple[LabelRule, ...]:
    """Build labels from bare strings (exact) or (text, tolerance) pairs."""
    return tuple(
        LabelRule(entry) if isinstance(entry, str) else LabelRule(*entry)
        for entry in entries
    )


# ============================================================================
# VALUE PATTERNS
# ============================================================================

NAME_PATTERN = PatternRule("name", value_patterns.is_name, low_confidence=True)
ZIP_PATTERN = PatternRule("zip", value_patterns.is_zip_code)
DATE_PATTERN = PatternRule("date", value_patterns.is_date)
EMAIL_PATTERN = PatternRule("email", value_patterns.is_email)
SSN_PATTERN = PatternRule("ssn", value_patterns.is_ssn)
IBAN_PATTERN = PatternRule("iban", value_patterns.is_iban)
VIN_PATTERN = PatternRule("vin", value_patterns.is_vin)
URL_PATTERN = PatternRule("url", value_patterns.is_url)
IP_PATTERN = PatternRule("ip", value_patterns.is_ip_address)


# ============================================================================
# TAXONOMY
# ============================================================================

# Order is the tie-break order: the first rule whose label matches a header wins.
TAXONOMY: Tuple[AttributeRule, ...] = (
    AttributeRule(
        IdentifierCategory.NAME,
        _labels(("name", 1)),
        NAME_PATTERN,
    ),
    AttributeRule(
        IdentifierCategory.GEOGRAPHIC_SUBDIVISION,
        _labels(("address", 1), "city", ("country", 1), ("precinct", 1)),
    ),
    AttributeRule(
        IdentifierCategory.GEOGRAPHIC_SUBDIVISION,
        _labels("zip", ("zip code", 1)),
        ZIP_PATTERN,
    ),
    AttributeRule(
        IdentifierCategory.DATE,
        _labels(
            ("age", 1), ("year", 1), ("birth date", 2), ("admission date", 2),
            ("discharge date", 2), ("death date", 2), ("date", 1),
        ),
        DATE_PATTERN,
    ),
    AttributeRule(
        IdentifierCategory.TELEPHONE_NUMBER,
        _labels(("number", 1), ("telephone", 1), "fax", ("phone", 1)),
    ),
    AttributeRule(
        IdentifierCategory.EMAIL_ADDRESS,
        _labels("email", "e-mail address"),
        EMAIL_PATTERN,
    ),
    AttributeRule(
        IdentifierCategory.SOCIAL_SECURITY_NUMBER,
        _labels("ssn", ("social security number", 1)),
        SSN_PATTERN,
    ),
    AttributeRule(
        IdentifierCategory.ACCOUNT_NUMBER,
        _labels("iban", ("account number", 1)),
        IBAN_PATTERN,
    ),
    AttributeRule(
        IdentifierCategory.CERTIFICATE_NUMBER,
        _labels(("license", 1), ("certificate", 1)),
    ),
    AttributeRule(
        IdentifierCategory.VEHICLE_IDENTIFIER,
        _labels("vin", ("vehicle identification number", 2)),
        VIN_PATTERN,
    ),
    AttributeRule(
        IdentifierCategory.DEVICE_IDENTIFIER,
        _labels(("serial number", 1)),
    ),
    AttributeRule(
        IdentifierCategory.URL,
        _labels("url", ("domain", 1)),
        URL_PATTERN,
    ),
    AttributeRule(
        IdentifierCategory.IP_ADDRESS,
        _labels("ip", "ipv4", "ipv6", ("ip address", 1)),
        IP_PATTERN,
    ),
)


def all_rules() -> Tuple[AttributeRule, ...]:
    """Return the full taxonomy in tie-break order."""
    return TAXONOMY


def pattern_scan_order(rules: Tuple[AttributeRule, ...]) -> Tuple[AttributeRule, ...]:
    """
    Rules that carry a value pattern, in the order cell values are tested.

    Taxonomy order is kept, except that low-confidence heuristics move to
    the end so a more specific shape always wins.
    """
    with_pattern = [rule for rule in rules if rule.pattern is not None]
    confident = [rule for rule in with_pattern if not rule.pattern.low_confidence]
    heuristic = [rule for rule in with_pattern if rule.pattern.low_confidence]
    return tuple(confident + heuristic)
