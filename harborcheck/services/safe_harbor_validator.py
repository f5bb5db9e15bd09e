"""
Safe Harbor Validator

Flags the columns of a tabular dataset that likely hold safe-harbor
identifiers. Detection runs in two passes:

1. Header scan: every column header is compared against the taxonomy
   labels. The first matching rule wins and the column is retired.
2. Row scan: the remaining columns are tested cell by cell against the
   value patterns, row by row, up to `limit` data rows. A column is retired
   as soon as one of its cells matches.

A retired column is never examined again, so every column yields at most
one warning.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Set, Tuple

from harborcheck.services.data_handle import DataHandle
from harborcheck.services.identifier_taxonomy import (
    TAXONOMY,
    AttributeRule,
    IdentifierCategory,
    pattern_scan_order,
)

logger = logging.getLogger(__name__)

# Sentinel for "inspect every data row"
NO_LIMIT = None


@dataclass(frozen=True)
class IdentifierWarning:
    """A detected identifier. Row 0 is the header, data rows start at 1."""
    column: int
    row: int
    category: IdentifierCategory
    evidence: str

    @property
    def is_header_match(self) -> bool:
        return self.row == 0


class SafeHarborValidator:
    """Runs header and row scans against an attribute rule taxonomy."""

    def __init__(self, rules: Sequence[AttributeRule] = TAXONOMY):
        self.rules: Tuple[AttributeRule, ...] = tuple(rules)
        self._pattern_rules = pattern_scan_order(self.rules)

    def validate(self, handle: DataHandle, limit: Optional[int] = NO_LIMIT) -> List[IdentifierWarning]:
        """
        Validate a data handle.

        Args:
            handle: Data handle whose row iterator yields the header row first
            limit: Maximum number of data rows to inspect, or NO_LIMIT

        Returns:
            Warnings in discovery order
        """
        remaining: Set[int] = set(range(handle.column_count()))

        warnings = self.check_headers(handle, remaining)
        warnings.extend(self.check_rows(handle, remaining, limit))

        logger.debug(
            "Safe harbor scan finished: %d warnings, %d columns unflagged",
            len(warnings), len(remaining),
        )
        return warnings

    def match_header(self, header: str) -> Optional[AttributeRule]:
        """First rule whose labels match the header, in taxonomy order."""
        for rule in self.rules:
            if rule.matches_label(header):
                return rule
        return None

    def match_value(self, value: str) -> Optional[AttributeRule]:
        """First rule whose pattern matches the value, heuristics last."""
        for rule in self._pattern_rules:
            if rule.matches_pattern(value):
                return rule
        return None

    def check_headers(self, handle: DataHandle, remaining: Set[int]) -> List[IdentifierWarning]:
        warnings: List[IdentifierWarning] = []
        for index in range(handle.column_count()):
            header = handle.header_at(index)
            rule = self.match_header(header)
            if rule is not None:
                warnings.append(IdentifierWarning(index, 0, rule.category, header))
                remaining.discard(index)
        return warnings

    def check_rows(
        self,
        handle: DataHandle,
        remaining: Set[int],
        limit: Optional[int] = NO_LIMIT,
    ) -> List[IdentifierWarning]:
        warnings: List[IdentifierWarning] = []
        if limit is not NO_LIMIT and limit <= 0:
            return warnings
        if not remaining or not self._pattern_rules:
            return warnings

        rows = iter(handle.rows())
        # The first element is the header row
        next(rows, None)

        for row_index, row in enumerate(rows, start=1):
            if limit is not NO_LIMIT and row_index > limit:
                break
            # Descending snapshot; retiring a column never skips an unvisited one
            for column in sorted(remaining, reverse=True):
                if column >= len(row):
                    continue
                value = row[column]
                rule = self.match_value(value)
                if rule is not None:
                    warnings.append(IdentifierWarning(column, row_index, rule.category, value))
                    remaining.discard(column)
            if not remaining:
                break

        return warnings


_default_validator = SafeHarborValidator()


def validate(handle: DataHandle, limit: Optional[int] = NO_LIMIT) -> List[IdentifierWarning]:
    """Validate a data handle against the safe harbor taxonomy."""
    return _default_validator.validate(handle, limit)
