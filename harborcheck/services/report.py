"""
Validation report helpers.

Turns the validator's warnings into a summary dict and a printable
DataFrame with one row per warning.
"""

from typing import Any, Dict, List, Sequence

import pandas as pd

from harborcheck.services.safe_harbor_validator import IdentifierWarning


REPORT_COLUMNS = ["column", "column_name", "row", "source", "category", "evidence"]


def _column_name(headers: Sequence[str], index: int) -> str:
    return headers[index] if index < len(headers) else ""


def build_report(warnings: Sequence[IdentifierWarning], headers: Sequence[str]) -> Dict[str, Any]:
    """
    Summarise a validation run.

    Args:
        warnings: Warnings returned by the validator
        headers: Column headers of the validated dataset

    Returns:
        Dict with flagged/unflagged columns and counts by category
    """
    by_category: Dict[str, List[str]] = {}
    for warning in warnings:
        by_category.setdefault(warning.category.value, []).append(
            _column_name(headers, warning.column)
        )

    flagged = {warning.column for warning in warnings}
    header_matches = sum(1 for w in warnings if w.is_header_match)

    return {
        "column_count": len(headers),
        "warning_count": len(warnings),
        "header_matches": header_matches,
        "value_matches": len(warnings) - header_matches,
        "flagged_columns": [_column_name(headers, i) for i in sorted(flagged)],
        "unflagged_columns": [h for i, h in enumerate(headers) if i not in flagged],
        "columns_by_category": by_category,
        "is_compliant": not warnings,
    }


def warnings_to_frame(warnings: Sequence[IdentifierWarning], headers: Sequence[str]) -> pd.DataFrame:
    """One row per warning, in discovery order."""
    records = [
        {
            "column": w.column,
            "column_name": _column_name(headers, w.column),
            "row": w.row,
            "source": "header" if w.is_header_match else "value",
            "category": w.category.value,
            "evidence": w.evidence,
        }
        for w in warnings
    ]
    return pd.DataFrame(records, columns=REPORT_COLUMNS)
