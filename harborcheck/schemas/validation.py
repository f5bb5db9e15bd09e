from pydantic import BaseModel
from typing import Dict, List, Optional

from harborcheck.services.identifier_taxonomy import IdentifierCategory


class WarningResponse(BaseModel):
    column: int
    column_name: str
    row: int
    category: IdentifierCategory
    evidence: str


class ValidationReport(BaseModel):
    column_count: int
    warning_count: int
    header_matches: int
    value_matches: int
    flagged_columns: List[str]
    unflagged_columns: List[str]
    columns_by_category: Dict[str, List[str]]
    is_compliant: bool


class ValidationResponse(BaseModel):
    filename: str
    row_count: int
    row_limit: Optional[int] = None
    warnings: List[WarningResponse]
    report: ValidationReport


class LabelResponse(BaseModel):
    text: str
    tolerance: int


class AttributeRuleResponse(BaseModel):
    category: IdentifierCategory
    labels: List[LabelResponse]
    pattern: Optional[str] = None
