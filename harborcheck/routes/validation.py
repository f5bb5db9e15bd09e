from typing import List, Optional

from fastapi import APIRouter, File, HTTPException, Query, UploadFile

from harborcheck.config import settings
from harborcheck.schemas.validation import (
    AttributeRuleResponse,
    LabelResponse,
    ValidationReport,
    ValidationResponse,
    WarningResponse,
)
from harborcheck.services.data_handle import DataFrameHandle
from harborcheck.services.identifier_taxonomy import all_rules
from harborcheck.services.report import build_report
from harborcheck.services.safe_harbor_validator import validate
from harborcheck.services.upload_reader import UploadError, read_table, validate_file

router = APIRouter(prefix="/validation", tags=["validation"])


@router.get("/taxonomy", response_model=List[AttributeRuleResponse])
def list_taxonomy():
    """List the identifier rules, their header labels and value pattern."""
    return [
        AttributeRuleResponse(
            category=rule.category,
            labels=[LabelResponse(text=label.text, tolerance=label.tolerance) for label in rule.labels],
            pattern=rule.pattern.name if rule.pattern else None,
        )
        for rule in all_rules()
    ]


@router.post("", response_model=ValidationResponse)
def validate_upload(
    file: UploadFile = File(...),
    limit: Optional[int] = Query(None, description="Maximum number of data rows to scan"),
):
    """Upload a CSV or Excel file and flag columns holding safe harbor identifiers."""
    file.file.seek(0, 2)
    file_size = file.file.tell()
    file.file.seek(0)

    try:
        validate_file(file.filename, file_size)
        df = read_table(file.filename, file.file.read())
    except UploadError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=422, detail=f"Could not parse file: {str(e)}")

    row_limit = limit if limit is not None else settings.DEFAULT_ROW_LIMIT
    handle = DataFrameHandle(df)
    warnings = validate(handle, row_limit)

    headers = [handle.header_at(i) for i in range(handle.column_count())]
    return ValidationResponse(
        filename=file.filename,
        row_count=len(df),
        row_limit=row_limit,
        warnings=[
            WarningResponse(
                column=w.column,
                column_name=headers[w.column],
                row=w.row,
                category=w.category,
                evidence=w.evidence,
            )
            for w in warnings
        ],
        report=ValidationReport(**build_report(warnings, headers)),
    )
