"""Read uploaded CSV and Excel files into string-only DataFrames."""

import io
import logging
import os

import pandas as pd

from harborcheck.config import settings

logger = logging.getLogger(__name__)

ALLOWED_EXTENSIONS = [".csv", ".xlsx", ".xls"]


class UploadError(ValueError):
    """The uploaded file was rejected before parsing."""


def validate_file(filename: str, size: int) -> str:
    """
    Check extension and size of an upload.

    Returns:
        "csv" or "xlsx"
    """
    file_ext = os.path.splitext(filename or "")[1].lower()

    if file_ext not in ALLOWED_EXTENSIONS:
        raise UploadError(f"File type '{file_ext}' not allowed. Only CSV and Excel files accepted.")

    max_size = settings.MAX_UPLOAD_SIZE_MB * 1024 * 1024
    if size > max_size:
        raise UploadError(
            f"File too large ({size / 1024 / 1024:.1f}MB). Maximum {settings.MAX_UPLOAD_SIZE_MB}MB."
        )

    return "csv" if file_ext == ".csv" else "xlsx"


def read_table(filename: str, content: bytes) -> pd.DataFrame:
    """
    Parse an upload into a DataFrame whose cells are all strings.

    Missing cells are kept as empty strings so they never look like values.
    Raises UploadError for rejected files; pandas parse errors propagate.
    """
    file_type = validate_file(filename, len(content))

    if file_type == "csv":
        df = pd.read_csv(io.BytesIO(content), dtype=str, keep_default_na=False)
    else:
        df = pd.read_excel(io.BytesIO(content), dtype=str).fillna("")

    logger.info("Read %s: %d rows, %d columns", filename, len(df), len(df.columns))
    return df
