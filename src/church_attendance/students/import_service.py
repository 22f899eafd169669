from __future__ import annotations

import io
import logging
import zipfile
from dataclasses import dataclass
from pathlib import PurePath
from typing import IO, Any, Iterable, Optional

import pandas as pd

from ..core.exceptions import ValidationError
from ..users.model import User
from .service import StudentService

logger = logging.getLogger(__name__)

# Spreadsheet header -> student field. Korean headers match the downloadable template.
HEADER_ALIASES: dict[str, str] = {
    "이름": "name",
    "name": "name",
    "생년월일": "dob",
    "dob": "dob",
    "date_of_birth": "dob",
    "연락처": "parentPhone",
    "parent_phone": "parentPhone",
    "parentphone": "parentPhone",
    "guardian_phone": "parentPhone",
    "phone": "parentPhone",
    "주소": "address",
    "address": "address",
    "비고": "notes",
    "notes": "notes",
}

TEMPLATE_SHEET_NAME = "학생등록양식"
TEMPLATE_FILENAME = "student_import_template.xlsx"
TEMPLATE_ROWS = [
    {"이름": "홍길동", "생년월일": "2010-01-01", "연락처": "010-1234-5678", "주소": "서울시 강남구", "비고": "특이사항"},
    {"이름": "김철수", "생년월일": "2011-05-05", "연락처": "010-9876-5432", "주소": "서울시 서초구", "비고": ""},
]

SUPPORTED_EXTENSIONS = {".xlsx", ".csv"}


@dataclass(frozen=True)
class ImportResult:
    created: int
    skipped: int


def _cell(value: Any) -> str:
    if value is None or (isinstance(value, float) and pd.isna(value)):
        return ""
    if isinstance(value, pd.Timestamp):
        return value.strftime("%Y-%m-%d")
    text = str(value).strip()
    # Excel date cells read as text come back as "YYYY-MM-DD 00:00:00".
    if text.endswith(" 00:00:00"):
        text = text[: -len(" 00:00:00")]
    return text


def normalize_row(row: dict[str, Any]) -> dict[str, str]:
    out = {"name": "", "dob": "", "parentPhone": "", "address": "", "notes": ""}
    for header, value in row.items():
        field = HEADER_ALIASES.get(str(header).strip().lower())
        if field and not out[field]:
            out[field] = _cell(value)
    return out


def read_sheet(stream: IO[bytes], filename: str) -> pd.DataFrame:
    ext = PurePath(filename or "").suffix.lower()
    if ext not in SUPPORTED_EXTENSIONS:
        raise ValidationError("Upload an .xlsx or .csv file")

    try:
        if ext == ".csv":
            return pd.read_csv(stream, dtype=str, keep_default_na=False)
        return pd.read_excel(stream, sheet_name=0, dtype=str, engine="openpyxl")
    except (ValueError, KeyError, OSError, zipfile.BadZipFile) as e:
        logger.warning("Could not read import file %s: %s", filename, e)
        raise ValidationError("Could not read the file, check that it follows the template")


class StudentImportService:
    """Use case: bulk student registration from a spreadsheet.

    One create per row, each a full collection rewrite.
    """

    def __init__(self, students: StudentService):
        self._students = students

    def import_rows(self, actor: User, rows: Iterable[dict[str, Any]], *, class_id: Optional[str] = None) -> ImportResult:
        class_group = self._students.resolve_target_class(actor, class_id)

        created = 0
        skipped = 0
        for raw in rows:
            row = normalize_row(raw)
            if not row["name"]:
                skipped += 1
                continue
            self._students.create_in_class(class_group, row)
            created += 1

        logger.info("Imported %d students into class %s (%d rows skipped)", created, class_group.id, skipped)
        return ImportResult(created=created, skipped=skipped)

    def import_file(
        self,
        actor: User,
        stream: IO[bytes],
        filename: str,
        *,
        class_id: Optional[str] = None,
    ) -> ImportResult:
        # Resolve the class before parsing so permission errors win over file errors.
        self._students.resolve_target_class(actor, class_id)
        df = read_sheet(stream, filename)
        return self.import_rows(actor, df.to_dict(orient="records"), class_id=class_id)


def build_template() -> bytes:
    df = pd.DataFrame(TEMPLATE_ROWS)
    out = io.BytesIO()
    with pd.ExcelWriter(out, engine="openpyxl") as writer:
        df.to_excel(writer, index=False, sheet_name=TEMPLATE_SHEET_NAME)
    return out.getvalue()
