from dataclasses import dataclass
from datetime import date
from io import BytesIO
from typing import Iterable, Optional
import pandas as pd
import streamlit as st
from schemas.nurse import Nurse
from utils.constants import EXPORT_COLUMNS, EXPORT_SHEET_NAME

XLSX_MIME = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
CSV_MIME = "text/csv"


@dataclass(frozen=True)
class ExportFile:
    filename: str
    data: bytes
    mime: str


def nurses_to_frame(nurses: Iterable[Nurse]) -> pd.DataFrame:
    """ One row per nurse with the export headers, date of birth without a time part. """
    rows = [
        [nurse.id, nurse.name, nurse.license_number, nurse.dob.isoformat(), nurse.age]
        for nurse in nurses
    ]
    return pd.DataFrame(rows, columns=EXPORT_COLUMNS)


def to_excel_bytes(df: pd.DataFrame) -> bytes:
    """ Workbook with a single "Nurses" sheet. """
    buffer = BytesIO()
    with pd.ExcelWriter(buffer, engine="xlsxwriter") as writer:
        df.to_excel(writer, sheet_name=EXPORT_SHEET_NAME, index=False)
    buffer.seek(0)
    return buffer.getvalue()


def to_csv_text(df: pd.DataFrame) -> str:
    return df.to_csv(index=False)


def export_filename(ext: str, today: Optional[date] = None) -> str:
    today = today or date.today()
    return f"nurses_{today.isoformat()}.{ext}"


def build_export(nurses: Iterable[Nurse], fmt: str, today: Optional[date] = None) -> Optional[ExportFile]:
    """
    Encode the full record list as ``xlsx`` or ``csv``.

    Returns None when there are no records; exporting an empty list does nothing.
    """
    nurses = list(nurses)
    if not nurses:
        return None

    df = nurses_to_frame(nurses)
    if fmt == "xlsx":
        return ExportFile(export_filename("xlsx", today), to_excel_bytes(df), XLSX_MIME)
    if fmt == "csv":
        return ExportFile(export_filename("csv", today), to_csv_text(df).encode("utf-8"), CSV_MIME)
    raise ValueError(f"Unsupported export format: {fmt!r}")


def download_buttons(nurses: Iterable[Nurse]):
    """ Excel and CSV download buttons, disabled while there is nothing to export. """
    nurses = list(nurses)
    excel = build_export(nurses, "xlsx")
    csv = build_export(nurses, "csv")
    col1, col2 = st.columns(2)
    with col1:
        st.download_button(
            label="📥 Download Excel",
            data=excel.data if excel else b"",
            file_name=excel.filename if excel else export_filename("xlsx"),
            mime=XLSX_MIME,
            disabled=excel is None,
        )
    with col2:
        st.download_button(
            label="📥 Download CSV",
            data=csv.data if csv else b"",
            file_name=csv.filename if csv else export_filename("csv"),
            mime=CSV_MIME,
            disabled=csv is None,
        )
