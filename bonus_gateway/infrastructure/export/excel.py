"""Excel workbook export of a calculation record using openpyxl"""

import logging
from io import BytesIO
from openpyxl import Workbook
from openpyxl.styles import Font

from bonus_gateway.domain.bonus import disbursal_ratio
from bonus_gateway.domain.exceptions import ExportError
from bonus_gateway.infrastructure.export.labels import (
    FINANCIAL_LABELS,
    NON_FINANCIAL_LABELS,
    REPORT_TITLE,
    format_amount,
    total_income,
)

logger = logging.getLogger(__name__)

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def _write_basic_sheet(ws, record) -> None:
    ws.append([REPORT_TITLE])
    ws.append([])
    ws.append(["Grade", record.grade])
    ws.append(["Recognition Ratio", f"{record.recognition_ratio:g}%"])
    ws.append(["Recorded At", record.created_at.isoformat() if record.created_at else ""])
    if record.note:
        ws.append(["Note", record.note])


def _write_financial_sheet(ws, record) -> None:
    metrics = record.financial_metrics
    ws.append(["Financial Metrics"])
    ws.append(["Metric", "Actual"])
    for key, label in FINANCIAL_LABELS[:2]:
        ws.append([label, metrics.get(key, 0)])
    ws.append(["Total Income", total_income(record)])
    for key, label in FINANCIAL_LABELS[2:]:
        ws.append([label, metrics.get(key, 0)])
    ws.append([])
    ws.append(["Financial Score", f"{record.financial_score:.2f}%"])


def _write_non_financial_sheet(ws, record) -> None:
    metrics = record.non_financial_metrics
    ws.append(["Non-Financial Metrics"])
    ws.append(["Metric", "Actual"])
    for key, label in NON_FINANCIAL_LABELS:
        ws.append([label, metrics.get(key, 0)])
    ws.append([])
    ws.append(["Non-Financial Score", f"{record.non_financial_score:.2f}%"])


def _write_result_sheet(ws, record) -> None:
    ratio = disbursal_ratio(record.final_bonus, total_income(record))
    ws.append(["Bonus Result"])
    ws.append(["Base Bonus", f"${format_amount(record.base_bonus)}"])
    ws.append(["Final Bonus", f"${format_amount(record.final_bonus)}"])
    ws.append(["Disbursal Ratio", f"{ratio:.2f}%"])
    if record.penalties:
        ws.append([])
        ws.append(["Penalties Applied"])
        for penalty in record.penalties:
            ws.append([penalty])


def build_record_workbook(record) -> Workbook:
    """Build a four-sheet workbook: basic info, financial, non-financial, bonus result"""
    wb = Workbook()

    sheets = [
        ("Basic Info", _write_basic_sheet),
        ("Financial", _write_financial_sheet),
        ("Non-Financial", _write_non_financial_sheet),
        ("Bonus Result", _write_result_sheet),
    ]

    for index, (title, writer) in enumerate(sheets):
        ws = wb.active if index == 0 else wb.create_sheet()
        ws.title = title
        writer(ws, record)
        ws["A1"].font = Font(bold=True)
        ws.column_dimensions["A"].width = 28
        ws.column_dimensions["B"].width = 22

    return wb


def export_record_xlsx(record) -> bytes:
    """
    Serialize a record workbook to .xlsx bytes.

    Raises:
        ExportError: If the workbook cannot be written
    """
    buffer = BytesIO()
    try:
        build_record_workbook(record).save(buffer)
    except (OSError, ValueError, TypeError) as e:
        logger.error(f"Excel export failed: {e}", extra={"record_id": str(record.id)})
        raise ExportError(f"Could not export record {record.id} to Excel") from e
    return buffer.getvalue()
