"""GET /v1/records/{record_id}/export - Download a saved record as HTML or Excel"""

import logging
from enum import Enum
from fastapi import APIRouter, Depends, HTTPException, Query, Request
from starlette.responses import Response

from bonus_gateway.api.dependencies import get_request_id, get_record_repository
from bonus_gateway.api.v1.records import parse_record_id
from bonus_gateway.domain.exceptions import ExportError
from bonus_gateway.infrastructure.database.repositories import RecordRepository
from bonus_gateway.infrastructure.export.excel import export_record_xlsx, XLSX_MEDIA_TYPE
from bonus_gateway.infrastructure.export.html import render_record_html
from bonus_gateway.infrastructure.observability.metrics import export_counter

router = APIRouter()


class ExportFormat(str, Enum):
    HTML = "html"
    XLSX = "xlsx"


@router.get("/records/{record_id}/export")
def export_record(
    record_id: str,
    request: Request,
    format: ExportFormat = Query(ExportFormat.HTML, description="html or xlsx"),
    record_repo: RecordRepository = Depends(get_record_repository),
):
    """
    Render a saved record for download.

    Returns:
        HTML page or .xlsx workbook as an attachment
    """
    request_id = get_request_id(request)
    record = record_repo.get_record(parse_record_id(record_id))

    if not record:
        raise HTTPException(status_code=404, detail="Record not found")

    filename = f"bonus_record_{record.grade.replace(' ', '_').replace('.', '')}_{record.id}"

    try:
        if format is ExportFormat.XLSX:
            content = export_record_xlsx(record)
            media_type = XLSX_MEDIA_TYPE
        else:
            content = render_record_html(record).encode("utf-8")
            media_type = "text/html; charset=utf-8"
    except ExportError as e:
        logging.error(f"Export failed: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Export failed")

    export_counter.labels(format=format.value).inc()

    return Response(
        content=content,
        media_type=media_type,
        headers={"Content-Disposition": f'attachment; filename="{filename}.{format.value}"'},
    )
