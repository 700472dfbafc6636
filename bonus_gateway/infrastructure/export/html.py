"""Standalone HTML rendering of a calculation record"""

from pathlib import Path
from jinja2 import Environment, FileSystemLoader, select_autoescape

from bonus_gateway.domain.bonus import disbursal_ratio
from bonus_gateway.infrastructure.export.labels import (
    FINANCIAL_LABELS,
    NON_FINANCIAL_LABELS,
    REPORT_TITLE,
    format_amount,
    total_income,
)

TEMPLATE_DIR = Path(__file__).resolve().parent / "templates"

env = Environment(
    loader=FileSystemLoader(TEMPLATE_DIR),
    autoescape=select_autoescape(["html"]),
    trim_blocks=True,
    lstrip_blocks=True,
)
env.filters["amount"] = format_amount


def render_record_html(record) -> str:
    """
    Render a saved record as a self-contained HTML page.

    Sections: basic info, financial inputs and score, non-financial inputs
    and score, bonus result with disbursal ratio and penalties.
    """
    income = total_income(record)
    financial = record.financial_metrics
    non_financial = record.non_financial_metrics

    financial_rows = [(label, financial.get(key, 0)) for key, label in FINANCIAL_LABELS]
    financial_rows.insert(2, ("Total Income", income))

    return env.get_template("record.html").render(
        title=REPORT_TITLE,
        record=record,
        created_at=record.created_at.isoformat() if record.created_at else "",
        financial_rows=financial_rows,
        non_financial_rows=[(label, non_financial.get(key, 0)) for key, label in NON_FINANCIAL_LABELS],
        disbursal_ratio=disbursal_ratio(record.final_bonus, income),
    )
