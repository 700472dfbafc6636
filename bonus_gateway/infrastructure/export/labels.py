"""Display labels shared by the record exporters"""

FINANCIAL_LABELS = [
    ("investment_income", "Investment Income"),
    ("insurance_income", "Insurance Income"),
    ("ca", "CA"),
    ("nnm", "NNM"),
    ("wealth_penetration", "Wealth Penetration"),
]

NON_FINANCIAL_LABELS = [
    ("risk", "Risk"),
    ("quality", "Quality"),
    ("complaint", "Complaint"),
    ("client_appointment", "Client Appointment"),
    ("nps", "NPS"),
]

REPORT_TITLE = "Relationship Manager Quarterly Bonus Record"


def format_amount(value: float) -> str:
    """Thousands-separated amount without trailing .0 for whole numbers"""
    if float(value).is_integer():
        return f"{int(value):,}"
    return f"{value:,.2f}"


def total_income(record) -> float:
    metrics = record.financial_metrics
    return metrics.get("investment_income", 0) + metrics.get("insurance_income", 0)
