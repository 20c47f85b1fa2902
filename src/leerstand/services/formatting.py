"""de-CH formatting helpers for calculator results."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Any

from leerstand.domain.roi import ROIResult
from leerstand.domain.vacancy import VacancyResult

# Swiss grouping uses the typographic apostrophe
GROUP_SEP = "’"


def _non_finite(value: float) -> str | None:
    # what Intl.NumberFormat prints for the values Decimal cannot quantize
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "-∞" if value < 0 else "∞"
    return None


def _round_half_up(value: float, digits: int) -> Decimal:
    q = Decimal(1).scaleb(-digits)
    with localcontext() as ctx:
        # the largest float has 309 integer digits
        ctx.prec = 330
        return Decimal(repr(float(value))).quantize(q, rounding=ROUND_HALF_UP)


def _group(value: Decimal, digits: int) -> str:
    s = f"{abs(value):,.{digits}f}".replace(",", GROUP_SEP)
    if value < 0:
        s = "-" + s
    return s


def format_number(value: float, max_digits: int = 3) -> str:
    """1234.5 -> "1’234.5"; trailing zero decimals are dropped."""
    special = _non_finite(value)
    if special is not None:
        return special
    d = _round_half_up(value, max_digits)
    s = _group(d, max_digits)
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    return s


def format_chf(value: float) -> str:
    """40500 -> "CHF 40’500" (no decimals)."""
    special = _non_finite(value)
    if special is not None:
        return f"CHF {special}"
    return f"CHF {_group(_round_half_up(value, 0), 0)}"


def format_percent(value: float, digits: int = 1) -> str:
    # same as toFixed(1) + "%" on the site: no grouping
    if math.isnan(value):
        return "NaN%"
    if math.isinf(value):
        return "-Infinity%" if value < 0 else "Infinity%"
    return f"{value:.{digits}f}%"


def format_vacancy_result(result: VacancyResult) -> dict[str, str]:
    return {
        "rent_loss": format_chf(result.rent_loss),
        "operating_loss": format_chf(result.operating_loss),
        "financing_loss": format_chf(result.financing_loss),
        "opportunity_loss": format_chf(result.opportunity_loss),
        "total_loss": format_chf(result.total_loss),
    }


def format_roi_result(result: ROIResult) -> dict[str, Any]:
    return {
        "leads": format_number(result.leads),
        "viewings": format_number(result.viewings),
        "leases": format_number(result.leases),
        "revenue_from_leases": format_chf(result.revenue_from_leases),
        "vacancy_savings": format_chf(result.vacancy_savings),
        "total_value": format_chf(result.total_value),
        "roi_percent": format_percent(result.roi_percent),
    }
