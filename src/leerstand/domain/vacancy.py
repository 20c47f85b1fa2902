# src/leerstand/domain/vacancy.py
from __future__ import annotations

from dataclasses import dataclass


@dataclass
class VacancyInput:
    monthly_rent_per_unit: float = 2500.0              # CHF net rent
    vacant_units: float = 5                            # count of empty units
    vacancy_duration_months: float = 3.0               # may be fractional (e.g. 2.5)
    operating_cost_per_unit_per_month: float = 200.0   # Nebenkosten the owner carries
    financing_cost_per_unit_per_month: float = 0.0
    opportunity_loss_rate_percent: float = 0.0         # e.g. 5 == 5%


@dataclass(frozen=True)
class VacancyResult:
    rent_loss: float
    operating_loss: float
    financing_loss: float
    opportunity_loss: float
    total_loss: float


@dataclass(frozen=True)
class BreakdownItem:
    key: str
    label: str
    value: float
    color: str


# (result field, chart label, color) in display order
BREAKDOWN_CATEGORIES: tuple[tuple[str, str, str], ...] = (
    ("rent_loss", "Mietausfall", "#2563EB"),
    ("operating_loss", "Nebenkosten", "#EF4444"),
    ("financing_loss", "Finanzierung", "#8B5CF6"),
    ("opportunity_loss", "Opportunität", "#F59E0B"),
)


def derive_vacancy(inp: VacancyInput) -> VacancyResult:
    """
    Cost of vacancy for a block of empty units.

    Inputs are not clamped: a negative field flows straight through the
    products and shows up as a negative loss.
    """
    units = inp.vacant_units
    months = inp.vacancy_duration_months

    rent_loss = inp.monthly_rent_per_unit * units * months
    operating_loss = inp.operating_cost_per_unit_per_month * units * months
    financing_loss = inp.financing_cost_per_unit_per_month * units * months

    rate = inp.opportunity_loss_rate_percent
    opportunity_loss = rent_loss * (rate / 100) if rate > 0 else 0

    total_loss = rent_loss + operating_loss + financing_loss + opportunity_loss

    return VacancyResult(
        rent_loss=rent_loss,
        operating_loss=operating_loss,
        financing_loss=financing_loss,
        opportunity_loss=opportunity_loss,
        total_loss=total_loss,
    )


def vacancy_breakdown(result: VacancyResult) -> list[BreakdownItem]:
    """Chart slices, only the positive components, always in category order."""
    out: list[BreakdownItem] = []
    for key, label, color in BREAKDOWN_CATEGORIES:
        value = getattr(result, key)
        if value > 0:
            out.append(BreakdownItem(key=key, label=label, value=value, color=color))
    return out
