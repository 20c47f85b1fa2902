# src/leerstand/domain/roi.py
from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass
class ROIInput:
    budget: float = 10_000.0                       # campaign spend, CHF
    cost_per_lead: float = 50.0                    # CPL
    lead_to_viewing_rate_percent: float = 20.0
    viewing_to_lease_rate_percent: float = 30.0
    average_lease_value: float = 24_000.0          # annual rent of one signed lease
    time_reduction_rate_percent: float = 50.0      # how much faster units get let
    cost_of_vacancy_per_month: float = 2_000.0


@dataclass(frozen=True)
class ROIResult:
    leads: int        # float only when the ratio overflowed to inf/nan
    viewings: int
    leases: int
    revenue_from_leases: float
    vacancy_savings: float
    total_value: float
    roi_percent: float


@dataclass(frozen=True)
class FunnelStage:
    name: str
    count: int


FUNNEL_STAGE_NAMES: tuple[str, str, str] = ("Leads", "Besichtigungen", "Abschlüsse")


def _floor(x: float) -> float:
    # math.floor raises on inf/nan; those pass through unchanged
    return math.floor(x) if math.isfinite(x) else x


def derive_roi(inp: ROIInput) -> ROIResult:
    """
    Linear lead -> viewing -> lease funnel and the return on the budget.

    Every stage is floored, so partial leads/viewings/leases never count.
    A non-positive CPL is replaced by 1 and a non-positive budget yields 0% ROI;
    nothing here raises. Only an overflowing budget/CPL ratio carries inf
    (or nan further down) through to the result.
    """
    safe_cpl = inp.cost_per_lead if inp.cost_per_lead > 0 else 1

    leads = _floor(inp.budget / safe_cpl)
    viewings = _floor(leads * (inp.lead_to_viewing_rate_percent / 100))
    leases = _floor(viewings * (inp.viewing_to_lease_rate_percent / 100))

    revenue_from_leases = leases * inp.average_lease_value

    if inp.time_reduction_rate_percent > 0 and inp.cost_of_vacancy_per_month > 0:
        vacancy_savings = (inp.time_reduction_rate_percent / 100) * inp.cost_of_vacancy_per_month
    else:
        vacancy_savings = 0

    total_value = revenue_from_leases + vacancy_savings

    budget = inp.budget
    roi_percent = ((total_value - budget) / budget) * 100 if budget > 0 else 0

    return ROIResult(
        leads=leads,
        viewings=viewings,
        leases=leases,
        revenue_from_leases=revenue_from_leases,
        vacancy_savings=vacancy_savings,
        total_value=total_value,
        roi_percent=roi_percent,
    )


def funnel_series(result: ROIResult) -> list[FunnelStage]:
    counts = (result.leads, result.viewings, result.leases)
    return [FunnelStage(name=n, count=c) for n, c in zip(FUNNEL_STAGE_NAMES, counts)]
