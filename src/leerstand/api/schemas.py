# src/leerstand/api/schemas.py
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from leerstand.domain.campaign import CampaignDraftRequest
from leerstand.domain.roi import ROIInput
from leerstand.domain.vacancy import VacancyInput

_DEFAULT_VACANCY = VacancyInput()
_DEFAULT_ROI = ROIInput()
_DEFAULT_DRAFT = CampaignDraftRequest()


def _strip_percent(v: Any) -> Any:
    # "5%" / " 20 " -> "5" / "20"; pydantic does the float coercion
    if isinstance(v, str):
        return v.strip().replace("%", "").strip()
    return v


# --------------------------------------------
# Vacancy
# --------------------------------------------

class VacancyRequest(BaseModel):
    """
    Cost-of-vacancy inputs. Field aliases match the form names used by the
    website (monthlyRent, units, ...). Negative numbers are accepted on purpose.
    """
    model_config = ConfigDict(populate_by_name=True, extra="ignore", allow_inf_nan=False)

    monthly_rent_per_unit: float = Field(_DEFAULT_VACANCY.monthly_rent_per_unit, alias="monthlyRent")
    vacant_units: float = Field(_DEFAULT_VACANCY.vacant_units, alias="units")
    vacancy_duration_months: float = Field(_DEFAULT_VACANCY.vacancy_duration_months, alias="vacancyMonths")
    operating_cost_per_unit_per_month: float = Field(
        _DEFAULT_VACANCY.operating_cost_per_unit_per_month, alias="operatingCosts"
    )
    financing_cost_per_unit_per_month: float = Field(
        _DEFAULT_VACANCY.financing_cost_per_unit_per_month, alias="financingCosts"
    )
    opportunity_loss_rate_percent: float = Field(
        _DEFAULT_VACANCY.opportunity_loss_rate_percent, alias="opportunityRate"
    )

    @field_validator("*", mode="before")
    @classmethod
    def _numeric_strings(cls, v: Any) -> Any:
        return _strip_percent(v)

    def to_domain(self) -> VacancyInput:
        return VacancyInput(**self.model_dump())


class BreakdownItemOut(BaseModel):
    key: str
    label: str
    value: float
    color: str


class VacancyResultOut(BaseModel):
    rent_loss: float
    operating_loss: float
    financing_loss: float
    opportunity_loss: float
    total_loss: float


class VacancyResponse(BaseModel):
    inputs: VacancyRequest
    result: VacancyResultOut
    breakdown: list[BreakdownItemOut]
    formatted: dict[str, str]


# --------------------------------------------
# ROI / funnel
# --------------------------------------------

class ROIRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore", allow_inf_nan=False)

    budget: float = Field(_DEFAULT_ROI.budget, alias="budget")
    cost_per_lead: float = Field(_DEFAULT_ROI.cost_per_lead, alias="costPerLead")
    lead_to_viewing_rate_percent: float = Field(
        _DEFAULT_ROI.lead_to_viewing_rate_percent, alias="leadToViewingRate"
    )
    viewing_to_lease_rate_percent: float = Field(
        _DEFAULT_ROI.viewing_to_lease_rate_percent, alias="viewingToLeaseRate"
    )
    average_lease_value: float = Field(_DEFAULT_ROI.average_lease_value, alias="averageLeaseValue")
    time_reduction_rate_percent: float = Field(
        _DEFAULT_ROI.time_reduction_rate_percent, alias="timeReductionRate"
    )
    cost_of_vacancy_per_month: float = Field(
        _DEFAULT_ROI.cost_of_vacancy_per_month, alias="costOfVacancyPerMonth"
    )

    @field_validator("*", mode="before")
    @classmethod
    def _numeric_strings(cls, v: Any) -> Any:
        return _strip_percent(v)

    def to_domain(self) -> ROIInput:
        return ROIInput(**self.model_dump())


class FunnelStageOut(BaseModel):
    name: str
    count: int


class ROIResultOut(BaseModel):
    leads: int
    viewings: int
    leases: int
    revenue_from_leases: float
    vacancy_savings: float
    total_value: float
    roi_percent: float


class ROIResponse(BaseModel):
    inputs: ROIRequest
    result: ROIResultOut
    funnel: list[FunnelStageOut]
    formatted: dict[str, str]
    roi_positive: bool


# --------------------------------------------
# Copy drafts
# --------------------------------------------

class DraftRequest(BaseModel):
    """Free text, no validation beyond 'is a string'."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    project_type: str = Field(_DEFAULT_DRAFT.project_type, alias="projectType")
    location: str = Field(_DEFAULT_DRAFT.location, alias="location")
    usp: str = Field(_DEFAULT_DRAFT.usp, alias="usp")
    target_audience: str = Field(_DEFAULT_DRAFT.target_audience, alias="targetAudience")

    def to_domain(self) -> CampaignDraftRequest:
        return CampaignDraftRequest(**self.model_dump())


class DraftResponse(BaseModel):
    text: str


# --------------------------------------------
# Navigation
# --------------------------------------------

class ViewItem(BaseModel):
    name: str
    label: str
    path: str


class ContactFormOut(BaseModel):
    portal_id: str
    form_id: str
    region: str
    target: str
    script_src: str
