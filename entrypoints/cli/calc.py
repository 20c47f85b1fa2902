from __future__ import annotations

import typer
from loguru import logger

from leerstand.adapters.copy_draft_gemini import GeminiCopyDraftClient
from leerstand.domain.campaign import CampaignDraftRequest
from leerstand.domain.ports import CopyDraftClient
from leerstand.domain.roi import ROIInput
from leerstand.domain.vacancy import VacancyInput
from leerstand.services.calculators import ROICalculator, VacancyCalculator
from leerstand.services.formatting import format_chf, format_roi_result, format_vacancy_result

_VACANCY = VacancyInput()
_ROI = ROIInput()
_DRAFT = CampaignDraftRequest()

app = typer.Typer(help="Leerstand calculators and ad copy drafts.")


def _make_draft_client() -> CopyDraftClient:
    return GeminiCopyDraftClient()


@app.command("vacancy")
def vacancy_cmd(
    monthly_rent: float = typer.Option(_VACANCY.monthly_rent_per_unit, help="Net rent per unit (CHF)"),
    units: float = typer.Option(_VACANCY.vacant_units, help="Vacant units"),
    months: float = typer.Option(_VACANCY.vacancy_duration_months, help="Vacancy duration in months"),
    operating_costs: float = typer.Option(_VACANCY.operating_cost_per_unit_per_month, help="Per unit / month"),
    financing_costs: float = typer.Option(_VACANCY.financing_cost_per_unit_per_month, help="Per unit / month"),
    opportunity_rate: float = typer.Option(_VACANCY.opportunity_loss_rate_percent, help="Percent of rent loss"),
) -> None:
    """
    Cost of vacancy for a block of empty units.
    """
    calc = VacancyCalculator()
    calc.update(
        monthly_rent_per_unit=monthly_rent,
        vacant_units=units,
        vacancy_duration_months=months,
        operating_cost_per_unit_per_month=operating_costs,
        financing_cost_per_unit_per_month=financing_costs,
        opportunity_loss_rate_percent=opportunity_rate,
    )
    logger.debug("vacancy inputs {}", calc.inputs)

    for key, text in format_vacancy_result(calc.result).items():
        typer.echo(f"{key:<18} {text}")
    for item in calc.breakdown:
        typer.echo(f"  {item.label:<14} {format_chf(item.value)}")


@app.command("roi")
def roi_cmd(
    budget: float = typer.Option(_ROI.budget, help="Campaign budget (CHF)"),
    cost_per_lead: float = typer.Option(_ROI.cost_per_lead, help="Cost per lead (CHF)"),
    lead_to_viewing: float = typer.Option(_ROI.lead_to_viewing_rate_percent, help="Lead -> viewing, percent"),
    viewing_to_lease: float = typer.Option(_ROI.viewing_to_lease_rate_percent, help="Viewing -> lease, percent"),
    lease_value: float = typer.Option(_ROI.average_lease_value, help="Average lease value (CHF)"),
    time_reduction: float = typer.Option(_ROI.time_reduction_rate_percent, help="Vacancy time reduction, percent"),
    vacancy_cost: float = typer.Option(_ROI.cost_of_vacancy_per_month, help="Cost of vacancy per month (CHF)"),
) -> None:
    """
    Funnel and ROI of a marketing budget.
    """
    calc = ROICalculator()
    calc.update(
        budget=budget,
        cost_per_lead=cost_per_lead,
        lead_to_viewing_rate_percent=lead_to_viewing,
        viewing_to_lease_rate_percent=viewing_to_lease,
        average_lease_value=lease_value,
        time_reduction_rate_percent=time_reduction,
        cost_of_vacancy_per_month=vacancy_cost,
    )
    logger.debug("roi inputs {}", calc.inputs)

    for key, text in format_roi_result(calc.result).items():
        typer.echo(f"{key:<20} {text}")
    for stage in calc.funnel:
        typer.echo(f"  {stage.name:<14} {stage.count}")


@app.command("draft")
def draft_cmd(
    project_type: str = typer.Option(_DRAFT.project_type),
    location: str = typer.Option(_DRAFT.location),
    usp: str = typer.Option(_DRAFT.usp),
    target_audience: str = typer.Option(_DRAFT.target_audience),
) -> None:
    """
    Draft Google / LinkedIn / Meta ad copy for a project.
    """
    request = CampaignDraftRequest(
        project_type=project_type,
        location=location,
        usp=usp,
        target_audience=target_audience,
    )
    logger.info("Drafting copy for {} in {}", project_type, location)
    typer.echo(_make_draft_client().submit(request))


if __name__ == "__main__":
    app()
