import pytest

from leerstand.domain.roi import ROIInput
from leerstand.domain.vacancy import VacancyInput
from leerstand.services.calculators import ROICalculator, UnknownFieldError, VacancyCalculator


def test_vacancy_calculator_starts_with_defaults():
    calc = VacancyCalculator()

    assert calc.inputs == VacancyInput()
    assert calc.result.total_loss == 40500


def test_every_update_recomputes_result():
    calc = VacancyCalculator()

    calc.update(vacant_units=10)
    assert calc.result.rent_loss == 75000
    assert calc.result.total_loss == 81000

    calc.update(opportunity_loss_rate_percent=10)
    assert calc.result.opportunity_loss == pytest.approx(7500.0)
    assert [b.label for b in calc.breakdown] == ["Mietausfall", "Nebenkosten", "Opportunität"]


def test_reset_restores_defaults():
    calc = ROICalculator()
    calc.update(budget=0)
    assert calc.result.roi_percent == 0

    calc.reset()
    assert calc.inputs == ROIInput()
    assert calc.result.leads == 200


def test_unknown_field_is_rejected_and_state_kept():
    calc = ROICalculator()
    before = calc.result

    with pytest.raises(UnknownFieldError):
        calc.update(cpc=10)
    assert calc.result == before


def test_roi_calculator_funnel_follows_inputs():
    calc = ROICalculator(ROIInput(budget=350, lead_to_viewing_rate_percent=50))

    assert [s.count for s in calc.funnel] == [7, 3, 0]
