import pytest

from leerstand.domain.vacancy import VacancyInput, derive_vacancy, vacancy_breakdown


def test_vacancy_sample_values():
    """
    2500 CHF rent, 5 units empty for 3 months, 200 CHF Nebenkosten per unit/month.
    """
    inp = VacancyInput(
        monthly_rent_per_unit=2500,
        vacant_units=5,
        vacancy_duration_months=3,
        operating_cost_per_unit_per_month=200,
        financing_cost_per_unit_per_month=0,
        opportunity_loss_rate_percent=0,
    )

    r = derive_vacancy(inp)

    assert r.rent_loss == 37500
    assert r.operating_loss == 3000
    assert r.financing_loss == 0
    assert r.opportunity_loss == 0
    assert r.total_loss == 40500


def test_defaults_match_sample_values():
    assert derive_vacancy(VacancyInput()).total_loss == 40500


def test_opportunity_loss_is_share_of_rent_loss():
    r = derive_vacancy(VacancyInput(opportunity_loss_rate_percent=10, financing_cost_per_unit_per_month=100))

    assert r.opportunity_loss == pytest.approx(3750.0)
    assert r.financing_loss == 1500
    assert r.total_loss == r.rent_loss + r.operating_loss + r.financing_loss + r.opportunity_loss


def test_negative_opportunity_rate_is_ignored():
    r = derive_vacancy(VacancyInput(opportunity_loss_rate_percent=-20))
    assert r.opportunity_loss == 0


def test_negative_inputs_propagate_without_clamping():
    r = derive_vacancy(VacancyInput(monthly_rent_per_unit=-1000, vacant_units=2, vacancy_duration_months=1,
                                    operating_cost_per_unit_per_month=0))
    assert r.rent_loss == -2000
    assert r.total_loss == -2000


def test_fractional_duration():
    r = derive_vacancy(VacancyInput(monthly_rent_per_unit=2000, vacant_units=1, vacancy_duration_months=2.5,
                                    operating_cost_per_unit_per_month=0))
    assert r.rent_loss == 5000


def test_breakdown_keeps_order_and_drops_zero_components():
    r = derive_vacancy(VacancyInput(opportunity_loss_rate_percent=5))
    items = vacancy_breakdown(r)

    assert [i.label for i in items] == ["Mietausfall", "Nebenkosten", "Opportunität"]
    assert [i.key for i in items] == ["rent_loss", "operating_loss", "opportunity_loss"]
    assert items[0].color == "#2563EB"
    assert items[-1].value == r.opportunity_loss


def test_breakdown_empty_when_nothing_is_lost():
    r = derive_vacancy(VacancyInput(vacant_units=0))
    assert vacancy_breakdown(r) == []
