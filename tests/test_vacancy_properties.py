from hypothesis import given, strategies as st

from leerstand.domain.vacancy import VacancyInput, derive_vacancy, vacancy_breakdown

money = st.floats(min_value=0.0, max_value=50_000.0, allow_nan=False)
units = st.integers(min_value=0, max_value=500)
months = st.floats(min_value=0.0, max_value=36.0, allow_nan=False)
rate = st.floats(min_value=0.0, max_value=100.0, allow_nan=False)


@given(rent=money, n=units, m=months, op=money, fin=money, opp=rate)
def test_total_is_exact_sum_of_components(rent, n, m, op, fin, opp):
    r = derive_vacancy(VacancyInput(rent, n, m, op, fin, opp))

    assert r.total_loss == r.rent_loss + r.operating_loss + r.financing_loss + r.opportunity_loss


@given(rent=money, n=units, m=months, op=money, fin=money, opp=rate)
def test_derivation_is_idempotent(rent, n, m, op, fin, opp):
    inp = VacancyInput(rent, n, m, op, fin, opp)

    assert derive_vacancy(inp) == derive_vacancy(inp)


@given(rent=money, n=units, m=months, op=money, fin=money, opp=rate)
def test_breakdown_only_contains_positive_values(rent, n, m, op, fin, opp):
    items = vacancy_breakdown(derive_vacancy(VacancyInput(rent, n, m, op, fin, opp)))

    assert all(i.value > 0 for i in items)
    order = ["rent_loss", "operating_loss", "financing_loss", "opportunity_loss"]
    keys = [i.key for i in items]
    assert keys == sorted(keys, key=order.index)
