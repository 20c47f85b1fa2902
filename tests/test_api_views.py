# tests/test_api_views.py
def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"


def test_three_views_listed(client):
    names = [v["name"] for v in client.get("/views").json()]
    assert names == ["DASHBOARD", "VACANCY_CALC", "ROI_CALC"]


def test_calculator_view_carries_defaults(client):
    data = client.get("/views/VACANCY_CALC").json()
    assert data["view"] == "VACANCY_CALC"
    assert data["defaults"]["monthlyRent"] == 2500


def test_unknown_view_falls_back_to_dashboard(client):
    data = client.get("/views/impressum").json()
    assert data["view"] == "DASHBOARD"
    assert data["content"]["claim"] == "Swiss Real Estate Technology"


def test_contact_form_embed(client):
    data = client.get("/contact-form").json()
    assert data["portal_id"] == "146982251"
    assert data["form_id"] == "7b899e82-cb77-48a6-b59f-614a305a25a4"
    assert data["region"] == "eu1"
