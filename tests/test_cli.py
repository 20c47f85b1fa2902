from typer.testing import CliRunner

from entrypoints.cli import calc
from leerstand.adapters.copy_draft_gemini import GeminiCopyDraftClient
from leerstand.domain.campaign import FALLBACK_ERROR
from fixtures.generators import FailingGenerator, StubGenerator

runner = CliRunner()


def _rows(output):
    return [line.split() for line in output.splitlines()]


def test_vacancy_command_prints_total():
    r = runner.invoke(calc.app, ["vacancy"])
    assert r.exit_code == 0, r.output
    assert "CHF 40’500" in r.output
    assert "Mietausfall" in r.output


def test_roi_command_with_options():
    r = runner.invoke(calc.app, ["roi", "--budget", "350", "--lead-to-viewing", "50"])
    assert r.exit_code == 0, r.output
    rows = _rows(r.output)
    assert ["leads", "7"] in rows
    assert ["viewings", "3"] in rows
    assert ["Besichtigungen", "3"] in rows


def test_draft_command_prints_generated_text(monkeypatch):
    gen = StubGenerator(text="Wohnen am Rhein")
    monkeypatch.setattr(calc, "_make_draft_client", lambda: GeminiCopyDraftClient(generator=gen, model="m"))

    r = runner.invoke(calc.app, ["draft", "--location", "Basel"])
    assert r.exit_code == 0, r.output
    assert "Wohnen am Rhein" in r.output
    assert "- Ort: Basel" in gen.calls[0][0]


def test_draft_command_prints_fallback_on_failure(monkeypatch):
    monkeypatch.setattr(
        calc, "_make_draft_client", lambda: GeminiCopyDraftClient(generator=FailingGenerator(), model="m")
    )

    r = runner.invoke(calc.app, ["draft"])
    assert r.exit_code == 0, r.output
    assert FALLBACK_ERROR in r.output
