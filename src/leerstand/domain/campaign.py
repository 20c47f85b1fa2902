# src/leerstand/domain/campaign.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

DraftState = Literal["idle", "requesting"]

# Shown in place of generated copy; wording is user-facing, keep verbatim.
FALLBACK_EMPTY = "Konnte keine Texte generieren."
FALLBACK_ERROR = "Fehler bei der Generierung der Marketing-Texte. Bitte prüfen Sie den API Key."

OUTPUT_LANGUAGE = "Deutsch (Schweiz)"
OUTPUT_TONE = "Hochwertig, Exklusiv, Dringlich"


@dataclass(frozen=True)
class CampaignDraftRequest:
    project_type: str = "Neubau Eigentumswohnungen"
    location: str = "Zürich Oerlikon"
    usp: str = "Rooftop-Terrasse, Smart Home Standard, Erstbezug"
    target_audience: str = "Young Professionals, Expats"


def build_prompt(req: CampaignDraftRequest) -> str:
    """
    Render the instruction sent to the text model.

    Fields are embedded verbatim (no escaping, no trimming).
    """
    return (
        "Du bist ein Experte für digitale Immobilienvermarktung in der Schweiz.\n"
        "Erstelle basierend auf den folgenden Daten kurze, performance-orientierte Marketing-Texte.\n"
        "\n"
        "Projektdaten:\n"
        f"- Typ: {req.project_type}\n"
        f"- Ort: {req.location}\n"
        f"- USP: {req.usp}\n"
        f"- Zielgruppe: {req.target_audience}\n"
        "\n"
        "Bitte generiere folgenden Output im Markdown-Format:\n"
        "1. **Google Search Headline** (Max 30 Zeichen)\n"
        "2. **Google Search Description** (Max 90 Zeichen)\n"
        "3. **LinkedIn Ad Text** (Professionell, B2B-Fokus, Max 100 Wörter)\n"
        "4. **Meta/Instagram Ad Text** (Emotional, Visualisierend, Max 100 Wörter)\n"
        "\n"
        f"Sprache: {OUTPUT_LANGUAGE}. Tonalität: {OUTPUT_TONE}.\n"
    )
