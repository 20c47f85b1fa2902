# src/leerstand/domain/views.py
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class ViewState(str, Enum):
    DASHBOARD = "DASHBOARD"
    VACANCY_CALC = "VACANCY_CALC"
    ROI_CALC = "ROI_CALC"


# Navigation labels as shown in the header
VIEW_LABELS: dict[ViewState, str] = {
    ViewState.DASHBOARD: "Übersicht",
    ViewState.VACANCY_CALC: "Cost-of-Vacancy",
    ViewState.ROI_CALC: "ROI Rechner",
}


def switch_view(target: str | ViewState | None) -> ViewState:
    """
    Resolve a navigation target. Anything unknown lands on the dashboard.
    Accepts the enum, its value ("ROI_CALC") or a case-insensitive name.
    """
    if isinstance(target, ViewState):
        return target
    if not target:
        return ViewState.DASHBOARD
    key = str(target).strip().upper()
    try:
        return ViewState(key)
    except ValueError:
        return ViewState.DASHBOARD


# --------------------------------------------
# Dashboard content
# --------------------------------------------

@dataclass(frozen=True)
class ModuleCard:
    title: str
    tag: str
    desc: str


@dataclass(frozen=True)
class ToolCard:
    title: str
    desc: str
    action: str
    target: ViewState


@dataclass(frozen=True)
class CaseCard:
    value: str
    unit: str
    desc: str


@dataclass(frozen=True)
class DashboardContent:
    claim: str
    headline: list[str]
    intro: str
    trust_indicators: list[str]
    modules: list[ModuleCard]
    tools: list[ToolCard]
    cases: list[CaseCard]
    why_us: list[str]
    contact_headline: str = "Projekt besprechen"
    contact_intro: str = "Erhalten Sie innerhalb von 24h eine Potenzialanalyse."
    pain_points: dict[str, str] = field(default_factory=dict)


DASHBOARD = DashboardContent(
    claim="Swiss Real Estate Technology",
    headline=["Leerstand minimieren.", "Time-to-Rent halbieren."],
    intro=(
        "Ihre Projektwebseite live in 72 Stunden. Ihre Kampagnen datengetrieben ab Tag 1. "
        "Das Betriebssystem für Vermarkter, die Ergebnisse schulden."
    ),
    trust_indicators=["Schnelligkeit", "Datenfokus", "Transparenz", "Swiss Made"],
    pain_points={
        "Leerstandszyklen": "Unnötig verlängert",
        "Marketingbudget": "Intransparent genutzt",
        "Reporting": "Fehlende KPIs",
    },
    modules=[
        ModuleCard(
            "Projektwebseite",
            "72h Live",
            "SEO-ready, mobile-first und conversion-optimiert. Technisch exzellent und sofort einsatzbereit.",
        ),
        ModuleCard(
            "Performance Ads",
            "Intent-Based",
            "Google Search für akuten Bedarf, Social Media für Branding. Kein Streuverlust, nur qualifizierte Leads.",
        ),
        ModuleCard(
            "Lead Management",
            "CRM-Ready",
            "Automatische Qualifizierung und Priorisierung. Ihr Vertrieb spricht nur mit den besten Kontakten.",
        ),
        ModuleCard(
            "Intelligence",
            "Real-Time",
            "Wöchentliche Reports zu Time-to-Rent und Cost-per-Lease geben Ihnen die Kontrolle zurück.",
        ),
    ],
    tools=[
        ToolCard(
            "Cost-of-Vacancy Rechner",
            "Leerstand ist kein Zustand – es ist eine präzise Kostenposition. "
            "Berechnen Sie Mietausfall und Opportunitätskosten.",
            "Kosten berechnen",
            ViewState.VACANCY_CALC,
        ),
        ToolCard(
            "ROI Rechner",
            "Lohnt sich das Budget? Wir modellieren Leadkosten, Konversionspfade und Amortisation vorab.",
            "ROI simulieren",
            ViewState.ROI_CALC,
        ),
    ],
    cases=[
        CaseCard("22", "Einheiten", "in 6 Wochen vollvermietet trotz Preissensitivität."),
        CaseCard("+40%", "Besichtigungen", "in 30 Tagen durch psychologisches Messaging."),
        CaseCard("-50%", "Cost-per-Lead", "durch progressive Funnel-Optimierung."),
    ],
    why_us=[
        "100% Real Estate Fokus",
        "Go-Live in 72 Stunden",
        "Klare KPIs (Time-to-Rent)",
        "Schweizer Marktexpertise",
        "DSG-konformes Tracking",
        "Performance-Beratung",
    ],
)


@dataclass(frozen=True)
class ContactFormEmbed:
    """Mount descriptor for the hosted contact form; the form itself is rendered by HubSpot."""
    portal_id: str
    form_id: str
    region: str
    target: str = "#hubspot-form-target"
    script_src: str = "//js-eu1.hsforms.net/forms/embed/v2.js"
