# src/leerstand/api/http.py
from __future__ import annotations

import math
from dataclasses import asdict
from typing import Any

from fastapi import Depends, FastAPI, Header, HTTPException

from leerstand.adapters.config import config
from leerstand.adapters.copy_draft_gemini import GeminiCopyDraftClient
from leerstand.adapters.logging_utils import get_logger, log_context
from leerstand.domain.ports import CopyDraftClient
from leerstand.domain.roi import derive_roi, funnel_series
from leerstand.domain.vacancy import derive_vacancy, vacancy_breakdown
from leerstand.domain.views import (
    DASHBOARD,
    VIEW_LABELS,
    ContactFormEmbed,
    ViewState,
    switch_view,
)
from leerstand.services.drafting import DraftInProgressError, DraftSessionRegistry
from leerstand.services.formatting import format_roi_result, format_vacancy_result
from .schemas import (
    ContactFormOut,
    DraftRequest,
    DraftResponse,
    ROIRequest,
    ROIResponse,
    VacancyRequest,
    VacancyResponse,
    ViewItem,
)

logger = get_logger(__name__)

app = FastAPI(title="leerstand")

_VIEW_PATHS: dict[ViewState, str] = {
    ViewState.DASHBOARD: "/views/DASHBOARD",
    ViewState.VACANCY_CALC: "/vacancy/defaults",
    ViewState.ROI_CALC: "/roi/defaults",
}

_draft_sessions = DraftSessionRegistry()
_draft_client: CopyDraftClient | None = None


def get_copy_draft_client() -> CopyDraftClient:
    # built on first use so importing the app never needs an API key
    global _draft_client
    if _draft_client is None:
        _draft_client = GeminiCopyDraftClient()
    return _draft_client


@app.get("/health")
def health() -> dict[str, Any]:
    return {"status": "ok", "env": config.ENV}


# -----------------------------
# Navigation
# -----------------------------
@app.get("/views", response_model=list[ViewItem])
def list_views() -> list[ViewItem]:
    return [ViewItem(name=v.value, label=VIEW_LABELS[v], path=_VIEW_PATHS[v]) for v in ViewState]


@app.get("/views/{name}")
def get_view(name: str) -> dict[str, Any]:
    """
    Resolve a view name and return what that view needs to render.
    Unknown names fall back to the dashboard.
    """
    view = switch_view(name)
    if view is ViewState.VACANCY_CALC:
        payload: dict[str, Any] = {"defaults": vacancy_defaults().model_dump(by_alias=True)}
    elif view is ViewState.ROI_CALC:
        payload = {"defaults": roi_defaults().model_dump(by_alias=True)}
    else:
        payload = {"content": asdict(DASHBOARD)}
    return {"view": view.value, "label": VIEW_LABELS[view], **payload}


@app.get("/contact-form", response_model=ContactFormOut)
def contact_form() -> ContactFormOut:
    embed = ContactFormEmbed(
        portal_id=config.HUBSPOT_PORTAL_ID,
        form_id=config.HUBSPOT_FORM_ID,
        region=config.HUBSPOT_REGION,
    )
    return ContactFormOut(**asdict(embed))


# -----------------------------
# Calculators
# -----------------------------
@app.get("/vacancy/defaults", response_model=VacancyRequest)
def vacancy_defaults() -> VacancyRequest:
    return VacancyRequest()


def _require_finite(result: Any) -> None:
    """
    Finite inputs can still overflow a product or ratio. JSON cannot carry
    inf/nan, so such a result is answered with 422 instead of a broken 500.
    """
    bad = sorted(k for k, v in asdict(result).items() if not math.isfinite(v))
    if bad:
        logger.warning("calculation_not_finite", extra=log_context(fields=bad))
        raise HTTPException(
            status_code=422,
            detail=f"Inputs too large, result not finite: {', '.join(bad)}",
        )


@app.post("/vacancy", response_model=VacancyResponse)
def vacancy_endpoint(payload: VacancyRequest) -> VacancyResponse:
    result = derive_vacancy(payload.to_domain())
    _require_finite(result)
    return VacancyResponse(
        inputs=payload,
        result=asdict(result),
        breakdown=[asdict(b) for b in vacancy_breakdown(result)],
        formatted=format_vacancy_result(result),
    )


@app.get("/roi/defaults", response_model=ROIRequest)
def roi_defaults() -> ROIRequest:
    return ROIRequest()


@app.post("/roi", response_model=ROIResponse)
def roi_endpoint(payload: ROIRequest) -> ROIResponse:
    result = derive_roi(payload.to_domain())
    _require_finite(result)
    return ROIResponse(
        inputs=payload,
        result=asdict(result),
        funnel=[asdict(s) for s in funnel_series(result)],
        formatted=format_roi_result(result),
        roi_positive=result.roi_percent >= 0,
    )


# -----------------------------
# Copy drafts
# -----------------------------
@app.post("/campaign/draft", response_model=DraftResponse)
def draft_endpoint(
    body: DraftRequest,
    client: CopyDraftClient = Depends(get_copy_draft_client),
    x_session_id: str = Header("default"),
) -> DraftResponse:
    """
    Generation failures come back as the fallback text with status 200.
    Only a second submit while the same session is still waiting is refused.
    """
    try:
        text = _draft_sessions.submit(x_session_id, body.to_domain(), client)
    except DraftInProgressError as e:
        raise HTTPException(status_code=409, detail=str(e)) from e
    return DraftResponse(text=text)


@app.delete("/campaign/draft")
def discard_draft_session(x_session_id: str = Header("default")) -> dict[str, Any]:
    _draft_sessions.discard(x_session_id)
    return {"discarded": x_session_id}
