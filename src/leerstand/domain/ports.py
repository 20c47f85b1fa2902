# src/leerstand/domain/ports.py
from __future__ import annotations

from typing import Protocol

from leerstand.domain.campaign import CampaignDraftRequest


# ----------------------------
# Text generation provider
# ----------------------------

class TextGenerator(Protocol):
    def generate(self, prompt: str, *, model: str) -> str | None:
        """Return the generated text, None/"" when the service yields none. May raise."""
        ...


# ----------------------------
# Copy drafting (never raises)
# ----------------------------

class CopyDraftClient(Protocol):
    def submit(self, request: CampaignDraftRequest) -> str:
        ...
