# src/leerstand/adapters/copy_draft_gemini.py
from __future__ import annotations

from dataclasses import dataclass, field

from leerstand.adapters.config import config
from leerstand.adapters.gemini_client import make_gemini_client
from leerstand.adapters.logging_utils import get_logger, log_context
from leerstand.domain.campaign import (
    FALLBACK_EMPTY,
    FALLBACK_ERROR,
    CampaignDraftRequest,
    build_prompt,
)
from leerstand.domain.ports import TextGenerator

logger = get_logger(__name__)


@dataclass
class GeminiCopyDraftClient:
    """
    Turns a CampaignDraftRequest into ad copy.

    submit(...) never raises: an empty answer becomes FALLBACK_EMPTY and any
    failure on the way (missing key, network, HTTP error, odd payload) becomes
    FALLBACK_ERROR. Every call sends the full prompt again; nothing is cached.
    """

    generator: TextGenerator = field(default_factory=make_gemini_client)
    model: str = field(default_factory=lambda: config.GEMINI_MODEL)

    def submit(self, request: CampaignDraftRequest) -> str:
        prompt = build_prompt(request)
        try:
            text = self.generator.generate(prompt, model=self.model)
        except Exception as e:
            logger.error(
                "copy_draft_failed",
                extra=log_context(error=str(e), model=self.model, location=request.location),
            )
            return FALLBACK_ERROR

        if not text:
            logger.warning("copy_draft_empty", extra=log_context(model=self.model))
            return FALLBACK_EMPTY
        return text
