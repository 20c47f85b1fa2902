# src/leerstand/adapters/gemini_client.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import requests

from leerstand.adapters.config import AppConfig, config as default_config


class GeminiError(RuntimeError):
    pass


def _extract_text(payload: Any) -> str | None:
    """
    Concatenate candidates[0].content.parts[*].text.
    Returns None when the response carries no text (blocked prompt, empty candidates).
    """
    if not isinstance(payload, dict):
        raise GeminiError(f"Unexpected response type: {type(payload)}")

    candidates = payload.get("candidates") or []
    if not candidates:
        return None

    content = (candidates[0] or {}).get("content") or {}
    parts = content.get("parts") or []
    texts = [p.get("text") for p in parts if isinstance(p, dict) and p.get("text")]
    if not texts:
        return None
    return "".join(texts)


@dataclass(frozen=True)
class GeminiClient:
    """
    Minimal REST client for the generateContent endpoint.

    One POST per call: no retries, no streaming.
    """
    base_url: str
    api_key: str | None
    timeout_s: float = 60.0

    def generate(self, prompt: str, *, model: str) -> str | None:
        if not self.api_key:
            raise GeminiError(
                "Missing LEERSTAND_GEMINI_API_KEY. Set it in your environment before drafting copy."
            )

        url = self.base_url.rstrip("/") + f"/models/{model}:generateContent"
        headers = {
            "Content-Type": "application/json",
            "x-goog-api-key": self.api_key,
        }
        body = {"contents": [{"role": "user", "parts": [{"text": prompt}]}]}

        try:
            resp = requests.post(url, headers=headers, json=body, timeout=self.timeout_s)
        except requests.RequestException as e:
            raise GeminiError(f"Gemini request failed: {e!r}") from e

        if resp.status_code >= 400:
            raise GeminiError(f"Gemini HTTP {resp.status_code}: {resp.text}")

        try:
            payload = resp.json()
        except ValueError as e:
            raise GeminiError("Gemini returned a non-JSON body") from e

        return _extract_text(payload)


def make_gemini_client(cfg: AppConfig | None = None) -> GeminiClient:
    cfg = cfg or default_config
    return GeminiClient(
        base_url=cfg.GEMINI_BASE_URL,
        api_key=cfg.GEMINI_API_KEY,
        timeout_s=cfg.GEMINI_TIMEOUT_S,
    )
