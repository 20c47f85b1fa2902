# src/leerstand/adapters/config.py
from typing import Any

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseSettings):
    # App & logging
    ENV: str = Field(default="dev")
    LOG_LEVEL: str = Field(default="INFO")

    # -----------------------------
    # Text generation (copy drafts)
    # -----------------------------
    # The frontend build injected a bare API_KEY, so accept that too.
    GEMINI_API_KEY: str | None = Field(
        default=None,
        validation_alias=AliasChoices("LEERSTAND_GEMINI_API_KEY", "GEMINI_API_KEY", "API_KEY"),
    )
    GEMINI_MODEL: str = Field(default="gemini-2.5-flash")
    GEMINI_BASE_URL: str = Field(default="https://generativelanguage.googleapis.com/v1beta")
    GEMINI_TIMEOUT_S: float = Field(default=60.0)

    # -----------------------------
    # Contact form embed
    # -----------------------------
    HUBSPOT_PORTAL_ID: str = Field(default="146982251")
    HUBSPOT_FORM_ID: str = Field(default="7b899e82-cb77-48a6-b59f-614a305a25a4")
    HUBSPOT_REGION: str = Field(default="eu1")

    model_config = SettingsConfigDict(
        env_prefix="LEERSTAND_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("GEMINI_API_KEY", mode="before")
    @classmethod
    def _blank_key_is_none(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("GEMINI_TIMEOUT_S", mode="before")
    @classmethod
    def _timeout_positive(cls, v: Any) -> Any:
        f = float(v)
        if f <= 0:
            raise ValueError("GEMINI_TIMEOUT_S must be > 0")
        return f


config = AppConfig()
