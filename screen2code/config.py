from dataclasses import dataclass
from typing import Optional
import os
from dotenv import load_dotenv

from screen2code.constants import (
    DEFAULT_ANTHROPIC_MODEL,
    DEFAULT_HOST,
    DEFAULT_OPENAI_MODEL,
    DEFAULT_PORT,
    PROVIDER_ANTHROPIC,
    PROVIDER_OPENAI,
    SUPPORTED_PROVIDERS,
)


@dataclass(frozen=True)
class Config:
    vision_provider: str
    anthropic_api_key: Optional[str]
    anthropic_model: str
    openai_api_key: Optional[str]
    openai_model: str
    log_level: str
    host: str
    port: int

    @classmethod
    def from_env(cls) -> "Config":
        load_dotenv()

        provider = os.getenv("VISION_PROVIDER", PROVIDER_ANTHROPIC).strip().lower()
        anthropic_api_key = os.getenv("ANTHROPIC_API_KEY") or None
        anthropic_model = os.getenv("ANTHROPIC_MODEL") or DEFAULT_ANTHROPIC_MODEL
        openai_api_key = os.getenv("OPENAI_API_KEY") or None
        openai_model = os.getenv("OPENAI_MODEL") or DEFAULT_OPENAI_MODEL
        log_level = os.getenv("LOG_LEVEL", "INFO")
        host = os.getenv("HOST", DEFAULT_HOST)
        port = os.getenv("PORT", str(DEFAULT_PORT))

        return cls._validate(
            vision_provider=provider,
            anthropic_api_key=anthropic_api_key,
            anthropic_model=anthropic_model,
            openai_api_key=openai_api_key,
            openai_model=openai_model,
            log_level=log_level,
            host=host,
            port=int(port),
        )

    @staticmethod
    def _validate(
        vision_provider: str,
        anthropic_api_key: Optional[str],
        anthropic_model: str,
        openai_api_key: Optional[str],
        openai_model: str,
        log_level: str,
        host: str,
        port: int,
    ) -> "Config":
        # A missing API key is reported per request, not at startup.
        match vision_provider:
            case p if p in SUPPORTED_PROVIDERS:
                pass
            case _:
                raise ValueError(
                    f"VISION_PROVIDER must be one of {', '.join(SUPPORTED_PROVIDERS)}"
                )

        return Config(
            vision_provider=vision_provider,
            anthropic_api_key=anthropic_api_key,
            anthropic_model=anthropic_model,
            openai_api_key=openai_api_key,
            openai_model=openai_model,
            log_level=log_level,
            host=host,
            port=port,
        )

    @property
    def vision_api_key(self) -> Optional[str]:
        """Credential for the configured provider, or None when unset."""
        match self.vision_provider:
            case p if p == PROVIDER_OPENAI:
                return self.openai_api_key
            case _:
                return self.anthropic_api_key

    @property
    def vision_model(self) -> str:
        match self.vision_provider:
            case p if p == PROVIDER_OPENAI:
                return self.openai_model
            case _:
                return self.anthropic_model
