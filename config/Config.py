# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-12
# Description: Config
# -----------------------------------------------------------------------------

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv, find_dotenv

# Load .env once globally
load_dotenv(find_dotenv(usecwd=True), override=False)


@dataclass(frozen=True)
class Config:
    # OpenAI (embeddings + chat)
    openai_api_key: str
    openai_base_url: Optional[str] = None
    openai_org: Optional[str] = None
    openai_chat_model: str = "gpt-4o-mini"
    openai_embed_model: str = "text-embedding-3-small"

    # ---- Single source of truth: field_name -> ENV VAR NAME ----
    ENV_VARS = {
        "openai_api_key": "OPENAI_API_KEY",
        "openai_base_url": "OPENAI_BASE_URL",      # e.g. https://api.openai.com/v1
        "openai_org": "OPENAI_ORG",
        "openai_chat_model": "OPENAI_CHAT_MODEL",
        "openai_embed_model": "OPENAI_EMBED_MODEL",
    }

    REQUIRED_FIELDS = ("openai_api_key",)

    @staticmethod
    def from_env() -> "Config":
        """Build Config object from environment variables, keeping field defaults for unset optionals."""
        kwargs = {}
        for field_name, env_name in Config.ENV_VARS.items():
            value = (os.getenv(env_name) or "").strip()
            if value or field_name in Config.REQUIRED_FIELDS:
                kwargs[field_name] = value
        return Config(**kwargs)

    def __post_init__(self):
        """
        Fail fast if any required config is missing.
        """
        missing_fields = [f for f in self.REQUIRED_FIELDS if not getattr(self, f)]

        if missing_fields:
            missing_env_vars = [self.ENV_VARS[f] for f in missing_fields]
            raise ValueError(f"Missing required environment variables: {missing_env_vars}")

        if not self.openai_chat_model or not self.openai_embed_model:
            raise ValueError("openai_chat_model and openai_embed_model must not be empty")

    def summary(self) -> dict:
        """Return a safe, non-sensitive summary for logging."""
        return {
            "openai_base_url": self.openai_base_url,
            "openai_chat_model": self.openai_chat_model,
            "openai_embed_model": self.openai_embed_model,
        }
