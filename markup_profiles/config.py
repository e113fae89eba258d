from functools import lru_cache
from typing import Dict, List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Centralized application settings leveraging environment overrides.
    """

    app_name: str = "Markup Output Profiles"
    environment: str = Field("local", validation_alias="ENVIRONMENT")
    log_level: str = Field("INFO", description="Root log level for the app factory")
    allow_origins: List[str] = Field(default_factory=lambda: ["*"])

    # Token marking where the editor caret lands in generated output
    caret_placeholder: str = "{%::zen-caret::%}"

    # Optional directory of *.yaml profile definitions loaded at startup
    profiles_dir: Optional[str] = Field(None, validation_alias="PROFILES_DIR")

    # Per-syntax profile overrides, e.g. {"xsl": "xml", "haml": "plain"}
    syntax_profiles: Dict[str, str] = Field(default_factory=dict)

    class Config:
        env_file = ".env"
        case_sensitive = False


@lru_cache
def get_settings() -> Settings:
    return Settings()
