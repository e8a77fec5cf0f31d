"""Configuration management using pydantic-settings."""

import tomllib
from enum import Enum
from pathlib import Path

from pydantic import AliasChoices, Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ROOT = "."
DEFAULT_MAX_RETRIES = 2
CONFIG_PATH = Path("~/.config/invoice-renamer/config.toml").expanduser()
API_KEY_ENV = "INVOICE_RENAMER_API_KEY"


class ConfigurationError(Exception):
    """Raised when the configuration is unusable (e.g. no API credential)."""


class LLMProvider(str, Enum):
    """Available extraction providers."""

    CLAUDE_API = "claude-api"
    OPENAI = "openai"


DEFAULT_MODELS = {
    LLMProvider.CLAUDE_API: "claude-sonnet-4-20250514",
    LLMProvider.OPENAI: "gpt-4.1-mini",
}

PROVIDER_KEY_ENV = {
    LLMProvider.CLAUDE_API: "ANTHROPIC_API_KEY",
    LLMProvider.OPENAI: "OPENAI_API_KEY",
}


class LLMConfig(BaseSettings):
    """Extraction provider configuration."""

    model_config = SettingsConfigDict(env_prefix="INVOICE_RENAMER_LLM_")

    provider: LLMProvider = LLMProvider.CLAUDE_API
    model: str | None = None
    max_retries: int = DEFAULT_MAX_RETRIES
    max_tokens: int = 1024

    @property
    def model_name(self) -> str:
        return self.model or DEFAULT_MODELS[self.provider]


class PathsConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="INVOICE_RENAMER_PATHS_")

    root: Path = Path(DEFAULT_ROOT)

    @field_validator("root", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        return Path(v).expanduser()

    @property
    def input(self) -> Path:
        return self.root / "in"

    @property
    def output(self) -> Path:
        return self.root / "out"

    @property
    def processed(self) -> Path:
        return self.root / "processed"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="INVOICE_RENAMER_",
        env_file=".env",
        extra="ignore",
        populate_by_name=True,
    )

    paths: PathsConfig = Field(default_factory=PathsConfig)
    llm: LLMConfig = Field(default_factory=LLMConfig)
    prompt_examples: str | None = None

    api_key: SecretStr | None = None
    anthropic_api_key: SecretStr | None = Field(
        default=None, validation_alias=AliasChoices("ANTHROPIC_API_KEY", "anthropic_api_key")
    )
    openai_api_key: SecretStr | None = Field(
        default=None, validation_alias=AliasChoices("OPENAI_API_KEY", "openai_api_key")
    )


def resolve_api_key(settings: Settings) -> str:
    """Return the API credential for the configured provider.

    The tool's own key wins over the provider's native variable.
    """
    provider = settings.llm.provider
    native = (
        settings.anthropic_api_key
        if provider == LLMProvider.CLAUDE_API
        else settings.openai_api_key
    )
    for secret in (settings.api_key, native):
        if secret is not None and secret.get_secret_value().strip():
            return secret.get_secret_value().strip()

    raise ConfigurationError(
        f"Missing API key: set {API_KEY_ENV} or {PROVIDER_KEY_ENV[provider]} "
        "(environment or .env file)"
    )


def load_settings(config_path: Path | None = None) -> Settings:
    """Load settings from TOML file, falling back to defaults."""
    path = config_path or CONFIG_PATH

    if path.exists():
        with open(path, "rb") as f:
            data = tomllib.load(f)

        paths = PathsConfig(**data.get("paths", {}))
        llm = LLMConfig(**data.get("llm", {}))
        prompt = data.get("prompt", {})
        overrides = {}
        if "examples" in prompt:
            overrides["prompt_examples"] = prompt["examples"]
        if "api_key" in data:
            overrides["api_key"] = data["api_key"]
        return Settings(paths=paths, llm=llm, **overrides)

    return Settings()
