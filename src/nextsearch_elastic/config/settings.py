"""Application settings — Pydantic-based configuration with YAML and env var support.

Configuration is loaded from (in order of precedence):
  1. Environment variables (NEXTSEARCH_ prefix), then the .env file
  2. YAML config file (if specified)
  3. Default values
"""

from __future__ import annotations

from contextvars import ContextVar
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, YamlConfigSettingsSource

# YAML file consulted by the settings currently being built (see Settings.from_yaml).
_yaml_file: ContextVar[Path | None] = ContextVar("nextsearch_yaml_file", default=None)


class ElasticSettings(BaseModel):
    """Search cluster connection and global index configuration."""

    hosts: list[str] = Field(default_factory=lambda: ["https://localhost:9200"], description="Cluster node URLs")
    username: str | None = Field(default=None, description="HTTP basic-auth username")
    password: str | None = Field(default=None, description="HTTP basic-auth password")
    verify_certs: bool = Field(default=True, description="Whether to verify TLS certificates")
    index_name: str = Field(default="nextsearch", description="Name of the global index")
    pipeline_id: str = Field(default="nextsearch-ingest", description="Id of the global ingest pipeline")
    index_body: dict[str, Any] = Field(default_factory=dict, description="Index settings and mappings")
    pipeline_body: dict[str, Any] = Field(
        default_factory=lambda: {"description": "NextSearch ingest pipeline", "processors": []},
        description="Ingest pipeline definition",
    )
    extra: dict[str, Any] = Field(default_factory=dict, description="Extra options for the client constructor")

    @field_validator("hosts", mode="before")
    @classmethod
    def _parse_hosts(cls, v: Any) -> list[str]:
        """Parse hosts from JSON string (env var) or list."""
        if isinstance(v, str):
            import json

            try:
                parsed = json.loads(v)
                if isinstance(parsed, list):
                    return [str(h) for h in parsed]
            except (json.JSONDecodeError, TypeError):
                pass
            # Single host as plain string
            return [v] if v else []
        return list(v)


class ObservabilitySettings(BaseModel):
    """Observability configuration."""

    log_level: str = Field(default="info", description="Log level: debug, info, warning, error")
    log_format: str = Field(default="json", description="Log format: json, console")


class Settings(BaseSettings):
    """Root application settings.

    Configuration is loaded from environment variables with the NEXTSEARCH_ prefix.
    Nested settings use double underscores: NEXTSEARCH_ELASTIC__INDEX_NAME=docs

    Example:
        NEXTSEARCH_ELASTIC__HOSTS='["https://es1:9200", "https://es2:9200"]'
        NEXTSEARCH_ELASTIC__USERNAME=admin
        NEXTSEARCH_OBSERVABILITY__LOG_FORMAT=console
    """

    model_config = {
        "env_prefix": "NEXTSEARCH_",
        "env_nested_delimiter": "__",
        "case_sensitive": False,
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }

    elastic: ElasticSettings = Field(default_factory=ElasticSettings)
    observability: ObservabilitySettings = Field(default_factory=ObservabilitySettings)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        sources: tuple[PydanticBaseSettingsSource, ...] = (init_settings, env_settings, dotenv_settings)
        yaml_file = _yaml_file.get()
        if yaml_file is not None:
            sources += (YamlConfigSettingsSource(settings_cls, yaml_file=yaml_file),)
        return (*sources, file_secret_settings)

    @classmethod
    def from_yaml(cls, path: str | Path) -> Settings:
        """Load settings from a YAML configuration file.

        Values from the YAML file are used as defaults; environment variables
        and the ``.env`` file still take precedence.

        Args:
            path: Path to the YAML config file.

        Returns:
            Populated Settings instance.
        """
        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        token = _yaml_file.set(config_path)
        try:
            return cls()
        finally:
            _yaml_file.reset(token)
