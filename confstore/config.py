"""Configuration model for a store handle."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ApplicationNameError


class StoreConfig(BaseModel):
    """Validates the identity and serialization options of a store."""

    model_config = ConfigDict(frozen=True)

    application_name: str = Field(
        description="Directory name used under the platform configuration root.",
    )
    encoding: str = Field(
        default="utf-8",
        description="Text encoding used by the built-in JSON, YAML and TOML codecs.",
    )
    json_indent: int | None = Field(
        default=2,
        ge=0,
        description="Indentation for JSON output. None writes compact JSON.",
    )
    yaml_sort_keys: bool = Field(
        default=False,
        description="Sort mapping keys when writing YAML.",
    )

    @field_validator("application_name")
    @classmethod
    def _validate_application_name(cls, value: str) -> str:
        name = value.strip()
        if not name:
            raise ValueError("Application name must not be empty.")
        if "/" in name or "\\" in name:
            raise ValueError("Application name must not contain path separators.")
        return name

    @classmethod
    def for_application(cls, application_name: str, **options: Any) -> StoreConfig:
        """Build a config, reporting a bad application name as ApplicationNameError."""
        try:
            return cls(application_name=application_name, **options)
        except ValidationError as exc:
            if any(error["loc"] == ("application_name",) for error in exc.errors()):
                raise ApplicationNameError(
                    f"Invalid application name {application_name!r}: {exc}"
                ) from exc
            raise
