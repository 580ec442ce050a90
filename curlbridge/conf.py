from __future__ import annotations

import logging
from typing import Annotated, Any, Optional
from urllib.parse import parse_qs, urlparse

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import (
    BaseSettings as _BaseSettings,
    NoDecode,
    SettingsConfigDict,
)

from .tracing import TracerConfig, TraceScheme
from .utils.coercion import coerce_bool


class Settings(_BaseSettings):
    """System-wide settings."""

    model_config = SettingsConfigDict(
        env_prefix="CURLBRIDGE_",
        case_sensitive=True,
        populate_by_name=True,
    )

    #: Disable colorful logs (https://no-color.org)
    NO_COLOR: bool = Field(
        False, validation_alias=AliasChoices("NO_COLOR", "CURLBRIDGE_NO_COLOR")
    )

    #: Name of the level the package logger starts at.
    LOG_LEVEL: str = "WARNING"

    #: Target rendered by the command line when none is provided.
    DEFAULT_TARGET: str = "curl"

    #: Raise :class:`~curlbridge.exceptions.UnsupportedTargetError` for unknown
    #: targets instead of falling back to curl.
    STRICT_TARGETS: bool = False

    #: Tracing resource name. This is used by some exporters.
    TRACING_RESOURCE_NAME: str = "curlbridge"

    #: Optional list of hosts to send traces to. For example:
    #: otlp+http://localhost:4318,otlp+grpc://remote.com:4317?secure=true,console
    TRACING_EXPORTERS: Annotated[Optional[list[TracerConfig]], NoDecode] = None

    @field_validator("NO_COLOR", mode="before")
    @classmethod
    def validate_no_color(cls, value: Any):
        """Any non-empty value disables colors."""
        if isinstance(value, str):
            return value != ""
        return value

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def validate_log_level(cls, value: Any):
        """Ensure the log level names a real level."""
        name = str(value).upper()
        if not isinstance(logging.getLevelName(name), int):
            raise ValueError(f"{value} is not a valid log level.")
        return name

    @field_validator("TRACING_EXPORTERS", mode="before")
    @classmethod
    def validate_tracing_exporters(cls, value: Any):
        """Validate the entries for tracing exporters."""
        if value is None:
            return None

        if isinstance(value, str):
            value = [host.strip() for host in value.split(",") if host.strip()]

        return [
            item if isinstance(item, TracerConfig) else cls._parse_exporter(item)
            for item in value
        ]

    @staticmethod
    def _parse_exporter(value: str) -> TracerConfig:
        if value == TraceScheme.console.value:
            return TracerConfig(scheme=TraceScheme.console, host="")

        parts = urlparse(value)

        try:
            scheme = TraceScheme(parts.scheme)
        except ValueError:
            raise ValueError(
                f"{value} does not define a valid scheme: " f'[{",".join(TraceScheme)}]'
            )

        options = parse_qs(parts.query)

        return TracerConfig(
            scheme=scheme,
            host=parts.netloc,
            secure=coerce_bool(options["secure"][0]) if "secure" in options else True,
        )


settings = Settings()  # pyright: ignore
