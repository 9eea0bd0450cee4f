"""Configuration models for gdtfkit."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from gdtfkit.core.io.archive import DESCRIPTION_MEMBER
from gdtfkit.core.parsers.xml import DEFAULT_CHUNK_SIZE


class ParserConfig(BaseModel):
    """Decoder settings."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    description_member: str = Field(
        default=DESCRIPTION_MEMBER,
        min_length=1,
        description="Archive member holding the description document",
    )

    chunk_size: int = Field(
        default=DEFAULT_CHUNK_SIZE, gt=0, description="Bytes fed to the XML parser per read"
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    level: str = Field(
        default="WARNING",
        pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL|debug|info|warning|error|critical)$",
        description="Log level",
    )

    structured: bool = Field(default=False, description="Emit JSON lines instead of text")

    filename: str | None = Field(default=None, description="Log file path (stderr if unset)")

    format: str | None = Field(default=None, description="Custom text format string")


class AppConfig(BaseModel):
    """Application configuration."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    parser: ParserConfig = Field(default_factory=ParserConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
