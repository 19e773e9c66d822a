"""
Configuration Schemas.

One pydantic model per file in config/settings/:
    ApplicationSchema  -> application.yaml
    StorageSchema      -> storage.yaml
    LoggingSchema      -> logging.yaml

Unknown keys are rejected, so a typo in a YAML file fails at startup
rather than silently falling back to a default.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class _StrictBase(BaseModel):
    model_config = ConfigDict(extra="forbid")


# =============================================================================
# application.yaml
# =============================================================================


class ServerSchema(_StrictBase):
    """Address the API binds to and the CLI client connects to."""

    host: str
    port: int = Field(ge=1, le=65535)


class ClientSchema(_StrictBase):
    timeout_seconds: float = Field(gt=0)


class ApplicationSchema(_StrictBase):
    name: str
    version: str
    description: str
    environment: Literal["development", "test", "production"]
    debug: bool
    greeting: str
    server: ServerSchema
    client: ClientSchema


# =============================================================================
# storage.yaml
# =============================================================================


class StorageSchema(_StrictBase):
    """Where the blog collection lives on disk and how it is written."""

    blogs_file: str
    indent: int = Field(ge=0)


# =============================================================================
# logging.yaml
# =============================================================================


class ConsoleLogSchema(_StrictBase):
    enabled: bool
    stream: Literal["stdout", "stderr"]


class FileLogSchema(_StrictBase):
    enabled: bool
    path: str
    max_bytes: int = Field(gt=0)
    backup_count: int = Field(ge=0)


class LoggingSchema(_StrictBase):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    format: Literal["json", "console"]
    console: ConsoleLogSchema
    file: FileLogSchema
