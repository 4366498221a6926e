"""
Sections of the extinit configuration file.

    [logging]
    level = "info"
    console = true

    [core]
    extensions = ["org.host:runtime"]

    [manifest]
    path = "extensions.toml"
"""

from __future__ import annotations

from typing import Literal

from pydantic import ConfigDict, field_validator

from .base import ExtinitBaseModel

LogLevel = Literal["debug", "info", "warning", "error"]


class ConfigBaseModel(ExtinitBaseModel):
    """Config section: values from TOML or env are coerced, unknown keys dropped."""

    model_config = ConfigDict(strict=False, extra="ignore")


class LoggingConfig(ConfigBaseModel):
    """Diagnostics output of the initializer."""

    level: LogLevel = "warning"
    console: bool = False
    file: bool = False

    @field_validator("level", mode="before")
    @classmethod
    def lowercase_level(cls, v: object) -> object:
        return v.lower() if isinstance(v, str) else v


class CoreConfig(ConfigBaseModel):
    """Ids and features the host runtime already provides; never initialized."""

    extensions: list[str] = []


class ManifestConfig(ConfigBaseModel):
    """Where the installed-extension manifest lives, relative to the cwd."""

    path: str = "extensions.toml"
