"""Configuration contracts."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

_PLACEHOLDERS = ("{project}", "{site}")


class DownsyncConfig(BaseModel):
    root: Path = Path(".")
    upstream_prefix: str = "static_upstream"
    downstream_prefix: str = "downstream"
    sites: tuple[str, str] = ("default", "secure")
    update_command: list[str] = Field(
        default_factory=lambda: ["bin/update-downstream", "--site", "{site}", "{project}"]
    )
    sign_command: list[str] = Field(default_factory=lambda: ["bin/sign-downstream", "--site", "{site}", "{project}"])
    vcs_command: list[str] = Field(default_factory=lambda: ["hg"])
    watch_command: list[str] = Field(default_factory=lambda: ["watchman", "--json-command", "--persistent"])
    subscription_name: str = "downsync"
    max_concurrent: int = Field(default=8, ge=1, le=32)

    model_config = {"frozen": True}

    @field_validator("upstream_prefix", "downstream_prefix")
    @classmethod
    def validate_prefix(cls, value: str) -> str:
        prefix = value.strip().strip("/")
        if not prefix:
            raise ValueError("path prefixes must be non-empty")
        return prefix

    @field_validator("update_command", "sign_command")
    @classmethod
    def validate_template(cls, value: list[str]) -> list[str]:
        if not value:
            raise ValueError("command templates must be non-empty")
        joined = " ".join(value)
        missing = [placeholder for placeholder in _PLACEHOLDERS if placeholder not in joined]
        if missing:
            raise ValueError(f"command template is missing placeholders: {', '.join(missing)}")
        return value

    @field_validator("vcs_command", "watch_command")
    @classmethod
    def validate_command(cls, value: list[str]) -> list[str]:
        if not value:
            raise ValueError("commands must be non-empty")
        return value

    def render(self, template: list[str], *, project: str, site: str) -> list[str]:
        return [part.replace("{project}", project).replace("{site}", site) for part in template]
