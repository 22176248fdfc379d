# MediaSync Configuration Schema
# Pydantic models for the sync catalog

import os
import re

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SyncSource(BaseModel):
    """A single source -> destination pair handed to the sync tool."""

    model_config = ConfigDict(frozen=True)

    path: str = Field(description="Source path (directories end with a separator)")
    destination: str = Field(description="Destination, relative to the volume for volume-driven configs")

    @field_validator("path", "destination")
    @classmethod
    def expand_user(cls, v: str) -> str:
        """Expand ~ while keeping any trailing separator."""
        return os.path.expanduser(v)


class SyncConfig(BaseModel):
    """
    One predefined sync configuration.

    A config with a volume_pattern is volume-driven: one operation per
    mounted volume whose name matches. Without a pattern it is path-driven:
    offered only while its first source path exists.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Display label")
    description: str = Field(default="", description="Human-readable purpose")
    volume_pattern: str | None = Field(default=None, description="Regex matched against mounted volume names")
    sources: tuple[SyncSource, ...] = Field(min_length=1, description="Ordered source/destination pairs")
    sync_flags: tuple[str, ...] = Field(default=(), description="Flags passed verbatim to the sync tool")

    @field_validator("volume_pattern")
    @classmethod
    def check_pattern(cls, v: str | None) -> str | None:
        """Reject patterns that do not compile."""
        if v is None:
            return None
        try:
            re.compile(v)
        except re.error as e:
            raise ValueError(f"Invalid volume pattern {v!r}: {e}") from e
        return v

    @property
    def is_volume_driven(self) -> bool:
        return self.volume_pattern is not None

    def matches_volume(self, volume_name: str) -> bool:
        """Check whether a mounted volume name matches this config."""
        if self.volume_pattern is None:
            return False
        return re.search(self.volume_pattern, volume_name) is not None


class Catalog(BaseModel):
    """Root configuration model: the read-only table of sync configs."""

    model_config = ConfigDict(frozen=True)

    sync_command: str = Field(default="rsync", description="External sync executable")
    volumes_root: str | None = Field(default=None, description="Override for the removable-volumes mount root")
    configs: tuple[SyncConfig, ...] = Field(default=(), description="Sync configurations in menu order")

    @field_validator("volumes_root")
    @classmethod
    def expand_volumes_root(cls, v: str | None) -> str | None:
        if v is None:
            return None
        return os.path.expanduser(v)

    @property
    def has_volume_configs(self) -> bool:
        return any(config.is_volume_driven for config in self.configs)
