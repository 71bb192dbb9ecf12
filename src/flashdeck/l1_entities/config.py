"""Configuration Pydantic models — pure schema, no infrastructure defaults."""

from __future__ import annotations

from pydantic import BaseModel


class StorageConfig(BaseModel):
    snapshot_file: str


class ExportConfig(BaseModel):
    filename: str
    directory: str


class FetchConfig(BaseModel):
    timeout: float | None = None  # None = wait indefinitely
    follow_redirects: bool = True


class AppConfig(BaseModel):
    storage: StorageConfig
    export: ExportConfig
    fetch: FetchConfig
