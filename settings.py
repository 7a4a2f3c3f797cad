# settings.py
"""
Runtime configuration.

Values come from ``CFGGEN_``-prefixed environment variables or a local
``.env`` file; command-line flags override them.

    CFGGEN_MERGE_POLICY=drop
    CFGGEN_OUTPUT_FORMAT=dot
    CFGGEN_SOURCE_SUFFIXES='[".c", ".h"]'
"""
from enum import Enum
from typing import List

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from cfg_model import MergePolicy


class OutputFormat(str, Enum):
    MERMAID = "mermaid"
    DOT = "dot"

    @property
    def suffix(self) -> str:
        return ".md" if self is OutputFormat.MERMAID else ".dot"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="CFGGEN_",
        extra="ignore",
    )

    merge_policy: MergePolicy = MergePolicy.CONTRACT
    output_format: OutputFormat = OutputFormat.MERMAID
    source_suffixes: List[str] = [".c"]
    log_level: str = "INFO"

    @field_validator("source_suffixes")
    @classmethod
    def _dotted(cls, v):
        return [s if s.startswith(".") else f".{s}" for s in v]

    @field_validator("log_level")
    @classmethod
    def _upper(cls, v):
        return v.upper()


def get_settings() -> Settings:
    return Settings()
