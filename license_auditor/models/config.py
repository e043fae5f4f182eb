"""Configuration Pydantic models for license-auditor."""
from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field


class AuditConfig(BaseModel):
    """Raw policy configuration for license-auditor.

    Unknown keys in the configuration file are ignored so the file can be
    shared with other tools.
    """

    model_config = {"extra": "ignore"}

    whitelist: List[str] = Field(
        default_factory=list,
        description="License types that are approved for use.",
    )
    blacklist: List[str] = Field(
        default_factory=list,
        description="License types that are never approved, even if whitelisted.",
    )
    exceptions: List[str] = Field(
        default_factory=list,
        description="Dependencies exempt from license checks, written as the "
        "canonical (PEP 503) name the scanner reports, e.g. 'pyyaml' or "
        "'typing-extensions'. Matching is exact. Entries ending in '/...' "
        "cover every nested identifier.",
    )
