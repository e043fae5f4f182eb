"""Policy-related Pydantic models for license-auditor."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from license_auditor.models.config import AuditConfig


class Verdict(str, Enum):
    """Outcome of evaluating one dependency."""

    APPROVED = "approved"
    EXCEPTIONED = "exceptioned"
    UNRECOGNIZED = "unrecognized"  # advisory only, produced by list mode
    NON_APPROVED = "non_approved"


class Policy(BaseModel):
    """Normalized license policy.

    Built fresh for every audit run from the raw configuration lists.
    Exception entries are split into exact dependency identifiers and
    wildcard prefixes (marker already stripped).
    """

    model_config = {"extra": "forbid", "frozen": True}

    whitelist: frozenset[str] = Field(
        default_factory=frozenset,
        description="Approved license types",
    )
    blacklist: frozenset[str] = Field(
        default_factory=frozenset,
        description="Denied license types, overriding the whitelist",
    )
    exact_exceptions: frozenset[str] = Field(
        default_factory=frozenset,
        description="Dependency identifiers exempt from license evaluation",
    )
    prefix_exceptions: frozenset[str] = Field(
        default_factory=frozenset,
        description="Identifier prefixes exempt from license evaluation",
    )

    @classmethod
    def from_config(cls, config: AuditConfig) -> Policy:
        """Build a policy from a loaded configuration.

        Args:
            config: Parsed policy configuration.

        Returns:
            Normalized Policy.
        """
        from license_auditor.audit.policy import build_policy

        return build_policy(config.whitelist, config.blacklist, config.exceptions)
