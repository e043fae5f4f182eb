"""Audit result Pydantic models."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from license_auditor.exceptions import PolicyViolationError
from license_auditor.models.policy import Verdict


class DependencyVerdict(BaseModel):
    """Verdict reached for a single dependency."""

    model_config = {"extra": "forbid", "frozen": True}

    dependency: str = Field(description="Dependency identifier")
    license_type: str = Field(
        default="", description="Detected license type (empty if unrecognized)"
    )
    verdict: Verdict = Field(description="Outcome of policy evaluation")


class LicenseListing(BaseModel):
    """Advisory listing entry produced without a policy."""

    model_config = {"extra": "forbid", "frozen": True}

    dependency: str = Field(description="Dependency identifier")
    license_type: str = Field(default="", description="Detected license type")
    verdict: Optional[Verdict] = Field(
        default=None,
        description="UNRECOGNIZED when no license type was detected",
    )


class AuditResult(BaseModel):
    """Aggregate result of an audit run."""

    model_config = {"extra": "forbid"}

    verdicts: list[DependencyVerdict] = Field(
        default_factory=list,
        description="One verdict per dependency, in audit order",
    )

    @property
    def total_dependencies(self) -> int:
        """Number of dependencies evaluated."""
        return len(self.verdicts)

    @property
    def violations(self) -> list[DependencyVerdict]:
        """All dependencies with a non-approved verdict, in audit order."""
        return [v for v in self.verdicts if v.verdict == Verdict.NON_APPROVED]

    @property
    def passed(self) -> bool:
        """Check if the audit passed.

        Returns:
            True if no dependency was non-approved, False otherwise.
        """
        return not self.violations

    def count(self, verdict: Verdict) -> int:
        """Count dependencies that received the given verdict."""
        return sum(1 for v in self.verdicts if v.verdict == verdict)

    def raise_for_violations(self) -> None:
        """Raise if any dependency was not approved.

        Raises:
            PolicyViolationError: Carrying every violation found.
        """
        violations = self.violations
        if violations:
            raise PolicyViolationError(violations)
