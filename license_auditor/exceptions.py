"""Custom exceptions for license-auditor."""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from license_auditor.models.audit import DependencyVerdict


class LicenseAuditorError(Exception):
    """Base exception for all license-auditor errors."""

    pass


class ConfigurationError(LicenseAuditorError):
    """Exception raised when the policy configuration is invalid."""

    pass


class ScanError(LicenseAuditorError):
    """Exception raised when dependencies cannot be enumerated."""

    pass


class ReportWriteError(LicenseAuditorError):
    """Exception raised when the attribution report cannot be written."""

    pass


class PolicyViolationError(LicenseAuditorError):
    """Exception raised when one or more dependencies are not approved.

    Attributes:
        violations: Every dependency that received a non-approved verdict,
            in audit order.
    """

    def __init__(self, violations: list[DependencyVerdict]) -> None:
        self.violations = list(violations)
        names = ", ".join(
            f"{v.dependency} ({v.license_type or 'unknown'})" for v in self.violations
        )
        super().__init__(
            f"Non-approved license found in {len(self.violations)} "
            f"dependency(ies): {names}"
        )
