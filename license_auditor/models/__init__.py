"""Pydantic data models for license-auditor."""

from license_auditor.models.audit import AuditResult, DependencyVerdict, LicenseListing
from license_auditor.models.config import AuditConfig
from license_auditor.models.license import LicenseClassification
from license_auditor.models.policy import Policy, Verdict

__all__ = [
    "AuditConfig",
    "AuditResult",
    "DependencyVerdict",
    "LicenseClassification",
    "LicenseListing",
    "Policy",
    "Verdict",
]
