"""Audit runner driving policy evaluation over every dependency."""
from __future__ import annotations

import logging
from typing import Mapping, Optional

from license_auditor.audit.policy import evaluate
from license_auditor.models.audit import AuditResult, DependencyVerdict, LicenseListing
from license_auditor.models.license import LicenseClassification
from license_auditor.models.policy import Policy, Verdict
from license_auditor.output.attribution import AttributionReportRenderer

logger = logging.getLogger(__name__)

_VERDICT_LOG = {
    Verdict.APPROVED: (logging.INFO, "Found Approved license"),
    Verdict.EXCEPTIONED: (logging.WARNING, "Found exceptioned package"),
    Verdict.NON_APPROVED: (logging.ERROR, "Found Non-Approved license"),
}


def run_audit(
    licenses: Mapping[str, LicenseClassification],
    policy: Policy,
    report: Optional[AttributionReportRenderer] = None,
) -> AuditResult:
    """Evaluate every dependency against the policy.

    Dependencies are visited once each, sorted by identifier, so the report
    and the verdict list are reproducible. Evaluation never stops early:
    a non-approved dependency is recorded and the run continues, which
    keeps the attribution report complete.

    Args:
        licenses: Detected license per dependency identifier.
        policy: Normalized policy.
        report: Optional renderer receiving the header and one entry per
            dependency, regardless of verdict.

    Returns:
        AuditResult with one verdict per dependency. Use
        ``AuditResult.raise_for_violations()`` to turn failures into an error.

    Raises:
        ReportWriteError: If the report sink rejects a write.
    """
    if report is not None:
        report.write_header()

    verdicts: list[DependencyVerdict] = []
    for dependency in sorted(licenses):
        lic = licenses[dependency]

        if report is not None:
            report.write_entry(dependency, lic.text)

        verdict = evaluate(dependency, lic, policy)
        level, message = _VERDICT_LOG[verdict]
        logger.log(
            level,
            "%s: package=%s license=%s",
            message,
            dependency,
            lic.type or "unknown",
            extra={"package": dependency, "license": lic.type},
        )
        verdicts.append(
            DependencyVerdict(dependency=dependency, license_type=lic.type, verdict=verdict)
        )

    result = AuditResult(verdicts=verdicts)
    logger.debug(
        "Audited %d dependencies, %d violation(s)",
        result.total_dependencies,
        len(result.violations),
    )
    return result


def list_licenses(
    licenses: Mapping[str, LicenseClassification],
) -> list[LicenseListing]:
    """List every dependency's license without applying a policy.

    Args:
        licenses: Detected license per dependency identifier.

    Returns:
        One listing per dependency, sorted by identifier. Dependencies
        without a recognized license are marked UNRECOGNIZED.
    """
    listings: list[LicenseListing] = []
    for dependency in sorted(licenses):
        lic = licenses[dependency]
        if lic.recognized:
            logger.info("Found License: package=%s license=%s", dependency, lic.type)
            listings.append(LicenseListing(dependency=dependency, license_type=lic.type))
        else:
            logger.warning("Did not find recognized license!: package=%s", dependency)
            listings.append(
                LicenseListing(dependency=dependency, verdict=Verdict.UNRECOGNIZED)
            )
    return listings
