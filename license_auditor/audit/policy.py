"""Policy construction and per-dependency verdict evaluation."""
from __future__ import annotations

from typing import Callable, Iterable

from license_auditor.constants import WILDCARD_MARKER
from license_auditor.models.license import LicenseClassification
from license_auditor.models.policy import Policy, Verdict

Rule = Callable[[str, LicenseClassification, Policy], bool]


def build_policy(
    whitelist: Iterable[str],
    blacklist: Iterable[str],
    exceptions: Iterable[str],
) -> Policy:
    """Normalize raw policy lists into a Policy.

    Duplicate entries collapse silently. Exceptions ending in ``/...`` are
    stored as prefixes with the marker removed; all others are exact
    dependency identifiers. License types are not validated.

    Args:
        whitelist: Approved license types.
        blacklist: Denied license types.
        exceptions: Exempt dependency identifiers or wildcard patterns.

    Returns:
        Normalized Policy.
    """
    exact: set[str] = set()
    prefixes: set[str] = set()

    for entry in exceptions:
        if entry.endswith(WILDCARD_MARKER):
            prefixes.add(entry[: -len(WILDCARD_MARKER)])
        else:
            exact.add(entry)

    return Policy(
        whitelist=frozenset(whitelist),
        blacklist=frozenset(blacklist),
        exact_exceptions=frozenset(exact),
        prefix_exceptions=frozenset(prefixes),
    )


def _is_approved(dependency: str, lic: LicenseClassification, policy: Policy) -> bool:
    # Blacklist wins when a type is listed in both
    return lic.type in policy.whitelist and lic.type not in policy.blacklist


def _is_exceptioned(
    dependency: str, lic: LicenseClassification, policy: Policy
) -> bool:
    if any(dependency.startswith(prefix) for prefix in policy.prefix_exceptions):
        return True
    return dependency in policy.exact_exceptions


# Evaluated top to bottom, first match wins
RULES: tuple[tuple[Rule, Verdict], ...] = (
    (_is_approved, Verdict.APPROVED),
    (_is_exceptioned, Verdict.EXCEPTIONED),
)


def evaluate(dependency: str, lic: LicenseClassification, policy: Policy) -> Verdict:
    """Evaluate one dependency's license against the policy.

    An unrecognized license (empty type) never matches the whitelist, so it
    is non-approved unless the dependency is covered by an exception.

    Args:
        dependency: Dependency identifier.
        lic: Detected license classification.
        policy: Normalized policy.

    Returns:
        The first matching verdict, or NON_APPROVED if no rule matches.
    """
    for predicate, verdict in RULES:
        if predicate(dependency, lic, policy):
            return verdict
    return Verdict.NON_APPROVED
