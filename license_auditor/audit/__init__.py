"""License policy evaluation engine."""
from license_auditor.audit.policy import build_policy, evaluate
from license_auditor.audit.runner import list_licenses, run_audit

__all__ = [
    "build_policy",
    "evaluate",
    "list_licenses",
    "run_audit",
]
