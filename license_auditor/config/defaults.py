"""Default configuration values for license-auditor."""

from __future__ import annotations

from license_auditor.models.config import AuditConfig

# Default configuration file names to search for, in priority order
DEFAULT_CONFIG_NAMES = [".license-audit.yml", ".license-audit.yaml", ".wwhrd.yml"]


def get_default_config() -> AuditConfig:
    """Get the default configuration.

    Returns:
        AuditConfig with empty whitelist, blacklist and exceptions.
    """
    return AuditConfig()
