"""License Auditor - Check dependency licenses against an allow/deny policy."""

__version__ = "0.1.0"
