"""Output formatters for license-auditor."""

from license_auditor.output.attribution import AttributionReportRenderer
from license_auditor.output.terminal import TerminalFormatter

__all__ = [
    "AttributionReportRenderer",
    "TerminalFormatter",
]
