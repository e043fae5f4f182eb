"""Attribution report renderer."""

from typing import TextIO

from license_auditor.constants import REPORT_ENTRY_TEMPLATE, REPORT_HEADER
from license_auditor.exceptions import ReportWriteError


class AttributionReportRenderer:
    """Stream attribution notices for every dependency to a text sink.

    The header is written once, followed by one notice per dependency in the
    order the audit runner visits them. No summary is appended. The caller
    owns opening and closing the sink.
    """

    def __init__(self, sink: TextIO) -> None:
        """Initialize the renderer.

        Args:
            sink: Writable text stream receiving the report.
        """
        self._sink = sink
        self.entries_written = 0

    @staticmethod
    def render_header() -> str:
        """Return the fixed report header."""
        return REPORT_HEADER

    @staticmethod
    def render_entry(dependency: str, license_text: str) -> str:
        """Format the notice for one dependency.

        Args:
            dependency: Dependency identifier.
            license_text: Raw license text (may be empty).

        Returns:
            Formatted notice block.
        """
        return REPORT_ENTRY_TEMPLATE.format(dependency=dependency, text=license_text)

    def write_header(self) -> None:
        """Write the report header to the sink.

        Raises:
            ReportWriteError: If the sink rejects the write.
        """
        self._write(self.render_header())

    def write_entry(self, dependency: str, license_text: str) -> None:
        """Write one dependency notice to the sink.

        Raises:
            ReportWriteError: If the sink rejects the write.
        """
        self._write(self.render_entry(dependency, license_text))
        self.entries_written += 1

    def _write(self, content: str) -> None:
        try:
            self._sink.write(content)
        except (OSError, ValueError) as e:
            # ValueError: write to a closed file
            raise ReportWriteError(f"Cannot write attribution report: {e}") from e
