"""Terminal output formatter using Rich."""
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from license_auditor.models.audit import AuditResult, LicenseListing
from license_auditor.models.policy import Verdict

_VERDICT_STYLE = {
    Verdict.APPROVED: ("green", "Approved"),
    Verdict.EXCEPTIONED: ("yellow", "Exceptioned"),
    Verdict.NON_APPROVED: ("red", "Non-Approved"),
}


class TerminalFormatter:
    """Format audit results and license listings for terminal display.

    Rendering is skipped entirely in quiet mode except for violations,
    which are always shown.
    """

    def __init__(self, console: Optional[Console] = None, quiet: bool = False) -> None:
        """Initialize the formatter with a Rich console.

        Args:
            console: Optional Rich Console instance. If not provided,
                a new Console will be created.
            quiet: Only show violations and the final status.
        """
        self._console = console if console is not None else Console()
        self._quiet = quiet

    def format_audit_result(self, result: AuditResult) -> None:
        """Display audit verdicts as a Rich table followed by a status line.

        Args:
            result: The audit result to display.
        """
        if result.total_dependencies == 0:
            self._console.print("[yellow]No dependencies found[/yellow]")
            return

        if not self._quiet:
            table = Table(title="License Audit Results")
            table.add_column("Dependency", style="cyan", no_wrap=True)
            table.add_column("License", style="magenta")
            table.add_column("Verdict")

            for entry in result.verdicts:
                color, label = _VERDICT_STYLE[entry.verdict]
                license_display = escape(entry.license_type) or "[yellow]Unknown[/yellow]"
                table.add_row(
                    escape(entry.dependency), license_display, f"[{color}]{label}[/{color}]"
                )

            self._console.print(table)
            self._console.print(
                f"\n[bold]Total dependencies:[/bold] {result.total_dependencies}"
            )
            self._console.print(
                f"[bold]Approved:[/bold] {result.count(Verdict.APPROVED)}  "
                f"[bold]Exceptioned:[/bold] {result.count(Verdict.EXCEPTIONED)}"
            )

        if result.passed:
            self._console.print("[green]PASS[/green] - No non-approved licenses found")
            return

        violations = result.violations
        self._console.print(
            f"[red]FAIL[/red] - {len(violations)} non-approved license(s) found"
        )
        for violation in violations:
            license_str = escape(violation.license_type) or "Unknown"
            self._console.print(
                f"  [red]![/red] {escape(violation.dependency)} ([yellow]{license_str}[/yellow])"
            )

    def format_listing(self, listings: list[LicenseListing]) -> None:
        """Display detected licenses as a Rich table.

        Args:
            listings: License listing entries to display.
        """
        if not listings:
            self._console.print("[yellow]No dependencies found[/yellow]")
            return

        unrecognized = [e for e in listings if e.verdict == Verdict.UNRECOGNIZED]

        if not self._quiet:
            table = Table(title="Detected Licenses")
            table.add_column("Dependency", style="cyan", no_wrap=True)
            table.add_column("License", style="green")
            for entry in listings:
                license_display = escape(entry.license_type) or "[yellow]Unknown[/yellow]"
                table.add_row(escape(entry.dependency), license_display)
            self._console.print(table)
            self._console.print(f"\n[bold]Total dependencies:[/bold] {len(listings)}")

        self._console.print(f"[bold]Unrecognized licenses:[/bold] {len(unrecognized)}")
