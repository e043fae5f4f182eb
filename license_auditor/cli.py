"""CLI entry point for license-auditor."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

import click
from rich.console import Console
from rich.markup import escape

from license_auditor import __version__
from license_auditor.audit.runner import list_licenses, run_audit
from license_auditor.config import load_config
from license_auditor.constants import EXIT_ERROR, EXIT_ISSUES, EXIT_SUCCESS
from license_auditor.exceptions import (
    LicenseAuditorError,
    PolicyViolationError,
    ReportWriteError,
)
from license_auditor.log import configure_logging
from license_auditor.models.license import LicenseClassification
from license_auditor.models.policy import Policy
from license_auditor.output.attribution import AttributionReportRenderer
from license_auditor.output.terminal import TerminalFormatter
from license_auditor.scanner import detect_licenses, discover_dependencies

# Separate console for error output (writes to stderr)
_error_console = Console(stderr=True)

_no_color_option = click.option(
    "--no-color",
    "no_color",
    is_flag=True,
    default=False,
    help="Disable colored output.",
)
_package_option = click.option(
    "--package",
    "-p",
    "packages",
    multiple=True,
    help="Audit only this distribution and its dependencies (repeatable).",
)


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--quiet",
    "-q",
    "quiet_flag",
    is_flag=True,
    default=False,
    help="Quiet mode, do not log accepted packages.",
)
@click.pass_context
def main(ctx: click.Context, quiet_flag: bool) -> None:
    """License Auditor - Check dependency licenses against a policy.

    Lists the licenses of installed dependencies, or checks them against
    a whitelist, blacklist and exceptions configured in a YAML file.

    \b
    Examples:
        license-auditor list
        license-auditor check
        license-auditor check -f policy.yml -r NOTICE.txt
        license-auditor -q check -p requests
    """
    ctx.ensure_object(dict)
    ctx.obj["quiet"] = quiet_flag


@click.command("list")
@_no_color_option
@_package_option
@click.pass_context
def list_cmd(ctx: click.Context, no_color: bool, packages: tuple[str, ...]) -> None:
    """List licenses of installed dependencies.

    \b
    Examples:
        license-auditor list
        license-auditor ls --no-color
        license-auditor list -p click
    """
    quiet = ctx.obj.get("quiet", False)
    configure_logging(no_color=no_color, quiet=quiet)

    try:
        licenses = _scan(packages)
    except LicenseAuditorError as e:
        _display_error(e, no_color)
        sys.exit(EXIT_ERROR)

    listings = list_licenses(licenses)
    console = Console(no_color=no_color)
    TerminalFormatter(console=console, quiet=quiet).format_listing(listings)
    sys.exit(EXIT_SUCCESS)


@click.command("check")
@click.option(
    "--file",
    "-f",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Policy configuration file (default: discover .license-audit.yml).",
)
@click.option(
    "--report-out",
    "-r",
    "report_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write an attribution report of all licenses found to this file.",
)
@_no_color_option
@_package_option
@click.pass_context
def check_cmd(
    ctx: click.Context,
    config_path: Optional[str],
    report_path: Optional[str],
    no_color: bool,
    packages: tuple[str, ...],
) -> None:
    """Check licenses against the policy configuration file.

    Exits with 1 if any dependency has a non-approved license, and with 2
    if the audit itself failed.

    \b
    Examples:
        license-auditor check
        license-auditor chk -f .wwhrd.yml
        license-auditor check --report-out NOTICE.txt
    """
    quiet = ctx.obj.get("quiet", False)
    configure_logging(no_color=no_color, quiet=quiet)

    try:
        config = load_config(config_path)
        policy = Policy.from_config(config)
        licenses = _scan(packages)

        if report_path:
            with _open_report(report_path) as sink:
                result = run_audit(licenses, policy, AttributionReportRenderer(sink))
        else:
            result = run_audit(licenses, policy)

        console = Console(no_color=no_color)
        TerminalFormatter(console=console, quiet=quiet).format_audit_result(result)
        result.raise_for_violations()

    except PolicyViolationError as e:
        _display_error(e, no_color)
        sys.exit(EXIT_ISSUES)
    except LicenseAuditorError as e:
        _display_error(e, no_color)
        sys.exit(EXIT_ERROR)

    sys.exit(EXIT_SUCCESS)


main.add_command(list_cmd)
main.add_command(list_cmd, name="ls")
main.add_command(check_cmd)
main.add_command(check_cmd, name="chk")


def _scan(packages: tuple[str, ...]) -> dict[str, LicenseClassification]:
    """Enumerate dependencies and detect their licenses.

    Args:
        packages: Root distributions, or empty for the whole environment.

    Returns:
        Mapping of dependency identifier to license classification.
    """
    dependencies = discover_dependencies(list(packages) if packages else None)
    return detect_licenses(dependencies)


def _open_report(path: str) -> TextIO:
    """Open the attribution report file for writing.

    Raises:
        ReportWriteError: If the file cannot be created.
    """
    try:
        return open(path, "w", encoding="utf-8")
    except OSError as e:
        raise ReportWriteError(f"Cannot write to file '{path}': {e}") from e


def _display_error(error: LicenseAuditorError, no_color: bool) -> None:
    """Display error message on stderr.

    Args:
        error: The exception that occurred.
        no_color: Print without Rich styling.
    """
    error_type = type(error).__name__
    message = f"Error: {error_type}: {error}"

    if no_color:
        click.echo(message, err=True)
    else:
        _error_console.print(
            f"[red bold]{escape(message)}[/red bold]", highlight=False, soft_wrap=True
        )


if __name__ == "__main__":
    main()
