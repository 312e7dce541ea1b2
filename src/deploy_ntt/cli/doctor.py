"""``deploy-ntt-doctor``: environment diagnostics command.

Gathers system information and renders a Rich table summarising
whether the runtime environment satisfies deploy-ntt's requirements.

This module lives in the CLI layer, it may import from ``infra``
and ``core``, and it renders via Rich.  No business logic resides
here; it purely collects and displays diagnostic data.
"""

from __future__ import annotations

import platform
import sys

from deploy_ntt.cli import exit_codes
from deploy_ntt.cli.console import console, escape
from deploy_ntt.infra.tool_detector import ToolStatus, detect_tools, format_install_guidance
from deploy_ntt.version import __version__


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _python_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the Python version row."""
    version = platform.python_version()
    ok = sys.version_info >= (3, 10)
    status = "[green]OK[/green]" if ok else "[red]FAIL (>=3.10 required)[/red]"
    return "Python", version, status


def _tool_check(status: ToolStatus) -> tuple[str, str, str]:
    """Return (label, value, status) for one external tool row."""
    if status.found:
        path_str = str(status.path) if status.path else "found"
        return status.name, path_str, "[green]OK[/green]"
    return status.name, "not found", "[red]FAIL[/red]"


def _os_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the OS row."""
    system_raw = platform.system()
    system_display = {
        "Windows": "Windows",
        "Linux": "Linux",
        "Darwin": "macOS",
    }.get(system_raw, system_raw)
    release = platform.release()
    machine = platform.machine()
    value = f"{system_display} {release} ({machine})"
    return "OS", value, "[green]OK[/green]"


def _deploy_ntt_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the deploy-ntt version row."""
    return "deploy-ntt", __version__, "[green]OK[/green]"


def _status_plain(status: str) -> str:
    """Convert rich-markup status to plain text."""
    if "FAIL" in status:
        return "FAIL"
    if "OK" in status:
        return "OK"
    return status


def _print_plain_doctor_table(checks: list[tuple[str, str, str]]) -> None:
    """Render doctor output without Rich."""
    print("\ndeploy-ntt doctor", file=sys.stderr)
    print("=" * 64, file=sys.stderr)
    print(f"{'Component':<12} {'Value':<40} {'Status':<8}", file=sys.stderr)
    print("-" * 64, file=sys.stderr)
    for label, value, status in checks:
        print(f"{label:<12} {value:<40} {_status_plain(status):<8}", file=sys.stderr)
    print(file=sys.stderr)


# ---------------------------------------------------------------------------
# Public entry points
# ---------------------------------------------------------------------------

def run_doctor() -> int:
    """Execute all diagnostic checks and render a Rich summary table.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when all checks pass,
        :data:`exit_codes.GENERAL_ERROR` if any check fails.
    """
    tools = detect_tools()
    checks = [
        _deploy_ntt_version_check(),
        _python_version_check(),
        *(_tool_check(status) for status in tools),
        _os_check(),
    ]
    has_failure = any("FAIL" in status for _, _, status in checks)

    rich_available = True
    try:
        from rich.table import Table
    except ModuleNotFoundError:
        rich_available = False

    if rich_available:
        table = Table(
            title="deploy-ntt doctor",
            show_header=True,
            header_style="bold cyan",
            border_style="dim",
        )
        table.add_column("Component", style="bold", min_width=12)
        table.add_column("Value", min_width=20)
        table.add_column("Status", justify="center", min_width=8)

        for label, value, status in checks:
            table.add_row(label, escape(value), status)

        console.print()
        console.print(table)
        console.print()
    else:
        _print_plain_doctor_table(checks)

    missing = [status for status in tools if not status.found]
    if missing:
        console.print(format_install_guidance(missing))
        console.print()

    if has_failure:
        console.print("[bold red]Some checks failed.[/bold red]")
        return exit_codes.GENERAL_ERROR

    console.print("[bold green]All checks passed.[/bold green]")
    return exit_codes.SUCCESS


def cli() -> None:
    """Console-script entry point for ``deploy-ntt-doctor``."""
    try:
        sys.exit(run_doctor())
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
