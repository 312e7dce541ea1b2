"""CLI application entry point for deploy-ntt.

This module is the **sole error boundary** for the entire application.
It catches :class:`~deploy_ntt.exceptions.DeployNttError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages via Rich and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here, all work is delegated to the core/service
  and infrastructure layers.
* Status output goes to stderr through the Rich console; only the usage
  text and the final ``deployment.json`` contents go to stdout.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import sys
from pathlib import Path

from deploy_ntt.cli import exit_codes
from deploy_ntt.cli.args import USAGE, parse_args
from deploy_ntt.cli.console import console, escape, write_stdout
from deploy_ntt.core.models import DeploymentConfig
from deploy_ntt.exceptions import DeployNttError, HelpRequested, UsageError


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_deploy(config: DeploymentConfig, base_dir: Path) -> int:
    """Run the deployment for a validated *config*.

    Flow:
    1. Verify the required external tools are on PATH.
    2. Instantiate infra adapters + the core service.
    3. Run the deployment sequence with step reporting.
    4. Print the resulting ``deployment.json``.
    """
    from deploy_ntt.cli.progress import StepReporter
    from deploy_ntt.core.deployment_service import DeploymentService
    from deploy_ntt.infra.ntt_authority import NttTokenAuthorityResolver
    from deploy_ntt.infra.subprocess_runner import SubprocessCommandRunner
    from deploy_ntt.infra.tool_detector import require_tools
    from deploy_ntt.infra.workspace import LocalProjectWorkspace

    require_tools()

    runner = SubprocessCommandRunner()
    service = DeploymentService(
        runner,
        NttTokenAuthorityResolver(runner),
        LocalProjectWorkspace(),
    )

    result = service.deploy(config, base_dir, step_callback=StepReporter())

    if result.program_keypair is not None:
        console.print(f"Program keypair file: {escape(result.program_keypair.name)}")
    if result.token_authority is not None:
        console.print(f"Mint authority transferred to: {escape(result.token_authority)}")
    console.print(
        "\n[bold green]Deployment complete![/bold green] "
        f"Configuration saved in {escape(result.project_dir / 'deployment.json')}"
    )
    write_stdout(result.descriptor)
    return exit_codes.SUCCESS


def _print_usage() -> None:
    write_stdout(USAGE)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None, *, base_dir: Path | None = None) -> int:
    """Run the deploy-ntt CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.
    base_dir:
        Directory in which the NTT project is created.  Defaults to the
        current working directory.

    Returns
    -------
    int
        OS process exit code.
    """
    try:
        config = parse_args(sys.argv[1:] if argv is None else argv)
    except HelpRequested:
        _print_usage()
        return exit_codes.GENERAL_ERROR

    return _handle_deploy(config, base_dir if base_dir is not None else Path.cwd())


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except DeployNttError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(exc)}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")
        if isinstance(exc, UsageError):
            _print_usage()
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Deployment failed unexpectedly.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(exc)}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
