"""``subprocess`` backed implementation of :class:`~deploy_ntt.core.protocols.CommandRunner`.

This module is the **only** place in the codebase that starts external
processes.  Commands are passed as argument lists, never through a
shell, and every process-level failure is re-raised as a typed
:class:`~deploy_ntt.exceptions.DeployNttError` subclass.
"""

from __future__ import annotations

import subprocess
from collections.abc import Sequence
from pathlib import Path

from deploy_ntt.exceptions import CommandFailedError, EnvironmentError


class SubprocessCommandRunner:
    """Concrete :class:`CommandRunner` backed by :func:`subprocess.run`.

    This class satisfies the :class:`~deploy_ntt.core.protocols.CommandRunner`
    protocol structurally, no explicit inheritance required.
    """

    # ------------------------------------------------------------------
    # Protocol methods
    # ------------------------------------------------------------------

    def run(self, args: Sequence[str], *, cwd: Path) -> None:
        """Run *args* in *cwd* with inherited stdio.

        The tool's own output and error messages reach the terminal
        unmodified.

        Raises
        ------
        CommandFailedError
            When the command exits with a non-zero status.
        EnvironmentError
            When the executable cannot be started.
        """
        command = list(args)
        try:
            completed = subprocess.run(command, cwd=cwd, check=False)
        except OSError as exc:
            raise self._launch_error(command, cwd, exc) from exc

        if completed.returncode != 0:
            raise CommandFailedError(command, completed.returncode)

    def capture(self, args: Sequence[str], *, cwd: Path) -> str:
        """Run *args* in *cwd* and return its standard output.

        Raises
        ------
        CommandFailedError
            When the command exits with a non-zero status.  The captured
            standard error is attached as the hint.
        EnvironmentError
            When the executable cannot be started.
        """
        command = list(args)
        try:
            completed = subprocess.run(
                command,
                cwd=cwd,
                check=False,
                capture_output=True,
                text=True,
            )
        except OSError as exc:
            raise self._launch_error(command, cwd, exc) from exc

        if completed.returncode != 0:
            raise CommandFailedError(
                command,
                completed.returncode,
                output=completed.stderr or completed.stdout,
            )
        return completed.stdout

    # ------------------------------------------------------------------
    # Exception mapping
    # ------------------------------------------------------------------

    @staticmethod
    def _launch_error(command: list[str], cwd: Path, exc: OSError) -> EnvironmentError:
        """Translate a failed process launch into a domain exception."""
        if isinstance(exc, FileNotFoundError) and not Path(cwd).is_dir():
            return EnvironmentError(f"Working directory does not exist: {cwd}")
        if isinstance(exc, FileNotFoundError):
            return EnvironmentError(
                f"Executable not found: {command[0]}",
                hint="Run deploy-ntt-doctor to check the required tools.",
            )
        return EnvironmentError(f"Could not start {command[0]}: {exc}")
