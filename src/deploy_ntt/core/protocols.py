"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols, never on concrete
implementations, preserving the dependency inversion principle.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any, Protocol


class CommandRunner(Protocol):
    """Contract for executing external commands.

    Implementations must map all process-level failures to
    :class:`~deploy_ntt.exceptions.DeployNttError` subclasses.
    """

    def run(self, args: Sequence[str], *, cwd: Path) -> None:
        """Run *args* in *cwd*, streaming its output to the terminal.

        Raises
        ------
        CommandFailedError
            When the command exits with a non-zero status.
        EnvironmentError
            When the executable cannot be started.
        """
        ...  # pragma: no cover

    def capture(self, args: Sequence[str], *, cwd: Path) -> str:
        """Run *args* in *cwd* and return its standard output as text."""
        ...  # pragma: no cover


class AuthorityResolver(Protocol):
    """Contract for deriving the NTT token-authority address.

    Isolates the parsing of free-form tool output from the deployment
    sequence so the strategy can be replaced independently.
    """

    def resolve(self, program_keypair: Path, *, cwd: Path) -> str:
        """Return the token-authority address for *program_keypair*.

        Raises
        ------
        AuthorityParseError
            When no address can be recovered from the tool output.
        """
        ...  # pragma: no cover


class ProjectWorkspace(Protocol):
    """Contract for the file operations inside an NTT project directory."""

    def write_overrides(self, project_dir: Path, overrides: Mapping[str, Any]) -> Path:
        """Serialize *overrides* to ``overrides.json`` and return its path."""
        ...  # pragma: no cover

    def locate_program_keypair(self, project_dir: Path) -> Path:
        """Return the single generated program keypair in *project_dir*."""
        ...  # pragma: no cover

    def read_deployment(self, project_dir: Path) -> str:
        """Return the raw text of ``deployment.json``."""
        ...  # pragma: no cover
