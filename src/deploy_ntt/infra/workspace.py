"""Filesystem implementation of :class:`~deploy_ntt.core.protocols.ProjectWorkspace`.

Covers the three file operations of a deployment: writing
``overrides.json``, discovering the program keypair produced by
``solana-keygen grind``, and reading back ``deployment.json``.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from deploy_ntt.core.overrides import OVERRIDES_FILENAME
from deploy_ntt.exceptions import (
    AmbiguousKeypairError,
    DeploymentDescriptorError,
    DeployNttError,
    KeypairNotFoundError,
)

DEPLOYMENT_FILENAME: str = "deployment.json"


# ---------------------------------------------------------------------------
# Program keypair discovery
# ---------------------------------------------------------------------------

def is_program_keypair_name(name: str) -> bool:
    """Return ``True`` for names starting with ``ntt`` and ending with ``.json``.

    The comparison ignores case, matching ``grind --ignore-case`` output.
    """
    lowered = name.lower()
    return lowered.startswith("ntt") and lowered.endswith(".json")


def locate_program_keypair(directory: Path) -> Path:
    """Return the single program keypair file in *directory*.

    Raises
    ------
    KeypairNotFoundError
        If no file matches the naming pattern.
    AmbiguousKeypairError
        If more than one file matches, the choice is never guessed.
    """
    try:
        entries = sorted(directory.iterdir())
    except OSError as exc:
        raise KeypairNotFoundError(
            f"Cannot list {directory}: {exc}",
        ) from exc

    matches = [
        entry
        for entry in entries
        if entry.is_file() and is_program_keypair_name(entry.name)
    ]

    if not matches:
        raise KeypairNotFoundError(
            f"No NTT keypair file found in {directory}",
            hint="solana-keygen grind should have written ntt<...>.json here.",
        )
    if len(matches) > 1:
        names = ", ".join(entry.name for entry in matches)
        raise AmbiguousKeypairError(
            f"Multiple NTT keypair files found: {names}",
            hint="Please ensure only one exists, then rerun the deployment.",
        )
    return matches[0]


# ---------------------------------------------------------------------------
# Workspace adapter
# ---------------------------------------------------------------------------

class LocalProjectWorkspace:
    """Concrete :class:`ProjectWorkspace` operating on the local filesystem."""

    def write_overrides(self, project_dir: Path, overrides: Mapping[str, Any]) -> Path:
        """Write *overrides* as 2-space indented JSON."""
        target = project_dir / OVERRIDES_FILENAME
        try:
            target.write_text(json.dumps(overrides, indent=2), encoding="utf-8")
        except OSError as exc:
            raise DeployNttError(f"Could not write {target}: {exc}") from exc
        return target

    def locate_program_keypair(self, project_dir: Path) -> Path:
        return locate_program_keypair(project_dir)

    def read_deployment(self, project_dir: Path) -> str:
        """Return the raw text of ``deployment.json``.

        Raises
        ------
        DeploymentDescriptorError
            If the file was not produced by ``ntt push``.
        """
        target = project_dir / DEPLOYMENT_FILENAME
        try:
            return target.read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            raise DeploymentDescriptorError(
                f"Deployment descriptor not found: {target}",
            ) from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise DeploymentDescriptorError(f"Could not read {target}: {exc}") from exc
