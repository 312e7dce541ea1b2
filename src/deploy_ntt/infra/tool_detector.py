"""Infrastructure: required tool detection and install guidance.

This module is responsible for locating the external executables the
deployment drives and for describing how to install the missing ones.

Rules
-----
* Detection via :func:`shutil.which` only, no subprocess.
* No permanent PATH modification.
* No automatic installation.
* No ``print()``, callers handle user-facing output.
"""

from __future__ import annotations

import shutil
from dataclasses import dataclass
from pathlib import Path

from deploy_ntt.exceptions import MissingToolsError

_SOLANA_HINT = "Solana CLI tools (solana, spl-token): https://docs.solanalabs.com/cli/install"
_ANCHOR_HINT = "Anchor: https://www.anchor-lang.com/docs/installation"
_FOUNDRY_HINT = "Foundry (forge): https://book.getfoundry.sh/getting-started/installation"
_NTT_HINT = (
    "NTT CLI: https://wormhole.com/docs/build/contract-integrations/"
    "native-token-transfers/deployment-process/install-cli"
)

REQUIRED_TOOLS: dict[str, str] = {
    "solana": _SOLANA_HINT,
    "spl-token": _SOLANA_HINT,
    "anchor": _ANCHOR_HINT,
    "forge": _FOUNDRY_HINT,
    "ntt": _NTT_HINT,
}
"""Executable name -> install guidance, in probe order."""


# ---------------------------------------------------------------------------
# Detection result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ToolStatus:
    """Result of a single executable probe.

    Attributes
    ----------
    name : str
        Executable name looked up on PATH.
    found : bool
        Whether the executable was located.
    path : Path | None
        Absolute path to the executable, or ``None``.
    install_hint : str
        What to install and where to get it.
    """

    name: str
    found: bool
    path: Path | None
    install_hint: str


# ---------------------------------------------------------------------------
# Detection logic
# ---------------------------------------------------------------------------

def detect_tool(name: str) -> ToolStatus:
    """Probe the system PATH for *name*.

    Returns a :class:`ToolStatus` regardless of the outcome, the
    caller decides whether to abort or merely report.
    """
    hint = REQUIRED_TOOLS.get(name, f"Install '{name}' and add it to PATH")
    result = shutil.which(name)
    if result is None:
        return ToolStatus(name=name, found=False, path=None, install_hint=hint)
    return ToolStatus(
        name=name,
        found=True,
        path=Path(result).resolve(),
        install_hint=hint,
    )


def detect_tools() -> tuple[ToolStatus, ...]:
    """Probe every entry of :data:`REQUIRED_TOOLS`."""
    return tuple(detect_tool(name) for name in REQUIRED_TOOLS)


def require_tools() -> None:
    """Locate every required tool or raise :class:`MissingToolsError`.

    The hint itemizes the install guidance for the missing tools only,
    one line per distinct guidance entry.
    """
    statuses = detect_tools()
    missing = [status for status in statuses if not status.found]
    if missing:
        raise MissingToolsError(
            [status.name for status in missing],
            hint=format_install_guidance(missing),
        )


def format_install_guidance(statuses: list[ToolStatus]) -> str:
    """Render an itemized install list, collapsing shared guidance lines."""
    lines: list[str] = ["Please install:"]
    seen: set[str] = set()
    for status in statuses:
        if status.install_hint in seen:
            continue
        seen.add(status.install_hint)
        lines.append(f"- {status.install_hint}")
    return "\n".join(lines)
