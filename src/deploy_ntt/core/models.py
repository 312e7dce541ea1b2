"""Domain models for deploy-ntt.

All models are **frozen** dataclasses, immutable value objects with no
behaviour beyond data access.  They carry zero I/O, zero dependencies on
external packages, and must remain pure across the entire lifecycle.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


# ---------------------------------------------------------------------------
# Transfer mode
# ---------------------------------------------------------------------------

class TransferMode(str, Enum):
    """How the bridge moves tokens off the source chain."""

    BURNING = "burning"
    LOCKING = "locking"

    def __str__(self) -> str:
        return self.value


# ---------------------------------------------------------------------------
# Network defaults
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class NetworkDefaults:
    """Fixed network settings handed to the deployment service."""

    network: str = "Testnet"
    """Wormhole network name passed to ``ntt init``."""

    base_rpc: str = "https://sepolia.base.org"
    """RPC endpoint written into ``overrides.json`` for Base."""

    solana_rpc: str = "https://api.devnet.solana.com"
    """RPC endpoint written into ``overrides.json`` for Solana."""

    default_mode: TransferMode = TransferMode.BURNING
    """Mode used when ``--mode`` is not supplied."""


TESTNET_DEFAULTS = NetworkDefaults()


# ---------------------------------------------------------------------------
# Deployment configuration
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class DeploymentConfig:
    """Validated command-line input for a single deployment run."""

    project_name: str
    """Name of the NTT project directory created by ``ntt new``."""

    base_token: str
    """Token address on the Base chain."""

    solana_token: str
    """SPL token mint address on Solana."""

    solana_payer: Path
    """Absolute path to the Solana payer keypair file."""

    mode: TransferMode = TransferMode.BURNING


# ---------------------------------------------------------------------------
# Progress and outcome
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class DeploymentStep:
    """One announced step of the deployment sequence."""

    index: int
    total: int
    description: str


@dataclass(frozen=True, slots=True)
class DeploymentResult:
    """Outcome of a completed deployment run."""

    project_dir: Path
    program_keypair: Path | None
    """Generated program keypair, or ``None`` in locking mode."""

    token_authority: str | None
    """Address that received mint authority, or ``None`` in locking mode."""

    descriptor: str
    """Raw contents of ``deployment.json``."""
