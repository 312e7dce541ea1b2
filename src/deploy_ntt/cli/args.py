"""Command-line argument scanning for ``deploy-ntt``.

The flag grammar is deliberately narrow: every value flag consumes
exactly the next token, ``--flag=value`` is not recognised, and the last
occurrence of a flag wins.  Parsing raises typed
:class:`~deploy_ntt.exceptions.UsageError` subclasses (or
:class:`~deploy_ntt.exceptions.InvalidModeError` for a bad ``--mode``)
and never runs an external command.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from deploy_ntt.core.models import TESTNET_DEFAULTS, DeploymentConfig, TransferMode
from deploy_ntt.exceptions import (
    HelpRequested,
    InvalidModeError,
    MissingArgumentError,
    PayerFileNotFoundError,
    UnknownOptionError,
)

USAGE: str = """
Usage: deploy-ntt [options]

Required:
    --project-name      Name of the NTT project
    --base-token        Base chain token address
    --solana-token      Solana chain token address
    --solana-payer      Path to Solana payer keypair file

Optional:
    --mode              Token transfer mode (burning/locking) [default: burning]
    -h, --help          Show this help message

Example:
    deploy-ntt --project-name my-token-bridge \\
               --base-token 0x1234... \\
               --solana-token TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA \\
               --solana-payer ~/.config/solana/id.json \\
               --mode locking
"""

# Value flags and the config field each one fills, in validation order.
_VALUE_FLAGS: dict[str, str] = {
    "--project-name": "project_name",
    "--base-token": "base_token",
    "--solana-token": "solana_token",
    "--solana-payer": "solana_payer",
}

_HELP_FLAGS: frozenset[str] = frozenset({"-h", "--help"})


def _parse_mode(value: str | None) -> TransferMode:
    """Map the ``--mode`` value onto :class:`TransferMode`."""
    for mode in TransferMode:
        if value == mode.value:
            return mode
    raise InvalidModeError("mode must be either 'burning' or 'locking'")


def parse_args(argv: Sequence[str]) -> DeploymentConfig:
    """Scan *argv* into a validated :class:`DeploymentConfig`.

    Raises
    ------
    HelpRequested
        When ``-h`` / ``--help`` is reached; scanning stops there.
    UnknownOptionError
        For any unrecognised token.
    InvalidModeError
        When ``--mode`` is not ``burning`` or ``locking``.
    MissingArgumentError
        For the first required flag that is absent or empty.
    PayerFileNotFoundError
        When the payer path does not exist.
    """
    values: dict[str, str | None] = {}
    mode: TransferMode = TESTNET_DEFAULTS.default_mode

    tokens = list(argv)
    i = 0
    while i < len(tokens):
        token = tokens[i]
        if token in _HELP_FLAGS:
            raise HelpRequested()
        if token in _VALUE_FLAGS:
            i += 1
            values[_VALUE_FLAGS[token]] = tokens[i] if i < len(tokens) else None
        elif token == "--mode":
            i += 1
            mode = _parse_mode(tokens[i] if i < len(tokens) else None)
        else:
            raise UnknownOptionError(f"Unknown option: {token}")
        i += 1

    for flag, field in _VALUE_FLAGS.items():
        if not values.get(field):
            raise MissingArgumentError(f"Missing required parameter {flag}")

    payer = Path(values["solana_payer"] or "").expanduser()
    if not payer.exists():
        raise PayerFileNotFoundError(
            f"Solana payer file not found: {values['solana_payer']}",
        )

    return DeploymentConfig(
        project_name=values["project_name"] or "",
        base_token=values["base_token"] or "",
        solana_token=values["solana_token"] or "",
        solana_payer=payer.resolve(),
        mode=mode,
    )
