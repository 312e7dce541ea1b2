"""``ntt`` backed implementation of :class:`~deploy_ntt.core.protocols.AuthorityResolver`.

``ntt solana token-authority <keypair>`` prints the program's token
authority address as free-form, possibly colored, text.  Parsing that
text is confined to :func:`extract_authority_address` so the strategy
can be hardened without touching the deployment sequence.
"""

from __future__ import annotations

import re
from pathlib import Path

from deploy_ntt.core.protocols import CommandRunner
from deploy_ntt.exceptions import AuthorityParseError

# CSI sequences such as the trailing reset ``ESC[0m`` of colored output.
_ANSI_ESCAPE = re.compile(r"\x1b\[[0-?]*[ -/]*[@-~]")

# Solana addresses are 32-byte keys, 32 to 44 base58 characters.
_BASE58_ADDRESS = re.compile(r"^[1-9A-HJ-NP-Za-km-z]{32,44}$")


def extract_authority_address(output: str) -> str:
    """Recover the authority address from the tool's standard output.

    Escape sequences are removed and the last non-empty line is taken.

    Raises
    ------
    AuthorityParseError
        If that line is not a base58 Solana address.
    """
    cleaned = _ANSI_ESCAPE.sub("", output)
    lines = [line.strip() for line in cleaned.splitlines() if line.strip()]
    if not lines:
        raise AuthorityParseError(
            "ntt solana token-authority produced no output.",
        )

    candidate = lines[-1]
    if not _BASE58_ADDRESS.match(candidate):
        raise AuthorityParseError(
            f"Unexpected token-authority output: {candidate!r}",
            hint="Check that the installed ntt CLI version is supported.",
        )
    return candidate


class NttTokenAuthorityResolver:
    """Concrete :class:`AuthorityResolver` that shells out to the ``ntt`` CLI.

    This class satisfies the :class:`~deploy_ntt.core.protocols.AuthorityResolver`
    protocol structurally, no explicit inheritance required.
    """

    def __init__(self, runner: CommandRunner) -> None:
        self._runner: CommandRunner = runner

    @staticmethod
    def build_command(program_keypair: Path) -> list[str]:
        return ["ntt", "solana", "token-authority", str(program_keypair)]

    def resolve(self, program_keypair: Path, *, cwd: Path) -> str:
        """Return the token-authority address for *program_keypair*."""
        output = self._runner.capture(self.build_command(program_keypair), cwd=cwd)
        return extract_authority_address(output)
