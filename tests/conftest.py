"""Shared pytest fixtures and configuration for the deploy-ntt test suite.

Guidelines
----------
* No network access and no real ``ntt`` / ``solana`` tooling in any test.
* External commands are replaced by :class:`RecordingRunner` at the
  ``CommandRunner`` boundary.
* Filesystem effects happen under ``tmp_path`` only.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from pathlib import Path

import pytest

from deploy_ntt.exceptions import CommandFailedError

AUTHORITY_ADDRESS = "8Dq8cqZZP1P8xCtnJfkqpN7H2QJ8X4F6GtYkRGmtVL2M"
KEYPAIR_NAME = "NttWgq7kUxnL4a2hD9JcYzrM3fPbT5sV8eKQw1yXoRpE.json"
DEPLOYMENT_JSON = json.dumps({"network": "Testnet", "chains": {"Base": {}, "Solana": {}}})


class RecordingRunner:
    """Fake ``CommandRunner`` that records calls and mimics tool side effects.

    * ``ntt new <name>`` creates the project directory.
    * ``solana-keygen grind`` writes a program keypair file.
    * ``ntt push`` writes ``deployment.json``.
    * ``ntt solana token-authority`` returns colored address output.
    """

    def __init__(
        self,
        *,
        fail_on: tuple[str, ...] | None = None,
        keypair_names: Sequence[str] = (KEYPAIR_NAME,),
        authority_output: str = f"{AUTHORITY_ADDRESS}\x1b[0m\n",
    ) -> None:
        self.calls: list[tuple[list[str], Path]] = []
        self.fail_on = fail_on
        self.keypair_names = tuple(keypair_names)
        self.authority_output = authority_output

    @property
    def commands(self) -> list[list[str]]:
        return [args for args, _ in self.calls]

    def _record(self, args: Sequence[str], cwd: Path) -> list[str]:
        command = list(args)
        self.calls.append((command, cwd))
        if self.fail_on is not None and tuple(command[: len(self.fail_on)]) == self.fail_on:
            raise CommandFailedError(command, 1)
        return command

    def run(self, args: Sequence[str], *, cwd: Path) -> None:
        command = self._record(args, cwd)
        if command[:2] == ["ntt", "new"]:
            (cwd / command[2]).mkdir(parents=True)
        elif command[:2] == ["solana-keygen", "grind"]:
            for name in self.keypair_names:
                (cwd / name).write_text("[1, 2, 3]", encoding="utf-8")
        elif command[:2] == ["ntt", "push"]:
            (cwd / "deployment.json").write_text(DEPLOYMENT_JSON, encoding="utf-8")

    def capture(self, args: Sequence[str], *, cwd: Path) -> str:
        self._record(args, cwd)
        return self.authority_output


@pytest.fixture()
def payer_file(tmp_path: Path) -> Path:
    payer = tmp_path / "payer.json"
    payer.write_text("[0, 0, 0]", encoding="utf-8")
    return payer


@pytest.fixture()
def runner() -> RecordingRunner:
    return RecordingRunner()


@pytest.fixture()
def make_runner() -> type[RecordingRunner]:
    """Return the runner class for tests that need custom behaviour."""
    return RecordingRunner
