"""Tests for project-directory file handling (infra/workspace.py)."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from deploy_ntt.core.models import NetworkDefaults
from deploy_ntt.core.overrides import build_overrides
from deploy_ntt.exceptions import (
    AmbiguousKeypairError,
    DeploymentDescriptorError,
    KeypairNotFoundError,
)
from deploy_ntt.infra.workspace import (
    LocalProjectWorkspace,
    is_program_keypair_name,
    locate_program_keypair,
)


# ---------------------------------------------------------------------------
# Naming pattern
# ---------------------------------------------------------------------------

class TestKeypairName:
    @pytest.mark.parametrize(
        "name",
        ["ntt.json", "nttAbc.json", "NTTabc.JSON", "NtTx9.Json"],
    )
    def test_matches(self, name: str) -> None:
        assert is_program_keypair_name(name)

    @pytest.mark.parametrize(
        "name",
        ["overrides.json", "deployment.json", "nttAbc.txt", "my-ntt.json", "ntt.json.bak"],
    )
    def test_rejects(self, name: str) -> None:
        assert not is_program_keypair_name(name)


# ---------------------------------------------------------------------------
# Discovery policy
# ---------------------------------------------------------------------------

class TestLocateProgramKeypair:
    def test_single_match(self, tmp_path: Path) -> None:
        (tmp_path / "overrides.json").write_text("{}")
        keypair = tmp_path / "NttAbc123.json"
        keypair.write_text("[]")

        assert locate_program_keypair(tmp_path) == keypair

    def test_no_match(self, tmp_path: Path) -> None:
        (tmp_path / "overrides.json").write_text("{}")
        with pytest.raises(KeypairNotFoundError, match="No NTT keypair file found"):
            locate_program_keypair(tmp_path)

    def test_multiple_matches(self, tmp_path: Path) -> None:
        (tmp_path / "nttA.json").write_text("[]")
        (tmp_path / "NTTb.json").write_text("[]")
        with pytest.raises(AmbiguousKeypairError, match="Multiple NTT keypair files") as exc_info:
            locate_program_keypair(tmp_path)
        assert "nttA.json" in str(exc_info.value)
        assert "NTTb.json" in str(exc_info.value)

    def test_directories_are_ignored(self, tmp_path: Path) -> None:
        (tmp_path / "ntt-dir.json").mkdir()
        keypair = tmp_path / "nttKey.json"
        keypair.write_text("[]")
        assert locate_program_keypair(tmp_path) == keypair

    def test_missing_directory(self, tmp_path: Path) -> None:
        with pytest.raises(KeypairNotFoundError):
            locate_program_keypair(tmp_path / "absent")


# ---------------------------------------------------------------------------
# Workspace adapter
# ---------------------------------------------------------------------------

class TestLocalProjectWorkspace:
    def test_write_overrides_exact_shape(self, tmp_path: Path) -> None:
        workspace = LocalProjectWorkspace()
        target = workspace.write_overrides(tmp_path, build_overrides(NetworkDefaults()))

        assert target == tmp_path / "overrides.json"
        assert json.loads(target.read_text()) == {
            "chains": {
                "Base": {"rpc": "https://sepolia.base.org"},
                "Solana": {"rpc": "https://api.devnet.solana.com"},
            }
        }

    def test_write_overrides_uses_two_space_indent(self, tmp_path: Path) -> None:
        workspace = LocalProjectWorkspace()
        target = workspace.write_overrides(tmp_path, build_overrides(NetworkDefaults()))
        lines = target.read_text().splitlines()

        assert lines[0] == "{"
        assert lines[1] == '  "chains": {'
        assert lines[2] == '    "Base": {'
        assert lines[3] == '      "rpc": "https://sepolia.base.org"'

    def test_read_deployment(self, tmp_path: Path) -> None:
        (tmp_path / "deployment.json").write_text('{"network": "Testnet"}')
        assert LocalProjectWorkspace().read_deployment(tmp_path) == '{"network": "Testnet"}'

    def test_read_deployment_missing(self, tmp_path: Path) -> None:
        with pytest.raises(DeploymentDescriptorError, match="not found"):
            LocalProjectWorkspace().read_deployment(tmp_path)

    def test_read_deployment_not_utf8(self, tmp_path: Path) -> None:
        (tmp_path / "deployment.json").write_bytes(b"\xff\xfe\x00garbage")
        with pytest.raises(DeploymentDescriptorError, match="Could not read"):
            LocalProjectWorkspace().read_deployment(tmp_path)

    def test_locate_delegates(self, tmp_path: Path) -> None:
        keypair = tmp_path / "nttOnly.json"
        keypair.write_text("[]")
        assert LocalProjectWorkspace().locate_program_keypair(tmp_path) == keypair
