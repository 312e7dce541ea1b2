"""Core deployment service: orchestrates the NTT deployment sequence.

This service delegates every side effect to collaborators injected at
construction time:

* a :class:`~deploy_ntt.core.protocols.CommandRunner` for external tools,
* an :class:`~deploy_ntt.core.protocols.AuthorityResolver` for the
  token-authority address,
* a :class:`~deploy_ntt.core.protocols.ProjectWorkspace` for files
  inside the project directory.

Guarantees
----------
* Strictly sequential; the first failure aborts the run.
* No retries and no rollback of steps already applied.
* The process working directory is never changed, the project
  directory is passed explicitly to every collaborator.
* Only :class:`~deploy_ntt.exceptions.DeployNttError` subclasses escape.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from deploy_ntt.core.models import (
    TESTNET_DEFAULTS,
    DeploymentConfig,
    DeploymentResult,
    DeploymentStep,
    NetworkDefaults,
    TransferMode,
)
from deploy_ntt.core.overrides import build_overrides
from deploy_ntt.core.protocols import AuthorityResolver, CommandRunner, ProjectWorkspace
from deploy_ntt.exceptions import AuthorityParseError, DeployNttError

StepCallback = Callable[[DeploymentStep], None]


class DeploymentService:
    """Stateless service that drives the deployment sequence.

    Parameters
    ----------
    runner:
        Executes the external ``ntt`` / ``solana-keygen`` / ``spl-token``
        commands.
    authority:
        Derives the token-authority address from a program keypair.
    workspace:
        Reads and writes files in the project directory.
    defaults:
        Network name and RPC endpoints for this deployment.
    """

    TOTAL_STEPS: int = 8

    def __init__(
        self,
        runner: CommandRunner,
        authority: AuthorityResolver,
        workspace: ProjectWorkspace,
        defaults: NetworkDefaults = TESTNET_DEFAULTS,
    ) -> None:
        self._runner: CommandRunner = runner
        self._authority: AuthorityResolver = authority
        self._workspace: ProjectWorkspace = workspace
        self._defaults: NetworkDefaults = defaults

    # ------------------------------------------------------------------
    # Command construction (pure)
    # ------------------------------------------------------------------

    @staticmethod
    def new_project_command(project_name: str) -> list[str]:
        return ["ntt", "new", project_name]

    @staticmethod
    def init_command(network: str) -> list[str]:
        return ["ntt", "init", network]

    @staticmethod
    def grind_command() -> list[str]:
        """Generate one keypair whose address starts with ``ntt``."""
        return ["solana-keygen", "grind", "--starts-with", "ntt:1", "--ignore-case"]

    @staticmethod
    def authorize_command(solana_token: str, authority: str) -> list[str]:
        return ["spl-token", "authorize", solana_token, "mint", authority]

    @staticmethod
    def add_solana_command(config: DeploymentConfig) -> list[str]:
        return [
            "ntt", "add-chain", "Solana",
            "--token", config.solana_token,
            "--mode", config.mode.value,
            "--latest",
            "--payer", str(config.solana_payer),
        ]

    @staticmethod
    def add_base_command(config: DeploymentConfig) -> list[str]:
        return [
            "ntt", "add-chain", "Base",
            "--token", config.base_token,
            "--mode", config.mode.value,
            "--latest",
            "--skip-verify",
        ]

    @staticmethod
    def push_command(solana_payer: Path) -> list[str]:
        return ["ntt", "push", "--yes", "--payer", str(solana_payer)]

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def deploy(
        self,
        config: DeploymentConfig,
        base_dir: Path,
        *,
        step_callback: StepCallback | None = None,
    ) -> DeploymentResult:
        """Run the full deployment for *config*.

        Parameters
        ----------
        config:
            Validated deployment configuration.
        base_dir:
            Directory in which ``ntt new`` creates the project.
        step_callback:
            Optional callable notified before each step starts.

        Returns
        -------
        DeploymentResult
            Project location, authority details and the raw
            ``deployment.json`` contents.

        Raises
        ------
        DeployNttError
            For any failed step.  Earlier steps are not undone.
        """
        project_dir = base_dir / config.project_name
        notify = self._notifier(step_callback)

        notify(1, f"Creating new NTT project: {config.project_name}")
        self._runner.run(self.new_project_command(config.project_name), cwd=base_dir)

        notify(2, f"Initializing project for {self._defaults.network}")
        self._runner.run(self.init_command(self._defaults.network), cwd=project_dir)

        notify(3, "Writing RPC overrides")
        self._workspace.write_overrides(project_dir, build_overrides(self._defaults))

        program_keypair: Path | None = None
        token_authority: str | None = None
        if config.mode is TransferMode.BURNING:
            notify(4, "Generating program keypair and transferring mint authority")
            program_keypair, token_authority = self._prepare_burning(config, project_dir)
        else:
            notify(4, "Locking mode: mint authority stays with the current minter")

        notify(5, "Adding Solana chain")
        self._runner.run(self.add_solana_command(config), cwd=project_dir)

        notify(6, "Adding Base chain")
        self._runner.run(self.add_base_command(config), cwd=project_dir)

        notify(7, "Pushing configuration")
        self._runner.run(self.push_command(config.solana_payer), cwd=project_dir)

        notify(8, "Reading deployment.json")
        descriptor = self._workspace.read_deployment(project_dir)

        return DeploymentResult(
            project_dir=project_dir,
            program_keypair=program_keypair,
            token_authority=token_authority,
            descriptor=descriptor,
        )

    # ------------------------------------------------------------------
    # Burning-mode preparation
    # ------------------------------------------------------------------

    def _prepare_burning(
        self,
        config: DeploymentConfig,
        project_dir: Path,
    ) -> tuple[Path, str]:
        """Hand the Solana mint authority to the NTT program."""
        self._runner.run(self.grind_command(), cwd=project_dir)
        program_keypair = self._workspace.locate_program_keypair(project_dir)

        token_authority = self._resolve_authority(program_keypair, project_dir)

        self._runner.run(
            self.authorize_command(config.solana_token, token_authority),
            cwd=project_dir,
        )
        return program_keypair, token_authority

    def _resolve_authority(self, program_keypair: Path, project_dir: Path) -> str:
        """Call the resolver and ensure only our exceptions escape."""
        try:
            return self._authority.resolve(program_keypair, cwd=project_dir)
        except DeployNttError:
            # Already one of ours, let it propagate unchanged.
            raise
        except Exception as exc:
            raise AuthorityParseError(
                f"Unexpected token-authority resolver error: {exc}",
            ) from exc

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _notifier(self, step_callback: StepCallback | None) -> Callable[[int, str], None]:
        total = self.TOTAL_STEPS

        def notify(index: int, description: str) -> None:
            if step_callback is not None:
                step_callback(DeploymentStep(index=index, total=total, description=description))

        return notify
