"""Core / service layer: deployment sequencing and pure data transformations.

Rules
-----
* No ``print()`` calls.
* No direct subprocess or filesystem access; side effects go through
  the protocols in :mod:`deploy_ntt.core.protocols`.
* No imports from ``cli`` or ``infra``.
* All functions must be fully typed and deterministic.
"""

from deploy_ntt.core.deployment_service import DeploymentService
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

__all__: list[str] = [
    "TESTNET_DEFAULTS",
    "AuthorityResolver",
    "CommandRunner",
    "DeploymentConfig",
    "DeploymentResult",
    "DeploymentService",
    "DeploymentStep",
    "NetworkDefaults",
    "ProjectWorkspace",
    "TransferMode",
    "build_overrides",
]
