"""Infrastructure layer: external system integration.

This layer wraps all interaction with the external deployment tools,
the operating system, and the filesystem.  Every raw ``subprocess`` or
``OSError`` failure must be caught here and re-raised as a
:class:`~deploy_ntt.exceptions.DeployNttError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from deploy_ntt.infra.ntt_authority import NttTokenAuthorityResolver, extract_authority_address
from deploy_ntt.infra.subprocess_runner import SubprocessCommandRunner
from deploy_ntt.infra.tool_detector import ToolStatus, detect_tools, require_tools
from deploy_ntt.infra.workspace import LocalProjectWorkspace, locate_program_keypair

__all__: list[str] = [
    "LocalProjectWorkspace",
    "NttTokenAuthorityResolver",
    "SubprocessCommandRunner",
    "ToolStatus",
    "detect_tools",
    "extract_authority_address",
    "locate_program_keypair",
    "require_tools",
]
