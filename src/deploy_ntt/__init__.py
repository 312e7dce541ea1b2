"""deploy-ntt: Native Token Transfer bridge deployment orchestrator.

Sequences the Wormhole ``ntt`` CLI, ``solana-keygen`` and ``spl-token``
to stand up a Solana <-> Base bridge, with a strict layered architecture.
"""

from deploy_ntt.version import __version__

__all__: list[str] = ["__version__"]
