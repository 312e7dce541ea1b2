"""Pure construction of the ``overrides.json`` payload.

The payload points the ``ntt`` CLI at explicit RPC endpoints for both
chains instead of its public defaults.
"""

from __future__ import annotations

from typing import Any

from deploy_ntt.core.models import NetworkDefaults

OVERRIDES_FILENAME: str = "overrides.json"


def build_overrides(defaults: NetworkDefaults) -> dict[str, Any]:
    """Return ``{"chains": {"Base": {"rpc": ...}, "Solana": {"rpc": ...}}}``."""
    return {
        "chains": {
            "Base": {"rpc": defaults.base_rpc},
            "Solana": {"rpc": defaults.solana_rpc},
        },
    }
