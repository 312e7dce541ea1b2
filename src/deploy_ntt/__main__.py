"""Allow ``python -m deploy_ntt`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m deploy_ntt`` behaves identically to the ``deploy-ntt``
console script.
"""

from __future__ import annotations

from deploy_ntt.cli.app import cli

if __name__ == "__main__":
    cli()
