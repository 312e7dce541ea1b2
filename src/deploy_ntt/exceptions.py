"""Custom exception hierarchy for deploy-ntt.

All exceptions that cross layer boundaries must inherit from
:class:`DeployNttError`.  Raw ``subprocess`` / ``OSError`` failures must
NEVER propagate beyond the infrastructure layer, they must be caught
and re-raised as a typed subclass defined here.

Hierarchy
---------
DeployNttError
├── UsageError
│   ├── HelpRequested
│   ├── UnknownOptionError
│   └── MissingArgumentError
├── InvalidModeError
├── PayerFileNotFoundError
├── EnvironmentError
│   └── MissingToolsError
├── KeypairDiscoveryError
│   ├── KeypairNotFoundError
│   └── AmbiguousKeypairError
├── CommandFailedError
├── AuthorityParseError
└── DeploymentDescriptorError
"""

from __future__ import annotations

from collections.abc import Sequence


class DeployNttError(Exception):
    """Base exception for all deploy-ntt errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Argument parsing ------------------------------------------------------

class UsageError(DeployNttError):
    """Raised when the command line cannot be turned into a configuration.

    The CLI error boundary prints the usage text after the message.
    """


class HelpRequested(UsageError):
    """Raised when ``-h`` / ``--help`` is encountered."""

    def __init__(self) -> None:
        super().__init__("Help requested.")


class UnknownOptionError(UsageError):
    """Raised for a flag the parser does not recognise."""


class MissingArgumentError(UsageError):
    """Raised when a required flag is absent or has an empty value."""


class InvalidModeError(DeployNttError):
    """Raised when ``--mode`` is neither ``burning`` nor ``locking``.

    Reported without the usage text.
    """


class PayerFileNotFoundError(DeployNttError):
    """Raised when the Solana payer keypair path does not exist."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(DeployNttError):
    """Raised when a required runtime dependency is not available."""


class MissingToolsError(EnvironmentError):
    """Raised when one or more required executables are not on PATH."""

    def __init__(
        self,
        missing: Sequence[str],
        *,
        hint: str | None = None,
    ) -> None:
        super().__init__(
            f"Missing required tools: {', '.join(missing)}",
            hint=hint,
        )
        self.missing: tuple[str, ...] = tuple(missing)


# --- Program keypair discovery ---------------------------------------------

class KeypairDiscoveryError(DeployNttError):
    """Raised when the generated program keypair cannot be identified."""


class KeypairNotFoundError(KeypairDiscoveryError):
    """Raised when no file matches the program keypair naming pattern."""


class AmbiguousKeypairError(KeypairDiscoveryError):
    """Raised when several files match the program keypair naming pattern."""


# --- Delegated execution ---------------------------------------------------

class CommandFailedError(DeployNttError):
    """Raised when an external command exits with a non-zero status."""

    def __init__(
        self,
        command: Sequence[str],
        returncode: int,
        *,
        output: str | None = None,
    ) -> None:
        super().__init__(
            f"Command failed with exit status {returncode}: {' '.join(command)}",
            hint=output.strip() if output and output.strip() else None,
        )
        self.command: tuple[str, ...] = tuple(command)
        self.returncode: int = returncode


class AuthorityParseError(DeployNttError):
    """Raised when the token-authority address cannot be read from tool output."""


class DeploymentDescriptorError(DeployNttError):
    """Raised when ``deployment.json`` is missing after the push step."""
