"""Rich-based step display driven by deployment step callbacks.

This module bridges :class:`~deploy_ntt.core.deployment_service.DeploymentService`
step notifications with console output.  It is used by the CLI layer;
the core layer only emits :class:`~deploy_ntt.core.models.DeploymentStep`
values.

Design
------
* :class:`StepReporter` is the callback passed to the service.
* The external tools inherit the terminal, so no live widget (spinner,
  progress bar) is kept on screen between steps; each step is a single
  heading line.
* No ``print()``, the console proxy handles all rendering.
"""

from __future__ import annotations

from deploy_ntt.cli.console import console, escape
from deploy_ntt.core.models import DeploymentStep


class StepReporter:
    """Callable step-callback adapter for the console.

    Usage::

        service.deploy(config, base_dir, step_callback=StepReporter())
    """

    def __call__(self, step: DeploymentStep) -> None:
        """Announce *step* before it runs."""
        console.print(
            f"\n[bold cyan][{step.index}/{step.total}][/bold cyan] "
            f"[bold]{escape(step.description)}[/bold]"
        )
