"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of optional UI
dependencies so bootstrap paths (``--help``, usage errors) remain
functional even when Rich is not installed.
"""

from __future__ import annotations

import sys
from typing import Any

from deploy_ntt.exceptions import EnvironmentError


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console() -> Any:
	"""Create a Rich console instance targeting stderr."""
	console_class = _load_rich_console_class()
	return console_class(stderr=True)


def escape(text: object) -> str:
	"""Escape Rich markup in *text* so brackets print literally.

	The plain fallback does not interpret markup, so *text* is returned
	unchanged when Rich is not installed.
	"""
	value = str(text)
	try:
		from rich.markup import escape as rich_escape
	except ModuleNotFoundError:
		return value
	return rich_escape(value)


def write_stdout(text: str) -> None:
	"""Write *text* verbatim to stdout, ending with a newline."""
	sys.stdout.write(text if text.endswith("\n") else text + "\n")
	sys.stdout.flush()


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def print(self, *objects: object) -> None:
		"""Render with Rich when available, else plain stderr print."""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			print(*objects, file=sys.stderr)
			return
		rich_console.print(*objects)


console = _ConsoleProxy()
